"""
Framework Integrations for clientinfo

Bind a RequestContext for every request so enrichers can find it.

Available integrations:
- FastAPI / Starlette (clientinfo.integrations.fastapi)
- Sanic (clientinfo.integrations.sanic)
- aiohttp (clientinfo.integrations.aiohttp)
"""

__all__ = []
