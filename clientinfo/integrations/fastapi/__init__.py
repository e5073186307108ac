"""
FastAPI / Starlette Integration for clientinfo

Available Middleware:
- ClientInfoMiddleware: Bind the request context for every request

Utilities:
- build_request_context: Convert a Request into a RequestContext

Example:
    from fastapi import FastAPI
    from clientinfo.integrations.fastapi import ClientInfoMiddleware
    
    app = FastAPI()
    app.add_middleware(ClientInfoMiddleware, exclude_paths=["/healthz"])
"""

from .middleware import ClientInfoMiddleware
from .utils import build_request_context

__all__ = [
    "ClientInfoMiddleware",
    "build_request_context",
]
