"""
aiohttp Integration for clientinfo

Example:
    from aiohttp import web
    from clientinfo.integrations.aiohttp import create_client_info_middleware
    
    app = web.Application(middlewares=[create_client_info_middleware()])
"""

from .middleware import create_client_info_middleware
from .utils import build_request_context

__all__ = [
    "create_client_info_middleware",
    "build_request_context",
]
