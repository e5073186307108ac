"""
Sanic Integration for clientinfo

Example:
    from sanic import Sanic
    from clientinfo.integrations.sanic import setup_client_info
    
    app = Sanic("MyApp")
    setup_client_info(app, exclude_paths={"/healthz"})
"""

from .middleware import setup_client_info
from .utils import build_request_context

__all__ = [
    "setup_client_info",
    "build_request_context",
]
