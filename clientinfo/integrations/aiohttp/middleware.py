"""
aiohttp middleware for clientinfo
"""

from typing import Iterable, Optional

from aiohttp import web

from ...context import reset_request_context, set_request_context
from ...logging import get_logger
from .utils import build_request_context

logger = get_logger(__name__)


def create_client_info_middleware(exclude_paths: Optional[Iterable[str]] = None):
    """
    Create aiohttp middleware that binds the request context for log enrichment.
    
    Example:
        from aiohttp import web
        from clientinfo.integrations.aiohttp import create_client_info_middleware
        
        app = web.Application()
        app.middlewares.append(create_client_info_middleware())
    
    Args:
        exclude_paths: Paths served without a bound request context
    
    Returns:
        aiohttp middleware function
    """
    # set for O(1) lookup
    skip_paths = set(exclude_paths or ())
    
    @web.middleware
    async def client_info_middleware(request, handler):
        """Bind the request context around the handler"""
        if request.path in skip_paths:
            return await handler(request)
        
        token = set_request_context(build_request_context(request))
        try:
            return await handler(request)
        finally:
            reset_request_context(token)
    
    logger.info("Client info middleware configured for aiohttp app")
    return client_info_middleware
