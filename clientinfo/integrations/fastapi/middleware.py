"""
Client info Middleware for FastAPI
"""

from typing import Callable, List, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ...context import reset_request_context, set_request_context
from ...logging import get_logger
from .utils import build_request_context

logger = get_logger(__name__)


class ClientInfoMiddleware(BaseHTTPMiddleware):
    """
    FastAPI middleware that binds the request context for log enrichment.
    
    Example:
        import logging
        from fastapi import FastAPI
        from clientinfo import with_client_ip
        from clientinfo.integrations.fastapi import ClientInfoMiddleware
        
        app = FastAPI()
        app.add_middleware(ClientInfoMiddleware)
        
        handler = logging.StreamHandler()
        with_client_ip(handler)
    """
    
    def __init__(self, app, exclude_paths: Optional[List[str]] = None):
        """
        Initialize middleware
        
        Args:
            exclude_paths: Paths served without a bound request context
        """
        super().__init__(app)
        # set for O(1) lookup
        self.exclude_paths = set(exclude_paths or [])
        logger.info("Client info middleware configured for FastAPI app")
    
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Bind the request context around the downstream handler"""
        if request.url.path in self.exclude_paths:
            return await call_next(request)
        
        token = set_request_context(build_request_context(request))
        try:
            return await call_next(request)
        finally:
            reset_request_context(token)
