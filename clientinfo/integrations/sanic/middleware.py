"""
Sanic middleware setup for clientinfo
"""

from typing import Iterable, Optional

from ...context import reset_request_context, set_request_context
from ...logging import get_logger
from .utils import build_request_context

logger = get_logger(__name__)


def setup_client_info(app, exclude_paths: Optional[Iterable[str]] = None) -> None:
    """
    Bind the request context for every request of a Sanic application.
    
    Example:
        from sanic import Sanic
        from clientinfo.integrations.sanic import setup_client_info
        
        app = Sanic("MyApp")
        setup_client_info(app)
    
    Args:
        app: Sanic application instance
        exclude_paths: Paths served without a bound request context
    """
    # set for O(1) lookup
    skip_paths = set(exclude_paths or ())
    
    @app.middleware("request")
    async def bind_client_info(request):
        """Bind the request context before the handler runs"""
        if request.path in skip_paths:
            return None
        
        request.ctx.client_info_token = set_request_context(build_request_context(request))
        return None
    
    @app.middleware("response")
    async def release_client_info(request, response):
        """Restore the previous context after the response is built"""
        token = getattr(request.ctx, "client_info_token", None)
        if token is not None:
            request.ctx.client_info_token = None
            reset_request_context(token)
        return response
    
    logger.info("Client info configured for Sanic app")
