"""
Utility functions for Sanic integration
"""

from ...context import RequestContext


def build_request_context(request) -> RequestContext:
    """
    Build a RequestContext from a Sanic request.
    
    ``remote_addr`` is only set when Sanic is configured to trust proxies;
    the raw peer address (``request.ip``) is used otherwise.
    
    Args:
        request: Sanic Request object
        
    Returns:
        RequestContext with the peer address and all headers in received order
    """
    remote = request.remote_addr or request.ip or None
    return RequestContext(remote_address=remote, headers=request.headers.items())
