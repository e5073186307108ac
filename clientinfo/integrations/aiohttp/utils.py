"""
Utility functions for aiohttp integration
"""

from ...context import RequestContext


def build_request_context(request) -> RequestContext:
    """
    Build a RequestContext from an aiohttp request.
    
    Args:
        request: aiohttp Request object
        
    Returns:
        RequestContext with the peer address and all headers in received order
    """
    return RequestContext(remote_address=request.remote, headers=request.headers.items())
