"""
Utility functions for FastAPI integration
"""

from fastapi import Request

from ...context import RequestContext


def build_request_context(request: Request) -> RequestContext:
    """
    Build a RequestContext from a FastAPI/Starlette request.
    
    Args:
        request: FastAPI Request object
        
    Returns:
        RequestContext with the peer address and all headers in received order
    """
    remote = request.client.host if request.client else None
    return RequestContext(remote_address=remote, headers=request.headers.items())
