"""
clientinfo - Client information enrichers for Python logging

Attaches the client IP address (and other request metadata) to every log
event emitted while an HTTP request is being handled.

Core Features (No Optional Dependencies):
- ClientIpEnricher - Forwarded header first, then the connection address
- ClientHeaderEnricher - Any request header as a log property
- Request context - Per-request headers, address and cache in a ContextVar
- Works as a logging.Filter, in dictConfig, or as a structlog processor
- Flexible Logging - Silent by default, supports any logging framework

Optional Features (Require Installation):
- Framework Integrations - FastAPI, aiohttp, Sanic

Usage:
    import logging
    from clientinfo import with_client_ip
    from clientinfo.integrations.fastapi import ClientInfoMiddleware
    
    handler = logging.StreamHandler()
    # Records logged outside a request have no ClientIp; give the format a default
    handler.setFormatter(logging.Formatter("%(ClientIp)s %(message)s", defaults={"ClientIp": "-"}))
    with_client_ip(handler)
    logging.getLogger().addHandler(handler)
    
    app.add_middleware(ClientInfoMiddleware)
"""

from .config import (
    ClientIpConfig,
    ClientHeaderConfig,
    DEFAULT_FORWARD_HEADER,
    CLIENT_IP_PROPERTY,
)

from .context import (
    RequestHeaders,
    RequestCache,
    RequestContext,
    current_request_context,
    set_request_context,
    reset_request_context,
    use_request_context,
)

from .enrichers import (
    RequestEnricher,
    ClientIpEnricher,
    ClientHeaderEnricher,
    canonical_address,
    resolve_client_ip,
)

from .registration import with_client_ip, with_request_header

from .logging import (
    configure_logging,
    set_error_handler,
    disable_logging,
    is_logging_enabled,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ClientIpConfig",
    "ClientHeaderConfig",
    "DEFAULT_FORWARD_HEADER",
    "CLIENT_IP_PROPERTY",
    # Request context
    "RequestHeaders",
    "RequestCache",
    "RequestContext",
    "current_request_context",
    "set_request_context",
    "reset_request_context",
    "use_request_context",
    # Enrichers
    "RequestEnricher",
    "ClientIpEnricher",
    "ClientHeaderEnricher",
    "canonical_address",
    "resolve_client_ip",
    # Registration
    "with_client_ip",
    "with_request_header",
    # Logging
    "configure_logging",
    "set_error_handler",
    "disable_logging",
    "is_logging_enabled",
]
