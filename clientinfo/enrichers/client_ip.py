"""
Client IP Enricher

Attaches the originating client address to every log event emitted while a
request is being handled. The forwarded header set by proxies wins over the
socket address; the result is resolved once per request and cached.
"""

import ipaddress
import logging
from typing import Optional

from ..config import ClientIpConfig, DEFAULT_FORWARD_HEADER
from ..context import Address, RequestContext
from ..logging import get_logger
from .base import ContextAccessor, RequestEnricher

logger = get_logger(__name__)


def canonical_address(address: Optional[Address]) -> Optional[str]:
    """
    Convert a connection address to its canonical string form.
    
    IP literals are normalized (``2001:0db8:0000::1`` -> ``2001:db8::1``),
    bracketed IPv6 is unwrapped. Values that are not IP literals (a test
    client's host name, a unix socket path) are kept as stripped text.
    
    Returns:
        Address string or None when there is no address
    """
    if address is None:
        return None
    if isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return str(address)
    
    text = str(address).strip()
    if text.startswith("[") and text.endswith("]"):
        text = text[1:-1]
    if not text:
        return None
    
    try:
        return str(ipaddress.ip_address(text))
    except ValueError:
        return text


def resolve_client_ip(
    context: RequestContext,
    forward_header: str = DEFAULT_FORWARD_HEADER,
    first_forwarded_only: bool = False,
) -> Optional[str]:
    """
    Determine the client IP for a request without touching its cache.
    
    Precedence:
    1. First value of ``forward_header`` (raw, whitespace trimmed, not validated)
    2. Remote connection address in canonical form
    
    Args:
        context: Request context to inspect
        forward_header: Header name to check first (case-insensitive)
        first_forwarded_only: Keep only the part before the first comma
        
    Returns:
        Client IP string or None if neither source has a value
    """
    forwarded = context.headers.get(forward_header)
    if forwarded is not None:
        if first_forwarded_only:
            forwarded = forwarded.split(",")[0]
        forwarded = forwarded.strip()
        if forwarded:
            return forwarded
    
    return canonical_address(context.remote_address)


class ClientIpEnricher(RequestEnricher):
    """
    Adds a ``ClientIp`` property to log records.
    
    Example:
        import logging
        from clientinfo import ClientIpEnricher
        
        handler = logging.StreamHandler()
        handler.addFilter(ClientIpEnricher())
        # defaults= (Python 3.10+) covers records logged outside a request
        handler.setFormatter(logging.Formatter("%(ClientIp)s %(message)s", defaults={"ClientIp": "-"}))
        
        # Or through dictConfig
        "filters": {
            "client_ip": {"()": "clientinfo.ClientIpEnricher", "forward_header": "X-Real-IP"}
        }
    
    Args:
        forward_header: Header carrying the original client address (default: "X-Forwarded-For")
        context_accessor: Callable returning the active RequestContext
            (default: the context bound by the framework integration)
        config: Optional ClientIpConfig; overrides forward_header when given
    """
    
    def __init__(
        self,
        forward_header: str = DEFAULT_FORWARD_HEADER,
        context_accessor: Optional[ContextAccessor] = None,
        config: Optional[ClientIpConfig] = None,
    ):
        if config is None:
            config = ClientIpConfig(forward_header=forward_header)
        
        super().__init__(config.property_name, context_accessor)
        self.config = config
        self.forward_header = config.forward_header
    
    def resolve(self, context: RequestContext) -> Optional[str]:
        """Return the cached client IP, resolving and caching it on first use"""
        cached = context.cache.client_ip
        if cached is not None:
            return cached
        
        client_ip = resolve_client_ip(
            context,
            self.forward_header,
            self.config.first_forwarded_only,
        )
        if client_ip is not None:
            context.cache.client_ip = client_ip
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"Resolved client IP {client_ip} (forward header: {self.forward_header})")
        return client_ip
