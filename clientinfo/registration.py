"""
One-line registration of enrichers into a logging setup
"""

import logging
from typing import Optional, Union

from .config import ClientIpConfig, DEFAULT_FORWARD_HEADER
from .enrichers import ClientHeaderEnricher, ClientIpEnricher
from .enrichers.base import ContextAccessor
from .logging import get_logger

logger = get_logger(__name__)

Target = Union[logging.Logger, logging.Handler]


def _attach(enricher: logging.Filter, target: Optional[Target]) -> None:
    if target is not None:
        targets = [target]
    else:
        # Handler filters see records propagated from every named logger
        root = logging.getLogger()
        targets = list(root.handlers) or [root]
    for item in targets:
        item.addFilter(enricher)
        logger.debug(f"Registered {enricher!r} on {item!r}")


def with_client_ip(
    target: Optional[Target] = None,
    forward_header: str = DEFAULT_FORWARD_HEADER,
    context_accessor: Optional[ContextAccessor] = None,
    config: Optional[ClientIpConfig] = None,
) -> ClientIpEnricher:
    """
    Create a ClientIpEnricher and add it to a logger or handler.
    
    Without a target the enricher is added to every handler of the root
    logger, so records propagated from named loggers are enriched too. It
    falls back to the root logger itself when no handler is installed yet.
    An explicit Logger target only enriches records logged on that logger.
    
    Example:
        import logging
        from clientinfo import with_client_ip
        
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(ClientIp)s %(message)s", defaults={"ClientIp": "-"}))
        with_client_ip(handler)
        logging.getLogger().addHandler(handler)
    
    Args:
        target: Logger or Handler (default: the root logger's handlers)
        forward_header: Forwarded header name (default: "X-Forwarded-For")
        context_accessor: Override for the ambient request context lookup
        config: Optional ClientIpConfig
    
    Returns:
        The registered enricher
    """
    enricher = ClientIpEnricher(
        forward_header=forward_header,
        context_accessor=context_accessor,
        config=config,
    )
    _attach(enricher, target)
    return enricher


def with_request_header(
    header_name: str,
    target: Optional[Target] = None,
    property_name: Optional[str] = None,
    context_accessor: Optional[ContextAccessor] = None,
) -> ClientHeaderEnricher:
    """
    Create a ClientHeaderEnricher and add it to a logger or handler.
    
    Example:
        with_request_header("User-Agent", handler)  # adds UserAgent
    """
    enricher = ClientHeaderEnricher(
        header_name,
        property_name=property_name,
        context_accessor=context_accessor,
    )
    _attach(enricher, target)
    return enricher
