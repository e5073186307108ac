"""
Request header enricher
"""

from typing import Optional

from ..config import ClientHeaderConfig
from ..context import RequestContext
from .base import ContextAccessor, RequestEnricher


class ClientHeaderEnricher(RequestEnricher):
    """
    Copies a request header (e.g. ``User-Agent``) onto log records.
    
    The property name defaults to the header name without dashes
    (``User-Agent`` -> ``UserAgent``). Repeated headers are joined with ", ".
    Nothing is added when the request does not carry the header.
    
    Example:
        handler.addFilter(ClientHeaderEnricher("User-Agent"))
    """
    
    def __init__(
        self,
        header_name: Optional[str] = None,
        property_name: Optional[str] = None,
        context_accessor: Optional[ContextAccessor] = None,
        config: Optional[ClientHeaderConfig] = None,
    ):
        if config is None:
            config = ClientHeaderConfig(header_name=header_name, property_name=property_name)
        
        super().__init__(config.resolved_property_name, context_accessor)
        self.config = config
        self.header_name = config.header_name
        self._cache_key = config.header_name.lower()
    
    def resolve(self, context: RequestContext) -> Optional[str]:
        cache = context.cache.headers
        if self._cache_key in cache:
            return cache[self._cache_key]
        
        values = context.headers.get_all(self.header_name)
        value = ", ".join(values) if values else None
        cache[self._cache_key] = value
        return value
