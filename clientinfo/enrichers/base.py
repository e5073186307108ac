"""
Base class shared by the request enrichers
"""

import logging
from typing import Any, Callable, MutableMapping, Optional

from ..context import RequestContext, current_request_context
from ..logging import log_error

ContextAccessor = Callable[[], Optional[RequestContext]]


class RequestEnricher(logging.Filter):
    """
    Adds one request-derived property to log events.
    
    Works as a ``logging.Filter`` (attach it to a handler or logger) and as a
    structlog-style processor. Records are never dropped and enrichment
    never raises: on any failure the event is emitted without the property.
    
    Subclasses implement ``resolve(context)``.
    """
    
    def __init__(self, property_name: str, context_accessor: Optional[ContextAccessor] = None):
        super().__init__()
        self.property_name = property_name
        self.context_accessor = context_accessor or current_request_context
    
    def resolve(self, context: RequestContext) -> Optional[str]:
        raise NotImplementedError
    
    def enrich(self, record: logging.LogRecord, context: Optional[RequestContext]) -> None:
        """
        Add the property to ``record`` using an explicit request context.
        
        Args:
            record: Log record to enrich (existing value is overwritten)
            context: Request context, or None when no request is active
        """
        value = self._safe_resolve(context)
        if value is not None:
            setattr(record, self.property_name, value)
    
    def filter(self, record: logging.LogRecord) -> bool:
        self.enrich(record, self._current_context())
        return True
    
    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        """structlog processor entry point"""
        value = self._safe_resolve(self._current_context())
        if value is not None:
            event_dict[self.property_name] = value
        return event_dict
    
    def _current_context(self) -> Optional[RequestContext]:
        try:
            return self.context_accessor()
        except Exception as e:
            log_error(__name__, e, enricher=self.property_name, stage="context")
            return None
    
    def _safe_resolve(self, context: Optional[RequestContext]) -> Optional[str]:
        if context is None:
            return None
        try:
            return self.resolve(context)
        except Exception as e:
            log_error(__name__, e, enricher=self.property_name, stage="resolve")
            return None
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(property_name={self.property_name!r})"
