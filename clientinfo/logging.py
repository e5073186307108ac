"""
Internal logging for clientinfo.

Enrichers run inside the application's own logging calls, so they must never
write to the application's handlers or raise into them. The library keeps its
own ``clientinfo`` logger for that reason: it carries a NullHandler, never
propagates, and stays silent until the application opts in.

Two ways to see what the enrichers do:
1. configure_logging: attach a handler to the ``clientinfo`` logger
   (resolution details at DEBUG, integration setup at INFO)
2. set_error_handler: receive enrichment failures in your own callback,
   e.g. to forward them to loguru or structlog

Examples:
    import logging
    from clientinfo import configure_logging
    configure_logging(logging.DEBUG)

    from clientinfo import set_error_handler

    def report(name, exc, ctx):
        print(f"{ctx['enricher']} failed during {ctx['stage']}: {exc!r}")

    set_error_handler(report)
"""

import logging
from typing import Optional, Callable, Any

EnrichmentErrorHandler = Callable[[str, Exception, dict], None]

_library_logger = logging.getLogger('clientinfo')
_library_logger.addHandler(logging.NullHandler())
_library_logger.propagate = False

# Handler installed by configure_logging, if any
_configured_handler: Optional[logging.Handler] = None

_error_handler: Optional[EnrichmentErrorHandler] = None


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance for a module.

    Args:
        name: Logger name (usually __name__, a child of ``clientinfo``)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def set_error_handler(handler: Optional[EnrichmentErrorHandler]) -> None:
    """
    Receive enrichment failures in a callback.

    The callback gets the reporting module name, the exception and a dict
    with ``enricher`` (property being added) and ``stage`` (``"context"``
    when the request context lookup failed, ``"resolve"`` when computing
    the value failed).

    Args:
        handler: Callable(logger_name, exception, context_dict) or None to remove it
    """
    global _error_handler
    _error_handler = handler


def configure_logging(
    level: int = logging.INFO,
    handler: Optional[logging.Handler] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Make the ``clientinfo`` logger emit its messages.

    Replaces the NullHandler with ``handler`` (a StreamHandler by default).
    The logger keeps ``propagate = False``: its records never pass through
    the application's handlers and their enrichers.

    Args:
        level: Logging level (DEBUG shows every client IP resolution)
        handler: Custom handler or None for StreamHandler
        format_string: Custom format string or None for default

    Example:
        configure_logging(
            logging.DEBUG,
            handler=logging.FileHandler('clientinfo.log'),
            format_string='%(asctime)s [%(name)s] %(levelname)s: %(message)s'
        )
    """
    global _configured_handler
    _library_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler()

    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    handler.setFormatter(logging.Formatter(format_string))

    _library_logger.addHandler(handler)
    _library_logger.setLevel(level)
    _library_logger.propagate = False
    _configured_handler = handler


def disable_logging() -> None:
    """
    Silence the ``clientinfo`` logger and drop the error callback.

    Resets to default state (NullHandler only).
    """
    global _error_handler, _configured_handler
    _error_handler = None
    _configured_handler = None
    _library_logger.handlers.clear()
    _library_logger.addHandler(logging.NullHandler())
    _library_logger.propagate = False


def log_error(logger_name: str, exception: Exception, **context: Any) -> None:
    """
    Report an enrichment failure without raising.

    Goes to the callback from set_error_handler when one is set, otherwise
    to the ``clientinfo`` logger at DEBUG (silent unless configured).

    Args:
        logger_name: Module reporting the failure
        exception: Exception raised while enriching
        **context: Details such as ``enricher`` and ``stage``

    Example:
        log_error(__name__, exc, enricher="ClientIp", stage="resolve")
    """
    if _error_handler:
        try:
            _error_handler(logger_name, exception, context)
        except Exception:
            _library_logger.debug(
                f"[{logger_name}] Error handler failed. Original error: {exception.__class__.__name__}: {exception}",
                exc_info=False
            )
    else:
        details = " ".join(f"{key}={value}" for key, value in context.items())
        _library_logger.debug(
            f"[{logger_name}] Enrichment failed ({details}): {exception.__class__.__name__}: {exception}",
            exc_info=False
        )


def is_logging_enabled() -> bool:
    """
    Check whether clientinfo reports anything.

    Only looks at what this module installed (configure_logging handler or
    error callback); handlers added to the ``clientinfo`` logger by other
    code, such as a test runner's capture handlers, are not counted.

    Returns:
        True if configure_logging or set_error_handler is active
    """
    return _error_handler is not None or _configured_handler is not None
