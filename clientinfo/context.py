"""
Request Context Module

Per-request data the enrichers read from: connection address, request
headers and a typed cache that lives as long as the request.

The active context is kept in a ContextVar, so each asyncio task or thread
handling a request sees only its own context.
"""

import contextvars
import ipaddress
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

Address = Union[str, ipaddress.IPv4Address, ipaddress.IPv6Address]
HeaderSource = Union[
    "RequestHeaders",
    Mapping[str, Union[str, Iterable[str]]],
    Iterable[Tuple[str, str]],
]


class RequestHeaders:
    """
    Case-insensitive, multi-valued request headers.

    Each header name maps to zero or more values, kept in the order they
    were received.

    Example:
        >>> headers = RequestHeaders([("X-Forwarded-For", "10.0.0.1"), ("x-forwarded-for", "10.0.0.2")])
        >>> headers.get_all("X-FORWARDED-FOR")
        ['10.0.0.1', '10.0.0.2']
    """

    __slots__ = ("_items",)

    def __init__(self, source: Optional[HeaderSource] = None):
        self._items: List[Tuple[str, str]] = []
        if source is None:
            return
        if isinstance(source, RequestHeaders):
            self._items = list(source._items)
        elif isinstance(source, Mapping):
            for name, value in source.items():
                if isinstance(value, str):
                    self._items.append((name, value))
                else:
                    self._items.extend((name, item) for item in value)
        else:
            self._items = [(name, value) for name, value in source]

    def get_all(self, name: str) -> List[str]:
        """Return every value for ``name`` in received order (empty if absent)"""
        key = name.lower()
        return [value for item_name, value in self._items if item_name.lower() == key]

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the first value for ``name``"""
        values = self.get_all(name)
        return values[0] if values else default

    def items(self) -> List[Tuple[str, str]]:
        return list(self._items)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        key = name.lower()
        return any(item_name.lower() == key for item_name, _ in self._items)

    def __iter__(self) -> Iterator[str]:
        seen = set()
        for name, _ in self._items:
            key = name.lower()
            if key not in seen:
                seen.add(key)
                yield name

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"RequestHeaders({self._items!r})"


@dataclass
class RequestCache:
    """Values resolved once per request and reused by later log events"""
    client_ip: Optional[str] = None
    # lower-cased header name -> resolved value
    headers: Dict[str, Optional[str]] = field(default_factory=dict)


@dataclass
class RequestContext:
    """
    Data associated with one inbound request.

    Args:
        remote_address: Address of the connected peer (string or ipaddress object)
        headers: Request headers (RequestHeaders, mapping or (name, value) pairs)
        cache: Per-request cache, created empty by default

    Example:
        >>> ctx = RequestContext("127.0.0.1", {"X-Forwarded-For": "203.0.113.7"})
        >>> ctx.headers.get("x-forwarded-for")
        '203.0.113.7'
    """
    remote_address: Optional[Address] = None
    headers: RequestHeaders = field(default_factory=RequestHeaders)
    cache: RequestCache = field(default_factory=RequestCache)

    def __post_init__(self):
        if not isinstance(self.headers, RequestHeaders):
            self.headers = RequestHeaders(self.headers)


_current_context: contextvars.ContextVar[Optional[RequestContext]] = contextvars.ContextVar(
    "clientinfo_request_context",
    default=None,
)


def current_request_context() -> Optional[RequestContext]:
    """Return the request context bound to the running task/thread, if any"""
    return _current_context.get()


def set_request_context(context: Optional[RequestContext]) -> contextvars.Token:
    """
    Bind ``context`` as the active request context.

    Returns:
        Token to pass to reset_request_context when the request ends
    """
    return _current_context.set(context)


def reset_request_context(token: contextvars.Token) -> None:
    """Restore the context that was active before set_request_context"""
    _current_context.reset(token)


@contextmanager
def use_request_context(context: Optional[RequestContext]):
    """
    Bind ``context`` for the duration of a ``with`` block.

    Example:
        with use_request_context(RequestContext("10.0.0.1")):
            logger.info("handled")  # carries ClientIp=10.0.0.1
    """
    token = set_request_context(context)
    try:
        yield context
    finally:
        reset_request_context(token)
