"""
Log Enrichers

Enrichers add request-derived properties to log events.

Available enrichers:
- ClientIpEnricher: Client address (forwarded header or connection address)
- ClientHeaderEnricher: Value of any request header
"""

from .base import RequestEnricher
from .client_ip import ClientIpEnricher, canonical_address, resolve_client_ip
from .client_header import ClientHeaderEnricher

__all__ = [
    "RequestEnricher",
    "ClientIpEnricher",
    "ClientHeaderEnricher",
    "canonical_address",
    "resolve_client_ip",
]
