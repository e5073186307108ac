"""
Configuration Classes for Enrichers

Provides clean, reusable configuration objects for the request enrichers.
"""

from dataclasses import dataclass
from typing import Optional


DEFAULT_FORWARD_HEADER = "X-Forwarded-For"
CLIENT_IP_PROPERTY = "ClientIp"


@dataclass(frozen=True)
class ClientIpConfig:
    """
    Configuration for the client IP enricher.
    
    Args:
        forward_header: Header set by proxies that carries the original client address
        property_name: Name of the property added to log events
        first_forwarded_only: Keep only the first hop of a comma separated
            forwarded chain (``client, proxy1, proxy2``)
        
    Example:
        >>> config = ClientIpConfig(forward_header="X-Real-IP")
        >>> enricher = ClientIpEnricher(config=config)
    """
    forward_header: str = DEFAULT_FORWARD_HEADER
    property_name: str = CLIENT_IP_PROPERTY
    first_forwarded_only: bool = False
    
    def __post_init__(self):
        """Validate configuration"""
        if not self.forward_header or not self.forward_header.strip():
            raise ValueError("forward_header must be a non-empty header name")
        if not self.property_name or not self.property_name.strip():
            raise ValueError("property_name must be a non-empty string")


@dataclass(frozen=True)
class ClientHeaderConfig:
    """
    Configuration for the request header enricher.
    
    Args:
        header_name: Request header to copy onto log events
        property_name: Property name (default: header name without dashes,
            ``User-Agent`` -> ``UserAgent``)
        
    Example:
        >>> config = ClientHeaderConfig(header_name="User-Agent")
        >>> config.resolved_property_name
        'UserAgent'
    """
    header_name: str
    property_name: Optional[str] = None
    
    def __post_init__(self):
        """Validate configuration"""
        if not self.header_name or not self.header_name.strip():
            raise ValueError("header_name must be a non-empty header name")
        if self.property_name is not None and not self.property_name.strip():
            raise ValueError("property_name must be a non-empty string or None")
    
    @property
    def resolved_property_name(self) -> str:
        """Property name used on log events"""
        if self.property_name:
            return self.property_name
        return self.header_name.replace("-", "")
