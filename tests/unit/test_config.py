"""
Tests for configuration classes
"""

import pytest

from clientinfo import ClientHeaderConfig, ClientIpConfig


class TestClientIpConfig:
    """Tests for ClientIpConfig"""
    
    def test_defaults(self):
        config = ClientIpConfig()
        
        assert config.forward_header == "X-Forwarded-For"
        assert config.property_name == "ClientIp"
        assert config.first_forwarded_only is False
    
    @pytest.mark.parametrize("header", ["", "   "])
    def test_empty_forward_header_rejected(self, header):
        with pytest.raises(ValueError, match="forward_header"):
            ClientIpConfig(forward_header=header)
    
    def test_empty_property_name_rejected(self):
        with pytest.raises(ValueError, match="property_name"):
            ClientIpConfig(property_name="")
    
    def test_is_immutable(self):
        config = ClientIpConfig()
        with pytest.raises(AttributeError):
            config.forward_header = "X-Real-IP"


class TestClientHeaderConfig:
    """Tests for ClientHeaderConfig"""
    
    def test_property_name_defaults_to_header_without_dashes(self):
        assert ClientHeaderConfig("User-Agent").resolved_property_name == "UserAgent"
        assert ClientHeaderConfig("X-Request-Id").resolved_property_name == "XRequestId"
    
    def test_explicit_property_name(self):
        config = ClientHeaderConfig("User-Agent", property_name="agent")
        assert config.resolved_property_name == "agent"
    
    @pytest.mark.parametrize("header", ["", " ", None])
    def test_empty_header_name_rejected(self, header):
        with pytest.raises(ValueError, match="header_name"):
            ClientHeaderConfig(header_name=header)
    
    def test_blank_property_name_rejected(self):
        with pytest.raises(ValueError, match="property_name"):
            ClientHeaderConfig("User-Agent", property_name="  ")
