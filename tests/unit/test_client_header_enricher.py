"""
Tests for ClientHeaderEnricher
"""

import pytest

from clientinfo import (
    ClientHeaderConfig,
    ClientHeaderEnricher,
    ClientIpEnricher,
    RequestContext,
    RequestHeaders,
    use_request_context,
)


class TestClientHeaderEnricher:
    """Tests for request header enrichment"""
    
    def test_header_value_added(self, log_capture):
        context = RequestContext("127.0.0.1", {"User-Agent": "Mozilla/5.0"})
        logger, handler = log_capture(ClientHeaderEnricher("User-Agent", context_accessor=lambda: context))
        
        logger.info("msg")
        
        assert handler.last.UserAgent == "Mozilla/5.0"
    
    def test_custom_property_name(self, log_capture):
        context = RequestContext(headers={"X-Request-Id": "abc123"})
        enricher = ClientHeaderEnricher(
            "X-Request-Id",
            property_name="request_id",
            context_accessor=lambda: context,
        )
        logger, handler = log_capture(enricher)
        
        logger.info("msg")
        
        assert handler.last.request_id == "abc123"
    
    def test_config_object(self, log_capture):
        context = RequestContext(headers={"Accept-Language": "en"})
        enricher = ClientHeaderEnricher(
            config=ClientHeaderConfig("Accept-Language"),
            context_accessor=lambda: context,
        )
        logger, handler = log_capture(enricher)
        
        logger.info("msg")
        
        assert handler.last.AcceptLanguage == "en"
    
    def test_repeated_header_values_are_joined(self, log_capture):
        context = RequestContext(headers=[("Via", "1.1 proxy-a"), ("Via", "1.1 proxy-b")])
        logger, handler = log_capture(ClientHeaderEnricher("Via", context_accessor=lambda: context))
        
        logger.info("msg")
        
        assert handler.last.Via == "1.1 proxy-a, 1.1 proxy-b"
    
    def test_missing_header_adds_nothing(self, log_capture):
        context = RequestContext("127.0.0.1")
        logger, handler = log_capture(ClientHeaderEnricher("User-Agent", context_accessor=lambda: context))
        
        logger.info("msg")
        
        assert not hasattr(handler.last, "UserAgent")
        assert context.cache.headers == {"user-agent": None}
    
    def test_value_cached_per_request(self, log_capture):
        context = RequestContext(headers={"User-Agent": "first"})
        logger, handler = log_capture(ClientHeaderEnricher("User-Agent", context_accessor=lambda: context))
        
        logger.info("one")
        context.headers = RequestHeaders({"User-Agent": "second"})
        logger.info("two")
        
        assert [r.UserAgent for r in handler.records] == ["first", "first"]
    
    def test_combined_with_client_ip(self, log_capture):
        """Test several enrichers on the same handler"""
        logger, handler = log_capture(ClientIpEnricher(), ClientHeaderEnricher("User-Agent"))
        
        with use_request_context(RequestContext("192.0.2.1", {"User-Agent": "curl/8.5.0"})):
            logger.info("msg")
        
        assert handler.last.ClientIp == "192.0.2.1"
        assert handler.last.UserAgent == "curl/8.5.0"
    
    def test_header_name_required(self):
        with pytest.raises(ValueError):
            ClientHeaderEnricher()
    
    def test_structlog_processor(self):
        context = RequestContext(headers={"User-Agent": "httpx"})
        enricher = ClientHeaderEnricher("User-Agent", context_accessor=lambda: context)
        
        assert enricher(None, "info", {"event": "x"}) == {"event": "x", "UserAgent": "httpx"}
