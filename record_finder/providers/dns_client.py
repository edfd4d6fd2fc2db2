"""
DNS Client - Unified interface for DNS provider APIs

This module provides a common interface for the supported DNS providers,
currently AWS Route53 and an in-memory mock.
"""

import logging
from typing import Dict, Optional

from .base_provider import DNSProvider
from .mock_provider import MockDNSProvider
from .route53_provider import Route53Provider
from ..core.exceptions import ConfigError
from ..core.models import RecordCursor

logger = logging.getLogger(__name__)

PROVIDERS = {
    "route53": Route53Provider,
    "mock": MockDNSProvider,
}


class DNSClient:
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: Dict, provider: Optional[DNSProvider] = None):
        """Initialize DNS client with configuration or an explicit provider."""
        self.config = config
        self.provider = provider if provider is not None else self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "route53")
        provider_config = self.config.get("dns_providers", {}).get(provider_name) or {}

        provider_class = PROVIDERS.get(provider_name)
        if provider_class is None:
            raise ConfigError(
                f"Unknown provider '{provider_name}', expected one of: "
                f"{', '.join(sorted(PROVIDERS))}"
            )
        logger.debug(f"Using {provider_name} provider")
        return provider_class(provider_config)

    def list_hosted_zones(self, marker: Optional[str] = None) -> Dict:
        """List one page of hosted zones."""
        return self.provider.list_hosted_zones(marker)

    def list_resource_record_sets(
        self, zone_id: str, start: Optional[RecordCursor] = None
    ) -> Dict:
        """List one page of record sets in a zone."""
        return self.provider.list_resource_record_sets(zone_id, start)
