"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
Responses use the Route53 list response shapes.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..core.models import RecordCursor


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def list_hosted_zones(self, marker: Optional[str] = None) -> Dict:
        """List one page of hosted zones, starting at marker."""
        pass

    @abstractmethod
    def list_resource_record_sets(
        self, zone_id: str, start: Optional[RecordCursor] = None
    ) -> Dict:
        """List one page of record sets in a zone, starting at start."""
        pass
