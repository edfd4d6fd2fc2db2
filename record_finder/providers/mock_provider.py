"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that serves zones and record sets
from memory, paginated the way Route53 paginates them.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .base_provider import DNSProvider
from ..core.exceptions import ApiError
from ..core.models import RecordCursor
from ..utils.validators import normalize_zone_id

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """
        Initialize mock provider.

        Config keys:
            zones: List of hosted zone mappings (Id, Name, optional
                ResourceRecordSets)
            page_size: Maximum items per page for both listings
        """
        config = config or {}
        self.page_size = int(config.get("page_size", DEFAULT_PAGE_SIZE))
        if self.page_size < 1:
            raise ValueError("page_size must be at least 1")

        self.zones: List[Dict] = []
        self.record_sets: Dict[str, List[Dict]] = {}
        for zone in config.get("zones", []):
            self.add_zone(zone)

        self.calls: List[Tuple] = []
        logger.info(f"Mock provider initialized with {len(self.zones)} zones")

    def add_zone(self, zone: Dict):
        """Add a hosted zone; its id is served path-qualified like Route53 does."""
        zone_id = normalize_zone_id(zone["Id"])
        entry = {k: v for k, v in zone.items() if k != "ResourceRecordSets"}
        entry["Id"] = f"/hostedzone/{zone_id}"
        self.zones.append(entry)
        self.record_sets.setdefault(zone_id, []).extend(
            zone.get("ResourceRecordSets", [])
        )

    def list_hosted_zones(self, marker: Optional[str] = None) -> Dict:
        """List one page of hosted zones; the marker is an opaque offset."""
        self.calls.append(("list_hosted_zones", marker))

        try:
            start = int(marker) if marker else 0
        except ValueError as e:
            raise ApiError(f"Invalid marker: {marker}", code="InvalidInput") from e

        end = start + self.page_size
        response = {
            "HostedZones": [dict(zone) for zone in self.zones[start:end]],
            "IsTruncated": end < len(self.zones),
            "MaxItems": str(self.page_size),
        }
        if marker:
            response["Marker"] = marker
        if response["IsTruncated"]:
            response["NextMarker"] = str(end)
        return response

    def list_resource_record_sets(
        self, zone_id: str, start: Optional[RecordCursor] = None
    ) -> Dict:
        """List one page of record sets, resuming at the start record."""
        self.calls.append(("list_resource_record_sets", zone_id, start))

        if zone_id not in self.record_sets:
            raise ApiError(
                f"No hosted zone found with ID: {zone_id}", code="NoSuchHostedZone"
            )

        records = self.record_sets[zone_id]
        offset = self._find_offset(records, start) if start is not None else 0
        end = offset + self.page_size

        response = {
            "ResourceRecordSets": [dict(record) for record in records[offset:end]],
            "IsTruncated": end < len(records),
            "MaxItems": str(self.page_size),
        }
        if response["IsTruncated"]:
            following = records[end]
            response["NextRecordName"] = following["Name"]
            response["NextRecordType"] = following["Type"]
            if following.get("SetIdentifier"):
                response["NextRecordIdentifier"] = following["SetIdentifier"]
        return response

    @staticmethod
    def _find_offset(records: List[Dict], start: RecordCursor) -> int:
        for index, record in enumerate(records):
            if (
                record["Name"] == start.name
                and (start.type is None or record["Type"] == start.type)
                and (start.identifier is None or record.get("SetIdentifier") == start.identifier)
            ):
                return index
        raise ApiError(
            f"Start record {start.name} {start.type} not found", code="InvalidInput"
        )
