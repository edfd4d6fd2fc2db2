"""
Zone and record set enumeration.

Both listings follow the API's pagination cursors in a loop until the
response is no longer truncated. Each page request carries the cursor
returned by the previous response, so pages are fetched strictly in order.
Termination relies on the API eventually reporting a non-truncated page.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .exceptions import ApiError
from .models import RecordCursor, RecordSet, Zone
from ..utils.validators import normalize_zone_id

logger = logging.getLogger(__name__)


def list_all_zones(dns_client) -> List[Zone]:
    """
    List every hosted zone in the account.

    Args:
        dns_client: Object providing list_hosted_zones(marker)

    Returns:
        Zones in discovery order, unique by normalized id

    Raises:
        ApiError: If a call fails or a response is malformed
    """
    zones: Dict[str, Zone] = {}
    marker: Optional[str] = None
    page = 0

    while True:
        response = dns_client.list_hosted_zones(marker)
        page += 1
        try:
            for raw in response["HostedZones"]:
                zone_id = normalize_zone_id(raw["Id"])
                if zone_id in zones:
                    logger.debug(f"Skipping duplicate hosted zone {zone_id}")
                    continue
                zones[zone_id] = Zone.from_api(raw, zone_id)

            if not response.get("IsTruncated"):
                break
            marker = response["NextMarker"]
        except (KeyError, TypeError) as e:
            raise ApiError(f"Malformed ListHostedZones response: {e}") from e

        logger.debug(f"Hosted zones page {page} truncated, next marker {marker}")

    logger.debug(f"Listed {len(zones)} hosted zones in {page} page(s)")
    return list(zones.values())


def list_record_sets(dns_client, zone: Zone) -> Tuple[RecordSet, ...]:
    """
    List every record set in a hosted zone, in API order.

    Args:
        dns_client: Object providing list_resource_record_sets(zone_id, start)
        zone: The zone to list

    Returns:
        Record sets across all pages, concatenated in response order

    Raises:
        ApiError: If a call fails or a response is malformed
    """
    record_sets: List[RecordSet] = []
    cursor: Optional[RecordCursor] = None

    while True:
        response = dns_client.list_resource_record_sets(zone.id, cursor)
        try:
            record_sets.extend(
                RecordSet.from_api(raw) for raw in response["ResourceRecordSets"]
            )
            if not response.get("IsTruncated"):
                break
            cursor = RecordCursor.from_response(response)
        except (KeyError, TypeError) as e:
            raise ApiError(
                f"Malformed ListResourceRecordSets response for zone {zone.id}: {e}"
            ) from e

        logger.debug(
            f"Record sets for zone {zone.id} truncated, resuming at "
            f"{cursor.name} {cursor.type or ''} {cursor.identifier or ''}".rstrip()
        )

    logger.debug(f"Listed {len(record_sets)} record sets in zone {zone.id}")
    return tuple(record_sets)
