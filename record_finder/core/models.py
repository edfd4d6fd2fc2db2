"""
Data model for hosted zones, record sets and search results.

All types are immutable. Record set values are a tagged variant: a record
set either aliases another DNS name, carries literal resource record
values, or (rarely) has neither.
"""

import dataclasses as dc
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

MATCH_EQUALITY = "equality"
MATCH_REGEX = "regex"
MATCH_MODES = (MATCH_EQUALITY, MATCH_REGEX)

FORMAT_JSON = "json"
FORMAT_CSV = "csv"

# Result rows for alias targets report this in place of the record type
ALIAS_RECORD_TYPE = "Alias"


@dc.dataclass(frozen=True)
class Zone:
    """A hosted zone descriptor with a bare (normalized) id."""

    id: str
    name: str
    private: bool = False
    record_set_count: Optional[int] = None

    @classmethod
    def from_api(cls, raw: Dict, zone_id: str) -> "Zone":
        """Build a zone from a ListHostedZones entry and its normalized id."""
        config = raw.get("Config") or {}
        return cls(
            id=zone_id,
            name=raw["Name"],
            private=bool(config.get("PrivateZone", False)),
            record_set_count=raw.get("ResourceRecordSetCount"),
        )


@dc.dataclass(frozen=True)
class AliasTarget:
    dns_name: str
    hosted_zone_id: Optional[str] = None
    evaluate_target_health: bool = False


@dc.dataclass(frozen=True)
class ResourceRecords:
    values: Tuple[str, ...] = ()


@dc.dataclass(frozen=True)
class NoValues:
    """Record set with neither an alias target nor literal values."""


RecordValue = Union[AliasTarget, ResourceRecords, NoValues]


@dc.dataclass(frozen=True)
class RecordSet:
    name: str
    type: str
    value: RecordValue = NoValues()
    set_identifier: Optional[str] = None
    ttl: Optional[int] = None

    @classmethod
    def from_api(cls, raw: Dict) -> "RecordSet":
        """Build a record set from a ListResourceRecordSets entry.

        An alias target wins over literal values when a response carries
        both, so an alias record set never yields more than one candidate.
        """
        value: RecordValue
        if raw.get("AliasTarget"):
            alias = raw["AliasTarget"]
            value = AliasTarget(
                dns_name=alias["DNSName"],
                hosted_zone_id=alias.get("HostedZoneId"),
                evaluate_target_health=bool(alias.get("EvaluateTargetHealth", False)),
            )
        elif raw.get("ResourceRecords") is not None:
            value = ResourceRecords(
                values=tuple(record["Value"] for record in raw["ResourceRecords"])
            )
        else:
            value = NoValues()

        return cls(
            name=raw["Name"],
            type=raw["Type"],
            value=value,
            set_identifier=raw.get("SetIdentifier"),
            ttl=raw.get("TTL"),
        )


@dc.dataclass(frozen=True)
class RecordCursor:
    """Position to resume record set listing from (the next record)."""

    name: str
    type: Optional[str] = None
    identifier: Optional[str] = None

    @classmethod
    def from_response(cls, response: Dict) -> "RecordCursor":
        return cls(
            name=response["NextRecordName"],
            type=response.get("NextRecordType"),
            identifier=response.get("NextRecordIdentifier"),
        )


class ZoneAggregate:
    """Zones in discovery order, each with its fully listed record sets.

    Built once by the aggregator and read-only afterwards.
    """

    def __init__(self, zones: List[Zone], record_sets: Mapping[str, Tuple[RecordSet, ...]]):
        missing = [zone.id for zone in zones if zone.id not in record_sets]
        if missing:
            raise ValueError(f"Record sets missing for zones: {', '.join(missing)}")
        self._zones = tuple(zones)
        self._record_sets = MappingProxyType(
            {zone.id: tuple(record_sets[zone.id]) for zone in zones}
        )

    @property
    def zones(self) -> Tuple[Zone, ...]:
        return self._zones

    def record_sets(self, zone: Zone) -> Tuple[RecordSet, ...]:
        return self._record_sets[zone.id]

    def __iter__(self) -> Iterator[Tuple[Zone, Tuple[RecordSet, ...]]]:
        for zone in self._zones:
            yield zone, self._record_sets[zone.id]

    def __len__(self) -> int:
        return len(self._zones)

    @property
    def record_set_total(self) -> int:
        return sum(len(sets) for sets in self._record_sets.values())


@dc.dataclass(frozen=True)
class ResultRow:
    hosted_zone_id: str
    hosted_zone_name: str
    record_type: str
    record_name: str
    record_value: str

    def to_dict(self) -> Dict[str, str]:
        """Serialized form, keys in report column order."""
        return {
            "hostedZoneId": self.hosted_zone_id,
            "hostedZoneName": self.hosted_zone_name,
            "recordType": self.record_type,
            "recordName": self.record_name,
            "recordValue": self.record_value,
        }


RESULT_FIELDS = (
    "hostedZoneId",
    "hostedZoneName",
    "recordType",
    "recordName",
    "recordValue",
)


@dc.dataclass(frozen=True)
class MatchOptions:
    """Search options. Validated by build_match_options before use."""

    record: str
    match: str = MATCH_EQUALITY
    format: str = FORMAT_JSON
    file: Optional[str] = None
    csv_headers: bool = True
    show_count: bool = False
