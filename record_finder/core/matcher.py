"""
Record Matcher - Search aggregated record sets for a target value

Walks every zone and record set in enumeration order and emits one result
row per matching candidate value. Matching never modifies the aggregate.
"""

import logging
import re
from typing import List

from .models import (
    ALIAS_RECORD_TYPE,
    MATCH_REGEX,
    AliasTarget,
    MatchOptions,
    RecordSet,
    ResourceRecords,
    ResultRow,
    Zone,
    ZoneAggregate,
)

logger = logging.getLogger(__name__)


class RecordMatcher:
    """Applies the configured match predicate to record values."""

    def __init__(self, options: MatchOptions):
        """Initialize the matcher; regex targets are compiled once."""
        self.options = options
        self._pattern = re.compile(options.record) if options.match == MATCH_REGEX else None

    def matches(self, value: str) -> bool:
        """
        Evaluate one candidate value.

        Regex targets are searched for anywhere in the value unless the
        pattern anchors itself. Equality targets match the value verbatim
        or with a trailing dot appended to the target; the candidate value
        is never stripped of its own trailing dot.
        """
        if self._pattern is not None:
            return self._pattern.search(value) is not None

        record = self.options.record
        return value == f"{record}." or value == record

    def match_record_set(self, zone: Zone, record_set: RecordSet) -> List[ResultRow]:
        """Return the result rows a single record set contributes."""
        value = record_set.value

        if isinstance(value, AliasTarget):
            if self.matches(value.dns_name):
                return [self._row(zone, ALIAS_RECORD_TYPE, record_set.name, value.dns_name)]
            return []

        if isinstance(value, ResourceRecords):
            return [
                self._row(zone, record_set.type, record_set.name, literal)
                for literal in value.values
                if self.matches(literal)
            ]

        logger.info(
            f"No AliasTarget or ResourceRecords found for {record_set.name} "
            f"{record_set.type} in zone {zone.id}"
        )
        return []

    def find_matches(self, aggregate: ZoneAggregate) -> List[ResultRow]:
        """Search every record set of every zone, preserving enumeration order."""
        rows: List[ResultRow] = []
        for zone, record_sets in aggregate:
            for record_set in record_sets:
                rows.extend(self.match_record_set(zone, record_set))

        logger.info(f"Found {len(rows)} matching records")
        return rows

    @staticmethod
    def _row(zone: Zone, record_type: str, record_name: str, record_value: str) -> ResultRow:
        return ResultRow(
            hosted_zone_id=zone.id,
            hosted_zone_name=zone.name,
            record_type=record_type,
            record_name=record_name,
            record_value=record_value,
        )


def find_matches(aggregate: ZoneAggregate, options: MatchOptions) -> List[ResultRow]:
    """Search an aggregate with the given options."""
    return RecordMatcher(options).find_matches(aggregate)
