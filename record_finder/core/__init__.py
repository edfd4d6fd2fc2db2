"""
Core record finding functionality.

This package contains zone and record set enumeration, aggregation and
matching.
"""

from .exceptions import (
    AggregationTimeoutError,
    ApiError,
    ConfigError,
    RecordFinderError,
    ReportError,
)
from .models import MatchOptions, RecordSet, ResultRow, Zone, ZoneAggregate
from .enumerators import list_all_zones, list_record_sets
from .matcher import RecordMatcher, find_matches
from .record_finder import RecordFinder

__all__ = [
    "AggregationTimeoutError",
    "ApiError",
    "ConfigError",
    "MatchOptions",
    "RecordFinder",
    "RecordFinderError",
    "RecordMatcher",
    "ReportError",
    "RecordSet",
    "ResultRow",
    "Zone",
    "ZoneAggregate",
    "find_matches",
    "list_all_zones",
    "list_record_sets",
]
