"""
Validators - Input normalization for search options and zone identifiers

This module turns raw command line input into validated MatchOptions and
normalizes hosted zone ids returned by the DNS API.
"""

import logging
import re
from typing import Dict, Optional, Tuple

from ..core.exceptions import ConfigError
from ..core.models import (
    FORMAT_CSV,
    FORMAT_JSON,
    MATCH_EQUALITY,
    MATCH_REGEX,
    MatchOptions,
)

logger = logging.getLogger(__name__)


def normalize_zone_id(zone_id: str) -> str:
    """
    Strip any path-style prefix from a hosted zone id.

    Args:
        zone_id: Zone id as returned by the API, e.g. "/hostedzone/Z123"

    Returns:
        The bare id token, e.g. "Z123". A bare id is returned unchanged.
    """
    return zone_id.split("/")[-1]


def normalize_match_mode(match: Optional[str]) -> str:
    """Anything other than "regex" (any case) means equality matching."""
    if match and match.lower() == MATCH_REGEX:
        return MATCH_REGEX
    return MATCH_EQUALITY


def normalize_format(output_format: Optional[str]) -> str:
    """Anything other than "csv" (any case) means JSON output."""
    if output_format and output_format.lower() == FORMAT_CSV:
        return FORMAT_CSV
    return FORMAT_JSON


def validate_pattern(pattern: str) -> bool:
    """
    Check that a regex search target compiles.

    Args:
        pattern: The regular expression to check

    Returns:
        True if valid, False otherwise
    """
    try:
        re.compile(pattern)
        return True
    except re.error as e:
        logger.warning(f"Invalid regular expression '{pattern}': {e}")
        return False


def build_match_options(
    record: Optional[str],
    match: Optional[str] = None,
    output_format: Optional[str] = None,
    file: Optional[str] = None,
    csv_headers: bool = True,
    show_count: bool = False,
) -> MatchOptions:
    """
    Build validated search options from raw input.

    Raises:
        ConfigError: If the record is missing or the regex does not compile
    """
    if not record:
        raise ConfigError("No record supplied")

    match = normalize_match_mode(match)
    if match == MATCH_REGEX and not validate_pattern(record):
        raise ConfigError(f"Record '{record}' is not a valid regular expression")

    return MatchOptions(
        record=record,
        match=match,
        format=normalize_format(output_format),
        file=file or None,
        csv_headers=csv_headers,
        show_count=show_count,
    )


def validate_finder_config(finder_config: Dict) -> Tuple[int, Optional[float]]:
    """
    Validate the worker count and timeout of the finder configuration.

    Args:
        finder_config: The "finder" section of the configuration

    Returns:
        (max_workers, timeout) with timeout in seconds or None

    Raises:
        ConfigError: If max_workers is not an integer of at least 1, or
            timeout is not a positive number
    """
    max_workers = finder_config.get("max_workers")
    if max_workers is None:
        max_workers = 1
    elif isinstance(max_workers, bool) or not isinstance(max_workers, int):
        try:
            max_workers = int(str(max_workers))
        except ValueError as e:
            raise ConfigError(f"finder.max_workers must be an integer, got {max_workers!r}") from e
    if max_workers < 1:
        raise ConfigError(f"finder.max_workers must be at least 1, got {max_workers}")

    timeout = finder_config.get("timeout")
    if timeout is not None:
        if isinstance(timeout, bool):
            raise ConfigError(f"finder.timeout must be a number of seconds, got {timeout!r}")
        try:
            timeout = float(timeout)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"finder.timeout must be a number of seconds, got {timeout!r}") from e
        if timeout <= 0:
            raise ConfigError(f"finder.timeout must be positive, got {timeout}")

    return max_workers, timeout
