"""
Exceptions raised by the record finder.

Every error the core surfaces derives from RecordFinderError so the CLI
can map it to a message and a non-zero exit status.
"""

from typing import Optional


class RecordFinderError(Exception):
    """Base class for all record finder errors."""


class ApiError(RecordFinderError):
    """A DNS API call failed or returned a malformed response."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class ConfigError(RecordFinderError):
    """Invalid search options or configuration."""


class AggregationTimeoutError(RecordFinderError):
    """Record set enumeration did not finish within the configured timeout."""


class ReportError(RecordFinderError):
    """The result could not be written to its destination."""
