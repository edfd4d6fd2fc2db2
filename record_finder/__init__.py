"""
Record Finder - Search every DNS record in an account for a value

Lists every Route53 hosted zone and record set in the account and reports
the records whose value matches a target string or regular expression.
"""

__version__ = "1.0.0"
__author__ = "Record Finder Team"
__description__ = "Find DNS records pointing at a value across all hosted zones"

from .core.record_finder import RecordFinder
from .core.matcher import RecordMatcher, find_matches
from .providers.dns_client import DNSClient

__all__ = [
    "DNSClient",
    "RecordFinder",
    "RecordMatcher",
    "find_matches",
]
