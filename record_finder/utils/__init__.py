"""
Utility functions and helpers.

This package contains input normalization and validation helpers.
"""

from .validators import build_match_options, normalize_zone_id

__all__ = ["build_match_options", "normalize_zone_id"]
