"""
Result reporting.

This package serializes matching records to JSON or CSV.
"""

from .reporter import Reporter

__all__ = ["Reporter"]
