"""
Command-line interface components.

This package contains the CLI entry point for the record finder.
"""

from .main import main

__all__ = ["main"]
