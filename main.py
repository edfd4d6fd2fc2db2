#!/usr/bin/env python3
"""
Record Finder - Main Entry Point

This is the main entry point for the Record Finder.
It can be run directly or imported as a module.
"""

from record_finder.cli.main import main

if __name__ == "__main__":
    main()
