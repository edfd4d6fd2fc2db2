#!/usr/bin/env python3
"""
Record Finder - Command Line Interface

Main entry point for the Record Finder CLI.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from rich.console import Console

from ..core.exceptions import ConfigError, RecordFinderError
from ..core.record_finder import RecordFinder
from ..providers.dns_client import DNSClient
from ..reporting.reporter import Reporter
from ..utils.validators import build_match_options, validate_finder_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="record-finder",
        description="Find DNS records pointing at a value across all Route53 hosted zones",
    )

    parser.add_argument(
        "--record",
        "-r",
        required=True,
        help="Record value to search for. Treated as a regex with --match regex",
    )

    parser.add_argument(
        "--match",
        "-m",
        default="equality",
        help='Set to "regex" to match with a regular expression (default: equality)',
    )

    parser.add_argument(
        "--format",
        default="json",
        help="Output format: json or csv (default: json)",
    )

    parser.add_argument(
        "--no-csv-headers",
        dest="csv_headers",
        action="store_false",
        help="Exclude the CSV header row",
    )

    parser.add_argument(
        "--file",
        "-f",
        help="Write the result to this file instead of stdout",
    )

    parser.add_argument(
        "--show-count",
        action="store_true",
        help="Print the total number of matching records",
    )

    parser.add_argument(
        "--config",
        "-c",
        help="Configuration file path (default: built-in defaults)",
    )

    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        help="Number of zones to list concurrently (default: 1)",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="Overall time limit in seconds for listing record sets",
    )

    parser.add_argument("--profile", help="AWS profile to use")

    parser.add_argument("--region", help="AWS region for the Route53 client")

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.config and not Path(args.config).exists():
        print(f"Error: Configuration file '{args.config}' not found", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config) if args.config else get_default_config()
        apply_overrides(config, args)
        config_logger(config, args.verbose)

        options = build_match_options(
            args.record,
            match=args.match,
            output_format=args.format,
            file=args.file,
            csv_headers=args.csv_headers,
            show_count=args.show_count,
        )

        max_workers, timeout = validate_finder_config(config.get("finder") or {})
        finder = RecordFinder(
            DNSClient(config),
            max_workers=max_workers,
            timeout=timeout,
            console=Console(stderr=True) if sys.stderr.isatty() else None,
        )

        rows = finder.find(options)
        Reporter(options).report(rows)

    except RecordFinderError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    sys.exit(0)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing config file: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    logger.info(f"Configuration loaded from {config_path}")
    return config


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {"route53": {}},
        "default_provider": "route53",
        "finder": {"max_workers": 1, "timeout": None},
        "logging": {"level": "INFO"},
    }


def apply_overrides(config: Dict, args: argparse.Namespace):
    """Apply command line overrides to the loaded configuration."""
    finder_config = config.get("finder") or {}
    config["finder"] = finder_config
    if args.workers is not None:
        if args.workers < 1:
            raise ConfigError("--workers must be at least 1")
        finder_config["max_workers"] = args.workers
    if args.timeout is not None:
        finder_config["timeout"] = args.timeout

    if args.profile or args.region:
        providers = config.get("dns_providers") or {}
        config["dns_providers"] = providers
        route53_config = providers.get("route53") or {}
        providers["route53"] = route53_config
        if args.profile:
            route53_config["profile"] = args.profile
        if args.region:
            route53_config["region"] = args.region


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging") or {}
    log_level = "DEBUG" if verbose else logging_config.get("level", "INFO")
    handlers = [logging.StreamHandler(sys.stderr)]

    log_file = logging_config.get("file")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers, force=True)


if __name__ == "__main__":
    main()
