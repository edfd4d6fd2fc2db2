#!/usr/bin/env python3
"""
Record Finder - Demo Script

This script demonstrates the functionality of the Record Finder
using the mock provider, so no AWS account is needed.
"""

import logging

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from record_finder.core.exceptions import RecordFinderError
from record_finder.core.record_finder import RecordFinder
from record_finder.providers.dns_client import DNSClient
from record_finder.utils.validators import build_match_options

# Initialize rich console
console = Console()


def create_demo_config():
    """Create a demo configuration with two small zones."""
    zones = [
        {
            "Id": "Z0DEMO1",
            "Name": "ib.bigbank.com.",
            "ResourceRecordSets": [
                {"Name": "ib.bigbank.com.", "Type": "NS", "TTL": 172800,
                 "ResourceRecords": [{"Value": "ns-1.awsdns-01.org."}]},
                {"Name": "web1.ib.bigbank.com.", "Type": "A", "TTL": 300,
                 "ResourceRecords": [{"Value": "10.33.1.10"}, {"Value": "10.33.1.11"}]},
                {"Name": "db1.ib.bigbank.com.", "Type": "A", "TTL": 300,
                 "ResourceRecords": [{"Value": "10.33.2.10"}]},
                {"Name": "www.ib.bigbank.com.", "Type": "CNAME", "TTL": 300,
                 "ResourceRecords": [{"Value": "lb.ib.bigbank.com."}]},
            ],
        },
        {
            "Id": "Z0DEMO2",
            "Name": "bigbank.com.",
            "ResourceRecordSets": [
                {"Name": "bigbank.com.", "Type": "A",
                 "AliasTarget": {"HostedZoneId": "Z35SXDOTRQ7X7K",
                                 "DNSName": "lb.ib.bigbank.com.",
                                 "EvaluateTargetHealth": False}},
                {"Name": "mgmt.bigbank.com.", "Type": "A", "TTL": 60,
                 "ResourceRecords": [{"Value": "10.33.1.10"}]},
            ],
        },
    ]
    return {
        "dns_providers": {"mock": {"zones": zones, "page_size": 2}},
        "default_provider": "mock",
    }


def display_demo_header():
    """Display the demo header."""
    console.print(
        Panel.fit(
            "[bold blue]Record Finder - Demo[/bold blue]\n"
            "[cyan]Searching every hosted zone for matching records[/cyan]",
            border_style="blue",
        )
    )
    console.print()


def run_search(finder, record, match="equality"):
    """Run one search and display its result rows."""
    options = build_match_options(record, match=match)
    console.print(f"[bold]Searching for [cyan]{record}[/cyan] ({options.match})[/bold]")

    rows = finder.find(options)
    if not rows:
        console.print("[yellow]No matching records found[/yellow]")
        console.print()
        return

    table = Table(title=f"Matches for {record}")
    table.add_column("Zone ID", style="cyan")
    table.add_column("Zone", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Name", style="magenta")
    table.add_column("Value", style="yellow")

    for row in rows:
        table.add_row(
            row.hosted_zone_id,
            row.hosted_zone_name,
            row.record_type,
            row.record_name,
            row.record_value,
        )

    console.print(table)
    console.print()


def main():
    """Main demo function."""
    logging.basicConfig(level=logging.WARNING)
    display_demo_header()

    try:
        finder = RecordFinder(DNSClient(create_demo_config()), max_workers=2, console=console)

        run_search(finder, "10.33.1.10")
        run_search(finder, "lb.ib.bigbank.com")
        run_search(finder, r"^10\.33\.2\.", match="regex")
        run_search(finder, "192.0.2.1")

        calls = finder.dns_client.provider.calls
        console.print(
            Panel.fit(
                "[bold green]Demo Summary[/bold green]\n"
                f"✓ {len(calls)} paginated API calls served by the mock provider\n"
                "✓ Alias targets and literal values searched\n"
                "✓ No AWS account used",
                border_style="green",
            )
        )

    except RecordFinderError as e:
        console.print(f"[red]Demo failed with error: {e}[/red]")

    console.print()
    console.print("[bold blue]Demo completed![/bold blue]")


if __name__ == "__main__":
    main()
