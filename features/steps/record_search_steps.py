"""
Step definitions for Record Finder acceptance tests.
"""

import csv
import io
import json
import shlex
from unittest.mock import patch

import yaml
from behave import given, when, then

from record_finder.cli.main import main
from record_finder.core.exceptions import ApiError
from record_finder.providers.mock_provider import MockDNSProvider


@given("the Record Finder is configured with the mock provider")
def step_impl(context):
    """Start from an empty mock account."""
    context.zones = {}


@given("the account has the following record sets")
def step_impl(context):
    """Build hosted zones from the table, in table order."""
    for row in context.table:
        zone = context.zones.setdefault(
            row["zone_id"],
            {
                "Id": f"/hostedzone/{row['zone_id']}",
                "Name": row["zone_name"],
                "CallerReference": row["zone_id"],
                "ResourceRecordSets": [],
            },
        )

        if row["type"] == "ALIAS":
            record = {
                "Name": row["name"],
                "Type": "A",
                "AliasTarget": {
                    "HostedZoneId": "Z35SXDOTRQ7X7K",
                    "DNSName": row["values"],
                    "EvaluateTargetHealth": False,
                },
            }
        else:
            record = {
                "Name": row["name"],
                "Type": row["type"],
                "TTL": 300,
                "ResourceRecords": [{"Value": v} for v in row["values"].split(",")],
            }
        zone["ResourceRecordSets"].append(record)


@given("the mock provider returns {count:d} item per page")
def step_impl(context, count):
    """Force pagination on both listings."""
    context.page_size = count


@given('listing record sets in zone "{zone_id}" fails')
def step_impl(context, zone_id):
    """Make the API fail for one zone."""
    context.failing_zones.add(zone_id)


def _run_search(context, args):
    config = {
        "default_provider": "mock",
        "dns_providers": {
            "mock": {"zones": list(context.zones.values()), "page_size": context.page_size}
        },
        "logging": {"level": "WARNING"},
    }
    config_file = context.test_data_dir / "config.yaml"
    with open(config_file, "w") as f:
        yaml.dump(config, f)

    original = MockDNSProvider.list_resource_record_sets
    failing_zones = context.failing_zones

    def listing(self, zone_id, start=None):
        if zone_id in failing_zones:
            raise ApiError(f"Access denied to zone {zone_id}", code="AccessDenied")
        return original(self, zone_id, start)

    with patch.object(MockDNSProvider, "list_resource_record_sets", listing):
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            try:
                main(["--config", str(config_file), *args])
            except SystemExit as e:
                context.exit_code = e.code
    context.output = stdout.getvalue()


@when('I search for record "{record}" with options "{options}"')
def step_impl(context, record, options):
    """Run a search with extra command line options."""
    _run_search(context, ["--record", record, *shlex.split(options)])


@when('I search for record "{record}" using regex matching')
def step_impl(context, record):
    """Run a regex search."""
    _run_search(context, ["--record", record, "--match", "regex"])


@when('I search for record "{record}"')
def step_impl(context, record):
    """Run an equality search."""
    _run_search(context, ["--record", record])


@then("the search succeeds")
def step_impl(context):
    """Verify the CLI exited successfully."""
    assert context.exit_code == 0, f"Exit status {context.exit_code}: {context.output}"


@then("the search fails with exit status {code:d}")
def step_impl(context, code):
    """Verify the CLI exit status."""
    assert context.exit_code == code, f"Expected {code}, got {context.exit_code}"
    assert context.output == "", "No partial results should be written"


@then("the result contains {count:d} rows")
def step_impl(context, count):
    """Verify the number of JSON result rows."""
    context.rows = json.loads(context.output)
    assert len(context.rows) == count, f"Expected {count} rows, got {context.rows}"


@then('row {index:d} is "{zone_id}" "{record_type}" "{name}" "{value}"')
def step_impl(context, index, zone_id, record_type, name, value):
    """Verify one result row."""
    row = json.loads(context.output)[index - 1]
    assert row["hostedZoneId"] == zone_id, row
    assert row["recordType"] == record_type, row
    assert row["recordName"] == name, row
    assert row["recordValue"] == value, row


@then("the output has a CSV header")
def step_impl(context):
    """Verify the first CSV line is the header."""
    header = next(csv.reader(io.StringIO(context.output)))
    assert header == [
        "hostedZoneId",
        "hostedZoneName",
        "recordType",
        "recordName",
        "recordValue",
    ], header


@then('the output ends with "{text}"')
def step_impl(context, text):
    """Verify the last output line."""
    assert context.output.rstrip("\n").splitlines()[-1] == text, context.output
