"""
Behave environment configuration for Record Finder acceptance tests.
"""

import logging
import shutil
import tempfile
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.base_dir = Path(__file__).parent.parent
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.test_data_dir = Path(tempfile.mkdtemp(prefix="record_finder_"))
    context.zones = {}
    context.page_size = 100
    context.failing_zones = set()
    context.exit_code = None
    context.output = ""

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    try:
        shutil.rmtree(context.test_data_dir)
    except OSError as e:
        logger.warning(f"Failed to cleanup test data: {e}")

    logger.info(f"Completed scenario: {scenario.name}")
