"""
Record Finder - Aggregate every hosted zone with its record sets and search them

This module drives zone enumeration once, then record set enumeration once
per zone, and hands the assembled aggregate to the matcher.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Dict, List, Optional, Tuple

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn

from .enumerators import list_all_zones, list_record_sets
from .exceptions import AggregationTimeoutError
from .matcher import RecordMatcher
from .models import MatchOptions, RecordSet, ResultRow, Zone, ZoneAggregate

logger = logging.getLogger(__name__)


class RecordFinder:
    """Main class that orchestrates enumeration and matching."""

    def __init__(
        self,
        dns_client,
        max_workers: int = 1,
        timeout: Optional[float] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize the record finder.

        Args:
            dns_client: Client providing list_hosted_zones and
                list_resource_record_sets
            max_workers: Zones listed concurrently; 1 lists them one at a time
            timeout: Overall limit in seconds for record set enumeration
            console: Console to render progress on; no progress when None
        """
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.dns_client = dns_client
        self.max_workers = max_workers
        self.timeout = timeout
        self.console = console

    def aggregate(self) -> ZoneAggregate:
        """
        List all zones, then all record sets of each zone.

        Raises:
            ApiError: If any listing fails; no partial aggregate is returned
            AggregationTimeoutError: If the timeout elapses first
        """
        logger.info("Resolving hosted zones...")
        zones = list_all_zones(self.dns_client)
        logger.info(f"Resolved {len(zones)} hosted zones")

        logger.info("Resolving record sets...")
        with self._progress() as progress:
            task = progress.add_task("Listing record sets", total=len(zones))
            if self.max_workers == 1 or len(zones) <= 1:
                record_sets = self._list_sequentially(zones, progress, task)
            else:
                record_sets = self._list_concurrently(zones, progress, task)

        aggregate = ZoneAggregate(zones, record_sets)
        logger.info(f"Record sets resolved: {aggregate.record_set_total} in {len(aggregate)} zones")
        return aggregate

    def find(self, options: MatchOptions) -> List[ResultRow]:
        """Aggregate the account and return the rows matching the options."""
        aggregate = self.aggregate()
        logger.info("Finding matching records...")
        return RecordMatcher(options).find_matches(aggregate)

    def _list_sequentially(
        self, zones: List[Zone], progress: Progress, task
    ) -> Dict[str, Tuple[RecordSet, ...]]:
        deadline = self._deadline()
        record_sets: Dict[str, Tuple[RecordSet, ...]] = {}

        for zone in zones:
            if deadline is not None and time.monotonic() > deadline:
                raise AggregationTimeoutError(
                    f"Timed out after {self.timeout}s listing record sets "
                    f"({len(record_sets)}/{len(zones)} zones done)"
                )
            record_sets[zone.id] = list_record_sets(self.dns_client, zone)
            progress.update(task, advance=1)

        return record_sets

    def _list_concurrently(
        self, zones: List[Zone], progress: Progress, task
    ) -> Dict[str, Tuple[RecordSet, ...]]:
        record_sets: Dict[str, Tuple[RecordSet, ...]] = {}
        executor = ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="record-sets"
        )
        future_to_zone = {
            executor.submit(list_record_sets, self.dns_client, zone): zone
            for zone in zones
        }
        logger.debug(f"Listing record sets of {len(zones)} zones with {self.max_workers} workers")

        try:
            for future in as_completed(future_to_zone, timeout=self.timeout):
                zone = future_to_zone[future]
                # result() re-raises the worker's error, failing the whole run
                record_sets[zone.id] = future.result()
                progress.update(task, advance=1)
        except FuturesTimeoutError as e:
            executor.shutdown(wait=False, cancel_futures=True)
            raise AggregationTimeoutError(
                f"Timed out after {self.timeout}s listing record sets "
                f"({len(record_sets)}/{len(zones)} zones done)"
            ) from e
        except BaseException:
            executor.shutdown(wait=False, cancel_futures=True)
            raise

        executor.shutdown(wait=True)
        return record_sets

    def _deadline(self) -> Optional[float]:
        if self.timeout is None:
            return None
        return time.monotonic() + self.timeout

    def _progress(self) -> Progress:
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total} zones"),
            console=self.console,
            disable=self.console is None,
            transient=True,
        )
