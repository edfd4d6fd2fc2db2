"""
Reporter - Serialize matching records

This module writes result rows as JSON or CSV to stdout or a file.
"""

import csv
import io
import json
import logging
import sys
from typing import List, Optional, TextIO

from ..core.exceptions import ReportError
from ..core.models import FORMAT_CSV, RESULT_FIELDS, MatchOptions, ResultRow

logger = logging.getLogger(__name__)


class Reporter:
    """Writes result rows as JSON or CSV to stdout or a file."""

    def __init__(self, options: MatchOptions, stream: Optional[TextIO] = None):
        self.options = options
        self.stream = stream

    def render(self, rows: List[ResultRow]) -> str:
        """Serialize rows in the configured format."""
        records = [row.to_dict() for row in rows]

        if self.options.format == FORMAT_CSV:
            buffer = io.StringIO()
            writer = csv.DictWriter(buffer, fieldnames=RESULT_FIELDS, lineterminator="\n")
            if self.options.csv_headers:
                writer.writeheader()
            writer.writerows(records)
            return buffer.getvalue()

        return json.dumps(records, indent=2) + "\n"

    def report(self, rows: List[ResultRow]):
        """Write rows to the configured destination, then the count if requested."""
        data = self.render(rows)
        out = self.stream or sys.stdout

        if self.options.file:
            try:
                with open(self.options.file, "w", encoding="utf-8", newline="") as f:
                    f.write(data)
            except OSError as e:
                raise ReportError(f"Failed to write result to {self.options.file}: {e}") from e
            logger.info(f"Wrote {len(rows)} matching records to {self.options.file}")
        else:
            out.write(data)

        if self.options.show_count:
            out.write(f"Total count: {len(rows)}\n")
        out.flush()
