"""Reach Results Service: named reach-results tables under the configured results directory.

Invariants:
    - A table name maps to exactly one file: <results_dir>/<table>.jsonl
    - Table names are [A-Za-z0-9_-], 1-64 chars; anything else cannot name a table
    - A missing table is ResultsNotFoundError (404), other IO failures ResultsStoreError
"""

import logging
import re
from collections.abc import Mapping
from pathlib import Path

from aggregatable_reports.core.errors import ResultsNotFoundError
from aggregatable_reports.infrastructure.results_store import (
    ReachResult,
    read_reach_results,
    write_reach_results,
)

logger = logging.getLogger(__name__)

TABLE_NAME_PATTERN = r"^[A-Za-z0-9_-]{1,64}$"
_TABLE_NAME = re.compile(TABLE_NAME_PATTERN)


class ReachResultsService:
    """Reads and writes reach-results tables."""

    def __init__(self, results_dir: str | Path):
        self.results_dir = Path(results_dir)

    def table_path(self, table: str) -> Path:
        if not _TABLE_NAME.match(table):
            raise ResultsNotFoundError(table)
        return self.results_dir / f"{table}.jsonl"

    def save(self, table: str, results: Mapping[int, ReachResult]) -> Path:
        path = self.table_path(table)
        write_reach_results(results, path)
        logger.info(f"Saved reach results table '{table}' ({len(results)} keys)")
        return path

    def load(self, table: str) -> dict[int, ReachResult]:
        path = self.table_path(table)
        if not path.is_file():
            raise ResultsNotFoundError(table)
        return read_reach_results(path)
