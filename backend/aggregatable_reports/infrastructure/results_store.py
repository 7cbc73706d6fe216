"""Reach Results Store: file-backed table of per-key reach results.

Invariants:
    - Keys are uint64 (0 <= key < 2**64), checked before anything is written
    - One JSON object per line: {"key", "verification", "count"}, sorted by key
    - read_reach_results(write_reach_results(r)) == r
    - All OS and parse failures mapped to ResultsStoreError (core/errors.py)
    - Single writer per file; no locking
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ValidationError

from aggregatable_reports.core.errors import ResultsStoreError

logger = logging.getLogger(__name__)

UINT64_LIMIT: int = 2 ** 64


class ReachResult(BaseModel):
    """Reach aggregation result for one key."""
    verification: int
    count: int


class _ReachResultRow(ReachResult):
    key: int


def write_reach_results(
    results: Mapping[int, ReachResult], path: str | Path,
) -> None:
    """Write results to path, replacing any existing file."""
    for key in results:
        if not 0 <= key < UINT64_LIMIT:
            raise ResultsStoreError(f"key {key} is not a uint64", "write")

    path = Path(path)
    lines = [
        _ReachResultRow(key=key, **results[key].model_dump()).model_dump_json()
        for key in sorted(results)
    ]
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as e:
        logger.error(f"Reach results write error: {e}")
        raise ResultsStoreError(str(e), "write") from e
    logger.info(f"Wrote {len(lines)} reach results to {path}")


def read_reach_results(path: str | Path) -> dict[int, ReachResult]:
    """Read results written by write_reach_results."""
    path = Path(path)
    results: dict[int, ReachResult] = {}
    try:
        with path.open(encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                row = _parse_row(line, line_number)
                results[row.key] = ReachResult(
                    verification=row.verification, count=row.count,
                )
    except OSError as e:
        logger.error(f"Reach results read error: {e}")
        raise ResultsStoreError(str(e), "read") from e
    return results


def _parse_row(line: str, line_number: int) -> _ReachResultRow:
    try:
        row = _ReachResultRow.model_validate(json.loads(line))
    except (json.JSONDecodeError, ValidationError) as e:
        raise ResultsStoreError(f"line {line_number}: {e}", "read") from e
    if not 0 <= row.key < UINT64_LIMIT:
        raise ResultsStoreError(f"line {line_number}: key {row.key} is not a uint64", "read")
    return row
