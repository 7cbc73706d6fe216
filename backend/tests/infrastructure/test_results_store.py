"""Reach Results Store: write/read round trip of the results table.

Tests cover:
    - Writing then reading returns an identical mapping
    - File is JSON Lines sorted by key
    - Keys outside uint64 rejected before writing
    - Missing file and corrupt lines raise ResultsStoreError
"""

import json

import pytest

from aggregatable_reports.core.errors import ResultsStoreError
from aggregatable_reports.infrastructure.results_store import (
    ReachResult,
    UINT64_LIMIT,
    read_reach_results,
    write_reach_results,
)


def test_write_read_round_trip(tmp_path):
    want = {
        0: ReachResult(verification=1, count=2),
        3: ReachResult(verification=4, count=5),
    }
    path = tmp_path / "reach_results"
    write_reach_results(want, path)
    assert read_reach_results(path) == want


def test_file_is_sorted_json_lines(tmp_path):
    path = tmp_path / "out" / "reach_results"
    write_reach_results({
        UINT64_LIMIT - 1: ReachResult(verification=7, count=8),
        2: ReachResult(verification=0, count=1),
    }, path)
    rows = [json.loads(line) for line in path.read_text().splitlines()]
    assert [row["key"] for row in rows] == [2, UINT64_LIMIT - 1]
    assert rows[0] == {"verification": 0, "count": 1, "key": 2}


def test_empty_mapping_round_trip(tmp_path):
    path = tmp_path / "empty"
    write_reach_results({}, path)
    assert read_reach_results(path) == {}


@pytest.mark.parametrize("key", [-1, UINT64_LIMIT])
def test_write_rejects_non_uint64_keys(tmp_path, key):
    path = tmp_path / "reach_results"
    with pytest.raises(ResultsStoreError) as exc_info:
        write_reach_results({key: ReachResult(verification=1, count=1)}, path)
    assert exc_info.value.operation == "write"
    assert not path.exists()


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(ResultsStoreError) as exc_info:
        read_reach_results(tmp_path / "missing")
    assert exc_info.value.operation == "read"


def test_read_corrupt_line_raises(tmp_path):
    path = tmp_path / "reach_results"
    path.write_text('{"key": 1, "verification": 1, "count": 1}\nnot json\n')
    with pytest.raises(ResultsStoreError, match="line 2"):
        read_reach_results(path)
