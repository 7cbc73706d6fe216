"""Root conftest: shared report fixtures.

Invariants:
    - Fixtures build reports from browser-shaped JSON (tests/report_factory.py)
    - one_party_report / mpc_report use shared_info "SI" so wire bytes stay short
"""

import os

import pytest

from aggregatable_reports.schemas.report import AggregatableReport
from tests.report_factory import build_report

# Keep test logs readable
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def one_party_report() -> AggregatableReport:
    return build_report(
        [{"payload": "AQ==", "key_id": "k1", "debug_cleartext_payload": ""}],
        shared_info="SI",
    )


@pytest.fixture
def mpc_report() -> AggregatableReport:
    return build_report(
        [
            {"payload": "AQ==", "key_id": "k1", "debug_cleartext_payload": "BAU="},
            {"payload": "AgM=", "key_id": "k2", "debug_cleartext_payload": "Bgc="},
        ],
        shared_info="SI",
    )


@pytest.fixture
def debug_report() -> AggregatableReport:
    return build_report(
        [{"payload": "AQ==", "key_id": "k1", "debug_cleartext_payload": "BAU="}],
        source_debug_key="123",
        trigger_debug_key="456",
    )
