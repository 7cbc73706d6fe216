"""SharedInfo Reader: parses shared_info without touching the original string.

Tests cover:
    - Well-formed shared_info parses into SharedInfo fields
    - Report's shared_info string stays byte-identical after parsing
    - Non-JSON, non-object and wrongly-typed values raise SharedInfoError
"""

import pytest

from aggregatable_reports.core.errors import SharedInfoError
from aggregatable_reports.core.shared_info import parse_shared_info
from tests.report_factory import SHARED_INFO, build_report


def test_parse_shared_info_reads_fields(debug_report):
    info = parse_shared_info(debug_report)
    assert info.report_id == "r-123"
    assert info.reporting_origin == "https://reporter.example"
    assert info.privacy_budget_key == "pbk"
    assert info.scheduled_report_time == "1650000000"
    assert info.source_registration_time == "1649980800"
    assert info.version == "0.1"
    assert info.debug_mode is True


def test_parse_shared_info_leaves_string_untouched(debug_report):
    parse_shared_info(debug_report)
    assert debug_report.shared_info == SHARED_INFO


def test_missing_fields_default():
    info = parse_shared_info(build_report([], shared_info='{"version":"0.1"}'))
    assert info.report_id == ""
    assert info.debug_mode is False


@pytest.mark.parametrize("shared_info", [
    "SI",
    "",
    "[1, 2]",
    '{"debug_mode": "maybe"}',
])
def test_invalid_shared_info_raises(shared_info):
    with pytest.raises(SharedInfoError) as exc_info:
        parse_shared_info(build_report([], shared_info=shared_info))
    assert exc_info.value.code == "SHARED_INFO_INVALID"
