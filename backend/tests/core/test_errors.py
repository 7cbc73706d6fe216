"""Error Hierarchy: codes, categories, HTTP status and REST envelope.

Tests:
    - Every error subclasses ReportError
    - Report errors are 400, encode and storage errors are 500
    - Long offending input is truncated in the message but kept on the exception
"""

from aggregatable_reports.core.errors import (
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidPayloadCountError,
    MAX_ECHOED_INPUT,
    PayloadDecodeError,
    RecordEncodeError,
    ReportError,
    ResultsStoreError,
    SharedInfoError,
)


def test_report_errors_are_400():
    for error in (
        InvalidPayloadCountError(3),
        PayloadDecodeError("x", "bad"),
        SharedInfoError("bad"),
    ):
        assert isinstance(error, ReportError)
        assert error.http_status == 400
        assert error.category is ErrorCategory.VALIDATION


def test_defects_are_critical_500():
    for error in (RecordEncodeError("boom"), ResultsStoreError("disk", "write")):
        assert error.http_status == 500
        assert error.severity is ErrorSeverity.CRITICAL


def test_decode_error_truncates_message_but_keeps_raw():
    raw = "A" * (MAX_ECHOED_INPUT * 2)
    error = PayloadDecodeError(raw, "bad padding")
    assert error.raw == raw
    assert raw not in error.message
    assert "bad padding" in error.message


def test_to_response_envelope():
    error = InvalidPayloadCountError(0, ErrorContext(report_id="r-1"))
    body = error.to_response()["error"]
    assert body["code"] == "INVALID_PAYLOAD_COUNT"
    assert body["message"] == "expected one or two payloads, got 0"
    assert body["category"] == "validation"
    assert body["severity"] == "error"
    assert body["context"]["report_id"] == "r-1"
