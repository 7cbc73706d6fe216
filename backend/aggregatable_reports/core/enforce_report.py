"""Report Structure Enforcement: payload-count validation, protocol selection, debug detection.

Invariants:
    - Protocol is decided by payload count alone: 1 → one-party, 2 → mpc
    - validate_report and protocol_of reject the same counts with the same error
    - Debug status reads payload index 0 only
"""

from aggregatable_reports.core.domain_types import ReportProtocol
from aggregatable_reports.core.errors import InvalidPayloadCountError
from aggregatable_reports.schemas.report import AggregatableReport, ReportSummary


_PROTOCOL_BY_COUNT: dict[int, ReportProtocol] = {
    1: ReportProtocol.ONE_PARTY,
    2: ReportProtocol.MPC,
}


def validate_report(report: AggregatableReport) -> None:
    """Raise InvalidPayloadCountError unless the report has one or two payloads."""
    count = len(report.aggregation_service_payloads)
    if count not in _PROTOCOL_BY_COUNT:
        raise InvalidPayloadCountError(count)


def protocol_of(report: AggregatableReport) -> ReportProtocol:
    """Protocol the report uses. Never inspects payload contents."""
    count = len(report.aggregation_service_payloads)
    try:
        return _PROTOCOL_BY_COUNT[count]
    except KeyError:
        raise InvalidPayloadCountError(count) from None


def is_debug_report(report: AggregatableReport) -> bool:
    """True if the primary payload carries a cleartext debug payload.

    The caller guarantees at least one payload; an empty report raises IndexError.
    """
    return report.aggregation_service_payloads[0].debug_cleartext_payload != ""


def describe_report(report: AggregatableReport) -> ReportSummary:
    """Validate, then summarize the report's structure."""
    validate_report(report)
    return ReportSummary(
        protocol=protocol_of(report),
        is_debug=is_debug_report(report),
        payload_count=len(report.aggregation_service_payloads),
        has_debug_keys=bool(report.source_debug_key or report.trigger_debug_key),
    )
