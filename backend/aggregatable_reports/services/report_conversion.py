"""Report Conversion Service: runs the core pipeline for one report with logging context.

Invariants:
    - Validation runs before extraction; an invalid report produces no records
    - report_id is read from shared_info for logs only; a bad shared_info never blocks conversion
    - Errors propagate unchanged to the caller, which logs them (API error handlers)
"""

import logging

from aggregatable_reports.core.convert_report import build_transport_map
from aggregatable_reports.core.domain_types import PayloadChannel
from aggregatable_reports.core.enforce_report import describe_report
from aggregatable_reports.core.errors import ReportError, SharedInfoError
from aggregatable_reports.core.shared_info import parse_shared_info
from aggregatable_reports.schemas.report import (
    AggregatableReport, ReportSummary, TransportRecords,
)

logger = logging.getLogger(__name__)


class ReportConversionService:
    """Converts aggregatable reports into transport records."""

    def describe(self, report: AggregatableReport) -> ReportSummary:
        summary = describe_report(report)
        logger.info(
            "Report described",
            extra={
                "report_id": _report_id(report),
                "protocol": summary.protocol.value,
                "payload_count": summary.payload_count,
            },
        )
        return summary

    def convert(
        self, report: AggregatableReport, channel: PayloadChannel,
    ) -> TransportRecords:
        """Validate the report and serialize the records of the chosen channel."""
        report_id = _report_id(report)
        try:
            summary = describe_report(report)
            records = build_transport_map(report, channel)
        except ReportError as exc:
            # logged once, by the API error handler
            exc.context.report_id = report_id
            raise
        logger.info(
            f"Converted report into {len(records)} record(s)",
            extra={
                "report_id": report_id,
                "protocol": summary.protocol.value,
                "channel": channel.value,
                "payload_count": summary.payload_count,
            },
        )
        return TransportRecords(records=records)


def _report_id(report: AggregatableReport) -> str | None:
    try:
        return parse_shared_info(report).report_id or None
    except SharedInfoError as exc:
        logger.debug(f"shared_info unreadable for logging: {exc.message}")
        return None
