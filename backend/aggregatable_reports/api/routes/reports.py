"""Report Routes: describe and convert aggregatable reports.

Invariants:
    - Request body is the browser's aggregatable-report JSON, unchanged
    - encrypted-records and cleartext-records differ only in PayloadChannel
    - Report errors surface through the global ReportError handler (400)
"""

from fastapi import APIRouter, Depends

from aggregatable_reports.core.domain_types import PayloadChannel
from aggregatable_reports.schemas.report import (
    AggregatableReport, ReportSummary, TransportRecords,
)
from aggregatable_reports.services.report_conversion import ReportConversionService

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


def get_conversion_service() -> ReportConversionService:
    return ReportConversionService()


@router.post("/describe", response_model=ReportSummary)
async def describe_report(
    report: AggregatableReport,
    service: ReportConversionService = Depends(get_conversion_service),
):
    """Protocol, debug status and payload count of a report."""
    return service.describe(report)


@router.post("/encrypted-records", response_model=TransportRecords)
async def convert_encrypted(
    report: AggregatableReport,
    service: ReportConversionService = Depends(get_conversion_service),
):
    """Serialized records from the encrypted payloads."""
    return service.convert(report, PayloadChannel.ENCRYPTED)


@router.post("/cleartext-records", response_model=TransportRecords)
async def convert_cleartext(
    report: AggregatableReport,
    service: ReportConversionService = Depends(get_conversion_service),
):
    """Serialized records from the debug cleartext payloads."""
    return service.convert(report, PayloadChannel.CLEARTEXT)
