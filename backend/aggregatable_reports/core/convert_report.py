"""Report Conversion: report → {"0": record, "1": record} transport map.

Invariants:
    - Keys are the decimal payload index
    - The first extraction or encoding error aborts the call; no partial map escapes
    - Encrypted and cleartext entry points share one pipeline, differing only in channel
"""

from aggregatable_reports.core.domain_types import PayloadChannel
from aggregatable_reports.core.extract_payloads import extract_payloads
from aggregatable_reports.core.record_codec import serialize_record
from aggregatable_reports.schemas.report import AggregatableReport


def build_transport_map(
    report: AggregatableReport, channel: PayloadChannel,
) -> dict[str, str]:
    records = extract_payloads(report, channel)
    return {
        str(index): serialize_record(record)
        for index, record in enumerate(records)
    }


def get_serialized_encrypted_records(report: AggregatableReport) -> dict[str, str]:
    """Extract and serialize the encrypted payloads."""
    return build_transport_map(report, PayloadChannel.ENCRYPTED)


def get_serialized_cleartext_records(report: AggregatableReport) -> dict[str, str]:
    """Extract and serialize the cleartext debug payloads."""
    return build_transport_map(report, PayloadChannel.CLEARTEXT)
