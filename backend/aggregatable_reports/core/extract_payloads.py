"""Payload Extraction: turns a report's base64 payloads into WireRecords.

Invariants:
    - One WireRecord per payload entry, in report order
    - Only the selected channel is decoded; the other field is never read
    - shared_info is copied verbatim into every record
    - An empty selected field is a decode error on both channels
    - No decryption, no parsing of the decoded bytes
"""

import base64
import binascii

from aggregatable_reports.core.domain_types import PayloadChannel
from aggregatable_reports.core.errors import PayloadDecodeError
from aggregatable_reports.core.wire_record import WireRecord
from aggregatable_reports.schemas.report import (
    AggregatableReport,
    AggregationServicePayload,
)


def decode_base64(raw: str, payload_index: int | None = None) -> bytes:
    """Strict standard-alphabet base64 decode (padding required)."""
    if raw == "":
        raise PayloadDecodeError(raw, "empty payload", payload_index)
    try:
        return base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise PayloadDecodeError(raw, str(exc), payload_index) from exc


def _select_channel(
    payload: AggregationServicePayload, channel: PayloadChannel,
) -> tuple[str, str]:
    if channel is PayloadChannel.CLEARTEXT:
        return payload.debug_cleartext_payload, ""
    return payload.payload, payload.key_id


def extract_payloads(
    report: AggregatableReport, channel: PayloadChannel,
) -> list[WireRecord]:
    """Extract the records to be processed by the aggregators."""
    records = []
    for index, payload in enumerate(report.aggregation_service_payloads):
        raw, key_id = _select_channel(payload, channel)
        records.append(WireRecord(
            payload=decode_base64(raw, index),
            shared_info=report.shared_info,
            key_id=key_id,
        ))
    return records
