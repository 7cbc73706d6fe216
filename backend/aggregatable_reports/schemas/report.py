"""Report Schemas: the aggregatable-report wire contract shared with the browser.

Invariants:
    - Field names match the browser's aggregatable-report JSON exactly
    - shared_info is kept as the received string; it is authenticated data for decryption
    - Payload count is NOT checked here: a report with 0 or 3 payloads parses,
      and core/enforce_report.py rejects it
    - Decoded payload content is a tagged union: exactly one of data / dpf_key exists

Design Decisions:
    - Missing string fields default to "" (non-debug reports omit debug fields)
    - Unknown keys ignored: newer browser versions may add fields
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from aggregatable_reports.core.domain_types import ReportProtocol


class AggregationServicePayload(BaseModel):
    """Payload addressed to one aggregation server."""
    model_config = ConfigDict(frozen=True)

    # Base64 of the encrypted, CBOR-serialized Payload.
    payload: str = ""
    key_id: str = ""
    # Empty for non-debug reports.
    debug_cleartext_payload: str = ""


class AggregatableReport(BaseModel):
    """Report generated by the browser for server-side aggregation."""
    model_config = ConfigDict(frozen=True)

    source_site: str = ""
    attribution_destination: str = ""
    shared_info: str = ""
    aggregation_service_payloads: list[AggregationServicePayload] = Field(
        default_factory=list,
    )

    # Empty for non-debug reports.
    source_debug_key: str = ""
    trigger_debug_key: str = ""


class SharedInfo(BaseModel):
    """Context info of the hybrid encryption, parsed from AggregatableReport.shared_info."""
    model_config = ConfigDict(frozen=True)

    scheduled_report_time: str = ""
    privacy_budget_key: str = ""
    version: str = ""
    report_id: str = ""
    reporting_origin: str = ""
    source_registration_time: str = ""
    debug_mode: bool = False


class Contribution(BaseModel):
    """A single histogram contribution."""
    model_config = ConfigDict(frozen=True)

    bucket: bytes
    value: bytes


class OnePartyPayload(BaseModel):
    """Decoded payload of the one-party protocol: contributions in clear text."""
    model_config = ConfigDict(frozen=True)

    protocol: Literal["one-party"] = ReportProtocol.ONE_PARTY.value
    operation: str
    data: list[Contribution] = Field(default_factory=list)


class TwoPartyPayload(BaseModel):
    """Decoded payload of the MPC protocol: one share of a DPF key, opaque here."""
    model_config = ConfigDict(frozen=True)

    protocol: Literal["mpc"] = ReportProtocol.MPC.value
    operation: str
    dpf_key: bytes


Payload = Annotated[
    Union[OnePartyPayload, TwoPartyPayload],
    Field(discriminator="protocol"),
]


class ReportSummary(BaseModel):
    """Structural facts about a validated report."""
    protocol: ReportProtocol
    is_debug: bool
    payload_count: int
    has_debug_keys: bool


class TransportRecords(BaseModel):
    """Serialized wire records keyed by payload index ("0", "1")."""
    records: dict[str, str]
