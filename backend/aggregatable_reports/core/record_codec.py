"""Record Codec: WireRecord <-> base64 transport string.

Invariants:
    - serialize_record packs with the versioned wire schema, then standard base64
    - The payload sub-message is always present, even for zero-length data
    - deserialize_record(serialize_record(r)) == r
    - Bad base64 and bad protobuf both surface as PayloadDecodeError
"""

import base64
import binascii

from google.protobuf.message import DecodeError, EncodeError

from aggregatable_reports.core.errors import PayloadDecodeError, RecordEncodeError
from aggregatable_reports.core.wire_record import WireRecord
from aggregatable_reports.core.wire_schema import AggregatablePayloadMessage


def serialize_record(record: WireRecord) -> str:
    """Serialize a WireRecord into a transport string."""
    try:
        message = AggregatablePayloadMessage(
            shared_info=record.shared_info, key_id=record.key_id,
        )
        message.payload.data = record.payload
        message.payload.SetInParent()
        packed = message.SerializeToString(deterministic=True)
    except (EncodeError, TypeError, ValueError) as exc:
        raise RecordEncodeError(str(exc)) from exc
    return base64.b64encode(packed).decode("ascii")


def deserialize_record(line: str) -> WireRecord:
    """Deserialize a transport string back into a WireRecord."""
    try:
        packed = base64.b64decode(line, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise PayloadDecodeError(line, str(exc)) from exc

    message = AggregatablePayloadMessage()
    try:
        message.ParseFromString(packed)
    except (DecodeError, UnicodeDecodeError) as exc:
        raise PayloadDecodeError(line, f"not an AggregatablePayload: {exc}") from exc

    return WireRecord(
        payload=bytes(message.payload.data),
        shared_info=message.shared_info,
        key_id=message.key_id,
    )
