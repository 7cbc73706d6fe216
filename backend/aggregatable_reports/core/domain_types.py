"""Domain Types: closed enumerations for report conversion.

Invariants:
    - ReportProtocol has exactly two members; values are the wire names "one-party" and "mpc"
    - PayloadChannel replaces the boolean cleartext flag at every call site
    - All valid states encoded as Enums: no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum


class ReportProtocol(str, Enum):
    """Aggregation protocol, decided by payload count alone."""
    ONE_PARTY = "one-party"
    MPC = "mpc"


class PayloadChannel(str, Enum):
    """Which per-payload field a conversion reads."""
    ENCRYPTED = "encrypted"     # payload + key_id
    CLEARTEXT = "cleartext"     # debug_cleartext_payload, no key id
