"""Wire Record: the uniform in-memory record handed to aggregation workers.

Invariants:
    - payload holds raw bytes (ciphertext, or cleartext on the debug channel)
    - shared_info is the report's string, byte-for-byte
    - key_id is "" on the cleartext channel
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WireRecord:
    payload: bytes
    shared_info: str
    key_id: str = ""
