"""Error Hierarchy: typed, categorized exceptions for every report conversion failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Report errors (400-level) abort one report; a missing results table is 404;
      encode/storage errors (500-level) are defects
    - to_response() produces the REST envelope
    - The offending raw string is kept on the exception, never echoed in full to clients

Design Decisions:
    - Single hierarchy with ReportError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


MAX_ECHOED_INPUT: int = 64


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    report_id: str | None = None
    payload_index: int | None = None
    debug_info: dict[str, Any] | None = None


class ReportError(Exception):
    """Base exception for all report conversion errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "report_id": self.context.report_id,
                    "payload_index": self.context.payload_index,
                },
            }
        }


def _truncate(raw: str) -> str:
    if len(raw) <= MAX_ECHOED_INPUT:
        return raw
    return raw[:MAX_ECHOED_INPUT] + "..."


# ─── Report Errors (400-level) ──────────────────────────────────

class InvalidPayloadCountError(ReportError):
    """Report carries a number of aggregation service payloads other than 1 or 2."""
    def __init__(self, count: int, context: ErrorContext | None = None):
        super().__init__(
            f"expected one or two payloads, got {count}",
            "INVALID_PAYLOAD_COUNT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.count = count


class PayloadDecodeError(ReportError):
    """A base64 payload or a serialized wire record could not be decoded."""
    def __init__(
        self,
        raw: str,
        reason: str,
        payload_index: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        if payload_index is not None:
            ctx.payload_index = payload_index
        super().__init__(
            f"cannot decode {_truncate(raw)!r}: {reason}",
            "PAYLOAD_DECODE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.raw = raw
        self.reason = reason
        self.payload_index = payload_index


class SharedInfoError(ReportError):
    """shared_info is not a JSON object of the SharedInfo shape."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"invalid shared_info: {reason}",
            "SHARED_INFO_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Defects & Storage Errors (500-level) ───────────────────────

class RecordEncodeError(ReportError):
    """The protobuf packer rejected a wire record."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"cannot encode wire record: {message}",
            "RECORD_ENCODE_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class ResultsStoreError(ReportError):
    """Reading or writing a reach-results file failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Results {operation} failed: {message}",
            "RESULTS_STORE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class ResultsNotFoundError(ReportError):
    """Requested reach-results table does not exist."""
    def __init__(self, table: str, context: ErrorContext | None = None):
        super().__init__(
            f"Reach results table '{table}' not found",
            "RESULTS_NOT_FOUND", ErrorCategory.STORAGE,
            ErrorSeverity.ERROR, context, 404,
        )
        self.table = table
