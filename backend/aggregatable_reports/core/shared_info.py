"""SharedInfo Reader: read-only view of the report's authenticated context.

Invariants:
    - Parsing never replaces or rewrites report.shared_info
    - There is no serializer: the string is the source of truth
"""

import json

from pydantic import ValidationError

from aggregatable_reports.core.errors import SharedInfoError
from aggregatable_reports.schemas.report import AggregatableReport, SharedInfo


def parse_shared_info(report: AggregatableReport) -> SharedInfo:
    """Parse report.shared_info into a SharedInfo."""
    try:
        decoded = json.loads(report.shared_info)
    except json.JSONDecodeError as exc:
        raise SharedInfoError(f"not JSON ({exc.msg})") from exc
    if not isinstance(decoded, dict):
        raise SharedInfoError(f"expected a JSON object, got {type(decoded).__name__}")
    try:
        return SharedInfo.model_validate(decoded)
    except ValidationError as exc:
        raise SharedInfoError(str(exc)) from exc
