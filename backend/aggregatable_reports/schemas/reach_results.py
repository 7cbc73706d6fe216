"""Reach Results Schemas: request/response body of the reach-results routes.

Invariants:
    - Keys are uint64; JSON object keys arrive as decimal strings and are coerced
"""

from typing import Annotated

from pydantic import BaseModel, Field

from aggregatable_reports.infrastructure.results_store import ReachResult, UINT64_LIMIT


class ReachResultsTable(BaseModel):
    results: dict[Annotated[int, Field(ge=0, lt=UINT64_LIMIT)], ReachResult]
