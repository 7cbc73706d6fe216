"""Reach Results Routes: read and replace named reach-results tables.

Invariants:
    - Tables live under Settings.results_dir (services/reach_results.py)
    - PUT replaces the whole table; GET returns exactly what was written
    - JSON object keys are the decimal uint64 result keys
"""

from fastapi import APIRouter, Depends, Path

from aggregatable_reports.config import get_settings
from aggregatable_reports.schemas.reach_results import ReachResultsTable
from aggregatable_reports.services.reach_results import (
    TABLE_NAME_PATTERN,
    ReachResultsService,
)

router = APIRouter(prefix="/api/v1/reach-results", tags=["reach-results"])


def get_reach_results_service() -> ReachResultsService:
    return ReachResultsService(get_settings().results_dir)


@router.get("/{table}", response_model=ReachResultsTable)
async def read_table(
    table: str = Path(pattern=TABLE_NAME_PATTERN),
    service: ReachResultsService = Depends(get_reach_results_service),
):
    """Reach results of one table."""
    return ReachResultsTable(results=service.load(table))


@router.put("/{table}", response_model=ReachResultsTable)
async def write_table(
    body: ReachResultsTable,
    table: str = Path(pattern=TABLE_NAME_PATTERN),
    service: ReachResultsService = Depends(get_reach_results_service),
):
    """Replace one table with the given results."""
    service.save(table, body.results)
    return body
