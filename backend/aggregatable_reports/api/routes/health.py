"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up
    - Reports the wire schema version aggregation workers must speak
"""

from fastapi import APIRouter, status

from aggregatable_reports.core.wire_schema import WIRE_SCHEMA_VERSION

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "aggregatable-reports",
        "wire_schema_version": WIRE_SCHEMA_VERSION,
    }
