from fastapi import APIRouter, Depends, Response

from exercisedb.app.constants import CORS_HEADERS
from exercisedb.app.context import AppContext
from exercisedb.app.dependencies import get_context
from exercisedb.app.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
@router.options("/health", response_model=HealthResponse)
def health_check(
    response: Response, context: AppContext = Depends(get_context)
) -> HealthResponse:
    """Health check endpoint that returns 200 status with CORS from anywhere."""
    response.headers.update(CORS_HEADERS)
    return HealthResponse(
        timestamp=context.clock.now(),
        uptime=context.clock.monotonic() - context.started_at,
    )
