from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class FailureResponse(BaseModel):
    """JSON body returned for every error response."""

    success: Literal[False] = False
    message: str


class HealthResponse(BaseModel):
    """Response model for the health endpoint."""

    status: Literal["healthy"] = "healthy"
    timestamp: datetime
    uptime: float  # seconds since the app context was built
