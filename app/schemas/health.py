"""Pydantic schemas for health check responses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: Literal["OK"] = Field(default="OK", description="Service status")
    database: Literal["connected", "disconnected"] = Field(
        description="Database connectivity status when check is performed",
    )
    timestamp: datetime = Field(description="Server time of the check (UTC)")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
