"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready when the store can be loaded."""

    status: str = Field(default="ok", description="Readiness status")
    entities: int = Field(..., ge=0, description="Entities in the loaded store")


class ReadinessErrorResponse(BaseModel):
    """Response for GET /health/ready when the store cannot be loaded (503)."""

    status: str = Field(default="not_ready", description="Readiness status")
    message: str = Field(..., description="Reason (e.g. store document not found)")
