"""Health check endpoints: liveness and store readiness."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from loresearch.api.v1.dependencies import get_store_repository
from loresearch.application.interfaces.repositories import IStoreRepository
from loresearch.infrastructure.exceptions import StoreException
from loresearch.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Store cannot be loaded", "model": ReadinessErrorResponse}},
)
async def readiness_check(
    store_repo: Annotated[IStoreRepository, Depends(get_store_repository)],
) -> ReadinessResponse | JSONResponse:
    """Return 200 with the entity count if the store loads; 503 otherwise."""
    try:
        store = await store_repo.get_store()
    except StoreException as e:
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message=e.message).model_dump(),
        )
    return ReadinessResponse(entities=len(store))
