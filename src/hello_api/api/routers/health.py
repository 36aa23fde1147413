"""Liveness and readiness probes."""

from fastapi import APIRouter
from pydantic import BaseModel

from hello_api.config import get_settings

router = APIRouter(tags=["diagnostics"])


class HealthResponse(BaseModel):
    status: str
    service: str
    environment: str


@router.get("/health", summary="Liveness probe", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the process is up, along with its configured identity."""

    settings = get_settings()
    return HealthResponse(
        status="ok", service=settings.app_name, environment=settings.environment
    )


@router.get("/readiness", summary="Readiness probe")
async def readiness_check() -> dict[str, str]:
    return {"status": "ready"}
