"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from ..schemas import HealthResponse, ServiceStatus

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    from ..main import app_state

    services: list[ServiceStatus] = []
    overall = "ok"

    scraper = app_state.get("scraper")
    if scraper:
        services.append(ServiceStatus(name="scraper", status="ok"))
    else:
        services.append(ServiceStatus(name="scraper", status="unavailable", detail="not started"))
        overall = "degraded"

    return HealthResponse(status=overall, services=services)
