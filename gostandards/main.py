from __future__ import annotations

import time
from typing import Any

from fastapi import FastAPI

from gostandards.api.analysis_routes import get_analysis_service, router as analysis_router
from gostandards.core.config import settings
from gostandards.core.logging import setup_logging

setup_logging()

_STARTED = time.monotonic()

tags_metadata = [
    {
        "name": "analysis",
        "description": "Run golangci-lint and go vet on Go code and get a unified, scored issue report.",
    },
    {
        "name": "health",
        "description": "Liveness and tool availability checks.",
    },
]

app = FastAPI(
    title="Go Standards Analysis Service",
    version=settings.SERVER_VERSION,
    description="Drives external Go static-analysis tools and normalizes their findings.",
    openapi_tags=tags_metadata,
)

app.include_router(analysis_router)


@app.get("/health", tags=["health"], summary="Health check")
def health() -> dict[str, Any]:
    """Report service health and which analysis tools are installed."""
    registry = get_analysis_service().analyzers
    checks = {name: "ok" for name in registry.list()}
    checks.update({name: "unavailable" for name in registry.unavailable()})
    return {
        "status": "healthy" if registry.list() else "degraded",
        "version": settings.SERVER_VERSION,
        "uptime": round(time.monotonic() - _STARTED, 3),
        "checks": checks,
    }
