from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from gostandards.core.containers import build_analyzer_registry
from gostandards.core.errors import AnalysisError, ConfigNotFoundError, InputError
from gostandards.domain.models import AnalysisResult
from gostandards.domain.schemas import AnalysisRequest, BatchAnalysisRequest
from gostandards.services.analysis_service import AnalysisService
from gostandards.services.config_service import ConfigService
from gostandards.services.report_service import ReportService

router = APIRouter(prefix="/api", tags=["analysis"])

# Build once at module level
_analysis_service = AnalysisService(build_analyzer_registry())


def get_analysis_service() -> AnalysisService:
    return _analysis_service


def _status_code(exc: AnalysisError) -> int:
    if isinstance(exc, InputError):
        return 400
    if isinstance(exc, ConfigNotFoundError):
        return 404
    return 500


# ── Response schemas ──────────────────────────────────────────────
class AnalyzersResponse(BaseModel):
    """Installed tools and the ones skipped because their binary is missing."""

    available: list[str]
    unavailable: dict[str, str] = Field(..., description="Tool name → reason it was skipped.")


class TemplateInfo(BaseModel):
    name: str
    display_name: str
    description: str
    level: str
    available: bool


# ── Endpoints ─────────────────────────────────────────────────────
@router.get(
    "/analyzers",
    response_model=AnalyzersResponse,
    summary="List analysis tools",
    response_description="Registered tools and unavailable ones",
)
def list_analyzers() -> dict[str, Any]:
    """Return the Go analysis tools this server can run.

    Tools: **golangci-lint** (meta-linter, structured JSON) and **govet**
    (`go vet` diagnostics).
    """
    registry = get_analysis_service().analyzers
    return {"available": registry.list(), "unavailable": registry.unavailable()}


@router.get(
    "/templates",
    response_model=list[TemplateInfo],
    summary="List predefined standards",
    response_description="Template catalog with on-disk availability",
)
def list_templates() -> list[dict[str, Any]]:
    """Return the predefined `strict`, `standard` and `relaxed` templates."""
    return ConfigService.list_templates()


@router.post(
    "/analyse",
    response_model=None,
    summary="Analyze Go code",
    response_description="Analysis result as JSON, or a Markdown report",
)
def analyse(req: AnalysisRequest) -> Any:
    """Analyze a snippet, a single file, or a project directory.

    **Steps performed:**
    1. Resolve the work area (snippets go to a temporary directory)
    2. Resolve the configuration for the requested standard
    3. Run every available tool concurrently
    4. Normalize, sort and score the issues
    5. Remove the temporary work area, if one was created
    """
    try:
        result = get_analysis_service().analyze(req)
    except AnalysisError as e:
        failed = AnalysisResult.failed(req.standard, e)
        return JSONResponse(status_code=_status_code(e), content=failed.to_dict())

    if req.format == "markdown":
        return {
            "format": "markdown",
            "status": result.status,
            "error_count": result.summary.error_count,
            "report": ReportService.to_markdown(result),
        }
    return result.to_dict()


@router.post(
    "/analyse/batch",
    summary="Analyze several projects",
    response_description="Per-project results with batch totals",
)
def analyse_batch(req: BatchAnalysisRequest) -> dict[str, Any]:
    """Analyze several project directories with one standard.

    A project whose analysis fails is listed under `errors`; the others
    still report.
    """
    return get_analysis_service().analyze_batch(req).to_dict()
