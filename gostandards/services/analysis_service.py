from __future__ import annotations

import logging
import time
import uuid
from concurrent.futures import CancelledError, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from gostandards.analyzers.base import RunContext, StaticCodeAnalyzer
from gostandards.analyzers.registry import AnalyzerRegistry
from gostandards.core.config import settings
from gostandards.core.errors import AnalysisError, ToolError
from gostandards.domain.models import (
    AnalysisResult,
    BatchAnalysisResult,
    BatchSummary,
    Issue,
    Metadata,
)
from gostandards.domain.schemas import AnalysisRequest, BatchAnalysisRequest
from gostandards.services.config_service import ConfigService
from gostandards.services.summary_service import SummaryService
from gostandards.services.workspace_service import WorkspaceService, count_go_files, count_go_lines

logger = logging.getLogger(__name__)


@dataclass
class ToolRun:
    """Fan-in of one orchestrated run."""

    issues: list[Issue] = field(default_factory=list)
    tools_used: list[str] = field(default_factory=list)
    tools_failed: dict[str, str] = field(default_factory=dict)


class AnalysisService:
    """
    Orchestrates: work area → config artifact → concurrent tool runs → summary.
    """

    def __init__(
        self,
        analyzer_registry: AnalyzerRegistry,
        concurrency: int | None = None,
        timeout_sec: float | None = None,
    ):
        self.analyzers = analyzer_registry
        self.concurrency = max(1, concurrency or settings.CONCURRENT_LIMIT)
        self.timeout_sec = timeout_sec or settings.ANALYSIS_TIMEOUT_SEC

    def analyze(self, request: AnalysisRequest, ctx: RunContext | None = None) -> AnalysisResult:
        """Run one analysis.

        Raises an ``AnalysisError`` subclass for fatal failures. Tool
        failures never raise; they show up in ``metadata.tools_failed``.
        Pass ``ctx`` to cancel the run from another thread.
        """
        started = time.monotonic()
        analysis_id = str(uuid.uuid4())
        extra = {"analysis_id": analysis_id}
        ctx = ctx or RunContext(timeout_sec=self.timeout_sec)

        logger.info("Starting analysis (standard=%s)", request.standard, extra=extra)

        with WorkspaceService.resolve(request) as area:
            logger.info(
                "Work area %s (%s)",
                area.root,
                "temporary" if area.owned else "caller-owned",
                extra=extra,
            )
            config = ConfigService.resolve(request.standard, request.config)
            tools = self.analyzers.pick(request.analyzers)
            run = self.run_tools(tools, area.root, config.path, ctx, analysis_id)
            files = count_go_files(area.root)
            lines = count_go_lines(area.root)

        summary = SummaryService.summarize(run.issues, time.monotonic() - started, files, lines)
        suggestions = SummaryService.suggest(summary.category_counts) if request.include_suggestions else []

        result = AnalysisResult(
            id=analysis_id,
            status="success",
            issues=run.issues,
            summary=summary,
            suggestions=suggestions,
            metadata=Metadata(
                standard=request.standard,
                tools_used=run.tools_used,
                tools_failed=run.tools_failed,
                config_hash=config.content_hash,
                server_version=settings.SERVER_VERSION,
            ),
            created_at=datetime.now(timezone.utc),
        )

        logger.info(
            "Analysis complete: %d issues, score %.1f, %.2fs",
            summary.total_issues,
            summary.score,
            summary.duration,
            extra=extra,
        )
        return result

    def run_tools(
        self,
        tools: list[StaticCodeAnalyzer],
        workspace: Path,
        config_path: Path | None,
        ctx: RunContext,
        analysis_id: str | None = None,
    ) -> ToolRun:
        out = ToolRun(tools_used=sorted(t.tool_name() for t in tools))
        if not tools:
            return out

        extra = {"analysis_id": analysis_id}
        executor = ThreadPoolExecutor(
            max_workers=min(self.concurrency, len(tools)),
            thread_name_prefix="analyzer",
        )
        futures = {}
        try:
            for tool in tools:
                logger.info("Running %s ...", tool.tool_name(), extra={**extra, "tool": tool.tool_name()})
                futures[executor.submit(tool.analyze, workspace, config_path, ctx)] = tool

            _, pending = wait(futures, timeout=ctx.remaining())
            if pending:
                logger.warning("Analysis deadline reached, cancelling %d tool(s)", len(pending), extra=extra)
                ctx.cancel()
        except BaseException:
            # interrupted: stop in-flight processes before unwinding
            ctx.cancel()
            raise
        finally:
            executor.shutdown(wait=True, cancel_futures=ctx.cancelled)

        for future, tool in sorted(futures.items(), key=lambda kv: kv[1].tool_name()):
            name = tool.tool_name()
            try:
                issues = future.result()
            except CancelledError:
                out.tools_failed[name] = "cancelled"
                logger.warning("%s cancelled before it started", name, extra={**extra, "tool": name})
                continue
            except ToolError as e:
                out.tools_failed[name] = e.reason
                logger.warning("Tool failed: %s", e, extra={**extra, "tool": name})
                continue
            except Exception as e:
                out.tools_failed[name] = f"unexpected error: {e}"
                logger.warning("Tool crashed: %s", name, exc_info=True, extra={**extra, "tool": name})
                continue

            out.issues.extend(issues)
            logger.info("%s completed: %d issues", name, len(issues), extra={**extra, "tool": name})

        out.issues.sort(key=Issue.sort_key)
        return out

    def analyze_batch(self, batch: BatchAnalysisRequest) -> BatchAnalysisResult:
        started = time.monotonic()
        results: dict[str, AnalysisResult] = {}
        errors: dict[str, str] = {}

        for name, request in batch.to_requests().items():
            try:
                results[name] = self.analyze(request)
            except AnalysisError as e:
                logger.warning("Batch project %s failed: %s", name, e)
                errors[name] = str(e)

        scores = [r.summary.score for r in results.values()]
        summary = BatchSummary(
            total_projects=len(results) + len(errors),
            successful_projects=len(results),
            failed_projects=len(errors),
            total_issues=sum(r.summary.total_issues for r in results.values()),
            average_score=sum(scores) / len(scores) if scores else 0.0,
            duration=time.monotonic() - started,
        )
        return BatchAnalysisResult(
            id=str(uuid.uuid4()),
            status="success" if results else "error",
            results=results,
            errors=errors,
            summary=summary,
            created_at=datetime.now(timezone.utc),
        )
