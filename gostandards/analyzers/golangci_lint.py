from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from gostandards.core.config import settings
from gostandards.core.errors import CommandCancelledError, OutputParseError, ToolExecutionError
from gostandards.core.util import run_cmd
from gostandards.domain.models import Issue
from gostandards.normalizers.base import NormalizerContext
from gostandards.normalizers.failure_policy import is_real_failure
from gostandards.normalizers.golangci_normalizer import GolangciLintNormalizer

from .base import RawToolResult, RunContext, StaticCodeAnalyzer

logger = logging.getLogger(__name__)


class GolangciLintAnalyzer(StaticCodeAnalyzer):
    binary = "golangci-lint"

    def __init__(self, timeout_sec: float | None = None):
        self.timeout_sec = timeout_sec or settings.GOLANGCI_LINT_TIMEOUT_SEC
        self.normalizer = GolangciLintNormalizer()

    def tool_name(self) -> str:
        return "golangci-lint"

    def command(self, config_path: Path | None) -> list[str]:
        cmd = ["golangci-lint", "run", "--out-format=json", "--print-issued-lines=false"]
        if config_path is not None:
            cmd += ["--config", str(config_path)]
        cmd.append("./...")
        return cmd

    def analyze(self, workspace: Path, config_path: Path | None, ctx: RunContext) -> list[Issue]:
        cmd = self.command(config_path)
        logger.debug("Running golangci-lint: %s", " ".join(cmd), extra={"tool": self.tool_name()})

        try:
            r = run_cmd(
                cmd,
                cwd=workspace,
                timeout_sec=min(self.timeout_sec, ctx.remaining()),
                cancel=ctx.cancel_event,
            )
        except (OSError, subprocess.TimeoutExpired, CommandCancelledError) as e:
            raise ToolExecutionError(self.tool_name(), str(e)) from e

        raw = RawToolResult(self.tool_name(), r.exit_code, r.stdout, r.stderr)
        if is_real_failure(raw.tool, raw.exit_code, raw.stdout):
            raise ToolExecutionError(
                self.tool_name(),
                f"exit_code={raw.exit_code}: {raw.stderr.strip()[-2000:]}",
            )

        try:
            issues = self.normalizer.normalize(raw, NormalizerContext(workspace_dir=workspace))
        except OutputParseError as e:
            # keep the analysis alive; this tool just contributes nothing
            logger.warning("Failed to parse golangci-lint output: %s", e, extra={"tool": self.tool_name()})
            return []

        logger.debug("golangci-lint completed: %d issues", len(issues), extra={"tool": self.tool_name()})
        return issues
