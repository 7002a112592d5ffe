from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from gostandards.core.errors import CommandCancelledError, ToolExecutionError
from gostandards.core.util import run_cmd
from gostandards.domain.models import Issue
from gostandards.normalizers.base import NormalizerContext
from gostandards.normalizers.failure_policy import is_real_failure
from gostandards.normalizers.govet_normalizer import GoVetNormalizer

from .base import RawToolResult, RunContext, StaticCodeAnalyzer

logger = logging.getLogger(__name__)


class GoVetAnalyzer(StaticCodeAnalyzer):
    binary = "go"

    def __init__(self):
        self.normalizer = GoVetNormalizer()

    def tool_name(self) -> str:
        return "govet"

    def analyze(self, workspace: Path, config_path: Path | None, ctx: RunContext) -> list[Issue]:
        # go vet has no config file; config_path is accepted for the common contract
        try:
            r = run_cmd(
                ["go", "vet", "./..."],
                cwd=workspace,
                timeout_sec=ctx.remaining(),
                cancel=ctx.cancel_event,
            )
        except (OSError, subprocess.TimeoutExpired, CommandCancelledError) as e:
            raise ToolExecutionError(self.tool_name(), str(e)) from e

        raw = RawToolResult(self.tool_name(), r.exit_code, r.stdout, r.stderr)
        if is_real_failure(raw.tool, raw.exit_code, raw.stdout):
            raise ToolExecutionError(self.tool_name(), f"exit_code={raw.exit_code}")

        issues = self.normalizer.normalize(raw, NormalizerContext(workspace_dir=workspace))
        logger.debug(
            "go vet completed: %d issues (exit_code=%d)",
            len(issues),
            raw.exit_code,
            extra={"tool": self.tool_name()},
        )
        return issues
