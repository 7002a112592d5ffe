from __future__ import annotations

import json

from gostandards.core.errors import OutputParseError
from gostandards.domain.models import Issue
from .base import IssueNormalizer, NormalizerContext, RawToolResult
from .util import get_rel_path

# golangci-lint sub-linter -> issue category
LINTER_CATEGORIES: dict[str, str] = {
    "gofmt": "format",
    "goimports": "format",
    "gosec": "security",
    "govet": "logic",
    "staticcheck": "logic",
    "errcheck": "error-handling",
    "ineffassign": "performance",
    "unused": "dead-code",
    "deadcode": "dead-code",
    "varcheck": "dead-code",
    "structcheck": "dead-code",
    "gocyclo": "complexity",
    "gocognit": "complexity",
    "nestif": "complexity",
    "dupl": "duplication",
    "goconst": "maintainability",
}


class GolangciLintNormalizer(IssueNormalizer):
    def tool_name(self) -> str:
        return "golangci-lint"

    def normalize(self, raw: RawToolResult, ctx: NormalizerContext) -> list[Issue]:
        text = raw.stdout.strip()
        if not text:
            return []

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise OutputParseError(self.tool_name(), f"invalid JSON output: {e}") from e
        if not isinstance(data, dict):
            raise OutputParseError(self.tool_name(), "expected a JSON object")

        out: list[Issue] = []
        # "Issues" is null when nothing was found
        for it in data.get("Issues") or []:
            if not isinstance(it, dict):
                continue
            pos = it.get("Pos") or {}
            linter = str(it.get("FromLinter") or "")
            out.append(
                Issue(
                    file=get_rel_path(ctx.workspace_dir, str(pos.get("Filename") or "")),
                    line=int(pos.get("Line") or 0),
                    column=int(pos.get("Column") or 0),
                    severity=map_severity(it.get("Severity")),
                    category=map_category(linter),
                    source="golangci-lint",
                    rule=linter,
                    message=str(it.get("Text") or ""),
                    code=_source_lines(it.get("SourceLines")),
                )
            )
        return out


def map_severity(severity: str | None) -> str:
    s = (severity or "").lower()
    if s in ("error", "warning"):
        return s
    return "info"


def map_category(linter: str) -> str:
    return LINTER_CATEGORIES.get(linter, "other")


def _source_lines(value) -> str | None:
    # string in older releases, list of lines in newer ones
    if not value:
        return None
    if isinstance(value, list):
        return "\n".join(str(v) for v in value)
    return str(value)
