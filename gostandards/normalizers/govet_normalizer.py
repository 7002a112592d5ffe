from __future__ import annotations

import re

from gostandards.domain.models import Issue
from .base import IssueNormalizer, NormalizerContext, RawToolResult
from .util import get_rel_path, get_snippet

# path/file.go:line:column: message  or  path/file.go:line: message
_LINE_RE = re.compile(r"^(.+?):(\d+):(?:(\d+):)?\s*(.+)$")

# first matching keyword wins
_KEYWORD_CATEGORIES: list[tuple[tuple[str, ...], str]] = [
    (("shadow",), "logic"),
    (("printf", "format"), "format"),
    (("composite literal",), "style"),
    (("unreachable",), "dead-code"),
    (("nil",), "error-handling"),
]


class GoVetNormalizer(IssueNormalizer):
    def tool_name(self) -> str:
        return "govet"

    def normalize(self, raw: RawToolResult, ctx: NormalizerContext) -> list[Issue]:
        # go vet reports on stderr; read both streams like combined output
        text = "\n".join(s for s in (raw.stdout, raw.stderr) if s)

        out: list[Issue] = []
        for line in text.splitlines():
            line = line.strip().removeprefix("vet: ")
            if not line:
                continue
            m = _LINE_RE.match(line)
            if not m:
                continue

            file_rel = get_rel_path(ctx.workspace_dir, m.group(1))
            line_no = int(m.group(2))
            message = m.group(4)
            out.append(
                Issue(
                    file=file_rel,
                    line=line_no,
                    column=int(m.group(3)) if m.group(3) else 0,
                    severity="warning",
                    category=categorize(message),
                    source="govet",
                    rule="govet",
                    message=message,
                    code=get_snippet(ctx.workspace_dir, file_rel, line_no),
                )
            )
        return out


def categorize(message: str) -> str:
    lowered = message.lower()
    for keywords, category in _KEYWORD_CATEGORIES:
        if any(k in lowered for k in keywords):
            return category
    return "logic"
