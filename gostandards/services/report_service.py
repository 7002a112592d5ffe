from __future__ import annotations

import json

from gostandards.domain.models import AnalysisResult

# markdown reports list at most this many issues by default
MARKDOWN_ISSUE_LIMIT = 50


class ReportService:
    @staticmethod
    def render(result: AnalysisResult, fmt: str = "json", issue_limit: int | None = MARKDOWN_ISSUE_LIMIT) -> str:
        if fmt == "json":
            return ReportService.to_json(result)
        if fmt == "markdown":
            return ReportService.to_markdown(result, issue_limit=issue_limit)
        raise ValueError(f"unsupported format: {fmt}")

    @staticmethod
    def to_json(result: AnalysisResult) -> str:
        return json.dumps(result.to_dict(), indent=2)

    @staticmethod
    def to_markdown(result: AnalysisResult, issue_limit: int | None = MARKDOWN_ISSUE_LIMIT) -> str:
        s = result.summary
        lines = [
            "# Code Analysis Report",
            "",
            f"**Status**: {result.status}",
            f"**Score**: {s.score:.1f}/100",
            "",
        ]
        if result.error:
            lines += [f"**Error**: {result.error}", ""]

        lines += [
            "## Summary",
            "",
            f"- Total Issues: {s.total_issues}",
            f"- Errors: {s.error_count}",
            f"- Warnings: {s.warning_count}",
            f"- Info: {s.info_count}",
            f"- Files Analyzed: {s.files_analyzed}",
            f"- Duration: {s.duration:.2f}s",
            f"- Tools: {', '.join(result.metadata.tools_used) or 'none'}",
            "",
        ]

        if result.metadata.tools_failed:
            lines += ["## Tool Failures", ""]
            for tool, reason in sorted(result.metadata.tools_failed.items()):
                lines.append(f"- **{tool}**: {reason}")
            lines.append("")

        if result.issues:
            lines += ["## Issues", ""]
            shown = result.issues if issue_limit is None else result.issues[:issue_limit]
            for n, issue in enumerate(shown, start=1):
                lines += [
                    f"### {n}. {issue.message}",
                    f"- **File**: {issue.file}:{issue.line}:{issue.column}",
                    f"- **Severity**: {issue.severity}",
                    f"- **Category**: {issue.category}",
                    f"- **Rule**: {issue.rule} ({issue.source})",
                    "",
                ]
            hidden = len(result.issues) - len(shown)
            if hidden > 0:
                lines += [f"... and {hidden} more issues", ""]

        if result.suggestions:
            lines += ["## Suggestions", ""]
            for n, sug in enumerate(result.suggestions, start=1):
                lines.append(f"{n}. [{sug.priority}] {sug.title}")
                lines.append(f"   {sug.description}")
                if sug.examples:
                    lines.append(f"   Example: `{sug.examples}`")
                lines.append("")

        return "\n".join(lines)
