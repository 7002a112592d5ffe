from __future__ import annotations

from collections import Counter
from typing import Iterable

from gostandards.domain.models import Issue, Suggestion, Summary

# points deducted from 100 per issue of each severity
SEVERITY_PENALTIES: dict[str, float] = {"error": 5.0, "warning": 2.0, "info": 0.5}


class SummaryService:
    """Statistics, score and suggestions derived from an issue set."""

    @staticmethod
    def score(error_count: int, warning_count: int, info_count: int) -> float:
        s = 100.0
        s -= error_count * SEVERITY_PENALTIES["error"]
        s -= warning_count * SEVERITY_PENALTIES["warning"]
        s -= info_count * SEVERITY_PENALTIES["info"]
        return max(0.0, s)

    @staticmethod
    def summarize(
        issues: Iterable[Issue],
        duration: float,
        files_analyzed: int,
        lines_analyzed: int = 0,
    ) -> Summary:
        issues = list(issues)
        by_sev = Counter(i.severity for i in issues)
        by_cat = Counter(i.category for i in issues)
        return Summary(
            total_issues=len(issues),
            error_count=by_sev["error"],
            warning_count=by_sev["warning"],
            info_count=by_sev["info"],
            files_analyzed=files_analyzed,
            lines_analyzed=lines_analyzed,
            duration=duration,
            score=SummaryService.score(by_sev["error"], by_sev["warning"], by_sev["info"]),
            category_counts=dict(sorted(by_cat.items())),
        )

    @staticmethod
    def suggest(category_counts: dict[str, int]) -> list[Suggestion]:
        suggestions: list[Suggestion] = []

        if category_counts.get("format", 0) > 5:
            suggestions.append(
                Suggestion(
                    title="Improve Code Formatting",
                    description="Multiple formatting issues detected. Run 'gofmt' or 'goimports' to auto-fix.",
                    priority="medium",
                    category="format",
                    examples="go fmt ./... or goimports -w .",
                )
            )

        if category_counts.get("security", 0) > 0:
            suggestions.append(
                Suggestion(
                    title="Address Security Issues",
                    description="Security vulnerabilities detected. Review and fix these issues immediately.",
                    priority="high",
                    category="security",
                )
            )

        if category_counts.get("performance", 0) > 3:
            suggestions.append(
                Suggestion(
                    title="Optimize Performance",
                    description="Several performance issues found. Consider profiling and optimization.",
                    priority="medium",
                    category="performance",
                )
            )

        return suggestions
