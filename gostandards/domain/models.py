from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from hashlib import sha1
from typing import Any, Literal
from uuid import uuid4

Severity = Literal["error", "warning", "info"]
Category = Literal[
    "format",
    "logic",
    "security",
    "performance",
    "error-handling",
    "dead-code",
    "complexity",
    "duplication",
    "maintainability",
    "style",
    "other",
]
Status = Literal["success", "error"]

SEVERITIES: tuple[str, ...] = ("error", "warning", "info")
CATEGORIES: tuple[str, ...] = (
    "format",
    "logic",
    "security",
    "performance",
    "error-handling",
    "dead-code",
    "complexity",
    "duplication",
    "maintainability",
    "style",
    "other",
)


@dataclass(frozen=True)
class Issue:
    file: str
    line: int
    column: int
    severity: Severity
    category: Category
    source: str
    rule: str
    message: str
    code: str | None = None

    @property
    def id(self) -> str:
        base = f"{self.source}|{self.rule}|{self.file}|{self.line}|{self.column}|{self.message}"
        return sha1(base.encode("utf-8")).hexdigest()

    def sort_key(self) -> tuple:
        return (self.file, self.line, self.column, self.source, self.rule, self.message)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["id"] = self.id
        if d["code"] is None:
            del d["code"]
        return d


@dataclass(frozen=True)
class Summary:
    total_issues: int
    error_count: int
    warning_count: int
    info_count: int
    files_analyzed: int
    lines_analyzed: int
    duration: float
    score: float
    category_counts: dict[str, int] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Summary:
        return cls(0, 0, 0, 0, 0, 0, 0.0, 0.0)


@dataclass(frozen=True)
class Suggestion:
    title: str
    description: str
    priority: Literal["high", "medium", "low"]
    category: str
    examples: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if d["examples"] is None:
            del d["examples"]
        return d


@dataclass(frozen=True)
class Metadata:
    standard: str
    tools_used: list[str] = field(default_factory=list)
    tools_failed: dict[str, str] = field(default_factory=dict)
    config_hash: str = ""
    server_version: str = ""


@dataclass(frozen=True)
class AnalysisResult:
    id: str
    status: Status
    issues: list[Issue]
    summary: Summary
    suggestions: list[Suggestion]
    metadata: Metadata
    created_at: datetime
    error: str | None = None

    @classmethod
    def failed(cls, standard: str, error: Exception | str, analysis_id: str | None = None) -> AnalysisResult:
        """Result handed back by a transport when a fatal error aborted the call."""
        return cls(
            id=analysis_id or str(uuid4()),
            status="error",
            issues=[],
            summary=Summary.empty(),
            suggestions=[],
            metadata=Metadata(standard=standard),
            created_at=datetime.now(timezone.utc),
            error=str(error),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "status": self.status,
            "issues": [i.to_dict() for i in self.issues],
            "summary": asdict(self.summary),
            "suggestions": [s.to_dict() for s in self.suggestions],
            "metadata": asdict(self.metadata),
            "created_at": self.created_at.isoformat(),
        }
        if self.error is not None:
            d["error"] = self.error
        return d


@dataclass(frozen=True)
class BatchSummary:
    total_projects: int
    successful_projects: int
    failed_projects: int
    total_issues: int
    average_score: float
    duration: float


@dataclass(frozen=True)
class BatchAnalysisResult:
    id: str
    status: Status
    results: dict[str, AnalysisResult]
    errors: dict[str, str]
    summary: BatchSummary
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status,
            "results": {name: r.to_dict() for name, r in self.results.items()},
            "errors": dict(self.errors),
            "summary": asdict(self.summary),
            "created_at": self.created_at.isoformat(),
        }
