from collections import Counter
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from gostandards.core.errors import InputError

InputMode = Literal["code", "file", "project"]
Standard = Literal["strict", "standard", "relaxed", "custom"]


class AnalysisRequest(BaseModel):
    """One analysis call: exactly one of ``code``, ``file_path``, ``project_dir``."""

    code: str | None = Field(None, description="Go code snippet to analyze.")
    file_path: str | None = Field(None, description="Path to a single Go file to analyze.")
    project_dir: str | None = Field(None, description="Path to a Go project directory to analyze.")

    standard: Standard = Field("standard", description="Configuration standard to use.")
    config: str | None = Field(
        None,
        description="Custom golangci-lint configuration (YAML), required if standard is 'custom'.",
    )
    format: Literal["json", "markdown"] = Field("json", description="Output format for the result.")

    analyzers: list[str] | None = Field(
        None,
        description="Tool names to run. If omitted, all available tools run.",
        json_schema_extra={"examples": [["golangci-lint", "govet"]]},
    )
    include_suggestions: bool = True

    def input_mode(self) -> InputMode:
        """Validate the request and return which input mode it uses."""
        populated: list[InputMode] = []
        if self.code:
            populated.append("code")
        if self.file_path:
            populated.append("file")
        if self.project_dir:
            populated.append("project")

        if not populated:
            raise InputError("no code, file, or directory specified")
        if len(populated) > 1:
            raise InputError(f"conflicting input modes: {', '.join(populated)}")

        if self.standard == "custom" and not (self.config or "").strip():
            raise InputError("standard 'custom' requires config content")

        mode = populated[0]
        if mode == "file" and not Path(self.file_path).is_file():
            raise InputError(f"file not found: {self.file_path}")
        if mode == "project" and not Path(self.project_dir).is_dir():
            raise InputError(f"project directory not found: {self.project_dir}")
        return mode


class ProjectInfo(BaseModel):
    name: str
    path: str


class BatchAnalysisRequest(BaseModel):
    projects: list[ProjectInfo] = Field(..., min_length=1)
    standard: Standard = "standard"
    config: str | None = None
    analyzers: list[str] | None = None
    include_suggestions: bool = True

    @field_validator("projects")
    @classmethod
    def _unique_names(cls, projects: list[ProjectInfo]) -> list[ProjectInfo]:
        # results and errors are keyed by project name
        counts = Counter(p.name for p in projects)
        dupes = sorted(name for name, n in counts.items() if n > 1)
        if dupes:
            raise ValueError(f"duplicate project names: {', '.join(dupes)}")
        return projects

    def to_requests(self) -> dict[str, AnalysisRequest]:
        return {
            p.name: AnalysisRequest(
                project_dir=p.path,
                standard=self.standard,
                config=self.config,
                analyzers=self.analyzers,
                include_suggestions=self.include_suggestions,
            )
            for p in self.projects
        }
