from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from gostandards.analyzers.base import RawToolResult
from gostandards.domain.models import Issue

@dataclass
class NormalizerContext:
    workspace_dir: Path
    analysis_id: str | None = None

class IssueNormalizer(ABC):
    @abstractmethod
    def tool_name(self) -> str: ...

    @abstractmethod
    def normalize(self, raw: RawToolResult, ctx: NormalizerContext) -> list[Issue]: ...
