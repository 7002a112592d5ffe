from __future__ import annotations

import shutil
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from gostandards.domain.models import Issue


@dataclass
class RawToolResult:
    tool: str
    exit_code: int
    stdout: str
    stderr: str


@dataclass
class RunContext:
    """Deadline and cancellation shared by every tool of one analysis."""

    timeout_sec: float
    cancel_event: threading.Event = field(default_factory=threading.Event)
    started: float = field(default_factory=time.monotonic)

    @property
    def deadline(self) -> float:
        return self.started + self.timeout_sec

    def remaining(self) -> float:
        return max(0.0, self.deadline - time.monotonic())

    def expired(self) -> bool:
        return time.monotonic() >= self.deadline

    def cancel(self) -> None:
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()


class StaticCodeAnalyzer(ABC):
    #: executable looked up on PATH
    binary: str

    @abstractmethod
    def tool_name(self) -> str: ...

    def is_available(self) -> bool:
        return shutil.which(self.binary) is not None

    @abstractmethod
    def analyze(self, workspace: Path, config_path: Path | None, ctx: RunContext) -> list[Issue]:
        """Run the tool against ``workspace`` and return normalized issues.

        Raises ``ToolExecutionError`` when the tool could not produce a
        usable run. Must not write into ``workspace``.
        """
