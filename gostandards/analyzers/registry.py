from __future__ import annotations

import logging
from typing import Iterable

from gostandards.core.errors import ToolUnavailableError

from .base import StaticCodeAnalyzer

logger = logging.getLogger(__name__)


class AnalyzerRegistry:
    """Tools that are installed and enabled, keyed by tool name.

    Candidates whose binary cannot be found are dropped here, once, with a
    warning; they are reported by ``unavailable()``.
    """

    def __init__(self, analyzers: Iterable[StaticCodeAnalyzer], check_available: bool = True):
        self._by_name: dict[str, StaticCodeAnalyzer] = {}
        self._unavailable: dict[str, str] = {}
        for a in analyzers:
            if check_available and not a.is_available():
                err = ToolUnavailableError(a.tool_name(), f"{a.binary} not found in PATH")
                self._unavailable[a.tool_name()] = err.reason
                logger.warning("Skipping %s", err, extra={"tool": a.tool_name()})
                continue
            self._by_name[a.tool_name()] = a
            logger.info("Initialized %s", a.tool_name(), extra={"tool": a.tool_name()})

        if not self._by_name:
            logger.warning("No analysis tools available; analyses will report zero issues")

    def list(self) -> list[str]:
        return sorted(self._by_name.keys())

    def unavailable(self) -> dict[str, str]:
        return dict(self._unavailable)

    def pick(self, selected: list[str] | None) -> list[StaticCodeAnalyzer]:
        if not selected:
            return [self._by_name[k] for k in self.list()]
        return [self._by_name[n] for n in selected if n in self._by_name]
