from __future__ import annotations

from gostandards.analyzers.base import StaticCodeAnalyzer
from gostandards.analyzers.golangci_lint import GolangciLintAnalyzer
from gostandards.analyzers.govet import GoVetAnalyzer
from gostandards.analyzers.registry import AnalyzerRegistry
from gostandards.core.config import Settings, settings


def configured_analyzers(cfg: Settings = settings) -> list[StaticCodeAnalyzer]:
    """Tool variants switched on in the settings, before availability checks."""
    analyzers: list[StaticCodeAnalyzer] = []
    if cfg.GOLANGCI_LINT_ENABLED:
        analyzers.append(GolangciLintAnalyzer(timeout_sec=cfg.GOLANGCI_LINT_TIMEOUT_SEC))
    if cfg.GOVET_ENABLED:
        analyzers.append(GoVetAnalyzer())
    return analyzers


def build_analyzer_registry(cfg: Settings = settings) -> AnalyzerRegistry:
    return AnalyzerRegistry(configured_analyzers(cfg))
