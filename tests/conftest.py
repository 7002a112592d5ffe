import threading
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from gostandards.analyzers.base import RunContext, StaticCodeAnalyzer
from gostandards.analyzers.registry import AnalyzerRegistry
from gostandards.core.config import settings
from gostandards.core.errors import ToolExecutionError
from gostandards.domain.models import Issue
from gostandards.main import app


@pytest.fixture(autouse=True)
def _use_tmp_dir(tmp_path, monkeypatch):
    """Redirect snippet work areas and custom configs to a temp directory."""
    monkeypatch.setattr(settings, "TEMP_DIR", str(tmp_path / "tmp"))


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def go_project(tmp_path) -> Path:
    """A small Go module on disk."""
    root = tmp_path / "project"
    (root / "pkg").mkdir(parents=True)
    (root / "go.mod").write_text("module example.com/demo\n\ngo 1.21\n", encoding="utf-8")
    (root / "main.go").write_text('package main\n\nfunc main() {\n\tprintln("hi")\n}\n', encoding="utf-8")
    (root / "pkg" / "util.go").write_text("package pkg\n\nfunc Add(a, b int) int { return a + b }\n", encoding="utf-8")
    return root


class FakeAnalyzer(StaticCodeAnalyzer):
    """Stands in for an external tool; records the work area it was given."""

    binary = "fake"

    def __init__(self, name, issues=(), error=None, wait_for_cancel=False):
        self.name = name
        self.issues = list(issues)
        self.error = error
        self.wait_for_cancel = wait_for_cancel
        self.seen_workspace = None
        self.seen_config = None
        self.workspace_existed = None

    def tool_name(self) -> str:
        return self.name

    def is_available(self) -> bool:
        return True

    def analyze(self, workspace: Path, config_path, ctx: RunContext) -> list[Issue]:
        self.seen_workspace = workspace
        self.seen_config = config_path
        self.workspace_existed = workspace.is_dir()
        if self.wait_for_cancel:
            # behaves like run_cmd: blocks until cancelled
            if not ctx.cancel_event.wait(timeout=10):
                raise AssertionError("never cancelled")
            raise ToolExecutionError(self.name, "cancelled")
        if self.error is not None:
            raise self.error
        return list(self.issues)


def make_issue(file="main.go", line=1, column=1, severity="warning", category="logic", source="fake", **kw) -> Issue:
    return Issue(
        file=file,
        line=line,
        column=column,
        severity=severity,
        category=category,
        source=source,
        rule=kw.pop("rule", source),
        message=kw.pop("message", "something odd"),
        **kw,
    )


@pytest.fixture
def fake_registry():
    def build(*analyzers):
        return AnalyzerRegistry(analyzers)

    return build


@pytest.fixture
def cancel_event():
    return threading.Event()
