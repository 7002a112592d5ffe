"""Error taxonomy for the analysis pipeline.

Fatal errors (``AnalysisError`` subclasses) abort an analysis call before or
instead of running tools. Tool errors (``ToolError`` subclasses) are absorbed
by the orchestrator and only reduce the set of contributing tools.
"""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for errors that abort an analysis call."""


class InputError(AnalysisError):
    """The request is invalid (no input mode, conflicting modes, bad paths)."""


class WorkAreaError(AnalysisError):
    """A temporary work area could not be created or populated."""


class ConfigNotFoundError(AnalysisError):
    """No template artifact exists for the requested standard."""


class ConfigWriteError(AnalysisError):
    """A custom config artifact could not be written."""


class ToolError(Exception):
    """Base class for per-tool failures. Never aborts an analysis."""

    def __init__(self, tool: str, message: str):
        super().__init__(f"{tool}: {message}")
        self.tool = tool
        self.reason = message


class ToolUnavailableError(ToolError):
    pass


class ToolExecutionError(ToolError):
    pass


class OutputParseError(ToolError):
    pass


class CommandCancelledError(Exception):
    """Raised by ``run_cmd`` when the shared cancellation event fires."""
