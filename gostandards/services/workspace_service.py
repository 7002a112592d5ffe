from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Iterator

from gostandards.core.config import settings
from gostandards.core.errors import WorkAreaError
from gostandards.domain.schemas import AnalysisRequest

logger = logging.getLogger(__name__)

SNIPPET_FILENAME = "main.go"

# never descended into when counting sources
_SKIP_DIRS = {"vendor", "node_modules", "testdata"}


def _noop() -> None:
    return None


class WorkArea:
    """Filesystem root the tools run against, plus its release action.

    Use as a context manager; ``release`` runs exactly once on any exit.
    """

    def __init__(self, root: Path, release: Callable[[], None] = _noop, owned: bool = False):
        self.root = root
        self.owned = owned
        self._release = release
        self._released = False

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._release()

    def __enter__(self) -> WorkArea:
        return self

    def __exit__(self, *exc) -> None:
        self.release()


class WorkspaceService:
    """Turns an analysis request into a WorkArea."""

    @staticmethod
    def temp_root() -> Path:
        return Path(settings.TEMP_DIR)

    @staticmethod
    def resolve(request: AnalysisRequest) -> WorkArea:
        mode = request.input_mode()

        if mode == "project":
            return WorkArea(Path(request.project_dir).resolve())

        if mode == "file":
            return WorkArea(Path(request.file_path).resolve().parent)

        return WorkspaceService.snippet_work_area(request.code or "")

    @staticmethod
    def snippet_work_area(code: str) -> WorkArea:
        temp_dir: Path | None = None
        try:
            root = WorkspaceService.temp_root()
            root.mkdir(parents=True, exist_ok=True)
            temp_dir = Path(tempfile.mkdtemp(prefix="snippet-", dir=root)).resolve()
            (temp_dir / SNIPPET_FILENAME).write_text(code, encoding="utf-8")
        except OSError as e:
            if temp_dir is not None:
                shutil.rmtree(temp_dir, ignore_errors=True)
            raise WorkAreaError(f"failed to prepare snippet work area: {e}") from e

        def cleanup() -> None:
            shutil.rmtree(temp_dir, ignore_errors=True)
            logger.debug("Removed work area %s", temp_dir)

        return WorkArea(temp_dir, release=cleanup, owned=True)


def iter_go_files(root: Path) -> Iterator[Path]:
    for p in sorted(root.rglob("*.go")):
        rel_parts = p.relative_to(root).parts[:-1]
        if any(part in _SKIP_DIRS or part.startswith(".") for part in rel_parts):
            continue
        if p.is_file():
            yield p


def count_go_files(root: Path) -> int:
    return sum(1 for _ in iter_go_files(root))


def count_go_lines(root: Path) -> int:
    total = 0
    for p in iter_go_files(root):
        try:
            total += len(p.read_text(encoding="utf-8", errors="replace").splitlines())
        except OSError:
            logger.debug("Could not read %s", p)
    return total
