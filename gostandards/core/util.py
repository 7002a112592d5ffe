from __future__ import annotations

import subprocess
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from gostandards.core.errors import CommandCancelledError

# How often a running child is checked against cancellation and the deadline
_POLL_SEC = 0.1


@dataclass
class CmdResult:
    exit_code: int
    stdout: str
    stderr: str


def run_cmd(
    cmd: Sequence[str],
    cwd: Path,
    timeout_sec: float = 60,
    cancel: threading.Event | None = None,
) -> CmdResult:
    """Run ``cmd`` and capture its output.

    The child is killed when ``cancel`` is set (``CommandCancelledError``) or
    when ``timeout_sec`` elapses (``subprocess.TimeoutExpired``).
    """
    p = subprocess.Popen(
        list(cmd),
        cwd=str(cwd),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    deadline = time.monotonic() + max(timeout_sec, 0)
    while True:
        try:
            out, err = p.communicate(timeout=_POLL_SEC)
            return CmdResult(p.returncode, out or "", err or "")
        except subprocess.TimeoutExpired:
            if cancel is not None and cancel.is_set():
                _kill(p)
                raise CommandCancelledError(f"cancelled: {' '.join(cmd)}")
            if time.monotonic() >= deadline:
                _kill(p)
                raise subprocess.TimeoutExpired(list(cmd), timeout_sec)


def _kill(p: subprocess.Popen) -> None:
    p.kill()
    # reap the child and close its pipes
    p.communicate()
