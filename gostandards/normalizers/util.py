from pathlib import Path


def get_snippet(workspace: Path, rel_file: str, line: int | None, context: int = 2) -> str | None:
    if not rel_file or not line or line < 1:
        return None

    fp = workspace / rel_file
    if not fp.is_file():
        return None

    try:
        lines = fp.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError:
        return None

    if line > len(lines):
        return None

    start = max(1, line - context)
    end = min(len(lines), line + context)
    chunk = []
    for i in range(start, end + 1):
        prefix = ">> " if i == line else "   "
        chunk.append(f"{prefix}{i:>4}: {lines[i-1]}")
    return "\n".join(chunk)


def get_rel_path(workspace: Path, filename: str) -> str:
    """
    Convert a tool-reported filename to a workspace-relative posix path.

    Handles three cases:
    1. Absolute path inside workspace  → strip workspace prefix
    2. Relative path (./x.go, pkg/x.go) → resolve against workspace, strip prefix
    3. Path outside the workspace       → returned unchanged (posix)
    """
    if not filename:
        return ""

    f = Path(filename.replace("\\", "/"))
    ws = workspace.resolve()
    candidate = f if f.is_absolute() else ws / f

    try:
        return candidate.resolve().relative_to(ws).as_posix()
    except ValueError:
        return f.as_posix()
