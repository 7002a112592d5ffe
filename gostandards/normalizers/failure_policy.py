from __future__ import annotations


def is_real_failure(tool: str, exit_code: int, stdout: str) -> bool:
    tool = (tool or "").lower()

    # golangci-lint exits non-zero when it finds issues; only a silent
    # non-zero exit means the run itself broke
    if tool == "golangci-lint":
        return exit_code != 0 and not stdout.strip()

    # go vet exits 1 with diagnostics; output that does not parse just
    # contributes no issues
    if tool == "govet":
        return False

    return exit_code != 0
