"""Command-line front end: analyze Go code and exit non-zero on errors.

Exit codes:
    0  analysis succeeded and found no error-severity issues
    1  analysis failed, or error-severity issues were found
    2  invalid command-line arguments
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from gostandards.core.config import settings
from gostandards.core.containers import build_analyzer_registry
from gostandards.core.errors import AnalysisError
from gostandards.core.logging import setup_logging
from gostandards.domain.models import AnalysisResult
from gostandards.domain.schemas import AnalysisRequest
from gostandards.services.analysis_service import AnalysisService
from gostandards.services.report_service import ReportService

APP_NAME = "go-standards"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Go code quality analysis with multiple standards.",
    )
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--file", help="Analyze a single Go file")
    src.add_argument("--project", help="Analyze an entire Go project directory")
    src.add_argument("--code", help="Analyze a Go code snippet")

    ap.add_argument(
        "--standard",
        default="standard",
        choices=["strict", "standard", "relaxed"],
        help="Analysis standard level (default: standard)",
    )
    ap.add_argument("--config", help="Path to a custom golangci-lint config file (implies the custom standard)")
    ap.add_argument("--format", default="json", choices=["json", "markdown"], help="Output format (default: json)")
    ap.add_argument("--tools", nargs="+", help="Only run these tools (e.g. golangci-lint govet)")
    ap.add_argument("--no-suggestions", action="store_true", help="Skip improvement suggestions")
    ap.add_argument("--verbose", action="store_true", help="Log progress to stderr")
    ap.add_argument("--version", action="version", version=f"{APP_NAME} version {settings.SERVER_VERSION}")
    return ap


def exit_code(result: AnalysisResult) -> int:
    if result.status != "success":
        return 1
    return 1 if result.summary.error_count > 0 else 0


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if not (args.file or args.project or args.code):
        ap.error("must specify one of --file, --project, or --code")

    # stdout carries the report
    setup_logging(stream=sys.stderr, default_level="INFO" if args.verbose else "WARNING")

    custom_config = None
    standard = args.standard
    if args.config:
        try:
            custom_config = Path(args.config).read_text(encoding="utf-8")
        except OSError as e:
            ap.error(f"cannot read config file: {e}")
        standard = "custom"

    request = AnalysisRequest(
        code=args.code,
        file_path=args.file,
        project_dir=args.project,
        standard=standard,
        config=custom_config,
        format=args.format,
        analyzers=args.tools,
        include_suggestions=not args.no_suggestions,
    )

    service = AnalysisService(build_analyzer_registry())
    try:
        result = service.analyze(request)
    except AnalysisError as e:
        print(f"Analysis failed: {e}", file=sys.stderr)
        result = AnalysisResult.failed(standard, e)

    print(ReportService.render(result, args.format, issue_limit=None))
    return exit_code(result)


if __name__ == "__main__":
    sys.exit(main())
