import json

import pytest

from gostandards.analyzers.base import RawToolResult
from gostandards.core.errors import OutputParseError
from gostandards.normalizers.base import NormalizerContext
from gostandards.normalizers.golangci_normalizer import GolangciLintNormalizer, map_category, map_severity


def _raw(payload) -> RawToolResult:
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return RawToolResult(tool="golangci-lint", exit_code=1, stdout=text, stderr="")


def _finding(linter="gofmt", severity="warning", filename="main.go", line=3, column=1, text="File is not gofmt-ed"):
    return {
        "FromLinter": linter,
        "Text": text,
        "Severity": severity,
        "SourceLines": ["func main(){"],
        "Pos": {"Filename": filename, "Line": line, "Column": column},
    }


def test_gofmt_warning_maps_to_format_warning(tmp_path):
    ctx = NormalizerContext(workspace_dir=tmp_path)
    issues = GolangciLintNormalizer().normalize(_raw({"Issues": [_finding()]}), ctx)

    assert len(issues) == 1
    i = issues[0]
    assert i.severity == "warning"
    assert i.category == "format"
    assert i.source == "golangci-lint"
    assert i.rule == "gofmt"
    assert (i.file, i.line, i.column) == ("main.go", 3, 1)
    assert i.code == "func main(){"


def test_absolute_paths_made_relative(tmp_path):
    abs_file = str(tmp_path.resolve() / "internal" / "store.go")
    ctx = NormalizerContext(workspace_dir=tmp_path)
    issues = GolangciLintNormalizer().normalize(_raw({"Issues": [_finding(filename=abs_file)]}), ctx)
    assert issues[0].file == "internal/store.go"


def test_null_issues_means_no_findings(tmp_path):
    ctx = NormalizerContext(workspace_dir=tmp_path)
    assert GolangciLintNormalizer().normalize(_raw({"Issues": None}), ctx) == []


def test_empty_output_means_no_findings(tmp_path):
    ctx = NormalizerContext(workspace_dir=tmp_path)
    assert GolangciLintNormalizer().normalize(_raw(""), ctx) == []


def test_malformed_output_raises_parse_error(tmp_path):
    ctx = NormalizerContext(workspace_dir=tmp_path)
    with pytest.raises(OutputParseError):
        GolangciLintNormalizer().normalize(_raw("level=error msg=\"typechecking error\""), ctx)


@pytest.mark.parametrize(
    "raw, expected",
    [("error", "error"), ("ERROR", "error"), ("warning", "warning"), ("", "info"), (None, "info"), ("fatal", "info")],
)
def test_map_severity(raw, expected):
    assert map_severity(raw) == expected


@pytest.mark.parametrize(
    "linter, expected",
    [
        ("goimports", "format"),
        ("gosec", "security"),
        ("staticcheck", "logic"),
        ("errcheck", "error-handling"),
        ("ineffassign", "performance"),
        ("unused", "dead-code"),
        ("gocognit", "complexity"),
        ("dupl", "duplication"),
        ("goconst", "maintainability"),
        ("revive", "other"),
    ],
)
def test_map_category(linter, expected):
    assert map_category(linter) == expected
