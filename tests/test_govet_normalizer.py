import pytest

from gostandards.analyzers.base import RawToolResult
from gostandards.normalizers.base import NormalizerContext
from gostandards.normalizers.govet_normalizer import GoVetNormalizer, categorize

VET_OUTPUT = """# example.com/demo
./main.go:5:2: fmt.Printf format %d has arg "x" of wrong type string
./pkg/util.go:12: unreachable code
this line is noise
vet: ./main.go:7:9: declaration of "err" shadows declaration at line 4
"""


def test_parses_lines_with_and_without_column(tmp_path):
    ctx = NormalizerContext(workspace_dir=tmp_path)
    raw = RawToolResult(tool="govet", exit_code=1, stdout="", stderr=VET_OUTPUT)

    issues = GoVetNormalizer().normalize(raw, ctx)

    assert [(i.file, i.line, i.column) for i in issues] == [
        ("main.go", 5, 2),
        ("pkg/util.go", 12, 0),
        ("main.go", 7, 9),
    ]
    assert all(i.severity == "warning" for i in issues)
    assert all(i.source == "govet" and i.rule == "govet" for i in issues)
    assert [i.category for i in issues] == ["format", "dead-code", "logic"]


def test_snippet_attached_when_file_present(tmp_path):
    (tmp_path / "main.go").write_text("package main\n\nfunc main() {\n\tvar p *int\n\t_ = *p\n}\n")
    ctx = NormalizerContext(workspace_dir=tmp_path)
    raw = RawToolResult(tool="govet", exit_code=1, stdout="./main.go:5:6: nil dereference\n", stderr="")

    issue = GoVetNormalizer().normalize(raw, ctx)[0]

    assert issue.category == "error-handling"
    assert ">>    5:" in issue.code


def test_unparseable_output_yields_nothing(tmp_path):
    ctx = NormalizerContext(workspace_dir=tmp_path)
    raw = RawToolResult(
        tool="govet",
        exit_code=1,
        stdout="",
        stderr="go: go.mod file not found in current directory or any parent directory\n",
    )
    assert GoVetNormalizer().normalize(raw, ctx) == []


@pytest.mark.parametrize(
    "message, expected",
    [
        ('declaration of "x" shadows declaration', "logic"),
        ("Printf call has arguments but no formatting directives", "format"),
        ("composite literal uses unkeyed fields", "style"),
        ("unreachable code", "dead-code"),
        ("possible nil pointer dereference", "error-handling"),
        ("self-assignment of x to x", "logic"),
    ],
)
def test_categorize(message, expected):
    assert categorize(message) == expected
