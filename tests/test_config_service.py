from pathlib import Path

import pytest

from gostandards.core.config import settings
from gostandards.core.errors import ConfigNotFoundError, ConfigWriteError
from gostandards.services.config_service import ConfigService

CUSTOM = "linters:\n  enable:\n    - gofmt\n"


@pytest.mark.parametrize("standard", ["strict", "standard", "relaxed"])
def test_bundled_templates_resolve(standard):
    cfg = ConfigService.resolve(standard)
    assert cfg.path.name == f"{standard}.yaml"
    assert cfg.path.is_file()
    assert cfg.content_hash == ""


def test_templates_dir_override_wins(tmp_path, monkeypatch):
    tpl = tmp_path / "tpl"
    tpl.mkdir()
    (tpl / "strict.yaml").write_text("run:\n  timeout: 1m\n")
    monkeypatch.setattr(settings, "TEMPLATES_DIR", str(tpl))

    assert ConfigService.resolve("strict").path == (tpl / "strict.yaml").resolve()


def test_unknown_template_not_found():
    with pytest.raises(ConfigNotFoundError):
        ConfigService.resolve("paranoid")


def test_custom_config_is_content_addressed(tmp_path):
    first = ConfigService.resolve("custom", CUSTOM)
    second = ConfigService.resolve("custom", CUSTOM)

    assert first.path == second.path
    assert first.path.read_text(encoding="utf-8") == CUSTOM
    assert first.path.name == f"config-{first.content_hash[:8]}.yaml"
    assert len(first.content_hash) == 64
    assert [p.name for p in (tmp_path / "tmp").iterdir()] == [first.path.name]


def test_different_custom_configs_get_different_files():
    a = ConfigService.resolve("custom", CUSTOM)
    b = ConfigService.resolve("custom", CUSTOM + "  disable-all: true\n")
    assert a.path != b.path


def test_custom_write_failure(tmp_path, monkeypatch):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    monkeypatch.setattr(settings, "TEMP_DIR", str(blocker))

    with pytest.raises(ConfigWriteError):
        ConfigService.resolve("custom", CUSTOM)


def test_list_templates():
    names = [t["name"] for t in ConfigService.list_templates()]
    assert names == ["strict", "standard", "relaxed"]
    assert all(t["available"] for t in ConfigService.list_templates())


def test_bundled_templates_tighten_complexity():
    root = Path(__file__).resolve().parents[1] / "configs" / "templates"
    for name, limit in (("strict", 5), ("standard", 10), ("relaxed", 15)):
        assert f"min-complexity: {limit}" in (root / f"{name}.yaml").read_text()
