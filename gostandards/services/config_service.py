from __future__ import annotations

import hashlib
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from gostandards.core.config import settings
from gostandards.core.errors import ConfigNotFoundError, ConfigWriteError

logger = logging.getLogger(__name__)

# repository checkout root (gostandards/services/config_service.py -> ../../..)
_INSTALL_DIR = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class ResolvedConfig:
    path: Path
    content_hash: str = ""


@dataclass(frozen=True)
class ConfigTemplate:
    name: str
    display_name: str
    description: str
    level: str


TEMPLATES: tuple[ConfigTemplate, ...] = (
    ConfigTemplate(
        "strict",
        "Strict Mode",
        "Highest standards for critical systems (complexity <= 5, coverage >= 85%)",
        "strict",
    ),
    ConfigTemplate(
        "standard",
        "Standard Mode",
        "Balanced standards for general projects (complexity <= 10, coverage >= 70%)",
        "standard",
    ),
    ConfigTemplate(
        "relaxed",
        "Relaxed Mode",
        "Basic standards for prototypes (complexity <= 15, coverage >= 60%)",
        "relaxed",
    ),
)


class ConfigService:
    """Maps a standard name (or custom config text) to a config artifact on disk."""

    @staticmethod
    def template_candidates(standard: str) -> list[Path]:
        name = f"{standard}.yaml"
        dirs: list[Path] = []
        if settings.TEMPLATES_DIR:
            dirs.append(Path(settings.TEMPLATES_DIR))
        dirs += [
            Path("configs") / "templates",
            Path("..") / "configs" / "templates",
            _INSTALL_DIR / "configs" / "templates",
        ]
        return [d / name for d in dirs]

    @staticmethod
    def resolve(standard: str, custom_config: str | None = None) -> ResolvedConfig:
        if standard == "custom":
            return ConfigService.write_custom(custom_config or "")

        candidates = ConfigService.template_candidates(standard)
        for p in candidates:
            if p.is_file():
                return ResolvedConfig(path=p.resolve())

        tried = ", ".join(str(p) for p in candidates)
        raise ConfigNotFoundError(f"template not found: {standard} (tried: {tried})")

    @staticmethod
    def write_custom(content: str) -> ResolvedConfig:
        digest = hashlib.sha256(content.encode("utf-8")).hexdigest()
        root = Path(settings.TEMP_DIR)
        target = root / f"config-{digest[:8]}.yaml"

        if target.exists():
            logger.debug("Reusing custom config %s", target)
            return ResolvedConfig(path=target.resolve(), content_hash=digest)

        tmp_name: str | None = None
        try:
            root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=".config-", suffix=".tmp", dir=root)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            # identical content under an identical name: a concurrent
            # writer that got here first is harmlessly replaced
            os.replace(tmp_name, target)
            tmp_name = None
        except OSError as e:
            raise ConfigWriteError(f"failed to write custom config: {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.info("Wrote custom config %s", target)
        return ResolvedConfig(path=target.resolve(), content_hash=digest)

    @staticmethod
    def list_templates() -> list[dict]:
        out = []
        for t in TEMPLATES:
            available = any(p.is_file() for p in ConfigService.template_candidates(t.name))
            out.append(
                {
                    "name": t.name,
                    "display_name": t.display_name,
                    "description": t.description,
                    "level": t.level,
                    "available": available,
                }
            )
        return out
