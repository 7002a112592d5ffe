import os

from pydantic import BaseModel


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    # Snippet work areas and custom config artifacts live here
    TEMP_DIR: str = os.getenv("TEMP_DIR", "tmp")

    # Optional override searched before the built-in template locations
    TEMPLATES_DIR: str | None = os.getenv("TEMPLATES_DIR")

    # Analysis
    ANALYSIS_TIMEOUT_SEC: int = int(os.getenv("ANALYSIS_TIMEOUT_SEC", "300"))
    CONCURRENT_LIMIT: int = int(os.getenv("CONCURRENT_LIMIT", "10"))

    # Tools
    GOLANGCI_LINT_ENABLED: bool = _env_bool("GOLANGCI_LINT_ENABLED", "true")
    GOLANGCI_LINT_TIMEOUT_SEC: int = int(os.getenv("GOLANGCI_LINT_TIMEOUT_SEC", "300"))
    GOVET_ENABLED: bool = _env_bool("GOVET_ENABLED", "true")

    SERVER_VERSION: str = os.getenv("SERVER_VERSION", "1.0.0")


settings = Settings()
