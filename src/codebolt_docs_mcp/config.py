"""Runtime configuration for the Codebolt docs MCP server."""

from dataclasses import dataclass
import logging
import os
from pathlib import Path


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_path(name: str) -> Path | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return Path(value.strip()).expanduser()


def _env_log_level(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        return default
    return logging.getLevelName(level)


@dataclass(frozen=True)
class DocsConfig:
    server_name: str
    catalog_path: Path | None
    log_level: int


def get_docs_config() -> DocsConfig:
    """Load server config from environment variables."""
    return DocsConfig(
        server_name=_env_str("CODEBOLT_DOCS_SERVER_NAME", "CodeboltDocs"),
        catalog_path=_env_path("CODEBOLT_DOCS_CATALOG_PATH"),
        log_level=_env_log_level("CODEBOLT_DOCS_LOG_LEVEL", logging.WARNING),
    )
