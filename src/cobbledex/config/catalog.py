"""Catalog and progress source configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from cobbledex.domain.catalog import DEFAULT_RECORD_SUFFIX

from .env import optional_float_env, require_env_vars
from .errors import ConfigurationError

CATALOG_DIR_ENV: Final[str] = "COBBLEDEX_CATALOG_DIR"
RECORD_SUFFIX_ENV: Final[str] = "COBBLEDEX_RECORD_SUFFIX"
HTTP_TIMEOUT_ENV: Final[str] = "COBBLEDEX_HTTP_TIMEOUT"

DEFAULT_HTTP_TIMEOUT_SECONDS: Final[float] = 10.0


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Location and file naming of the partitioned species tree."""

    root_dir: Path
    record_suffix: str = DEFAULT_RECORD_SUFFIX

    def resolve_root_dir(self) -> Path:
        return self.root_dir.expanduser().resolve()


@dataclass(frozen=True, slots=True)
class ProgressSourceConfig:
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS


def _record_suffix() -> str:
    suffix = os.getenv(RECORD_SUFFIX_ENV)
    if suffix is None or not suffix.strip():
        return DEFAULT_RECORD_SUFFIX
    suffix = suffix.strip()
    if not suffix.startswith("."):
        raise ConfigurationError(f"{RECORD_SUFFIX_ENV} must start with '.': {suffix!r}")
    return suffix


def get_catalog_config(*, root_dir: Path | None = None) -> CatalogConfig:
    """Build the catalog configuration, preferring an explicit ``root_dir``."""

    if root_dir is None:
        values = require_env_vars((CATALOG_DIR_ENV,))
        root_dir = Path(values[CATALOG_DIR_ENV])
    return CatalogConfig(root_dir=root_dir, record_suffix=_record_suffix())


def get_progress_config() -> ProgressSourceConfig:
    timeout = optional_float_env(HTTP_TIMEOUT_ENV, DEFAULT_HTTP_TIMEOUT_SECONDS)
    if timeout <= 0:
        raise ConfigurationError(f"{HTTP_TIMEOUT_ENV} must be positive")
    return ProgressSourceConfig(http_timeout_seconds=timeout)
