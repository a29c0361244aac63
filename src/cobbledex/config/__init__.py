"""Application configuration helpers."""

from __future__ import annotations

from .catalog import (
    CatalogConfig,
    ProgressSourceConfig,
    get_catalog_config,
    get_progress_config,
)
from .env import require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .logging import configure_logging

__all__ = [
    "CatalogConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "ProgressSourceConfig",
    "configure_logging",
    "get_catalog_config",
    "get_progress_config",
    "require_env_var",
    "require_env_vars",
]
