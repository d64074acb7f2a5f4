"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_float, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_transport import DEFAULT_TIMEOUT_SECONDS, TransportConfig
from .logging import configure_logging
from .reconciler import ReconcilerConfig, get_reconciler_config

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "ConfigurationError",
    "MissingConfigurationError",
    "ReconcilerConfig",
    "TransportConfig",
    "configure_logging",
    "get_reconciler_config",
    "optional_env_float",
    "require_env_vars",
]
