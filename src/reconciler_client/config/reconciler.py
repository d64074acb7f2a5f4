"""Reconciler service configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_float, require_env_vars
from .errors import ConfigurationError
from .http_transport import DEFAULT_TIMEOUT_SECONDS, TransportConfig

RECONCILER_URL_ENV = "RECONCILER_URL"
RECONCILER_TIMEOUT_ENV = "RECONCILER_TIMEOUT_SECONDS"


@dataclass(frozen=True, slots=True)
class ReconcilerConfig:
    """Base URL of the reconciler service plus transport settings."""

    url: str
    transport: TransportConfig = field(default_factory=TransportConfig)

    def __post_init__(self) -> None:
        normalized = self.url.strip().rstrip("/")
        if not normalized:
            raise ConfigurationError("Reconciler URL must not be blank")
        object.__setattr__(self, "url", normalized)


def get_reconciler_config(*, transport: TransportConfig | None = None) -> ReconcilerConfig:
    values = require_env_vars((RECONCILER_URL_ENV,))
    timeout = optional_env_float(RECONCILER_TIMEOUT_ENV, DEFAULT_TIMEOUT_SECONDS)
    return ReconcilerConfig(
        url=values[RECONCILER_URL_ENV],
        transport=transport or TransportConfig(timeout_seconds=timeout),
    )
