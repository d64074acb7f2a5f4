"""Public interface for the reconciler adapter."""

from __future__ import annotations

from .client import AsyncReconcilerClient, ReconcilerClient
from .errors import (
    ReconcilerAPIError,
    ReconcilerDecodeError,
    ReconcilerTransportError,
    UnexpectedStatusError,
)
from .schema import (
    Cluster,
    Component,
    Configuration,
    KymaConfig,
    Metadata,
    RuntimeInput,
    State,
    StatusChange,
)

__all__ = [
    "AsyncReconcilerClient",
    "Cluster",
    "Component",
    "Configuration",
    "KymaConfig",
    "Metadata",
    "ReconcilerAPIError",
    "ReconcilerClient",
    "ReconcilerDecodeError",
    "ReconcilerTransportError",
    "RuntimeInput",
    "State",
    "StatusChange",
    "UnexpectedStatusError",
]
