"""Reconciliation status vocabulary reported by the reconciler service.

The service owns the state machine; clients only observe it. Status values are
kept as plain strings on the wire models and classified here, so a value the
service introduces later maps to ``UNKNOWN`` instead of failing validation.
"""

from __future__ import annotations

from enum import StrEnum
from logging import getLogger

log = getLogger(__name__)


class ReconciliationStatus(StrEnum):
    RECONCILE_PENDING = "reconcile_pending"
    RECONCILING = "reconciling"
    READY = "ready"
    ERROR = "error"
    RECONCILE_FAILED = "reconcile_failed"
    DELETE_PENDING = "delete_pending"
    DELETING = "deleting"
    DELETED = "deleted"
    DELETE_ERROR = "delete_error"
    UNKNOWN = "unknown"


FINAL_STATUSES = frozenset(
    {
        ReconciliationStatus.READY,
        ReconciliationStatus.ERROR,
        ReconciliationStatus.RECONCILE_FAILED,
        ReconciliationStatus.DELETED,
        ReconciliationStatus.DELETE_ERROR,
    }
)

FAILURE_STATUSES = frozenset(
    {
        ReconciliationStatus.ERROR,
        ReconciliationStatus.RECONCILE_FAILED,
        ReconciliationStatus.DELETE_ERROR,
    }
)


def classify_status(value: str | None) -> ReconciliationStatus:
    """Map a raw status string onto the known vocabulary.

    ``None`` and unrecognised values both yield ``ReconciliationStatus.UNKNOWN``.
    """

    if value is None:
        return ReconciliationStatus.UNKNOWN
    try:
        return ReconciliationStatus(value)
    except ValueError:
        log.debug("Unrecognised reconciliation status %r", value)
        return ReconciliationStatus.UNKNOWN


def is_final(value: str | None) -> bool:
    return classify_status(value) in FINAL_STATUSES


def is_failure(value: str | None) -> bool:
    return classify_status(value) in FAILURE_STATUSES


__all__ = [
    "FAILURE_STATUSES",
    "FINAL_STATUSES",
    "ReconciliationStatus",
    "classify_status",
    "is_failure",
    "is_final",
]
