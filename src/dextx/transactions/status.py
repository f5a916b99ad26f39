"""Transaction lifecycle states."""

from __future__ import annotations

from enum import Enum


class TransactionStatus(Enum):
    BUILDING = "Building"
    SIGNING = "Signing"
    SUBMITTING = "Submitting"
    SUBMITTED = "Submitted"
    ERRORED = "Errored"

    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset({TransactionStatus.SUBMITTED, TransactionStatus.ERRORED})

# Order of the success path; ERRORED sits outside it.
SUCCESS_PATH = (
    TransactionStatus.BUILDING,
    TransactionStatus.SIGNING,
    TransactionStatus.SUBMITTING,
    TransactionStatus.SUBMITTED,
)
