"""Transaction lifecycle errors."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..exceptions import DextxError


class TransactionError(DextxError):
    """Base class for transaction-related issues."""


class TransactionContractError(TransactionError):
    """Raised when a caller drives a transaction out of order."""


class TransactionInFlightError(TransactionContractError):
    """Raised when an operation starts while another one is still pending."""

    def __init__(self, pending: str, requested: str):
        self.pending = pending
        self.requested = requested
        super().__init__(f"cannot {requested} while {pending} is in flight")


class ListenerError(TransactionError):
    """Raised after a status replay in which one or more listeners failed."""

    def __init__(self, errors: List[Exception]):
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} transaction listener(s) failed")


@dataclass
class PaymentFormatError(TransactionError):
    path: Path
    message: str

    def __post_init__(self) -> None:
        super().__init__(f"{self.message} ({self.path})")
