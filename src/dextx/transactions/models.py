"""Data models for transaction processing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .status import TransactionStatus


BUILD_FAILED_REASON = "Failed to build transaction."
SIGN_FAILED_REASON = "Failed to sign transaction."
SUBMIT_FAILED_REASON = "Failed to submit transaction."

LOVELACE = "lovelace"


@dataclass(frozen=True)
class PayToAddress:
    """A single transaction output requested by the caller."""

    address: str
    assets: Dict[str, int]
    datum: Optional[Dict[str, Any]] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    is_inline_datum: bool = False

    def __post_init__(self) -> None:
        if not self.address:
            raise ValueError("address must not be empty")
        if not self.assets:
            raise ValueError("at least one asset is required")
        for unit, quantity in self.assets.items():
            if isinstance(quantity, bool) or not isinstance(quantity, int):
                raise ValueError(f"quantity for {unit} must be an integer")
            if quantity < 0:
                raise ValueError(f"quantity for {unit} must not be negative")

    @property
    def lovelace(self) -> int:
        return self.assets.get(LOVELACE, 0)


@dataclass(frozen=True)
class TransactionErrorRecord:
    step: TransactionStatus
    reason: str
    cause: object

    def as_dict(self) -> Dict[str, Any]:
        return {
            "step": self.step.value,
            "reason": self.reason,
            "cause": str(self.cause),
        }
