"""Wallet provider that builds transactions in memory without a network."""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ..transactions.status import TransactionStatus
from .base import BaseWalletProvider
from .exceptions import ProviderError

if TYPE_CHECKING:  # pragma: no cover
    from ..transactions.lifecycle import DexTransaction
    from ..transactions.models import PayToAddress


LOGGER = logging.getLogger(__name__)

FAILABLE_STEPS = (
    TransactionStatus.BUILDING,
    TransactionStatus.SIGNING,
    TransactionStatus.SUBMITTING,
)


@dataclass
class DryRunDraft:
    """Provider-owned state stored in ``transaction.provider_data``."""

    network: str
    change_address: str
    outputs: List[Dict[str, Any]] = field(default_factory=list)
    witness: Optional[str] = None

    def body(self) -> Dict[str, Any]:
        return {
            "network": self.network,
            "change_address": self.change_address,
            "outputs": self.outputs,
        }


class DryRunWalletProvider(BaseWalletProvider):
    """Deterministic provider for local runs.

    The transaction id is the SHA-256 digest of the canonical JSON body, so
    the same payments always produce the same id. *fail_at* makes the
    matching step raise :class:`ProviderError` with *fail_reason*.
    """

    def __init__(
        self,
        address: str,
        network: str = "mainnet",
        *,
        fail_at: Optional[TransactionStatus] = None,
        fail_reason: str = "simulated provider failure",
    ):
        if fail_at is not None and fail_at not in FAILABLE_STEPS:
            raise ValueError(f"cannot simulate a failure while {fail_at.value}")
        self._address = address
        self.network = network
        self.fail_at = fail_at
        self.fail_reason = fail_reason
        self.submitted: List[str] = []

    @property
    def is_wallet_loaded(self) -> bool:
        return bool(self._address)

    def address(self) -> str:
        return self._address

    async def payments_for_transaction(
        self, transaction: "DexTransaction", payments: Sequence["PayToAddress"]
    ) -> None:
        self._maybe_fail(TransactionStatus.BUILDING)
        if not payments:
            raise ProviderError("no payments given")

        outputs = []
        for index, payment in enumerate(payments):
            output = _serialize_payment(payment)
            try:
                _digest(output)
            except (TypeError, ValueError) as exc:
                raise ProviderError(f"payment {index} cannot be encoded: {exc}") from exc
            outputs.append(output)

        draft = transaction.provider_data
        if draft is None:
            draft = DryRunDraft(network=self.network, change_address=self._address)
            transaction.provider_data = draft
        draft.outputs.extend(outputs)
        LOGGER.debug("draft now holds %d output(s)", len(draft.outputs))

    async def sign_transaction(self, transaction: "DexTransaction") -> None:
        self._maybe_fail(TransactionStatus.SIGNING)
        draft = self._draft(transaction)
        if not draft.outputs:
            raise ProviderError("transaction has no outputs to sign")
        draft.witness = _digest({"signer": self._address, "body": draft.body()})

    async def submit_transaction(self, transaction: "DexTransaction") -> str:
        self._maybe_fail(TransactionStatus.SUBMITTING)
        draft = self._draft(transaction)
        if draft.witness is None:
            raise ProviderError("transaction has no witness")
        tx_id = _digest(draft.body())
        self.submitted.append(tx_id)
        LOGGER.info("dry-run submit of %s on %s", tx_id, self.network)
        return tx_id

    def _draft(self, transaction: "DexTransaction") -> DryRunDraft:
        draft = transaction.provider_data
        if not isinstance(draft, DryRunDraft):
            raise ProviderError("transaction was not built by this provider")
        return draft

    def _maybe_fail(self, step: TransactionStatus) -> None:
        if self.fail_at is step:
            raise ProviderError(self.fail_reason)


def _serialize_payment(payment: "PayToAddress") -> Dict[str, Any]:
    return {
        "address": payment.address,
        "assets": dict(sorted(payment.assets.items())),
        "datum": payment.datum,
        "inline_datum": payment.is_inline_datum,
        "metadata": payment.metadata,
    }


def _digest(payload: Dict[str, Any]) -> str:
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
