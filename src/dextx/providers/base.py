"""Contract every wallet backend offers to a transaction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from ..transactions.lifecycle import DexTransaction
    from ..transactions.models import PayToAddress


class BaseWalletProvider(ABC):
    """Builds, signs and submits transactions on behalf of a wallet.

    Implementations keep their intermediate state in
    ``transaction.provider_data`` and report failures by raising. They must
    never write ``status`` or ``error`` on the transaction.
    """

    @property
    @abstractmethod
    def is_wallet_loaded(self) -> bool:
        ...

    @abstractmethod
    def address(self) -> str:
        ...

    @abstractmethod
    async def payments_for_transaction(
        self, transaction: "DexTransaction", payments: Sequence["PayToAddress"]
    ) -> None:
        ...

    @abstractmethod
    async def sign_transaction(self, transaction: "DexTransaction") -> None:
        ...

    @abstractmethod
    async def submit_transaction(self, transaction: "DexTransaction") -> str:
        """Broadcast the signed transaction and return its id."""
