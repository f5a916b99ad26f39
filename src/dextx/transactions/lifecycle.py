"""State machine driving one transaction through build, sign and submit."""

from __future__ import annotations

import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    List,
    Optional,
    Sequence,
    Tuple,
)

from .exceptions import (
    ListenerError,
    TransactionContractError,
    TransactionError,
    TransactionInFlightError,
)
from .models import (
    BUILD_FAILED_REASON,
    SIGN_FAILED_REASON,
    SUBMIT_FAILED_REASON,
    PayToAddress,
    TransactionErrorRecord,
)
from .status import SUCCESS_PATH, TransactionStatus

if TYPE_CHECKING:  # pragma: no cover
    from ..providers.base import BaseWalletProvider


LOGGER = logging.getLogger(__name__)

TransactionCallback = Callable[["DexTransaction"], None]
StatusPredicate = Callable[[TransactionStatus], bool]


def _status_in(*statuses: TransactionStatus) -> StatusPredicate:
    wanted = frozenset(statuses)
    return lambda status: status in wanted


class DexTransaction:
    """A single transaction built, signed and submitted through a wallet provider.

    The three operations (:meth:`pay_to_addresses`, :meth:`sign`,
    :meth:`submit`) check their preconditions when called and raise
    :class:`TransactionContractError` on misuse. The awaitable they return
    never raises for provider failures: those are recorded in :attr:`error`
    and move the transaction to ``ERRORED``.

    Successful operations leave :attr:`status` alone. Moving along the
    success path is the caller's job, through :meth:`transition`.
    """

    def __init__(self, wallet_provider: "BaseWalletProvider"):
        self.provider_data: Any = None

        self._wallet_provider = wallet_provider
        self._hash: Optional[str] = None
        self._is_signed = False
        self._error: Optional[TransactionErrorRecord] = None
        self._status = TransactionStatus.BUILDING
        self._listeners: List[TransactionCallback] = []
        self._pending: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"DexTransaction(status={self._status.value}, hash={self._hash!r}, "
            f"is_signed={self._is_signed})"
        )

    @property
    def wallet_provider(self) -> "BaseWalletProvider":
        return self._wallet_provider

    @property
    def hash(self) -> Optional[str]:
        return self._hash

    @property
    def is_signed(self) -> bool:
        return self._is_signed

    @property
    def error(self) -> Optional[TransactionErrorRecord]:
        return self._error

    @property
    def status(self) -> TransactionStatus:
        return self._status

    def transition(self, status: TransactionStatus) -> "DexTransaction":
        """Store *status* and replay every listener in registration order.

        Every listener runs even when an earlier one raises. Failures are
        collected and raised together as :class:`ListenerError` once the
        replay is over; the new status is kept either way.
        """

        self._check_transition(status)
        LOGGER.info("transaction %s -> %s", self._status.value, status.value)
        self._status = status
        self._notify()
        return self

    def pay_to_addresses(
        self, payments: Sequence[PayToAddress]
    ) -> Awaitable["DexTransaction"]:
        """Ask the provider to add *payments* as outputs of this transaction.

        The transaction must not be signed yet; further payments after
        signing would describe a different transaction.
        """

        payments = list(payments)
        self._check_payments()
        return self._pay_to_addresses(payments)

    def sign(self) -> Awaitable["DexTransaction"]:
        self._check_sign()
        return self._sign()

    def submit(self) -> Awaitable["DexTransaction"]:
        self._check_submit()
        return self._submit()

    def on_status_change(
        self,
        callback: TransactionCallback,
        when: Optional[StatusPredicate] = None,
    ) -> "DexTransaction":
        """Register *callback* for status writes, optionally filtered by *when*.

        Listeners only see writes made after registration; nothing is
        replayed for a late subscriber.
        """

        if when is None:
            self._listeners.append(callback)
            return self

        def listener(transaction: "DexTransaction") -> None:
            if when(transaction.status):
                callback(transaction)

        self._listeners.append(listener)
        return self

    def on_building(self, callback: TransactionCallback) -> "DexTransaction":
        return self.on_status_change(callback, _status_in(TransactionStatus.BUILDING))

    def on_signing(self, callback: TransactionCallback) -> "DexTransaction":
        return self.on_status_change(callback, _status_in(TransactionStatus.SIGNING))

    def on_submitting(self, callback: TransactionCallback) -> "DexTransaction":
        return self.on_status_change(callback, _status_in(TransactionStatus.SUBMITTING))

    def on_submitted(self, callback: TransactionCallback) -> "DexTransaction":
        return self.on_status_change(callback, _status_in(TransactionStatus.SUBMITTED))

    def on_error(self, callback: TransactionCallback) -> "DexTransaction":
        return self.on_status_change(callback, _status_in(TransactionStatus.ERRORED))

    def on_finally(self, callback: TransactionCallback) -> "DexTransaction":
        return self.on_status_change(
            callback,
            _status_in(TransactionStatus.SUBMITTED, TransactionStatus.ERRORED),
        )

    async def _pay_to_addresses(self, payments: List[PayToAddress]) -> "DexTransaction":
        LOGGER.debug("adding %d payment(s) to transaction", len(payments))
        ok, result = await self._call_provider(
            "add payments",
            self._check_payments,
            self._wallet_provider.payments_for_transaction,
            self,
            payments,
        )
        if not ok:
            self._fail(TransactionStatus.BUILDING, BUILD_FAILED_REASON, result)
        return self

    async def _sign(self) -> "DexTransaction":
        LOGGER.debug("signing transaction")
        ok, result = await self._call_provider(
            "sign", self._check_sign, self._wallet_provider.sign_transaction, self
        )
        if not ok:
            self._fail(TransactionStatus.SIGNING, SIGN_FAILED_REASON, result)
            return self
        self._is_signed = True
        return self

    async def _submit(self) -> "DexTransaction":
        LOGGER.debug("submitting transaction")
        ok, result = await self._call_provider(
            "submit", self._check_submit, self._wallet_provider.submit_transaction, self
        )
        if ok and not (isinstance(result, str) and result):
            ok, result = False, TransactionError(
                f"provider returned an invalid transaction id: {result!r}"
            )
        if not ok:
            self._fail(TransactionStatus.SUBMITTING, SUBMIT_FAILED_REASON, result)
            return self
        self._hash = result
        LOGGER.info("transaction submitted with hash %s", result)
        return self

    async def _call_provider(
        self,
        action: str,
        check: Callable[[], None],
        method: Callable[..., Awaitable[Any]],
        *args: Any,
    ) -> Tuple[bool, Any]:
        # Preconditions may have changed since the awaitable was created.
        # Nothing awaits between the claim and the try, so the claim is
        # always released.
        check()
        self._pending = action
        try:
            return True, await method(*args)
        except Exception as exc:
            return False, exc
        finally:
            self._pending = None

    def _fail(self, step: TransactionStatus, reason: str, cause: object) -> None:
        LOGGER.info("%s (%s)", reason, cause)
        self._error = TransactionErrorRecord(step=step, reason=reason, cause=cause)
        self.transition(TransactionStatus.ERRORED)

    def _notify(self) -> None:
        failures: List[Exception] = []
        for callback in list(self._listeners):
            try:
                callback(self)
            except Exception as exc:
                LOGGER.exception("transaction listener failed on %s", self._status.value)
                failures.append(exc)
        if failures:
            raise ListenerError(failures)

    def _check_payments(self) -> None:
        self._ensure_open("add payments")
        if self._is_signed:
            raise TransactionContractError("Cannot add payments to a signed transaction.")
        self._ensure_idle("add payments")

    def _check_sign(self) -> None:
        self._ensure_open("sign")
        if self._is_signed:
            raise TransactionContractError("Transaction was already signed.")
        self._ensure_idle("sign")

    def _check_submit(self) -> None:
        self._ensure_open("submit")
        if not self._is_signed:
            raise TransactionContractError("Must sign transaction before submitting.")
        if self._hash is not None:
            raise TransactionContractError("Transaction was already submitted.")
        self._ensure_idle("submit")

    def _ensure_open(self, action: str) -> None:
        if self._status.is_terminal():
            raise TransactionContractError(
                f"Cannot {action}: transaction is already {self._status.value}."
            )

    def _ensure_idle(self, action: str) -> None:
        if self._pending is not None:
            raise TransactionInFlightError(self._pending, action)

    def _check_transition(self, status: TransactionStatus) -> None:
        current = self._status
        if current.is_terminal():
            raise TransactionContractError(
                f"Cannot leave terminal status {current.value}."
            )
        if status is TransactionStatus.ERRORED:
            if self._error is None:
                raise TransactionContractError("Cannot enter Errored without an error record.")
            return
        if SUCCESS_PATH.index(status) <= SUCCESS_PATH.index(current):
            raise TransactionContractError(
                f"Cannot move from {current.value} to {status.value}."
            )
        if status is TransactionStatus.SUBMITTING and not self._is_signed:
            raise TransactionContractError("Cannot start submitting an unsigned transaction.")
        if status is TransactionStatus.SUBMITTED and self._hash is None:
            raise TransactionContractError("Cannot mark a transaction without hash as submitted.")
