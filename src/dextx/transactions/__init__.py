"""Transaction lifecycle and payment loading."""

from .exceptions import (
    ListenerError,
    PaymentFormatError,
    TransactionContractError,
    TransactionError,
    TransactionInFlightError,
)
from .lifecycle import DexTransaction
from .loader import load_payments
from .models import PayToAddress, TransactionErrorRecord
from .runner import process_transaction
from .status import TERMINAL_STATUSES, TransactionStatus

__all__ = [
    "DexTransaction",
    "TransactionStatus",
    "TERMINAL_STATUSES",
    "PayToAddress",
    "TransactionErrorRecord",
    "TransactionError",
    "TransactionContractError",
    "TransactionInFlightError",
    "ListenerError",
    "PaymentFormatError",
    "load_payments",
    "process_transaction",
]
