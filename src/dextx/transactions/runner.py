"""Drive a transaction along the success path."""

from __future__ import annotations

import logging
from typing import Sequence

from .lifecycle import DexTransaction
from .models import PayToAddress
from .status import TransactionStatus


LOGGER = logging.getLogger(__name__)


async def process_transaction(
    transaction: DexTransaction, payments: Sequence[PayToAddress]
) -> DexTransaction:
    """Attach *payments*, sign and submit, advancing status between steps.

    Stops at the first recorded failure. Provider failures never raise;
    inspect ``transaction.status`` and ``transaction.error`` afterwards.
    """

    await transaction.pay_to_addresses(payments)
    if transaction.status is TransactionStatus.ERRORED:
        return transaction

    transaction.transition(TransactionStatus.SIGNING)
    await transaction.sign()
    if transaction.status is TransactionStatus.ERRORED:
        return transaction

    transaction.transition(TransactionStatus.SUBMITTING)
    await transaction.submit()
    if transaction.status is TransactionStatus.ERRORED:
        return transaction

    transaction.transition(TransactionStatus.SUBMITTED)
    LOGGER.info("transaction %s accepted", transaction.hash)
    return transaction
