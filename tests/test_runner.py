"""Tests for the success-path transaction driver."""

from __future__ import annotations

import asyncio
from typing import List

from dextx.providers import DryRunWalletProvider
from dextx.transactions import (
    DexTransaction,
    PayToAddress,
    TransactionStatus,
    process_transaction,
)


PAYMENTS = [
    PayToAddress(address="addr_test1qpool", assets={"lovelace": 4_000_000}),
    PayToAddress(
        address="addr_test1qpool",
        assets={"lovelace": 2_000_000, "f66d78b4a3cb3d37afa0ec36461e51ecbde00f26c8f0a68f94b6988069555344": 10},
        metadata={"674": {"msg": ["swap"]}},
    ),
]


def test_process_transaction_walks_success_path() -> None:
    statuses: List[TransactionStatus] = []
    provider = DryRunWalletProvider("addr_test1qsender", "preprod")
    tx = DexTransaction(provider).on_status_change(lambda t: statuses.append(t.status))

    result = asyncio.run(process_transaction(tx, PAYMENTS))

    assert result is tx
    assert statuses == [
        TransactionStatus.SIGNING,
        TransactionStatus.SUBMITTING,
        TransactionStatus.SUBMITTED,
    ]
    assert tx.is_signed is True
    assert tx.hash is not None and len(tx.hash) == 64
    assert provider.submitted == [tx.hash]


def test_process_transaction_stops_at_first_failure() -> None:
    statuses: List[TransactionStatus] = []
    provider = DryRunWalletProvider(
        "addr_test1qsender", fail_at=TransactionStatus.SIGNING, fail_reason="ledger locked"
    )
    tx = DexTransaction(provider).on_status_change(lambda t: statuses.append(t.status))

    asyncio.run(process_transaction(tx, PAYMENTS))

    assert statuses == [TransactionStatus.SIGNING, TransactionStatus.ERRORED]
    assert tx.error.step is TransactionStatus.SIGNING
    assert str(tx.error.cause) == "ledger locked"
    assert tx.hash is None
    assert provider.submitted == []


def test_process_transaction_build_failure_never_signs() -> None:
    provider = DryRunWalletProvider("addr_test1qsender", fail_at=TransactionStatus.BUILDING)
    tx = DexTransaction(provider)

    asyncio.run(process_transaction(tx, PAYMENTS))

    assert tx.status is TransactionStatus.ERRORED
    assert tx.error.step is TransactionStatus.BUILDING
    assert tx.is_signed is False
    assert tx.provider_data is None
