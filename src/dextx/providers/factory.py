"""Construct wallet providers from configuration."""

from __future__ import annotations

from ..config.models import WalletConfig
from ..transactions.status import TransactionStatus
from .base import BaseWalletProvider
from .dry_run import DryRunWalletProvider


def build_provider(config: WalletConfig) -> BaseWalletProvider:
    provider = config.provider
    if provider.kind == "dry-run":
        fail_at = TransactionStatus(provider.fail_at.capitalize()) if provider.fail_at else None
        return DryRunWalletProvider(
            config.address,
            provider.network,
            fail_at=fail_at,
            fail_reason=provider.fail_reason,
        )
    raise ValueError(f"Unsupported provider kind: {provider.kind!r}")
