"""Wallet providers."""

from .base import BaseWalletProvider
from .dry_run import DryRunDraft, DryRunWalletProvider
from .exceptions import ProviderError
from .factory import build_provider

__all__ = [
    "BaseWalletProvider",
    "DryRunDraft",
    "DryRunWalletProvider",
    "ProviderError",
    "build_provider",
]
