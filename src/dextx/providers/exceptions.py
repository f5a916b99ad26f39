"""Wallet provider errors."""

from __future__ import annotations

from ..exceptions import DextxError


class ProviderError(DextxError):
    """Raised by a wallet provider when it cannot complete a request."""
