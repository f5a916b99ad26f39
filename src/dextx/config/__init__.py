"""Public configuration API."""

from .loader import ConfigFiles, format_validation_errors, load_wallet_config
from .models import PaymentEntry, PaymentsFile, ProviderConfig, WalletConfig

__all__ = [
    "ConfigFiles",
    "PaymentEntry",
    "PaymentsFile",
    "ProviderConfig",
    "WalletConfig",
    "format_validation_errors",
    "load_wallet_config",
]
