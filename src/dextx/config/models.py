"""Pydantic models describing configuration and payment files."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, StrictInt, model_validator


Network = Literal["mainnet", "preprod", "preview"]
FailStep = Literal["building", "signing", "submitting"]


class ProviderConfig(BaseModel):
    kind: Literal["dry-run"] = "dry-run"
    network: Network = "mainnet"
    fail_at: Optional[FailStep] = None
    fail_reason: str = "simulated provider failure"


class WalletConfig(BaseModel):
    address: str
    provider: ProviderConfig = Field(default_factory=ProviderConfig)

    @model_validator(mode="after")
    def ensure_address(self) -> "WalletConfig":
        if not self.address.strip():
            raise ValueError("address must not be empty")
        return self


class PaymentEntry(BaseModel):
    address: str
    assets: Dict[str, StrictInt]
    datum: Optional[Dict[str, Any]] = None
    inline_datum: bool = False
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_fields(self) -> "PaymentEntry":
        if not self.address.strip():
            raise ValueError("address must not be empty")
        if not self.assets:
            raise ValueError("assets must not be empty")
        for unit, quantity in self.assets.items():
            if quantity < 0:
                raise ValueError(f"quantity for {unit} must not be negative")
        return self


class PaymentsFile(BaseModel):
    payments: List[PaymentEntry]

    @model_validator(mode="after")
    def ensure_non_empty(self) -> "PaymentsFile":
        if not self.payments:
            raise ValueError("at least one payment must be defined")
        return self
