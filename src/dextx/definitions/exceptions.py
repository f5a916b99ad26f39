"""Errors raised while reading or filling datum definitions."""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import DextxError


@dataclass
class DatumError(DextxError):
    """Raised when a datum or definition does not match the expected shape."""

    location: str
    detail: str

    def __post_init__(self) -> None:
        if self.location:
            super().__init__(f"{self.location}: {self.detail}")
        else:
            super().__init__(self.detail)
