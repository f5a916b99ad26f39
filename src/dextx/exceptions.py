"""Custom exception hierarchy for dextx."""

from __future__ import annotations

from pathlib import Path


class DextxError(Exception):
    """Base error for the dextx package."""


class ConfigError(DextxError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path.name}: {self.message}")
