"""Functions for reading and validating configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Type

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

from pydantic import BaseModel, ValidationError

from ..exceptions import ConfigError
from .models import WalletConfig


class ConfigFiles:
    """Canonical configuration filenames."""

    WALLET = "wallet.toml"


def load_wallet_config(path: Path) -> WalletConfig:
    """Load the wallet configuration from *path*.

    *path* may be the file itself or a directory holding ``wallet.toml``.
    """

    path = Path(path)
    if path.is_dir():
        path = path / ConfigFiles.WALLET
    return _load_toml(path, WalletConfig)


def _load_toml(path: Path, model: Type[BaseModel]) -> Any:
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(path, "file not found") from exc
    except (tomllib.TOMLDecodeError, OSError) as exc:
        raise ConfigError(path, f"failed to read TOML: {exc}") from exc

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(path, format_validation_errors(exc)) from exc


def format_validation_errors(error: ValidationError) -> str:
    """Flatten pydantic errors into one `loc: msg; ...` line.

    Shared with the payments loader so both file kinds report the same way.
    """

    messages = []
    for err in error.errors(include_context=False):
        loc = _format_location(err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        if loc:
            messages.append(f"{loc}: {msg}")
        else:
            messages.append(msg)
    return "; ".join(messages)


def _format_location(loc: tuple[Any, ...]) -> str:
    if not loc:
        return ""

    parts: list[str] = []
    for entry in loc:
        if isinstance(entry, int):
            if not parts:
                parts.append(f"[{entry}]")
            else:
                parts[-1] = parts[-1] + f"[{entry}]"
        else:
            parts.append(str(entry))
    return ".".join(parts)
