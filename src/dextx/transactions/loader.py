"""Load payment files into structured data."""

from __future__ import annotations

from pathlib import Path
from typing import List

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

from pydantic import ValidationError

from ..config import PaymentEntry, PaymentsFile, format_validation_errors
from ..definitions import ORDER_DEFINITION, DatumError, DefinitionBuilder
from .exceptions import PaymentFormatError
from .models import PayToAddress


def load_payments(path: Path) -> List[PayToAddress]:
    """Read ``[[payments]]`` tables from the TOML file at *path*.

    A ``[payments.datum]`` table holds order parameters and is filled into
    the order datum definition.
    """

    path = Path(path)
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise PaymentFormatError(path=path, message="payments file not found") from exc
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise PaymentFormatError(path=path, message=f"invalid TOML ({exc})") from exc

    try:
        document = PaymentsFile.model_validate(data)
    except ValidationError as exc:
        raise PaymentFormatError(path=path, message=format_validation_errors(exc)) from exc

    builder = DefinitionBuilder(ORDER_DEFINITION)
    return [
        _to_payment(path, index, entry, builder)
        for index, entry in enumerate(document.payments)
    ]


def _to_payment(
    path: Path, index: int, entry: PaymentEntry, builder: DefinitionBuilder
) -> PayToAddress:
    datum = None
    if entry.datum is not None:
        try:
            datum = builder.push_parameters(entry.datum)
        except DatumError as exc:
            raise PaymentFormatError(
                path=path, message=f"payments[{index}].datum: {exc}"
            ) from exc
    return PayToAddress(
        address=entry.address,
        assets=dict(entry.assets),
        datum=datum,
        metadata=dict(entry.metadata),
        is_inline_datum=entry.inline_datum,
    )
