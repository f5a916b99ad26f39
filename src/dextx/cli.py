"""Typer CLI entrypoint for dextx."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import List

import typer

from .config import load_wallet_config
from .definitions import (
    ORDER_DEFINITION,
    DatumError,
    DefinitionBuilder,
    serialize_definition,
)
from .exceptions import ConfigError, DextxError
from .providers import build_provider
from .transactions import (
    DexTransaction,
    PaymentFormatError,
    TransactionStatus,
    load_payments,
    process_transaction,
)


EXIT_SUCCESS = 0
EXIT_VALIDATION_ERROR = 2
EXIT_TRANSACTION_ERROR = 3
EXIT_IO_ERROR = 4
EXIT_CONFIG_ERROR = 5


LOGGER = logging.getLogger(__name__)


app = typer.Typer(help="DEX transaction lifecycle tools")
tx_app = typer.Typer(help="Transaction commands")
datum_app = typer.Typer(help="Order datum commands")
app.add_typer(tx_app, name="tx")
app.add_typer(datum_app, name="datum")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Base command callback reserved for shared options."""

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            force=True,
        )


@tx_app.command("run")
def tx_run(
    payments_path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    config_path: Path = typer.Option(
        Path("wallet.toml"),
        "--config",
        "-c",
        help="Path to wallet configuration file or directory",
    ),
) -> None:
    """Build, sign and submit a transaction paying the given outputs."""

    try:
        config = load_wallet_config(config_path)
        payments = load_payments(payments_path)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(EXIT_CONFIG_ERROR) from exc
    except PaymentFormatError as exc:
        typer.echo(f"Payments error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc

    transaction = DexTransaction(build_provider(config))
    transaction.on_finally(_log_outcome)

    try:
        asyncio.run(process_transaction(transaction, payments))
    except DextxError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(EXIT_TRANSACTION_ERROR) from exc

    payload = {
        "status": transaction.status.value,
        "hash": transaction.hash,
        "is_signed": transaction.is_signed,
        "error": transaction.error.as_dict() if transaction.error else None,
    }
    typer.echo(json.dumps(payload, indent=2))

    if transaction.status is TransactionStatus.ERRORED:
        raise typer.Exit(EXIT_VALIDATION_ERROR)


@datum_app.command("schema")
def datum_schema() -> None:
    """Print the order datum definition."""

    typer.echo(json.dumps(serialize_definition(ORDER_DEFINITION), indent=2))


@datum_app.command("build")
def datum_build(
    params: List[str] = typer.Option(
        ...,
        "--param",
        "-p",
        help="Datum parameter as KEY=VALUE",
    ),
) -> None:
    """Fill the order datum definition with parameters."""

    builder = DefinitionBuilder(ORDER_DEFINITION)
    kinds = {key.value: kind for key, kind in builder.parameter_kinds().items()}
    parameters = {}
    for item in params:
        key, sep, value = item.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or not key:
            typer.echo(f"Invalid parameter {item!r}; expected KEY=VALUE", err=True)
            raise typer.Exit(EXIT_VALIDATION_ERROR)
        if kinds.get(key) == "int":
            try:
                parameters[key] = int(value)
            except ValueError:
                typer.echo(f"Parameter {key} must be an integer", err=True)
                raise typer.Exit(EXIT_VALIDATION_ERROR) from None
        else:
            parameters[key] = value

    try:
        datum = builder.push_parameters(parameters)
    except DatumError as exc:
        typer.echo(f"Datum error: {exc}", err=True)
        raise typer.Exit(EXIT_VALIDATION_ERROR) from exc

    typer.echo(json.dumps(datum, indent=2))


@datum_app.command("parse")
def datum_parse(
    datum_path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
) -> None:
    """Read order parameters back out of a datum JSON file."""

    try:
        datum = json.loads(datum_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        typer.echo(f"Failed to read datum {datum_path}: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc

    try:
        parameters = DefinitionBuilder(ORDER_DEFINITION).pull_parameters(datum)
    except DatumError as exc:
        typer.echo(f"Datum error: {exc}", err=True)
        raise typer.Exit(EXIT_VALIDATION_ERROR) from exc

    payload = {key.value: value for key, value in parameters.items()}
    typer.echo(json.dumps(payload, indent=2, sort_keys=True))


def _log_outcome(transaction: DexTransaction) -> None:
    if transaction.error is not None:
        LOGGER.info("transaction failed while %s: %s", transaction.error.step.value, transaction.error.cause)
    else:
        LOGGER.info("transaction %s submitted", transaction.hash)
