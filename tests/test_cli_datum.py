"""CLI tests for datum commands."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from dextx.cli import app


runner = CliRunner()


def test_datum_schema() -> None:
    result = runner.invoke(app, ["datum", "schema"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["constructor"] == 0
    assert payload["fields"][1] == {"constructor": "Action", "fields": [{"int": "MinReceive"}]}


def test_datum_build() -> None:
    result = runner.invoke(
        app,
        [
            "datum",
            "build",
            "-p",
            "SenderPubKeyHash=0011",
            "-p",
            "Action=2",
            "-p",
            "MinReceive=500",
        ],
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "constructor": 0,
        "fields": [{"bytes": "0011"}, {"constructor": 2, "fields": [{"int": 500}]}],
    }


def test_datum_build_rejects_non_integer() -> None:
    result = runner.invoke(
        app,
        ["datum", "build", "-p", "SenderPubKeyHash=00", "-p", "Action=swap", "-p", "MinReceive=1"],
    )

    assert result.exit_code == 2


def test_datum_build_reports_missing_parameter() -> None:
    result = runner.invoke(app, ["datum", "build", "-p", "SenderPubKeyHash=00"])

    assert result.exit_code == 2


def test_datum_parse(tmp_path: Path) -> None:
    path = tmp_path / "datum.json"
    path.write_text(
        json.dumps(
            {
                "constructor": 0,
                "fields": [{"bytes": "beef"}, {"constructor": 1, "fields": [{"int": 9}]}],
            }
        )
    )

    result = runner.invoke(app, ["datum", "parse", str(path)])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "Action": 1,
        "MinReceive": 9,
        "SenderPubKeyHash": "beef",
    }


def test_datum_parse_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "datum.json"
    path.write_text("{")

    result = runner.invoke(app, ["datum", "parse", str(path)])

    assert result.exit_code == 4
