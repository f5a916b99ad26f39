"""Tests for order datum definitions."""

from __future__ import annotations

import pytest

from dextx.definitions import (
    ORDER_DEFINITION,
    BytesField,
    ConstructorField,
    DatumError,
    DatumParameterKey,
    DefinitionBuilder,
    IntField,
    deserialize_definition,
    serialize_definition,
)


SENDER = "5b6e4a7c1f0d2e3a9b8c7d6e5f4a3b2c1d0e9f8a7b6c5d4e3f2a1b0c"


def test_order_definition_wire_shape() -> None:
    assert serialize_definition(ORDER_DEFINITION) == {
        "constructor": 0,
        "fields": [
            {"bytes": "SenderPubKeyHash"},
            {"constructor": "Action", "fields": [{"int": "MinReceive"}]},
        ],
    }


def test_deserialize_definition_restores_nodes() -> None:
    node = deserialize_definition(serialize_definition(ORDER_DEFINITION))
    assert node == ORDER_DEFINITION
    assert isinstance(node.fields[0], BytesField)
    assert isinstance(node.fields[1], ConstructorField)
    assert node.fields[1].fields == (IntField(DatumParameterKey.MinReceive),)


def test_deserialize_definition_reports_location() -> None:
    with pytest.raises(DatumError) as exc:
        deserialize_definition(
            {"constructor": 0, "fields": [{"bytes": "SenderPubKeyHash"}, {"int": "Nope"}]}
        )
    assert str(exc.value).startswith("fields[1].int:")


def test_deserialize_definition_rejects_unknown_node() -> None:
    with pytest.raises(DatumError):
        deserialize_definition({"list": []})


def test_constructor_tag_must_not_be_negative() -> None:
    with pytest.raises(ValueError):
        ConstructorField(constructor=-1)


def test_push_parameters_fills_order_datum() -> None:
    builder = DefinitionBuilder(ORDER_DEFINITION)

    datum = builder.push_parameters(
        {
            DatumParameterKey.SenderPubKeyHash: SENDER.upper(),
            "Action": 3,
            DatumParameterKey.MinReceive: 1_500_000,
        }
    )

    assert datum == {
        "constructor": 0,
        "fields": [
            {"bytes": SENDER},
            {"constructor": 3, "fields": [{"int": 1_500_000}]},
        ],
    }


def test_push_parameters_accepts_raw_bytes() -> None:
    datum = DefinitionBuilder(ORDER_DEFINITION).push_parameters(
        {"SenderPubKeyHash": bytes.fromhex(SENDER), "Action": 0, "MinReceive": 1}
    )
    assert datum["fields"][0] == {"bytes": SENDER}


def test_push_parameters_reports_missing_parameter() -> None:
    with pytest.raises(DatumError) as exc:
        DefinitionBuilder(ORDER_DEFINITION).push_parameters(
            {"SenderPubKeyHash": SENDER, "Action": 0}
        )
    assert "MinReceive" in str(exc.value)
    assert exc.value.location == "fields[1].fields[0]"


@pytest.mark.parametrize(
    "params",
    [
        {"SenderPubKeyHash": "xyz", "Action": 0, "MinReceive": 1},
        {"SenderPubKeyHash": SENDER, "Action": "0", "MinReceive": 1},
        {"SenderPubKeyHash": SENDER, "Action": -1, "MinReceive": 1},
        {"SenderPubKeyHash": SENDER, "Action": 0, "MinReceive": True},
        {"SenderPubKeyHash": SENDER, "Action": 0, "MinReceive": 1, "Unknown": 1},
    ],
)
def test_push_parameters_rejects_bad_values(params) -> None:
    with pytest.raises(DatumError):
        DefinitionBuilder(ORDER_DEFINITION).push_parameters(params)


def test_pull_parameters_reads_filled_datum() -> None:
    builder = DefinitionBuilder(ORDER_DEFINITION)
    datum = {
        "constructor": 0,
        "fields": [
            {"bytes": SENDER},
            {"constructor": 1, "fields": [{"int": 42}]},
        ],
    }

    assert builder.pull_parameters(datum) == {
        DatumParameterKey.SenderPubKeyHash: SENDER,
        DatumParameterKey.Action: 1,
        DatumParameterKey.MinReceive: 42,
    }


def test_pull_parameters_checks_fixed_tag() -> None:
    datum = {
        "constructor": 1,
        "fields": [{"bytes": SENDER}, {"constructor": 0, "fields": [{"int": 42}]}],
    }
    with pytest.raises(DatumError, match="expected constructor 0"):
        DefinitionBuilder(ORDER_DEFINITION).pull_parameters(datum)


def test_pull_parameters_checks_field_order() -> None:
    datum = {
        "constructor": 0,
        "fields": [{"constructor": 0, "fields": [{"int": 42}]}, {"bytes": SENDER}],
    }
    with pytest.raises(DatumError) as exc:
        DefinitionBuilder(ORDER_DEFINITION).pull_parameters(datum)
    assert exc.value.location == "fields[0]"


def test_pull_parameters_checks_field_count() -> None:
    datum = {"constructor": 0, "fields": [{"bytes": SENDER}]}
    with pytest.raises(DatumError, match="expected 2 field"):
        DefinitionBuilder(ORDER_DEFINITION).pull_parameters(datum)


def test_repeated_parameter_must_agree() -> None:
    definition = ConstructorField(
        constructor=0,
        fields=(IntField(DatumParameterKey.BatcherFee), IntField(DatumParameterKey.BatcherFee)),
    )
    builder = DefinitionBuilder(definition)

    with pytest.raises(DatumError, match="conflicting"):
        builder.pull_parameters({"constructor": 0, "fields": [{"int": 1}, {"int": 2}]})
    assert builder.pull_parameters({"constructor": 0, "fields": [{"int": 2}, {"int": 2}]}) == {
        DatumParameterKey.BatcherFee: 2
    }


def test_parameter_kinds() -> None:
    assert DefinitionBuilder(ORDER_DEFINITION).parameter_kinds() == {
        DatumParameterKey.SenderPubKeyHash: "bytes",
        DatumParameterKey.Action: "int",
        DatumParameterKey.MinReceive: "int",
    }
