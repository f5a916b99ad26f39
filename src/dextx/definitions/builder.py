"""Fill definitions with parameters and read parameters back out of datums."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from .constants import DatumParameterKey
from .exceptions import DatumError
from .types import BytesField, ConstructorField, DefinitionField, IntField


ParameterValue = Union[int, str, bytes]
Parameters = Mapping[Union[DatumParameterKey, str], ParameterValue]


class DefinitionBuilder:
    """Turns a definition tree into a concrete datum and back.

    A concrete datum uses the same node shapes as the definition with the
    parameter names replaced by values: ``{"bytes": <hex>}``,
    ``{"int": <int>}`` and ``{"constructor": <int>, "fields": [...]}``.
    """

    def __init__(self, definition: ConstructorField):
        self.definition = definition

    def parameter_kinds(self) -> Dict[DatumParameterKey, str]:
        """Map every parameter the definition reads to ``"bytes"`` or ``"int"``."""

        kinds: Dict[DatumParameterKey, str] = {}
        _collect_kinds(self.definition, kinds)
        return kinds

    def push_parameters(self, parameters: Parameters) -> Dict[str, Any]:
        resolved = _normalize_parameters(parameters)
        return _fill(self.definition, resolved, "")

    def pull_parameters(self, datum: Mapping[str, Any]) -> Dict[DatumParameterKey, ParameterValue]:
        found: Dict[DatumParameterKey, ParameterValue] = {}
        _extract(self.definition, datum, found, "")
        return found


def _collect_kinds(node: DefinitionField, kinds: Dict[DatumParameterKey, str]) -> None:
    if isinstance(node, BytesField):
        kinds[node.key] = "bytes"
    elif isinstance(node, IntField):
        kinds[node.key] = "int"
    else:
        if not node.has_fixed_tag:
            kinds[node.constructor] = "int"
        for child in node.fields:
            _collect_kinds(child, kinds)


def _normalize_parameters(parameters: Parameters) -> Dict[DatumParameterKey, ParameterValue]:
    resolved: Dict[DatumParameterKey, ParameterValue] = {}
    for key, value in parameters.items():
        try:
            resolved[DatumParameterKey.parse(key)] = value
        except ValueError as exc:
            raise DatumError("", str(exc)) from exc
    return resolved


def _fill(
    node: DefinitionField,
    parameters: Dict[DatumParameterKey, ParameterValue],
    location: str,
) -> Dict[str, Any]:
    if isinstance(node, BytesField):
        return {"bytes": _as_hex(_require(parameters, node.key, location), node.key, location)}
    if isinstance(node, IntField):
        return {"int": _as_int(_require(parameters, node.key, location), node.key, location)}

    if node.has_fixed_tag:
        tag = node.constructor
    else:
        tag = _as_int(_require(parameters, node.constructor, location), node.constructor, location)
        if tag < 0:
            raise DatumError(location, f"{node.constructor.value} must not be negative")
    return {
        "constructor": tag,
        "fields": [
            _fill(child, parameters, f"{location}.fields[{index}]" if location else f"fields[{index}]")
            for index, child in enumerate(node.fields)
        ],
    }


def _extract(
    node: DefinitionField,
    datum: Any,
    found: Dict[DatumParameterKey, ParameterValue],
    location: str,
) -> None:
    if not isinstance(datum, Mapping):
        raise DatumError(location, "expected a table")

    if isinstance(node, BytesField):
        value = datum.get("bytes")
        if not isinstance(value, str):
            raise DatumError(location, "expected a bytes node")
        _record(found, node.key, _as_hex(value, node.key, location), location)
        return
    if isinstance(node, IntField):
        value = datum.get("int")
        if isinstance(value, bool) or not isinstance(value, int):
            raise DatumError(location, "expected an int node")
        _record(found, node.key, value, location)
        return

    tag = datum.get("constructor")
    fields = datum.get("fields")
    if isinstance(tag, bool) or not isinstance(tag, int) or not isinstance(fields, list):
        raise DatumError(location, "expected a constructor node")
    if node.has_fixed_tag:
        if tag != node.constructor:
            raise DatumError(location, f"expected constructor {node.constructor}, found {tag}")
    else:
        _record(found, node.constructor, tag, location)
    if len(fields) != len(node.fields):
        raise DatumError(location, f"expected {len(node.fields)} field(s), found {len(fields)}")
    for index, (child, value) in enumerate(zip(node.fields, fields)):
        _extract(child, value, found, f"{location}.fields[{index}]" if location else f"fields[{index}]")


def _record(
    found: Dict[DatumParameterKey, ParameterValue],
    key: DatumParameterKey,
    value: ParameterValue,
    location: str,
) -> None:
    if key in found and found[key] != value:
        raise DatumError(location, f"conflicting values for {key.value}")
    found[key] = value


def _require(
    parameters: Dict[DatumParameterKey, ParameterValue], key: DatumParameterKey, location: str
) -> ParameterValue:
    try:
        return parameters[key]
    except KeyError:
        raise DatumError(location, f"missing parameter {key.value}") from None


def _as_int(value: Any, key: DatumParameterKey, location: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DatumError(location, f"{key.value} must be an integer")
    return value


def _as_hex(value: Any, key: DatumParameterKey, location: str) -> str:
    if isinstance(value, bytes):
        return value.hex()
    if not isinstance(value, str):
        raise DatumError(location, f"{key.value} must be hex encoded bytes")
    try:
        return bytes.fromhex(value).hex()
    except ValueError:
        raise DatumError(location, f"{key.value} is not valid hex") from None
