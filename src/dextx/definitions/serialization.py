"""Conversion between definition trees and their JSON-like wire shape."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .constants import DatumParameterKey
from .exceptions import DatumError
from .types import BytesField, ConstructorField, DefinitionField, IntField


def serialize_definition(node: DefinitionField) -> Dict[str, Any]:
    if isinstance(node, BytesField):
        return {"bytes": node.key.value}
    if isinstance(node, IntField):
        return {"int": node.key.value}
    if isinstance(node, ConstructorField):
        tag = node.constructor
        return {
            "constructor": tag if isinstance(tag, int) else tag.value,
            "fields": [serialize_definition(child) for child in node.fields],
        }
    raise TypeError(f"Unsupported definition node: {type(node)!r}")


def deserialize_definition(data: Mapping[str, Any], location: str = "") -> DefinitionField:
    if not isinstance(data, Mapping):
        raise DatumError(location, "definition node must be a table")

    if "constructor" in data:
        fields = data.get("fields", [])
        if not isinstance(fields, list):
            raise DatumError(_join(location, "fields"), "must be a list")
        children = tuple(
            deserialize_definition(child, f"{_join(location, 'fields')}[{index}]")
            for index, child in enumerate(fields)
        )
        return ConstructorField(
            constructor=_parse_tag(data["constructor"], _join(location, "constructor")),
            fields=children,
        )
    if "bytes" in data:
        return BytesField(_parse_key(data["bytes"], _join(location, "bytes")))
    if "int" in data:
        return IntField(_parse_key(data["int"], _join(location, "int")))
    raise DatumError(location, "expected one of constructor, bytes or int")


def _parse_tag(value: Any, location: str):
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise DatumError(location, "constructor tag must not be negative")
        return value
    return _parse_key(value, location)


def _parse_key(value: Any, location: str) -> DatumParameterKey:
    try:
        return DatumParameterKey.parse(value)
    except ValueError as exc:
        raise DatumError(location, str(exc)) from exc


def _join(location: str, name: str) -> str:
    return f"{location}.{name}" if location else name
