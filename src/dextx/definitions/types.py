"""Typed nodes of a datum definition tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .constants import DatumParameterKey


@dataclass(frozen=True)
class BytesField:
    key: DatumParameterKey


@dataclass(frozen=True)
class IntField:
    key: DatumParameterKey


@dataclass(frozen=True)
class ConstructorField:
    """Tagged node; the tag is either fixed or read from a parameter."""

    constructor: Union[int, DatumParameterKey]
    fields: Tuple["DefinitionField", ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.constructor, bool):
            raise ValueError("constructor tag must be an integer or parameter")
        if isinstance(self.constructor, int) and self.constructor < 0:
            raise ValueError("constructor tag must not be negative")
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def has_fixed_tag(self) -> bool:
        return isinstance(self.constructor, int)


DefinitionField = Union[BytesField, IntField, ConstructorField]
