"""Order datum definitions and the helpers that fill and read them."""

from .builder import DefinitionBuilder
from .constants import DatumParameterKey
from .exceptions import DatumError
from .serialization import deserialize_definition, serialize_definition
from .types import BytesField, ConstructorField, DefinitionField, IntField
from .vyfinance import ORDER_DEFINITION

__all__ = [
    "DefinitionBuilder",
    "DatumParameterKey",
    "DatumError",
    "BytesField",
    "IntField",
    "ConstructorField",
    "DefinitionField",
    "ORDER_DEFINITION",
    "serialize_definition",
    "deserialize_definition",
]
