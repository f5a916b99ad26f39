"""VyFinance order datum."""

from __future__ import annotations

from ..constants import DatumParameterKey
from ..types import BytesField, ConstructorField, IntField


ORDER_DEFINITION = ConstructorField(
    constructor=0,
    fields=(
        BytesField(DatumParameterKey.SenderPubKeyHash),
        ConstructorField(
            constructor=DatumParameterKey.Action,
            fields=(IntField(DatumParameterKey.MinReceive),),
        ),
    ),
)
