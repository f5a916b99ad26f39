"""Parameter names used by order datum definitions."""

from __future__ import annotations

from enum import Enum


class DatumParameterKey(Enum):
    SenderPubKeyHash = "SenderPubKeyHash"
    SenderStakingKeyHash = "SenderStakingKeyHash"
    ReceiverPubKeyHash = "ReceiverPubKeyHash"
    ReceiverStakingKeyHash = "ReceiverStakingKeyHash"
    PoolIdentifier = "PoolIdentifier"
    Action = "Action"
    MinReceive = "MinReceive"
    SwapInAmount = "SwapInAmount"
    SwapInTokenPolicyId = "SwapInTokenPolicyId"
    SwapInTokenAssetName = "SwapInTokenAssetName"
    SwapOutTokenPolicyId = "SwapOutTokenPolicyId"
    SwapOutTokenAssetName = "SwapOutTokenAssetName"
    BatcherFee = "BatcherFee"
    DepositFee = "DepositFee"

    @classmethod
    def parse(cls, value: object) -> "DatumParameterKey":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown datum parameter {value!r}") from None
