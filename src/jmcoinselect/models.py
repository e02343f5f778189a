"""
Coin selection data models.
"""

from __future__ import annotations

import dataclasses
import math
from typing import Annotated

from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass

from jmcoinselect.constants import MAX_MONEY, TXIN_BASE_WEIGHT


@dataclasses.dataclass(frozen=True)
class FeeRate:
    """
    Fee rate in satoshis per virtual byte.

    One virtual byte is four weight units, so a fee for a weight is
    computed on the weight rounded up to whole vbytes. Fees always round
    up so a computed fee never underpays the rate.
    """

    sat_per_vb: float = 1.0

    def __post_init__(self) -> None:
        if self.sat_per_vb < 0 or not math.isfinite(self.sat_per_vb):
            raise ValueError(f"Invalid fee rate: {self.sat_per_vb} sat/vB")

    @classmethod
    def from_sat_per_vb(cls, sat_per_vb: float) -> FeeRate:
        return cls(float(sat_per_vb))

    @classmethod
    def from_sat_per_kvb(cls, sat_per_kvb: float) -> FeeRate:
        return cls(sat_per_kvb / 1000)

    @classmethod
    def from_sat_per_kwu(cls, sat_per_kwu: float) -> FeeRate:
        return cls(sat_per_kwu * 4 / 1000)

    def as_sat_vb(self) -> float:
        return self.sat_per_vb

    def fee_vb(self, vbytes: int) -> int:
        """Fee for the given virtual size"""
        return math.ceil(self.sat_per_vb * vbytes)

    def fee_wu(self, weight: int) -> int:
        """Fee for the given weight"""
        return self.fee_vb((weight + 3) // 4)

    def __str__(self) -> str:
        return f"{self.sat_per_vb} sat/vB"


@dataclass(frozen=True)
class Utxo:
    """Unspent output available for selection"""

    txid: str
    vout: Annotated[int, Field(ge=0)]
    value: Annotated[int, Field(ge=0, le=MAX_MONEY)]
    scriptpubkey: str = ""  # hex
    is_local: bool = True  # False for coins contributed by a counterparty

    @field_validator("txid")
    @classmethod
    def validate_txid(cls, v: str) -> str:
        if len(v) != 64:
            raise ValueError(f"txid must be 64 hex characters, got {len(v)}")
        bytes.fromhex(v)
        return v.lower()

    @field_validator("scriptpubkey")
    @classmethod
    def validate_scriptpubkey(cls, v: str) -> str:
        bytes.fromhex(v)
        return v.lower()

    @property
    def outpoint(self) -> str:
        return f"{self.txid}:{self.vout}"

    @property
    def script_bytes(self) -> bytes:
        return bytes.fromhex(self.scriptpubkey)


@dataclass(frozen=True)
class WeightedUtxo:
    """
    A UTXO together with the weight needed to satisfy its spending script.

    The satisfaction weight depends on the script type (e.g. signature and
    pubkey for P2WPKH) and is computed by the wallet layer.
    """

    utxo: Utxo
    satisfaction_weight: Annotated[int, Field(ge=0)]


@dataclass(frozen=True)
class WeightedScript:
    """
    Script receiving the change of a transaction.

    satisfaction_weight is the weight needed to spend an output locked to
    this script later on. Scripts from a foreign descriptor use 0.
    """

    scriptpubkey: str  # hex
    satisfaction_weight: Annotated[int, Field(ge=0)] = 0

    @field_validator("scriptpubkey")
    @classmethod
    def validate_scriptpubkey(cls, v: str) -> str:
        bytes.fromhex(v)
        return v.lower()

    @property
    def script_bytes(self) -> bytes:
        return bytes.fromhex(self.scriptpubkey)

    @classmethod
    def from_address(cls, address: str, satisfaction_weight: int = 0) -> WeightedScript:
        from jmcoinselect.script import address_to_scriptpubkey

        script = address_to_scriptpubkey(address)
        return cls(scriptpubkey=script.hex(), satisfaction_weight=satisfaction_weight)


@dataclasses.dataclass
class OutputGroup:
    """A weighted UTXO annotated with its spending cost at a fee rate"""

    weighted_utxo: WeightedUtxo
    # Fee for spending this UTXO at the fee rate of the selection
    fee: int
    # UTXO value minus fee, negative when spending costs more than the coin is worth
    effective_value: int

    @classmethod
    def from_weighted_utxo(cls, weighted_utxo: WeightedUtxo, fee_rate: FeeRate) -> OutputGroup:
        fee = fee_rate.fee_wu(TXIN_BASE_WEIGHT + weighted_utxo.satisfaction_weight)
        return cls(
            weighted_utxo=weighted_utxo,
            fee=fee,
            effective_value=weighted_utxo.utxo.value - fee,
        )

    @property
    def utxo(self) -> Utxo:
        return self.weighted_utxo.utxo

    @property
    def value(self) -> int:
        return self.weighted_utxo.utxo.value
