"""
Pytest configuration and fixtures for coin selection tests.
"""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from jmcoinselect.models import FeeRate, Utxo, WeightedScript, WeightedUtxo

# Signature (73) + pubkey (33) + their length prefixes (2)
P2WPKH_SATISFACTION_WEIGHT = 73 + 33 + 2
P2WPKH_SCRIPT = "0014" + "11" * 20

UtxoFactory = Callable[..., WeightedUtxo]


@pytest.fixture
def make_utxo() -> UtxoFactory:
    """Factory for P2WPKH weighted UTXOs. Each index gets its own txid."""

    def _make(value: int, index: int = 0, vout: int = 0, is_local: bool = True) -> WeightedUtxo:
        return WeightedUtxo(
            utxo=Utxo(
                txid=f"{index:064x}",
                vout=vout,
                value=value,
                scriptpubkey=P2WPKH_SCRIPT,
                is_local=is_local,
            ),
            satisfaction_weight=P2WPKH_SATISFACTION_WEIGHT,
        )

    return _make


@pytest.fixture
def test_utxos(make_utxo: UtxoFactory) -> list[WeightedUtxo]:
    """100k, 10 and 200k sat UTXOs. The 10 sat one is uneconomical at 1 sat/vB."""
    return [make_utxo(100_000, 0), make_utxo(10, 1), make_utxo(200_000, 2)]


@pytest.fixture
def random_utxos(make_utxo: UtxoFactory) -> Callable[[random.Random, int], list[WeightedUtxo]]:
    """Factory for UTXOs with random values below 2 BTC."""

    def _make(rng: random.Random, count: int) -> list[WeightedUtxo]:
        return [make_utxo(rng.randrange(1, 200_000_000), i % 10, vout=i) for i in range(count)]

    return _make


@pytest.fixture
def drain_script() -> WeightedScript:
    """P2WPKH change script owned by the wallet."""
    return WeightedScript(scriptpubkey=P2WPKH_SCRIPT, satisfaction_weight=P2WPKH_SATISFACTION_WEIGHT)


@pytest.fixture
def fee_rate() -> FeeRate:
    """1 sat/vB: a P2WPKH input costs 68 sats."""
    return FeeRate.from_sat_per_vb(1.0)


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(0)
