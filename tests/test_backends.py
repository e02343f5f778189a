"""
Tests for confirmation height lookups.
"""

from __future__ import annotations

import pytest

from jmcoinselect.backends import BlockHeightLookup, MemoryHeightLookup

TXID = "ab" * 32


class TestMemoryHeightLookup:
    """Tests for MemoryHeightLookup."""

    def test_is_a_height_lookup(self) -> None:
        assert isinstance(MemoryHeightLookup(), BlockHeightLookup)

    def test_unknown_tx(self) -> None:
        assert MemoryHeightLookup().get_tx_height(TXID) is None

    def test_initial_heights(self) -> None:
        lookup = MemoryHeightLookup({TXID: 800_000})

        assert lookup.get_tx_height(TXID) == 800_000

    def test_txid_case_insensitive(self) -> None:
        lookup = MemoryHeightLookup()
        lookup.set_tx_height(TXID.upper(), 12)

        assert lookup.get_tx_height(TXID) == 12

    def test_unconfirmed(self) -> None:
        lookup = MemoryHeightLookup({TXID: 5})
        lookup.set_tx_height(TXID, None)

        assert lookup.get_tx_height(TXID) is None

    def test_remove_tx(self) -> None:
        lookup = MemoryHeightLookup({TXID: 5})
        lookup.remove_tx(TXID)
        lookup.remove_tx(TXID)

        assert lookup.get_tx_height(TXID) is None

    def test_negative_height_rejected(self) -> None:
        with pytest.raises(ValueError):
            MemoryHeightLookup({TXID: -1})

    def test_abstract_lookup_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            BlockHeightLookup()  # type: ignore[abstract]
