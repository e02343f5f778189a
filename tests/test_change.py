"""
Tests for the change output decision.
"""

from __future__ import annotations

import pytest

from jmcoinselect.change import Change, NoChange, decide_change
from jmcoinselect.models import FeeRate

P2WPKH = bytes.fromhex("0014" + "11" * 20)
P2PKH = bytes.fromhex("76a914" + "44" * 20 + "88ac")

# At 1 sat/vB a P2WPKH change output costs 31 sats and its dust threshold is 294
CHANGE_FEE = 31
DUST = 294


class TestDecideChange:
    """Tests for decide_change()."""

    def test_below_dust_plus_fee_is_no_change(self) -> None:
        remaining = DUST + CHANGE_FEE - 1
        excess = decide_change(remaining, FeeRate.from_sat_per_vb(1.0), P2WPKH)

        assert excess == NoChange(dust_threshold=DUST, remaining_amount=remaining, change_fee=CHANGE_FEE)

    def test_at_dust_plus_fee_is_change(self) -> None:
        remaining = DUST + CHANGE_FEE
        excess = decide_change(remaining, FeeRate.from_sat_per_vb(1.0), P2WPKH)

        assert excess == Change(amount=DUST, fee=CHANGE_FEE)

    def test_change_amount_deducts_fee_exactly(self) -> None:
        excess = decide_change(50_000, FeeRate.from_sat_per_vb(1.0), P2WPKH)

        assert isinstance(excess, Change)
        assert excess.amount == 50_000 - CHANGE_FEE
        assert excess.fee == CHANGE_FEE

    def test_remaining_below_change_fee(self) -> None:
        """Saturates at zero instead of going negative."""
        excess = decide_change(10, FeeRate.from_sat_per_vb(1.0), P2WPKH)

        assert isinstance(excess, NoChange)
        assert excess.remaining_amount == 10
        assert excess.change_fee == CHANGE_FEE

    def test_zero_remaining(self) -> None:
        excess = decide_change(0, FeeRate.from_sat_per_vb(1.0), P2WPKH)

        assert isinstance(excess, NoChange)
        assert excess.remaining_amount == 0

    def test_change_fee_scales_with_rate(self) -> None:
        excess = decide_change(100_000, FeeRate.from_sat_per_vb(10.0), P2WPKH)

        assert excess == Change(amount=100_000 - 310, fee=310)

    def test_legacy_script_threshold(self) -> None:
        # P2PKH output is 34 bytes, dust threshold 546
        excess = decide_change(34 + 545, FeeRate.from_sat_per_vb(1.0), P2PKH)

        assert excess == NoChange(dust_threshold=546, remaining_amount=579, change_fee=34)

    def test_custom_dust_oracle(self) -> None:
        excess = decide_change(
            5_000, FeeRate.from_sat_per_vb(1.0), P2WPKH, dust_value=lambda script: 10_000
        )

        assert excess == NoChange(dust_threshold=10_000, remaining_amount=5_000, change_fee=CHANGE_FEE)

    def test_negative_remaining_rejected(self) -> None:
        with pytest.raises(ValueError):
            decide_change(-1, FeeRate.from_sat_per_vb(1.0), P2WPKH)
