"""
Tests for largest-first coin selection.
"""

from __future__ import annotations

import pytest

from jmcoinselect.coin_selection import get_selection
from jmcoinselect.errors import InsufficientFundsError
from jmcoinselect.models import FeeRate, OutputGroup, WeightedScript, WeightedUtxo
from jmcoinselect.selection import LargestFirstCoinSelection


class TestLargestFirstCoinSelection:
    """Tests for LargestFirstCoinSelection through get_selection()."""

    def test_success(
        self, test_utxos: list[WeightedUtxo], fee_rate: FeeRate, drain_script: WeightedScript
    ) -> None:
        """The 10 sat UTXO nets negative but required UTXOs are always spent."""
        result = get_selection(
            LargestFirstCoinSelection(), test_utxos, [], fee_rate, 250_000, drain_script
        )

        assert len(result.selected) == 3
        assert result.selected_amount == 300_010
        assert result.fee_amount == 3 * 68

    def test_use_all(
        self, test_utxos: list[WeightedUtxo], fee_rate: FeeRate, drain_script: WeightedScript
    ) -> None:
        result = get_selection(
            LargestFirstCoinSelection(), test_utxos, [], fee_rate, 20_000, drain_script
        )

        assert len(result.selected) == 3
        assert result.selected_amount == 300_010
        assert result.fee_amount == 204

    def test_use_only_necessary(
        self, test_utxos: list[WeightedUtxo], fee_rate: FeeRate, drain_script: WeightedScript
    ) -> None:
        result = get_selection(
            LargestFirstCoinSelection(), [], test_utxos, fee_rate, 20_000, drain_script
        )

        assert len(result.selected) == 1
        assert result.selected_amount == 200_000
        assert result.fee_amount == 68

    def test_insufficient_funds(
        self, test_utxos: list[WeightedUtxo], fee_rate: FeeRate, drain_script: WeightedScript
    ) -> None:
        with pytest.raises(InsufficientFundsError):
            get_selection(
                LargestFirstCoinSelection(), [], test_utxos, fee_rate, 500_000, drain_script
            )

    def test_insufficient_funds_high_fees(
        self, test_utxos: list[WeightedUtxo], drain_script: WeightedScript
    ) -> None:
        with pytest.raises(InsufficientFundsError):
            get_selection(
                LargestFirstCoinSelection(),
                [],
                test_utxos,
                FeeRate.from_sat_per_vb(1000.0),
                250_000,
                drain_script,
            )


class TestLargestFirstCoinSelect:
    """Tests for LargestFirstCoinSelection.coin_select() on its own."""

    def test_unsorted_input(self, make_utxo, fee_rate: FeeRate) -> None:
        groups = [
            OutputGroup.from_weighted_utxo(make_utxo(value, i), fee_rate)
            for i, value in enumerate([10_000, 50_000, 30_000, 40_000])
        ]
        available = sum(g.effective_value for g in groups)

        selected, fee = LargestFirstCoinSelection().coin_select(groups, fee_rate, 60_000, available)

        assert [g.value for g in selected] == [50_000, 40_000]
        assert fee == 136
        # Input order untouched
        assert [g.value for g in groups] == [10_000, 50_000, 30_000, 40_000]

    def test_target_includes_accumulated_fees(self, make_utxo, fee_rate: FeeRate) -> None:
        """50_000 alone covers the target but not the target plus its own fee."""
        groups = [
            OutputGroup.from_weighted_utxo(make_utxo(50_000, 0), fee_rate),
            OutputGroup.from_weighted_utxo(make_utxo(20_000, 1), fee_rate),
        ]

        selected, fee = LargestFirstCoinSelection().coin_select(groups, fee_rate, 49_950, 69_864)

        assert len(selected) == 2
        assert fee == 136

    def test_runs_out_of_coins(self, make_utxo, fee_rate: FeeRate) -> None:
        """Returns everything accumulated, feasibility is the caller's concern."""
        groups = [OutputGroup.from_weighted_utxo(make_utxo(1_000, 0), fee_rate)]

        selected, fee = LargestFirstCoinSelection().coin_select(groups, fee_rate, 5_000, 932)

        assert len(selected) == 1
        assert fee == 68
