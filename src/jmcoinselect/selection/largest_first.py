"""
Largest-first coin selection.
"""

from __future__ import annotations

from loguru import logger

from jmcoinselect.models import FeeRate, OutputGroup
from jmcoinselect.selection.base import CoinSelectionAlgorithm, select_sorted_utxos


class LargestFirstCoinSelection(CoinSelectionAlgorithm):
    """
    Simple and dumb coin selection.

    Sorts the available UTXOs by effective value and picks them starting
    from the largest ones until the required amount is reached.
    """

    def coin_select(
        self,
        optional_groups: list[OutputGroup],
        fee_rate: FeeRate,
        target_amount: int,
        available_value: int,
    ) -> tuple[list[OutputGroup], int]:
        logger.debug(f"target_amount = {target_amount}")

        ordered = sorted(optional_groups, key=lambda g: g.effective_value, reverse=True)
        return select_sorted_utxos(ordered, target_amount)
