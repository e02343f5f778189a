"""
Single random draw coin selection.
"""

from __future__ import annotations

import random

from loguru import logger

from jmcoinselect.errors import InsufficientFundsError
from jmcoinselect.models import FeeRate, OutputGroup
from jmcoinselect.selection.base import CoinSelectionAlgorithm


class SingleRandomDrawCoinSelection(CoinSelectionAlgorithm):
    """
    Accumulate UTXOs in random order until they cover the target.

    This is the fallback when another strategy fails, so it only gives up
    when the whole pool cannot reach the target.

    Args:
        rng: Random source used for shuffling. Pass a seeded random.Random
            for reproducible selections. Defaults to the OS entropy source.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.SystemRandom()

    def coin_select(
        self,
        optional_groups: list[OutputGroup],
        fee_rate: FeeRate,
        target_amount: int,
        available_value: int,
    ) -> tuple[list[OutputGroup], int]:
        pool = list(optional_groups)
        self.rng.shuffle(pool)

        selected: list[OutputGroup] = []
        selected_value = 0
        for group in pool:
            if selected_value >= target_amount:
                break
            selected_value += group.effective_value
            selected.append(group)

        if selected_value < target_amount:
            raise InsufficientFundsError(needed=target_amount, available=selected_value)

        fee_amount = sum(group.fee for group in selected)
        logger.debug(
            f"Random draw selected {len(selected)} of {len(pool)} UTXOs, "
            f"effective value {selected_value} for target {target_amount}"
        )
        return selected, fee_amount
