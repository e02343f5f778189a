"""
Composite strategy retrying with a fallback algorithm.
"""

from __future__ import annotations

from loguru import logger

from jmcoinselect.errors import SelectionStrategyError
from jmcoinselect.models import FeeRate, OutputGroup
from jmcoinselect.selection.base import CoinSelectionAlgorithm
from jmcoinselect.selection.random_draw import SingleRandomDrawCoinSelection


class FallbackCoinSelection(CoinSelectionAlgorithm):
    """
    Run the primary algorithm and, if it gives up, the fallback algorithm
    over the same UTXO pool.

    Only SelectionStrategyError triggers the fallback. Errors from the
    fallback itself are propagated.
    """

    def __init__(
        self,
        primary: CoinSelectionAlgorithm,
        fallback: CoinSelectionAlgorithm | None = None,
    ):
        self.primary = primary
        self.fallback = fallback if fallback is not None else SingleRandomDrawCoinSelection()

    def coin_select(
        self,
        optional_groups: list[OutputGroup],
        fee_rate: FeeRate,
        target_amount: int,
        available_value: int,
    ) -> tuple[list[OutputGroup], int]:
        try:
            return self.primary.coin_select(
                optional_groups, fee_rate, target_amount, available_value
            )
        except SelectionStrategyError as e:
            logger.debug(f"{self.primary!r} failed: {e}. Falling back to {self.fallback!r}")
            return self.fallback.coin_select(
                optional_groups, fee_rate, target_amount, available_value
            )

    def __repr__(self) -> str:
        return f"FallbackCoinSelection({self.primary!r}, {self.fallback!r})"
