"""
Oldest-first coin selection.
"""

from __future__ import annotations

from loguru import logger

from jmcoinselect.backends.base import BlockHeightLookup
from jmcoinselect.models import FeeRate, OutputGroup
from jmcoinselect.selection.base import CoinSelectionAlgorithm, select_sorted_utxos


class OldestFirstCoinSelection(CoinSelectionAlgorithm):
    """
    Picks the UTXOs with the smallest confirmation height first.

    UTXOs whose transaction has no known height (unconfirmed or missing
    from the lookup) are selected last.
    """

    def __init__(self, lookup: BlockHeightLookup):
        self.lookup = lookup

    def coin_select(
        self,
        optional_groups: list[OutputGroup],
        fee_rate: FeeRate,
        target_amount: int,
        available_value: int,
    ) -> tuple[list[OutputGroup], int]:
        # One lookup per transaction, shared by all its outputs
        heights: dict[str, int | None] = {}
        for group in optional_groups:
            txid = group.utxo.txid
            if txid not in heights:
                heights[txid] = self.lookup.get_tx_height(txid)

        logger.debug(
            f"Resolved heights for {len(heights)} transactions, "
            f"{sum(1 for h in heights.values() if h is None)} unknown"
        )

        def age_key(group: OutputGroup) -> tuple[bool, int]:
            height = heights[group.utxo.txid]
            return (height is None, height or 0)

        ordered = sorted(optional_groups, key=age_key)
        return select_sorted_utxos(ordered, target_amount)

    def __repr__(self) -> str:
        return f"OldestFirstCoinSelection(lookup={type(self.lookup).__name__})"
