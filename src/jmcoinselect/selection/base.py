"""
Base coin selection algorithm interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from loguru import logger

from jmcoinselect.models import FeeRate, OutputGroup


class CoinSelectionAlgorithm(ABC):
    """
    Strategy choosing which optional UTXOs fund a transaction.

    Strategies only ever see the optional UTXOs. Required UTXOs are
    handled by get_selection(), which discounts their effective value
    from the target before calling coin_select().
    """

    @abstractmethod
    def coin_select(
        self,
        optional_groups: list[OutputGroup],
        fee_rate: FeeRate,
        target_amount: int,
        available_value: int,
    ) -> tuple[list[OutputGroup], int]:
        """
        Select UTXOs from the optional pool.

        Args:
            optional_groups: Optional UTXOs priced at fee_rate, in no particular order
            fee_rate: Fee rate of the transaction
            target_amount: Amount still needed after the required UTXOs, in satoshis.
                Includes the outgoing value and the fees of outputs and fixed tx parts
            available_value: Total effective value of optional_groups

        Returns:
            (selected groups, total fee of the selected inputs)

        Raises:
            SelectionStrategyError: If the strategy could not find a selection
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def select_sorted_utxos(
    groups: Iterable[OutputGroup], target_amount: int
) -> tuple[list[OutputGroup], int]:
    """
    Take groups in order until their value covers target_amount plus the
    fees of everything taken so far.

    Returns whatever was accumulated when the groups run out; feasibility
    is checked by the caller beforehand.
    """
    selected: list[OutputGroup] = []
    selected_amount = 0
    fee_amount = 0

    for group in groups:
        if selected_amount >= target_amount + fee_amount:
            break
        fee_amount += group.fee
        selected_amount += group.value
        selected.append(group)
        logger.debug(f"Selected {group.utxo.outpoint}, updated fee_amount = {fee_amount}")

    return selected, fee_amount
