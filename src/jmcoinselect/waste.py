"""
Waste metric for comparing coin selections.

waste = timing_cost + creation_cost

Timing cost is what spending the selected inputs costs now compared to
spending them at the long-term fee rate:

    timing_cost = sum(input_fee(current_rate) - input_fee(long_term_rate))

It is negative when the current fee rate is cheaper than the long-term
rate, which makes consolidating inputs now favorable.

Creation cost is the cost of the surplus value. Without change the whole
excess goes to the miner:

    creation_cost = remaining_amount

With change it is the cost of creating the change output now plus the
cost of spending it later at the long-term rate:

    creation_cost = change_fee + input_fee(long_term_rate, change_script)

Waste is zero for a perfect match at the long-term fee rate, and can be
negative when timing cost is negative and larger than creation cost.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from jmcoinselect.change import Change, Excess, NoChange
from jmcoinselect.constants import LONG_TERM_FEE_RATE_SAT_VB, TXIN_BASE_WEIGHT
from jmcoinselect.models import FeeRate, OutputGroup

LONG_TERM_FEE_RATE = FeeRate.from_sat_per_vb(LONG_TERM_FEE_RATE_SAT_VB)


@dataclass(frozen=True, order=True)
class Waste:
    value: int

    @classmethod
    def calculate(
        cls,
        selected: Iterable[OutputGroup],
        drain_satisfaction_weight: int,
        excess: Excess,
    ) -> Waste:
        """
        Calculate the waste of a coin selection.

        Args:
            selected: Selected output groups, priced at the current fee rate
            drain_satisfaction_weight: Weight to spend the change script,
                0 if the script belongs to a foreign descriptor
            excess: Change decision for the selection
        """
        timing_cost = 0
        for group in selected:
            long_term_fee = LONG_TERM_FEE_RATE.fee_wu(
                TXIN_BASE_WEIGHT + group.weighted_utxo.satisfaction_weight
            )
            timing_cost += group.fee - long_term_fee

        if isinstance(excess, NoChange):
            creation_cost = excess.remaining_amount
        elif isinstance(excess, Change):
            change_as_input_fee = LONG_TERM_FEE_RATE.fee_wu(
                TXIN_BASE_WEIGHT + drain_satisfaction_weight
            )
            creation_cost = excess.fee + change_as_input_fee
        else:
            raise TypeError(f"Unknown excess type: {type(excess).__name__}")

        return cls(timing_cost + creation_cost)

    def __int__(self) -> int:
        return self.value
