"""
Branch and bound coin selection.

Depth-first search over the inclusion/exclusion tree of the UTXO pool,
adapted from Bitcoin Core's implementation and from Mark Erhardt's
Master's Thesis: http://murch.one/wp-content/uploads/2016/11/erhardt2016coinselection.pdf

The search looks for a selection whose effective value lands between the
target and the target plus the cost of a change output, so that the
transaction needs no change. The pool is explored largest first and the
inclusion branch is always tried before the omission branch.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from jmcoinselect.constants import BNB_TOTAL_TRIES, DEFAULT_CHANGE_OUTPUT_SIZE
from jmcoinselect.errors import NoExactMatchError, SearchBudgetExceededError
from jmcoinselect.models import FeeRate, OutputGroup
from jmcoinselect.selection.base import CoinSelectionAlgorithm


@dataclass
class _SearchState:
    """
    Position of the depth-first search.

    selection[i] is True if pool[i] is in the current selection. The list
    can be shorter than the pool: UTXOs past its end are still undecided
    and their effective value is counted in available_value.
    """

    pool: list[OutputGroup]
    available_value: int
    selected_value: int = 0
    selection: list[bool] = field(default_factory=list)

    @property
    def pool_exhausted(self) -> bool:
        return len(self.selection) == len(self.pool)

    def include_next(self) -> None:
        group = self.pool[len(self.selection)]
        self.available_value -= group.effective_value
        self.selection.append(True)
        self.selected_value += group.effective_value

    def backtrack(self) -> bool:
        """
        Switch the last included UTXO to its omission branch, dropping the
        omitted UTXOs after it.

        Returns False when no untried branch is left.
        """
        while self.selection and not self.selection[-1]:
            self.selection.pop()
            self.available_value += self.pool[len(self.selection)].effective_value

        if not self.selection:
            return False

        self.selection[-1] = False
        self.selected_value -= self.pool[len(self.selection) - 1].effective_value
        return True


class BranchAndBoundCoinSelection(CoinSelectionAlgorithm):
    """
    Branch and bound coin selection.

    Args:
        size_of_change: Size in bytes of the change output the selection
            tries to avoid. Defaults to a P2WPKH output.
    """

    def __init__(self, size_of_change: int = DEFAULT_CHANGE_OUTPUT_SIZE):
        if size_of_change < 0:
            raise ValueError(f"size_of_change must be non-negative, got {size_of_change}")
        self.size_of_change = size_of_change

    def coin_select(
        self,
        optional_groups: list[OutputGroup],
        fee_rate: FeeRate,
        target_amount: int,
        available_value: int,
    ) -> tuple[list[OutputGroup], int]:
        cost_of_change = fee_rate.fee_vb(self.size_of_change)

        pool = sorted(optional_groups, key=lambda g: g.effective_value, reverse=True)
        state = _SearchState(pool=pool, available_value=available_value)

        best_selection: list[bool] | None = None
        best_selection_value: int | None = None
        exhausted = False
        tries = 0

        while tries < BNB_TOTAL_TRIES:
            tries += 1

            backtrack = False
            if (
                state.selected_value + state.available_value < target_amount
                or state.selected_value > target_amount + cost_of_change
                or (state.pool_exhausted and state.selected_value < target_amount)
            ):
                # Target out of reach or already overshot, try another branch
                backtrack = True
            elif state.selected_value >= target_amount:
                # Within range, going deeper can only add value
                backtrack = True

                if best_selection_value is None or state.selected_value < best_selection_value:
                    best_selection = state.selection.copy()
                    best_selection_value = state.selected_value

                if state.selected_value == target_amount:
                    logger.debug(f"Branch and bound found exact match after {tries} tries")
                    break

            if backtrack:
                if not state.backtrack():
                    exhausted = True
                    break
            else:
                state.include_next()

        if best_selection is None:
            if exhausted:
                raise NoExactMatchError(
                    f"No selection within {cost_of_change} sats of target {target_amount} "
                    f"among {len(pool)} UTXOs"
                )
            raise SearchBudgetExceededError(
                f"No selection found after {BNB_TOTAL_TRIES} tries among {len(pool)} UTXOs"
            )

        selected = [group for group, included in zip(pool, best_selection) if included]
        fee_amount = sum(group.fee for group in selected)

        logger.debug(
            f"Branch and bound selected {len(selected)} UTXOs worth {best_selection_value} "
            f"(target {target_amount}, cost of change {cost_of_change}) in {tries} tries"
        )

        return selected, fee_amount

    def __repr__(self) -> str:
        return f"BranchAndBoundCoinSelection(size_of_change={self.size_of_change})"
