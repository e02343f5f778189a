"""
Coin selection for funding transactions.

get_selection() combines the UTXOs that must be spent with a selection
from the optional ones, decides what to do with the excess and scores the
result with the waste metric. The transaction builder turns the result
into an actual transaction.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from loguru import logger

from jmcoinselect.change import Change, Excess, decide_change
from jmcoinselect.constants import MAX_MONEY
from jmcoinselect.errors import AmountOverflowError, InsufficientFundsError
from jmcoinselect.models import FeeRate, OutputGroup, Utxo, WeightedScript, WeightedUtxo
from jmcoinselect.script import script_dust_value
from jmcoinselect.selection.base import CoinSelectionAlgorithm
from jmcoinselect.selection.fallback import FallbackCoinSelection
from jmcoinselect.waste import Waste


@dataclass
class CoinSelectionResult:
    """Result of a successful coin selection"""

    # UTXOs to use as inputs
    selected: list[Utxo]
    # Total fee paid by the selected inputs, in satoshis
    fee_amount: int
    # What happens to the value left after target and fees
    excess: Excess
    waste: Waste

    @property
    def selected_amount(self) -> int:
        """Total value of the selected UTXOs"""
        return sum(utxo.value for utxo in self.selected)

    @property
    def local_selected_amount(self) -> int:
        """Total value of the selected UTXOs owned by the local wallet"""
        return sum(utxo.value for utxo in self.selected if utxo.is_local)


def get_selection(
    algorithm: CoinSelectionAlgorithm,
    required_utxos: Sequence[WeightedUtxo],
    optional_utxos: Sequence[WeightedUtxo],
    fee_rate: FeeRate,
    target_amount: int,
    drain_script: WeightedScript,
    *,
    fallback: CoinSelectionAlgorithm | None = None,
    dust_value: Callable[[bytes], int] = script_dust_value,
) -> CoinSelectionResult:
    """
    Perform the coin selection.

    Args:
        algorithm: Strategy selecting among the optional UTXOs
        required_utxos: UTXOs that must be spent regardless of target_amount
        optional_utxos: UTXOs available to reach target_amount
        fee_rate: Fee rate of the transaction
        target_amount: Outgoing amount plus the fees already accumulated
            from outputs and the transaction header, in satoshis
        drain_script: Script receiving the change, if any
        fallback: Strategy used when algorithm gives up (default: single random draw)
        dust_value: Dust threshold oracle for the change script

    Returns:
        CoinSelectionResult with selected UTXOs, fees, excess and waste

    Raises:
        InsufficientFundsError: If the UTXOs cannot cover target_amount
        AmountOverflowError: If amounts fall outside the monetary domain
    """
    if isinstance(target_amount, bool) or not isinstance(target_amount, int):
        raise ValueError(f"target_amount must be an integer, got {target_amount!r}")
    if target_amount < 0:
        raise ValueError(f"target_amount must be non-negative, got {target_amount}")
    if target_amount > MAX_MONEY:
        raise AmountOverflowError(f"target_amount {target_amount} exceeds {MAX_MONEY} sats")

    required_groups = [OutputGroup.from_weighted_utxo(u, fee_rate) for u in required_utxos]
    candidate_groups = [OutputGroup.from_weighted_utxo(u, fee_rate) for u in optional_utxos]

    # Optional UTXOs costing more to spend than they are worth are never selected
    optional_groups = [g for g in candidate_groups if g.effective_value > 0]
    if len(optional_groups) < len(candidate_groups):
        logger.debug(
            f"Skipping {len(candidate_groups) - len(optional_groups)} optional UTXOs "
            f"with non-positive effective value at {fee_rate}"
        )

    total_value = sum(g.value for g in required_groups) + sum(g.value for g in candidate_groups)
    if total_value > MAX_MONEY:
        raise AmountOverflowError(f"Sum of UTXO values {total_value} exceeds {MAX_MONEY} sats")

    required_effective_value = sum(g.effective_value for g in required_groups)
    required_fee = sum(g.fee for g in required_groups)
    optional_effective_value = sum(g.effective_value for g in optional_groups)

    expected = required_effective_value + optional_effective_value
    if expected < 0 or expected < target_amount:
        total_fee = sum(g.fee for g in required_groups) + sum(g.fee for g in candidate_groups)
        raise InsufficientFundsError(needed=target_amount + total_fee, available=total_value)

    if required_effective_value >= target_amount:
        logger.debug(
            f"Required UTXOs cover target {target_amount} "
            f"with effective value {required_effective_value}"
        )
        selected_groups = required_groups
        selected_effective_value = required_effective_value
        fee_amount = required_fee
    else:
        # Always positive: required effective value is below target_amount
        optional_target = target_amount - required_effective_value
        if not isinstance(algorithm, FallbackCoinSelection):
            algorithm = FallbackCoinSelection(algorithm, fallback)

        optional_selected, optional_fee = algorithm.coin_select(
            optional_groups, fee_rate, optional_target, optional_effective_value
        )
        selected_groups = optional_selected + required_groups
        selected_effective_value = (
            sum(g.effective_value for g in optional_selected) + required_effective_value
        )
        fee_amount = optional_fee + required_fee

    remaining_amount = max(0, selected_effective_value - target_amount)
    excess = decide_change(remaining_amount, fee_rate, drain_script.script_bytes, dust_value)
    waste = Waste.calculate(selected_groups, drain_script.satisfaction_weight, excess)

    result = CoinSelectionResult(
        selected=[g.utxo for g in selected_groups],
        fee_amount=fee_amount,
        excess=excess,
        waste=waste,
    )

    excess_desc = (
        f"change of {excess.amount} sats"
        if isinstance(excess, Change)
        else f"no change, {excess.remaining_amount} sats to miners"
    )
    logger.info(
        f"Selected {len(result.selected)} UTXOs worth {result.selected_amount} sats "
        f"for target {target_amount} at {fee_rate}: input fees {fee_amount} sats, "
        f"{excess_desc}, waste {waste.value}"
    )

    return result
