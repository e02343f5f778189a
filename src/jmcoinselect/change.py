"""
Change output decision.

After a selection covers the target, the remaining value either pays for
a change output or, when what is left after the change fee would be dust,
goes to the miner as extra fee.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from jmcoinselect.models import FeeRate
from jmcoinselect.script import output_size, script_dust_value


@dataclass(frozen=True)
class NoChange:
    """The excess is too small to create a spendable change output."""

    # Dust threshold for the change script
    dust_threshold: int
    # Amount by which the selection exceeds the outgoing value and fees
    remaining_amount: int
    # Fee the change output would have cost
    change_fee: int


@dataclass(frozen=True)
class Change:
    """The excess pays for a spendable change output."""

    # Change output value, change fee already deducted
    amount: int
    fee: int


Excess = NoChange | Change


def decide_change(
    remaining_amount: int,
    fee_rate: FeeRate,
    drain_script: bytes,
    dust_value: Callable[[bytes], int] = script_dust_value,
) -> Excess:
    """
    Decide if change can be created.

    Args:
        remaining_amount: Amount by which the selected coins exceed the target
        fee_rate: Fee rate of the transaction
        drain_script: Script the change would be sent to
        dust_value: Dust threshold oracle for a script

    Returns:
        Change when the remaining amount minus the change output fee is not
        dust, NoChange otherwise
    """
    if remaining_amount < 0:
        raise ValueError(f"remaining_amount must be non-negative, got {remaining_amount}")

    change_fee = fee_rate.fee_vb(output_size(drain_script))
    drain_value = max(0, remaining_amount - change_fee)
    dust_threshold = dust_value(drain_script)

    if drain_value < dust_threshold:
        logger.debug(
            f"No change: {drain_value} sats after {change_fee} sats change fee "
            f"is below dust threshold {dust_threshold}"
        )
        return NoChange(
            dust_threshold=dust_threshold,
            remaining_amount=remaining_amount,
            change_fee=change_fee,
        )

    return Change(amount=drain_value, fee=change_fee)
