"""
Coin selection configuration.
"""

from __future__ import annotations

import random
from enum import Enum

from pydantic import BaseModel, Field

from jmcoinselect.backends.base import BlockHeightLookup
from jmcoinselect.constants import DEFAULT_CHANGE_OUTPUT_SIZE
from jmcoinselect.selection import (
    BranchAndBoundCoinSelection,
    CoinSelectionAlgorithm,
    FallbackCoinSelection,
    LargestFirstCoinSelection,
    OldestFirstCoinSelection,
    SingleRandomDrawCoinSelection,
)


class SelectionAlgorithm(str, Enum):
    BRANCH_AND_BOUND = "bnb"
    LARGEST_FIRST = "largest_first"
    OLDEST_FIRST = "oldest_first"
    SINGLE_RANDOM_DRAW = "random"


class CoinSelectionConfig(BaseModel):
    """Per-wallet coin selection settings."""

    algorithm: SelectionAlgorithm = SelectionAlgorithm.BRANCH_AND_BOUND
    size_of_change: int = Field(
        default=DEFAULT_CHANGE_OUTPUT_SIZE,
        ge=0,
        description="Change output size in bytes used by branch and bound",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for random draws, None to use OS entropy",
    )

    model_config = {"frozen": True}


def create_algorithm(
    config: CoinSelectionConfig,
    height_lookup: BlockHeightLookup | None = None,
) -> FallbackCoinSelection:
    """
    Build the configured algorithm wrapped with the random draw fallback.

    Args:
        config: Coin selection settings
        height_lookup: Confirmation height source, required for oldest_first
    """
    rng = random.Random(config.random_seed) if config.random_seed is not None else None
    fallback = SingleRandomDrawCoinSelection(rng=rng)

    primary: CoinSelectionAlgorithm
    if config.algorithm == SelectionAlgorithm.BRANCH_AND_BOUND:
        primary = BranchAndBoundCoinSelection(size_of_change=config.size_of_change)
    elif config.algorithm == SelectionAlgorithm.LARGEST_FIRST:
        primary = LargestFirstCoinSelection()
    elif config.algorithm == SelectionAlgorithm.OLDEST_FIRST:
        if height_lookup is None:
            raise ValueError("oldest_first coin selection requires a height lookup")
        primary = OldestFirstCoinSelection(height_lookup)
    else:
        primary = fallback

    return FallbackCoinSelection(primary, fallback)
