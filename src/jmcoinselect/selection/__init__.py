"""
Coin selection algorithms.

Available algorithms:
- BranchAndBoundCoinSelection: search for a selection needing no change (default)
- LargestFirstCoinSelection: largest effective value first
- OldestFirstCoinSelection: lowest confirmation height first
- SingleRandomDrawCoinSelection: random order (fallback)

FallbackCoinSelection wraps any of them to retry with the fallback
algorithm when the primary one gives up.
"""

from jmcoinselect.selection.base import CoinSelectionAlgorithm, select_sorted_utxos
from jmcoinselect.selection.branch_and_bound import BranchAndBoundCoinSelection
from jmcoinselect.selection.fallback import FallbackCoinSelection
from jmcoinselect.selection.largest_first import LargestFirstCoinSelection
from jmcoinselect.selection.oldest_first import OldestFirstCoinSelection
from jmcoinselect.selection.random_draw import SingleRandomDrawCoinSelection

# Algorithm used when none is configured
DefaultCoinSelectionAlgorithm = BranchAndBoundCoinSelection
# Algorithm used when the configured one fails
FallbackCoinSelectionAlgorithm = SingleRandomDrawCoinSelection

__all__ = [
    "BranchAndBoundCoinSelection",
    "CoinSelectionAlgorithm",
    "DefaultCoinSelectionAlgorithm",
    "FallbackCoinSelection",
    "FallbackCoinSelectionAlgorithm",
    "LargestFirstCoinSelection",
    "OldestFirstCoinSelection",
    "SingleRandomDrawCoinSelection",
    "select_sorted_utxos",
]
