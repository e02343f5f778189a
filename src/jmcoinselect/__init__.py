"""
jmcoinselect - Coin selection for JoinMarket wallets

Chooses the UTXOs funding a transaction, decides between a change output
and extra miner fee, and scores selections with the waste metric.
"""

__version__ = "0.1.0"

from jmcoinselect.backends import BlockHeightLookup, MemoryHeightLookup
from jmcoinselect.change import Change, Excess, NoChange, decide_change
from jmcoinselect.coin_selection import CoinSelectionResult, get_selection
from jmcoinselect.config import CoinSelectionConfig, SelectionAlgorithm, create_algorithm
from jmcoinselect.constants import (
    BNB_TOTAL_TRIES,
    DEFAULT_CHANGE_OUTPUT_SIZE,
    LONG_TERM_FEE_RATE_SAT_VB,
    MAX_MONEY,
    TXIN_BASE_WEIGHT,
)
from jmcoinselect.errors import (
    AmountOverflowError,
    CoinSelectionError,
    InsufficientFundsError,
    NoExactMatchError,
    SearchBudgetExceededError,
    SelectionStrategyError,
)
from jmcoinselect.models import FeeRate, OutputGroup, Utxo, WeightedScript, WeightedUtxo
from jmcoinselect.script import script_dust_value
from jmcoinselect.selection import (
    BranchAndBoundCoinSelection,
    CoinSelectionAlgorithm,
    DefaultCoinSelectionAlgorithm,
    FallbackCoinSelection,
    FallbackCoinSelectionAlgorithm,
    LargestFirstCoinSelection,
    OldestFirstCoinSelection,
    SingleRandomDrawCoinSelection,
)
from jmcoinselect.waste import LONG_TERM_FEE_RATE, Waste

__all__ = [
    "AmountOverflowError",
    "BNB_TOTAL_TRIES",
    "BlockHeightLookup",
    "BranchAndBoundCoinSelection",
    "Change",
    "CoinSelectionAlgorithm",
    "CoinSelectionConfig",
    "CoinSelectionError",
    "CoinSelectionResult",
    "DEFAULT_CHANGE_OUTPUT_SIZE",
    "DefaultCoinSelectionAlgorithm",
    "Excess",
    "FallbackCoinSelection",
    "FallbackCoinSelectionAlgorithm",
    "FeeRate",
    "InsufficientFundsError",
    "LONG_TERM_FEE_RATE",
    "LONG_TERM_FEE_RATE_SAT_VB",
    "LargestFirstCoinSelection",
    "MAX_MONEY",
    "MemoryHeightLookup",
    "NoChange",
    "NoExactMatchError",
    "OldestFirstCoinSelection",
    "OutputGroup",
    "SearchBudgetExceededError",
    "SelectionAlgorithm",
    "SelectionStrategyError",
    "SingleRandomDrawCoinSelection",
    "TXIN_BASE_WEIGHT",
    "Utxo",
    "WeightedScript",
    "WeightedUtxo",
    "Waste",
    "create_algorithm",
    "decide_change",
    "get_selection",
    "script_dust_value",
]
