"""
Coin selection exceptions.
"""

from __future__ import annotations


class CoinSelectionError(Exception):
    """Base exception for coin selection failures."""

    pass


class InsufficientFundsError(CoinSelectionError):
    """The available coins cannot cover the requested amount."""

    def __init__(self, needed: int, available: int):
        self.needed = needed
        self.available = available
        super().__init__(f"Insufficient funds: need {needed} sats, have {available} sats")


class AmountOverflowError(CoinSelectionError):
    """Summed amounts fall outside the monetary domain."""

    pass


class SelectionStrategyError(CoinSelectionError):
    """A selection strategy gave up. Recoverable through the fallback strategy."""

    pass


class SearchBudgetExceededError(SelectionStrategyError):
    """Branch and bound used all its tries without finding a solution."""

    pass


class NoExactMatchError(SelectionStrategyError):
    """Branch and bound searched the whole tree without finding a solution."""

    pass
