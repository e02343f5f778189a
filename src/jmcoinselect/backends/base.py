"""
Base interface for confirmation height lookups.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BlockHeightLookup(ABC):
    """
    Source of confirmation heights for wallet transactions.

    Implementations typically wrap the wallet database or a blockchain
    backend. Only the oldest-first strategy uses it.
    """

    @abstractmethod
    def get_tx_height(self, txid: str) -> int | None:
        """Get the confirmation height of a transaction.
        Returns None if the transaction is unknown or unconfirmed."""
