"""
In-memory confirmation height lookup.
"""

from __future__ import annotations

from jmcoinselect.backends.base import BlockHeightLookup


class MemoryHeightLookup(BlockHeightLookup):
    """Height lookup backed by a dict of txid -> confirmation height"""

    def __init__(self, heights: dict[str, int | None] | None = None):
        self.heights: dict[str, int | None] = {}
        for txid, height in (heights or {}).items():
            self.set_tx_height(txid, height)

    def set_tx_height(self, txid: str, height: int | None) -> None:
        if height is not None and height < 0:
            raise ValueError(f"Invalid block height {height} for {txid}")
        self.heights[txid.lower()] = height

    def remove_tx(self, txid: str) -> None:
        self.heights.pop(txid.lower(), None)

    def get_tx_height(self, txid: str) -> int | None:
        return self.heights.get(txid.lower())
