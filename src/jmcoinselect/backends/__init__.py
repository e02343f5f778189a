"""
Confirmation height lookup implementations.

Available backends:
- MemoryHeightLookup: dict-backed heights, for tests and callers that
  already know their transactions' heights
"""

from jmcoinselect.backends.base import BlockHeightLookup
from jmcoinselect.backends.memory import MemoryHeightLookup

__all__ = [
    "BlockHeightLookup",
    "MemoryHeightLookup",
]
