"""
Bitcoin weight, fee and coin selection constants.

Weights are expressed in weight units (WU), sizes in bytes and
fee rates in satoshis per virtual byte unless stated otherwise.
"""

from __future__ import annotations

# Weight of a transaction input without its satisfaction data:
# prev_txid (32 bytes) + prev_vout (4 bytes) + sequence (4 bytes) + script_len (1 byte)
TXIN_BASE_WEIGHT = (32 + 4 + 4 + 1) * 4  # 164 WU

# Reference fee rate used to decide whether spending an input now is
# cheaper or more expensive than spending it later
LONG_TERM_FEE_RATE_SAT_VB = 5.0

# Hard cap on branch and bound iterations
BNB_TOTAL_TRIES = 100_000

# P2WPKH change output: value (8 bytes) + script len (1 byte) + script (22 bytes)
DEFAULT_CHANGE_OUTPUT_SIZE = 8 + 1 + 22  # 31 bytes

# Bitcoin Core's default dust relay fee
DUST_RELAY_FEE_RATE_SAT_KVB = 3000

# Size of the TxOut amount field
TXOUT_VALUE_SIZE = 8

# Spend cost of an output as assumed by Bitcoin Core's GetDustThreshold():
# prevout (32 + 4) + script len (1) + scriptSig (107) + sequence (4)
DUST_SPEND_SIZE_LEGACY = 32 + 4 + 1 + 107 + 4  # 148 bytes
# Witness programs get the witness discount on the 107-byte satisfaction
DUST_SPEND_SIZE_WITNESS = 32 + 4 + 1 + (107 // 4) + 4  # 67 bytes

# Total bitcoin supply in satoshis, the monetary domain of every amount
MAX_MONEY = 21_000_000 * 100_000_000
