"""
Script helpers for change output sizing and dust detection.

Dust thresholds follow Bitcoin Core's GetDustThreshold(): an output is dust
when its value is lower than the cost of creating and spending it at the
dust relay fee rate (3 sat/vB).
"""

from __future__ import annotations

import struct

from jmcoinselect.constants import (
    DUST_RELAY_FEE_RATE_SAT_KVB,
    DUST_SPEND_SIZE_LEGACY,
    DUST_SPEND_SIZE_WITNESS,
    TXOUT_VALUE_SIZE,
)

OP_0 = 0x00
OP_1 = 0x51
OP_16 = 0x60
OP_RETURN = 0x6A


def varint(n: int) -> bytes:
    """Encode integer as Bitcoin varint."""
    if n < 0xFD:
        return bytes([n])
    elif n <= 0xFFFF:
        return bytes([0xFD]) + struct.pack("<H", n)
    elif n <= 0xFFFFFFFF:
        return bytes([0xFE]) + struct.pack("<I", n)
    else:
        return bytes([0xFF]) + struct.pack("<Q", n)


def address_to_scriptpubkey(address: str) -> bytes:
    """
    Convert a Bitcoin address to scriptPubKey.

    Supports:
    - P2WPKH / P2WSH (bc1q..., tb1q..., bcrt1q...)
    - P2TR (bc1p..., tb1p..., bcrt1p...)
    - P2PKH (1..., m..., n...)
    - P2SH (3..., 2...)
    """
    import bech32

    # Bech32 (SegWit) addresses
    if address.lower().startswith(("bc1", "tb1", "bcrt1")):
        hrp = address[: address.rfind("1")].lower()

        witver, witprog_list = bech32.decode(hrp, address)
        if witver is None or witprog_list is None:
            raise ValueError(f"Invalid bech32 address: {address}")

        witprog = bytes(witprog_list)

        if witver == 0:
            if len(witprog) == 20:
                # P2WPKH: OP_0 <20-byte-pubkeyhash>
                return bytes([OP_0, 0x14]) + witprog
            elif len(witprog) == 32:
                # P2WSH: OP_0 <32-byte-scripthash>
                return bytes([OP_0, 0x20]) + witprog
        elif witver == 1 and len(witprog) == 32:
            # P2TR: OP_1 <32-byte-pubkey>
            return bytes([OP_1, 0x20]) + witprog

        raise ValueError(f"Unsupported witness version: {witver}")

    # Base58 addresses (legacy)
    import base58

    decoded = base58.b58decode_check(address)
    version = decoded[0]
    payload = decoded[1:]

    if version in (0x00, 0x6F):  # Mainnet/Testnet P2PKH
        # P2PKH: OP_DUP OP_HASH160 <20-byte-pubkeyhash> OP_EQUALVERIFY OP_CHECKSIG
        return bytes([0x76, 0xA9, 0x14]) + payload + bytes([0x88, 0xAC])
    elif version in (0x05, 0xC4):  # Mainnet/Testnet P2SH
        # P2SH: OP_HASH160 <20-byte-scripthash> OP_EQUAL
        return bytes([0xA9, 0x14]) + payload + bytes([0x87])

    raise ValueError(f"Unknown address version: {version}")


def is_op_return(script: bytes) -> bool:
    return len(script) > 0 and script[0] == OP_RETURN


def is_witness_program(script: bytes) -> bool:
    """
    Check for a witness program: a version opcode (OP_0..OP_16) followed by
    a single direct push of 2 to 40 bytes.
    """
    if len(script) < 4 or len(script) > 42:
        return False
    version = script[0]
    if version != OP_0 and not (OP_1 <= version <= OP_16):
        return False
    return script[1] == len(script) - 2


def serialized_script_size(script: bytes) -> int:
    """Size of a script as serialized in a TxOut (length prefix included)"""
    return len(varint(len(script))) + len(script)


def output_size(script: bytes) -> int:
    """Serialized size in bytes of an output locked to script"""
    return TXOUT_VALUE_SIZE + serialized_script_size(script)


def script_dust_value(script: bytes) -> int:
    """
    Minimum value for an output locked to script to not be dust.

    OP_RETURN outputs are never spent, so they have no dust threshold.
    """
    if is_op_return(script):
        return 0

    spend_size = DUST_SPEND_SIZE_WITNESS if is_witness_program(script) else DUST_SPEND_SIZE_LEGACY
    return DUST_RELAY_FEE_RATE_SAT_KVB // 1000 * (spend_size + output_size(script))


def is_dust(value: int, script: bytes) -> bool:
    return value < script_dust_value(script)
