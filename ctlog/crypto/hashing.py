"""
Hashing Utilities
Digest constants and hex helpers shared by the serializer, key helpers and CLI.

This module provides:
- SHA-256 hashing for raw bytes
- Hex encoding/decoding (0x prefix optional on input)

Determinism Notes:
- Always hash raw bytes exactly as given
- No whitespace stripping beyond surrounding blanks in hex input
"""
from __future__ import annotations

import hashlib


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hexadecimal string (no prefix).

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        'deadbeef'
    """
    return data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string to bytes.

    Args:
        hex_string: Hex string, optionally prefixed with 0x

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the string has odd length or contains invalid
                   hex characters
    """
    hex_content = hex_string.strip()
    if hex_content.startswith(("0x", "0X")):
        hex_content = hex_content[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length, got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "sha256",
    "to_hex",
    "from_hex",
]
