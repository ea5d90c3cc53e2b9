"""
Formatting helpers for raw JSON-RPC results.

Nodes return integers and ABI-encoded values as 0x-prefixed hex strings.
These helpers turn them into display strings without going through
float, so 256-bit amounts keep every digit.
"""

from __future__ import annotations

import re

from eth_abi import decode
from eth_abi.exceptions import DecodingError

from ..errors import DecodeError

ETHER_DECIMALS = 18

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]*$")
_WORD_SIZE = 32


def strip_hex_prefix(value: str) -> str:
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def parse_hex_int(hex_string: str) -> int:
    """
    Parse an unsigned hex quantity of any size.

    Args:
        hex_string: Hex digits, with or without a 0x prefix

    Returns:
        The integer value ("", "0x" and all-zero payloads give 0)

    Raises:
        DecodeError: If the value is not a string of hex digits
    """
    if not isinstance(hex_string, str):
        raise DecodeError(f"Expected a hex string, got {type(hex_string).__name__}")
    digits = strip_hex_prefix(hex_string.strip())
    if not _HEX_DIGITS.match(digits):
        raise DecodeError(f"Invalid hex quantity: {hex_string!r}")
    if not digits:
        return 0
    return int(digits, 16)


def format_units(value: int, decimals: int) -> str:
    """Render ``value / 10**decimals`` exactly, trimming trailing zeros."""
    if decimals < 0:
        raise DecodeError(f"decimals must be non-negative, got {decimals}")
    if value < 0:
        raise DecodeError(f"Token amounts are unsigned, got {value}")
    if decimals == 0:
        return str(value)

    whole, frac = divmod(value, 10 ** decimals)
    frac_text = str(frac).rjust(decimals, "0").rstrip("0")
    if not frac_text:
        return str(whole)
    return f"{whole}.{frac_text}"


def format_token_amount(hex_string: str, decimals: int) -> str:
    """
    Convert a hex integer into a decimal string scaled by ``decimals``.

    Example: ``format_token_amount("0xf4240", 6) == "1"``.
    """
    return format_units(parse_hex_int(hex_string), decimals)


def wei_to_ether(hex_string: str) -> str:
    """Convert a hex wei amount to an ether string (18 decimals)."""
    return format_token_amount(hex_string, ETHER_DECIMALS)


def _is_abi_dynamic_string(raw: bytes) -> bool:
    # offset word, then a length word at that offset, then the payload
    if len(raw) < 2 * _WORD_SIZE or len(raw) % _WORD_SIZE:
        return False
    offset = int.from_bytes(raw[:_WORD_SIZE], "big")
    if offset % _WORD_SIZE or offset + _WORD_SIZE > len(raw):
        return False
    length = int.from_bytes(raw[offset:offset + _WORD_SIZE], "big")
    return offset + _WORD_SIZE + length <= len(raw)


def decode_hex_string(hex_string: str) -> str:
    """
    Decode a hex-encoded string result into text.

    Handles the ABI dynamic-string layout returned by ``name()``,
    ``symbol()`` and ``tokenURI()``, and falls back to plain hex text
    (e.g. ``bytes32`` names) with trailing null padding removed.

    Raises:
        DecodeError: On invalid hex, a malformed ABI string or bytes that
            are not UTF-8
    """
    if not isinstance(hex_string, str):
        raise DecodeError(f"Expected a hex string, got {type(hex_string).__name__}")
    digits = strip_hex_prefix(hex_string.strip())
    try:
        raw = bytes.fromhex(digits)
    except ValueError as exc:
        raise DecodeError(f"Invalid hex string: {hex_string!r}") from exc

    if _is_abi_dynamic_string(raw):
        try:
            (text,) = decode(["string"], raw, strict=False)
        except UnicodeDecodeError as exc:
            raise DecodeError(f"String payload is not valid UTF-8: {exc}") from exc
        except DecodingError as exc:
            raise DecodeError(f"Malformed ABI string: {exc}") from exc
        # some tokens zero-fill the name inside the declared length
        return text.rstrip("\x00")

    try:
        return raw.rstrip(b"\x00").decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"String payload is not valid UTF-8: {exc}") from exc
