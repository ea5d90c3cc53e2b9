"""Pure helpers for decoding raw node results."""

from .formatting import (
    ETHER_DECIMALS,
    decode_hex_string,
    format_token_amount,
    format_units,
    parse_hex_int,
    wei_to_ether,
)

__all__ = [
    "ETHER_DECIMALS",
    "decode_hex_string",
    "format_token_amount",
    "format_units",
    "parse_hex_int",
    "wei_to_ether",
]
