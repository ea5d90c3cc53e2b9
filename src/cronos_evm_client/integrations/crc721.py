"""
CRC721 (non-fungible token) operations.

- get_balance_of: hex integer → unscaled decimal string
- get_owner_of: result returned as-is (the owner address)
- get_token_uri: ABI string → text
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ..helpers.formatting import decode_hex_string, format_token_amount
from ..models import RequestPayload
from .base import passthrough, run_operation

if TYPE_CHECKING:
    from ..client.transport import RpcTransport

MODULE = "crc721"


def _token_count(result: str) -> str:
    return format_token_amount(result, 0)


def get_balance_of(payload: RequestPayload, transport: RpcTransport) -> str:
    """Number of tokens held by an account."""
    return run_operation(transport, payload, f"{MODULE}/getBalanceOf", _token_count)


def get_owner_of(payload: RequestPayload, transport: RpcTransport) -> str:
    """Owner of a token id; no decoding is applied to the result."""
    return run_operation(transport, payload, f"{MODULE}/getOwnerOf", passthrough)


def get_token_uri(payload: RequestPayload, transport: RpcTransport) -> str:
    """Metadata URI of a token id."""
    return run_operation(transport, payload, f"{MODULE}/getTokenUri", decode_hex_string)


OPERATIONS: dict[str, Callable[[RequestPayload, "RpcTransport"], str]] = {
    "getBalanceOf": get_balance_of,
    "getOwnerOf": get_owner_of,
    "getTokenUri": get_token_uri,
}
