"""
CRC20 (fungible token) operations.

Each operation POSTs a caller-built payload, checks the response
envelope and decodes ``result``:

- get_balance / get_balance_of: hex wei → ether string (18 decimals)
- get_name / get_symbol: ABI string → text
- get_total_supply: hex integer → string scaled by 6 decimals

The scaling is fixed per operation and is NOT read from the token's
``decimals()``.  A token with other decimals is displayed mis-scaled;
query ``decimals()`` yourself and use ``format_token_amount`` if that
matters.

Example:
    payload = {
        "method": "eth_call",
        "params": [{"to": "0xContractAddress", "data": "0x70a08231..."}, "latest"],
    }
    balance = crc20.get_balance_of(payload, transport)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ..helpers.formatting import decode_hex_string, format_token_amount, wei_to_ether
from ..models import RequestPayload
from .base import run_operation

if TYPE_CHECKING:
    from ..client.transport import RpcTransport

MODULE = "crc20"

TOTAL_SUPPLY_DECIMALS = 6


def _total_supply(result: str) -> str:
    return format_token_amount(result, TOTAL_SUPPLY_DECIMALS)


def get_balance(payload: RequestPayload, transport: RpcTransport) -> str:
    """Native balance of an account, usually via ``eth_getBalance``."""
    return run_operation(transport, payload, f"{MODULE}/getBalance", wei_to_ether)


def get_balance_of(payload: RequestPayload, transport: RpcTransport) -> str:
    """Token balance of an account, via ``eth_call`` to ``balanceOf(address)``."""
    return run_operation(transport, payload, f"{MODULE}/getBalanceOf", wei_to_ether)


def get_name(payload: RequestPayload, transport: RpcTransport) -> str:
    return run_operation(transport, payload, f"{MODULE}/getName", decode_hex_string)


def get_symbol(payload: RequestPayload, transport: RpcTransport) -> str:
    return run_operation(transport, payload, f"{MODULE}/getSymbol", decode_hex_string)


def get_total_supply(payload: RequestPayload, transport: RpcTransport) -> str:
    """Total supply, scaled by TOTAL_SUPPLY_DECIMALS."""
    return run_operation(transport, payload, f"{MODULE}/getTotalSupply", _total_supply)


OPERATIONS: dict[str, Callable[[RequestPayload, "RpcTransport"], str]] = {
    "getBalance": get_balance,
    "getBalanceOf": get_balance_of,
    "getName": get_name,
    "getSymbol": get_symbol,
    "getTotalSupply": get_total_supply,
}
