"""
Client factory.

``create_client`` builds one transport and exposes the CRC20 and CRC721
operations bound to it.  Construction performs no network activity.

Example:
    client = create_client(ClientConfig("https://evm.cronos.org", api_key="..."))
    payload = {"method": "eth_getBalance", "params": ["0xAccount", "latest"]}
    client.crc20.get_balance(payload)  # "1.5"
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Mapping, Optional

import httpx

from ..integrations import crc20, crc721
from ..models import RequestPayload
from .config import ClientConfig
from .transport import RpcTransport

Operation = Callable[[RequestPayload], str]


class _BoundOperations:
    _table: Mapping[str, Callable[[RequestPayload, RpcTransport], str]] = {}

    def __init__(self, transport: RpcTransport) -> None:
        self._transport = transport

    @property
    def operations(self) -> dict[str, Operation]:
        """Operation name (e.g. "getBalanceOf") → single-argument callable."""
        return {name: partial(func, transport=self._transport) for name, func in self._table.items()}


class Crc20Methods(_BoundOperations):
    _table = crc20.OPERATIONS

    def get_balance(self, payload: RequestPayload) -> str:
        return crc20.get_balance(payload, self._transport)

    def get_balance_of(self, payload: RequestPayload) -> str:
        return crc20.get_balance_of(payload, self._transport)

    def get_name(self, payload: RequestPayload) -> str:
        return crc20.get_name(payload, self._transport)

    def get_symbol(self, payload: RequestPayload) -> str:
        return crc20.get_symbol(payload, self._transport)

    def get_total_supply(self, payload: RequestPayload) -> str:
        return crc20.get_total_supply(payload, self._transport)


class Crc721Methods(_BoundOperations):
    _table = crc721.OPERATIONS

    def get_balance_of(self, payload: RequestPayload) -> str:
        return crc721.get_balance_of(payload, self._transport)

    def get_owner_of(self, payload: RequestPayload) -> str:
        return crc721.get_owner_of(payload, self._transport)

    def get_token_uri(self, payload: RequestPayload) -> str:
        return crc721.get_token_uri(payload, self._transport)


class CronosClient:
    """CRC20 and CRC721 operations sharing one transport."""

    def __init__(self, transport: RpcTransport) -> None:
        self._transport = transport
        self.crc20 = Crc20Methods(transport)
        self.crc721 = Crc721Methods(transport)

    @property
    def config(self) -> ClientConfig:
        return self._transport.config

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "CronosClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def create_client(
    config: ClientConfig | str,
    api_key: Optional[str] = None,
    *,
    http_client: Optional[httpx.Client] = None,
) -> CronosClient:
    """
    Create a client bound to one endpoint.

    Args:
        config: A ClientConfig, or the endpoint URL
        api_key: Bearer token, only used when ``config`` is a URL
        http_client: Pre-built httpx.Client to send through (custom
            timeouts, proxies, or a MockTransport in tests).  The caller
            keeps ownership and must close it.

    Returns:
        CronosClient exposing ``crc20`` and ``crc721``
    """
    if not isinstance(config, ClientConfig):
        config = ClientConfig(endpoint=config, api_key=api_key)
    elif api_key is not None:
        raise TypeError("api_key cannot be combined with a ClientConfig")

    return CronosClient(RpcTransport(config, http_client=http_client))
