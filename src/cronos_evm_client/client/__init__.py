"""
Client layer: configuration, JSON-RPC transport and the bound facade.

Uses httpx for HTTP; no web3.py dependency.
"""

from .config import DEFAULT_ENDPOINT, ClientConfig
from .factory import CronosClient, Crc20Methods, Crc721Methods, create_client
from .transport import RpcTransport

__all__ = [
    "DEFAULT_ENDPOINT",
    "ClientConfig",
    "CronosClient",
    "Crc20Methods",
    "Crc721Methods",
    "RpcTransport",
    "create_client",
]
