__version__ = "0.1.0"

__all__ = [
    # Client
    "ClientConfig",
    "CronosClient",
    "DEFAULT_ENDPOINT",
    "create_client",
    # Models
    "CallObject",
    "JsonRpcRequest",
    "RpcFailure",
    "RpcOutcome",
    "RpcSuccess",
    "parse_response",
    # Errors
    "CronosClientError",
    "DecodeError",
    "InvalidResponseError",
    "RpcError",
    # Formatting
    "decode_hex_string",
    "format_token_amount",
    "wei_to_ether",
]

from loguru import logger

from .client import DEFAULT_ENDPOINT, ClientConfig, CronosClient, create_client
from .errors import CronosClientError, DecodeError, InvalidResponseError, RpcError
from .helpers.formatting import decode_hex_string, format_token_amount, wei_to_ether
from .models import CallObject, JsonRpcRequest, RpcFailure, RpcOutcome, RpcSuccess, parse_response

# Library logging is off until the application calls logger.enable("cronos_evm_client").
logger.disable("cronos_evm_client")
