"""Shared request → decode pipeline for token operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from loguru import logger

from ..errors import DecodeError, RpcError
from ..models import RequestPayload, RpcFailure

if TYPE_CHECKING:
    from ..client.transport import RpcTransport

Decoder = Callable[[Any], str]


def passthrough(result: Any) -> str:
    """Return a string result untouched (addresses, identifiers)."""
    if not isinstance(result, str):
        raise DecodeError(f"Expected a string result, got {type(result).__name__}")
    return result


def run_operation(
    transport: RpcTransport,
    payload: RequestPayload,
    operation: str,
    decoder: Decoder,
) -> str:
    """
    Send one request and decode its result.

    Any failure is logged as ``[<operation>] error: <message>`` and
    re-raised unchanged; nothing is retried and no default is returned.

    Args:
        transport: Bound transport to send through
        payload: Caller-built JSON-RPC request
        operation: Tag such as "crc20/getBalance"
        decoder: Applied to ``result`` on success

    Raises:
        RpcError: If the node returned an error object (decoder not run)
        DecodeError: If the result could not be decoded
        httpx.HTTPError: On transport failure
    """
    try:
        outcome = transport.send(payload)
        if isinstance(outcome, RpcFailure):
            raise RpcError(operation, outcome.message, outcome.code, outcome.data)
        return decoder(outcome.result)
    except RpcError as exc:
        logger.error(f"[{operation}] error: {exc.node_message}")
        raise
    except Exception as exc:
        logger.error(f"[{operation}] error: {exc}")
        raise
