"""
Exception hierarchy for the Cronos EVM client.

Transport failures are not wrapped: httpx errors (connect, timeout,
non-2xx status) reach the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Optional


class CronosClientError(RuntimeError):
    exit_code: int = 1


class RpcError(CronosClientError):
    """The node answered with a JSON-RPC ``error`` object."""

    exit_code = 2

    def __init__(
        self,
        operation: str,
        message: str,
        code: Optional[int] = None,
        data: Any = None,
    ) -> None:
        self.operation = operation
        self.node_message = message
        self.code = code
        self.data = data
        super().__init__(f"[{operation}] error: {message}")


class DecodeError(CronosClientError, ValueError):
    exit_code = 3


class InvalidResponseError(DecodeError):
    exit_code = 4
