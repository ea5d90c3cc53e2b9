"""
JSON-RPC request and response models.

Requests are built by the caller: the library never produces ABI call
data, it only forwards ``method`` and ``params``.  Responses are parsed
into a tagged outcome so callers branch on the type instead of probing
optional fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, TypedDict, Union

from .errors import InvalidResponseError

JSONRPC_VERSION = "2.0"

# Transaction call object accepted by eth_call ("from" is a Python keyword).
CallObject = TypedDict(
    "CallObject",
    {
        "from": str,
        "to": str,
        "data": str,
        "gas": str,
        "gasPrice": str,
        "value": str,
    },
    total=False,
)


# A parameter is either a structured call object or a primitive scalar
# such as an address, a block tag ("latest") or a block number.
RpcParam = Union[CallObject, str, int, bool]


@dataclass(frozen=True)
class JsonRpcRequest:
    """
    A caller-built JSON-RPC call.

    ``method``, ``params`` and a caller-supplied ``id`` are sent as given.
    ``jsonrpc`` is always "2.0"; when ``id`` is None the transport numbers
    the request from its own counter.
    """

    method: str
    params: Sequence[RpcParam] = field(default_factory=tuple)
    id: Optional[Union[int, str]] = None

    @classmethod
    def coerce(cls, payload: "JsonRpcRequest | Mapping[str, Any]") -> "JsonRpcRequest":
        """Accept either a request instance or a ``{"method", "params"}`` mapping."""
        if isinstance(payload, cls):
            return payload
        if not isinstance(payload, Mapping):
            raise TypeError(
                f"Request payload must be a JsonRpcRequest or a mapping, got {type(payload).__name__}"
            )
        if "method" not in payload:
            raise TypeError("Request payload is missing 'method'")
        params = payload.get("params", ())
        if isinstance(params, (str, bytes)) or not isinstance(params, Sequence):
            raise TypeError("Request 'params' must be a sequence")
        return cls(method=str(payload["method"]), params=tuple(params), id=payload.get("id"))

    def to_dict(self, request_id: Optional[int] = None) -> dict[str, Any]:
        return {
            "jsonrpc": JSONRPC_VERSION,
            "method": self.method,
            "params": list(self.params),
            "id": self.id if self.id is not None else request_id,
        }


RequestPayload = Union[JsonRpcRequest, Mapping[str, Any]]


@dataclass(frozen=True)
class RpcSuccess:
    result: Any


@dataclass(frozen=True)
class RpcFailure:
    message: str
    code: Optional[int] = None
    data: Any = None


RpcOutcome = Union[RpcSuccess, RpcFailure]


def parse_response(body: Any) -> RpcOutcome:
    """
    Turn a decoded JSON-RPC response body into an outcome.

    Args:
        body: The JSON-decoded response body

    Returns:
        RpcFailure if the body carries an ``error`` object, else RpcSuccess

    Raises:
        InvalidResponseError: If the body is not a JSON-RPC response object
    """
    if not isinstance(body, Mapping):
        raise InvalidResponseError(
            f"Expected a JSON-RPC response object, got {type(body).__name__}"
        )

    error = body.get("error")
    if error is not None:
        if isinstance(error, Mapping):
            return RpcFailure(
                message=str(error.get("message", error)),
                code=error.get("code"),
                data=error.get("data"),
            )
        return RpcFailure(message=str(error))

    if "result" not in body:
        raise InvalidResponseError("JSON-RPC response has neither 'result' nor 'error'")

    return RpcSuccess(result=body["result"])


__all__ = [
    "CallObject",
    "JsonRpcRequest",
    "RequestPayload",
    "RpcFailure",
    "RpcOutcome",
    "RpcParam",
    "RpcSuccess",
    "parse_response",
]
