"""
JSON-RPC transport for a Cronos EVM node.

One httpx.Client per transport, bound to a single endpoint and header
set.  Every call is a single POST to the endpoint's root path; timeouts
and connection pooling are httpx's defaults unless the caller hands in
its own client.
"""

from __future__ import annotations

import itertools
from typing import Optional

import httpx
from loguru import logger

from ..errors import InvalidResponseError
from ..models import JsonRpcRequest, RequestPayload, RpcOutcome, parse_response
from .config import ClientConfig


class RpcTransport:
    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = config
        self._request_ids = itertools.count(1)
        self._owns_client = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(headers=config.headers)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def send(self, payload: RequestPayload) -> RpcOutcome:
        """
        POST a JSON-RPC request and parse the envelope.

        Args:
            payload: Request with ``method`` and ``params``

        Returns:
            RpcSuccess or RpcFailure

        Raises:
            httpx.HTTPError: On network failure or a non-2xx status
            InvalidResponseError: If the body is not a JSON-RPC response
        """
        request = JsonRpcRequest.coerce(payload)
        body = request.to_dict(request_id=next(self._request_ids))
        logger.debug(f"POST {self._config.endpoint} method={request.method} id={body['id']}")

        # Headers are passed per request so an injected client gets them too.
        response = self._http.post(self._config.endpoint, json=body, headers=self._config.headers)
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as exc:
            raise InvalidResponseError(f"Response body is not JSON: {exc}") from exc

        return parse_response(data)

    def close(self) -> None:
        if self._owns_client:
            self._http.close()
