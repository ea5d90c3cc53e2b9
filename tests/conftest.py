from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

import httpx
import pytest
from loguru import logger

from cronos_evm_client import ClientConfig, CronosClient, create_client

ENDPOINT = "https://rpc.cronos.test/v1/node"


@dataclass
class FakeNode:
    """Records JSON-RPC requests and answers them from a queue."""

    responses: list[Any] = field(default_factory=list)
    requests: list[httpx.Request] = field(default_factory=list)

    def reply(self, body: Any, status_code: int = 200) -> "FakeNode":
        self.responses.append((status_code, body))
        return self

    def result(self, value: Any) -> "FakeNode":
        return self.reply({"jsonrpc": "2.0", "id": 1, "result": value})

    def error(self, message: str, code: int = -32000) -> "FakeNode":
        return self.reply({"jsonrpc": "2.0", "id": 1, "error": {"code": code, "message": message}})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, body = self.responses.pop(0)
        if isinstance(body, Exception):
            raise body
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)

    @property
    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture()
def node() -> FakeNode:
    return FakeNode()


@pytest.fixture()
def make_client(node: FakeNode) -> Iterator[Callable[..., CronosClient]]:
    """Build a client whose HTTP traffic goes to the fake node."""
    http_clients: list[httpx.Client] = []

    def _make(api_key: str | None = None, endpoint: str = ENDPOINT) -> CronosClient:
        http = node.http_client()
        http_clients.append(http)
        return create_client(ClientConfig(endpoint=endpoint, api_key=api_key), http_client=http)

    yield _make

    for http in http_clients:
        http.close()


@pytest.fixture()
def log_messages() -> Iterator[list[str]]:
    """Capture loguru messages emitted by the library."""
    messages: list[str] = []
    logger.enable("cronos_evm_client")
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("cronos_evm_client")


@pytest.fixture()
def sample_call() -> dict[str, Any]:
    return {
        "method": "eth_call",
        "params": [
            {"to": "0x5C7F8A570d578ED84E63fdFA7b1eE72dEae1AE23", "data": "0x70a08231"},
            "latest",
        ],
    }
