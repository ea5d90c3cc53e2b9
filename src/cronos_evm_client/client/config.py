"""
Client configuration.

A configuration is fixed for the lifetime of a client: every call made
through that client goes to the same endpoint with the same credential.

Values can be read from the environment or from ~/.cronos-evm/.env:

    CRONOS_EVM_ENDPOINT=https://evm.cronos.org
    CRONOS_EVM_API_KEY=...
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Default config directory
CRONOS_EVM_DIR = Path.home() / ".cronos-evm"
CRONOS_EVM_ENV = CRONOS_EVM_DIR / ".env"

DEFAULT_ENDPOINT = "https://evm.cronos.org"

ENDPOINT_ENV_VAR = "CRONOS_EVM_ENDPOINT"
API_KEY_ENV_VAR = "CRONOS_EVM_API_KEY"


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings for one client.

    Attributes:
        endpoint: JSON-RPC URL requests are POSTed to (not validated here;
            a malformed URL fails when the first request is sent)
        api_key: Optional bearer token sent as ``Authorization: Bearer <key>``
    """

    endpoint: str
    api_key: Optional[str] = None

    def __repr__(self) -> str:
        masked = "***" if self.api_key else None
        return f"ClientConfig(endpoint={self.endpoint!r}, api_key={masked!r})"

    @property
    def headers(self) -> dict[str, str]:
        if self.api_key:
            return {"Authorization": f"Bearer {self.api_key}"}
        return {}

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Args:
            env_path: Path to a .env file (default: ~/.cronos-evm/.env).
                Loaded only if it exists.

        Raises:
            ValueError: If CRONOS_EVM_ENDPOINT is not set
        """
        env_path = env_path or CRONOS_EVM_ENV

        if env_path.exists():
            load_dotenv(env_path, override=True)

        endpoint = os.environ.get(ENDPOINT_ENV_VAR)
        if not endpoint:
            raise ValueError(
                f"{ENDPOINT_ENV_VAR} not found. Set it in the environment or in {env_path}"
            )

        return cls(endpoint=endpoint, api_key=os.environ.get(API_KEY_ENV_VAR) or None)
