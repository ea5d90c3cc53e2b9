"""
cronos-evm CLI

Thin command-line wrapper over the CRC20 / CRC721 operations.  Call data
is never built here: pass it with --data (or a full --params array).

Commands:
  crc20 balance       - Native balance (eth_getBalance)
  crc20 balance-of    - Token balance of an account
  crc20 name          - Token name
  crc20 symbol        - Token symbol
  crc20 total-supply  - Token total supply
  crc721 balance-of   - Number of NFTs held by an account
  crc721 owner-of     - Owner of a token id
  crc721 token-uri    - Metadata URI of a token id
"""

from __future__ import annotations

import json
import sys
from typing import Any, Callable, Optional

import click
import httpx
from loguru import logger

from . import __version__
from .client import DEFAULT_ENDPOINT, ClientConfig, create_client
from .client.config import API_KEY_ENV_VAR, ENDPOINT_ENV_VAR
from .errors import CronosClientError
from .models import JsonRpcRequest


# ============ Payload options ============


def _build_request(
    method: Optional[str],
    params_json: Optional[str],
    to: Optional[str],
    data: Optional[str],
    block: str,
    default_method: str = "eth_call",
) -> JsonRpcRequest:
    """Build the request from --params, or from the --to/--data shortcut."""
    if params_json is not None:
        try:
            params = json.loads(params_json)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(f"not valid JSON: {exc}", param_hint="--params")
        if not isinstance(params, list):
            raise click.BadParameter("must be a JSON array", param_hint="--params")
        return JsonRpcRequest(method=method or default_method, params=tuple(params))

    if not to or not data:
        raise click.UsageError("Provide --params, or both --to and --data.")

    return JsonRpcRequest(method=method or default_method, params=({"to": to, "data": data}, block))


def _payload_options(func: Callable[..., Any]) -> Callable[..., Any]:
    options = [
        click.option("--method", default=None, help="JSON-RPC method (default: eth_call)"),
        click.option("--params", "params_json", default=None, help="Full params as a JSON array"),
        click.option("--to", default=None, help="Contract address (with --data)"),
        click.option("--data", default=None, help="0x-prefixed call data (with --to)"),
        click.option("--block", default="latest", show_default=True, help="Block tag or number"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _run(ctx: click.Context, group: str, operation: str, request: JsonRpcRequest) -> None:
    config: ClientConfig = ctx.obj["config"]
    try:
        with create_client(config) as client:
            value = getattr(client, group).operations[operation](request)
    except (CronosClientError, httpx.HTTPError) as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(getattr(exc, "exit_code", 1))
    click.echo(value)


# ============ Main CLI Group ============


@click.group()
@click.version_option(version=__version__, prog_name="cronos-evm")
@click.option(
    "--endpoint",
    envvar=ENDPOINT_ENV_VAR,
    default=DEFAULT_ENDPOINT,
    show_default=True,
    help="Cronos EVM JSON-RPC URL",
)
@click.option("--api-key", envvar=API_KEY_ENV_VAR, default=None, help="Bearer token for the endpoint")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.pass_context
def cli(ctx: click.Context, endpoint: str, api_key: Optional[str], log_level: str) -> None:
    """Query CRC20 / CRC721 tokens on a Cronos EVM node."""
    logger.remove()
    logger.add(sys.stderr, level=log_level.upper())
    logger.enable("cronos_evm_client")

    ctx.ensure_object(dict)
    ctx.obj["config"] = ClientConfig(endpoint=endpoint, api_key=api_key or None)


# ============ CRC20 ============


@cli.group()
def crc20() -> None:
    """Fungible token (CRC20) queries."""


@crc20.command("balance")
@click.option("--address", default=None, help="Account address (builds eth_getBalance params)")
@click.option("--params", "params_json", default=None, help="Full params as a JSON array")
@click.option("--block", default="latest", show_default=True, help="Block tag or number")
@click.pass_context
def crc20_balance(
    ctx: click.Context,
    address: Optional[str],
    params_json: Optional[str],
    block: str,
) -> None:
    """Native balance in ether (18 decimals)."""
    if params_json is None:
        if not address:
            raise click.UsageError("Provide --address or --params.")
        params_json = json.dumps([address, block])
    request = _build_request("eth_getBalance", params_json, None, None, block)
    _run(ctx, "crc20", "getBalance", request)


@crc20.command("balance-of")
@_payload_options
@click.pass_context
def crc20_balance_of(ctx: click.Context, method, params_json, to, data, block) -> None:
    """Token balance (18 decimals)."""
    _run(ctx, "crc20", "getBalanceOf", _build_request(method, params_json, to, data, block))


@crc20.command("name")
@_payload_options
@click.pass_context
def crc20_name(ctx: click.Context, method, params_json, to, data, block) -> None:
    """Token name."""
    _run(ctx, "crc20", "getName", _build_request(method, params_json, to, data, block))


@crc20.command("symbol")
@_payload_options
@click.pass_context
def crc20_symbol(ctx: click.Context, method, params_json, to, data, block) -> None:
    """Token symbol."""
    _run(ctx, "crc20", "getSymbol", _build_request(method, params_json, to, data, block))


@crc20.command("total-supply")
@_payload_options
@click.pass_context
def crc20_total_supply(ctx: click.Context, method, params_json, to, data, block) -> None:
    """Total supply (6 decimals)."""
    _run(ctx, "crc20", "getTotalSupply", _build_request(method, params_json, to, data, block))


# ============ CRC721 ============


@cli.group()
def crc721() -> None:
    """Non-fungible token (CRC721) queries."""


@crc721.command("balance-of")
@_payload_options
@click.pass_context
def crc721_balance_of(ctx: click.Context, method, params_json, to, data, block) -> None:
    """Number of tokens held by an account."""
    _run(ctx, "crc721", "getBalanceOf", _build_request(method, params_json, to, data, block))


@crc721.command("owner-of")
@_payload_options
@click.pass_context
def crc721_owner_of(ctx: click.Context, method, params_json, to, data, block) -> None:
    """Owner address of a token id."""
    _run(ctx, "crc721", "getOwnerOf", _build_request(method, params_json, to, data, block))


@crc721.command("token-uri")
@_payload_options
@click.pass_context
def crc721_token_uri(ctx: click.Context, method, params_json, to, data, block) -> None:
    """Metadata URI of a token id."""
    _run(ctx, "crc721", "getTokenUri", _build_request(method, params_json, to, data, block))


if __name__ == "__main__":
    cli()
