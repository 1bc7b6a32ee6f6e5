"""
API client access for CLI commands.

Commands never read the environment themselves: the root callback stores a
ClientConfig on the Typer context and commands build their client from it.
"""

import typer

from owo.api.client import OwoClient
from owo.core.config import ClientConfig


def get_config(ctx: typer.Context) -> ClientConfig:
    """Return the ClientConfig resolved by the root callback."""
    config = ctx.find_object(ClientConfig)
    if config is None:
        raise RuntimeError("CLI context has no ClientConfig; run commands through the root app")
    return config


def get_api_client(config: ClientConfig) -> OwoClient:
    """Create an API client for one command invocation."""
    return OwoClient(config)
