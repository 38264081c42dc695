"""Config commands - init, show and path of the trellokit configuration file."""

from __future__ import annotations

import json

import typer

from ..core import console
from ..core.config import (
    generate_default_config,
    get_config_path,
    load_config,
    save_config,
)
from ..core.exceptions import ConfigError

config_app = typer.Typer(help="Manage the trellokit configuration file.", add_completion=False)


def _mask(secret: str | None) -> str | None:
    """Hide all but the last four characters of a secret."""
    if not secret:
        return secret
    if len(secret) <= 4:
        return "****"
    return "*" * (len(secret) - 4) + secret[-4:]


@config_app.command("init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file"),
) -> None:
    """Write a config file with default values to .trellokit/config.json."""
    path = get_config_path()
    if path.exists() and not force:
        console.warning(f"Config file already exists: {path}")
        console.detail("Use --force to overwrite it.")
        raise typer.Exit(1)

    save_config(generate_default_config(), path)
    console.success(f"Wrote default configuration to {path}")
    console.detail("Set TRELLO_APP_KEY and TRELLO_USER_TOKEN, or edit api.app_key / api.user_token.")


@config_app.command("show")
def show() -> None:
    """Print the effective configuration (file plus environment), token masked."""
    try:
        config = load_config()
    except ConfigError as e:
        console.error(str(e))
        raise typer.Exit(1) from None

    data = config.model_dump()
    data["api"]["app_key"] = _mask(data["api"]["app_key"])
    data["api"]["user_token"] = _mask(data["api"]["user_token"])
    console.console.print_json(json.dumps(data))


@config_app.command("path")
def path() -> None:
    """Print the path of the config file."""
    console.console.print(str(get_config_path()))


def register_config_commands(app: typer.Typer) -> None:
    """Register the `config` command group."""
    app.add_typer(config_app, name="config")
