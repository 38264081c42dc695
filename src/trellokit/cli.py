"""CLI entry point for trellokit."""

import typer
from rich.console import Console

from . import __version__
from .cli_commands.config import register_config_commands
from .cli_commands.trello import register_trello_commands


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console = Console()
        console.print(f"trellokit v{__version__}")
        raise typer.Exit(0)


app = typer.Typer(
    name="trellokit",
    help="""Typed, lazily synchronized access to the Trello REST API.

Credentials come from TRELLO_APP_KEY / TRELLO_USER_TOKEN, from
.trellokit/config.json, or from ~/.trellokit/credentials.json.

Quick start:
  trellokit config init
  trellokit whoami
  trellokit board <board-id>
  trellokit search "release notes" --type cards
""",
    add_completion=False,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """trellokit - Trello from the command line."""
    pass


register_config_commands(app)  # config init, config show, config path
register_trello_commands(app)  # board, stickers, search, whoami


if __name__ == "__main__":
    app()
