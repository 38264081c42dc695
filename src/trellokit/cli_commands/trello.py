"""Trello commands - board, stickers, search and whoami."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import typer
from rich.table import Table

from ..core import console
from ..core.auth import CredentialError
from ..core.exceptions import TrelloError
from ..entities import Board, Card, Member, Search
from ..entities.enums import SearchModelType

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(func: F) -> F:
    """Turn credential and service errors into a red message and exit code 1."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except CredentialError as e:
            console.error(f"Not authorized: {e.message}")
            if e.details:
                console.detail(e.details)
            raise typer.Exit(1) from None
        except TrelloError as e:
            console.error(e.message)
            if e.details:
                console.detail(e.details)
            raise typer.Exit(1) from None

    return wrapper  # type: ignore[return-value]


def _value(value: Any) -> str:
    if value is None:
        return "-"
    return str(getattr(value, "value", value))


@handle_errors
def board(board_id: str = typer.Argument(..., help="Board id or short link")) -> None:
    """Show a board's name, preferences and lists."""
    target = Board(board_id)
    console.console.print(f"[bold]{target.name}[/bold]")
    if target.description:
        console.detail(target.description)

    prefs = target.preferences
    console.info("Preferences")
    console.detail(f"Visibility: {_value(prefs.permission_level)}")
    console.detail(f"Voting: {_value(prefs.voting)}")
    console.detail(f"Comments: {_value(prefs.commenting)}")
    console.detail(f"Invitations: {_value(prefs.invitations)}")
    background = prefs.background
    console.detail(f"Background: {background.id if background else '-'}")

    table = Table(title="Lists")
    table.add_column("Id", style="dim")
    table.add_column("Name")
    table.add_column("Position", justify="right")
    for trello_list in target.lists:
        table.add_row(trello_list.id, trello_list.name or "", _value(trello_list.position))
    console.console.print(table)


@handle_errors
def stickers(card_id: str = typer.Argument(..., help="Card id")) -> None:
    """List the stickers on a card."""
    card = Card(card_id)
    items = list(card.stickers)
    if not items:
        console.warning("No stickers on this card.")
        return

    table = Table(title=f"Stickers on {card.name or card_id}")
    table.add_column("Id", style="dim")
    table.add_column("Name")
    table.add_column("Left", justify="right")
    table.add_column("Top", justify="right")
    table.add_column("Z", justify="right")
    table.add_column("Rotation", justify="right")
    for sticker in items:
        table.add_row(
            sticker.id,
            sticker.name or "",
            _value(sticker.left),
            _value(sticker.top),
            _value(sticker.z_index),
            _value(sticker.rotation),
        )
    console.console.print(table)


@handle_errors
def search(
    query: str = typer.Argument(..., help="Search text"),
    types: list[str] = typer.Option(
        None,
        "--type",
        "-t",
        help="Result type to include (actions, boards, cards, members, organizations). Repeatable.",
    ),
) -> None:
    """Search Trello and show the results by type."""
    model_types = SearchModelType.ALL
    if types:
        try:
            selected = [SearchModelType[name.upper()] for name in types]
        except KeyError as e:
            console.error(f"Unknown result type: {e.args[0].lower()}")
            raise typer.Exit(1) from None
        model_types = selected[0]
        for flag in selected[1:]:
            model_types |= flag

    results = Search(query, model_types)
    sections = [
        ("boards", SearchModelType.BOARDS, lambda: results.boards),
        ("cards", SearchModelType.CARDS, lambda: results.cards),
        ("members", SearchModelType.MEMBERS, lambda: results.members),
        ("organizations", SearchModelType.ORGANIZATIONS, lambda: results.organizations),
        ("actions", SearchModelType.ACTIONS, lambda: results.actions),
    ]
    for label, flag, get_items in sections:
        if flag not in model_types:
            continue
        items = get_items()
        console.info(f"{label.capitalize()} ({len(items)})")
        for item in items:
            console.detail(f"{item.id}  {_describe(item)}")


def _describe(item: Any) -> str:
    for attribute in ("name", "full_name", "display_name", "type"):
        value = getattr(item, attribute, None)
        if value:
            return str(value)
    return ""


@handle_errors
def whoami() -> None:
    """Show the member the configured token belongs to."""
    me = Member.me()
    console.success(f"Authorized as {me.full_name} (@{me.username})")
    console.detail(f"Id: {me.id}")
    if me.url:
        console.detail(me.url)


def register_trello_commands(app: typer.Typer) -> None:
    """Register board, stickers, search and whoami."""
    app.command("board")(board)
    app.command("stickers")(stickers)
    app.command("search")(search)
    app.command("whoami")(whoami)
