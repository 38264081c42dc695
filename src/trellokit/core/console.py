"""Console output helpers for the CLI (rich)."""

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def info(message: str) -> None:
    console.print(f"[cyan]{message}[/cyan]")


def success(message: str) -> None:
    console.print(f"[green]✓ {message}[/green]")


def warning(message: str) -> None:
    console.print(f"[yellow]{message}[/yellow]")


def error(message: str) -> None:
    err_console.print(f"[red]{message}[/red]")


def detail(message: str) -> None:
    console.print(f"  [dim]{message}[/dim]")
