from rich.console import Console

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_step",
    "print_success",
    "print_warning",
]

console = Console()
"""Launcher progress and suite listings."""

err_console = Console(stderr=True)
"""Launcher errors and warnings, kept off the pytest output on stdout."""


def print_error(message: str) -> None:
    """Report why a run, report or settings load failed."""
    err_console.print(f"[bold red]Error:[/bold red] {message}")


def print_success(message: str) -> None:
    """Report a finished suite run or written Allure report."""
    console.print(f"[bold green]{message}[/bold green]")


def print_warning(message: str) -> None:
    err_console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_info(message: str) -> None:
    console.print(f"[blue]{message}[/blue]")


def print_step(message: str) -> None:
    """Print a run stage header, e.g. "Running API tests"."""
    console.print(f"\n[bold cyan]>[/bold cyan] [bold]{message}[/bold]")
