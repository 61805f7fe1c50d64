from pydantic import ValidationError

from apisuite.cli.console import err_console

__all__ = ["handle_validation_error"]


def handle_validation_error(e: ValidationError) -> None:
    """Print each invalid setting with the environment variable that feeds it."""
    err_console.print("[bold red]Configuration Error:[/bold red]")
    for error in e.errors():
        field_name = ".".join(str(loc) for loc in error["loc"]) or "Global Config"
        env_var = f"APISUITE_{field_name.upper()}" if error["loc"] else ""
        hint = f" [dim]({env_var})[/dim]" if env_var else ""
        err_console.print(
            f"  Field [bold]{field_name}[/bold]{hint}: {error['msg']} "
            f"(Invalid Value: [red]{error.get('input')!r}[/red])"
        )
