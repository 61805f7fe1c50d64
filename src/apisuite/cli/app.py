"""CLI launcher for the API test suites, using Typer."""

import sys
from typing import Annotated

import typer
from pydantic import ValidationError

from apisuite.cli.console import (
    console,
    print_error,
    print_info,
    print_step,
    print_success,
    print_warning,
)
from apisuite.cli.utils import handle_validation_error
from apisuite.exceptions import ApiSuiteError, ConfigError, RunnerError
from apisuite.models.config import Settings
from apisuite.services.runner import SUITES, SuiteRunner

__all__ = ["app", "main"]

app = typer.Typer(
    name="apisuite",
    help="Run the JSONPlaceholder, REST Countries and httpbin API test suites.",
    add_completion=False,
)

HELP_TEXT = """
Available commands:
  apisuite                - Run all tests and generate report
  apisuite debug          - Run tests in debug mode
  apisuite ui             - Run tests and serve the live report
  apisuite suite <name>   - Run specific test suite
  apisuite help           - Show this help message
"""


def _load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        handle_validation_error(e)
        raise ConfigError("Configuration validation failed.") from e


def _run_all(runner: SuiteRunner) -> None:
    print_step("Running API tests")
    if not runner.run():
        raise RunnerError("Test execution failed. See the pytest output above.")
    print_success("All tests executed")

    print_step("Generating Allure report")
    try:
        report_dir = runner.generate_report()
        print_info("Opening report in browser...")
        runner.open_report()
    except RunnerError as e:
        print_warning(f"Could not open Allure report automatically: {e}")
        console.print(
            f"[dim]  You can manually open {runner.settings.allure_report_dir}/index.html "
            "in your browser.[/dim]"
        )
    else:
        print_success(f"Report written to {report_dir}")


def _run_suite(runner: SuiteRunner, name: str | None) -> None:
    if not name:
        console.print("Please specify a test suite name")
        return
    path = runner.resolve_suite(name)
    print_step(f"Running {name} tests")
    if not runner.run(path):
        raise RunnerError(f"{name} tests failed.")
    print_success(f"{name} tests completed")


def _run_ui(runner: SuiteRunner) -> None:
    print_step("Running tests with live report")
    passed = runner.run()
    runner.serve_report()
    if not passed:
        raise RunnerError("Test execution failed.")


def _print_help() -> None:
    console.print(HELP_TEXT)
    console.print("Available test suites:")
    for name, filename in SUITES.items():
        console.print(f"  {name:<16} {filename}")


@app.command()
def run(
    command: Annotated[
        str | None, typer.Argument(help="debug, ui, suite or help; omit to run everything")
    ] = None,
    name: Annotated[str | None, typer.Argument(help="Suite name for the 'suite' command")] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose logging")
    ] = False,
) -> None:
    """
    Run the API tests and build the Allure report.
    """
    from apisuite.logging import configure_logging

    configure_logging("DEBUG" if verbose else "INFO")

    if command == "help":
        _print_help()
        return
    if command not in (None, "debug", "ui", "suite"):
        console.print('[red]Unknown command.[/red] Use "help" to see available commands.')
        return

    runner = SuiteRunner(_load_settings())
    if command is None:
        _run_all(runner)
    elif command == "debug":
        print_step("Running tests in debug mode")
        if not runner.run_debug():
            raise RunnerError("Debug run failed.")
    elif command == "ui":
        _run_ui(runner)
    else:
        _run_suite(runner, name)


def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except ApiSuiteError as e:
        print_error(e.message)
        sys.exit(e.exit_code)
    except Exception as e:
        print_error(f"An unexpected error occurred: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
