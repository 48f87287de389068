"""Error reporting for CLI commands."""

from typing import Any, NoReturn

import structlog
import typer
from rich.console import Console

from econdash.domain.exceptions import (
    EconDashError,
    FeatureAccessDeniedError,
    IndicatorNotFoundError,
)

logger = structlog.get_logger(__name__)
err_console = Console(stderr=True)


def handle_cli_error(error: Exception, context: dict[str, Any] | None = None) -> NoReturn:
    """Print a user-facing message for ``error`` and exit with a non-zero code.

    Known domain errors get a short message; anything else is logged first.
    """
    context = context or {}
    if isinstance(error, IndicatorNotFoundError):
        err_console.print(f"✗ Unknown indicator: {error.indicator_id}", style="bold red")
        err_console.print("Run 'econdash catalog' to list available indicators.", style="dim")
        raise typer.Exit(code=2) from error
    if isinstance(error, FeatureAccessDeniedError):
        err_console.print(f"✗ {error}", style="bold yellow")
        err_console.print("Upgrade your plan to use this feature.", style="dim")
        raise typer.Exit(code=3) from error
    if isinstance(error, EconDashError):
        err_console.print(f"✗ {error}", style="bold red")
        raise typer.Exit(code=1) from error

    logger.error("Command failed", error=str(error), error_type=type(error).__name__, **context)
    err_console.print(f"✗ Unexpected error: {error}", style="bold red")
    raise typer.Exit(code=1) from error
