"""econdash command-line entry point."""

import typer

from econdash.cli import indicators
from econdash.infrastructure.logging_config import configure_logging

app = typer.Typer(
    name="econdash",
    help="Economic indicators dashboard: series, statistics and tier-gated tools",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    configure_logging()


app.command("catalog")(indicators.show_catalog)
app.command("series")(indicators.show_series)
app.command("dashboard")(indicators.show_dashboard)
app.command("favorites")(indicators.show_favorites)
app.command("compare")(indicators.compare)
app.command("export")(indicators.export)
app.command("alerts")(indicators.check_alerts)
app.command("access")(indicators.show_access)


if __name__ == "__main__":
    app()
