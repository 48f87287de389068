"""Indicator CLI commands."""

from datetime import date, datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from econdash.application.use_cases import (
    CompareIndicatorsRequest,
    EvaluateAlertsRequest,
    ExportIndicatorCsvRequest,
    GetDashboardRequest,
    GetFavoritesRequest,
    GetIndicatorDataRequest,
    IndicatorView,
)
from econdash.cli.error_handler import handle_cli_error
from econdash.cli.utils import async_command
from econdash.domain.models import (
    CATEGORY_NAMES,
    AlertCondition,
    AlertRule,
    GatedResult,
    IndicatorCategory,
    SignalSentiment,
)
from econdash.infrastructure.containers import get_container

console = Console()

_SENTIMENT_STYLES = {
    SignalSentiment.BULLISH: "green",
    SignalSentiment.BEARISH: "red",
    SignalSentiment.NEUTRAL: "white",
    SignalSentiment.MIXED: "yellow",
}

StartOption = typer.Option(None, "--start", "-s", formats=["%Y-%m-%d"], help="Start date")
EndOption = typer.Option(None, "--end", "-e", formats=["%Y-%m-%d"], help="End date")
TierOption = typer.Option(None, "--tier", "-t", help="Subscription tier (free, basic, pro)")


def _to_date(value: datetime | None) -> date | None:
    return value.date() if value is not None else None


def _fmt(value: float | None) -> str:
    return "-" if value is None else f"{value:,.2f}"


def _print_locked(result: GatedResult) -> None:
    console.print(f"[yellow]🔒 {result.reason}[/yellow]")


def _views_table(title: str, views: list[IndicatorView]) -> Table:
    table = Table(title=title)
    table.add_column("Indicator", style="cyan")
    table.add_column("Latest", justify="right")
    table.add_column("Date")
    table.add_column("Unit", style="dim")
    table.add_column("Signal")
    table.add_column("Source", style="dim")
    for view in views:
        latest = view.series.latest
        style = _SENTIMENT_STYLES.get(view.signal.sentiment, "white")
        table.add_row(
            view.indicator.name,
            _fmt(latest.value if latest else None),
            latest.date.isoformat() if latest else "-",
            view.indicator.unit,
            f"[{style}]{view.signal.sentiment.value}[/{style}]",
            view.series.source.value,
        )
    return table


def show_catalog(
    category: IndicatorCategory | None = typer.Option(
        None, "--category", "-c", help="Only list one dashboard section"
    ),
) -> None:
    """List the indicators in the catalog."""
    catalog = get_container().catalog()
    indicators = catalog.by_category(category) if category else list(catalog)

    table = Table(title=CATEGORY_NAMES[category] if category else "Indicators")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Frequency")
    table.add_column("Calculation")
    table.add_column("Unit", style="dim")
    for indicator in indicators:
        table.add_row(
            indicator.id,
            indicator.name,
            indicator.frequency.value,
            indicator.calculation.value,
            indicator.unit,
        )
    console.print(table)


@async_command
async def show_series(
    indicator_id: str = typer.Argument(..., help="Indicator id, e.g. UNRATE"),
    start: datetime | None = StartOption,
    end: datetime | None = EndOption,
    tier: str | None = TierOption,
    moving_average: list[int] | None = typer.Option(
        None, "--ma", help="Moving average window size (repeatable)"
    ),
    points: int = typer.Option(12, "--points", "-n", help="Number of recent points to show"),
) -> None:
    """Show an indicator's recent values, statistics and signal."""
    try:
        use_case = get_container().get_indicator_data_use_case()
        response = await use_case.execute(
            GetIndicatorDataRequest(
                indicator_id=indicator_id,
                start_date=_to_date(start),
                end_date=_to_date(end),
                tier=tier,
                moving_average_windows=moving_average or None,
            )
        )
    except Exception as e:
        handle_cli_error(e, context={"indicator_id": indicator_id})

    view = response.view
    series = view.series
    console.print(f"[bold]{view.indicator.name}[/bold] ({view.indicator.unit})")
    if series.is_mock:
        console.print("[yellow]Showing demo data: upstream source unavailable[/yellow]")

    table = Table(title="Recent values")
    table.add_column("Date")
    table.add_column("Value", justify="right")
    for point in series.points[-points:]:
        table.add_row(point.date.isoformat(), _fmt(point.value))
    console.print(table)

    stats = series.statistics
    console.print(
        f"Mean {_fmt(stats.mean)} | Median {_fmt(stats.median)} | "
        f"Std dev {_fmt(stats.std_dev)} | Min {_fmt(stats.min)} | "
        f"Max {_fmt(stats.max)} | Count {stats.count}"
    )
    style = _SENTIMENT_STYLES.get(view.signal.sentiment, "white")
    console.print(f"Signal: [{style}]{view.signal.message}[/{style}]")

    if response.moving_averages.granted:
        for window, averaged in (response.moving_averages.data or {}).items():
            latest = averaged[-1].value if averaged else None
            console.print(f"MA({window}): {_fmt(latest)}")
    else:
        _print_locked(response.moving_averages)

    if response.advanced_stats.granted:
        change = response.advanced_stats.data
        if change is not None:
            console.print(
                f"Change over window: {_fmt(change.absolute_change)} "
                f"({_fmt(change.percent_change)}%)"
            )
    else:
        _print_locked(response.advanced_stats)

    for recession in response.recessions:
        console.print(
            f"[dim]Recession in window: {recession.name} "
            f"({recession.start_date} to {recession.end_date})[/dim]"
        )


@async_command
async def show_dashboard(
    category: IndicatorCategory | None = typer.Option(
        None, "--category", "-c", help="Dashboard section to load"
    ),
    start: datetime | None = StartOption,
    end: datetime | None = EndOption,
) -> None:
    """Show the latest reading of every indicator in a section."""
    try:
        use_case = get_container().get_dashboard_use_case()
        with console.status("[bold blue]Loading indicators..."):
            response = await use_case.execute(
                GetDashboardRequest(
                    category=category, start_date=_to_date(start), end_date=_to_date(end)
                )
            )
    except Exception as e:
        handle_cli_error(e, context={"category": category.value if category else None})

    title = CATEGORY_NAMES[category] if category else "Dashboard"
    console.print(_views_table(title, response.views))


@async_command
async def show_favorites(
    indicator_ids: list[str] = typer.Argument(..., help="Favorite indicator ids"),
    tier: str | None = TierOption,
) -> None:
    """Show the latest reading of favorite indicators."""
    try:
        use_case = get_container().get_favorites_use_case()
        response = await use_case.execute(
            GetFavoritesRequest(indicator_ids=indicator_ids, tier=tier)
        )
    except Exception as e:
        handle_cli_error(e, context={"indicator_ids": indicator_ids})

    if not response.favorites.granted:
        _print_locked(response.favorites)
        raise typer.Exit(code=3)
    console.print(_views_table("Favorites", response.favorites.data or []))


@async_command
async def compare(
    indicator_ids: list[str] = typer.Argument(..., help="Two or more indicator ids"),
    start: datetime | None = StartOption,
    end: datetime | None = EndOption,
    tier: str | None = TierOption,
) -> None:
    """Compare several indicators over the same window."""
    if len(indicator_ids) < 2:
        console.print("✗ Provide at least two indicator ids", style="bold red")
        raise typer.Exit(code=2)
    try:
        use_case = get_container().compare_indicators_use_case()
        response = await use_case.execute(
            CompareIndicatorsRequest(
                indicator_ids=indicator_ids,
                start_date=_to_date(start),
                end_date=_to_date(end),
                tier=tier,
            )
        )
    except Exception as e:
        handle_cli_error(e, context={"indicator_ids": indicator_ids})

    if not response.comparison.granted:
        _print_locked(response.comparison)
        raise typer.Exit(code=3)

    views = response.comparison.data or []
    table = Table(title="Comparison")
    table.add_column("Indicator", style="cyan")
    table.add_column("Mean", justify="right")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("Latest", justify="right")
    for view in views:
        stats = view.series.statistics
        latest = view.series.latest
        table.add_row(
            view.indicator.name,
            _fmt(stats.mean),
            _fmt(stats.min),
            _fmt(stats.max),
            _fmt(latest.value if latest else None),
        )
    console.print(table)


@async_command
async def export(
    indicator_id: str = typer.Argument(..., help="Indicator id"),
    start: datetime | None = StartOption,
    end: datetime | None = EndOption,
    tier: str | None = TierOption,
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output file; defaults to a generated name"
    ),
) -> None:
    """Export an indicator's series as CSV."""
    try:
        use_case = get_container().export_indicator_csv_use_case()
        response = await use_case.execute(
            ExportIndicatorCsvRequest(
                indicator_id=indicator_id,
                start_date=_to_date(start),
                end_date=_to_date(end),
                tier=tier,
            )
        )
    except Exception as e:
        handle_cli_error(e, context={"indicator_id": indicator_id})

    path = output or Path(response.filename)
    path.write_text(response.content, encoding="utf-8")
    console.print(f"✓ Wrote {response.rows} rows to {path}", style="bold green")


def _parse_rule(text: str) -> AlertRule:
    indicator_id, condition, target = text.split(":")
    return AlertRule(
        indicator_id=indicator_id,
        condition=AlertCondition(condition.upper()),
        target_value=float(target),
    )


@async_command
async def check_alerts(
    rules: list[str] = typer.Argument(
        ..., help="Rules as INDICATOR:ABOVE|BELOW:VALUE, e.g. UNRATE:ABOVE:4.5"
    ),
    tier: str | None = TierOption,
) -> None:
    """Evaluate alert rules against the latest values."""
    try:
        parsed = [_parse_rule(rule) for rule in rules]
    except ValueError as e:
        console.print(f"✗ Invalid rule: {e}", style="bold red")
        raise typer.Exit(code=2) from e

    try:
        use_case = get_container().evaluate_alerts_use_case()
        response = await use_case.execute(EvaluateAlertsRequest(rules=parsed, tier=tier))
    except Exception as e:
        handle_cli_error(e, context={"rules": rules})

    result = response.evaluations
    if not result.granted:
        _print_locked(result)
        raise typer.Exit(code=3)

    for evaluation in result.data or []:
        rule = evaluation.rule
        latest = evaluation.latest
        icon, style = ("🔔", "bold yellow") if evaluation.triggered else ("·", "dim")
        console.print(
            f"{icon} {rule.indicator_id} {rule.condition.value} {rule.target_value}: "
            f"latest {_fmt(latest.value if latest else None)}",
            style=style,
        )
    skipped = result.metadata.get("skipped", 0)
    if skipped:
        console.print(
            f"[yellow]{skipped} rule(s) skipped: plan limit is {result.metadata['limit']}[/yellow]"
        )


def show_access(tier: str | None = TierOption) -> None:
    """List the features available to a subscription tier."""
    granted = get_container().access_policy().accessible_features(tier)
    console.print(f"[bold]Tier:[/bold] {tier or 'free'}")
    if not granted:
        console.print("No premium features", style="dim")
    for feature in granted:
        console.print(f"  ✓ {feature.value}", style="green")
