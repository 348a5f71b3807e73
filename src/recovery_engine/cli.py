#!/usr/bin/env python3
"""
recovery-engine CLI.

Score recovery and inspect baselines and trends from a JSON samples file.

Usage:
    recovery-engine score --input samples.json                 # Today's recovery
    recovery-engine score --input samples.json --date 2024-01-15
    recovery-engine baseline --input samples.json              # Current baseline
    recovery-engine trends --input samples.json --metric hrv --range 1M --sma 7
    recovery-engine load --input samples.json                  # ATL / CTL / TSB
"""

import argparse
import sys
from datetime import datetime, time
from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .analysis.trends import baseline_directions, build_trend_series
from .config import Settings, configure_logging, get_settings
from .exceptions import RecoveryEngineError
from .metrics.load import calculate_training_load_metrics
from .models import BaselineDirection, HealthChartRange, RecoveryState
from .services.baseline_service import BaselineService
from .services.sample_sources import JsonSampleSource


console = Console()

STATE_COLORS = {
    RecoveryState.READY: "green",
    RecoveryState.MODERATE: "yellow",
    RecoveryState.RECOVER: "red",
}

DIRECTION_ARROWS = {
    BaselineDirection.IMPROVING: "[green]↑[/green]",
    BaselineDirection.STABLE: "→",
    BaselineDirection.DECLINING: "[red]↓[/red]",
}


def get_state_color(state: RecoveryState) -> str:
    """Get rich color for a recovery state."""
    return STATE_COLORS.get(state, "white")


def format_tsb(tsb: float) -> str:
    """Format TSB with color."""
    if tsb > 0:
        return f"[green]{tsb:+.1f} (Fresh)[/green]"
    if tsb > -10:
        return f"[yellow]{tsb:+.1f} (Neutral)[/yellow]"
    return f"[red]{tsb:+.1f} (Fatigued)[/red]"


def positive_int(value: str) -> int:
    """argparse type for day counts and windows."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a whole number")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _reference_time(date_str: Optional[str]) -> datetime:
    """End of the given day, or now."""
    if not date_str:
        return datetime.now()
    try:
        day = datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{date_str}', expected YYYY-MM-DD")
    return datetime.combine(day, time.max)


def cmd_score(args, settings: Settings) -> None:
    """Show recovery for a date."""
    now = _reference_time(args.date)
    service = BaselineService(JsonSampleSource(args.input), settings=settings)
    recovery = service.calculate_recovery(now)
    baseline = service.baseline

    color = get_state_color(recovery.state)
    console.print()
    console.print(Panel(
        f"[bold {color}]RECOVERY: {recovery.score}%  {recovery.state.display_name}[/bold {color}]",
        title=now.date().isoformat(),
        box=box.ROUNDED,
    ))

    table = Table(box=box.ROUNDED)
    table.add_column("Metric")
    table.add_column("Today", justify="right")
    table.add_column("vs Baseline", justify="right")
    table.add_column("Trend", justify="center")

    directions = baseline_directions(recovery, baseline)
    table.add_row(
        "HRV",
        f"{recovery.hrv_ms:.0f} ms",
        f"{recovery.hrv_vs_baseline:+.1f}%",
        DIRECTION_ARROWS[directions["hrv"]],
    )
    table.add_row(
        "Resting HR",
        f"{recovery.rhr_bpm:.0f} bpm",
        f"{recovery.rhr_vs_baseline:+.0f} bpm",
        DIRECTION_ARROWS[directions["rhr"]],
    )
    table.add_row("Sleep", f"{recovery.sleep_hours:.1f} h", "", "")
    table.add_row("Efficiency", f"{recovery.sleep_efficiency:.0f}%", "", "")
    table.add_row("Deep sleep", f"{recovery.deep_sleep_percent:.0f}%", "", "")
    console.print(table)
    console.print()


def cmd_baseline(args, settings: Settings) -> None:
    """Show the baseline as of a date."""
    now = _reference_time(args.date)
    source = JsonSampleSource(args.input)
    days = settings.baseline_window_days
    hrv_count = len(source.fetch_hrv_history(days, now))
    rhr_count = len(source.fetch_rhr_history(days, now))

    baseline = BaselineService(source, settings=settings).refresh(now)

    table = Table(title=f"{days}-day baseline as of {now.date()}", box=box.ROUNDED)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_column("Readings", justify="right")
    table.add_row("HRV median", f"{baseline.hrv_median:.1f} ms", str(hrv_count))
    table.add_row("HRV std dev", f"{baseline.hrv_std_dev:.1f} ms", "")
    table.add_row("RHR median", f"{baseline.rhr_median:.1f} bpm", str(rhr_count))
    console.print(table)

    if hrv_count < settings.baseline_min_readings or rhr_count < settings.baseline_min_readings:
        console.print(
            f"[yellow]Fewer than {settings.baseline_min_readings} readings: "
            f"using the default baseline.[/yellow]"
        )


def cmd_trends(args, settings: Settings) -> None:
    """Show a metric's daily series with moving average and slope."""
    source = JsonSampleSource(args.input)
    readings = source.hrv if args.metric == "hrv" else source.rhr
    unit = "ms" if args.metric == "hrv" else "bpm"

    series = build_trend_series(
        [(r.date.strftime("%Y-%m-%d"), r.value) for r in readings],
        sma_window=args.sma if args.sma is not None else settings.trend_sma_window,
        chart_range=HealthChartRange(args.range) if args.range else None,
    )

    table = Table(title=f"{args.metric.upper()} trend", box=box.ROUNDED)
    table.add_column("Date")
    table.add_column("Value", justify="right")
    table.add_column(f"SMA({series.sma_window})", justify="right")
    smoothed = series.smoothed or series.points
    for point, avg in zip(series.points, smoothed):
        table.add_row(point.date.strftime("%Y-%m-%d"), f"{point.value:.1f}", f"{avg.value:.1f}")
    console.print(table)
    console.print(f"Slope: {series.slope_per_day:+.2f} {unit}/day")


def cmd_load(args, settings: Settings) -> None:
    """Show ATL, CTL and TSB."""
    source = JsonSampleSource(args.input)
    today = _reference_time(args.date).date()
    lookback = args.lookback if args.lookback is not None else settings.training_load_lookback_days
    metrics = calculate_training_load_metrics(source.activities, lookback_days=lookback, today=today)

    table = Table(title=f"Training load as of {today}", box=box.ROUNDED)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("CTL (Fitness)", f"{metrics.ctl:.1f}")
    table.add_row("ATL (Fatigue)", f"{metrics.atl:.1f}")
    table.add_row("TSB (Form)", format_tsb(metrics.tsb))
    console.print(table)


COMMANDS = {
    "score": cmd_score,
    "baseline": cmd_baseline,
    "trends": cmd_trends,
    "load": cmd_load,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Recovery engine CLI")
    parser.add_argument("--log-level", default=None, help="Override RECOVERY_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command")

    score_p = subparsers.add_parser("score", help="Show recovery score")
    score_p.add_argument("--input", "-i", required=True, help="Samples JSON file")
    score_p.add_argument("--date", "-d", help="Date to score (YYYY-MM-DD)")

    baseline_p = subparsers.add_parser("baseline", help="Show HRV/RHR baseline")
    baseline_p.add_argument("--input", "-i", required=True, help="Samples JSON file")
    baseline_p.add_argument("--date", "-d", help="Baseline as of (YYYY-MM-DD)")

    trends_p = subparsers.add_parser("trends", help="Show a metric trend")
    trends_p.add_argument("--input", "-i", required=True, help="Samples JSON file")
    trends_p.add_argument("--metric", "-m", choices=["hrv", "rhr"], default="hrv")
    trends_p.add_argument("--range", "-r", choices=[r.value for r in HealthChartRange])
    trends_p.add_argument("--sma", type=positive_int, help="Moving average window (days)")

    load_p = subparsers.add_parser("load", help="Show training load")
    load_p.add_argument("--input", "-i", required=True, help="Samples JSON file")
    load_p.add_argument("--date", "-d", help="As of (YYYY-MM-DD)")
    load_p.add_argument("--lookback", type=positive_int, help="Lookback window (days)")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    try:
        handler(args, settings)
    except RecoveryEngineError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return 1
    except argparse.ArgumentTypeError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
