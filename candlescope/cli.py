#!/usr/bin/env python3
"""
CLI for analyzing candle data files.

Usage:
    python -m candlescope.cli analyze data/BTCUSDT_5m.csv
    python -m candlescope.cli analyze data/BTCUSDT_5m.csv --json
    python -m candlescope.cli scan data/*.csv --filter gainers

CSV files need time|timestamp, open, high, low, close and volume columns.
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from candlescope.core.models import (
    AnalysisResult,
    IndicatorSet,
    PatternSignal,
    SignalDirection,
)
from candlescope.data import (
    FILTER_MODES,
    filter_snapshots,
    format_change,
    format_volume,
    load_candles_csv,
    rank_snapshots,
    snapshot_from_candles,
    symbol_from_filename,
)
from candlescope.engine import analyze

logger = logging.getLogger(__name__)

# Rich markup hex codes
GREEN = "#66ff66"
RED = "#ff6666"
YELLOW = "#ffd60a"
DIM = "#888888"

SIGNAL_COLORS = {
    SignalDirection.BULLISH: GREEN,
    SignalDirection.BEARISH: RED,
    SignalDirection.NEUTRAL: YELLOW,
}
PATTERN_COLORS = {
    PatternSignal.BULLISH: GREEN,
    PatternSignal.BEARISH: RED,
    PatternSignal.NEUTRAL: YELLOW,
}


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def _fmt(value: float | None, digits: int = 2) -> str:
    """Format an optional number, '-' when absent."""
    return "-" if value is None else f"{value:,.{digits}f}"


def render_indicators(indicators: IndicatorSet) -> Table:
    """Indicator table for the analysis view."""
    table = Table(title="Indicators", show_header=True, header_style="bold")
    table.add_column("Indicator")
    table.add_column("Value", justify="right")

    table.add_row("RSI (14)", _fmt(indicators.rsi))
    table.add_row("MACD", _fmt(indicators.macd, 4))
    table.add_row("EMA (20)", _fmt(indicators.ema20))

    if indicators.volume:
        volume = indicators.volume
        table.add_row("Volume", f"{volume.trend.value} ({volume.ratio * 100:.0f}%)")
    else:
        table.add_row("Volume", "-")

    if indicators.bollinger:
        bands = indicators.bollinger
        table.add_row(
            "Bollinger (20, 2)",
            f"{bands.lower:,.2f} / {bands.middle:,.2f} / {bands.upper:,.2f}",
        )
    else:
        table.add_row("Bollinger (20, 2)", "-")

    return table


def render_analysis(console: Console, symbol: str, result: AnalysisResult) -> None:
    """Print patterns, indicators and the signal panel."""
    if result.patterns:
        patterns = Table(title="Patterns", show_header=True, header_style="bold")
        patterns.add_column("Pattern")
        patterns.add_column("Signal")
        patterns.add_column("Strength")
        patterns.add_column("Description")
        for pattern in result.patterns:
            color = PATTERN_COLORS[pattern.signal]
            patterns.add_row(
                pattern.name,
                Text(pattern.signal.value, style=color),
                pattern.strength.value,
                pattern.description,
            )
        console.print(patterns)
    else:
        console.print(Text("No patterns detected", style=DIM))

    console.print(render_indicators(result.indicators))

    signal = result.signal
    color = SIGNAL_COLORS[signal.signal]
    body = Text()
    body.append(f"{signal.signal.value}\n", style=f"bold {color}")
    body.append(f"Confidence: {signal.confidence.value}\n")
    body.append(f"{signal.recommendation}\n")
    body.append(
        f"Bullish: {signal.bullish_signals} | Bearish: {signal.bearish_signals}",
        style=DIM,
    )
    for reason in signal.reasons:
        body.append(f"\n  • {reason}")
    console.print(Panel(body, title=f"{symbol} prediction"))


def cmd_analyze(args: argparse.Namespace, console: Console) -> int:
    candles = load_candles_csv(args.file)
    if args.limit is not None:
        candles = candles[-args.limit :]

    result = analyze(candles)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        render_analysis(console, symbol_from_filename(args.file), result)
    return 0


def cmd_scan(args: argparse.Namespace, console: Console) -> int:
    snapshots = []
    for path in args.files:
        candles = load_candles_csv(path)
        snapshots.append(
            snapshot_from_candles(symbol_from_filename(path), candles, analyze(candles))
        )

    rows = rank_snapshots(filter_snapshots(snapshots, args.filter))

    if args.json:
        print(json.dumps([s.to_dict() for s in rows], indent=2))
        return 0

    table = Table(title="Market Scanner", show_header=True, header_style="bold")
    table.add_column("Pair")
    table.add_column("Price", justify="right")
    table.add_column("Change", justify="right")
    table.add_column("Volume", justify="right")
    table.add_column("Signal")
    for row in rows:
        change_color = GREEN if row.change_pct > 0 else RED if row.change_pct < 0 else DIM
        signal_text = (
            Text(row.signal.value, style=SIGNAL_COLORS[row.signal]) if row.signal else Text("-")
        )
        table.add_row(
            row.pair,
            f"${row.price:.4f}",
            Text(format_change(row.change_pct), style=change_color),
            format_volume(row.volume),
            signal_text,
        )
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="candlescope",
        description="Candlestick pattern and indicator analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Analyze one symbol
    %(prog)s analyze data/BTCUSDT_5m.csv

    # Only the last 200 candles, as JSON
    %(prog)s analyze data/BTCUSDT_5m.csv --limit 200 --json

    # Rank several symbols, gainers only
    %(prog)s scan data/*.csv --filter gainers
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Analyze one candle CSV file")
    analyze_parser.add_argument("file", help="Path to CSV candle file")
    analyze_parser.add_argument(
        "--limit",
        "-n",
        type=positive_int,
        default=None,
        help="Only analyze the most recent N candles",
    )
    analyze_parser.add_argument("--json", action="store_true", help="Print JSON instead of tables")
    analyze_parser.set_defaults(handler=cmd_analyze)

    scan_parser = subparsers.add_parser("scan", help="Rank several candle CSV files")
    scan_parser.add_argument("files", nargs="+", help="CSV files, one symbol each")
    scan_parser.add_argument(
        "--filter",
        "-f",
        default="all",
        choices=FILTER_MODES,
        help="Show all symbols, only gainers or only losers (default: all)",
    )
    scan_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    scan_parser.set_defaults(handler=cmd_scan)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    console = Console()
    try:
        return args.handler(args, console)
    except (FileNotFoundError, ValueError) as e:
        logger.debug("Analysis failed", exc_info=True)
        console.print(Text(f"❌ {e}", style=RED))
        return 1


if __name__ == "__main__":
    sys.exit(main())
