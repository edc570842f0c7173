"""
Data Module - adapters that produce candle series for the engine.
"""

from .csv_source import load_candles_csv, parse_timestamp, symbol_from_filename
from .klines import parse_kline_response, parse_kline_rows
from .scanner import (
    FILTER_MODES,
    TickerSnapshot,
    filter_snapshots,
    format_change,
    format_pair,
    format_volume,
    percent_change,
    rank_snapshots,
    snapshot_from_candles,
)

__all__ = [
    # CSV
    "load_candles_csv",
    "parse_timestamp",
    "symbol_from_filename",
    # Klines
    "parse_kline_rows",
    "parse_kline_response",
    # Scanner
    "FILTER_MODES",
    "TickerSnapshot",
    "percent_change",
    "snapshot_from_candles",
    "filter_snapshots",
    "rank_snapshots",
    "format_pair",
    "format_change",
    "format_volume",
]
