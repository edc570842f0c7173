"""
CSV Candle Source - load candle series from disk.

Reads CSV files written by the historical data fetcher
(timestamp, open, high, low, close, volume[, turnover]) or any CSV with a
`time` column in epoch seconds.
"""

import csv
import logging
from datetime import datetime
from pathlib import Path

from candlescope.core.models import Candle

logger = logging.getLogger(__name__)

# Epoch values above this are milliseconds (year 5138 in seconds)
_MS_THRESHOLD = 100_000_000_000

_TIME_COLUMNS = ("time", "timestamp")
_PRICE_COLUMNS = ("open", "high", "low", "close")


def parse_timestamp(value: str | None) -> int:
    """
    Parse a timestamp cell into epoch seconds.

    Accepts epoch seconds, epoch milliseconds, or ISO-8601
    (naive values are read as local time, matching the fetcher's output).
    A cell missing from a short CSV row arrives as None.
    """
    if value is None:
        raise ValueError("Missing timestamp")

    value = value.strip()
    try:
        number = int(float(value))
    except ValueError:
        # fromisoformat() only accepts a trailing 'Z' from Python 3.11
        if value[-1:] in ("Z", "z"):
            value = value[:-1] + "+00:00"
        try:
            return int(datetime.fromisoformat(value).timestamp())
        except ValueError as e:
            raise ValueError(f"Unrecognized timestamp: '{value}'") from e

    if number > _MS_THRESHOLD:
        return number // 1000
    return number


def symbol_from_filename(filepath: str | Path) -> str:
    """Extract symbol from filename like 'BTCUSDT_1m_...csv'."""
    return Path(filepath).stem.split("_")[0].upper()


def load_candles_csv(filepath: str | Path) -> list[Candle]:
    """
    Load candles from a CSV file, sorted ascending by time.

    Args:
        filepath: Path to the CSV file

    Returns:
        List of candles (most recent last)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file has no rows, lacks required columns,
            or contains an unparseable row
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Candle data file not found: {filepath}")

    candles: list[Candle] = []
    with filepath.open(newline="") as f:
        reader = csv.DictReader(f)
        columns = set(reader.fieldnames or [])

        time_column = next((c for c in _TIME_COLUMNS if c in columns), None)
        missing = [c for c in _PRICE_COLUMNS if c not in columns]
        if time_column is None:
            missing.insert(0, "time")
        if missing:
            raise ValueError(f"{filepath} is missing columns: {', '.join(missing)}")

        for line_no, row in enumerate(reader, start=2):
            try:
                candles.append(
                    Candle(
                        time=parse_timestamp(row[time_column]),
                        open=float(row["open"]),
                        high=float(row["high"]),
                        low=float(row["low"]),
                        close=float(row["close"]),
                        volume=float(row.get("volume") or 0.0),
                    )
                )
            except (TypeError, ValueError) as e:
                raise ValueError(f"{filepath}:{line_no}: bad candle row: {e}") from e

    if not candles:
        raise ValueError(f"No data found in {filepath}")

    candles.sort(key=lambda c: c.time)
    logger.info(f"Loaded {len(candles)} candles from {filepath}")
    return candles
