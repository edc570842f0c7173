"""
Kline Normalization - turn Bybit v5 kline payloads into candle series.

Bybit lists klines newest first as string arrays:
[startTime(ms), open, high, low, close, volume, turnover]

No network access happens here; callers hand over the decoded JSON.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from candlescope.core.models import Candle


def parse_kline_rows(rows: Iterable[Sequence[Any]]) -> list[Candle]:
    """
    Convert kline rows to candles ascending by time.

    Args:
        rows: Kline rows as returned by the exchange (newest first)

    Returns:
        List of candles (most recent last)

    Raises:
        ValueError: If a row is too short or holds a non-numeric field
    """
    candles = [Candle.from_bybit_row(row) for row in rows]
    candles.sort(key=lambda c: c.time)
    return candles


def parse_kline_response(payload: Mapping[str, Any]) -> list[Candle]:
    """
    Parse a full /v5/market/kline JSON response.

    Raises:
        ValueError: If the exchange reported an error (retCode != 0)
    """
    if payload.get("retCode") != 0:
        raise ValueError(f"Bybit API error: {payload.get('retMsg', 'Unknown error')}")

    rows = (payload.get("result") or {}).get("list") or []
    return parse_kline_rows(rows)
