"""
Unit tests for candle sources and the market scanner.

Tests:
- CSV loading (timestamps, ordering, malformed files)
- Bybit kline normalization
- Scanner snapshots, filtering, ranking and formatting
"""

import pytest

from candlescope import analyze
from candlescope.core.models import Candle, SignalDirection
from candlescope.data import (
    TickerSnapshot,
    filter_snapshots,
    format_change,
    format_pair,
    format_volume,
    load_candles_csv,
    parse_kline_response,
    parse_kline_rows,
    parse_timestamp,
    percent_change,
    rank_snapshots,
    snapshot_from_candles,
    symbol_from_filename,
)

# =============================================================================
# CSV Source
# =============================================================================


class TestParseTimestamp:
    """Tests for timestamp cell parsing."""

    def test_epoch_seconds(self) -> None:
        assert parse_timestamp("1700000000") == 1_700_000_000

    def test_epoch_milliseconds(self) -> None:
        assert parse_timestamp("1700000000123") == 1_700_000_000

    def test_iso_with_offset(self) -> None:
        assert parse_timestamp("2023-11-14T22:13:20+00:00") == 1_700_000_000

    def test_iso_with_z_suffix(self) -> None:
        assert parse_timestamp("2023-11-14T22:13:20Z") == 1_700_000_000

    def test_missing_cell(self) -> None:
        with pytest.raises(ValueError, match="Missing timestamp"):
            parse_timestamp(None)

    def test_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_timestamp("yesterday")


class TestLoadCandlesCsv:
    """Tests for load_candles_csv."""

    def test_load_sorted(self, tmp_path) -> None:
        path = tmp_path / "ETHUSDT_5m_test.csv"
        path.write_text(
            "time,open,high,low,close,volume\n"
            "120,2.0,3.0,1.5,2.5,20\n"
            "60,1.0,2.2,0.9,2.0,10\n"
        )
        candles = load_candles_csv(path)
        assert [c.time for c in candles] == [60, 120]
        assert candles[0] == Candle(time=60, open=1.0, high=2.2, low=0.9, close=2.0, volume=10.0)

    def test_fetcher_format_with_turnover(self, tmp_path) -> None:
        path = tmp_path / "BTCUSDT_1m.csv"
        path.write_text(
            "timestamp,open,high,low,close,volume,turnover\n"
            "2023-11-14T22:13:20+00:00,100,101,99,100.5,3,300\n"
        )
        candles = load_candles_csv(path)
        assert candles[0].time == 1_700_000_000
        assert candles[0].close == 100.5

    def test_missing_volume_defaults_to_zero(self, tmp_path) -> None:
        path = tmp_path / "X.csv"
        path.write_text("time,open,high,low,close\n1,1,1,1,1\n")
        assert load_candles_csv(path)[0].volume == 0.0

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_candles_csv(tmp_path / "nope.csv")

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.csv"
        path.write_text("time,open,high,low,close,volume\n")
        with pytest.raises(ValueError, match="No data"):
            load_candles_csv(path)

    def test_missing_columns(self, tmp_path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("open,close\n1,2\n")
        with pytest.raises(ValueError, match="time, high, low"):
            load_candles_csv(path)

    def test_bad_row_reports_line(self, tmp_path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("time,open,high,low,close,volume\n1,1,1,1,1,1\n2,abc,1,1,1,1\n")
        with pytest.raises(ValueError, match=":3:"):
            load_candles_csv(path)

    def test_short_row_with_time_column_last(self, tmp_path) -> None:
        path = tmp_path / "short.csv"
        path.write_text("open,high,low,close,volume,time\n1,2,0.5,1.5,10,100\n1,2,0.5\n")
        with pytest.raises(ValueError, match=":3: bad candle row"):
            load_candles_csv(path)

    def test_symbol_from_filename(self) -> None:
        assert symbol_from_filename("data/historical/btcusdt_1m_20260112.csv") == "BTCUSDT"
        assert symbol_from_filename("SOLUSDT.csv") == "SOLUSDT"


# =============================================================================
# Klines
# =============================================================================


class TestKlines:
    """Tests for Bybit kline normalization."""

    ROWS = [
        ["1700000120000", "102", "103", "101", "102.5", "7", "700"],
        ["1700000060000", "101", "102.5", "100.5", "102", "6", "600"],
        ["1700000000000", "100", "101.5", "99.5", "101", "5", "500"],
    ]

    def test_rows_become_ascending_candles(self) -> None:
        candles = parse_kline_rows(self.ROWS)
        assert [c.time for c in candles] == [1_700_000_000, 1_700_000_060, 1_700_000_120]
        assert candles[0].open == 100.0
        assert candles[-1].close == 102.5
        assert candles[-1].volume == 7.0

    def test_short_row(self) -> None:
        with pytest.raises(ValueError):
            parse_kline_rows([["1700000000000", "1", "2"]])

    def test_response(self) -> None:
        payload = {"retCode": 0, "retMsg": "OK", "result": {"list": self.ROWS}}
        assert len(parse_kline_response(payload)) == 3

    def test_response_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid symbol"):
            parse_kline_response({"retCode": 10001, "retMsg": "Invalid symbol"})

    def test_response_without_rows(self) -> None:
        assert parse_kline_response({"retCode": 0, "result": {}}) == []


# =============================================================================
# Scanner
# =============================================================================


def make_snapshot(symbol: str, change: float) -> TickerSnapshot:
    return TickerSnapshot(symbol=symbol, price=1.0, change_pct=change, volume=100.0)


class TestScanner:
    """Tests for scanner snapshots and ranking."""

    def test_percent_change(self) -> None:
        assert percent_change(100.0, 110.0) == pytest.approx(10.0)
        assert percent_change(100.0, 95.0) == pytest.approx(-5.0)
        assert percent_change(0.0, 5.0) == 0.0

    def test_snapshot_from_candles(self) -> None:
        candles = [
            Candle(time=0, open=100.0, high=101.0, low=99.0, close=100.5, volume=10.0),
            Candle(time=60, open=100.5, high=111.0, low=100.0, close=110.0, volume=30.0),
        ]
        snapshot = snapshot_from_candles("BTCUSDT", candles, analyze(candles))
        assert snapshot.price == 110.0
        assert snapshot.change_pct == pytest.approx(10.0)
        assert snapshot.volume == 40.0
        assert isinstance(snapshot.signal, SignalDirection)
        assert snapshot.pair == "BTC/USDT"

    def test_snapshot_needs_candles(self) -> None:
        with pytest.raises(ValueError):
            snapshot_from_candles("BTCUSDT", [])

    def test_filter_and_rank(self) -> None:
        snapshots = [
            make_snapshot("AUSDT", -2.0),
            make_snapshot("BUSDT", 5.0),
            make_snapshot("CUSDT", 0.0),
            make_snapshot("DUSDT", 1.0),
        ]
        assert [s.symbol for s in rank_snapshots(snapshots)] == ["BUSDT", "DUSDT", "CUSDT", "AUSDT"]
        assert [s.symbol for s in filter_snapshots(snapshots, "gainers")] == ["BUSDT", "DUSDT"]
        assert [s.symbol for s in filter_snapshots(snapshots, "losers")] == ["AUSDT"]
        assert len(filter_snapshots(snapshots, "all")) == 4

    def test_unknown_filter(self) -> None:
        with pytest.raises(ValueError):
            filter_snapshots([], "movers")  # type: ignore[arg-type]

    def test_formatting(self) -> None:
        assert format_change(1.234) == "+1.23%"
        assert format_change(0.0) == "+0.00%"
        assert format_change(-0.5) == "-0.50%"
        assert format_volume(2_500_000) == "2.5M"
        assert format_volume(3_400) == "3.4K"
        assert format_volume(999) == "999"
        assert format_pair("ETHUSDT") == "ETH/USDT"
        assert format_pair("BTCUSD") == "BTCUSD"

    def test_snapshot_to_dict(self) -> None:
        data = make_snapshot("BTCUSDT", 1.5).to_dict()
        assert data == {
            "symbol": "BTCUSDT",
            "price": 1.0,
            "changePct": 1.5,
            "volume": 100.0,
            "signal": None,
        }
