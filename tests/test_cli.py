"""
Tests for the candlescope command line.

Run with:
    python -m pytest tests/test_cli.py -v
"""

import json

import pytest

from candlescope.cli import build_parser, main


def write_csv(path, closes: list[float], volume: float = 1000.0) -> None:
    """Write a candle CSV where each candle opens at the previous close."""
    lines = ["time,open,high,low,close,volume"]
    prev = closes[0]
    for i, close in enumerate(closes):
        high = max(prev, close) + 0.5
        low = min(prev, close) - 0.5
        lines.append(f"{1_700_000_000 + i * 60},{prev},{high},{low},{close},{volume}")
        prev = close
    path.write_text("\n".join(lines) + "\n")


class TestAnalyzeCommand:
    """Tests for `candlescope analyze`."""

    def test_json_output(self, tmp_path, capsys) -> None:
        path = tmp_path / "BTCUSDT_1m.csv"
        write_csv(path, [100.0 + i for i in range(30)])

        assert main(["analyze", str(path), "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert set(data) == {"patterns", "indicators", "signal"}
        assert data["indicators"]["rsi"] == 100.0
        assert data["signal"]["signal"] in {"BULLISH", "BEARISH", "NEUTRAL"}

    def test_limit_keeps_latest_candles(self, tmp_path, capsys) -> None:
        path = tmp_path / "BTCUSDT_1m.csv"
        write_csv(path, [100.0 + i for i in range(30)])

        assert main(["analyze", str(path), "--json", "--limit", "10"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["indicators"]["rsi"] is None

    def test_table_output(self, tmp_path, capsys) -> None:
        path = tmp_path / "ETHUSDT_5m.csv"
        write_csv(path, [100.0 + i for i in range(25)])

        assert main(["analyze", str(path)]) == 0

        out = capsys.readouterr().out
        assert "Indicators" in out
        assert "ETHUSDT prediction" in out
        assert "Confidence" in out

    def test_missing_file(self, tmp_path, capsys) -> None:
        assert main(["analyze", str(tmp_path / "missing.csv")]) == 1
        assert "not found" in " ".join(capsys.readouterr().out.split())

    def test_short_row_exits_with_error(self, tmp_path, capsys) -> None:
        path = tmp_path / "BTCUSDT_1m.csv"
        path.write_text("open,high,low,close,volume,time\n1,2,0.5,1.5,10,100\n1,2,0.5\n")
        assert main(["analyze", str(path)]) == 1
        assert "bad candle row" in " ".join(capsys.readouterr().out.split())

    @pytest.mark.parametrize("limit", ["0", "-5", "ten"])
    def test_limit_must_be_positive(self, tmp_path, limit) -> None:
        path = tmp_path / "BTCUSDT_1m.csv"
        write_csv(path, [100.0 + i for i in range(30)])
        with pytest.raises(SystemExit) as exc:
            main(["analyze", str(path), "--limit", limit])
        assert exc.value.code == 2


class TestScanCommand:
    """Tests for `candlescope scan`."""

    def test_ranked_json(self, tmp_path, capsys) -> None:
        up = tmp_path / "AAAUSDT_1m.csv"
        down = tmp_path / "BBBUSDT_1m.csv"
        write_csv(up, [100.0 + i for i in range(25)])
        write_csv(down, [100.0 - i for i in range(25)])

        assert main(["scan", str(down), str(up), "--json"]) == 0

        rows = json.loads(capsys.readouterr().out)
        assert [r["symbol"] for r in rows] == ["AAAUSDT", "BBBUSDT"]

    def test_losers_only(self, tmp_path, capsys) -> None:
        up = tmp_path / "AAAUSDT_1m.csv"
        down = tmp_path / "BBBUSDT_1m.csv"
        write_csv(up, [100.0 + i for i in range(25)])
        write_csv(down, [100.0 - i for i in range(25)])

        assert main(["scan", str(up), str(down), "--filter", "losers", "--json"]) == 0

        rows = json.loads(capsys.readouterr().out)
        assert [r["symbol"] for r in rows] == ["BBBUSDT"]

    def test_table(self, tmp_path, capsys) -> None:
        path = tmp_path / "SOLUSDT_1m.csv"
        write_csv(path, [100.0 + i for i in range(25)])

        assert main(["scan", str(path)]) == 0
        assert "SOL/USDT" in capsys.readouterr().out


class TestParser:
    def test_filter_choices(self) -> None:
        args = build_parser().parse_args(["scan", "a.csv", "-f", "gainers"])
        assert args.filter == "gainers"
        assert args.files == ["a.csv"]
