"""
Pattern Rules - shape predicates over derived candles.

Single-candle rules look at one candle, engulfing rules at (previous,
current), star rules at three consecutive candles oldest first.
"""

from .features import DerivedCandle


def is_hammer(candle: DerivedCandle) -> bool:
    """Long lower tail, little upper wick, body in the top third of the range."""
    rng = candle.range
    return (
        rng > 0
        and candle.tail_len >= 2 * candle.body_len
        and candle.wick_len <= candle.body_len
        and candle.body_top > candle.low + rng * 2 / 3
    )


def is_doji(candle: DerivedCandle) -> bool:
    return candle.is_doji


def is_shooting_star(candle: DerivedCandle) -> bool:
    """Long upper wick, little lower tail, body in the bottom third of the range."""
    rng = candle.range
    return (
        rng > 0
        and candle.wick_len >= 2 * candle.body_len
        and candle.tail_len <= candle.body_len
        and candle.body_bottom < candle.low + rng / 3
    )


def is_bullish_engulfing(prev: DerivedCandle, curr: DerivedCandle) -> bool:
    """Bullish body opens below and closes above a bearish body."""
    return (
        prev.is_bearish
        and curr.is_bullish
        and curr.open < prev.close
        and curr.close > prev.open
    )


def is_bearish_engulfing(prev: DerivedCandle, curr: DerivedCandle) -> bool:
    """Bearish body opens above and closes below a bullish body."""
    return (
        prev.is_bullish
        and curr.is_bearish
        and curr.open > prev.close
        and curr.close < prev.open
    )


def is_morning_star(
    first: DerivedCandle,
    middle: DerivedCandle,
    last: DerivedCandle,
    body_ratio: float = 0.3,
) -> bool:
    """Bearish candle, small-bodied pause, bullish close above the first midpoint."""
    return (
        first.is_bearish
        and middle.body_len < first.body_len * body_ratio
        and last.is_bullish
        and last.close > first.body_midpoint
    )


def is_evening_star(
    first: DerivedCandle,
    middle: DerivedCandle,
    last: DerivedCandle,
    body_ratio: float = 0.3,
) -> bool:
    """Bullish candle, small-bodied pause, bearish close below the first midpoint."""
    return (
        first.is_bullish
        and middle.body_len < first.body_len * body_ratio
        and last.is_bearish
        and last.close < first.body_midpoint
    )
