"""
Indicator Analysis - compute the full indicator set for a candle series.
"""

import logging
from collections.abc import Sequence

from candlescope.core.config import DEFAULT_CONFIG, AnalysisConfig
from candlescope.core.models import Candle, IndicatorSet

from .bollinger import bollinger_bands
from .macd import macd_line
from .moving_averages import all_finite, ema
from .rsi import rsi
from .volume import analyze_volume

logger = logging.getLogger(__name__)


def analyze_indicators(
    candles: Sequence[Candle],
    config: AnalysisConfig | None = None,
) -> IndicatorSet:
    """
    Compute RSI, MACD line, EMA20, volume stats and Bollinger Bands.

    Below `config.min_candles_for_indicators` candles every field is None.
    Individual fields may still be None above that threshold when their own
    history requirement is not met (e.g. MACD needs `macd_slow` closes) or
    the input contains non-finite values.

    Args:
        candles: Candles (most recent last)
        config: Analysis configuration (uses defaults if None)

    Returns:
        IndicatorSet as of the last candle
    """
    config = config or DEFAULT_CONFIG

    if len(candles) < config.min_candles_for_indicators:
        logger.debug(
            f"Only {len(candles)} candles, need {config.min_candles_for_indicators} for indicators"
        )
        return IndicatorSet()

    closes = [c.close for c in candles]
    volumes = [c.volume for c in candles]

    if not all_finite(closes) or not all_finite(volumes):
        logger.warning("Non-finite close or volume in candle series; affected indicators omitted")

    return IndicatorSet(
        rsi=rsi(closes, config.rsi_period),
        macd=macd_line(closes, config.macd_fast, config.macd_slow),
        ema20=ema(closes, config.ema_period),
        volume=analyze_volume(
            volumes,
            closes,
            lookback=config.volume_lookback,
            high_ratio=config.volume_high_ratio,
            low_ratio=config.volume_low_ratio,
        ),
        bollinger=bollinger_bands(closes, config.bollinger_period, config.bollinger_std_dev),
    )
