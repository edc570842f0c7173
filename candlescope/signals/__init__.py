"""
Signals Module - Weighted voting over indicators and patterns.
"""

from .composer import (
    HOLD_RECOMMENDATION,
    RECOMMENDATIONS,
    classify_votes,
    compose_signal,
    get_recommendation,
)

__all__ = [
    "compose_signal",
    "classify_votes",
    "get_recommendation",
    "RECOMMENDATIONS",
    "HOLD_RECOMMENDATION",
]
