"""
Ladder Elo - a stepped, integer Elo rating engine for two-player games.
"""

from .core import (
    MAX_RATING,
    MIN_RATING,
    Outcome,
    ScoreStore,
    abs_difference,
    classify_outcome,
    magnitude,
    magnitudes,
    score_change,
)
from .engine import MatchRecord, ScoreUpdateEngine

__all__ = [
    "MAX_RATING",
    "MIN_RATING",
    "MatchRecord",
    "Outcome",
    "ScoreStore",
    "ScoreUpdateEngine",
    "abs_difference",
    "classify_outcome",
    "magnitude",
    "magnitudes",
    "score_change",
]
