"""
Core rating functionality: the score-change table and the rating store.
"""

from .score_change import Outcome, abs_difference, classify_outcome, magnitude, magnitudes, score_change
from .score_store import ScoreStore, MIN_RATING, MAX_RATING
