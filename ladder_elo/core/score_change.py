"""
Stepped score-change table for the ladder Elo variant.
"""

import enum
import logging
import numbers
from typing import Optional, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)


# Largest swing a single game can move a rating.
MAX_SWING = 20

# Magnitude at which a draw moves nobody.
DRAW_PIVOT = 10

# Ascending gap thresholds; the magnitude is DRAW_PIVOT plus the number of
# thresholds strictly below the gap.
MAGNITUDE_THRESHOLDS = np.array([17, 52, 88, 126, 168, 214, 269, 338, 436, 636], dtype=np.int64)


class Outcome(enum.IntEnum):
    """
    Result of a game from the first-named player's point of view.
    """

    LOSE = 0
    DRAW = 1
    WIN = 2


def abs_difference(difference: int, bound: Optional[int] = None) -> int:
    """
    Return the unsigned magnitude of a signed rating difference.

    Args:
        difference: Signed difference between two ratings
        bound: Largest magnitude accepted, or None for no limit

    Returns:
        The magnitude of the difference
    """
    if isinstance(difference, bool) or not isinstance(difference, numbers.Integral):
        raise TypeError(f"Rating difference must be an integer, got {type(difference).__name__}")

    gap = -int(difference) if difference < 0 else int(difference)
    if bound is not None and gap > bound:
        raise OverflowError(f"Rating difference {difference} exceeds the supported range of +/-{bound}")
    return gap


def magnitude(gap: int) -> int:
    """
    Look up the base swing for a rating gap.

    Args:
        gap: Non-negative integer gap between two ratings

    Returns:
        An integer between 10 and 20
    """
    if isinstance(gap, bool) or not isinstance(gap, numbers.Integral):
        raise TypeError(f"gap must be an integer, got {type(gap).__name__}")
    if gap < 0:
        raise ValueError("gap must be non-negative")
    return DRAW_PIVOT + int(np.searchsorted(MAGNITUDE_THRESHOLDS, gap, side="left"))


def magnitudes(gaps) -> np.ndarray:
    """
    Vectorized form of magnitude() over an array of gaps.
    """
    gaps = np.asarray(gaps)
    if gaps.size == 0:
        return np.zeros(gaps.shape, dtype=np.int64)
    if gaps.dtype == np.bool_ or not np.issubdtype(gaps.dtype, np.integer):
        raise TypeError(f"gaps must be integers, got dtype {gaps.dtype}")
    # Unsigned values past the int64 range would wrap when converted
    if gaps.dtype.kind == "u" and gaps.max() > np.iinfo(np.int64).max:
        raise OverflowError("gaps exceed the signed 64-bit range")
    if (gaps < 0).any():
        raise ValueError("gaps must be non-negative")
    return DRAW_PIVOT + np.searchsorted(MAGNITUDE_THRESHOLDS, gaps.astype(np.int64), side="left")


def score_change(difference: int, outcome: Union[Outcome, int]) -> Tuple[int, int]:
    """
    Compute the rating change for both players after a game.

    Args:
        difference: Rating of player A minus rating of player B
        outcome: Result for player A (LOSE, DRAW or WIN)

    Returns:
        Tuple of (change for player A, change for player B)
    """
    try:
        outcome = Outcome(outcome)
    except ValueError:
        raise ValueError(f"Unknown outcome code: {outcome!r}") from None

    m = magnitude(abs_difference(difference))
    # A is already rated above B
    reverse = difference > 0

    if outcome is Outcome.WIN:
        if reverse:
            return MAX_SWING - m, -m
        return m, -(MAX_SWING - m)

    if outcome is Outcome.DRAW:
        if reverse:
            return DRAW_PIVOT - m, -(DRAW_PIVOT - m)
        return m - DRAW_PIVOT, -(m - DRAW_PIVOT)

    if reverse:
        return m - MAX_SWING, m
    return -m, -(m - MAX_SWING)


def classify_outcome(player1, player2, winner, strict: bool = True) -> Outcome:
    """
    Turn a reported winner into an Outcome for player1.

    Args:
        player1: First player
        player2: Second player
        winner: player1, player2, or None for a draw
        strict: Reject winners that name neither player; when False they count as a draw

    Returns:
        The Outcome from player1's point of view
    """
    if winner == player1:
        return Outcome.WIN
    if winner == player2:
        return Outcome.LOSE
    if winner is None:
        return Outcome.DRAW
    if strict:
        raise ValueError(f"Winner {winner!r} is neither {player1!r} nor {player2!r}")
    logger.warning("Winner %r is neither %r nor %r, recording a draw", winner, player1, player2)
    return Outcome.DRAW
