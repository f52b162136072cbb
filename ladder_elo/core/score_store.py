"""
In-memory rating store with a rating floor.
"""

import logging
import numbers
import threading
from typing import Any, Dict, Hashable, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


# No observable rating is ever below this.
MIN_RATING = 100

# What an unseen player is stored as before the floor is applied.
DEFAULT_STORED_RATING = 0

# Highest rating the store accepts. Differences and deltas stay well inside
# a signed 64-bit range below this.
MAX_RATING = 2**31 - 1


class ScoreStore:
    """
    Mapping from player identifier to integer rating.

    Reads and writes both apply the MIN_RATING floor, so no caller can observe
    or persist a rating below it.
    """

    def __init__(self, initial: Optional[Mapping[Hashable, int]] = None, max_rating: int = MAX_RATING):
        """
        Initialize a ScoreStore.

        Args:
            initial: Ratings to seed the store with (the floor is applied to each)
            max_rating: Highest rating the store accepts
        """
        if max_rating < MIN_RATING:
            raise ValueError(f"max_rating must be at least {MIN_RATING}")

        self.max_rating = max_rating
        self._scores: Dict[Hashable, int] = {}
        self.lock = threading.RLock()

        if initial:
            for player, rating in initial.items():
                self.set_score(player, rating)

    def get_score(self, player: Hashable) -> int:
        """
        Get the rating for a player.

        Args:
            player: Player identifier

        Returns:
            The stored rating, or MIN_RATING for an unseen player
        """
        with self.lock:
            stored = self._scores.get(player, DEFAULT_STORED_RATING)
        return max(stored, MIN_RATING)

    def set_score(self, player: Hashable, rating: int) -> None:
        """
        Store a new rating for a player, raised to MIN_RATING if below it.

        Args:
            player: Player identifier
            rating: New rating
        """
        self.check_rating(player, rating)
        floored = max(int(rating), MIN_RATING)
        with self.lock:
            self._scores[player] = floored
        logger.debug("Set rating of %r to %d", player, floored)

    def check_rating(self, player: Hashable, rating: int) -> None:
        """
        Raise if a rating cannot be stored.

        Args:
            player: Player the rating is meant for
            rating: Candidate rating
        """
        if isinstance(rating, bool) or not isinstance(rating, numbers.Integral):
            raise TypeError(f"Rating must be an integer, got {type(rating).__name__}")
        if rating > self.max_rating:
            raise OverflowError(f"Rating {rating} for {player!r} exceeds max_rating {self.max_rating}")

    def __contains__(self, player: Any) -> bool:
        with self.lock:
            return player in self._scores

    def __len__(self) -> int:
        with self.lock:
            return len(self._scores)

    def players(self) -> List[Hashable]:
        """Players that have an explicit entry."""
        with self.lock:
            return list(self._scores)

    def snapshot(self) -> Dict[Hashable, int]:
        """
        Copy of the stored ratings, for the host to persist.
        """
        with self.lock:
            return dict(self._scores)

    def leaderboard(self, n: Optional[int] = None) -> List[Tuple[Hashable, int]]:
        """
        Players ordered by rating, highest first.

        Args:
            n: Number of entries to return, or None for all of them

        Returns:
            List of (player, rating) tuples
        """
        with self.lock:
            # sorted() is stable, so ties keep first-seen order
            ranked = sorted(self._scores.items(), key=lambda item: item[1], reverse=True)
        if n is None:
            return ranked
        if n < 0:
            raise ValueError("n must be non-negative")
        return ranked[:n]
