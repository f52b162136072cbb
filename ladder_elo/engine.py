"""
Records game results against a ScoreStore.
"""

import logging
from dataclasses import dataclass
from typing import Hashable, List, Optional, Union

from .core.score_change import Outcome, classify_outcome, score_change
from .core.score_store import ScoreStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchRecord:
    """
    One recorded result and the ratings on either side of it.
    """

    player_a: Hashable
    player_b: Hashable
    outcome: Outcome
    rating_a_before: int
    rating_b_before: int
    rating_a_after: int
    rating_b_after: int


class ScoreUpdateEngine:
    """
    Updates both players' ratings after a game.

    The engine keeps no rating state of its own; everything lives in the store.
    """

    def __init__(
        self,
        store: Optional[ScoreStore] = None,
        strict_winner: bool = True,
        keep_history: bool = True,
    ):
        """
        Initialize a ScoreUpdateEngine.

        Args:
            store: Store to read and write ratings (a new one if omitted)
            strict_winner: Reject winners that name neither player instead of treating them as a draw
            keep_history: Append a MatchRecord to history for every result
        """
        self.store = store if store is not None else ScoreStore()
        self.strict_winner = strict_winner
        self.keep_history = keep_history
        self.history: List[MatchRecord] = []

    def get_score(self, player: Hashable) -> int:
        """
        Get the current rating for a player.

        Args:
            player: Player identifier

        Returns:
            The player's rating
        """
        return self.store.get_score(player)

    def record_result(self, player1: Hashable, player2: Hashable, winner: Optional[Hashable]) -> None:
        """
        Record a game between two players and update both ratings.

        Args:
            player1: First player
            player2: Second player
            winner: player1, player2, or None for a draw
        """
        self._check_players(player1, player2)
        outcome = classify_outcome(player1, player2, winner, strict=self.strict_winner)
        self.record_outcome(player1, player2, outcome)

    def record_outcome(self, player1: Hashable, player2: Hashable, outcome: Union[Outcome, int]) -> MatchRecord:
        """
        Record a game with an explicit outcome for player1.

        Args:
            player1: First player
            player2: Second player
            outcome: Result for player1 (LOSE, DRAW or WIN)

        Returns:
            The MatchRecord describing the update
        """
        self._check_players(player1, player2)

        store = self.store
        with store.lock:
            score_a = store.get_score(player1)
            score_b = store.get_score(player2)

            difference = score_a - score_b
            delta_a, delta_b = score_change(difference, outcome)

            new_a = score_a + delta_a
            new_b = score_b + delta_b
            # Both writes happen or neither does
            store.check_rating(player1, new_a)
            store.check_rating(player2, new_b)
            store.set_score(player1, new_a)
            store.set_score(player2, new_b)

            record = MatchRecord(
                player_a=player1,
                player_b=player2,
                outcome=Outcome(outcome),
                rating_a_before=score_a,
                rating_b_before=score_b,
                rating_a_after=store.get_score(player1),
                rating_b_after=store.get_score(player2),
            )
            if self.keep_history:
                self.history.append(record)

        logger.debug(
            "Recorded %s for %r vs %r: %d -> %d, %d -> %d",
            record.outcome.name, player1, player2,
            score_a, record.rating_a_after, score_b, record.rating_b_after,
        )
        return record

    @staticmethod
    def _check_players(player1: Hashable, player2: Hashable) -> None:
        if player1 == player2:
            raise ValueError(f"A player cannot play against itself: {player1!r}")
