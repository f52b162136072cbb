"""
Basic usage example for the ladder Elo engine.
"""

import logging

from ladder_elo import Outcome, ScoreStore, ScoreUpdateEngine, score_change


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Ratings loaded from wherever the host keeps them
    store = ScoreStore(initial={"alice": 300, "bob": 100})
    engine = ScoreUpdateEngine(store)

    games = [
        ("alice", "bob", "alice"),
        ("alice", "bob", None),
        ("bob", "carol", "carol"),
        ("carol", "alice", "carol"),
    ]

    for player1, player2, winner in games:
        engine.record_result(player1, player2, winner)

    print("Leaderboard")
    print("-----------")
    for rank, (player, rating) in enumerate(store.leaderboard(), start=1):
        print(f"{rank}. {player}: {rating}")

    print()
    print("Rating change for a 250 point favourite")
    for outcome in Outcome:
        print(f"{outcome.name}: {score_change(250, outcome)}")

    # Persist this however the host likes
    print()
    print(store.snapshot())


if __name__ == "__main__":
    main()
