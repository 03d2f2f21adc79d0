"""Running score of a game."""


class Scoreboard:
    """Keeps the total score of a game."""

    def __init__(self) -> None:
        self._total_score = 0

    def update_score(self, added_score: int) -> None:
        """Add an amount, which may be negative, to the total score."""
        self._total_score += added_score

    def score(self) -> int:
        """The total score so far."""
        return self._total_score