# src/gridsnake/score.py


class ScoreTracker:
    """Points for the current round."""

    def __init__(self):
        self._points = 0

    def increment(self) -> None:
        self._points += 1

    def reset(self) -> None:
        self._points = 0

    def value(self) -> int:
        return self._points
