# src/gridsnake/snake.py
from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

from .grid import Direction, Position


class Snake:
    """
    Ordered cells of the snake, head at index 0.

    The head owns the heading. advance() shifts the body follow-the-leader
    style from a snapshot taken before anything moves; that snapshot is
    kept until the next advance so collision checks for the same step see
    the body as it was before the head moved.
    """

    def __init__(self, segments: Iterable[Tuple[int, int]], heading: Direction = Direction.UP):
        self._segments: List[Position] = [Position(*s) for s in segments]
        if len(self._segments) < 2:
            raise ValueError(f"a snake needs at least 2 segments, got {len(self._segments)}")
        self.heading = heading
        self.previous: Optional[Tuple[Position, ...]] = None  # body before the last advance
        self.last_tail: Optional[Position] = None              # cell vacated by the last advance

    @classmethod
    def spawn(cls, head: Tuple[int, int], body: Tuple[int, int]) -> "Snake":
        """Fresh 2-segment snake heading up."""
        return cls([head, body], Direction.UP)

    # ---------- Read-only views ----------
    @property
    def head(self) -> Position:
        return self._segments[0]

    @property
    def segments(self) -> Tuple[Position, ...]:
        return tuple(self._segments)

    def positions(self) -> List[Position]:
        """Copy of the segment cells, head first."""
        return list(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    # ---------- Rules ----------
    def set_heading(self, requested: Direction) -> bool:
        """Turn unless it is a 180° reversal. Returns False if the turn was refused."""
        if requested == self.heading.opposite():
            return False
        self.heading = requested
        return True

    def advance(self) -> Tuple[Position, Position]:
        """
        Move one cell along the heading.
        Returns (new head, cell the tail vacated). No collision detection here.
        """
        snapshot = tuple(self._segments)
        self.previous = snapshot
        self.last_tail = snapshot[-1]

        self._segments[0] = snapshot[0].step(self.heading)
        for i in range(1, len(snapshot)):
            self._segments[i] = snapshot[i - 1]
        return self._segments[0], self.last_tail

    def contains_body(self, pos: Position) -> bool:
        """
        True if pos is one of the snake's cells as they were before the
        advance of the current step (or the current cells, once the step has
        been settled). The cell the tail is just leaving still counts.
        """
        body = self.previous if self.previous is not None else self._segments
        return pos in body

    def grow(self, at: Optional[Position] = None) -> None:
        """
        Append a tail segment, by default on the cell the last advance vacated.
        Growing ends the step, so the vacated cell can only be used once.
        """
        if at is None:
            at = self.last_tail
        assert at is not None, "grow() without a fresh advance()"
        self._segments.append(Position(*at))
        self.settle()

    def settle(self) -> None:
        """Drop the per-step scratch state once collisions and growth are done."""
        self.previous = None
        self.last_tail = None
