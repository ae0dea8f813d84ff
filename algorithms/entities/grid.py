# algorithms/entities/grid.py

import threading
from typing import List, Set, Tuple

from algorithms.utils.consts import MAX_COORDINATE
from algorithms.utils.enums import Direction
from algorithms.utils.errors import GridBoundsError, ScentOutOfBoundsError

Scent = Tuple[int, int, Direction]


class Grid:
    """
    Represents the rectangular plateau from (0, 0) to (max_x, max_y).
    Remembers scents left by robots that fell off an edge.
    """

    def __init__(self, max_x: int, max_y: int):
        for name, value in (("max_x", max_x), ("max_y", max_y)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0 or value > MAX_COORDINATE:
                raise GridBoundsError(name, value, MAX_COORDINATE)

        self._max_x = max_x
        self._max_y = max_y
        self._scents: Set[Scent] = set()
        # Held for a whole robot run, see RobotController.run_robot
        self.lock = threading.Lock()

    @property
    def max_x(self) -> int:
        return self._max_x

    @property
    def max_y(self) -> int:
        return self._max_y

    @property
    def scents(self) -> List[Scent]:
        return sorted(self._scents)

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x <= self._max_x and 0 <= y <= self._max_y

    def leave_scent(self, x: int, y: int, direction: Direction) -> None:
        """
        Record that a robot was lost moving `direction` from (x, y).
        Recording an existing scent again does nothing.
        """
        if not self.is_in_bounds(x, y):
            raise ScentOutOfBoundsError(x, y)
        self._scents.add((x, y, direction))

    def has_scent(self, x: int, y: int, direction: Direction) -> bool:
        if not self.is_in_bounds(x, y):
            return False
        return (x, y, direction) in self._scents

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "max_x": self._max_x,
            "max_y": self._max_y,
            "scents": [
                {"x": x, "y": y, "d": d.name} for x, y, d in self.scents
            ],
        }

    def __repr__(self) -> str:
        return f"Grid(max_x={self._max_x}, max_y={self._max_y}, scents={len(self._scents)})"
