# IN THIS FILE: POSITION, RUNRESULT

from algorithms.utils.enums import Direction


class Position:
    """
    Integer grid coordinate. Value type: compared and hashed by (x, y).
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x: int, y: int):
        self._x = x
        self._y = y

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def step(self, direction: Direction) -> 'Position':
        """Neighbouring cell one unit towards `direction`."""
        dx, dy = direction.delta
        return Position(self._x + dx, self._y + dy)

    def __eq__(self, other: object) -> bool:
        """Check if two positions are equal"""
        if not isinstance(other, Position):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __iter__(self):
        yield self._x
        yield self._y

    def __repr__(self) -> str:
        return f"Position(x={self._x}, y={self._y})"


class RunResult:
    """
    Final state of one robot run.
    Snapshot taken after the run; later changes to the Robot do not show here.
    """

    __slots__ = ("_position", "_facing", "_lost")

    def __init__(self, position: Position, facing: Direction, lost: bool):
        self._position = Position(position.x, position.y)
        self._facing = facing
        self._lost = lost

    @property
    def position(self) -> Position:
        return self._position

    @property
    def facing(self) -> Direction:
        return self._facing

    @property
    def lost(self) -> bool:
        return self._lost

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "x": self._position.x,
            "y": self._position.y,
            "d": self._facing.name,
            "lost": self._lost,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RunResult):
            return NotImplemented
        return (self._position == other._position and
                self._facing == other._facing and
                self._lost == other._lost)

    def __hash__(self) -> int:
        return hash((self._position, self._facing, self._lost))

    def __repr__(self) -> str:
        return (f"RunResult(x={self._position.x}, y={self._position.y}, "
                f"d={self._facing.name}, lost={self._lost})")
