# IN THIS FILE: TRACKING ROBOT'S CURRENT STATE

from algorithms.utils.enums import Direction
from algorithms.utils.types import Position, RunResult


class Robot:
    """
    Robot's current position, facing and lost flag.
    Once lost, the instruction functions leave it untouched.
    """

    def __init__(self, x: int, y: int, facing: Direction):
        """
        Initialize robot at starting position.

        Args:
            x, y: Grid coordinates
            facing: Initial facing direction
        """
        self.position = Position(x, y)
        self.facing = facing
        self.lost = False

    def snapshot(self) -> RunResult:
        return RunResult(self.position, self.facing, self.lost)

    def __repr__(self) -> str:
        state = " LOST" if self.lost else ""
        return f"Robot({self.position.x}, {self.position.y}, {self.facing.name}{state})"
