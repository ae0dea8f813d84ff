# IN THIS FILE: DIRECTIONS and INSTRUCTION LETTERS
from enum import Enum
from typing import Tuple

from algorithms.utils.errors import UnknownDirectionError


class Direction(int, Enum):
    """
    Robot facing direction.
    Values follow the compass cycle N -> E -> S -> W so rotation is
    modular arithmetic on the value.
    """
    N = 0
    E = 1
    S = 2
    W = 3

    def __int__(self):
        return self.value

    def __str__(self):
        return self.name

    def turn_right(self) -> 'Direction':
        """NORTH -> EAST -> SOUTH -> WEST -> NORTH"""
        return Direction((self.value + 1) % 4)

    def turn_left(self) -> 'Direction':
        """Three right turns, i.e. one step back around the compass."""
        return Direction((self.value + 3) % 4)

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit (dx, dy) for one forward step in this direction."""
        return _DELTAS[self]

    @staticmethod
    def from_letter(letter: str) -> 'Direction':
        """
        Parse a direction letter (N/E/S/W), ignoring case and surrounding
        whitespace.

        Raises:
            UnknownDirectionError: letter is not one of N, E, S, W
        """
        key = letter.strip().upper() if isinstance(letter, str) else letter
        try:
            return Direction[key]
        except (KeyError, TypeError):
            raise UnknownDirectionError(letter) from None


_DELTAS = {
    Direction.N: (0, 1),
    Direction.E: (1, 0),
    Direction.S: (0, -1),
    Direction.W: (-1, 0),
}


class Instruction(Enum):
    """
    Instruction letters understood by the robots.
    Value is the character used in instruction strings.
    """
    LEFT = "L"
    RIGHT = "R"
    FORWARD = "F"
