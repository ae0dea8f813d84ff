"""
Text session protocol.

    5 3          <- upper-right corner of the grid
    1 1 E        <- robot start
    RFRFRFRF     <- robot instructions
    ...          <- more robot pairs, until a blank line or end of input

Each robot produces one output line, "X Y D" with " LOST" appended when
the robot fell off the grid.
"""
from typing import Iterable, List, NamedTuple, Tuple

from algorithms.commands.controller import RobotController
from algorithms.entities.grid import Grid
from algorithms.entities.robot import Robot
from algorithms.utils.consts import LOST_SUFFIX
from algorithms.utils.enums import Direction
from algorithms.utils.errors import SessionFormatError
from algorithms.utils.types import RunResult


class RobotOrder(NamedTuple):
    x: int
    y: int
    facing: Direction
    instructions: str


def _parse_ints(tokens: List[str], line_number: int) -> List[int]:
    try:
        return [int(t) for t in tokens]
    except ValueError:
        raise SessionFormatError(
            f"expected integers, got {' '.join(tokens)!r}", line_number
        ) from None


def parse_grid_line(line: str, line_number: int = 0) -> Tuple[int, int]:
    """Two integers separated by whitespace. Range is checked by Grid."""
    tokens = line.split()
    if len(tokens) != 2:
        raise SessionFormatError(
            "grid size must be two integers separated by a space, e.g. '5 3'",
            line_number,
        )
    max_x, max_y = _parse_ints(tokens, line_number)
    return max_x, max_y


def parse_robot_line(line: str, line_number: int = 0) -> Tuple[int, int, Direction]:
    tokens = line.split()
    if len(tokens) != 3:
        raise SessionFormatError("invalid robot start, example: '3 2 N'", line_number)
    x, y = _parse_ints(tokens[:2], line_number)
    return x, y, Direction.from_letter(tokens[2])


def parse_session(text: str) -> Tuple[int, int, List[RobotOrder]]:
    """
    Split a transcript into the grid corner and the robot orders.

    Parsing stops at the first blank line after the grid line.
    """
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise SessionFormatError("missing grid size line", 1)
    max_x, max_y = parse_grid_line(lines[0], 1)

    orders = []
    index = 1
    while index < len(lines) and lines[index].strip():
        x, y, facing = parse_robot_line(lines[index], index + 1)
        if index + 1 >= len(lines) or not lines[index + 1].strip():
            raise SessionFormatError("robot has no instruction line", index + 2)
        orders.append(RobotOrder(x, y, facing, lines[index + 1]))
        index += 2

    return max_x, max_y, orders


def format_result(result: RunResult) -> str:
    line = f"{result.position.x} {result.position.y} {result.facing.name}"
    if result.lost:
        line += f" {LOST_SUFFIX}"
    return line


def summarize(results: Iterable[RunResult]) -> Tuple[int, int]:
    """(robots processed, robots lost)"""
    processed = lost = 0
    for result in results:
        processed += 1
        lost += result.lost
    return processed, lost


def run_orders(grid: Grid, orders: Iterable[RobotOrder]) -> List[RunResult]:
    controller = RobotController(grid)
    return [
        controller.run_robot(Robot(o.x, o.y, o.facing), o.instructions)
        for o in orders
    ]


def play_session(text: str) -> List[RunResult]:
    """Run a whole transcript on a fresh grid, one robot after another."""
    max_x, max_y, orders = parse_session(text)
    grid = Grid(max_x, max_y)
    return run_orders(grid, orders)


def run_session(text: str) -> List[str]:
    """Output lines for a whole transcript."""
    return [format_result(r) for r in play_session(text)]
