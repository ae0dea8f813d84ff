# algorithms/commands/instructions.py
import logging
from typing import Callable, Dict

from algorithms.entities.grid import Grid
from algorithms.entities.robot import Robot
from algorithms.utils.enums import Instruction
from algorithms.utils.errors import UnrecognizedCommandError

logger = logging.getLogger(__name__)


def turn_left(robot: Robot, grid: Grid) -> None:
    if robot.lost:
        return
    robot.facing = robot.facing.turn_left()


def turn_right(robot: Robot, grid: Grid) -> None:
    if robot.lost:
        return
    robot.facing = robot.facing.turn_right()


def move_forward(robot: Robot, grid: Grid) -> None:
    """
    Step one cell towards the robot's facing.

    Leaving the grid where no scent exists marks the robot lost at its
    last valid cell and leaves a scent there. Where a scent already
    exists for this cell and facing, the move is ignored.
    """
    if robot.lost:
        return

    target = robot.position.step(robot.facing)
    if grid.is_in_bounds(target.x, target.y):
        robot.position = target
        return

    x, y = robot.position
    if grid.has_scent(x, y, robot.facing):
        logger.debug("Scent at (%d, %d, %s), ignoring move", x, y, robot.facing.name)
        return

    robot.lost = True
    grid.leave_scent(x, y, robot.facing)
    logger.debug("Robot lost at (%d, %d) facing %s", x, y, robot.facing.name)


# Add a new letter here together with its Instruction member.
HANDLERS: Dict[Instruction, Callable[[Robot, Grid], None]] = {
    Instruction.LEFT: turn_left,
    Instruction.RIGHT: turn_right,
    Instruction.FORWARD: move_forward,
}


def parse_instruction(char: str) -> Instruction:
    """
    Map one instruction character to its Instruction, ignoring case.

    Raises:
        UnrecognizedCommandError: the character is not a known instruction
    """
    try:
        return Instruction(char.strip().upper())
    except ValueError:
        raise UnrecognizedCommandError(char) from None


def execute(instruction: Instruction, robot: Robot, grid: Grid) -> None:
    HANDLERS[instruction](robot, grid)
