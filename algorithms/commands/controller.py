# algorithms/commands/controller.py
import logging

from algorithms.commands.instructions import execute, parse_instruction
from algorithms.entities.grid import Grid
from algorithms.entities.robot import Robot
from algorithms.utils.consts import MAX_INSTRUCTION_LENGTH
from algorithms.utils.enums import Direction
from algorithms.utils.errors import (
    InstructionLengthError,
    InvalidStartingPositionError,
)
from algorithms.utils.types import RunResult

logger = logging.getLogger(__name__)


class RobotController:
    """
    Runs robots one after another on a single grid.
    The grid's scents carry over from one robot to the next.
    """

    def __init__(self, grid: Grid):
        self.grid = grid

    def run_robot(self, robot: Robot, instructions: str) -> RunResult:
        """
        Execute an instruction string for `robot`.

        Stops at the first instruction that loses the robot; characters
        after that point are not looked at.

        Raises:
            InvalidStartingPositionError: robot starts outside the grid
            InstructionLengthError: instructions are 100 characters or longer
            UnrecognizedCommandError: unknown instruction character; earlier
                instructions keep their effect
        """
        grid = self.grid
        x, y = robot.position
        if not grid.is_in_bounds(x, y):
            raise InvalidStartingPositionError(x, y, grid.max_x, grid.max_y)

        if len(instructions) >= MAX_INSTRUCTION_LENGTH:
            raise InstructionLengthError(len(instructions), MAX_INSTRUCTION_LENGTH)

        instructions = instructions.strip()
        logger.debug("Running %r with %r", robot, instructions)

        with grid.lock:
            for char in instructions:
                execute(parse_instruction(char), robot, grid)
                if robot.lost:
                    break

        return robot.snapshot()


def run(grid: Grid, x: int, y: int, facing: Direction, instructions: str) -> RunResult:
    """Create a robot at (x, y, facing) and run it on `grid`."""
    return RobotController(grid).run_robot(Robot(x, y, facing), instructions)
