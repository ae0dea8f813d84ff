import pytest

from algorithms.commands.instructions import (
    HANDLERS,
    execute,
    move_forward,
    parse_instruction,
    turn_left,
    turn_right,
)
from algorithms.entities.robot import Robot
from algorithms.utils.enums import Direction, Instruction
from algorithms.utils.errors import UnrecognizedCommandError
from algorithms.utils.types import Position


def test_every_instruction_has_a_handler():
    assert set(HANDLERS) == set(Instruction)


@pytest.mark.parametrize("char, expected", [
    ("L", Instruction.LEFT), ("r", Instruction.RIGHT), ("f", Instruction.FORWARD),
])
def test_parse_instruction_ignores_case(char, expected):
    assert parse_instruction(char) is expected


@pytest.mark.parametrize("char", ["X", "B", "1", " "])
def test_parse_instruction_rejects_unknown(char):
    with pytest.raises(UnrecognizedCommandError) as exc_info:
        parse_instruction(char)
    assert exc_info.value.command == char


def test_turns_keep_position(grid):
    robot = Robot(2, 2, Direction.N)
    turn_right(robot, grid)
    assert (robot.position, robot.facing) == (Position(2, 2), Direction.E)
    turn_left(robot, grid)
    turn_left(robot, grid)
    assert (robot.position, robot.facing) == (Position(2, 2), Direction.W)
    assert not robot.lost


@pytest.mark.parametrize("facing, expected", [
    (Direction.N, Position(2, 2)),
    (Direction.E, Position(3, 1)),
    (Direction.S, Position(2, 0)),
    (Direction.W, Position(1, 1)),
])
def test_move_forward_in_bounds(grid, facing, expected):
    robot = Robot(2, 1, facing)
    move_forward(robot, grid)
    assert robot.position == expected
    assert robot.facing is facing
    assert not robot.lost


def test_move_forward_and_back(grid):
    robot = Robot(2, 1, Direction.E)
    for instruction in "FRRF":
        execute(parse_instruction(instruction), robot, grid)
    assert robot.position == Position(2, 1)
    assert robot.facing is Direction.W


def test_falling_off_top_left_corner(grid):
    robot = Robot(0, 3, Direction.N)
    move_forward(robot, grid)
    assert robot.lost
    assert robot.position == Position(0, 3)
    assert robot.facing is Direction.N
    assert grid.has_scent(0, 3, Direction.N)


def test_scent_protects_next_robot(grid):
    grid.leave_scent(0, 3, Direction.N)
    robot = Robot(0, 3, Direction.N)
    move_forward(robot, grid)
    assert not robot.lost
    assert robot.position == Position(0, 3)
    assert grid.scents == [(0, 3, Direction.N)]


def test_scent_only_protects_its_direction(grid):
    grid.leave_scent(5, 3, Direction.N)
    robot = Robot(5, 3, Direction.E)
    move_forward(robot, grid)
    assert robot.lost
    assert grid.has_scent(5, 3, Direction.E)


@pytest.mark.parametrize("instruction", list(Instruction))
def test_lost_robot_is_frozen(grid, instruction):
    robot = Robot(0, 0, Direction.S)
    move_forward(robot, grid)
    assert robot.lost

    execute(instruction, robot, grid)
    assert robot.position == Position(0, 0)
    assert robot.facing is Direction.S
    assert robot.lost
