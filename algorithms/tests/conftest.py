import pytest

from algorithms.commands.controller import RobotController
from algorithms.entities.grid import Grid


@pytest.fixture
def grid():
    """The 5 x 3 plateau used by the sample session."""
    return Grid(5, 3)


@pytest.fixture
def controller(grid):
    return RobotController(grid)
