class MarsRoverError(Exception):
    """Base class for all simulation errors."""


class GridBoundsError(MarsRoverError, ValueError):
    """Grid upper-right corner outside 0..MAX_COORDINATE."""

    def __init__(self, name: str, value: int, limit: int):
        super().__init__(f"{name} must be between 0 and {limit}, got {value}.")
        self.name = name
        self.value = value


class ScentOutOfBoundsError(MarsRoverError, ValueError):
    def __init__(self, x: int, y: int):
        super().__init__(f"Cannot leave scent outside the grid at ({x}, {y}).")
        self.x = x
        self.y = y


class InvalidStartingPositionError(MarsRoverError, ValueError):
    def __init__(self, x: int, y: int, max_x: int, max_y: int):
        super().__init__(
            f"Robot starting position ({x}, {y}) must be inside the grid "
            f"boundaries: (0,0) to ({max_x},{max_y})."
        )
        self.x = x
        self.y = y


class InstructionLengthError(MarsRoverError, ValueError):
    def __init__(self, length: int, limit: int):
        super().__init__(
            f"Instructions length limit is less than {limit} characters, "
            f"received instruction length is: {length}."
        )
        self.length = length


class UnrecognizedCommandError(MarsRoverError, ValueError):
    def __init__(self, command: str):
        super().__init__(f"Unknown command: {command!r}")
        self.command = command


class UnknownDirectionError(MarsRoverError, ValueError):
    def __init__(self, letter):
        super().__init__(f"Unknown direction: {letter!r}. Use one of N, E, S, W.")
        self.letter = letter


class SessionFormatError(MarsRoverError, ValueError):
    """Malformed session transcript line."""

    def __init__(self, message: str, line_number: int = 0):
        if line_number:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
