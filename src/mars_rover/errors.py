"""
Error types for the rover simulation.

Two families of failures exist:

- Fatal configuration failures (``ConfigurationError`` and its subclass
  ``PlacementError``) stop a mission before or while it is being set up.
- Recoverable command failures (``MoveRejected``, ``UnrecognizedCommand``)
  are reported as diagnostics and never escape the rover that produced them.
"""

from typing import Optional, Tuple


class RoverError(Exception):
    """Base class for every error raised by the simulation."""


class ConfigurationError(RoverError, ValueError):
    """Grid bounds or an input record cannot be used to set up the mission."""


class PlacementError(ConfigurationError):
    """A rover cannot be placed on the grid at the requested position."""

    def __init__(self, message: str, position: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        self.position = position


class MoveRejected(RoverError):
    """
    A single move command was refused.

    Attributes:
        reason: ``"out_of_bounds"`` or ``"blocked"``
        position: Position the rover stays at
        candidate: Position the rover tried to reach
        direction: Symbol of the direction the rover is facing
    """

    OUT_OF_BOUNDS = "out_of_bounds"
    BLOCKED = "blocked"

    def __init__(self, reason: str, position: Tuple[int, int],
                 candidate: Tuple[int, int], direction: str):
        self.reason = reason
        self.position = position
        self.candidate = candidate
        self.direction = direction
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.reason == self.OUT_OF_BOUNDS:
            return (f"Unable to move {self.direction} from {self.position[0]},{self.position[1]}: "
                    f"{self.candidate[0]},{self.candidate[1]} is out of bounds. "
                    f"Trying next processable move..")
        return (f"Unable to move {self.direction} from {self.position[0]},{self.position[1]} "
                f"as it is blocked by another rover. Trying next processable move..")


class UnrecognizedCommand(RoverError):
    """A command string contained a character outside the M/L/R alphabet."""

    def __init__(self, command: str, index: int):
        self.command = command
        self.index = index
        super().__init__(f"Unidentified character: {command!r} at index {index}")
