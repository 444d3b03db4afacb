"""
Rover model and command interpreter.

A rover holds a grid position and an orientation and is driven by a command
string over the alphabet below, applied strictly left to right:

    M   move one cell along the current orientation
    L   turn 90 degrees counter-clockwise
    R   turn 90 degrees clockwise

Move Model:
    candidate = position + vector(orientation)
    accepted  iff  grid.in_bounds(candidate) and not grid.is_occupied(candidate)

A rejected move leaves the rover untouched and interpretation continues with
the next command. An unknown character stops interpretation of the remaining
string. Both cases are reported as diagnostics, never raised to the caller.
"""

import logging
import numbers
from dataclasses import dataclass
from typing import Callable, Optional

from ..errors import ConfigurationError, MoveRejected, RoverError, UnrecognizedCommand
from ..navigation.grid import Grid, Position
from ..navigation.orientation import Orientation


logger = logging.getLogger(__name__)

DiagnosticSink = Callable[[RoverError], None]


@dataclass(frozen=True)
class RoverState:
    """Snapshot of a rover, formatted as an output line by ``str()``."""
    x: int
    y: int
    orientation: Orientation

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.orientation.symbol}"


class Rover:
    """
    Wheeled rover registered on a shared grid.

    The rover keeps its own position and the grid keeps a matching occupancy
    entry addressed by ``handle``; both are updated together on every
    accepted move.

    Attributes:
        position (Position): Current cell
        orientation (Orientation): Current facing direction
        grid (Grid): Grid the rover is registered on (not owned)
        handle (int): Occupancy handle issued by the grid
        moves_made (int): Accepted move commands
        moves_rejected (int): Refused move commands
    """

    def __init__(self, x: int, y: int, orientation: Orientation, grid: Grid,
                 on_diagnostic: Optional[DiagnosticSink] = None):
        """
        Place a rover on the grid.

        Args:
            x, y: Starting cell
            orientation: Starting direction
            grid: Grid to register with
            on_diagnostic: Callback receiving rejected moves and unknown commands

        Raises:
            ConfigurationError: If a coordinate is not an integer
            PlacementError: If the grid refuses the starting cell
        """
        if not all(isinstance(coordinate, numbers.Integral) for coordinate in (x, y)):
            raise ConfigurationError(f"Rover coordinates must be integers, got {x!r} {y!r}")

        self.position = Position(int(x), int(y))
        self.orientation = orientation
        self.grid = grid
        self.on_diagnostic = on_diagnostic

        self.moves_made = 0
        self.moves_rejected = 0

        self.handle = grid.register(self.position)

    @classmethod
    def from_record(cls, record: str, grid: Grid,
                    on_diagnostic: Optional[DiagnosticSink] = None) -> "Rover":
        """
        Spawn a rover from an ``"x y D"`` input record.

        Raises:
            ConfigurationError: If the record is malformed
            PlacementError: If the grid refuses the starting cell
        """
        tokens = record.split()
        if len(tokens) != 3:
            raise ConfigurationError(
                f"Rover record must be 'x y direction', got {record.strip()!r}"
            )
        try:
            x, y = int(tokens[0]), int(tokens[1])
        except ValueError:
            raise ConfigurationError(
                f"Rover coordinates must be integers, got {record.strip()!r}"
            ) from None
        orientation = Orientation.from_symbol(tokens[2])
        return cls(x, y, orientation, grid, on_diagnostic=on_diagnostic)

    @property
    def state(self) -> RoverState:
        return RoverState(self.position.x, self.position.y, self.orientation)

    def turn_left(self) -> None:
        self.orientation = self.orientation.left()

    def turn_right(self) -> None:
        self.orientation = self.orientation.right()

    def move(self) -> bool:
        """
        Advance one cell along the current orientation.

        Returns:
            True if the rover moved, False if the move was rejected
        """
        candidate = self.position.offset(self.orientation.vector)
        try:
            self._check_move(candidate)
        except MoveRejected as rejection:
            self.moves_rejected += 1
            self._report(rejection)
            return False

        self.grid.update(self.handle, candidate)
        self.position = candidate
        self.moves_made += 1
        return True

    def _check_move(self, candidate: Position) -> None:
        if not self.grid.in_bounds(candidate):
            raise MoveRejected(MoveRejected.OUT_OF_BOUNDS, self.position, candidate,
                               self.orientation.symbol)
        if self.grid.is_occupied(candidate):
            raise MoveRejected(MoveRejected.BLOCKED, self.position, candidate,
                               self.orientation.symbol)

    def execute(self, commands: str) -> RoverState:
        """
        Interpret a command string and return the resulting state.

        Commands already applied are kept when an unknown character stops
        interpretation.
        """
        actions = {
            "M": self.move,
            "L": self.turn_left,
            "R": self.turn_right,
        }
        for index, command in enumerate(commands.strip()):
            action = actions.get(command)
            if action is None:
                self._report(UnrecognizedCommand(command, index))
                break
            action()

        logger.debug(f"Rover {self.handle} finished at {self.state}")
        return self.state

    def _report(self, diagnostic: RoverError) -> None:
        logger.warning(f"Rover {self.handle}: {diagnostic}")
        if self.on_diagnostic is not None:
            self.on_diagnostic(diagnostic)

    def __repr__(self) -> str:
        return f"Rover(handle={self.handle}, state='{self.state}')"
