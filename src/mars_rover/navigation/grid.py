"""
Plateau grid with boundary checks and rover occupancy tracking.

The grid is an axis-aligned rectangle whose lower-left corner is fixed at the
origin and whose upper-right corner is read from the first input record.
Both corners are inclusive, so a rover may stand on the boundary cells.

Bounds Model:
    in_bounds(p) = lower <= p <= upper   (component-wise, both axes)
    lower = (0, 0),  upper = (width, height),  width > 0, height > 0

Occupancy Model:
    Every registered rover owns one entry in the occupancy registry. The
    entry is addressed by the integer handle returned from ``register`` and
    is moved with ``update`` after each successful step. Entries are never
    removed while the grid is alive.
"""

import logging
import numpy as np
from typing import List, NamedTuple

from ..errors import ConfigurationError, PlacementError
from .orientation import Vector


logger = logging.getLogger(__name__)

# Largest upper bound the int64 bounds arrays can hold
MAX_BOUND = int(np.iinfo(np.int64).max)


class Position(NamedTuple):
    """Integer grid coordinate. Legality is decided by the grid, not the type."""
    x: int
    y: int

    def offset(self, vector: Vector) -> "Position":
        return Position(self.x + vector[0], self.y + vector[1])

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


class Grid:
    """
    Bounded plateau shared by every rover of a mission.

    The grid is the only authority on spatial legality: it answers whether a
    position is inside the plateau and whether another rover already stands
    there. Rovers are not owned by the grid; it only records where each
    registered rover currently is.

    Attributes:
        lower_bounds (np.ndarray): Inclusive lower-left corner, always (0, 0)
        upper_bounds (np.ndarray): Inclusive upper-right corner (width, height)
        allow_stacked_spawns (bool): Accept registration onto an occupied cell
    """

    def __init__(self, width: int, height: int, allow_stacked_spawns: bool = True):
        """
        Create a grid with the given upper bounds.

        Args:
            width: Largest valid x coordinate
            height: Largest valid y coordinate
            allow_stacked_spawns: Whether a rover may start on an occupied cell

        Raises:
            ConfigurationError: If either bound is not strictly positive or
                does not fit the bounds array
        """
        if width <= 0 or height <= 0:
            raise ConfigurationError(
                f"Upper grid bounds must be higher than lower grid bounds, got {width} {height}"
            )
        if width > MAX_BOUND or height > MAX_BOUND:
            raise ConfigurationError(
                f"Upper grid bounds must not exceed {MAX_BOUND}, got {width} {height}"
            )

        self.lower_bounds = np.zeros(2, dtype=np.int64)
        self.upper_bounds = np.array([width, height], dtype=np.int64)
        self.allow_stacked_spawns = allow_stacked_spawns

        # One entry per registered rover, indexed by handle
        self._occupancy: List[Position] = []

        logger.info(f"Grid initialized with upper bounds {width} {height}")

    @classmethod
    def from_record(cls, record: str, allow_stacked_spawns: bool = True) -> "Grid":
        """
        Build a grid from a ``"width height"`` input record.

        Raises:
            ConfigurationError: If the record is malformed or the bounds are not positive
        """
        tokens = record.split()
        if len(tokens) != 2:
            raise ConfigurationError(
                f"Grid record must contain exactly two integers, got {record.strip()!r}"
            )
        try:
            width, height = (int(token) for token in tokens)
        except ValueError:
            raise ConfigurationError(
                f"Grid bounds must be integers, got {record.strip()!r}"
            ) from None
        return cls(width, height, allow_stacked_spawns=allow_stacked_spawns)

    @property
    def width(self) -> int:
        return int(self.upper_bounds[0])

    @property
    def height(self) -> int:
        return int(self.upper_bounds[1])

    @property
    def rover_count(self) -> int:
        return len(self._occupancy)

    def in_bounds(self, position) -> bool:
        """True if the position lies inside the plateau, edges included."""
        # Plain int comparison, coordinates may exceed the int64 bounds array
        x, y = (int(component) for component in position)
        return 0 <= x <= self.width and 0 <= y <= self.height

    def is_occupied(self, position) -> bool:
        """True if some registered rover currently stands on the position."""
        return Position(*position) in self._occupancy

    def register(self, position) -> int:
        """
        Record a new rover standing at ``position``.

        Returns:
            Handle addressing this rover's occupancy entry

        Raises:
            PlacementError: If the position is outside the grid, or occupied
                while stacked spawns are disallowed
        """
        position = Position(*position)
        if not self.in_bounds(position):
            raise PlacementError(
                f"Rovers initial position {position} must not exceed the grid bounds "
                f"{self.width},{self.height}",
                position=position,
            )
        if not self.allow_stacked_spawns and self.is_occupied(position):
            raise PlacementError(
                f"Rovers initial position {position} is already occupied by another rover",
                position=position,
            )

        self._occupancy.append(position)
        handle = len(self._occupancy) - 1
        logger.info(f"Rover {handle} registered at {position}")
        return handle

    def update(self, handle: int, position) -> None:
        """
        Move the occupancy entry of a registered rover.

        Raises:
            PlacementError: If the new position is outside the grid
            IndexError: If the handle was never issued by this grid
        """
        position = Position(*position)
        if not self.in_bounds(position):
            raise PlacementError(f"Position {position} is outside the grid", position=position)
        previous = self._occupancy[handle]
        self._occupancy[handle] = position
        logger.debug(f"Rover {handle} moved {previous} -> {position}")

    def position_of(self, handle: int) -> Position:
        return self._occupancy[handle]

    def occupied_positions(self) -> List[Position]:
        """Current position of every registered rover, in registration order."""
        return list(self._occupancy)

    def __repr__(self) -> str:
        return (f"Grid(width={self.width}, height={self.height}, "
                f"rovers={self.rover_count})")
