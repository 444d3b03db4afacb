"""
Cardinal orientation of a rover on the plateau.

Each of the four compass directions maps to a unit movement vector on the
grid and back again. Turning is expressed as a rotation of that vector.

Vector Model:
    NORTH = ( 0,  1)    SOUTH = ( 0, -1)
    EAST  = ( 1,  0)    WEST  = (-1,  0)

Rotation Matrices (integer, 90 degrees):
    R_left  = [[0, -1],      (dx, dy) -> (-dy,  dx)   counter-clockwise
               [1,  0]]
    R_right = [[ 0, 1],      (dx, dy) -> ( dy, -dx)   clockwise
               [-1, 0]]

Both rotations map the set of four unit vectors onto itself, so every vector
a rover can hold has exactly one direction symbol.
"""

import numpy as np
from enum import Enum
from typing import Tuple

from ..errors import ConfigurationError


Vector = Tuple[int, int]

# 90 degree rotation matrices acting on column vectors
ROTATE_LEFT_MATRIX = np.array([[0, -1],
                               [1, 0]], dtype=int)
ROTATE_RIGHT_MATRIX = np.array([[0, 1],
                                [-1, 0]], dtype=int)


class Orientation(Enum):
    """Compass directions, valued by their input/output symbol."""
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Orientation":
        """
        Parse a direction symbol (``N``, ``S``, ``E`` or ``W``).

        Raises:
            ConfigurationError: If the symbol is not one of the four directions
        """
        try:
            return cls(symbol.strip())
        except ValueError:
            raise ConfigurationError(
                f"Unknown direction {symbol!r}, expected one of N, S, E, W"
            ) from None

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def vector(self) -> Vector:
        return vector_of(self)

    def left(self) -> "Orientation":
        """Direction after a 90 degree counter-clockwise turn."""
        return direction_of(rotate_left(self.vector))

    def right(self) -> "Orientation":
        """Direction after a 90 degree clockwise turn."""
        return direction_of(rotate_right(self.vector))


_VECTORS = {
    Orientation.NORTH: (0, 1),
    Orientation.SOUTH: (0, -1),
    Orientation.EAST: (1, 0),
    Orientation.WEST: (-1, 0),
}
_DIRECTIONS = {vector: direction for direction, vector in _VECTORS.items()}


def vector_of(direction: Orientation) -> Vector:
    """Unit movement vector for a direction."""
    return _VECTORS[direction]


def direction_of(vector: Vector) -> Orientation:
    """
    Direction for one of the four unit vectors.

    Raises:
        KeyError: If the vector is not a unit vector along an axis
    """
    return _DIRECTIONS[tuple(int(component) for component in vector)]


def _rotate(matrix: np.ndarray, vector: Vector) -> Vector:
    rotated = matrix @ np.asarray(vector, dtype=int)
    return int(rotated[0]), int(rotated[1])


def rotate_left(vector: Vector) -> Vector:
    """Rotate a vector 90 degrees counter-clockwise: (dx, dy) -> (-dy, dx)."""
    return _rotate(ROTATE_LEFT_MATRIX, vector)


def rotate_right(vector: Vector) -> Vector:
    """Rotate a vector 90 degrees clockwise: (dx, dy) -> (dy, -dx)."""
    return _rotate(ROTATE_RIGHT_MATRIX, vector)
