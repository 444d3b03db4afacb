"""
Navigation primitives for the rover simulation.

Components:
    - Orientation: Compass directions and their unit movement vectors
    - Grid: Bounded plateau with rover occupancy tracking
    - Position: Integer grid coordinate
"""

from .orientation import (Orientation, vector_of, direction_of,
                          rotate_left, rotate_right)
from .grid import Grid, Position

__all__ = [
    "Orientation",
    "Grid",
    "Position",

    # Vector helpers
    "vector_of",
    "direction_of",
    "rotate_left",
    "rotate_right"
]
