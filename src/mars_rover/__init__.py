"""
Mars Rover: grid navigation simulation for plateau rovers.

This package simulates wheeled rovers exploring a rectangular plateau. Each
rover is placed on the grid, driven by a string of move and turn commands,
and reports its final position and orientation.

This package implements:
- Compass orientation with integer rotation matrices
- A bounded grid with collision-aware occupancy tracking
- A rover command interpreter with non-fatal move rejection
- A mission controller consuming line-oriented input records
"""

from .config import SimulationConfig
from .errors import (RoverError, ConfigurationError, PlacementError,
                     MoveRejected, UnrecognizedCommand)
from .navigation import Orientation, Grid, Position
from .simulation import Rover, RoverState, MissionController, MissionReport, run_mission

__version__ = "1.0.0"
__author__ = "Mars Rover Team"

__all__ = [
    "SimulationConfig",
    "Orientation",
    "Grid",
    "Position",
    "Rover",
    "RoverState",
    "MissionController",
    "MissionReport",
    "run_mission",
    "RoverError",
    "ConfigurationError",
    "PlacementError",
    "MoveRejected",
    "UnrecognizedCommand"
]
