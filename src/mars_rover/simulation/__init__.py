"""
Simulation components for the rover plateau.

Components:
    - Rover: Position, orientation and command interpreter
    - MissionController: Record-by-record orchestration of grid and rovers
"""

from .rover import Rover, RoverState
from .controller import MissionController, MissionReport, run_mission

__all__ = [
    "Rover",
    "RoverState",
    "MissionController",
    "MissionReport",
    "run_mission"
]
