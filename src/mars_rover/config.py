"""
Runtime configuration for a mission.
"""

import logging
from dataclasses import dataclass


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class SimulationConfig:
    """Mission settings with validation."""

    # Permit two rovers to start on the same cell
    allow_stacked_spawns: bool = True

    # Include rejected-move and unknown-command messages in the output lines
    echo_diagnostics: bool = True

    # Level handed to logging.basicConfig by the command line entry point
    log_level: str = "ERROR"

    def __post_init__(self):
        """Validate configuration values."""
        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}, "
                             f"expected one of {', '.join(_LOG_LEVELS)}")

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_args(cls, args) -> "SimulationConfig":
        """Build a configuration from parsed command line arguments."""
        return cls(
            allow_stacked_spawns=not getattr(args, "strict_spawn", False),
            echo_diagnostics=not getattr(args, "quiet", False),
            log_level=getattr(args, "log_level", "ERROR"),
        )
