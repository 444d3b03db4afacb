"""
Mission controller: turns an ordered stream of input records into rover runs.

Record Protocol:
    record 1            grid bounds            "width height"
    records 2, 4, 6 ... rover spawn            "x y D"
    records 3, 5, 7 ... command string         "MLRM..."

Each rover is spawned and fully driven before the next spawn record is read.
Output lines are emitted as soon as they are produced. A configuration error
ends the mission; it is returned on the report instead of being raised.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from ..config import SimulationConfig
from ..errors import ConfigurationError, RoverError
from ..navigation.grid import Grid
from .rover import Rover, RoverState


logger = logging.getLogger(__name__)

MINIMUM_RECORDS = 3

USAGE_LINES = (
    "The input must consist of at least 3 lines.",
    "The first line must be the maximum size of the grid.",
    "The second line must contain the initial position and orientation of a rover.",
    "The third line must contain rover movements.",
    "For example:",
    "5 5",
    "1 2 N",
    "LMLMLMRM",
)


@dataclass
class MissionReport:
    """Everything a mission produced."""

    lines: List[str] = field(default_factory=list)
    final_states: List[RoverState] = field(default_factory=list)
    records_processed: int = 0
    usage_shown: bool = False
    error: Optional[ConfigurationError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class MissionController:
    """
    Drives one grid and its rovers from input records.

    Attributes:
        config (SimulationConfig): Mission settings
        grid (Grid): Grid built from the first record, None before that
        rovers (List[Rover]): Rovers in spawn order
        record_count (int): Records consumed so far
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 output: Optional[Callable[[str], None]] = None):
        """
        Args:
            config: Mission settings, defaults when omitted
            output: Called with every output line as soon as it is produced
        """
        self.config = config or SimulationConfig()
        self.output = output

        self.grid: Optional[Grid] = None
        self.rovers: List[Rover] = []
        self.record_count = 0

        self.report = MissionReport()

    @property
    def current_rover(self) -> Optional[Rover]:
        return self.rovers[-1] if self.rovers else None

    def process_record(self, record: str) -> None:
        """
        Consume one input record.

        Raises:
            ConfigurationError: If the record cannot be used to set up the mission
        """
        self.record_count += 1
        self.report.records_processed = self.record_count

        if self.record_count == 1:
            self.grid = Grid.from_record(record,
                                         allow_stacked_spawns=self.config.allow_stacked_spawns)
        elif self.record_count % 2 == 0:
            self._spawn_rover(record)
        else:
            self._drive_rover(record)

    def _expects_commands(self) -> bool:
        """True if the next record is a command string."""
        ordinal = self.record_count + 1
        return ordinal > 1 and ordinal % 2 == 1

    def _spawn_rover(self, record: str) -> None:
        rover = Rover.from_record(record, self.grid, on_diagnostic=self._on_diagnostic)
        self.rovers.append(rover)

    def _drive_rover(self, record: str) -> None:
        rover = self.current_rover
        if rover is None:
            raise ConfigurationError("Command record received before any rover was spawned")
        state = rover.execute(record)
        self.report.final_states.append(state)
        self._emit(str(state))

    def _on_diagnostic(self, diagnostic: RoverError) -> None:
        if self.config.echo_diagnostics:
            self._emit(str(diagnostic))

    def _emit(self, line: str) -> None:
        self.report.lines.append(line)
        if self.output is not None:
            self.output(line)

    def run(self, records: Iterable[str]) -> MissionReport:
        """
        Process every record and return the mission report.

        Fewer than three records produce the usage text. A configuration
        error stops processing; lines emitted before it are kept. Blank
        records where a grid or spawn record is due are held back and
        dropped when nothing but blank records follows them.
        """
        held: List[str] = []
        try:
            for record in records:
                if not record.strip() and (held or not self._expects_commands()):
                    held.append(record)
                    continue
                for blank in held:
                    self.process_record(blank)
                held.clear()
                self.process_record(record)
        except ConfigurationError as error:
            logger.error(f"Mission aborted at record {self.record_count}: {error}")
            self.report.error = error
            return self.report

        if held:
            logger.debug(f"Ignored {len(held)} trailing blank records")

        if self.record_count < MINIMUM_RECORDS:
            self.report.usage_shown = True
            for line in USAGE_LINES:
                self._emit(line)

        logger.info(f"Mission completed: {len(self.rovers)} rovers, "
                    f"{self.record_count} records")
        return self.report


def run_mission(records: Iterable[str], config: Optional[SimulationConfig] = None,
                output: Optional[Callable[[str], None]] = None) -> MissionReport:
    """Run a complete mission over ``records`` with a fresh controller."""
    return MissionController(config=config, output=output).run(records)
