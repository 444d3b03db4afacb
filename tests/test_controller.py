import pytest
from unittest.mock import Mock
import sys
import os

# Add the src directory to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from mars_rover.config import SimulationConfig
from mars_rover.errors import ConfigurationError, PlacementError
from mars_rover.navigation import Orientation, Position
from mars_rover.simulation import MissionController, RoverState, run_mission
from mars_rover.simulation.controller import USAGE_LINES


def state_lines(report):
    """Output lines holding rover states, diagnostics excluded"""
    return [str(state) for state in report.final_states]


class TestMissionScenarios:
    """Test complete missions from input records"""

    def test_kata_default_mission(self):
        """Test the two-rover kata input"""
        report = run_mission(["5 5", "1 2 N", "LMLMLMLMM", "3 3 E", "MMRMMRMRRM"])

        assert report.succeeded
        assert report.lines == ["1 3 N", "5 1 E"]
        assert report.records_processed == 5
        assert report.usage_shown == False

    def test_collision_mission(self):
        """Test a rover cannot move onto a cell held by an earlier rover"""
        report = run_mission(["5 5", "1 1 N", "M", "1 3 S", "M"])

        assert state_lines(report) == ["1 2 N", "1 3 S"]
        assert len(report.lines) == 3
        assert "blocked" in report.lines[1]

    def test_stacked_spawn_mission(self):
        """Test a rover spawned on an occupied cell may still move away"""
        report = run_mission(["5 5", "1 1 N", "M", "1 2 S", "M"])

        assert state_lines(report) == ["1 2 N", "1 1 S"]

    def test_out_of_bounds_mission(self):
        report = run_mission(["1 1", "1 1 N", "M"])

        assert state_lines(report) == ["1 1 N"]
        assert report.lines[-1] == "1 1 N"
        assert "out of bounds" in report.lines[0]

    def test_malformed_grid_aborts_before_rovers(self):
        """Test non-positive bounds stop the mission before any rover"""
        controller = MissionController()
        report = controller.run(["0 5", "1 2 N", "LMLMLMLMM"])

        assert not report.succeeded
        assert isinstance(report.error, ConfigurationError)
        assert report.records_processed == 1
        assert report.lines == []
        assert controller.rovers == []
        assert controller.grid is None

    def test_unknown_command_reports_state(self):
        """Test a rover with an unknown command still reports and later rovers run"""
        report = run_mission(["5 5", "1 2 N", "MMXM", "0 0 E", "M"])

        assert state_lines(report) == ["1 4 N", "1 0 E"]
        assert report.lines[0].startswith("Unidentified character")
        assert report.succeeded

    def test_invalid_spawn_keeps_earlier_output(self):
        """Test a placement error ends the mission after earlier rovers reported"""
        report = run_mission(["5 5", "1 1 N", "M", "9 9 N", "M"])

        assert report.lines == ["1 2 N"]
        assert isinstance(report.error, PlacementError)
        assert report.records_processed == 4

    def test_controller_is_reusable_state(self):
        """Test rover and grid state lives on the controller instance"""
        controller = MissionController()
        controller.run(["5 5", "1 2 N", "M", "3 3 E", "M"])

        assert controller.grid.rover_count == 2
        assert [rover.position for rover in controller.rovers] == [Position(1, 3), Position(4, 3)]
        assert controller.current_rover is controller.rovers[-1]


class TestUsage:
    """Test the usage text for short input"""

    @pytest.mark.parametrize("records", [[], ["5 5"], ["5 5", "1 2 N"]])
    def test_short_input_shows_usage(self, records):
        report = run_mission(records)

        assert report.usage_shown == True
        assert report.lines == list(USAGE_LINES)
        assert report.final_states == []

    def test_usage_not_shown_for_three_records(self):
        report = run_mission(["5 5", "1 2 N", ""])
        assert report.usage_shown == False
        assert report.lines == ["1 2 N"]


class TestControllerConfiguration:
    """Test configuration and output streaming"""

    def test_output_callback_receives_lines_in_order(self):
        output = Mock()
        run_mission(["1 1", "1 1 N", "MR"], output=output)

        emitted = [call[0][0] for call in output.call_args_list]
        assert len(emitted) == 2
        assert emitted[-1] == "1 1 E"

    def test_quiet_mode_omits_diagnostics(self):
        config = SimulationConfig(echo_diagnostics=False)
        report = run_mission(["1 1", "1 1 N", "MXM"], config=config)

        assert report.lines == ["1 1 N"]

    def test_strict_spawn_rejects_stacked_rovers(self):
        config = SimulationConfig(allow_stacked_spawns=False)
        report = run_mission(["5 5", "1 1 N", "", "1 1 E", "M"], config=config)

        assert report.lines == ["1 1 N"]
        assert isinstance(report.error, PlacementError)

    def test_process_record_raises_configuration_errors(self):
        """Test single-record processing propagates fatal errors to the caller"""
        controller = MissionController()
        with pytest.raises(ConfigurationError):
            controller.process_record("5 -1")

    def test_process_record_streams_states(self):
        controller = MissionController()
        for record in ["2 2", "0 0 N", "RMM"]:
            controller.process_record(record)

        assert controller.report.final_states == [RoverState(2, 0, Orientation.EAST)]


class TestInputEdgeCases:
    """Test unusual but well-formed input records"""

    def test_oversized_grid_bounds(self):
        """Test a grid record beyond the bounds range ends the mission cleanly"""
        report = run_mission(["99999999999999999999 5", "1 2 N", "M"])

        assert isinstance(report.error, ConfigurationError)
        assert report.lines == []

    def test_oversized_spawn_position(self):
        """Test a spawn far outside the grid is a placement error"""
        report = run_mission(["5 5", "1 99999999999999999999 N", "M"])

        assert isinstance(report.error, PlacementError)
        assert report.records_processed == 2

    @pytest.mark.parametrize("trailing", [[""], ["\n"], ["", "  ", "\n"]])
    def test_trailing_blank_records_ignored(self, trailing):
        """Test blank records after the last command string are dropped"""
        report = run_mission(["5 5\n", "1 2 N\n", "LMLMLMLMM\n"] + trailing)

        assert report.succeeded
        assert report.lines == ["1 3 N"]
        assert report.records_processed == 3

    def test_blank_spawn_record_between_rovers_fails(self):
        """Test a blank record followed by more input is still a spawn record"""
        report = run_mission(["5 5", "1 2 N", "M", "", "3 3 E", "M"])

        assert report.lines == ["1 3 N"]
        assert isinstance(report.error, ConfigurationError)
        assert report.records_processed == 4

    def test_blank_command_record_is_processed(self):
        report = run_mission(["5 5", "1 2 N", "", ""])

        assert report.lines == ["1 2 N"]
        assert report.succeeded
