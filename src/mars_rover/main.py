"""
Command line entry point for the rover simulation.

Reads input records from the named files (or standard input) and prints one
line per output event.

Run with: mars-rover input.txt
"""

import argparse
import fileinput
import logging
import sys

from .config import SimulationConfig
from .simulation.controller import run_mission


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Mars rover plateau simulation')
    parser.add_argument('inputs', nargs='*', metavar='INPUT',
                        help='Input files, standard input when omitted or "-"')
    parser.add_argument('--quiet', action='store_true',
                        help='Do not print rejected move and unknown command diagnostics')
    parser.add_argument('--strict-spawn', action='store_true',
                        help='Reject rovers that start on an occupied cell')
    parser.add_argument('--log-level', default='ERROR',
                        help='Logging level for simulation internals (default: ERROR)')
    return parser


def main(argv=None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    try:
        config = SimulationConfig.from_args(args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=config.numeric_log_level,
                        format='%(levelname)s %(name)s: %(message)s')

    with fileinput.input(files=args.inputs or ('-',)) as records:
        report = run_mission(records, config=config, output=print)

    if not report.succeeded:
        print(f"Simulation error: {report.error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
