"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from philosim.simulation import run
from philosim.table import Config, validate_arguments

USAGE = (
    "Usage: philosim number_of_philosophers time_to_die time_to_eat "
    "time_to_sleep [must_eat_count]"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (4, 5):
        print(USAGE)
        return 1
    try:
        validate_arguments(args)
    except ValueError as error:
        print(f"Error: {error}")
        return 1
    run(Config.from_args(args), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())