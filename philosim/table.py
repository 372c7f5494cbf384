"""Simulation settings and the shared table of philosophers and forks."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import Sequence, TextIO

from philosim.utils import current_millis, parse_int

POSITIVE_ARGUMENTS_MESSAGE = "All arguments must be positive integers"


def validate_arguments(args: Sequence[str]) -> None:
    """Raise ValueError unless every argument parses to a positive integer."""
    if any(parse_int(arg) <= 0 for arg in args):
        raise ValueError(POSITIVE_ARGUMENTS_MESSAGE)


@dataclass(frozen=True)
class Config:
    """Parameters of one simulation; times are in milliseconds."""

    num_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat_count: int | None = None

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "Config":
        """Build a configuration from four or five command-line values."""
        if len(args) not in (4, 5):
            raise ValueError("expected 4 or 5 arguments")
        validate_arguments(args)
        numbers = [parse_int(arg) for arg in args]
        must_eat = numbers[4] if len(numbers) == 5 else None
        return cls(*numbers[:4], must_eat_count=must_eat)


@dataclass(eq=False)
class Philosopher:
    """One seat at the table with its two neighbouring forks."""

    id: int
    left_fork: threading.Lock = field(repr=False)
    right_fork: threading.Lock = field(repr=False)
    last_meal: int
    meals_eaten: int = 0


class Table:
    """Shared state of a running simulation."""

    def __init__(self, config: Config, output: TextIO | None = None) -> None:
        self.config = config
        self.output = output if output is not None else sys.stdout
        self.print_lock = threading.Lock()
        self.state_lock = threading.Lock()
        self._ended = False
        self.start_time = current_millis()
        count = config.num_philos
        self.forks = [threading.Lock() for _ in range(count)]
        # The last philosopher's right fork is the first one's left fork.
        self.philosophers = [
            Philosopher(
                id=seat + 1,
                left_fork=self.forks[seat],
                right_fork=self.forks[(seat + 1) % count],
                last_meal=self.start_time,
            )
            for seat in range(count)
        ]

    def report(self, philosopher: Philosopher, status: str) -> None:
        """Write a timestamped status line unless the simulation has ended."""
        timestamp = current_millis() - self.start_time
        if self.has_ended():
            return
        with self.print_lock:
            self.output.write(f"{timestamp} {philosopher.id} {status}\n")
            self.output.flush()

    def has_ended(self) -> bool:
        """Tell whether the simulation has been stopped."""
        with self.state_lock:
            return self._ended

    def end(self) -> None:
        """Stop the simulation."""
        with self.state_lock:
            self._ended = True

    def sleep(self, milliseconds: int) -> None:
        """Wait for the given time, returning early if the simulation ends."""
        start = current_millis()
        while current_millis() - start < milliseconds:
            if self.has_ended():
                break
            threading.Event().wait(0.0001)