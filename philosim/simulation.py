"""The philosopher and monitor routines and the driver that runs them."""

from __future__ import annotations

import threading
from typing import TextIO

from philosim.table import Config, Philosopher, Table
from philosim.utils import current_millis

_MONITOR_INTERVAL_SECONDS = 0.001


def _lone_philosopher(table: Table, philosopher: Philosopher) -> None:
    with philosopher.left_fork:
        table.report(philosopher, "has taken a fork")
        table.sleep(table.config.time_to_die)
        table.report(philosopher, "died")


def _eat(table: Table, philosopher: Philosopher) -> None:
    if philosopher.id % 2 == 0:
        first, second = philosopher.right_fork, philosopher.left_fork
    else:
        first, second = philosopher.left_fork, philosopher.right_fork
    if table.has_ended():
        return
    with first:
        table.report(philosopher, "has taken a fork")
        with second:
            table.report(philosopher, "has taken a fork")
            table.report(philosopher, "is eating")
            with table.state_lock:
                philosopher.last_meal = current_millis()
                philosopher.meals_eaten += 1
            table.sleep(table.config.time_to_eat)


def philosopher_routine(table: Table, philosopher: Philosopher) -> None:
    """Eat, sleep and think until the simulation ends."""
    if table.config.num_philos == 1:
        _lone_philosopher(table, philosopher)
        return
    while not table.has_ended():
        _eat(table, philosopher)
        table.report(philosopher, "is sleeping")
        table.sleep(table.config.time_to_sleep)
        table.report(philosopher, "is thinking")


def _starved(table: Table, philosopher: Philosopher) -> bool:
    now = current_millis()
    with table.state_lock:
        since_meal = now - philosopher.last_meal
    if since_meal < table.config.time_to_die:
        return False
    table.end()
    table.report(philosopher, "died")
    return True


def _all_full(table: Table) -> bool:
    target = table.config.must_eat_count
    if target is None:
        return False
    with table.state_lock:
        full = all(p.meals_eaten >= target for p in table.philosophers)
    if full:
        table.end()
    return full


def monitor_routine(table: Table) -> Philosopher | None:
    """Watch the table until someone starves or everyone has eaten enough.

    Returns the philosopher who starved, or None if all were fed.
    """
    pause = threading.Event()
    while True:
        for philosopher in table.philosophers:
            if _starved(table, philosopher):
                return philosopher
        if _all_full(table):
            return None
        pause.wait(_MONITOR_INTERVAL_SECONDS)


def run(config: Config, output: TextIO | None = None) -> Philosopher | None:
    """Run a whole simulation; return the philosopher who starved, if any."""
    table = Table(config, output)
    threads = [
        threading.Thread(
            target=philosopher_routine,
            args=(table, philosopher),
            name=f"philosopher-{philosopher.id}",
        )
        for philosopher in table.philosophers
    ]
    for thread in threads:
        thread.start()
    try:
        casualty = monitor_routine(table)
    finally:
        table.end()
        for thread in threads:
            thread.join()
    return casualty