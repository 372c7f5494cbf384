# philosim

A simulation of the dining philosophers problem. Philosophers sit around a
round table with one fork between each pair of neighbours. Each philosopher
runs in its own thread and repeats the same cycle: take two forks, eat,
sleep, think. A monitor thread watches the table. The simulation stops when
a philosopher has gone too long without eating, or when every philosopher
has eaten the required number of meals.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
philosim number_of_philosophers time_to_die time_to_eat time_to_sleep [must_eat_count]
```

The same entry point can be started with `python -m philosim.cli`.

All times are in milliseconds. Every argument must be a positive integer.

- `number_of_philosophers`: the number of philosophers, which is also the number of forks.
- `time_to_die`: a philosopher dies if this long passes after it last started eating, or after the start of the simulation if it has not eaten yet.
- `time_to_eat`: how long a meal takes. A philosopher holds two forks for this long.
- `time_to_sleep`: how long a philosopher sleeps after eating.
- `must_eat_count` (optional): the simulation ends once every philosopher has eaten at least this many times.

Example:

```
philosim 5 800 200 200 7
```

Each state change is printed on its own line. A line holds the milliseconds
since the start, the philosopher's number (from 1) and the event, for
example:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
```

The events are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Once the simulation has ended, nothing else is
printed. A lone philosopher takes its one fork, waits `time_to_die` and dies.

Arguments are read leniently: leading whitespace and one sign are accepted,
and digits are read up to the first non-digit, so `"12ms"` counts as 12 and
text without digits counts as 0.

With the wrong number of arguments the command prints a usage line. With an
argument that is not a positive integer it prints
`Error: All arguments must be positive integers`. In both cases it exits
with status 1; otherwise it runs the simulation and exits with status 0.

## Library use

```python
import sys

from philosim.table import Config
from philosim.simulation import run

config = Config.from_args(["4", "410", "200", "200", "3"])
casualty = run(config, sys.stdout)
if casualty is not None:
    print(f"philosopher {casualty.id} starved")
```

- `philosim.table.Config` holds the settings; `Config.from_args` builds one
  from four or five strings and raises `ValueError` for a wrong count or a
  value that is not positive. `must_eat_count` is `None` when not given.
- `philosim.table.validate_arguments` raises `ValueError` unless every
  string parses to a positive integer.
- `philosim.table.Table` holds the shared state: the forks, the
  `Philosopher` records and the end flag. `Table.report`,
  `Table.has_ended`, `Table.end` and `Table.sleep` are what the routines
  are built on.
- `philosim.simulation` provides `philosopher_routine`, `monitor_routine`
  and `run`. `run` returns the philosopher who starved, or `None` when
  everyone ate enough.
- `philosim.utils` provides `current_millis` and `parse_int`.