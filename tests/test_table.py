import io
import time

import pytest

from philosim.table import Config, Table, validate_arguments
from philosim.utils import current_millis


def test_config_from_four_args():
    config = Config.from_args(["5", "800", "200", "100"])
    assert config == Config(5, 800, 200, 100, None)


def test_config_from_five_args():
    config = Config.from_args(["4", "410", "200", "200", "7"])
    assert config.must_eat_count == 7
    assert config.num_philos == 4


def test_config_accepts_lenient_numbers():
    config = Config.from_args([" +3", "60ms", "20", "20"])
    assert (config.num_philos, config.time_to_die) == (3, 60)


@pytest.mark.parametrize("args", [["1", "2", "3"], ["1", "2", "3", "4", "5", "6"], []])
def test_config_rejects_wrong_count(args):
    with pytest.raises(ValueError):
        Config.from_args(args)


@pytest.mark.parametrize(
    "args",
    [["0", "1", "1", "1"], ["1", "-5", "1", "1"], ["1", "1", "abc", "1"], ["1", "1", "1", "1", "0"]],
)
def test_validate_arguments_rejects(args):
    with pytest.raises(ValueError, match="All arguments must be positive integers"):
        validate_arguments(args)


def test_validate_arguments_rejects_through_config():
    with pytest.raises(ValueError, match="positive"):
        Config.from_args(["2", "100", "0", "10"])


def _table(count=3, **kwargs):
    buffer = io.StringIO()
    config = Config(count, 1000, 100, 100, **kwargs)
    return Table(config, buffer), buffer


def test_table_seats_philosophers_in_order():
    table, _ = _table(4)
    assert [p.id for p in table.philosophers] == [1, 2, 3, 4]
    assert all(p.meals_eaten == 0 for p in table.philosophers)
    assert all(p.last_meal == table.start_time for p in table.philosophers)


def test_forks_are_shared_around_the_table():
    table, _ = _table(4)
    seats = table.philosophers
    for left, right in zip(seats, seats[1:] + seats[:1]):
        assert left.right_fork is right.left_fork
    assert len({id(fork) for fork in table.forks}) == 4


def test_single_philosopher_has_one_fork():
    table, _ = _table(1)
    only = table.philosophers[0]
    assert only.left_fork is only.right_fork


def test_report_writes_status_line():
    table, buffer = _table()
    table.report(table.philosophers[1], "is thinking")
    timestamp, ident, status = buffer.getvalue().rstrip("\n").split(" ", 2)
    assert ident == "2"
    assert status == "is thinking"
    assert 0 <= int(timestamp) < 1000


def test_report_silent_after_end():
    table, buffer = _table()
    table.end()
    table.report(table.philosophers[0], "died")
    assert buffer.getvalue() == ""


def test_end_is_seen():
    table, _ = _table()
    assert table.has_ended() is False
    table.end()
    assert table.has_ended() is True


def test_sleep_waits_requested_time():
    table, _ = _table()
    start_millis = current_millis()
    start = time.monotonic()
    table.sleep(30)
    assert current_millis() - start_millis >= 30
    assert time.monotonic() - start >= 0.025
    assert table.has_ended() is False


def test_sleep_returns_early_when_ended():
    table, _ = _table()
    table.end()
    start_millis = current_millis()
    table.sleep(2000)
    assert current_millis() - start_millis < 1000
    assert table.has_ended() is True