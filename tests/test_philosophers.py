import io

import pytest

from cpusched.philosophers import DiningTable, PhilosopherState, main


def test_everyone_starts_thinking():
    table = DiningTable()
    assert all(table.state(i) is PhilosopherState.THINKING for i in range(table.size))


def test_free_philosopher_eats_at_once():
    table = DiningTable()
    assert table.take_fork(0) == ["Philosopher 0 is hungry.", "Philosopher 0 starts eating."]
    assert table.state(0) is PhilosopherState.EATING


def test_neighbour_waits_while_other_eats():
    table = DiningTable()
    table.take_fork(0)
    assert table.take_fork(1) == ["Philosopher 1 is hungry."]
    assert table.state(1) is PhilosopherState.HUNGRY


def test_putting_down_forks_feeds_hungry_neighbour():
    table = DiningTable()
    table.take_fork(0)
    table.take_fork(1)
    assert table.put_fork(0) == [
        "Philosopher 0 puts down forks and starts thinking.",
        "Philosopher 1 starts eating.",
    ]
    assert table.state(0) is PhilosopherState.THINKING
    assert table.state(1) is PhilosopherState.EATING


def test_non_neighbours_eat_together():
    table = DiningTable()
    table.take_fork(0)
    table.take_fork(2)
    assert table.state(0) is PhilosopherState.EATING
    assert table.state(2) is PhilosopherState.EATING


def test_wraparound_neighbour_waits():
    table = DiningTable()
    table.take_fork(0)
    table.take_fork(4)
    assert table.state(4) is PhilosopherState.HUNGRY


@pytest.mark.parametrize("philosopher", [-1, 5])
def test_out_of_range_philosopher_is_rejected(philosopher):
    table = DiningTable()
    with pytest.raises(ValueError):
        table.take_fork(philosopher)


def test_main_runs_a_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 0\n1 1\n2 0\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Philosopher 0 starts eating." in out
    assert "Philosopher 1 is hungry." in out
    assert out.index("Philosopher 0 puts down forks") < out.index("Philosopher 1 starts eating.")


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 9\n4 0\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Invalid philosopher number!" in out
    assert "Invalid choice!" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "Enter choice: " in capsys.readouterr().out