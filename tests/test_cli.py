import io

import pytest

from cpusched.cli import main
from cpusched.fcfs import fcfs
from cpusched.priority import priority_preemptive
from cpusched.process import Process
from cpusched.report import format_table
from cpusched.round_robin import round_robin
from cpusched.sjf import sjf


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_fcfs_session(monkeypatch, capsys):
    _feed(monkeypatch, "2\n1\n0\n3\n2\n1\n2\n")
    assert main(["fcfs"]) == 0
    out = capsys.readouterr().out
    expected = format_table(fcfs([Process(1, 0, 3), Process(2, 1, 2)]), False)
    assert out.endswith(expected)
    assert "enter at:" in out


def test_sjf_session(monkeypatch, capsys):
    _feed(monkeypatch, "3\n1 0 5\n2 1 1\n3 2 2\n")
    assert main(["sjf"]) == 0
    processes = [Process(1, 0, 5), Process(2, 1, 1), Process(3, 2, 2)]
    assert capsys.readouterr().out.endswith(format_table(sjf(processes), False))


def test_priority_preemptive_session(monkeypatch, capsys):
    _feed(monkeypatch, "2\n1 0 4 1\n2 1 2 5\n")
    assert main(["priority-preemptive"]) == 0
    out = capsys.readouterr().out
    processes = [Process(1, 0, 4, 1), Process(2, 1, 2, 5)]
    assert out.endswith(format_table(priority_preemptive(processes), True))
    assert "enter id: at and bt and priority" in out


def test_round_robin_reads_quantum(monkeypatch, capsys):
    _feed(monkeypatch, "2\n2\n1 0 3\n2 0 3\n")
    assert main(["round-robin"]) == 0
    out = capsys.readouterr().out
    processes = [Process(1, 0, 3), Process(2, 0, 3)]
    assert out.endswith(format_table(round_robin(processes, 2), False))
    assert "enter the time quanta:" in out


def test_bad_number_fails(monkeypatch, capsys):
    _feed(monkeypatch, "abc\n")
    assert main(["srtf"]) == 1
    assert "error" in capsys.readouterr().err


def test_truncated_input_fails(monkeypatch, capsys):
    _feed(monkeypatch, "2\n1 0 3\n")
    assert main(["sjf"]) == 1
    assert "end of input" in capsys.readouterr().err


def test_unknown_algorithm_exits():
    with pytest.raises(SystemExit):
        main(["lottery"])