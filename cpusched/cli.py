"""Command line: read processes from standard input and print a schedule."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from cpusched.fcfs import fcfs
from cpusched.priority import priority, priority_preemptive
from cpusched.process import Process, ProcessResult
from cpusched.report import format_table
from cpusched.round_robin import round_robin
from cpusched.sjf import sjf
from cpusched.srtf import srtf

_ALGORITHMS = ("fcfs", "sjf", "srtf", "priority", "priority-preemptive", "round-robin")
_WITH_PRIORITY = {"priority", "priority-preemptive"}


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _prompt(text: str) -> None:
    print(text, flush=True)


def _read_processes(algorithm: str, tokens: Iterator[str], count: int) -> list[Process]:
    processes = []
    for _ in range(count):
        if algorithm == "fcfs":
            _prompt("enter id:")
            pid = _next_int(tokens)
            _prompt("enter at:")
            arrival = _next_int(tokens)
            _prompt("enter bt:")
            burst = _next_int(tokens)
            processes.append(Process(pid, arrival, burst))
        elif algorithm in _WITH_PRIORITY:
            _prompt("enter id: at and bt and priority")
            values = [_next_int(tokens) for _ in range(4)]
            processes.append(Process(*values))
        else:
            _prompt("enter id: at and bt")
            values = [_next_int(tokens) for _ in range(3)]
            processes.append(Process(*values))
    return processes


def _run(algorithm: str, tokens: Iterator[str]) -> list[ProcessResult]:
    _prompt("enter the number of processes:")
    count = _next_int(tokens)
    if count < 0:
        raise ValueError(f"number of processes must not be negative: {count}")
    quantum = 0
    if algorithm == "round-robin":
        _prompt("enter the time quanta:")
        quantum = _next_int(tokens)
    processes = _read_processes(algorithm, tokens, count)
    if algorithm == "fcfs":
        return fcfs(processes)
    if algorithm == "sjf":
        return sjf(processes)
    if algorithm == "srtf":
        return srtf(processes)
    if algorithm == "priority":
        return priority(processes)
    if algorithm == "priority-preemptive":
        return priority_preemptive(processes)
    return round_robin(processes, quantum)


def main(argv: Sequence[str] | None = None) -> int:
    """Schedule processes read from standard input and print the result table."""
    parser = argparse.ArgumentParser(
        prog="cpusched",
        description="Simulate a CPU scheduling algorithm on processes read from standard input.",
    )
    parser.add_argument("algorithm", choices=_ALGORITHMS, help="scheduling algorithm")
    args = parser.parse_args(argv)
    try:
        results = _run(args.algorithm, _tokens(sys.stdin))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(format_table(results, args.algorithm in _WITH_PRIORITY), end="")
    return 0