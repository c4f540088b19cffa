"""First come, first served scheduling."""

from __future__ import annotations

from collections.abc import Iterable

from cpusched.process import Process, ProcessResult


def fcfs(processes: Iterable[Process]) -> list[ProcessResult]:
    """Run processes in order of arrival, ties broken by id.

    Results come back in the order the processes ran.
    """
    results = []
    time = 0
    for process in sorted(processes, key=lambda p: (p.arrival, p.pid)):
        time = max(time, process.arrival)
        response = time - process.arrival
        time += process.burst
        results.append(ProcessResult(process, completion=time, response=response))
    return results