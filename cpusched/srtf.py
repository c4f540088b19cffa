"""Shortest remaining time first: shortest job first with preemption."""

from __future__ import annotations

from collections.abc import Iterable

from cpusched.process import Process, ProcessResult


def srtf(processes: Iterable[Process]) -> list[ProcessResult]:
    """Run, one time unit at a time, the arrived process with least work left.

    Ties go to the earlier arrival, then to the earlier input position.
    Results come back in input order.
    """
    procs = list(processes)
    for process in procs:
        if process.burst <= 0:
            raise ValueError(f"burst time must be positive: process {process.pid}")
    remaining = {index: process.burst for index, process in enumerate(procs)}
    response: dict[int, int] = {}
    done: dict[int, ProcessResult] = {}
    time = 0
    while remaining:
        ready = [i for i in remaining if procs[i].arrival <= time]
        if not ready:
            time = min(procs[i].arrival for i in remaining)
            continue
        index = min(ready, key=lambda i: (remaining[i], procs[i].arrival, i))
        response.setdefault(index, time - procs[index].arrival)
        remaining[index] -= 1
        time += 1
        if remaining[index] == 0:
            del remaining[index]
            done[index] = ProcessResult(procs[index], completion=time, response=response[index])
    return [result for _, result in sorted(done.items())]