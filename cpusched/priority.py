"""Priority scheduling, with and without preemption.

A larger priority value means a higher priority.
"""

from __future__ import annotations

from collections.abc import Iterable

from cpusched.process import Process, ProcessResult


def priority(processes: Iterable[Process]) -> list[ProcessResult]:
    """Run the arrived process of highest priority to completion.

    Ties go to the earlier arrival, then to the earlier input position.
    Results come back in input order.
    """
    pending = list(enumerate(processes))
    done: dict[int, ProcessResult] = {}
    time = 0
    while pending:
        ready = [item for item in pending if item[1].arrival <= time]
        if not ready:
            time = min(p.arrival for _, p in pending)
            continue
        chosen = min(ready, key=lambda item: (-item[1].priority, item[1].arrival, item[0]))
        pending.remove(chosen)
        index, process = chosen
        response = time - process.arrival
        time += process.burst
        done[index] = ProcessResult(process, completion=time, response=response)
    return [result for _, result in sorted(done.items())]


def priority_preemptive(processes: Iterable[Process]) -> list[ProcessResult]:
    """Run, one time unit at a time, the arrived process of highest priority.

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
        index = min(ready, key=lambda i: (-procs[i].priority, procs[i].arrival, i))
        response.setdefault(index, time - procs[index].arrival)
        remaining[index] -= 1
        time += 1
        if remaining[index] == 0:
            del remaining[index]
            done[index] = ProcessResult(procs[index], completion=time, response=response[index])
    return [result for _, result in sorted(done.items())]