"""Shortest job first, without preemption."""

from __future__ import annotations

from collections.abc import Iterable

from cpusched.process import Process, ProcessResult


def sjf(processes: Iterable[Process]) -> list[ProcessResult]:
    """Always run the arrived process with the shortest burst to completion.

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
        chosen = min(ready, key=lambda item: (item[1].burst, item[1].arrival, item[0]))
        pending.remove(chosen)
        index, process = chosen
        response = time - process.arrival
        time += process.burst
        done[index] = ProcessResult(process, completion=time, response=response)
    return [result for _, result in sorted(done.items())]