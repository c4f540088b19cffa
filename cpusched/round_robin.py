"""Round robin scheduling with a fixed time quantum."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from cpusched.process import Process, ProcessResult


def round_robin(processes: Iterable[Process], quantum: int) -> list[ProcessResult]:
    """Give each ready process at most ``quantum`` units in turn.

    Processes that arrive during a slice join the queue before the process
    that was just preempted. Results come back ordered by arrival, then id.
    """
    if quantum <= 0:
        raise ValueError(f"time quantum must be positive: {quantum}")
    order = sorted(processes, key=lambda p: (p.arrival, p.pid))
    if not order:
        return []
    remaining = [p.burst for p in order]
    response: dict[int, int] = {}
    done: dict[int, ProcessResult] = {}
    not_arrived = deque(range(len(order)))
    ready: deque[int] = deque()

    def admit(now: int) -> None:
        while not_arrived and order[not_arrived[0]].arrival <= now:
            ready.append(not_arrived.popleft())

    time = order[0].arrival
    admit(time)
    while ready or not_arrived:
        if not ready:
            time = order[not_arrived[0]].arrival
            admit(time)
            continue
        index = ready.popleft()
        process = order[index]
        response.setdefault(index, time - process.arrival)
        run = min(remaining[index], quantum)
        time += run
        remaining[index] -= run
        admit(time)
        if remaining[index] == 0:
            done[index] = ProcessResult(process, completion=time, response=response[index])
        else:
            ready.append(index)
    return [result for _, result in sorted(done.items())]