"""Process descriptions and the per-process results of a schedule."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A process to schedule: id, arrival time, burst time and priority.

    A larger priority value means a higher priority.
    """

    pid: int
    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.burst < 0:
            raise ValueError(f"burst time must not be negative: {self.burst}")


@dataclass(frozen=True)
class ProcessResult:
    """When a scheduled process finished and how long it waited for the CPU."""

    process: Process
    completion: int
    response: int

    @property
    def turnaround(self) -> int:
        """Time from arrival to completion."""
        return self.completion - self.process.arrival

    @property
    def waiting(self) -> int:
        """Time spent ready but not running."""
        return self.turnaround - self.process.burst