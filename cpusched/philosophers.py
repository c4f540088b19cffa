"""The dining philosophers, driven step by step."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from enum import Enum
from typing import TextIO


class PhilosopherState(Enum):
    """What a philosopher is doing."""

    THINKING = 0
    HUNGRY = 1
    EATING = 2


class DiningTable:
    """Philosophers around a table, each sharing a fork with either neighbour."""

    def __init__(self, size: int = 5) -> None:
        if size <= 0:
            raise ValueError(f"table size must be positive: {size}")
        self.size = size
        self._states = [PhilosopherState.THINKING] * size

    def state(self, philosopher: int) -> PhilosopherState:
        """The current state of one philosopher."""
        return self._states[self._check(philosopher)]

    def take_fork(self, philosopher: int) -> list[str]:
        """Make a philosopher hungry; they eat if neither neighbour is eating.

        Returns the events that followed, in order.
        """
        index = self._check(philosopher)
        self._states[index] = PhilosopherState.HUNGRY
        events = [f"Philosopher {index} is hungry."]
        events.extend(self._try_to_eat(index))
        return events

    def put_fork(self, philosopher: int) -> list[str]:
        """Make a philosopher think and let hungry neighbours eat.

        Returns the events that followed, in order.
        """
        index = self._check(philosopher)
        self._states[index] = PhilosopherState.THINKING
        events = [f"Philosopher {index} puts down forks and starts thinking."]
        events.extend(self._try_to_eat(self._left(index)))
        events.extend(self._try_to_eat(self._right(index)))
        return events

    def _left(self, index: int) -> int:
        return (index + self.size - 1) % self.size

    def _right(self, index: int) -> int:
        return (index + 1) % self.size

    def _try_to_eat(self, index: int) -> list[str]:
        eating = PhilosopherState.EATING
        if (
            self._states[index] is PhilosopherState.HUNGRY
            and self._states[self._left(index)] is not eating
            and self._states[self._right(index)] is not eating
        ):
            self._states[index] = eating
            return [f"Philosopher {index} starts eating."]
        return []

    def _check(self, philosopher: int) -> int:
        if not 0 <= philosopher < self.size:
            raise ValueError(f"invalid philosopher number: {philosopher}")
        return philosopher


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int | None:
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Read menu choices from standard input and report what happens."""
    parser = argparse.ArgumentParser(
        prog="dining-philosophers",
        description="Pick up and put down forks at a table of five philosophers.",
    )
    parser.parse_args(argv)
    table = DiningTable()
    tokens = _tokens(sys.stdin)
    while True:
        print("\n1. Pick up fork\n2. Put down fork\n3. Exit\nEnter choice: ", end="", flush=True)
        choice = _next_int(tokens)
        if choice is None or choice == 3:
            break
        print(f"Enter philosopher number (0 to {table.size - 1}): ", end="", flush=True)
        philosopher = _next_int(tokens)
        if philosopher is None:
            break
        if not 0 <= philosopher < table.size:
            print("Invalid philosopher number!")
            continue
        if choice == 1:
            events = table.take_fork(philosopher)
        elif choice == 2:
            events = table.put_fork(philosopher)
        else:
            print("Invalid choice!")
            continue
        for event in events:
            print(event)
    return 0