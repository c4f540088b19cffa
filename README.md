# cpusched

Classic operating-system exercises as a small Python package:

- CPU scheduling algorithms that compute completion, turnaround, waiting
  and response times for a set of processes;
- a step-by-step model of the dining philosophers problem.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Scheduling algorithms

A process is a `cpusched.process.Process(pid, arrival, burst, priority=0)`,
a frozen dataclass. A negative burst time raises `ValueError`.

Each scheduler takes an iterable of processes and returns a list of
`cpusched.process.ProcessResult` objects. A result holds the `process`, its
`completion` time and its `response` time (time from arrival to first run);
the properties `turnaround` (completion minus arrival) and `waiting`
(turnaround minus burst) give the rest.

| Function | Module | Policy | Result order |
| --- | --- | --- | --- |
| `fcfs(processes)` | `cpusched.fcfs` | First come, first served; ties on arrival broken by id | order of running |
| `sjf(processes)` | `cpusched.sjf` | Shortest burst first, non-preemptive | input order |
| `srtf(processes)` | `cpusched.srtf` | Shortest remaining time first, preemptive, in steps of one time unit | input order |
| `priority(processes)` | `cpusched.priority` | Highest priority first, non-preemptive | input order |
| `priority_preemptive(processes)` | `cpusched.priority` | Highest priority first, preemptive, in steps of one time unit | input order |
| `round_robin(processes, quantum)` | `cpusched.round_robin` | Round robin with the given time quantum | by arrival, then id |

- For the priority schedulers a larger value means a higher priority.
- In `sjf`, `srtf`, `priority` and `priority_preemptive`, ties between equally
  ranked ready processes go to the earlier arrival, then to the earlier
  position in the input.
- When no process is ready, the clock jumps to the next arrival.
- `srtf` and `priority_preemptive` raise `ValueError` for a burst time that
  is not positive; `round_robin` raises `ValueError` for a quantum that is
  not positive.
- In `round_robin`, processes that arrive during a time slice join the
  queue ahead of the process that was just preempted.

```python
from cpusched.process import Process
from cpusched.fcfs import fcfs
from cpusched.report import format_table

results = fcfs([Process(1, 0, 5), Process(2, 1, 3)])
print(format_table(results), end="")
```

`cpusched.report.format_table(results, with_priority=False)` renders the
results as a tab-separated table: a header line, then one line per result
with the columns P.Id., A.T, B.T, (Pri. when `with_priority` is true), C.T,
T.A.T, W.T and R.T. The text ends with a newline.

## Command-line use

### Scheduling

```
cpusched ALGORITHM
```

`ALGORITHM` is one of `fcfs`, `sjf`, `srtf`, `priority`,
`priority-preemptive` or `round-robin`. The command prints prompts and reads
whitespace-separated integers from standard input:

1. the number of processes;
2. for `round-robin` only, the time quantum;
3. for each process, its id, arrival time and burst time, followed by its
   priority for `priority` and `priority-preemptive`.

It then prints the results table (with the Pri. column for the priority
algorithms). On missing or malformed input, or any invalid value, it prints
`error: ...` to standard error and exits with status 1.

```
printf '2\n1 0 5\n2 1 3\n' | cpusched sjf
```

### Dining philosophers

```
cpusched-philosophers
```

starts an interactive session at a table of five philosophers, numbered 0
to 4. Each step reads a menu choice (1 to pick up forks, 2 to put them down,
3 to exit) and a philosopher number, then prints who becomes hungry, who
starts eating and who goes back to thinking. An out-of-range philosopher
number or an unknown choice is reported and the menu is shown again. The
session ends on choice 3, at the end of input, or on input that is not an
integer.

From Python, `cpusched.philosophers.DiningTable(size=5)` holds the same
model. `take_fork(philosopher)` and `put_fork(philosopher)` change the table
and return the list of event messages that followed; `state(philosopher)`
returns a `cpusched.philosophers.PhilosopherState` (`THINKING`, `HUNGRY` or
`EATING`). A philosopher number outside the table, or a size that is not
positive, raises `ValueError`.

```python
from cpusched.philosophers import DiningTable, PhilosopherState

table = DiningTable()
table.take_fork(0)   # ['Philosopher 0 is hungry.', 'Philosopher 0 starts eating.']
table.take_fork(1)   # ['Philosopher 1 is hungry.']
table.put_fork(0)    # philosopher 1 now starts eating
assert table.state(1) is PhilosopherState.EATING
```

## What it does not do

The schedulers are simulations on integer time: they compute timings for a
given set of processes and do not run or control real processes or threads.
The dining philosophers model is a single-threaded state machine driven one
step at a time; it does not start concurrent philosophers.