"""Tab-separated result tables."""

from __future__ import annotations

from collections.abc import Iterable

from cpusched.process import ProcessResult

_HEADER = "P.Id. \t A.T\t B.T\t C.T\t T.A.T\t W.T\t R.T"
_HEADER_WITH_PRIORITY = "P.Id. \t A.T\t B.T\tPri.\t C.T\t T.A.T\t W.T\t R.T"


def format_table(results: Iterable[ProcessResult], with_priority: bool = False) -> str:
    """Render results as a header line and one tab-separated line per process."""
    lines = [_HEADER_WITH_PRIORITY if with_priority else _HEADER]
    for result in results:
        process = result.process
        fields = [process.pid, process.arrival, process.burst]
        if with_priority:
            fields.append(process.priority)
        fields += [result.completion, result.turnaround, result.waiting, result.response]
        lines.append("\t".join(str(field) for field in fields))
    return "\n".join(lines) + "\n"