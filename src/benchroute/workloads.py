"""Synthetic CPU, memory and I/O benchmark.

:func:`benchmark` runs five unrelated workloads back to back and reports
the wall-clock time they took together::

    report = benchmark(iterations=1000, file_lines=10)
    sys.stdout.write(report.format())

Each workload is a plain function. The runner wraps every call in a
:class:`WorkloadResult`; the first failed step ends the run, later steps
are not started, and the failure is carried on the returned report.
Nothing is retried and nothing is cleaned up after a failure, so a failed
read can leave the scratch file behind.
"""
import math
import os
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from benchroute.json_provider import JSONProvider

DEFAULT_ITERATIONS = 1000000
DEFAULT_FILE_LINES = 100000
SCRATCH_FILE = "benchmark_test.txt"
FILE_LINE = "Hello World\n"

#: Errors a workload can hit from its environment (disk, memory).
WORKLOAD_ERRORS = (OSError, MemoryError)


@dataclass(frozen=True)
class WorkloadResult:
    """Outcome of one workload step: a value on success, an error otherwise."""

    name: str
    value: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BenchmarkReport:
    start: float
    end: float
    results: List[WorkloadResult] = field(default_factory=list)

    @property
    def elapsed(self) -> float:
        return self.end - self.start

    @property
    def failure(self) -> Optional[WorkloadResult]:
        for result in self.results:
            if not result.ok:
                return result
        return None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def format(self) -> str:
        """Render the single output line, elapsed seconds unrounded."""
        return "Execution time: " + str(self.elapsed) + " seconds\n"


def arithmetic(iterations: int = DEFAULT_ITERATIONS) -> float:
    total = 0.0
    for i in range(iterations):
        total += math.sqrt(i)
    return total


def integer_sequence(iterations: int = DEFAULT_ITERATIONS) -> List[int]:
    """Every integer from 1 to ``iterations``, ascending, all in memory at once."""
    return list(range(1, iterations + 1))


def sequence_traversal(iterations: int = DEFAULT_ITERATIONS) -> int:
    """Sum ``1..iterations`` by walking a fully materialised list."""
    numbers = integer_sequence(iterations)
    total = 0
    for value in numbers:
        total += value
    return total


def string_growth(iterations: int = DEFAULT_ITERATIONS) -> int:
    """Grow a string one character per pass. Returns the final length."""
    buffer = ""
    for _ in range(iterations):
        buffer += "a"
    return len(buffer)


def sample_document() -> dict:
    return {"key": "value", "numbers": list(range(1, 101))}


def json_round_trip(iterations: int = DEFAULT_ITERATIONS,
                    json_provider: Optional[JSONProvider] = None) -> dict:
    """Encode and decode :func:`sample_document` ``iterations`` times.

    Returns the source document; decoded copies are discarded.
    """
    if json_provider is None:
        json_provider = JSONProvider()
    data = sample_document()
    dumps = json_provider.dumps
    loads = json_provider.loads
    for _ in range(iterations):
        loads(dumps(data))
    return data


def file_io(file_lines: int = DEFAULT_FILE_LINES,
            scratch_file: str = SCRATCH_FILE) -> int:
    """Write, read back and delete the scratch file. Returns bytes read."""
    with open(scratch_file, "w") as f:
        f.write(FILE_LINE * file_lines)
    with open(scratch_file) as f:
        contents = f.read()
    os.unlink(scratch_file)
    return len(contents)


def run_workload(name: str, func: Callable[..., Any], *args, **kwargs) -> WorkloadResult:
    try:
        value = func(*args, **kwargs)
    except WORKLOAD_ERRORS as exc:
        return WorkloadResult(name, error=exc)
    return WorkloadResult(name, value=value)


def benchmark(pdo=None, *, iterations: int = DEFAULT_ITERATIONS,
              file_lines: int = DEFAULT_FILE_LINES,
              scratch_file: str = SCRATCH_FILE,
              json_provider: Optional[JSONProvider] = None) -> BenchmarkReport:
    """Run every workload in order and time the whole sequence.

    ``pdo`` is a database handle that is accepted and ignored.
    """
    steps = [
        ("arithmetic", arithmetic, (iterations,), {}),
        ("sequence_traversal", sequence_traversal, (iterations,), {}),
        ("string_growth", string_growth, (iterations,), {}),
        ("json_round_trip", json_round_trip, (iterations,),
         {"json_provider": json_provider}),
        ("file_io", file_io, (file_lines, scratch_file), {}),
    ]
    results = []
    start = time.time()
    for name, func, args, kwargs in steps:
        result = run_workload(name, func, *args, **kwargs)
        results.append(result)
        if not result.ok:
            break
    end = time.time()
    return BenchmarkReport(start, end, results)
