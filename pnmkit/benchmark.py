"""Runs the image processors over a matrix of inputs and records timings as CSV."""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, List, Optional, Sequence, Union

from .timer import Timer

IMAGES = ("imagenes/fruit.ppm", "imagenes/lena.ppm")
FILTERS = ("blur", "sharpen", "laplace")
THREAD_COUNTS = (1, 2, 4, 8)
RESULTS_FILE = "performance_results.csv"
CSV_HEADER = "Implementation,Image,Filter,Threads/Processes,Total Time (ms)"


@dataclass
class TestResult:
    """Timing of one processor run."""

    __test__ = False

    implementation: str
    image: str
    filter: str
    threads_or_processes: int
    load_time: float = 0.0
    process_time: float = 0.0
    save_time: float = 0.0
    total_time: float = 0.0


def build_command(implementation: str, image: str, filter_name: str, count: int) -> str:
    """Shell command for one run; empty for an unknown implementation."""
    output = f"output_{implementation}.ppm"
    if implementation == "sequential":
        return f"./processor {image} {output} --f {filter_name}"
    if implementation in ("pthread", "omp"):
        return (
            f"./processor_{implementation} {image} {output} --f {filter_name} "
            f"--t {count}"
        )
    if implementation == "mpi":
        return f"mpirun -np {count} ./processor_mpi {image} {output} --f {filter_name}"
    return ""


def run_test(implementation: str, image: str, filter_name: str, count: int) -> TestResult:
    """Run one processor through the shell and time the whole invocation."""
    timer = Timer()
    timer.start()
    command = build_command(implementation, image, filter_name, count)
    print(f"\nExecuting: {command}")
    if command:
        subprocess.run(command, shell=True, check=False)
    timer.stop()
    return TestResult(
        implementation=implementation,
        image=image,
        filter=filter_name,
        threads_or_processes=count,
        total_time=timer.elapsed_milliseconds(),
    )


def save_results(
    results: Iterable[TestResult], path: Union[str, "PathLike[str]"]
) -> None:
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(CSV_HEADER + "\n")
        for result in results:
            handle.write(
                f"{result.implementation},{result.image},{result.filter},"
                f"{result.threads_or_processes},{format(result.total_time, 'g')}\n"
            )


def _runs():
    for image in IMAGES:
        for filter_name in FILTERS:
            yield "sequential", image, filter_name, 1
    for implementation in ("pthread", "omp", "mpi"):
        for image in IMAGES:
            for filter_name in FILTERS:
                for count in THREAD_COUNTS:
                    yield implementation, image, filter_name, count


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run every combination and write the results file; arguments are ignored."""
    print("=== Performance Comparison ===")
    results: List[TestResult] = [run_test(*run) for run in _runs()]
    save_results(results, RESULTS_FILE)
    print(f"\nResults have been saved to {RESULTS_FILE}")
    return 0


if __name__ == "__main__":
    sys.exit(main())