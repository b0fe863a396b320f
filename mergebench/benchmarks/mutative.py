"""Mutative benchmarks.

These strategies write the update straight into ``base``. Each timed run
gets a freshly generated dataset, otherwise later runs would merge into an
already merged dict.
"""

from typing import TYPE_CHECKING, List

from ..metrics import BenchmarkResult

if TYPE_CHECKING:
    from ..runner import BenchmarkRunner

GROUP = "mutative"
HEADING = "mutative tests"


def bench_loop_mutation(runner: "BenchmarkRunner") -> BenchmarkResult:
    """Benchmark: assign update keys into base one by one."""
    return runner.run_strategy("for-loop mutation", "loop_mutation", group=GROUP)


def bench_update_mutation(runner: "BenchmarkRunner") -> BenchmarkResult:
    """Benchmark: ``base.update(update)``."""
    return runner.run_strategy("dict.update mutation", "update_mutation", group=GROUP)


class MutativeBenchmark:
    """Runner for the mutative benchmarks."""

    def __init__(self, runner: "BenchmarkRunner"):
        self.runner = runner

    def run_all(self) -> List[BenchmarkResult]:
        self.runner.heading(HEADING)
        return [
            bench_loop_mutation(self.runner),
            bench_update_mutation(self.runner),
        ]
