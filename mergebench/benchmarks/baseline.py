"""Baseline benchmarks.

A no-op sets the timing floor. Plain list concatenation has nothing to do
with merging dicts but gives a sense of scale for a copy of ``base_size``
elements.
"""

from typing import TYPE_CHECKING, List

from ..metrics import BenchmarkResult

if TYPE_CHECKING:
    from ..runner import BenchmarkRunner

GROUP = "baseline"
HEADING = "Some irrelevant tests..."


def bench_nothing(runner: "BenchmarkRunner") -> BenchmarkResult:
    """Benchmark: how long does timing nothing take?"""
    return runner.run_strategy("doing nothing", "nothing", group=GROUP)


def bench_list_concat(runner: "BenchmarkRunner") -> BenchmarkResult:
    return runner.run_strategy("list + (no uniq)", "list_concat", group=GROUP, scaled=True)


def bench_list_unpack(runner: "BenchmarkRunner") -> BenchmarkResult:
    return runner.run_strategy("list unpack (no uniq)", "list_unpack", group=GROUP, scaled=True)


class BaselineBenchmark:
    """Runner for the baseline benchmarks."""

    def __init__(self, runner: "BenchmarkRunner"):
        self.runner = runner

    def run_all(self) -> List[BenchmarkResult]:
        self.runner.heading(HEADING)
        return [
            bench_nothing(self.runner),
            bench_list_concat(self.runner),
            bench_list_unpack(self.runner),
        ]
