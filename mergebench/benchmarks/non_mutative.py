"""Non-mutative benchmarks.

Key Questions Answered:
- What does copying a 1000-entry dict to apply a small update cost?
- Does the choice of copy syntax matter?
- Is a persistent map cheaper than a full copy?

Copies are slow enough that these run ``repeats // scale_factor`` times and
the total is multiplied back up. Treat the totals as estimates.
"""

from typing import TYPE_CHECKING, List

from ..metrics import BenchmarkResult

if TYPE_CHECKING:
    from ..runner import BenchmarkRunner

GROUP = "non_mutative"
HEADING = "non-mutative tests"


def bench_unpack_copy(runner: "BenchmarkRunner") -> BenchmarkResult:
    return runner.run_strategy("unpack copying", "unpack_copy", group=GROUP, scaled=True)


def bench_dict_update_copy(runner: "BenchmarkRunner") -> BenchmarkResult:
    return runner.run_strategy(
        "dict.update copying", "dict_update_copy", group=GROUP, scaled=True
    )


def bench_dict_union_copy(runner: "BenchmarkRunner") -> BenchmarkResult:
    return runner.run_strategy("dict union copying", "dict_union_copy", group=GROUP, scaled=True)


def bench_list_concat_unique(runner: "BenchmarkRunner") -> BenchmarkResult:
    return runner.run_strategy(
        "list + and uniq", "list_concat_unique", group=GROUP, scaled=True
    )


def bench_persistent_merge(runner: "BenchmarkRunner") -> BenchmarkResult:
    """Benchmark: merge two persistent maps without copying base."""
    return runner.run_strategy("immutables merge", "persistent_merge", group=GROUP, scaled=True)


class NonMutativeBenchmark:
    """Runner for the non-mutative benchmarks."""

    def __init__(self, runner: "BenchmarkRunner"):
        self.runner = runner

    def run_all(self) -> List[BenchmarkResult]:
        self.runner.heading(HEADING)
        return [
            bench_unpack_copy(self.runner),
            bench_dict_update_copy(self.runner),
            bench_dict_union_copy(self.runner),
            bench_list_concat_unique(self.runner),
            bench_persistent_merge(self.runner),
        ]
