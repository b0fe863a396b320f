"""Timing harness for merge benchmarks.

This module provides the benchmark execution framework that:
- Times one strategy call against a freshly built dataset
- Sums repeated runs, optionally scaled down and extrapolated
- Runs the benchmark groups in order and reports as it goes

Runs are strictly sequential on one thread, with no warm-up and no
trimming of outliers.
"""

import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .config import BenchConfig, BenchGroup
from .datasets import (
    TokenSource,
    create_mapping_dataset,
    create_persistent_mapping_dataset,
    create_sequence_dataset,
)
from .metrics import BenchmarkResult, total_duration
from .report import Reporter, save_results
from .strategies import DataKind, Strategy, get_strategy, run_sanity_checks


def _now_ms() -> int:
    return time.perf_counter_ns() // 1_000_000


def time_run(setup: Callable[[], Any], fn: Callable[[Any], Any]) -> int:
    """Time a single call of ``fn`` on the dataset returned by ``setup``.

    Setup is not timed. The result of ``fn`` is discarded.

    Returns:
        Elapsed whole milliseconds (>= 0)
    """
    data = setup()
    # Both ends are truncated to the millisecond, so runs shorter than 1ms
    # still add up to the right total on average.
    start = _now_ms()
    fn(data)
    return _now_ms() - start


def measure(
    setup: Callable[[], Any],
    fn: Callable[[Any], Any],
    count: int,
    scale_factor: int = 1,
) -> List[int]:
    """Time ``count // scale_factor`` runs and return each duration.

    Raises:
        ValueError: If ``scale_factor < 1`` or no run would happen
    """
    if scale_factor < 1:
        raise ValueError(f"scale_factor must be >= 1, got {scale_factor}")
    runs = count // scale_factor
    if runs < 1:
        raise ValueError(
            f"count ({count}) // scale_factor ({scale_factor}) is zero; nothing to time"
        )
    return [time_run(setup, fn) for _ in range(runs)]


def scaled_total(samples: List[int], scale_factor: int) -> int:
    """Sum per-run durations and extrapolate by ``scale_factor``."""
    return sum(samples) * scale_factor


def bench(
    setup: Callable[[], Any],
    fn: Callable[[Any], Any],
    count: int,
    scale_factor: int = 1,
) -> int:
    """Time a series of runs and return the scaled total in milliseconds.

    Runs ``count // scale_factor`` times and multiplies the summed duration
    by ``scale_factor``. Scaling keeps slow benchmarks short but multiplies
    their noise by the same factor, so scaled totals are rough estimates.
    """
    return scaled_total(measure(setup, fn, count, scale_factor), scale_factor)


class BenchmarkRunner:
    """Main benchmark execution engine.

    Runs the sanity checks, then each configured group in order. Mutating
    strategies get a fresh dataset for every run; pure strategies share one
    only when ``config.reuse_pure_datasets`` is set.
    """

    def __init__(
        self,
        config: BenchConfig,
        reporter: Optional[Reporter] = None,
        source: Optional[TokenSource] = None,
    ):
        """Initialize benchmark runner.

        Args:
            config: Benchmark configuration
            reporter: Console reporter (default: built from config)
            source: Token source for datasets (default: seeded from config)
        """
        self.config = config
        self.reporter = reporter or Reporter(color=config.color, verbose=config.verbose)
        self.source = source or TokenSource(seed=config.seed)
        self.results: List[BenchmarkResult] = []

        self._factories: Dict[DataKind, Callable[[], Any]] = {
            DataKind.MAPPING: lambda: create_mapping_dataset(self.config, self.source),
            DataKind.SEQUENCE: lambda: create_sequence_dataset(self.config, self.source),
            DataKind.PERSISTENT: lambda: create_persistent_mapping_dataset(
                self.config, self.source
            ),
        }

    def setup_for(self, strategy: Strategy) -> Callable[[], Any]:
        """Return the dataset factory used to time ``strategy``."""
        factory = self._factories[strategy.data]
        if strategy.is_mutating or not self.config.reuse_pure_datasets:
            return factory

        shared = factory()
        return lambda: shared

    def check(self) -> List[str]:
        """Run sanity checks on generators and all strategies.

        Raises:
            SanityCheckError: On the first failing check
        """
        passed = run_sanity_checks(source=self.source)
        self.reporter.info(f"sanity checks passed: {', '.join(passed)}")
        return passed

    def heading(self, text: str) -> None:
        self.reporter.heading(text)

    def run_strategy(
        self,
        label: str,
        strategy_name: str,
        group: str = "",
        scaled: bool = False,
    ) -> BenchmarkResult:
        """Benchmark one strategy and report it.

        Args:
            label: Name printed next to the duration
            strategy_name: Registered strategy to time
            group: Group the benchmark belongs to
            scaled: Apply ``config.scale_factor``

        Returns:
            The recorded BenchmarkResult
        """
        strategy = get_strategy(strategy_name)
        scale_factor = self.config.scale_factor if scaled else 1

        self.reporter.info(
            f"timing {strategy.name} ({strategy.kind.value}) "
            f"x{self.config.repeats // scale_factor}"
        )
        samples = measure(self.setup_for(strategy), strategy, self.config.repeats, scale_factor)

        result = BenchmarkResult(
            name=label,
            duration_ms=scaled_total(samples, scale_factor),
            group=group,
            strategy=strategy.name,
            runs=len(samples),
            scale_factor=scale_factor,
            samples_ms=tuple(samples),
        )
        self.results.append(result)

        self.reporter.report(result.name, result.duration_ms)
        if self.config.show_stats:
            self.reporter.spread(result, self.config.confidence_level)

        return result

    def run(self) -> List[BenchmarkResult]:
        """Check strategies, then run all configured groups.

        Returns:
            List of BenchmarkResult objects
        """
        self.check()

        for group in self.config.selected_groups():
            if group == BenchGroup.BASELINE:
                self._run_baseline_benchmarks()
            elif group == BenchGroup.MUTATIVE:
                self._run_mutative_benchmarks()
            elif group == BenchGroup.NON_MUTATIVE:
                self._run_non_mutative_benchmarks()

        self.reporter.info(f"total: {total_duration(self.results)}ms over {len(self.results)} benchmarks")
        return self.results

    def _run_baseline_benchmarks(self) -> None:
        """Run the no-op control and plain list concatenation."""
        from .benchmarks.baseline import BaselineBenchmark

        BaselineBenchmark(self).run_all()

    def _run_mutative_benchmarks(self) -> None:
        """Run in-place dict merges."""
        from .benchmarks.mutative import MutativeBenchmark

        MutativeBenchmark(self).run_all()

    def _run_non_mutative_benchmarks(self) -> None:
        """Run copying and persistent merges."""
        from .benchmarks.non_mutative import NonMutativeBenchmark

        NonMutativeBenchmark(self).run_all()

    def save_results(self, output_path: Path) -> Path:
        """Save results, including per-run samples, to a JSON file."""
        path = save_results(self.results, output_path, self.config, include_samples=True)
        self.reporter.info(f"results saved to: {path}")
        return path
