"""Configuration for merge benchmarks.

This module defines the configuration dataclass passed into the benchmark
runner. Dataset sizes, repeat counts and the scale factor live here rather
than in module globals.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class BenchGroup(Enum):
    """Groups of benchmarks, run in declaration order."""

    BASELINE = "baseline"
    MUTATIVE = "mutative"
    NON_MUTATIVE = "non_mutative"
    ALL = "all"


@dataclass
class BenchConfig:
    """Main configuration for benchmark execution.

    Example:
        >>> config = BenchConfig(repeats=1000, seed=42)
        >>> runner = BenchmarkRunner(config)
        >>> results = runner.run()
    """

    # Number of timed runs per benchmark (before scaling)
    repeats: int = 10000

    # Entries in the "base" collection
    base_size: int = 1000

    # Entries in the "update" collection
    update_size: int = 10

    # Expensive benchmarks run repeats // scale_factor times and multiply
    # the summed duration back up. Noise grows with the factor.
    scale_factor: int = 10

    # Seed for the token source (None = nondeterministic)
    seed: Optional[int] = None

    # Benchmark groups to run
    groups: List[BenchGroup] = field(default_factory=lambda: [BenchGroup.ALL])

    # Let pure strategies share one dataset across runs. Mutating
    # strategies always get a fresh dataset per run.
    reuse_pure_datasets: bool = False

    # Print per-run mean and confidence interval under each result
    show_stats: bool = False

    # Confidence level for --stats intervals
    confidence_level: float = 0.95

    # Styled console output
    color: bool = True

    # Progress output
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.repeats < 1:
            raise ValueError(f"repeats must be >= 1, got {self.repeats}")
        if self.base_size < 0:
            raise ValueError(f"base_size must be >= 0, got {self.base_size}")
        if self.update_size < 0:
            raise ValueError(f"update_size must be >= 0, got {self.update_size}")
        if self.scale_factor < 1:
            raise ValueError(f"scale_factor must be >= 1, got {self.scale_factor}")
        if self.repeats // self.scale_factor < 1:
            raise ValueError(
                f"repeats ({self.repeats}) must be at least scale_factor "
                f"({self.scale_factor}) or scaled benchmarks run zero times"
            )
        if not 0.0 < self.confidence_level < 1.0:
            raise ValueError(
                f"confidence_level must be between 0.0 and 1.0, got {self.confidence_level}"
            )

    def selected_groups(self) -> List[BenchGroup]:
        """Expand ALL into the concrete groups, keeping run order."""
        if BenchGroup.ALL in self.groups:
            return [BenchGroup.BASELINE, BenchGroup.MUTATIVE, BenchGroup.NON_MUTATIVE]
        return [g for g in BenchGroup if g in self.groups]


# Preset configurations for common use cases
def default_config() -> BenchConfig:
    """Configuration matching the original benchmark run."""
    return BenchConfig()


def quick_config() -> BenchConfig:
    """Configuration for quick validation runs."""
    return BenchConfig(repeats=100)
