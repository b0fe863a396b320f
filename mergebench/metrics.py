"""Result records and per-run statistics for merge benchmarks.

The headline number of a benchmark is the scaled sum of its run durations.
The per-run spread computed here is supplementary: it shows how noisy a
total is, especially when ``scale_factor`` multiplies a short sample.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np
from scipy import stats


@dataclass
class ConfidenceInterval:
    """Confidence interval with point estimate."""

    mean: float
    lower: float
    upper: float
    std: float
    confidence_level: float = 0.95
    n_samples: int = 0

    def __str__(self) -> str:
        return f"{self.mean:.4f} [{self.lower:.4f}, {self.upper:.4f}]"

    def contains(self, value: float) -> bool:
        """Check if value is within the confidence interval."""
        return self.lower <= value <= self.upper

    def margin_of_error(self) -> float:
        """Calculate margin of error."""
        return (self.upper - self.lower) / 2


def compute_confidence_interval(
    values: Sequence[float],
    confidence: float = 0.95,
) -> ConfidenceInterval:
    """Compute confidence interval for a list of values.

    Uses the t-distribution.

    Args:
        values: List of measurements
        confidence: Confidence level (default 0.95 for 95% CI)

    Returns:
        ConfidenceInterval with mean and bounds
    """
    if len(values) == 0:
        return ConfidenceInterval(
            mean=0.0, lower=0.0, upper=0.0, std=0.0,
            confidence_level=confidence, n_samples=0
        )

    if len(values) == 1:
        v = float(values[0])
        return ConfidenceInterval(
            mean=v, lower=v, upper=v, std=0.0,
            confidence_level=confidence, n_samples=1
        )

    arr = np.asarray(values, dtype=float)
    n = len(arr)
    mean = np.mean(arr)
    std = np.std(arr, ddof=1)  # Sample std
    se = std / math.sqrt(n)

    alpha = 1 - confidence
    t_crit = stats.t.ppf(1 - alpha / 2, df=n - 1)

    margin = t_crit * se
    return ConfidenceInterval(
        mean=float(mean),
        lower=float(mean - margin),
        upper=float(mean + margin),
        std=float(std),
        confidence_level=confidence,
        n_samples=n,
    )


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of one benchmark invocation."""

    # Label shown by the reporter
    name: str

    # Scaled total in milliseconds
    duration_ms: int

    # Identification
    group: str = ""
    strategy: str = ""

    # Timed runs actually executed and the multiplier applied to their sum
    runs: int = 0
    scale_factor: int = 1

    # Per-run durations in milliseconds, unscaled
    samples_ms: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def mean_run_ms(self) -> float:
        """Mean duration of a single run."""
        if not self.samples_ms:
            return 0.0
        return float(np.mean(self.samples_ms))

    def spread(self, confidence: float = 0.95) -> ConfidenceInterval:
        """Confidence interval of a single run's duration."""
        return compute_confidence_interval(self.samples_ms, confidence)

    def to_dict(self, include_samples: bool = False) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        d: Dict[str, Any] = {
            "name": self.name,
            "duration_ms": self.duration_ms,
            "group": self.group,
            "strategy": self.strategy,
            "runs": self.runs,
            "scale_factor": self.scale_factor,
            "mean_run_ms": self.mean_run_ms,
        }
        if include_samples:
            d["samples_ms"] = list(self.samples_ms)
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "BenchmarkResult":
        """Rebuild a result saved with ``to_dict``."""
        return cls(
            name=d["name"],
            duration_ms=int(d["duration_ms"]),
            group=d.get("group", ""),
            strategy=d.get("strategy", ""),
            runs=int(d.get("runs", 0)),
            scale_factor=int(d.get("scale_factor", 1)),
            samples_ms=tuple(d.get("samples_ms", ())),
        )


def total_duration(results: List[BenchmarkResult]) -> int:
    """Sum of scaled durations across results."""
    return sum(r.duration_ms for r in results)
