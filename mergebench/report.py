"""Console reporting and result files for merge benchmarks.

Results are printed one line per benchmark as they land, grouped under
headings. A run can also be saved as JSON and compared with another run.
"""

import json
from dataclasses import asdict
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from .config import BenchConfig
from .metrics import BenchmarkResult


class Reporter:
    """Writes labeled durations and headings to the console.

    Args:
        color: Style output with ANSI codes
        verbose: Print progress lines passed to ``info``
    """

    def __init__(self, color: bool = True, verbose: bool = False):
        self.color = color
        self.verbose = verbose

    def _style(self, text: str, **styles: Any) -> str:
        return click.style(text, **styles) if self.color else text

    def report(self, name: str, duration_ms: int) -> None:
        """Print one result line."""
        click.echo(
            f"{self._style(name, bold=True)} {self._style('took', fg='bright_black')} {duration_ms}ms"
        )

    def heading(self, text: str) -> None:
        """Print a blank line and a section heading."""
        click.echo()
        click.echo(self._style(text, fg="blue"))

    def spread(self, result: BenchmarkResult, confidence: float = 0.95) -> None:
        """Print the per-run mean and confidence interval for a result."""
        ci = result.spread(confidence)
        line = (
            f"  per run (ms): {ci} +/-{ci.margin_of_error():.4f} "
            f"({ci.n_samples} runs, x{result.scale_factor})"
        )
        click.echo(self._style(line, fg="bright_black"))

    def info(self, text: str) -> None:
        """Print a progress line when verbose."""
        if self.verbose:
            click.echo(self._style(text, dim=True))


def _to_native(val: Any) -> Any:
    """Convert enums and paths for JSON serialization."""
    if isinstance(val, Enum):
        return val.value
    if isinstance(val, Path):
        return str(val)
    if isinstance(val, dict):
        return {k: _to_native(v) for k, v in val.items()}
    if isinstance(val, (list, tuple)):
        return [_to_native(v) for v in val]
    return val


def config_to_dict(config: BenchConfig) -> Dict[str, Any]:
    return _to_native(asdict(config))


def generate_json_report(
    results: List[BenchmarkResult],
    config: Optional[BenchConfig] = None,
    include_samples: bool = False,
) -> Dict[str, Any]:
    """Generate JSON-serializable report.

    Args:
        results: List of benchmark results
        config: Configuration the results were produced with
        include_samples: Include per-run durations

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "metadata": {
            "generated_at": datetime.now().isoformat(),
            "num_benchmarks": len(results),
            "version": "1.0.0",
        },
        "config": config_to_dict(config) if config is not None else {},
        "results": [r.to_dict(include_samples=include_samples) for r in results],
    }


def save_results(
    results: List[BenchmarkResult],
    output_path: Path,
    config: Optional[BenchConfig] = None,
    include_samples: bool = False,
) -> Path:
    """Save results to a JSON file.

    Returns:
        Path to saved file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    report = generate_json_report(results, config, include_samples=include_samples)
    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)

    return output_path


def load_results(path: Path) -> List[BenchmarkResult]:
    """Load results saved with ``save_results``."""
    with open(path) as f:
        data = json.load(f)
    return [BenchmarkResult.from_dict(r) for r in data.get("results", [])]


def compare_reports(
    baseline_path: Path,
    current_path: Path,
) -> str:
    """Compare two saved benchmark runs.

    Args:
        baseline_path: Path to baseline results JSON
        current_path: Path to current results JSON

    Returns:
        Comparison summary string
    """
    baseline_path = Path(baseline_path)
    current_path = Path(current_path)
    baseline = {r.name: r for r in load_results(baseline_path)}
    current = {r.name: r for r in load_results(current_path)}

    lines = [
        "BENCHMARK COMPARISON",
        "=" * 60,
        "",
        f"Baseline: {baseline_path.name}",
        f"Current: {current_path.name}",
        "",
    ]

    for name, base in baseline.items():
        if name not in current:
            lines.append(f"  {name}: missing from current")
            continue

        curr = current[name]
        change = curr.duration_ms - base.duration_ms
        pct_change = (change / base.duration_ms * 100) if base.duration_ms != 0 else 0

        indicator = ""
        if abs(pct_change) > 5:
            indicator = " !!!" if pct_change > 0 else " ***"

        lines.append(
            f"  {name}: {base.duration_ms}ms -> {curr.duration_ms}ms ({pct_change:+.1f}%){indicator}"
        )

    for name in current:
        if name not in baseline:
            lines.append(f"  {name}: new in current")

    lines.append("")
    lines.append("=" * 60)

    return "\n".join(lines)
