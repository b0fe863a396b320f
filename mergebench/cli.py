"""Command-line interface for merge benchmarks.

Usage:
    mergebench
    mergebench run --quick --stats
    mergebench run --group mutative --seed 42 --output results.json
    mergebench check
    mergebench compare baseline.json current.json
"""

import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import BenchConfig, BenchGroup
from .strategies import STRATEGIES, SanityCheckError


def main():
    """Main entry point."""
    cli()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context):
    """Merge strategy micro-benchmarks.

    Times mutating, copying and persistent ways of merging two dicts (and
    two lists). With no command, runs every benchmark with defaults.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
@click.option("--repeats", "-r", type=int, default=None, help="Timed runs per benchmark (default: 10000)")
@click.option("--base-size", type=int, default=1000, help="Entries in the base collection")
@click.option("--update-size", type=int, default=10, help="Entries in the update collection")
@click.option(
    "--scale-factor",
    type=int,
    default=10,
    help="Run slow benchmarks repeats/N times and multiply the total by N",
)
@click.option("--seed", "-s", type=int, default=None, help="Random seed for generated data")
@click.option(
    "--group",
    "-g",
    type=click.Choice([g.value for g in BenchGroup if g != BenchGroup.ALL]),
    multiple=True,
    help="Benchmark group to run (repeatable; default: all)",
)
@click.option("--quick", is_flag=True, help="Quick mode (100 repeats)")
@click.option("--reuse-pure", is_flag=True, help="Share one dataset across runs of pure strategies")
@click.option("--stats", is_flag=True, help="Show per-run mean and confidence interval")
@click.option("--no-color", is_flag=True, help="Plain output")
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None, help="Save results as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def run(
    repeats: Optional[int],
    base_size: int,
    update_size: int,
    scale_factor: int,
    seed: Optional[int],
    group: tuple,
    quick: bool,
    reuse_pure: bool,
    stats: bool,
    no_color: bool,
    output: Optional[Path],
    verbose: bool,
):
    """Run benchmarks."""
    from .runner import BenchmarkRunner

    if repeats is None:
        repeats = 100 if quick else 10000

    try:
        config = BenchConfig(
            repeats=repeats,
            base_size=base_size,
            update_size=update_size,
            scale_factor=scale_factor,
            seed=seed,
            groups=[BenchGroup(g) for g in group] or [BenchGroup.ALL],
            reuse_pure_datasets=reuse_pure,
            show_stats=stats,
            color=not no_color,
            verbose=verbose,
        )
    except ValueError as e:
        raise click.UsageError(str(e))

    runner = BenchmarkRunner(config)
    try:
        runner.run()
    except SanityCheckError as e:
        click.echo(f"Sanity check failed: {e}", err=True)
        sys.exit(1)

    if output:
        saved_path = runner.save_results(output)
        click.echo(f"\nResults saved to: {saved_path}")


@cli.command()
@click.option("--seed", "-s", type=int, default=None, help="Random seed for generator checks")
def check(seed: Optional[int]):
    """Run the strategy sanity checks only."""
    from .datasets import TokenSource
    from .strategies import run_sanity_checks

    try:
        passed = run_sanity_checks(source=TokenSource(seed=seed))
    except SanityCheckError as e:
        click.echo(f"Sanity check failed: {e}", err=True)
        sys.exit(1)

    for name in passed:
        click.echo(f"  ok  {name}")
    click.echo(f"{len(passed)} checks passed")


@cli.command("list-strategies")
def list_strategies():
    """List available merge strategies."""
    click.echo("Available strategies:")
    for name, strategy in STRATEGIES.items():
        click.echo(f"  {name:<20} {strategy.kind.value:<9} {strategy.data.value:<11} {strategy.description}")


@cli.command()
@click.argument("baseline", type=click.Path(exists=True, path_type=Path))
@click.argument("current", type=click.Path(exists=True, path_type=Path))
def compare(baseline: Path, current: Path):
    """Compare two benchmark result files."""
    from .report import compare_reports

    click.echo(compare_reports(baseline, current))


if __name__ == "__main__":
    main()
