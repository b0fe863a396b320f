"""Pytest fixtures for mergebench tests."""

from typing import List

import pytest

from ..config import BenchConfig
from ..datasets import TokenSource
from ..report import Reporter
from ..runner import BenchmarkRunner


@pytest.fixture
def source() -> TokenSource:
    """Deterministic token source."""
    return TokenSource(seed=42)


@pytest.fixture
def small_config() -> BenchConfig:
    """Config small enough to run every group in well under a second."""
    return BenchConfig(
        repeats=20,
        base_size=50,
        update_size=5,
        scale_factor=2,
        seed=42,
        color=False,
    )


@pytest.fixture
def reporter() -> Reporter:
    return Reporter(color=False)


@pytest.fixture
def runner(small_config, reporter, source) -> BenchmarkRunner:
    return BenchmarkRunner(small_config, reporter=reporter, source=source)


@pytest.fixture
def fake_clock(monkeypatch) -> List[int]:
    """Replace the harness clock with one that advances 1ms per read.

    Every timed run then takes exactly 1ms. Returns the list of readings.
    """
    readings: List[int] = []

    def now_ms() -> int:
        readings.append(len(readings))
        return readings[-1]

    monkeypatch.setattr("mergebench.runner._now_ms", now_ms)
    return readings
