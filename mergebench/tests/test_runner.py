"""Tests for the timing harness and benchmark runner."""

import json
import time

import pytest

from ..config import BenchConfig, BenchGroup
from ..runner import BenchmarkRunner, bench, measure, scaled_total, time_run
from ..strategies import SanityCheckError, get_strategy


def _noop(data):
    return None


class TestTimeRun:
    """Tests for timing a single call."""

    def test_returns_non_negative_int(self):
        """Test that elapsed time is a non-negative int."""
        elapsed = time_run(lambda: {"a": 1}, _noop)
        assert isinstance(elapsed, int)
        assert elapsed >= 0

    def test_setup_is_not_timed(self):
        """Test that dataset setup is excluded from the timing."""
        def slow_setup():
            time.sleep(0.05)
            return {}

        assert time_run(slow_setup, _noop) < 50

    def test_function_is_timed(self):
        """Test that the timed call is measured."""
        elapsed = time_run(lambda: None, lambda data: time.sleep(0.02))
        assert elapsed >= 15

    def test_function_receives_setup_output(self):
        """Test that the timed call gets the setup result."""
        seen = []
        sentinel = object()
        time_run(lambda: sentinel, seen.append)
        assert seen == [sentinel]


class TestBench:
    """Tests for repeated, scaled timing."""

    def test_scaled_total(self):
        """Test summing samples and extrapolating by the scale factor."""
        assert scaled_total([1, 2], 3) == 9
        assert scaled_total([4], 1) == 4
        assert scaled_total([], 10) == 0

    def test_sum_is_scaled(self, fake_clock):
        """Test that the summed duration is multiplied back up."""
        # 10 // 2 = 5 runs of exactly 1ms, scaled by 2
        assert bench(lambda: None, _noop, 10, 2) == 10

    def test_unscaled(self, fake_clock):
        """Test the total without scaling."""
        assert bench(lambda: None, _noop, 7) == 7

    def test_run_count_truncates(self):
        """Test that the run count is floored."""
        calls = []
        measure(lambda: calls.append(1), _noop, 25, 10)
        assert len(calls) == 2

    def test_setup_called_once_per_run(self):
        """Test that every run gets its own setup call."""
        calls = []
        samples = measure(lambda: calls.append(1), _noop, 12, 3)
        assert len(calls) == 4
        assert len(samples) == 4

    def test_zero_runs_rejected(self):
        """Test that a scale factor leaving no runs is rejected."""
        with pytest.raises(ValueError):
            bench(lambda: None, _noop, 5, 10)

    def test_bad_scale_factor(self):
        """Test that a scale factor below one is rejected."""
        with pytest.raises(ValueError):
            bench(lambda: None, _noop, 5, 0)

    def test_real_clock_non_negative(self):
        """Test bench against the real clock."""
        assert bench(lambda: None, _noop, 100, 10) >= 0


class TestDatasetPolicy:
    """Tests for fresh-dataset handling per strategy kind."""

    def test_mutating_strategies_get_fresh_data(self, runner):
        """Test that mutating strategies get a new dataset per run."""
        setup = runner.setup_for(get_strategy("loop_mutation"))
        assert setup() is not setup()

    def test_mutating_ignores_reuse_flag(self, small_config, reporter, source):
        """Test that reuse never applies to mutating strategies."""
        small_config.reuse_pure_datasets = True
        runner = BenchmarkRunner(small_config, reporter=reporter, source=source)

        setup = runner.setup_for(get_strategy("update_mutation"))
        assert setup() is not setup()

    def test_pure_fresh_by_default(self, runner):
        """Test that pure strategies get fresh data by default."""
        setup = runner.setup_for(get_strategy("unpack_copy"))
        assert setup() is not setup()

    def test_pure_reuse_when_enabled(self, small_config, reporter, source):
        """Test that pure strategies share one dataset when reuse is on."""
        small_config.reuse_pure_datasets = True
        runner = BenchmarkRunner(small_config, reporter=reporter, source=source)

        setup = runner.setup_for(get_strategy("unpack_copy"))
        assert setup() is setup()

    def test_dataset_matches_strategy(self, runner):
        """Test that each strategy gets the dataset kind it consumes."""
        sequence_data = runner.setup_for(get_strategy("list_concat"))()
        assert isinstance(sequence_data.base, list)
        assert len(sequence_data.base) == runner.config.base_size


class TestBenchmarkRunner:
    """Tests for running the benchmark groups."""

    def test_run_all_groups(self, runner, capsys):
        """Test that every benchmark runs in order under its heading."""
        results = runner.run()

        names = [r.name for r in results]
        assert names == [
            "doing nothing",
            "list + (no uniq)",
            "list unpack (no uniq)",
            "for-loop mutation",
            "dict.update mutation",
            "unpack copying",
            "dict.update copying",
            "dict union copying",
            "list + and uniq",
            "immutables merge",
        ]
        assert all(r.duration_ms >= 0 for r in results)

        out = capsys.readouterr().out
        assert "Some irrelevant tests..." in out
        assert "mutative tests" in out
        assert "non-mutative tests" in out
        assert "doing nothing took" in out

    def test_scaling_applied_per_group(self, runner):
        """Test that only the slow benchmarks are scaled."""
        results = {r.name: r for r in runner.run()}

        assert results["doing nothing"].scale_factor == 1
        assert results["doing nothing"].runs == 20
        assert results["for-loop mutation"].runs == 20
        assert results["unpack copying"].scale_factor == 2
        assert results["unpack copying"].runs == 10

    def test_duration_is_scaled_sum(self, runner, fake_clock):
        """Test that the recorded duration is the scaled sum of samples."""
        result = runner.run_strategy("copy", "unpack_copy", scaled=True)

        assert result.runs == 10
        assert result.samples_ms == (1,) * 10
        assert result.duration_ms == 20

    def test_group_selection(self, small_config, reporter, source, capsys):
        """Test running a single group."""
        small_config.groups = [BenchGroup.MUTATIVE]
        runner = BenchmarkRunner(small_config, reporter=reporter, source=source)

        results = runner.run()

        assert {r.group for r in results} == {"mutative"}
        assert "non-mutative tests" not in capsys.readouterr().out

    def test_failed_check_runs_nothing(self, runner, monkeypatch, capsys):
        """Test that a failed sanity check stops the run before timing."""
        def fail(**kwargs):
            raise SanityCheckError("loop_mutation", {"a": 1, "b": 2}, {"a": 1})

        monkeypatch.setattr("mergebench.runner.run_sanity_checks", fail)

        with pytest.raises(SanityCheckError):
            runner.run()

        assert runner.results == []
        assert "took" not in capsys.readouterr().out

    def test_show_stats(self, small_config, reporter, source, capsys):
        """Test that per-run intervals are printed when enabled."""
        small_config.show_stats = True
        small_config.groups = [BenchGroup.BASELINE]
        BenchmarkRunner(small_config, reporter=reporter, source=source).run()

        assert "per run (ms):" in capsys.readouterr().out

    def test_save_results(self, runner, tmp_path):
        """Test saving results with config and samples."""
        small = BenchConfig(repeats=4, base_size=5, update_size=1, scale_factor=2,
                            groups=[BenchGroup.BASELINE], color=False)
        runner = BenchmarkRunner(small, reporter=runner.reporter, source=runner.source)
        runner.run()

        path = runner.save_results(tmp_path / "out" / "results.json")

        data = json.loads(path.read_text())
        assert data["config"]["repeats"] == 4
        assert data["config"]["groups"] == ["baseline"]
        assert [r["name"] for r in data["results"]] == [
            "doing nothing", "list + (no uniq)", "list unpack (no uniq)"
        ]
        assert len(data["results"][1]["samples_ms"]) == 2
