"""
Tests for the benchmark sampling harness

Checks:
1. Zero budget: no workload call, every figure zero
2. Window/total deadlines with a scripted clock
3. Windows of zero measured duration add no sample
4. min <= avg <= max and overall throughput on the real clock
5. Report rendering
"""

import time

import pytest

from bench_harness import BenchmarkResult, HarnessStats, run_benchmark, stats


class ScriptedClock:
    """Clock that returns preset readings, then repeats the last one."""

    def __init__(self, readings) -> None:
        self.readings = list(readings)
        self.index = 0

    def __call__(self) -> float:
        value = self.readings[min(self.index, len(self.readings) - 1)]
        self.index += 1
        return value


class Counter:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


class TestStats:
    """Aggregation of the sample series"""

    def test_empty(self) -> None:
        assert stats([]) == (0.0, 0.0, 0.0)

    def test_single(self) -> None:
        assert stats([4.0]) == (4.0, 4.0, 4.0)

    def test_min_avg_max(self) -> None:
        assert stats([3.0, 1.0, 2.0]) == (1.0, 2.0, 3.0)


class TestZeroBudget:
    """total_seconds = 0"""

    def test_nothing_runs(self) -> None:
        workload = Counter()
        result = run_benchmark(workload, 0)
        assert workload.calls == 0
        assert result.iterations == 0
        assert result.minimum == result.average == result.maximum == 0.0
        assert result.overall == 0.0
        assert result.samples == ()

    def test_frozen_clock(self) -> None:
        """No elapsed time at all must not divide by zero"""
        result = run_benchmark(Counter(), 0, clock=ScriptedClock([5.0]))
        assert result.elapsed == 0.0
        assert result.overall == 0.0


class TestScriptedRun:
    """Deadline handling with a deterministic clock"""

    def test_windows_and_deadline(self, step_clock) -> None:
        # start=0, outer=1, window [2..6] runs 2 units, outer=7,
        # window [8..11] runs 1 unit and stops at the total deadline,
        # outer=12 exits, elapsed=13
        workload = Counter()
        result = run_benchmark(workload, 10, 3, clock=step_clock)
        assert workload.calls == 3
        assert result.iterations == 3
        assert result.samples == pytest.approx((2 / 4, 1 / 3))
        assert result.minimum == pytest.approx(1 / 3)
        assert result.maximum == pytest.approx(0.5)
        assert result.average == pytest.approx(5 / 12)
        assert result.elapsed == 13
        assert result.overall == pytest.approx(3 / 13)

    def test_work_per_unit_and_scale(self, step_clock) -> None:
        result = run_benchmark(
            Counter(), 10, 3, work_per_unit=1000.0, unit_scale=1e-3, clock=step_clock
        )
        assert result.samples == pytest.approx((0.5, 1 / 3))
        assert result.overall == pytest.approx(3 / 13)

    def test_zero_duration_window_adds_no_sample(self) -> None:
        # The window opens exactly when the total budget runs out
        clock = ScriptedClock([0.0, 0.5, 1.0, 1.0, 1.0, 1.0, 1.0])
        workload = Counter()
        result = run_benchmark(workload, 1.0, clock=clock)
        assert workload.calls == 0
        assert result.samples == ()
        assert result.minimum == result.average == result.maximum == 0.0
        assert result.overall == 0.0

    def test_total_deadline_cuts_window_short(self, step_clock) -> None:
        # A 100 s window, but the total budget stops it after 3 units
        workload = Counter()
        result = run_benchmark(workload, 6, 100, clock=step_clock)
        assert workload.calls == 3
        assert len(result.samples) == 1


class TestValidation:
    def test_negative_budget(self) -> None:
        with pytest.raises(ValueError, match="total_seconds"):
            run_benchmark(Counter(), -1)

    def test_non_positive_window(self) -> None:
        with pytest.raises(ValueError, match="sample_window_seconds"):
            run_benchmark(Counter(), 1, 0)


class TestRealClock:
    """Timing on time.perf_counter"""

    def test_sleep_workload(self) -> None:
        workload = Counter()

        def unit() -> None:
            workload()
            time.sleep(0.005)

        before = time.perf_counter()
        result = run_benchmark(unit, 0.3, 0.1)
        outside = time.perf_counter() - before

        assert workload.calls == result.iterations > 0
        assert result.samples
        assert result.minimum <= result.average <= result.maximum
        assert result.elapsed <= outside
        assert result.overall == pytest.approx(result.iterations / outside, rel=0.2)
        # One unit at most overruns the budget
        assert result.elapsed < 0.3 + 0.1


class TestBenchmarkResult:
    """Report rendering"""

    def test_report(self) -> None:
        stats_ = HarnessStats(
            iterations=7,
            minimum=1.0,
            average=2.5,
            maximum=4.25,
            overall=2.0,
            elapsed=3.5,
            samples=(1.0, 2.25, 4.25),
        )
        result = BenchmarkResult.from_stats("sieve", "Sieves/sec", stats_, [("Limit", 100)])
        assert result.report() == (
            "Iterations: 7\n"
            "Sieves/sec avg: 2.50\n"
            "Sieves/sec min: 1.00\n"
            "Sieves/sec max: 4.25\n"
            "Sieves/sec overall: 2.00\n"
            "Limit: 100"
        )
        assert result.details == (("Limit", "100"),)

    def test_frozen(self) -> None:
        result = BenchmarkResult("x", "u", 0, 0.0, 0.0, 0.0, 0.0)
        with pytest.raises(AttributeError):
            result.iterations = 1
