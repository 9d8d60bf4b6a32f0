import math
import random
import statistics as stdlib_statistics

import pytest

from sortlab.statistics import (
    calc_average,
    calc_standard_deviation,
    calc_sum,
    calc_variance,
    run_tests,
)
from sortlab.utils import N, N_ALGS, Counter, Stats


@pytest.fixture(scope="module")
def measured():
    return run_tests(2, random.Random(7))


def _sample_counters():
    return [
        [Counter(1, 2), Counter(3, 4), Counter(8, 0)],
        [Counter(5, 5), Counter(5, 5), Counter(5, 5)],
    ]


def test_calc_sum_totals_each_algorithm():
    sums = calc_sum(_sample_counters())
    assert sums == [Counter(12, 6), Counter(15, 15)]


def test_calc_average_divides_by_runs():
    sums = [Counter(12, 6), Counter(15, 15)]
    averages = calc_average(sums, 3)
    assert averages[0] == Stats(4.0, 2.0)
    assert averages[1] == Stats(5.0, 5.0)


def test_calc_average_rejects_zero_runs():
    with pytest.raises(ValueError):
        calc_average([Counter(1, 1)], 0)


def test_calc_variance_matches_sample_variance():
    counters = _sample_counters()
    averages = calc_average(calc_sum(counters), 3)
    variances = calc_variance(averages, counters)
    first = counters[0]
    assert variances[0].comparisons == pytest.approx(
        stdlib_statistics.variance(c.comparisons for c in first)
    )
    assert variances[0].swaps == pytest.approx(
        stdlib_statistics.variance(c.swaps for c in first)
    )
    assert variances[1] == Stats(0.0, 0.0)


def test_calc_variance_needs_two_runs():
    with pytest.raises(ValueError):
        calc_variance([Stats(1.0, 1.0)], [[Counter(1, 1)]])


def test_calc_variance_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        calc_variance([Stats()], _sample_counters())


def test_standard_deviation_is_root_of_variance():
    counters = _sample_counters()
    averages = calc_average(calc_sum(counters), 3)
    deviations = calc_standard_deviation(calc_variance(averages, counters))
    assert deviations[0].comparisons == pytest.approx(
        stdlib_statistics.stdev(c.comparisons for c in counters[0])
    )
    assert deviations[1].swaps == 0.0


def test_standard_deviation_of_perfect_square():
    deviations = calc_standard_deviation([Stats(9.0, 16.0)])
    assert deviations == [Stats(math.sqrt(9.0), math.sqrt(16.0))]


def test_run_tests_shape(measured):
    assert len(measured) == N_ALGS
    assert all(len(runs) == 2 for runs in measured)


def test_run_tests_is_reproducible_with_seed(measured):
    again = run_tests(2, random.Random(7))
    assert again == measured


def test_run_tests_bounds(measured):
    bubble, linear, binary = measured[0], measured[7], measured[8]
    assert all(c.comparisons <= N * (N - 1) // 2 for c in bubble)
    assert all(c.swaps <= c.comparisons for c in bubble)
    assert all(c.comparisons <= N for c in linear)
    assert all(1 <= c.comparisons <= N.bit_length() for c in binary)


def test_run_tests_counts_work_for_every_sort(measured):
    for runs in measured[:7]:
        assert all(c.comparisons > 0 and c.swaps > 0 for c in runs)


def test_run_tests_zero_runs():
    assert run_tests(0, random.Random(1)) == [[] for _ in range(N_ALGS)]


def test_run_tests_rejects_negative():
    with pytest.raises(ValueError):
        run_tests(-1)