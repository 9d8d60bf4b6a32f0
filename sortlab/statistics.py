"""Repeated measurement of the algorithms and statistics over the counts."""

from __future__ import annotations

import math
import random
from typing import Callable, MutableSequence, Optional, Sequence

from sortlab.algorithms import (
    binary_search,
    bubble_sort,
    first_element_qs,
    knuth_sequence,
    linear_search,
    median_element_qs,
    random_element_qs,
    sedgewick_exponents,
    shell_original,
)
from sortlab.utils import N_ALGS, N_TESTS, Counter, Stats, generate_data, random_value

Sorter = Callable[[MutableSequence[int], Counter], None]


def calc_sum(counters: Sequence[Sequence[Counter]]) -> list[Counter]:
    """Total the counts of every algorithm over all of its runs."""
    return [
        Counter(
            comparisons=sum(run.comparisons for run in runs),
            swaps=sum(run.swaps for run in runs),
        )
        for runs in counters
    ]


def calc_average(sums: Sequence[Counter], n_tests: int) -> list[Stats]:
    """Divide each total by the number of runs."""
    if n_tests <= 0:
        raise ValueError("n_tests must be positive")
    return [
        Stats(comparisons=total.comparisons / n_tests, swaps=total.swaps / n_tests)
        for total in sums
    ]


def calc_variance(
    averages: Sequence[Stats], counters: Sequence[Sequence[Counter]]
) -> list[Stats]:
    """Sample variance (divided by n - 1) of each algorithm's counts."""
    if len(averages) != len(counters):
        raise ValueError("averages and counters must describe the same algorithms")
    variances = []
    for average, runs in zip(averages, counters):
        if len(runs) < 2:
            raise ValueError("variance needs at least two runs")
        comparisons = sum((run.comparisons - average.comparisons) ** 2 for run in runs)
        swaps = sum((run.swaps - average.swaps) ** 2 for run in runs)
        variances.append(
            Stats(comparisons=comparisons / (len(runs) - 1), swaps=swaps / (len(runs) - 1))
        )
    return variances


def calc_standard_deviation(variances: Sequence[Stats]) -> list[Stats]:
    """Square root of each variance."""
    return [
        Stats(comparisons=math.sqrt(v.comparisons), swaps=math.sqrt(v.swaps))
        for v in variances
    ]


def _sorters(rng: Optional[random.Random]) -> tuple[Sorter, ...]:
    return (
        bubble_sort,
        lambda w, c: first_element_qs(w, 0, len(w) - 1, c),
        lambda w, c: random_element_qs(w, 0, len(w) - 1, c, rng),
        lambda w, c: median_element_qs(w, 0, len(w) - 1, c, rng),
        shell_original,
        sedgewick_exponents,
        knuth_sequence,
    )


def run_tests(
    n_tests: int = N_TESTS, rng: Optional[random.Random] = None
) -> list[list[Counter]]:
    """Run every algorithm ``n_tests`` times on fresh random data.

    Returns one list of counters per algorithm, in the order: bubble sort,
    the three quicksorts, the three shell sorts, linear and binary search.
    """
    if n_tests < 0:
        raise ValueError("n_tests must not be negative")
    results: list[list[Counter]] = [[] for _ in range(N_ALGS)]
    sorters = _sorters(rng)
    for _ in range(n_tests):
        data = generate_data(rng)
        runs = [Counter() for _ in range(N_ALGS)]
        work: list[int] = []
        for sorter, counter in zip(sorters, runs):
            work = list(data)
            sorter(work, counter)
        key = random_value(rng)
        linear_search(data, key, runs[7])
        binary_search(work, key, 0, len(work) - 1, runs[8])
        for row, counter in zip(results, runs):
            row.append(counter)
    return results