"""Sorting and searching algorithms that count comparisons and swaps."""

from __future__ import annotations

import math
import random
from typing import Callable, MutableSequence, Optional, Sequence

from sortlab.utils import Counter, median_of_three

Partition = Callable[[MutableSequence[int], int, int], int]


def generic_sort(v: MutableSequence[int]) -> None:
    """Sort ``v`` in place without counting anything."""
    v[:] = sorted(v)


def bubble_sort(v: MutableSequence[int], counter: Counter) -> None:
    """Bubble sort with early exit when a pass makes no swap."""
    n = len(v)
    for i in range(1, n):
        swapped = False
        for j in range(n - i):
            counter.comparisons += 1
            if v[j] > v[j + 1]:
                v[j], v[j + 1] = v[j + 1], v[j]
                swapped = True
                counter.swaps += 1
        if not swapped:
            break


def shell_sort(v: MutableSequence[int], gap: int, counter: Counter) -> None:
    """One gapped insertion-sort pass over ``v``."""
    if gap < 0:
        raise ValueError("gap must not be negative")
    for i in range(gap, len(v)):
        aux = v[i]
        j = i
        counter.comparisons += 1
        while j >= gap and v[j - gap] > aux:
            v[j] = v[j - gap]
            counter.swaps += 1
            j -= gap
            counter.comparisons += 1
        v[j] = aux
        counter.swaps += 1


def shell_original(v: MutableSequence[int], counter: Counter) -> None:
    """Shell sort with gaps floor(n / 2^k), ending with a gap of zero."""
    n = len(v)
    step = 1
    while True:
        gap = n >> step
        shell_sort(v, gap, counter)
        step += 1
        if gap == 0:
            break


def _sedgewick_gap(step: int) -> int:
    return int(math.pow(4, step) + 3 * math.pow(2, step - 1) + 1)


def sedgewick_exponents(v: MutableSequence[int], counter: Counter) -> None:
    """Shell sort with gaps 4^k + 3 * 2^(k-1) + 1, in decreasing order."""
    n = len(v)
    gap = 1
    step = 1
    while gap <= n:
        gap = _sedgewick_gap(step)
        step += 1
    step -= 2
    while True:
        gap = _sedgewick_gap(step)
        shell_sort(v, gap, counter)
        step -= 1
        if gap == 1:
            break


def knuth_sequence(v: MutableSequence[int], counter: Counter) -> None:
    """Shell sort with Knuth's gaps 3k + 1, in decreasing order."""
    n = len(v)
    gap = 1
    while True:
        gap = gap * 3 + 1
        if gap > n:
            break
    while True:
        gap //= 3
        shell_sort(v, gap, counter)
        if gap == 1:
            break


def _partition_around_low(
    arr: MutableSequence[int], low: int, high: int, counter: Counter
) -> int:
    pivot = arr[low]
    i = low
    for j in range(low + 1, high + 1):
        counter.comparisons += 1
        if arr[j] < pivot:
            i += 1
            counter.swaps += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[low], arr[i] = arr[i], arr[low]
    counter.swaps += 1
    return i


def partition_first_element(
    arr: MutableSequence[int], low: int, high: int, counter: Counter
) -> int:
    """Partition ``arr[low:high + 1]`` around its first element."""
    return _partition_around_low(arr, low, high, counter)


def partition_rand(
    arr: MutableSequence[int],
    low: int,
    high: int,
    counter: Counter,
    rng: Optional[random.Random] = None,
) -> int:
    """Partition ``arr[low:high + 1]`` around a randomly chosen element."""
    source = random if rng is None else rng
    chosen = source.randrange(low, high + 1)
    arr[low], arr[chosen] = arr[chosen], arr[low]
    return _partition_around_low(arr, low, high, counter)


def partition_median(
    arr: MutableSequence[int],
    low: int,
    high: int,
    counter: Counter,
    rng: Optional[random.Random] = None,
) -> int:
    """Partition around the median of three randomly chosen elements."""
    source = random if rng is None else rng
    first, second, third = (source.randrange(low, high + 1) for _ in range(3))
    median = median_of_three(arr, first, second, third)
    counter.swaps += 1
    counter.comparisons += 1
    arr[low], arr[median] = arr[median], arr[low]
    return _partition_around_low(arr, low, high, counter)


def _quicksort(v: MutableSequence[int], low: int, high: int, partition: Partition) -> None:
    # Explicit stack, left part handled before right, as in the recursive form.
    pending = [(low, high)]
    while pending:
        lo, hi = pending.pop()
        if lo < hi:
            pivot = partition(v, lo, hi)
            pending.append((pivot + 1, hi))
            pending.append((lo, pivot - 1))


def first_element_qs(v: MutableSequence[int], low: int, high: int, counter: Counter) -> None:
    """Quicksort of ``v[low:high + 1]`` using the first element as pivot."""
    _quicksort(v, low, high, lambda a, lo, hi: partition_first_element(a, lo, hi, counter))


def random_element_qs(
    v: MutableSequence[int],
    low: int,
    high: int,
    counter: Counter,
    rng: Optional[random.Random] = None,
) -> None:
    """Quicksort of ``v[low:high + 1]`` using a random pivot."""
    _quicksort(v, low, high, lambda a, lo, hi: partition_rand(a, lo, hi, counter, rng))


def median_element_qs(
    v: MutableSequence[int],
    low: int,
    high: int,
    counter: Counter,
    rng: Optional[random.Random] = None,
) -> None:
    """Quicksort of ``v[low:high + 1]`` using a median-of-three random pivot."""
    _quicksort(v, low, high, lambda a, lo, hi: partition_median(a, lo, hi, counter, rng))


def linear_search(v: Sequence[int], key: int, counter: Counter) -> Optional[int]:
    """Search from the end; return the last index holding ``key`` or ``None``.

    Each element passed over counts as one comparison.
    """
    for index in range(len(v) - 1, -1, -1):
        if v[index] == key:
            return index
        counter.comparisons += 1
    return None


def binary_search(
    v: Sequence[int], key: int, left: int, right: int, counter: Counter
) -> Optional[int]:
    """Binary search in sorted ``v[left:right + 1]``; return an index or ``None``."""
    while left <= right:
        middle = (left + right) // 2
        counter.comparisons += 1
        if key < v[middle]:
            right = middle - 1
        elif key > v[middle]:
            left = middle + 1
        else:
            return middle
    return None