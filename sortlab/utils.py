"""Shared data types, random data generation and text formatting helpers."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence

N = 1024
"""Default size of the arrays the algorithms are measured on."""

N_ALGS = 9
"""Number of algorithms compared in the repeated test."""

N_TESTS = 1000
"""Number of repetitions in the repeated test."""

MAX_VALUE = 2047
"""Largest value produced by :func:`random_value`."""


@dataclass
class Counter:
    """Comparisons and swaps performed by one run of an algorithm."""

    comparisons: int = 0
    swaps: int = 0

    def reset(self) -> None:
        """Set both counts back to zero."""
        self.comparisons = 0
        self.swaps = 0


@dataclass
class Stats:
    """Floating-point statistics over comparisons and swaps."""

    comparisons: float = 0.0
    swaps: float = 0.0


def random_value(rng: Optional[random.Random] = None) -> int:
    """Return a random integer between 1 and 2047 inclusive."""
    source = random if rng is None else rng
    return source.randint(1, MAX_VALUE)


def generate_data(rng: Optional[random.Random] = None) -> list[int]:
    """Return a list of ``N`` random values."""
    return [random_value(rng) for _ in range(N)]


def format_counter(counter: Counter) -> str:
    """Render the swap and comparison counts of ``counter``."""
    return (
        f"NUMERO DE TROCAS: {counter.swaps}\n"
        f"NUMERO DE COMPARAÇÕES: {counter.comparisons}\n"
    )


def format_array(v: Sequence[int]) -> str:
    """Render every element of ``v``."""
    return "[ " + ", ".join(str(x) for x in v) + " ]\n\n"


def _rows_of_three(values: Sequence[int]) -> list[list[int]]:
    return [list(values[start:start + 3]) for start in range(0, len(values), 3)]


def format_half_array(v: Sequence[int]) -> str:
    """Render the first nine and the last nine elements of ``v``."""
    if not v:
        raise ValueError("cannot format an empty array")
    head = "".join(
        f"{x}, " + ("\n  " if position % 3 == 2 else "")
        for position, x in enumerate(v[:9])
    )
    tail = ", \n  ".join(
        ", ".join(str(x) for x in row) for row in _rows_of_three(v[-9:])
    )
    return "[ " + head + "\n  ... \n\n  " + tail + " ]\n" + "\n"


def format_found(index: Optional[int]) -> str:
    """Describe a search result; ``index`` is zero-based, ``None`` means absent.

    The position is shown counting from one.
    """
    if index is None:
        return "ELEMENTO NÃO ENCONTRADO! \n"
    return f"ELEMENTO ENCONTRANDO NO ÍNDICE {index + 1}\n"


def median_of_three(arr: Sequence[int], a: int, b: int, c: int) -> int:
    """Return whichever of the indices ``a``, ``b``, ``c`` holds the median value."""
    if (arr[a] > arr[b]) != (arr[a] > arr[c]):
        return a
    if (arr[b] > arr[a]) != (arr[b] > arr[c]):
        return b
    return c