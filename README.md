# sortlab

sortlab is an interactive console workbench for studying classic sorting and
searching algorithms. It runs them on an array of 1024 random integers between
1 and 2047 and counts how many comparisons and swaps each one makes.

Algorithms covered:

- BubbleSort that stops early once a pass makes no swap
- ShellSort with three gap sequences: Shell's original `floor(N / 2^k)`,
  Sedgewick's `4^k + 3 * 2^(k-1) + 1`, and Knuth's `3k + 1`
- QuickSort with three pivot choices: first element, random element, and the
  median of three random elements
- Sequential search that scans from the end of the array, and binary search

## Installation

```
pip install .
```

## Running

```
sortlab
sortlab --seed 42
```

`--seed` makes the random arrays, random pivots and random search keys
repeatable.

The program prints a random array and then a menu. It reads whitespace-separated
numbers from standard input:

```
0 - Quit
1 - Create a new random array
2 - Show an array (original, "sorted", or both; whole or abridged)
3 - Sort with BubbleSort
4 - Sort with ShellSort (then choose the gap sequence)
5 - Sort with QuickSort (then choose the pivot)
6 - Search for an element (sequential or binary; a key you type or a random one)
7 - Run every algorithm 1000 times and print a statistics table
```

Every sort works on a fresh copy of the original array, so the "sorted" array
is the same as the original until an algorithm has been run. Each run reports
the number of swaps and comparisons. Binary search first sorts the working
copy. Found positions are shown counting from one.

Option 7 prints the sum, mean, sample variance and standard deviation of
comparisons and swaps for all nine algorithms over 1000 fresh random arrays.

An entry that is not a number, or a choice that is not on a menu, prints an
error message and the menu again. The program ends, printing a farewell
banner, on `0` or when input runs out.

The menus and messages are in Portuguese.

## Using it from Python

The algorithms work in place on ordinary Python lists, indexed from zero, and
add their counts to a `Counter`.

```python
import random

from sortlab.algorithms import binary_search, knuth_sequence, linear_search
from sortlab.utils import Counter, format_counter, generate_data

rng = random.Random(42)
data = generate_data(rng)
counter = Counter()
knuth_sequence(data, counter)
print(format_counter(counter))

counter.reset()
index = binary_search(data, data[10], 0, len(data) - 1, counter)

counter.reset()
missing = linear_search(data, 5000, counter)   # None: not present
```

The searches return an index, or `None` when the key is absent. The quicksorts
(`first_element_qs`, `random_element_qs`, `median_element_qs`) take the
inclusive bounds `low` and `high`; the random ones accept an optional
`random.Random`.

`sortlab.statistics.run_tests(n_tests, rng)` repeats the whole experiment and
returns one list of counters per algorithm; `calc_sum`, `calc_average`,
`calc_variance` and `calc_standard_deviation` turn them into the figures of the
table, and `sortlab.menu.format_table` lays that table out. `sortlab.cli.run`
drives the interactive loop over any iterable of tokens and any text stream.

## Tests

```
pip install .[test]
pytest
```