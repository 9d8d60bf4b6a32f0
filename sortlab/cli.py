"""Interactive menu-driven program for sorting and searching experiments."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from sortlab.algorithms import (
    binary_search,
    bubble_sort,
    first_element_qs,
    generic_sort,
    knuth_sequence,
    linear_search,
    median_element_qs,
    random_element_qs,
    sedgewick_exponents,
    shell_original,
)
from sortlab.menu import (
    array_menu,
    ending,
    format_table,
    greetings,
    menu,
    quick_menu,
    search_menu,
    shell_menu,
)
from sortlab.statistics import (
    calc_average,
    calc_standard_deviation,
    calc_sum,
    calc_variance,
    run_tests,
)
from sortlab.utils import (
    N_TESTS,
    Counter,
    format_array,
    format_counter,
    format_found,
    format_half_array,
    generate_data,
    random_value,
)

PROMPT = "ESCOLHA SUA OPÇÃO: \n"
INVALID = "Entre um digito válido\n"


def _read_int(tokens: Iterator[str]) -> int:
    """Take the next token as an integer.

    Raises EOFError when no token is left and ValueError when it is not a number.
    """
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("input exhausted") from None
    return int(token)


class Session:
    """State of one interactive run: the original array, its working copy and a counter."""

    def __init__(
        self,
        out: TextIO,
        rng: Optional[random.Random] = None,
        n_tests: int = N_TESTS,
        data: Optional[Sequence[int]] = None,
    ) -> None:
        self.out = out
        self.rng = rng
        self.n_tests = n_tests
        self.original: list[int] = list(data) if data is not None else generate_data(rng)
        self.working: list[int] = list(self.original)
        self.counter = Counter()

    def _write(self, text: str) -> None:
        self.out.write(text)

    def _restart(self) -> None:
        self.counter.reset()
        self.working = list(self.original)

    def handle(self, choice: int, tokens: Iterator[str]) -> bool:
        """Carry out one menu choice, reading any further input from ``tokens``.

        Returns False when the choice ends the program.
        """
        if choice == 0:
            return False
        actions = {
            1: self._new_array,
            2: self._show_arrays,
            3: self._bubble,
            4: self._shell,
            5: self._quick,
            6: self._search,
            7: self._repeated_test,
        }
        action = actions.get(choice)
        if action is None:
            self._write(INVALID)
        else:
            action(tokens)
        return True

    def _new_array(self, tokens: Iterator[str]) -> None:
        self._write("GERANDO VETOR ALEATÓRIO...\n")
        self.original = generate_data(self.rng)
        self.working = list(self.original)
        self._write(format_half_array(self.original))

    def _show_arrays(self, tokens: Iterator[str]) -> None:
        self._write(array_menu())
        method = _read_int(tokens)
        self._write("IMPRIMINDO VETOR(ES)...\n")
        if method == 1:
            self._write(format_array(self.original))
        elif method == 2:
            self._write(format_half_array(self.original))
        elif method == 3:
            self._write(format_array(self.working))
        elif method == 4:
            self._write(format_half_array(self.working))
        elif method == 5:
            self._write("VETOR ORIGINAL: \n" + format_array(self.original))
            self._write("VETOR 'ORDENADO': \n" + format_array(self.working))
        elif method == 6:
            self._write("VETOR ORIGINAL: \n" + format_half_array(self.original))
            self._write("VETOR 'ORDENADO': \n" + format_half_array(self.working))
        else:
            self._write(INVALID)

    def _bubble(self, tokens: Iterator[str]) -> None:
        self._write("ORDENANDO COM BUBBLE SORT...\n")
        self._restart()
        bubble_sort(self.working, self.counter)
        self._report_sort()

    def _shell(self, tokens: Iterator[str]) -> None:
        self._write(shell_menu())
        method = _read_int(tokens)
        self._restart()
        self._write("ORDENANDO COM SHELL SORT, MÉTODO ")
        if method == 1:
            self._write("ORIGINAL...\n")
            shell_original(self.working, self.counter)
        elif method == 2:
            self._write("SEDGEWICK...\n")
            sedgewick_exponents(self.working, self.counter)
        elif method == 3:
            self._write("KNUTH...\n")
            knuth_sequence(self.working, self.counter)
        else:
            self._write(INVALID)
        self._report_sort()

    def _quick(self, tokens: Iterator[str]) -> None:
        self._write(quick_menu())
        method = _read_int(tokens)
        self._restart()
        self._write("ORDENANDO COM QUICK SORT, PIVO: ")
        high = len(self.working) - 1
        if method == 1:
            self._write("PRIMEIRO ELEMENTO...\n")
            first_element_qs(self.working, 0, high, self.counter)
        elif method == 2:
            self._write("ELEMENTO ALEATÓRIO...\n")
            random_element_qs(self.working, 0, high, self.counter, self.rng)
        elif method == 3:
            self._write("ELEMENTO MEDIANO...\n")
            median_element_qs(self.working, 0, high, self.counter, self.rng)
        else:
            self._write(INVALID)
        self._report_sort()

    def _report_sort(self) -> None:
        self._write(format_counter(self.counter))
        self._write(format_half_array(self.working))

    def _search(self, tokens: Iterator[str]) -> None:
        self._write(search_menu())
        method = _read_int(tokens)
        self.counter.reset()
        if method in (1, 2):
            key = _read_int(tokens) if method == 1 else random_value(self.rng)
            self._write(f"PROCURANDO ELEMENTO {key}...\n")
            index = linear_search(self.original, key, self.counter)
            self._write(format_found(index))
        elif method in (3, 4):
            key = _read_int(tokens) if method == 3 else random_value(self.rng)
            generic_sort(self.working)
            self._write(f"PROCURANDO ELEMENTO {key}...\n")
            index = binary_search(self.working, key, 0, len(self.working) - 1, self.counter)
            self._write(format_found(index))
        else:
            self._write(INVALID)
        self._write(format_counter(self.counter))

    def _repeated_test(self, tokens: Iterator[str]) -> None:
        self._write("REALIZANDO O TESTE MIL VEZES...\n")
        counters = run_tests(self.n_tests, self.rng)
        sums = calc_sum(counters)
        averages = calc_average(sums, self.n_tests)
        variances = calc_variance(averages, counters)
        deviations = calc_standard_deviation(variances)
        self._write(format_table(sums, averages, variances, deviations))


def run(
    tokens: Iterable[str], out: TextIO, rng: Optional[random.Random] = None
) -> None:
    """Run the interactive loop over ``tokens`` until 0 is chosen or input ends."""
    stream = iter(tokens)
    session = Session(out, rng)
    out.write(greetings(session.original))
    while True:
        out.write(PROMPT)
        try:
            choice = _read_int(stream)
            keep_going = session.handle(choice, stream)
        except EOFError:
            break
        except ValueError:
            out.write(INVALID)
            keep_going = True
        if not keep_going:
            break
        out.write(menu())
        out.flush()
    out.write(ending())
    out.flush()


def _stdin_tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="sortlab", description="Interactive sorting and searching experiments."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random data")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    run(_stdin_tokens(sys.stdin), sys.stdout, rng)
    return 0


if __name__ == "__main__":
    sys.exit(main())