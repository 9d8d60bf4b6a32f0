"""Text of the banners, menus and result table shown by the program."""

from __future__ import annotations

from typing import Sequence

from sortlab.utils import Counter, Stats, format_half_array

WIDTH = 16
"""Column width of the result table."""

BOX_WIDTH = 50
"""Inner width of the menu boxes."""

ALGORITHM_NAMES = (
    "BubbleSort",
    "FirstQs",
    "RandQs",
    "MedianQs",
    "OriginalShell",
    "SedgewickShell",
    "KnuthShell",
    "LinearSearch",
    "BinarySearch",
)
"""Column headings of the result table, in the order of the measurements."""

_GREETING_ART = r"""
   ____          _                       /\/|                _____                      _
  / __ \        | |                     |/\/                |  __ \                    (_)
 | |  | |_ __ __| | ___ _ __   __ _  ___ __ _  ___     ___  | |__) |__  ___  __ _ _   _ _ ___  __ _
 | |  | | '__/ _` |/ _ \ '_ \ / _` |/ __/ _` |/ _ \   / _ \ |  ___/ _ \/ __|/ _` | | | | / __|/ _` |
 | |__| | | | (_| |  __/ | | | (_| | (_| (_| | (_) | |  __/ | |  |  __/\__ \ (_| | |_| | \__ \ (_| |
  \____/|_|  \__,_|\___|_| |_|\__,_|\___\__,_|\___/   \___| |_|   \___||___/\__,_|\__,_|_|___/\__,_|
                                     )_)                                       | |
                                                                               |_|
"""

_ENDING_ART = r"""
  ______ _                 _
 |  ____(_)               | |
 | |__   _ _ __ ___     __| | ___    _ __  _ __ ___   __ _ _ __ __ _ _ __ ___   __ _
 |  __| | | '_ ` _ \   / _` |/ _ \  | '_ \| '__/ _ \ / _` | '__/ _` | '_ ` _ \ / _` |
 | |    | | | | | | | | (_| | (_) | | |_) | | | (_) | (_| | | | (_| | | | | | | (_| |
 |_|    |_|_| |_| |_|  \__,_|\___/  | .__/|_|  \___/ \__, |_|  \__,_|_| |_| |_|\__,_|
                                    | |               __/ |
         ______    _                |_|  _         _ |___/   _        __
        |  ____|  | |                   | |       | |/ /    | |      / _|
  ______| |__   __| |_   _  __ _ _ __ __| | ___   | ' / __ _| |_   _| |_
 |______|  __| / _` | | | |/ _` | '__/ _` |/ _ \  |  < / _` | | | | |  _|
        | |___| (_| | |_| | (_| | | | (_| | (_) | | . \ (_| | | |_| | |
        |______\__,_|\__,_|\__,_|_|  \__,_|\___/  |_|\_\__,_|_|\__,_|_|
"""


def _banner(art: str, width: int, blank_lines: int = 0) -> str:
    lines = art.strip("\n").split("\n") + [""] * blank_lines
    return "".join(line.ljust(width) + "\n" for line in lines)


_GREETING_BANNER = _banner(_GREETING_ART, 100)
_ENDING_BANNER = _banner(_ENDING_ART, 86, blank_lines=1)

_RULE = " " + "-" * BOX_WIDTH + "\n"


def _box(*labels: str) -> str:
    return _RULE + "".join(f"|{label.ljust(BOX_WIDTH)}|\n" for label in labels) + _RULE


def _numbered_box(labels: Sequence[str], start: int = 1) -> str:
    return _box(*(f"{number} - {label}" for number, label in enumerate(labels, start)))


def greetings(v: Sequence[int]) -> str:
    """Welcome banner, the first array and the main menu."""
    return (
        _GREETING_BANNER
        + "SEU PRIMEIRO VETOR: \n"
        + format_half_array(v)
        + "ATENÇÃO, O SEU 'VETOR ORDENADO' SERÁ IGUAL AO SEU VETOR ORIGINAL "
        "ENQUANTO VOCE NÃO UTILIZAR ALGUM ALGORITMO!\n"
        + menu()
    )


def menu() -> str:
    """Main menu with the program's choices."""
    return _numbered_box(
        (
            "Sair do programa",
            "Criar novo vetor",
            "Exibir vetor",
            "Ordenar com BubbleSort",
            "Ordenar com ShellSort",
            "Ordenar com QuickSort",
            "Buscar elemento",
            "Testar 1000 vezes",
        ),
        start=0,
    )


def shell_menu() -> str:
    """Menu of the gap sequences for shell sort."""
    return "ESCOLHA O GAP\n" + _numbered_box(
        ("Piso(N / 2^k)", "4^k + 3 * 2^(k-1) + 1", "3k + 1")
    )


def quick_menu() -> str:
    """Menu of the pivot choices for quicksort."""
    return "ESCOLHA O PIVO\n" + _numbered_box(
        ("Primeiro elemento", "Elemento aleatório", "Mediana entre 3 elementos")
    )


def array_menu() -> str:
    """Menu of the ways to display the arrays."""
    return _numbered_box(
        (
            "Vetor original (Completo)",
            "Vetor original (Parte)",
            "Vetor ordenado (Completo)",
            "Vetor ordenado (Parte)",
            "Ambos (Completos)",
            "Ambos (Parte)",
        )
    )


def search_menu() -> str:
    """Menu of the search methods."""
    return _numbered_box(
        (
            "Busca sequencial (Escolha)",
            "Busca sequencial (Aleatoria)",
            "Busca binária (Escolha)",
            "Busca binária (Aleatória)",
        )
    )


def _row(label: str, values: Sequence[float]) -> str:
    return f"{label:<{WIDTH}}" + "".join(f"{float(x):<{WIDTH}.2f}" for x in values) + "\n"


def format_table(
    sums: Sequence[Counter],
    averages: Sequence[Stats],
    variances: Sequence[Stats],
    deviations: Sequence[Stats],
) -> str:
    """Table of totals, means, variances and deviations for every algorithm."""
    expected = len(ALGORITHM_NAMES)
    if any(len(column) != expected for column in (sums, averages, variances, deviations)):
        raise ValueError(f"every column needs exactly {expected} entries")
    header = f"{'':<{WIDTH}}" + "".join(f"{name:<{WIDTH}}" for name in ALGORITHM_NAMES)
    return (
        "ANALISANDO 1000 VEZES CADA ALGORITMO\n"
        + header
        + "\n\n"
        + _row("Comp", [s.comparisons for s in sums])
        + _row("Trocas", [s.swaps for s in sums])
        + _row("Média Comp ", [a.comparisons for a in averages])
        + _row("Média Trocas ", [a.swaps for a in averages])
        + _row("Var Comp", [v.comparisons for v in variances])
        + _row("Var Trocas", [v.swaps for v in variances])
        + _row("DP Comp", [d.comparisons for d in deviations])
        + _row("DP Trocas", [d.swaps for d in deviations])
    )


def ending() -> str:
    """Farewell banner."""
    return _ENDING_BANNER