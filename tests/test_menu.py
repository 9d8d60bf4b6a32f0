import pytest

from sortlab.menu import (
    ALGORITHM_NAMES,
    WIDTH,
    array_menu,
    ending,
    format_table,
    greetings,
    menu,
    quick_menu,
    search_menu,
    shell_menu,
)
from sortlab.utils import Counter, Stats, format_half_array


def _columns():
    n = len(ALGORITHM_NAMES)
    sums = [Counter(i, 2 * i) for i in range(n)]
    averages = [Stats(i / 2, i / 4) for i in range(n)]
    variances = [Stats(float(i), float(i + 1)) for i in range(n)]
    deviations = [Stats(float(i + 2), float(i + 3)) for i in range(n)]
    return sums, averages, variances, deviations


def test_greetings_shows_array_and_menu():
    v = list(range(1, 31))
    text = greetings(v)
    assert format_half_array(v) in text
    assert text.endswith(menu())
    assert text.index("SEU PRIMEIRO VETOR: \n") < text.index(format_half_array(v))


def test_menu_lists_choices_in_order():
    text = menu()
    positions = [text.index(f"|{d} - ") for d in range(8)]
    assert positions == sorted(positions)
    assert "|0 - Sair do programa" in text


def test_menu_box_lines_have_equal_width():
    lines = menu().splitlines()
    assert lines[0] == lines[-1]
    assert len({len(line) for line in lines[1:-1]}) == 1
    assert all(line.startswith("|") and line.endswith("|") for line in lines[1:-1])


def test_shell_menu():
    text = shell_menu()
    assert text.startswith("ESCOLHA O GAP\n")
    assert "|3 - 3k + 1" in text


def test_quick_menu():
    text = quick_menu()
    assert text.startswith("ESCOLHA O PIVO\n")
    assert "Mediana entre 3 elementos" in text


def test_array_menu_has_six_options():
    options = [line for line in array_menu().splitlines() if line.startswith("|")]
    assert [line[1] for line in options] == ["1", "2", "3", "4", "5", "6"]


def test_search_menu_has_four_options():
    options = [line for line in search_menu().splitlines() if line.startswith("|")]
    assert [line[1] for line in options] == ["1", "2", "3", "4"]


def test_format_table_header_and_rows():
    sums, averages, variances, deviations = _columns()
    lines = format_table(sums, averages, variances, deviations).splitlines()
    assert lines[0] == "ANALISANDO 1000 VEZES CADA ALGORITMO"
    assert lines[1].split() == list(ALGORITHM_NAMES)
    assert lines[2] == ""
    labels = [line.split()[0] for line in lines[3:]]
    assert labels == ["Comp", "Trocas", "Média", "Média", "Var", "Var", "DP", "DP"]


def test_format_table_values():
    sums, averages, variances, deviations = _columns()
    lines = format_table(sums, averages, variances, deviations).splitlines()
    comp = lines[3].split()[1:]
    assert [float(x) for x in comp] == [float(s.comparisons) for s in sums]
    swaps = lines[4].split()[1:]
    assert [float(x) for x in swaps] == [float(s.swaps) for s in sums]
    dev_swaps = lines[10].split()[2:]
    assert [float(x) for x in dev_swaps] == [d.swaps for d in deviations]
    assert comp[1] == "1.00"


def test_format_table_columns_are_aligned():
    sums, averages, variances, deviations = _columns()
    lines = format_table(sums, averages, variances, deviations).splitlines()
    header = lines[1]
    for position, name in enumerate(ALGORITHM_NAMES, start=1):
        assert header[position * WIDTH:].startswith(name)
    assert all(len(line) == len(header) for line in lines[3:])


def test_format_table_rejects_wrong_length():
    sums, averages, variances, deviations = _columns()
    with pytest.raises(ValueError):
        format_table(sums[:-1], averages, variances, deviations)


def test_ending_banner_lines_have_equal_width():
    lines = ending().splitlines()
    assert len(lines) > 1
    assert len({len(line) for line in lines}) == 1
    assert ending().endswith("\n")