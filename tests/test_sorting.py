import io

from hypothesis import given
from hypothesis import strategies as st

import pytest

from dsdemo import sorting
from dsdemo.sorting import (
    DEFAULT_VALUES,
    bubble_sort,
    format_values,
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    selection_sort,
)


@given(values=st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_matches_builtin_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert selection_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected


def test_default_values():
    expected = sorted(DEFAULT_VALUES)
    assert bubble_sort(DEFAULT_VALUES) == expected
    assert selection_sort(DEFAULT_VALUES) == expected
    assert insertion_sort(DEFAULT_VALUES) == expected
    assert merge_sort(DEFAULT_VALUES) == expected
    assert quick_sort(DEFAULT_VALUES) == expected


def test_input_not_mutated():
    values = [5, 3, 9, 1]
    assert bubble_sort(values) == [1, 3, 5, 9]
    assert selection_sort(values) == [1, 3, 5, 9]
    assert insertion_sort(values) == [1, 3, 5, 9]
    assert merge_sort(values) == [1, 3, 5, 9]
    assert quick_sort(values) == [1, 3, 5, 9]
    assert values == [5, 3, 9, 1]


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert bubble_sort([7]) == [7]
    assert selection_sort([]) == []
    assert selection_sort([7]) == [7]
    assert insertion_sort([]) == []
    assert insertion_sort([7]) == [7]
    assert merge_sort([]) == []
    assert merge_sort([7]) == [7]
    assert quick_sort([]) == []
    assert quick_sort([7]) == [7]


def test_accepts_generators():
    assert bubble_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert selection_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert insertion_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert merge_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert quick_sort(iter((3, 1, 2))) == [1, 2, 3]


def test_format_values():
    assert format_values([1, 2, 3]) == "1 2 3"
    assert format_values([]) == ""


@pytest.mark.parametrize("choice", ["1", "2", "3", "4", "5"])
def test_main_prints_sorted_array(capsys, choice):
    assert main([choice]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == format_values(sorted(DEFAULT_VALUES))
    assert lines[-2] == "Sorted Array: "


def test_main_prints_algorithm_name(capsys):
    main(["4"])
    assert "Merge sort" in capsys.readouterr().out


def test_main_invalid_choice(capsys):
    main(["9"])
    out = capsys.readouterr().out
    assert "Select valid options" in out
    assert out.splitlines()[-1] == ""


def test_main_reads_choice_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr(sorting.sys, "stdin", io.StringIO("5\n"))
    main([])
    out = capsys.readouterr().out
    assert "Quick Sort" in out
    assert out.splitlines()[-1] == format_values(sorted(DEFAULT_VALUES))