"""Classic comparison sorts and a small menu-driven demo."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

DEFAULT_VALUES: tuple[int, ...] = (2, 1, 4, 3, 1, 22, 199, 12, 21)

MENU = (
    "Enter the type of Sorting algorithms to use\n"
    "---------------------------------------------\n"
    "  1 -> BubbleSort \n  2 -> SelectionSort \n  3 -> InsertionSort \n"
    " 4 -> MergeSort \n 5 -> QuickSort \n"
)


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, repeatedly swapping adjacent out-of-order items."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, moving the smallest remaining item forward each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, inserting each item into an already sorted prefix."""
    result: list[int] = []
    for value in values:
        position = len(result)
        while position > 0 and value < result[position - 1]:
            position -= 1
        result.insert(position, value)
    return result


def _merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy by recursively splitting and merging halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, partitioning around the last item as pivot."""
    items = list(values)
    if len(items) <= 1:
        return items
    pivot = items[-1]
    smaller = [v for v in items if v < pivot]
    equal = [v for v in items if v == pivot]
    larger = [v for v in items if v > pivot]
    return quick_sort(smaller) + equal + quick_sort(larger)


ALGORITHMS: dict[int, tuple[str, Callable[[Iterable[int]], list[int]]]] = {
    1: ("Bubble Sort", bubble_sort),
    2: ("Selection Sort", selection_sort),
    3: ("Insertion Sort", insertion_sort),
    4: ("Merge sort", merge_sort),
    5: ("Quick Sort", quick_sort),
}


def format_values(values: Iterable[int]) -> str:
    """Render values separated by single spaces."""
    return " ".join(str(value) for value in values)


def _read_choice(stream) -> int:
    for line in stream:
        tokens = line.split()
        if tokens:
            try:
                return int(tokens[0])
            except ValueError:
                return 0
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the demo values with the algorithm picked from the menu."""
    parser = argparse.ArgumentParser(
        prog="dsdemo-sort", description="Sort a fixed list with a chosen algorithm."
    )
    parser.add_argument(
        "choice", nargs="?", type=int, help="menu number; read from stdin if omitted"
    )
    args = parser.parse_args(argv)

    print(MENU, end="")
    choice = args.choice if args.choice is not None else _read_choice(sys.stdin)

    print("Unsorted Array: ")
    print(format_values(DEFAULT_VALUES))

    entry = ALGORITHMS.get(choice)
    if entry is None:
        print("Select valid options")
        result: list[int] = []
    else:
        name, algorithm = entry
        print(name)
        result = algorithm(DEFAULT_VALUES)

    print("Sorted Array: ")
    print(format_values(result))
    return 0