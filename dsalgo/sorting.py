"""Classic in-place sorting algorithms and a small timing benchmark."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, MutableSequence
from typing import Optional

_MAX_VALUE = 100


def random_vector(
    n: int, sorted_: bool = False, rng: Optional[random.Random] = None
) -> list[int]:
    """Return ``n`` random integers in [0, 100), sorted if requested."""
    rng = rng or random.Random()
    values = [rng.randrange(_MAX_VALUE) for _ in range(n)]
    if sorted_:
        values.sort()
    return values


def selection_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place by repeatedly selecting the smallest element."""
    n = len(items)
    for start in range(n - 1):
        smallest = min(range(start, n), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]


def bubble_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place, stopping early once a pass makes no swap."""
    n = len(items)
    for sweep in range(n - 1):
        swapped = False
        for i in range(n - 1 - sweep):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break


def insertion_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place by insertion."""
    for position in range(1, len(items)):
        current = items[position]
        i = position
        while i >= 1 and items[i - 1] > current:
            items[i] = items[i - 1]
            i -= 1
        items[i] = current


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def _merge_sorted(values: list[int]) -> list[int]:
    if len(values) <= 1:
        return values
    mid = len(values) // 2
    return _merge(_merge_sorted(values[:mid]), _merge_sorted(values[mid:]))


def merge_sort(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place with a stable top-down merge sort."""
    items[:] = _merge_sorted(list(items))


def _partition(items: MutableSequence[int], low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for i in range(low, high):
        if items[i] <= pivot:
            items[store], items[i] = items[i], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def _quick_sort(
    items: MutableSequence[int],
    choose_pivot: Optional[Callable[[int, int], int]],
) -> None:
    # Recurse into the smaller side and loop over the larger to bound the depth.
    def sort_range(low: int, high: int) -> None:
        while low < high:
            if choose_pivot is not None:
                chosen = choose_pivot(low, high)
                items[chosen], items[high] = items[high], items[chosen]
            pivot = _partition(items, low, high)
            if pivot - low < high - pivot:
                sort_range(low, pivot - 1)
                low = pivot + 1
            else:
                sort_range(pivot + 1, high)
                high = pivot - 1

    sort_range(0, len(items) - 1)


def quick_sort_last_pivot(items: MutableSequence[int]) -> None:
    """Sort ``items`` in place with quicksort using the last element as pivot."""
    _quick_sort(items, None)


def quick_sort(
    items: MutableSequence[int], rng: Optional[random.Random] = None
) -> None:
    """Sort ``items`` in place with quicksort using a random pivot."""
    rng = rng or random.Random()
    _quick_sort(items, lambda low, high: rng.randint(low, high))


def counting_sort(items: MutableSequence[int]) -> None:
    """Sort integers in place by counting; raises ValueError when empty."""
    if not items:
        raise ValueError("counting sort needs at least one element")
    lowest, highest = min(items), max(items)
    counts = [0] * (highest - lowest + 1)
    for value in items:
        counts[value - lowest] += 1
    items[:] = [
        lowest + offset
        for offset, count in enumerate(counts)
        for _ in range(count)
    ]


_BENCHMARKS: list[tuple[str, Callable[[list[int]], None]]] = [
    ("SelectionSort:     ", selection_sort),
    ("BubbleSort:        ", bubble_sort),
    ("Insertion:         ", insertion_sort),
    ("mergeSort:         ", merge_sort),
    ("quickSort sem rand:", quick_sort_last_pivot),
    ("quickSort com rand:", quick_sort),
    ("CountingSort:      ", counting_sort),
]


def main(argv: Optional[list[str]] = None) -> int:
    """Time every algorithm on copies of one random vector."""
    parser = argparse.ArgumentParser(description="Benchmark sorting algorithms.")
    parser.add_argument("--size", type=int, default=10**5)
    parser.add_argument("--unsorted", action="store_true")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    vector = random_vector(args.size, not args.unsorted, random.Random(args.seed))
    for label, algorithm in _BENCHMARKS:
        work = list(vector)
        start = time.perf_counter()
        algorithm(work)
        elapsed = time.perf_counter() - start
        print(f"Tempo de execução {label} {elapsed:.6f}s")
    return 0