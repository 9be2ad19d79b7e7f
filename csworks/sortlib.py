"""In-place sorting algorithms for lists of integers.

The comparisons and swaps are routed through small helpers so that a
profiler can count how often each is made.
"""

from __future__ import annotations

from typing import MutableSequence


def _swap(data: MutableSequence[int], i: int, j: int) -> None:
    data[i], data[j] = data[j], data[i]


def _less_than(n1: int, n2: int) -> bool:
    return n1 < n2


def _greater_than(n1: int, n2: int) -> bool:
    return n1 > n2


def _quick_sort(data: MutableSequence[int], left: int, right: int) -> None:
    pivot = data[(left + right) // 2]
    idx, jdx = left, right
    while idx <= jdx:
        while _less_than(data[idx], pivot):
            idx += 1
        while _greater_than(data[jdx], pivot):
            jdx -= 1
        if idx <= jdx:
            _swap(data, idx, jdx)
            idx += 1
            jdx -= 1
    if left < jdx:
        _quick_sort(data, left, jdx)
    if idx < right:
        _quick_sort(data, idx, right)


def quick_sort(data: MutableSequence[int]) -> None:
    """Sort ``data`` in place with quicksort, pivoting on the middle element."""
    if data:
        _quick_sort(data, 0, len(data) - 1)


def selection_sort(data: MutableSequence[int]) -> None:
    """Sort ``data`` in place by moving the greatest unsorted item to the end."""
    for last in range(len(data) - 1, 0, -1):
        greatest = 0
        for idx in range(last + 1):
            if _less_than(data[greatest], data[idx]):
                greatest = idx
        _swap(data, last, greatest)


def bubble_sort(data: MutableSequence[int]) -> None:
    """Sort ``data`` in place by repeatedly swapping adjacent out-of-order items."""
    for limit in range(len(data), 0, -1):
        for idx in range(limit - 1):
            if _less_than(data[idx + 1], data[idx]):
                _swap(data, idx, idx + 1)