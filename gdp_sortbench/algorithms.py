# algorithms.py
# ------------------------------------------------------------
# The five sorts being benchmarked. All of them sort in place
# over an inclusive index range [left, right] (whole list by
# default). Bubble and transposition also return a count that
# the harness records as the "Comparisons" metric.
# ------------------------------------------------------------

from dataclasses import dataclass
from typing import Callable, Dict, List, MutableSequence, Optional, Tuple

from .records import CountryGDP

Records = MutableSequence[CountryGDP]


def _bounds(a: Records, left: int, right: Optional[int]) -> Tuple[int, int]:
    return left, (len(a) - 1 if right is None else right)


def _swap(a: Records, i: int, j: int) -> None:
    a[i], a[j] = a[j], a[i]


# =========================
# Bubble
# =========================
def bubble_sort(a: Records, left: int = 0, right: Optional[int] = None) -> int:
    """
    Plain bubble sort, no early exit, so it always does n(n-1)/2
    comparisons whatever the input order. Returns that count.
    """
    left, right = _bounds(a, left, right)
    n = right - left + 1
    comparisons = 0
    for i in range(n - 1):
        for j in range(left, right - i):
            comparisons += 1
            if a[j] > a[j + 1]:
                _swap(a, j, j + 1)
    return comparisons


# =========================
# Merge
# =========================
def merge_sort(a: Records, left: int = 0, right: Optional[int] = None) -> None:
    """
    Top-down merge sort, stable. The temporary buffer in _merge is the only
    extra allocation.
    """
    left, right = _bounds(a, left, right)
    if left < right:
        mid = left + (right - left) // 2
        merge_sort(a, left, mid)
        merge_sort(a, mid + 1, right)
        _merge(a, left, mid, right)


def _merge(a: Records, left: int, mid: int, right: int) -> None:
    # <= keeps equal elements from the left half first (stability)
    out: List[CountryGDP] = []
    i, j = left, mid + 1
    while i <= mid and j <= right:
        if a[i] <= a[j]:
            out.append(a[i]); i += 1
        else:
            out.append(a[j]); j += 1
    out.extend(a[i:mid + 1])
    out.extend(a[j:right + 1])
    a[left:right + 1] = out


# =========================
# Quick (Lomuto)
# =========================
def lomuto_partition(a: Records, left: int, right: int) -> int:
    """Partition around a[right]; returns the pivot's final index."""
    pivot = a[right]
    i = left - 1
    for j in range(left, right):
        if a[j] <= pivot:
            i += 1
            _swap(a, i, j)
    _swap(a, i + 1, right)
    return i + 1


def quick_sort(a: Records, left: int = 0, right: Optional[int] = None) -> None:
    """
    Quick sort with the last element as pivot. Sorted and reversed inputs
    are the O(n^2) worst case, which is exactly what the benchmark wants
    to show.

    Only the smaller side is recursed into and the larger one is handled by
    the loop, so the stack stays O(log n) even in the worst case (plain
    recursion would hit Python's recursion limit on a sorted input of a
    couple of thousand rows). The partitions are the same either way.
    """
    left, right = _bounds(a, left, right)
    while left < right:
        p = lomuto_partition(a, left, right)
        if p - left < right - p:
            quick_sort(a, left, p - 1)
            left = p + 1
        else:
            quick_sort(a, p + 1, right)
            right = p - 1


# =========================
# Heap
# =========================
def heap_children(start: int, i: int) -> Tuple[int, int]:
    """Absolute (left, right) child indices of absolute index i in a heap rooted at start."""
    offset = 2 * (i - start)
    return start + offset + 1, start + offset + 2


def heap_parent(start: int, i: int) -> int:
    """Absolute parent index of absolute index i (i > start) in a heap rooted at start."""
    return start + (i - start - 1) // 2


def _sift_down(a: Records, start: int, i: int, end: int) -> None:
    # max-heap over a[start..end] inclusive
    while True:
        largest = i
        l, r = heap_children(start, i)
        if l <= end and a[l] > a[largest]:
            largest = l
        if r <= end and a[r] > a[largest]:
            largest = r
        if largest == i:
            return
        _swap(a, i, largest)
        i = largest


def heap_sort(a: Records, left: int = 0, right: Optional[int] = None) -> None:
    left, right = _bounds(a, left, right)
    if left >= right:
        return
    # bottom-up build: last internal node is the parent of the last element
    for i in range(heap_parent(left, right), left - 1, -1):
        _sift_down(a, left, i, right)
    for end in range(right, left, -1):
        _swap(a, left, end)
        _sift_down(a, left, left, end - 1)


# =========================
# Odd-even transposition
# =========================
def transposition_sort(a: Records, left: int = 0, right: Optional[int] = None) -> int:
    """
    Odd-even transposition sort, run sequentially. Each round is an odd
    phase (pairs starting at left+1, left+3, ...) followed by an even phase
    (left, left+2, ...); it stops after the first round with no swaps.

    Returns the number of rounds, i.e. the parallel step count, not the
    number of element comparisons.
    """
    left, right = _bounds(a, left, right)
    rounds = 0
    is_sorted = False
    while not is_sorted:
        is_sorted = True
        rounds += 1
        for first in (left + 1, left):
            for i in range(first, right, 2):
                if a[i] > a[i + 1]:
                    _swap(a, i, i + 1)
                    is_sorted = False
    return rounds


# =========================
# Registry
# =========================
@dataclass(frozen=True)
class SortAlgorithm:
    """
    One selectable algorithm.
    timed   -> harness records a Time row
    counted -> func returns a count, harness records a Comparisons row
    """
    name: str
    title: str
    func: Callable[..., Optional[int]]
    timed: bool = True
    counted: bool = False


# mapping used by the CLI (insertion order is the order shown to users)
ALGORITHMS: Dict[str, SortAlgorithm] = {
    "bubble": SortAlgorithm("bubble", "Bubble Sort", bubble_sort, timed=True, counted=True),
    "merge": SortAlgorithm("merge", "Merge Sort", merge_sort),
    "quick": SortAlgorithm("quick", "Quick Sort", quick_sort),
    "heap": SortAlgorithm("heap", "Heap Sort", heap_sort),
    "transposition": SortAlgorithm("transposition", "Odd-Even Transposition Sort", transposition_sort,
                                   timed=False, counted=True),
}


class UnknownAlgorithmError(ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown algorithm: {name!r}. Available: {', '.join(ALGORITHMS)}")


def get_algorithm(name: str) -> SortAlgorithm:
    """Case-insensitive lookup; raises UnknownAlgorithmError listing the valid names."""
    try:
        return ALGORITHMS[name.strip().lower()]
    except KeyError:
        raise UnknownAlgorithmError(name) from None
