import random

import pytest

from gdp_sortbench.algorithms import (
    ALGORITHMS,
    UnknownAlgorithmError,
    bubble_sort,
    get_algorithm,
    heap_children,
    heap_parent,
    heap_sort,
    lomuto_partition,
    merge_sort,
    quick_sort,
    transposition_sort,
)
from gdp_sortbench.records import CountryGDP

SORTS = [bubble_sort, merge_sort, quick_sort, heap_sort, transposition_sort]


def gdps(records):
    return [r.gdp for r in records]


def make(values):
    return [CountryGDP(f"C{i}", v) for i, v in enumerate(values)]


@pytest.mark.parametrize("sort", SORTS, ids=lambda f: f.__name__)
class TestEverySort:
    def test_empty(self, sort):
        a = []
        sort(a)
        assert a == []

    def test_single(self, sort):
        a = make([7])
        sort(a)
        assert gdps(a) == [7]

    def test_random_input_is_sorted_permutation(self, sort, random_countries):
        a = list(random_countries)
        sort(a)
        assert gdps(a) == sorted(gdps(random_countries))
        assert sorted(a, key=lambda r: (r.gdp, r.country)) == sorted(random_countries, key=lambda r: (r.gdp, r.country))

    def test_reversed(self, sort):
        a = make(range(30, 0, -1))
        sort(a)
        assert gdps(a) == list(range(1, 31))

    def test_duplicates_and_negatives(self, sort):
        a = make([3, -1, 4, -1, 5, 9, 2, 6, 5, 3, 0])
        sort(a)
        assert gdps(a) == [-1, -1, 0, 2, 3, 3, 4, 5, 5, 6, 9]

    def test_already_sorted_is_unchanged(self, sort):
        original = make([1, 2, 3, 5, 8, 13, 21])
        a = list(original)
        sort(a)
        assert a == original

    def test_sub_range_only(self, sort):
        a = make([9, 5, 4, 3, 2, 1, 0])
        sort(a, 1, 5)
        assert gdps(a) == [9, 1, 2, 3, 4, 5, 0]

    def test_five_countries(self, sort, five_countries):
        a = list(reversed(five_countries))
        sort(a)
        assert gdps(a) == [10, 20, 30, 40, 50]


class TestBubble:
    @pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 31])
    def test_comparisons_independent_of_order(self, n):
        values = list(range(n))
        shuffled = values[:]
        random.Random(n).shuffle(shuffled)
        for order in (values, shuffled, values[::-1]):
            assert bubble_sort(make(order)) == n * (n - 1) // 2

    def test_ten_elements_45(self):
        assert bubble_sort(make(range(10, 0, -1))) == 45

    def test_range_count(self):
        assert bubble_sort(make(range(10)), 2, 6) == 10


class TestMerge:
    def test_stable(self):
        a = [CountryGDP("a", 2), CountryGDP("b", 1), CountryGDP("c", 2),
             CountryGDP("d", 1), CountryGDP("e", 2), CountryGDP("f", 0)]
        merge_sort(a)
        assert [r.country for r in a] == ["f", "b", "d", "a", "c", "e"]

    def test_stable_many_duplicates(self):
        rng = random.Random(7)
        a = [CountryGDP(f"{i:03d}", rng.randint(0, 4)) for i in range(150)]
        merge_sort(a)
        for v in range(5):
            labels = [r.country for r in a if r.gdp == v]
            assert labels == sorted(labels)

    def test_returns_nothing(self):
        assert merge_sort(make([2, 1])) is None


class TestQuick:
    def test_partition_returns_pivot_index(self):
        a = make([7, 2, 9, 1, 5])
        p = lomuto_partition(a, 0, 4)
        assert p == 2
        assert a[p].gdp == 5
        assert all(r.gdp <= 5 for r in a[:p])
        assert all(r.gdp > 5 for r in a[p + 1:])

    def test_sorted_input_does_not_blow_the_stack(self):
        a = make(range(2500))
        quick_sort(a)
        assert gdps(a) == list(range(2500))

    def test_reversed_large_input(self):
        a = make(range(2000, 0, -1))
        quick_sort(a)
        assert gdps(a) == list(range(1, 2001))


class TestHeapIndexing:
    def test_children_at_zero(self):
        assert heap_children(0, 0) == (1, 2)
        assert heap_children(0, 1) == (3, 4)
        assert heap_children(0, 2) == (5, 6)

    def test_children_with_offset(self):
        assert heap_children(10, 10) == (11, 12)
        assert heap_children(10, 11) == (13, 14)
        assert heap_children(3, 5) == (8, 9)

    def test_parent_inverts_children(self):
        for start in (0, 1, 4, 17):
            for i in range(start, start + 40):
                left, right = heap_children(start, i)
                assert heap_parent(start, left) == i
                assert heap_parent(start, right) == i

    def test_heap_sort_with_offset_range(self):
        a = make([100, 6, 3, 8, 1, 9, 2, -100])
        heap_sort(a, 1, 6)
        assert gdps(a) == [100, 1, 2, 3, 6, 8, 9, -100]


class TestTransposition:
    @pytest.mark.parametrize("n", [0, 1])
    def test_trivial_inputs_take_one_round(self, n):
        assert transposition_sort(make(range(n))) == 1

    def test_sorted_input_one_round(self):
        assert transposition_sort(make(range(50))) == 1

    def test_reversed_rounds(self):
        assert transposition_sort(make([2, 1])) == 2
        assert transposition_sort(make([5, 4, 3, 2, 1])) == 4

    def test_reversed_rounds_deterministic(self):
        counts = {transposition_sort(make(range(40, 0, -1))) for _ in range(3)}
        assert len(counts) == 1

    def test_rounds_much_smaller_than_bubble_comparisons(self):
        n = 40
        rounds = transposition_sort(make(range(n, 0, -1)))
        assert rounds <= n + 1
        assert rounds < bubble_sort(make(range(n, 0, -1)))


class TestRegistry:
    def test_names(self):
        assert list(ALGORITHMS) == ["bubble", "merge", "quick", "heap", "transposition"]

    @pytest.mark.parametrize("name", ["quick", "QUICK", "Quick", " quick "])
    def test_case_insensitive(self, name):
        assert get_algorithm(name).func is quick_sort

    def test_unknown_lists_valid_names(self):
        with pytest.raises(UnknownAlgorithmError) as exc:
            get_algorithm("bogosort")
        message = str(exc.value)
        assert "bogosort" in message
        for name in ALGORITHMS:
            assert name in message

    def test_unknown_is_value_error(self):
        with pytest.raises(ValueError):
            get_algorithm("")

    def test_metric_flags(self):
        assert ALGORITHMS["bubble"].timed and ALGORITHMS["bubble"].counted
        assert not ALGORITHMS["transposition"].timed and ALGORITHMS["transposition"].counted
        for name in ("merge", "quick", "heap"):
            assert ALGORITHMS[name].timed and not ALGORITHMS[name].counted
