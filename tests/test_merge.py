"""Tests for sorted merging of frequency tables."""

import itertools
import random
from collections import Counter

from parallel_wordcount.merge import merge_sorted, merge_tables


def random_table(rng: random.Random) -> list[tuple[bytes, int]]:
    words = [bytes([rng.choice(b"abcde")]) * rng.randint(1, 3) for _ in range(rng.randint(0, 10))]
    return sorted(Counter(words).items())


class TestMergeSorted:
    """Test cases for merge_sorted."""

    def test_sums_equal_keys(self) -> None:
        left = [(b"cat", 1), (b"the", 2)]
        right = [(b"dog", 1), (b"the", 1)]
        assert list(merge_sorted(left, right)) == [(b"cat", 1), (b"dog", 1), (b"the", 3)]

    def test_interleaves_disjoint_keys(self) -> None:
        left = [(b"a", 1), (b"c", 1), (b"e", 1)]
        right = [(b"b", 2), (b"d", 2), (b"f", 2)]
        merged = list(merge_sorted(left, right))
        assert [k for k, _ in merged] == [b"a", b"b", b"c", b"d", b"e", b"f"]

    def test_empty_inputs(self) -> None:
        table = [(b"x", 4)]
        assert list(merge_sorted([], [])) == []
        assert list(merge_sorted(table, [])) == table
        assert list(merge_sorted([], table)) == table

    def test_drains_longer_input(self) -> None:
        left = [(b"a", 1)]
        right = [(b"a", 1), (b"b", 1), (b"c", 1)]
        assert list(merge_sorted(left, right)) == [(b"a", 2), (b"b", 1), (b"c", 1)]

    def test_accepts_iterators_and_generic_values(self) -> None:
        left = iter([("x", 1.5), ("z", 1.0)])
        right = (pair for pair in [("y", 2.0), ("z", 0.5)])
        assert list(merge_sorted(left, right)) == [("x", 1.5), ("y", 2.0), ("z", 1.5)]

    def test_is_lazy(self) -> None:
        def exploding():
            yield (b"a", 1)
            raise AssertionError("consumed too far")

        merged = merge_sorted(exploding(), [(b"b", 1)])
        assert next(merged) == (b"a", 1)

    def test_commutative(self) -> None:
        rng = random.Random(3)
        for _ in range(100):
            t1, t2 = random_table(rng), random_table(rng)
            assert list(merge_sorted(t1, t2)) == list(merge_sorted(t2, t1))

    def test_output_sorted_and_unique(self) -> None:
        rng = random.Random(5)
        for _ in range(100):
            merged = list(merge_sorted(random_table(rng), random_table(rng)))
            keys = [k for k, _ in merged]
            assert keys == sorted(set(keys))


class TestMergeTables:
    """Test cases for merge_tables."""

    def test_no_tables(self) -> None:
        assert merge_tables([]) == []

    def test_single_table(self) -> None:
        assert merge_tables([[(b"a", 1)]]) == [(b"a", 1)]

    def test_fold_order_does_not_matter(self) -> None:
        """Tree reduction equals every left fold over every ordering."""
        rng = random.Random(11)
        tables = [random_table(rng) for _ in range(5)]
        expected = merge_tables(tables)

        reference = Counter()
        for table in tables:
            reference.update(dict(table))
        assert expected == sorted(reference.items())

        for ordering in itertools.permutations(tables):
            folded: list[tuple[bytes, int]] = []
            for table in ordering:
                folded = list(merge_sorted(folded, table))
            assert folded == expected

    def test_odd_number_of_tables(self) -> None:
        tables = [[(b"a", 1)], [(b"a", 1), (b"b", 1)], [(b"c", 2)]]
        assert merge_tables(tables) == [(b"a", 2), (b"b", 1), (b"c", 2)]
