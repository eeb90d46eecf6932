"""Tests for the partition module."""

import random

import pytest

from parallel_wordcount.delimiters import DelimiterTable, is_word_delimiter
from parallel_wordcount.partition import Partition, Partitioner, PartitionStats

DELIMS = DelimiterTable.from_predicate(is_word_delimiter)


class UnsliceableBuffer(bytearray):
    """Bytes-like buffer that fails the test if anything slices it."""

    def __getitem__(self, key):
        if isinstance(key, slice):
            raise AssertionError(f"buffer sliced with {key}")
        return super().__getitem__(key)


def ranges(buffer, n: int) -> list[tuple[int, int]]:
    return [(p.start, p.end) for p in Partitioner(buffer, n, DELIMS)]


def random_text(rng: random.Random, length: int) -> bytes:
    alphabet = b"abc   ,.\n"
    return bytes(rng.choice(alphabet) for _ in range(length))


class TestPartitioner:
    """Test cases for Partitioner."""

    def test_splits_on_word_boundaries(self) -> None:
        """Each range ends where the next delimiter after its proportional offset sits."""
        assert ranges(b"a b c ef", 3) == [(0, 3), (3, 5), (5, 8)]
        assert ranges(b"hello world", 2) == [(0, 5), (5, 11)]
        assert ranges(b"a b c d e f g h", 3) == [(0, 5), (5, 11), (11, 15)]

    def test_single_partition_covers_buffer(self) -> None:
        assert ranges(b"the cat", 1) == [(0, 7)]

    def test_empty_buffer_yields_nothing(self) -> None:
        for n in (1, 2, 100):
            assert ranges(b"", n) == []

    def test_buffer_without_delimiters_is_one_partition(self) -> None:
        assert ranges(b"abcdef", 3) == [(0, 6)]

    def test_more_partitions_than_bytes(self) -> None:
        """Zero-sized chunks collapse into the delimiter scan."""
        assert ranges(b"ab cd", 10) == [(0, 2), (2, 5)]

    def test_only_delimiters(self) -> None:
        assert ranges(b"   ", 3) == [(0, 1), (1, 2), (2, 3)]

    def test_rejects_zero_partitions(self) -> None:
        with pytest.raises(ValueError):
            Partitioner(b"abc", 0, DELIMS)

    def test_partition_indices_are_sequential(self) -> None:
        partitions = list(Partitioner(b"one two three four", 3, DELIMS))
        assert [p.index for p in partitions] == list(range(len(partitions)))

    def test_iteration_restarts_from_zero(self) -> None:
        partitioner = Partitioner(b"the quick brown fox jumps", 4, DELIMS)
        first = list(partitioner)
        second = list(partitioner)
        assert first == second
        assert first[0].start == 0

    def test_scans_without_slicing_buffer(self) -> None:
        buffer = UnsliceableBuffer(b"one, two; three four")
        assert ranges(buffer, 3) == [(0, 8), (8, 15), (15, 20)]

    def test_invariants_on_random_buffers(self) -> None:
        """Contiguous, non-empty, bounded by n, boundaries on delimiters."""
        rng = random.Random(7)
        for _ in range(200):
            buffer = random_text(rng, rng.randint(0, 60))
            n = rng.randint(1, 12)
            partitions = list(Partitioner(buffer, n, DELIMS))

            assert len(partitions) <= n
            pos = 0
            for partition in partitions:
                assert partition.start == pos
                assert len(partition) > 0
                pos = partition.end
            assert pos == len(buffer)

            for partition in partitions[1:]:
                assert is_word_delimiter(buffer[partition.start])


class TestPartitionStats:
    """Test cases for PartitionStats."""

    def test_tracks_sizes(self) -> None:
        stats = PartitionStats()
        stats.add(Partition(0, 0, 5))
        stats.add(Partition(1, 5, 7))
        stats.add(Partition(2, 7, 16))

        assert stats.partitions == 3
        assert stats.total_bytes == 16
        assert stats.smallest == 2
        assert stats.largest == 9
