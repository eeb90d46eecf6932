"""Word-boundary-aligned partitioning of an in-memory buffer."""

from collections.abc import Iterator

from parallel_wordcount.delimiters import DelimiterTable
from parallel_wordcount.partition.types import Partition


class Partitioner:
    """
    Split a buffer into at most ``n`` contiguous ranges of roughly equal size.

    Each range except the last ends on a delimiter byte, so no word is ever
    split between two ranges. The delimiter itself opens the next range.

    Iteration is restartable: every ``iter()`` starts again from offset 0 and
    yields the same ranges for the same inputs.
    """

    def __init__(self, buffer, n: int, delimiters: DelimiterTable):
        if n < 1:
            raise ValueError(f"partition count must be at least 1, got {n}")

        self._buffer = buffer
        self._n = n
        self._delimiters = delimiters
        self.approx_chunk_size = len(buffer) // n

    def __iter__(self) -> Iterator[Partition]:
        size = len(self._buffer)
        pos = 0
        index = 0

        while pos < size:
            if index == self._n - 1:
                # Last allowed partition takes whatever remains.
                end = size
            else:
                end = self._next_boundary(pos, size)

            yield Partition(index, pos, end)
            index += 1
            pos = end

    def _next_boundary(self, pos: int, size: int) -> int:
        candidate = min(pos + self.approx_chunk_size, size)
        if candidate == pos:
            # Zero-sized chunk: step past the cursor so the range is non-empty.
            candidate += 1

        end = self._delimiters.find(self._buffer, candidate, size)
        if end < 0:
            return size
        return end
