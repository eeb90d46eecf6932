"""Shared structures for buffer partitioning."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Partition:
    """Half-open byte range [start, end) into the input buffer."""

    index: int
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass
class PartitionStats:
    """Statistics from one pass over a Partitioner."""

    partitions: int = 0
    total_bytes: int = 0
    smallest: int = 0
    largest: int = 0

    def add(self, partition: Partition) -> None:
        size = len(partition)
        if self.partitions == 0:
            self.smallest = self.largest = size
        else:
            self.smallest = min(self.smallest, size)
            self.largest = max(self.largest, size)
        self.partitions += 1
        self.total_bytes += size
