"""Buffer partitioning on word boundaries."""

from parallel_wordcount.partition.partition import Partitioner
from parallel_wordcount.partition.types import Partition, PartitionStats

__all__ = ["Partition", "PartitionStats", "Partitioner"]
