"""Per-partition counting, the unit of work handed to each worker."""

from parallel_wordcount.count.table import build_frequency_table
from parallel_wordcount.count.tokenize import iter_tokens
from parallel_wordcount.count.types import FrequencyTable
from parallel_wordcount.delimiters import DelimiterTable
from parallel_wordcount.partition.types import Partition


def count_range(buffer, start: int, end: int, delimiters: DelimiterTable) -> FrequencyTable:
    """Count the words in buffer[start:end] without slicing the buffer."""
    return build_frequency_table(iter_tokens(buffer, delimiters, start, end))


def count_partition(buffer, partition: Partition, delimiters: DelimiterTable) -> FrequencyTable:
    """
    Count the words inside one partition of the shared buffer.

    The buffer is only read. Partition boundaries sit on delimiter bytes, so
    every token found here is a whole word of the full buffer.
    """
    return count_range(buffer, partition.start, partition.end, delimiters)
