"""Word tokenizing and per-partition frequency counting."""

from parallel_wordcount.count.process_partition import count_partition, count_range
from parallel_wordcount.count.table import build_frequency_table
from parallel_wordcount.count.tokenize import iter_tokens
from parallel_wordcount.count.types import FrequencyTable, WordCount

__all__ = [
    "FrequencyTable",
    "WordCount",
    "build_frequency_table",
    "count_partition",
    "count_range",
    "iter_tokens",
]
