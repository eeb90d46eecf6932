"""Frequency table construction."""

from collections import Counter
from collections.abc import Iterable

from parallel_wordcount.count.types import FrequencyTable, Word


def build_frequency_table(tokens: Iterable[Word]) -> FrequencyTable:
    """Count tokens and return (word, count) pairs sorted by word bytes."""
    counts = Counter(tokens)
    return sorted(counts.items())
