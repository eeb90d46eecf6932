"""Parallel Word Count - word frequencies over word-aligned buffer partitions."""

from parallel_wordcount.delimiters import is_whitespace, is_word_delimiter
from parallel_wordcount.errors import WordCountError, WorkerFailure
from parallel_wordcount.merge import merge_sorted, merge_tables
from parallel_wordcount.solver import count_files, run

__all__ = [
    "WordCountError",
    "WorkerFailure",
    "count_files",
    "is_whitespace",
    "is_word_delimiter",
    "merge_sorted",
    "merge_tables",
    "run",
]
