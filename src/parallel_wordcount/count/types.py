"""Shared type definitions for word counting."""

from typing import TypeAlias

Word: TypeAlias = bytes
WordCount: TypeAlias = tuple[Word, int]
# Sorted ascending by word, one entry per distinct word, all counts >= 1.
FrequencyTable: TypeAlias = list[WordCount]
