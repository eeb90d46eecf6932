"""Merging of sorted frequency tables."""

from parallel_wordcount.merge.sorted_merge import merge_sorted, merge_tables

__all__ = ["merge_sorted", "merge_tables"]
