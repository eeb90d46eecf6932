"""Parallel orchestration of partition, count and merge."""

from parallel_wordcount.solver.solve import count_files, run, write_results

__all__ = ["count_files", "run", "write_results"]
