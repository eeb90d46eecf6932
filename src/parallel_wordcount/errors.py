"""Run-level failures raised by the word counting pipeline."""

from parallel_wordcount.partition.types import Partition


class WordCountError(Exception):
    """Base class for failures that abort a whole counting run."""


class WorkerFailure(WordCountError):
    """A partition could not be counted, so the run has no complete result."""

    def __init__(self, partition: Partition):
        super().__init__(
            f"counting failed for partition {partition.index} "
            f"[{partition.start}, {partition.end})"
        )
        self.partition = partition
