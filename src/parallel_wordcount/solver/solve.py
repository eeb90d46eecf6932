import logging
import mmap
import os
import time
from concurrent.futures import Future, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import BinaryIO

from parallel_wordcount.count import FrequencyTable, count_partition, count_range
from parallel_wordcount.delimiters import DelimiterPredicate, DelimiterTable, is_word_delimiter
from parallel_wordcount.errors import WorkerFailure
from parallel_wordcount.merge import merge_sorted, merge_tables
from parallel_wordcount.partition import Partition, Partitioner, PartitionStats
from parallel_wordcount.reader import map_file
from parallel_wordcount.solver.execution import (
    WC_EXECUTOR_ENV,
    describe_executor,
    get_executor_class,
    is_gil_enabled,
)

logger = logging.getLogger(__name__)

# Set once per worker process by a pool initializer.
_process_buffer = b""
_process_delimiters: DelimiterTable | None = None


def _init_process_worker_from_file(path: str, delimiters: DelimiterTable) -> None:
    """Map the input file read-only in this worker; no buffer bytes cross the pipe."""
    global _process_buffer, _process_delimiters
    with open(path, "rb") as handle:
        # The mapping outlives the handle and lives as long as the process.
        _process_buffer = mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ)
    _process_delimiters = delimiters


def _init_process_worker_from_bytes(buffer: bytes | bytearray, delimiters: DelimiterTable) -> None:
    global _process_buffer, _process_delimiters
    _process_buffer = buffer
    _process_delimiters = delimiters


def _count_in_process(start: int, end: int) -> FrequencyTable:
    return count_range(_process_buffer, start, end, _process_delimiters)


def run(
    buffer,
    thread_count: int,
    is_delimiter: DelimiterPredicate = is_word_delimiter,
    workers: int | None = None,
    executor: str | None = None,
    source_path: str | None = None,
) -> FrequencyTable:
    """
    Count word frequencies in buffer using thread_count parallel partitions.

    Three steps:
    1. Split the buffer into at most thread_count word-aligned partitions
    2. Count each partition independently on the selected executor
    3. Fold each partition's table into the result as it completes

    is_delimiter must be a pure function of one byte value. The buffer is
    only read and must stay alive until this call returns. Workers scan it in
    place between their partition bounds.

    Process workers cannot see the caller's memory. When source_path names
    the file the buffer was mapped from, each worker maps that file itself.
    Otherwise a bytes or bytearray buffer is sent once per worker process,
    and any other buffer type (an mmap or memoryview with no path) is
    counted on threads instead.

    Returns (word, count) pairs sorted by word bytes, each word once.
    Raises WorkerFailure if any partition fails; no partial result is kept.
    """
    if thread_count < 1:
        raise ValueError(f"thread_count must be at least 1, got {thread_count}")

    total_start = time.perf_counter()
    delimiters = DelimiterTable.from_predicate(is_delimiter)

    executor_class = get_executor_class(executor)
    if (
        executor_class is ProcessPoolExecutor
        and source_path is None
        and not isinstance(buffer, (bytes, bytearray))
    ):
        logger.warning(
            "%s buffer without source_path cannot be shared with processes; using threads",
            type(buffer).__name__,
        )
        executor_class = ThreadPoolExecutor
    executor_name = describe_executor(executor_class)

    gil_status = "enabled" if is_gil_enabled() else "disabled"
    workers_desc = str(workers) if workers is not None else f"{thread_count} (one per partition)"
    executor_override = os.environ.get(WC_EXECUTOR_ENV, "")
    override_info = f", WC_EXECUTOR={executor_override}" if executor_override else ""

    logger.info(
        f"Starting: bytes={len(buffer)}, threads={thread_count}, workers={workers_desc}, "
        f"executor={executor_name}, GIL={gil_status}{override_info}"
    )

    # Pass 1: partition on word boundaries.
    t1_start = time.perf_counter()
    partitioner = Partitioner(buffer, thread_count, delimiters)
    partitions = list(partitioner)
    t1 = time.perf_counter() - t1_start

    stats = PartitionStats()
    for partition in partitions:
        stats.add(partition)
        logger.debug("Partition %d: [%d, %d)", partition.index, partition.start, partition.end)

    logger.info(
        "Pass 1 done: %d partitions (approx %d bytes, smallest=%d, largest=%d) in %.2fs",
        stats.partitions,
        partitioner.approx_chunk_size,
        stats.smallest,
        stats.largest,
        t1,
    )

    if not partitions:
        logger.info("Result: no words (total %.2fs)", time.perf_counter() - total_start)
        return []

    # Pass 2: count partitions in parallel and fold results as they arrive.
    t2_start = time.perf_counter()

    if executor_class is None:
        result = _count_serial(buffer, partitions, delimiters)
    else:
        max_workers = workers if workers is not None else len(partitions)
        if executor_class is ProcessPoolExecutor:
            # Tasks carry only bounds; the buffer reaches each process once.
            if source_path is not None:
                initializer, initargs = _init_process_worker_from_file, (source_path, delimiters)
            else:
                initializer, initargs = _init_process_worker_from_bytes, (buffer, delimiters)
            pool = ProcessPoolExecutor(
                max_workers=max_workers,
                initializer=initializer,
                initargs=initargs,
            )
            with pool:
                futures = {
                    pool.submit(_count_in_process, p.start, p.end): p for p in partitions
                }
                result = _fold_completed(futures)
        else:
            with executor_class(max_workers=max_workers) as pool:
                futures = {
                    pool.submit(count_partition, buffer, p, delimiters): p for p in partitions
                }
                result = _fold_completed(futures)

    t2 = time.perf_counter() - t2_start
    logger.info("Pass 2 done: %d partitions counted and merged in %.2fs", len(partitions), t2)

    total_passes = t1 + t2
    if total_passes > 0:
        logger.debug(
            "Timing breakdown: Pass1=%.2fs (%.0f%%), Pass2=%.2fs (%.0f%%)",
            t1,
            100 * t1 / total_passes,
            t2,
            100 * t2 / total_passes,
        )

    total_time = time.perf_counter() - total_start
    logger.info("Result: %d distinct words (total %.2fs)", len(result), total_time)
    return result


def _count_serial(
    buffer,
    partitions: list[Partition],
    delimiters: DelimiterTable,
) -> FrequencyTable:
    result: FrequencyTable = []
    for partition in partitions:
        try:
            table = count_partition(buffer, partition, delimiters)
        except Exception as exc:
            raise WorkerFailure(partition) from exc
        result = list(merge_sorted(result, table))
    return result


def _fold_completed(futures: dict[Future, Partition]) -> FrequencyTable:
    """Merge worker tables in completion order; any failure aborts the run."""
    result: FrequencyTable = []
    for future in as_completed(futures):
        partition = futures[future]
        try:
            table = future.result()
        except Exception as exc:
            _cancel_pending(futures)
            raise WorkerFailure(partition) from exc

        logger.debug("Partition %d counted: %d distinct words", partition.index, len(table))
        result = list(merge_sorted(result, table))
    return result


def _cancel_pending(futures: dict[Future, Partition]) -> None:
    for future in futures:
        future.cancel()


def count_files(
    input_paths: list[str],
    thread_count: int,
    executor: str | None = None,
) -> FrequencyTable:
    """Count each file separately, then merge the per-file tables."""
    tables = []
    for input_path in input_paths:
        logger.info("Counting %s", input_path)
        with map_file(input_path) as buffer:
            tables.append(
                run(buffer, thread_count, executor=executor, source_path=input_path)
            )
    return merge_tables(tables)


def write_results(results: FrequencyTable, stream: BinaryIO) -> None:
    """Write one ``word=count`` line per entry as raw bytes."""
    for word, count in results:
        stream.write(word + b"=" + str(count).encode("ascii") + b"\n")
