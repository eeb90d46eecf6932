"""Command-line interface for parallel word count."""

import argparse
import logging
import os
import sys

from parallel_wordcount.errors import WordCountError
from parallel_wordcount.solver.execution import EXECUTOR_CHOICES, resolve_policy
from parallel_wordcount.solver.solve import count_files, write_results

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="parallel-wordcount",
        description="Count word frequencies using parallel word-aligned partitions.",
    )

    parser.add_argument(
        "input_files",
        nargs="+",
        help="Input files; counts across all files are summed",
    )

    parser.add_argument(
        "--threads", "-t",
        type=int,
        default=os.cpu_count() or 1,
        help="Number of partitions counted in parallel (default: CPU count)",
    )

    parser.add_argument(
        "--executor",
        choices=["auto", *EXECUTOR_CHOICES],
        default="auto",
        help="Worker pool type (default: auto, or $WC_EXECUTOR if set)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.threads < 1:
        parser.error(f"--threads must be at least 1, got {args.threads}")

    try:
        resolve_policy(args.executor)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        results = count_files(
            input_paths=args.input_files,
            thread_count=args.threads,
            executor=args.executor,
        )
    except OSError as exc:
        logger.error("Cannot read input: %s", exc)
        return 2
    except WordCountError as exc:
        logger.error("%s (cause: %r)", exc, exc.__cause__)
        return 1

    try:
        write_results(results, sys.stdout.buffer)
        sys.stdout.buffer.flush()
    except BrokenPipeError:
        # Reader closed early (e.g. `| head`); keep the exit-time flush quiet.
        _discard_stdout()
        return 1

    return 0


def _discard_stdout() -> None:
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


if __name__ == "__main__":
    sys.exit(main())
