#!/usr/bin/env python3
"""
Parallel Word Count - count word frequencies in a file using N threads.

Standalone entry point around the installed parallel_wordcount package
(`pip install -e .` first).

Usage: my_solution.py FILE NTHREADS
"""

import argparse
import sys

from parallel_wordcount.cli import main as cli_main


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="my_solution",
        description="Count word frequencies in a file using parallel partitions.",
    )

    parser.add_argument("input_file", help="Path to the input file")
    parser.add_argument("threads", type=int, help="Number of threads (>= 1)")

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser


def main() -> int:
    """Main entry point."""
    args = create_parser().parse_args()
    return cli_main(
        [args.input_file, "--threads", str(args.threads), "--log-level", args.log_level]
    )


if __name__ == "__main__":
    sys.exit(main())
