"""Input provider: read-only memory mapping of input files."""

import mmap
import os
from collections.abc import Iterator
from contextlib import contextmanager


@contextmanager
def map_file(path: str) -> Iterator[bytes | mmap.mmap]:
    """
    Map a file read-only for the duration of the block.

    Empty files cannot be mapped, so they yield an empty bytes object.
    The mapping must not be used after the block exits.
    """
    with open(path, "rb") as handle:
        if os.fstat(handle.fileno()).st_size == 0:
            yield b""
            return

        with mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ) as mapped:
            yield mapped
