"""Tokenizing utilities for byte ranges."""

from collections.abc import Iterator

from parallel_wordcount.count.types import Word
from parallel_wordcount.delimiters import DelimiterTable


def iter_tokens(
    buffer,
    delimiters: DelimiterTable,
    start: int = 0,
    end: int | None = None,
) -> Iterator[Word]:
    """
    Yield maximal runs of non-delimiter bytes from buffer[start:end].

    The buffer is scanned in place; only the tokens themselves become new
    bytes objects. Consecutive delimiters and delimiters at either edge
    produce no token. Tokens are compared byte for byte; nothing is
    case-folded or decoded.
    """
    yield from delimiters.iter_tokens(buffer, start, end)
