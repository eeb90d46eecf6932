"""Word delimiter predicates and the compiled byte classes shared with workers."""

import re
import string
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TypeAlias

DelimiterPredicate: TypeAlias = Callable[[int], bool]

# C isspace() includes vertical tab (0x0B); string.whitespace already has it.
_WHITESPACE = frozenset(string.whitespace.encode("ascii"))
_PUNCTUATION = frozenset(string.punctuation.encode("ascii"))


def is_word_delimiter(byte: int) -> bool:
    """Match C's isspace(c) || ispunct(c) for a single byte value."""
    return byte in _WHITESPACE or byte in _PUNCTUATION


def is_whitespace(byte: int) -> bool:
    """Split on ASCII whitespace only."""
    return byte in _WHITESPACE


def _byte_class(values: bytes) -> bytes:
    # \xHH for every member keeps NUL, ']' and '\' literal inside the class.
    return b"".join(b"\\x%02x" % value for value in values)


@dataclass(frozen=True, slots=True)
class DelimiterTable:
    """
    A delimiter predicate evaluated once for all 256 byte values.

    A pure predicate is fully described by its answers on 0..255, so the
    table can stand in for it everywhere. It is immutable and picklable,
    and its compiled patterns scan bytes, bytearray, mmap and memoryview
    buffers in place.
    """

    delimiter_bytes: bytes
    delimiter_pattern: re.Pattern[bytes]
    token_pattern: re.Pattern[bytes]

    @classmethod
    def from_predicate(cls, predicate: DelimiterPredicate) -> "DelimiterTable":
        delimiter_bytes = bytes(b for b in range(256) if predicate(b))
        if not delimiter_bytes:
            # Never matches / matches everything.
            return cls(b"", re.compile(rb"(?!)"), re.compile(rb"[\x00-\xff]+"))

        byte_class = _byte_class(delimiter_bytes)
        return cls(
            delimiter_bytes,
            re.compile(rb"[" + byte_class + rb"]"),
            re.compile(rb"[^" + byte_class + rb"]+"),
        )

    def find(self, buffer, start: int, end: int | None = None) -> int:
        """Return the index of the first delimiter in buffer[start:end], or -1."""
        if end is None:
            end = len(buffer)
        match = self.delimiter_pattern.search(buffer, start, end)
        if match is None:
            return -1
        return match.start()

    def iter_tokens(self, buffer, start: int = 0, end: int | None = None) -> Iterator[bytes]:
        """Yield maximal runs of non-delimiter bytes inside buffer[start:end]."""
        if end is None:
            end = len(buffer)
        for match in self.token_pattern.finditer(buffer, start, end):
            yield match.group()
