"""Tests for tokenizing helpers."""

from parallel_wordcount.count.tokenize import iter_tokens
from parallel_wordcount.delimiters import DelimiterTable, is_word_delimiter

DELIMS = DelimiterTable.from_predicate(is_word_delimiter)


def test_iter_tokens_splits_on_delimiter_runs() -> None:
    tokens = list(iter_tokens(b"  The cat, the\tdog!\n", DELIMS))
    assert tokens == [b"The", b"cat", b"the", b"dog"]


def test_iter_tokens_is_byte_exact() -> None:
    tokens = list(iter_tokens("café Café".encode(), DELIMS))
    assert tokens == ["café".encode(), "Café".encode()]


def test_iter_tokens_empty_and_delimiter_only() -> None:
    assert list(iter_tokens(b"", DELIMS)) == []
    assert list(iter_tokens(b" .,; ", DELIMS)) == []


def test_iter_tokens_within_range() -> None:
    buffer = b"one two three"
    assert list(iter_tokens(buffer, DELIMS, 3, 7)) == [b"two"]
    assert list(iter_tokens(buffer, DELIMS, 7)) == [b"three"]
