"""Tests for the issue message length policy."""

import pytest

from codeissue.message import (
    MAX_BYTES_PER_CHAR,
    MESSAGE_MAX_LENGTH,
    MESSAGE_STORAGE_BYTES,
    max_message_length,
    truncate_message,
)


def test_default_budget_is_derived_from_storage() -> None:
    assert MESSAGE_STORAGE_BYTES == 4000
    assert MAX_BYTES_PER_CHAR == 3
    assert MESSAGE_MAX_LENGTH == 1333


def test_budget_recomputed_for_other_storage() -> None:
    assert max_message_length(8000, 3) == 2666
    assert max_message_length(4000, 4) == 1000


def test_invalid_budget_raises() -> None:
    with pytest.raises(ValueError, match="Invalid message storage budget"):
        max_message_length(4000, 0)


def test_truncate_message() -> None:
    assert truncate_message(None) is None
    assert truncate_message("") == ""
    assert truncate_message("short") == "short"
    assert truncate_message("x" * 5000) == "x" * 1333
    assert truncate_message("abcdef", max_length=3) == "abc"


def test_truncated_text_fits_storage_in_utf8() -> None:
    """Worst-case BMP characters still fit the byte budget after truncation."""
    message = truncate_message("€" * 3000)
    assert len(message.encode("utf-8")) <= MESSAGE_STORAGE_BYTES
