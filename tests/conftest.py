"""Shared fixtures for cyrillic-translit tests."""

from typing import Callable

import pytest

from cyrillic_translit import InputBuffer, Transliterator


@pytest.fixture
def transliterator() -> Transliterator:
    """Return a transliterator over the default grammar."""
    return Transliterator()


@pytest.fixture
def buffer() -> InputBuffer:
    """Return an empty Latin -> Cyrillic input buffer."""
    return InputBuffer()


@pytest.fixture
def type_text() -> Callable[[str], str]:
    """Return a helper that types text key by key and returns the buffer."""

    def _type(text: str) -> str:
        buf = InputBuffer()
        for char in text:
            buf.type_char(char)
        return buf.text

    return _type
