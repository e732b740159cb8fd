"""
Simple text statistics for transliterated output.

Example:
    >>> from cyrillic_translit.stats import text_stats
    >>> text_stats("Привет, мир! Как дела?").word_count
    4
"""

import re
from dataclasses import dataclass

__all__ = ["TextStats", "text_stats"]

_WHITESPACE = re.compile(r"\s")
_WORD_SPLIT = re.compile(r"\s+")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")


@dataclass(frozen=True)
class TextStats:
    char_count: int
    char_count_no_spaces: int
    word_count: int
    sentence_count: int
    paragraph_count: int
    line_count: int


def _count_nonblank(parts: list[str]) -> int:
    return sum(1 for part in parts if part.strip())


def text_stats(text: str) -> TextStats:
    """
    Count characters, words, sentences, paragraphs and lines.

    Words are whitespace-separated, sentences end at runs of . ! ?,
    paragraphs are separated by blank lines.

    Args:
        text: Any text

    Returns:
        TextStats for `text`
    """
    trimmed = text.strip()
    if trimmed:
        words = _count_nonblank(_WORD_SPLIT.split(trimmed))
        sentences = _count_nonblank(_SENTENCE_SPLIT.split(trimmed))
        paragraphs = _count_nonblank(_PARAGRAPH_SPLIT.split(trimmed)) or 1
    else:
        words = sentences = paragraphs = 0

    return TextStats(
        char_count=len(text),
        char_count_no_spaces=len(_WHITESPACE.sub("", text)),
        word_count=words,
        sentence_count=sentences,
        paragraph_count=paragraphs,
        line_count=text.count("\n") + 1 if text else 0,
    )
