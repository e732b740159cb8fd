"""
In-memory input surface driving the incremental matcher.

InputBuffer plays the part of a text editor: it owns the text, the cursor,
the enabled flag and the direction, feeds each keystroke to the engine and
applies the resulting edit in one step. Persistence of the flag and
direction is left to the caller.

Example:
    >>> from cyrillic_translit.session import InputBuffer
    >>> buf = InputBuffer()
    >>> for char in "shchi":
    ...     _ = buf.type_char(char)
    >>> buf.text
    'щи'
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from cyrillic_translit._engine import (
    Transliterator,
    should_reverse_transliterate,
    should_transliterate,
)

__all__ = ["Direction", "Edit", "InputBuffer"]

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    LATIN_TO_CYRILLIC = "latin-to-cyrillic"
    CYRILLIC_TO_LATIN = "cyrillic-to-latin"


@dataclass(frozen=True)
class Edit:
    """Delete `delete` chars ending at `position`, then insert `insert` there."""

    position: int
    delete: int
    insert: str


class InputBuffer:
    """
    Text buffer with a cursor that transliterates as characters are typed.

    Args:
        text: Initial buffer content (kept as is).
        direction: Direction enum or its string value.
        enabled: When False, keystrokes are inserted verbatim.
        transliterator: Engine to use; defaults to the default grammar.
    """

    def __init__(
        self,
        text: str = "",
        *,
        direction: Union[Direction, str] = Direction.LATIN_TO_CYRILLIC,
        enabled: bool = True,
        transliterator: Optional[Transliterator] = None,
    ) -> None:
        self.text = text
        self.cursor = len(text)
        self.direction = Direction(direction)
        self.enabled = enabled
        self._engine = transliterator or Transliterator()

    def __repr__(self) -> str:
        return (
            f"InputBuffer(text={self.text!r}, cursor={self.cursor}, "
            f"direction={self.direction.value!r}, enabled={self.enabled})"
        )

    def _apply(self, edit: Edit) -> Edit:
        start = edit.position - edit.delete
        self.text = self.text[:start] + edit.insert + self.text[edit.position:]
        self.cursor = start + len(edit.insert)
        return edit

    def _convert(self, text: str) -> str:
        if self.direction is Direction.LATIN_TO_CYRILLIC:
            return self._engine.transliterate(text)
        return self._engine.reverse_transliterate(text)

    def type_char(self, char: str) -> Edit:
        """
        Insert one typed character at the cursor, revising earlier output if needed.

        Returns:
            The edit that was applied

        Raises:
            ValueError: If `char` is not exactly one character
        """
        if len(char) != 1:
            raise ValueError(f"type_char expects a single character, got {char!r}")

        position = self.cursor
        if not self.enabled:
            return self._apply(Edit(position, 0, char))

        if self.direction is Direction.CYRILLIC_TO_LATIN:
            if should_reverse_transliterate(char):
                char = self._engine.reverse_transliterate(char)
            return self._apply(Edit(position, 0, char))

        if not should_transliterate(char):
            return self._apply(Edit(position, 0, char))

        revision = self._engine.try_multi_char_translit(self.text[:position], char)
        if revision is None:
            return self._apply(Edit(position, 0, self._engine.transliterate(char)))

        logger.debug(
            "Revising %r + %r -> delete %d, insert %r",
            self.text[max(0, position - revision.chars_to_delete):position],
            char,
            revision.chars_to_delete,
            revision.result,
        )
        return self._apply(Edit(position, revision.chars_to_delete, revision.result))

    def paste(self, text: str) -> Edit:
        """Insert a block of text at the cursor, converted in one batch."""
        if self.enabled:
            text = self._convert(text)
        return self._apply(Edit(self.cursor, 0, text))

    def move_cursor(self, position: int) -> None:
        if not 0 <= position <= len(self.text):
            raise ValueError(
                f"Cursor position {position} out of range 0..{len(self.text)}"
            )
        self.cursor = position

    def toggle(self) -> bool:
        """Flip the enabled flag and return the new value."""
        self.enabled = not self.enabled
        return self.enabled

    def set_direction(self, direction: Union[Direction, str]) -> None:
        """
        Switch direction and re-render the whole buffer in the new script.

        The buffer is converted only when the direction actually changes and
        transliteration is enabled. The cursor moves to the end.
        """
        direction = Direction(direction)
        if direction is self.direction:
            return
        self.direction = direction
        logger.debug("Direction changed to %s", direction.value)
        if self.enabled:
            self.text = self._convert(self.text)
            self.cursor = len(self.text)
