"""
Transliteration engine: forward, incremental and reverse.

The forward direction is a longest-match-first scan over the grammar. The
incremental matcher handles typing: each Latin keystroke is first committed
as its shortest match, and a later keystroke may prove that a longer entry
was meant (s -> с, then h -> ш). To detect this the matcher turns the last
few committed Cyrillic chars back into Latin and re-matches them together
with the new char.

Example:
    >>> from cyrillic_translit import transliterate, try_multi_char_translit
    >>> transliterate("shchuka")
    'щука'
    >>> try_multi_char_translit("с", "h")
    Revision(result='ш', chars_to_delete=1)
"""

import string
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional

from cyrillic_translit._tables import DEFAULT_TABLES, GrammarTables, build_tables

__all__ = [
    "Transliterator",
    "Revision",
    "MAX_LOOKBACK",
    "transliterate",
    "reverse_transliterate",
    "should_transliterate",
    "should_reverse_transliterate",
    "get_latin_from_cyrillic",
    "can_form_multi_char",
    "try_multi_char_translit",
]

# Longest key is 4 Latin chars: at most 3 committed chars plus the new one.
MAX_LOOKBACK = 3


@dataclass(frozen=True)
class Revision:
    """Delete the last `chars_to_delete` committed chars, then append `result`."""

    result: str
    chars_to_delete: int


# =============================================================================
# Character Classification
# =============================================================================

_TRANSLITERABLE = frozenset(string.ascii_letters + "'\"")

_CYRILLIC_LETTERS = frozenset(
    "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"
    "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"
)


def should_transliterate(char: str) -> bool:
    """True iff `char` is an ASCII Latin letter or one of the quotes ' and "."""
    return char in _TRANSLITERABLE


def should_reverse_transliterate(char: str) -> bool:
    """True iff `char` is a Russian Cyrillic letter (ё/Ё included)."""
    return char in _CYRILLIC_LETTERS


def _case_variant(fragment: str) -> str:
    """Spell a Latin fragment the way its case triple would declare it."""
    if fragment.isupper():
        return fragment
    if fragment[0].isupper():
        return fragment[0] + fragment[1:].lower()
    return fragment.lower()


# =============================================================================
# Engine
# =============================================================================


class Transliterator:
    """
    Latin <-> Cyrillic transliterator over one immutable grammar.

    Instances hold no mutable state, so one instance can be shared freely.
    """

    def __init__(
        self,
        multi_char_map: Optional[Mapping[str, str]] = None,
        single_char_map: Optional[Mapping[str, str]] = None,
        cyrillic_to_latin_map: Optional[Mapping[str, str]] = None,
        *,
        tables: Optional[GrammarTables] = None,
    ) -> None:
        """
        Initialize from explicit tables or the default grammar.

        Args:
            multi_char_map: Multi-entry table (2+ Latin chars per key).
            single_char_map: Single-entry table (1 Latin char per key).
            cyrillic_to_latin_map: Direct table for reverse transliteration.
            tables: Prebuilt GrammarTables; overrides the three maps.

        Raises:
            GrammarError: If the supplied maps are inconsistent
        """
        if tables is None:
            maps = (multi_char_map, single_char_map, cyrillic_to_latin_map)
            if all(m is None for m in maps):
                tables = DEFAULT_TABLES
            else:
                tables = build_tables(*maps)
        self.tables = tables

    # -------------------------------------------------------------------------
    # Batch
    # -------------------------------------------------------------------------

    def transliterate(self, text: str) -> str:
        """
        Transliterate Latin text to Cyrillic, longest match first.

        Matching is case-sensitive per entry. Characters without a mapping
        pass through unchanged.

        Example:
            >>> Transliterator().transliterate("Privet, mir!")
            'Привет, мир!'
        """
        multi = self.tables.multi
        single = self.tables.single
        keys = self.tables.multi_keys

        result = []
        i = 0
        while i < len(text):
            for key in keys:
                if text.startswith(key, i):
                    result.append(multi[key])
                    i += len(key)
                    break
            else:
                char = text[i]
                result.append(single.get(char, char))
                i += 1
        return "".join(result)

    def reverse_transliterate(self, text: str) -> str:
        """
        Transliterate Cyrillic text to Latin via the direct table.

        Example:
            >>> Transliterator().reverse_transliterate("Щука")
            'Shchuka'
        """
        table = self.tables.cyrillic_to_latin
        return "".join(table.get(char, char) for char in text)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_latin_from_cyrillic(self, char: str) -> Optional[str]:
        """Return the single Latin char that produces `char`, if any."""
        return self.tables.reverse_single.get(char)

    def can_form_multi_char(self, prev_cyrillic: str, new_latin: str) -> bool:
        """
        Cheap pre-check: can `new_latin` after `prev_cyrillic` start a multi-entry?

        Example:
            >>> Transliterator().can_form_multi_char("с", "h")
            True
            >>> Transliterator().can_form_multi_char("а", "h")
            False
        """
        seconds = self.tables.continuations.get(prev_cyrillic)
        if not seconds:
            return False
        return new_latin in seconds or new_latin.lower() in seconds

    # -------------------------------------------------------------------------
    # Incremental
    # -------------------------------------------------------------------------

    def _reconstruct(self, window: str, use_multi: bool) -> Optional[str]:
        """Recover the Latin that produced `window`, or None if any char is unknown."""
        reverse_single = self.tables.reverse_single
        reverse_multi = self.tables.reverse_multi
        parts = []
        for char in window:
            latin = reverse_multi.get(char) if use_multi else None
            if latin is None:
                latin = reverse_single.get(char)
            if latin is None:
                return None
            parts.append(latin)
        return "".join(parts)

    def _reconstructions(self, window: str) -> Iterator[str]:
        """Yield the single-char reconstruction, then the multi-char one if different."""
        single = self._reconstruct(window, use_multi=False)
        if single is not None:
            yield single
        multi = self._reconstruct(window, use_multi=True)
        if multi is not None and multi != single:
            yield multi

    def _resolve(self, fragment: str, key: str) -> str:
        """Cyrillic value for `fragment`, a case-insensitive spelling of `key`."""
        multi = self.tables.multi
        if fragment in multi:
            return multi[fragment]
        return multi.get(_case_variant(fragment), multi[key])

    def _match(self, combined: str) -> Optional[str]:
        """Rewrite `combined` through the first matching key, longest first."""
        folded = combined.lower()
        for key in self.tables.multi_keys:
            size = len(key)
            if size > len(combined):
                continue
            if not folded.startswith(key.lower()):
                continue
            head = self._resolve(combined[:size], key)
            if size == len(combined):
                return head
            return head + self.transliterate(combined[size:])
        return None

    def try_multi_char_translit(self, prev_chars: str, new_char: str) -> Optional[Revision]:
        """
        Decide whether `new_char` completes a longer entry with committed output.

        Looks back over the last 3, 2, then 1 committed Cyrillic chars. Each
        window is turned back into Latin (single-char reconstruction first,
        then one preferring multi-char keys) and matched together with
        `new_char`. A reconstruction is used only when it transliterates back
        to the window itself. A candidate that would rewrite the window to
        exactly what appending `new_char` produces is not a revision and is
        skipped.

        Args:
            prev_chars: Cyrillic text already committed before the cursor
            new_char: The Latin char just typed

        Returns:
            Revision to apply, or None when `new_char` should simply be
            transliterated and appended

        Example:
            >>> t = Transliterator()
            >>> t.try_multi_char_translit("шц", "h")
            Revision(result='щ', chars_to_delete=2)
            >>> t.try_multi_char_translit("а", "b") is None
            True
        """
        appended_tail = self.transliterate(new_char)
        for lookback in range(min(MAX_LOOKBACK, len(prev_chars)), 0, -1):
            window = prev_chars[-lookback:]
            for latin in self._reconstructions(window):
                # Only a reconstruction that re-renders to the window is trusted
                if self.transliterate(latin) != window:
                    continue
                result = self._match(latin + new_char)
                if result is None or result == window + appended_tail:
                    continue
                return Revision(result=result, chars_to_delete=lookback)
        return None


# =============================================================================
# Module-level Convenience Functions
# =============================================================================

# Singleton instance for convenience functions
_default_transliterator: Optional[Transliterator] = None


def _get_default() -> Transliterator:
    global _default_transliterator
    if _default_transliterator is None:
        _default_transliterator = Transliterator()
    return _default_transliterator


def transliterate(text: str) -> str:
    """
    Transliterate Latin text to Cyrillic with the default grammar.

    Example:
        >>> transliterate("shch")
        'щ'
    """
    return _get_default().transliterate(text)


def reverse_transliterate(text: str) -> str:
    """
    Transliterate Cyrillic text to Latin with the default grammar.

    Example:
        >>> reverse_transliterate("ёж")
        'yozh'
    """
    return _get_default().reverse_transliterate(text)


def get_latin_from_cyrillic(char: str) -> Optional[str]:
    """Single Latin char producing `char` in the default grammar, if any."""
    return _get_default().get_latin_from_cyrillic(char)


def can_form_multi_char(prev_cyrillic: str, new_latin: str) -> bool:
    """Continuation pre-check with the default grammar; see Transliterator."""
    return _get_default().can_form_multi_char(prev_cyrillic, new_latin)


def try_multi_char_translit(prev_chars: str, new_char: str) -> Optional[Revision]:
    """Incremental matcher with the default grammar; see Transliterator."""
    return _get_default().try_multi_char_translit(prev_chars, new_char)
