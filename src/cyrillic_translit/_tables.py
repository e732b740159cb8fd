"""
Grammar tables for Latin <-> Cyrillic transliteration.

Holds the default substitution tables and the read-only indices derived
from them. Everything here is built once at import time and never mutated.

Table layout:
    - MULTI_CHAR_MAP: digraphs/trigraphs (2+ Latin chars), one Cyrillic unit each.
      Every entry is declared as a case triple (lower, Title, UPPER).
    - SINGLE_CHAR_MAP: one Latin char -> Cyrillic (usually one char; x -> кс).
    - CYRILLIC_TO_LATIN: direct table for batch reverse transliteration.

Example:
    >>> from cyrillic_translit._tables import DEFAULT_TABLES
    >>> DEFAULT_TABLES.multi_keys[0]
    'shch'
    >>> DEFAULT_TABLES.reverse_single["с"]
    's'
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

__all__ = [
    "GrammarError",
    "GrammarTables",
    "build_tables",
    "MULTI_CHAR_MAP",
    "SINGLE_CHAR_MAP",
    "CYRILLIC_TO_LATIN",
    "DEFAULT_TABLES",
]

logger = logging.getLogger(__name__)


# =============================================================================
# Default Tables
# =============================================================================

# Declaration order is significant: equal-length keys are tried in this order.
MULTI_CHAR_MAP: dict[str, str] = {
    "shch": "щ", "Shch": "Щ", "SHCH": "Щ",
    "sh": "ш", "Sh": "Ш", "SH": "Ш",
    "ch": "ч", "Ch": "Ч", "CH": "Ч",
    "zh": "ж", "Zh": "Ж", "ZH": "Ж",
    "ts": "ц", "Ts": "Ц", "TS": "Ц",
    "yu": "ю", "Yu": "Ю", "YU": "Ю",
    "ya": "я", "Ya": "Я", "YA": "Я",
    "yo": "ё", "Yo": "Ё", "YO": "Ё",
    "ye": "е", "Ye": "Е", "YE": "Е",
    "kh": "х", "Kh": "Х", "KH": "Х",
    "ja": "я", "Ja": "Я", "JA": "Я",
    "ju": "ю", "Ju": "Ю", "JU": "Ю",
    "je": "э", "Je": "Э", "JE": "Э",
}

SINGLE_CHAR_MAP: dict[str, str] = {
    # Lowercase
    "a": "а", "b": "б", "v": "в", "g": "г", "d": "д",
    "e": "е", "z": "з", "i": "и", "j": "й", "k": "к",
    "l": "л", "m": "м", "n": "н", "o": "о", "p": "п",
    "r": "р", "s": "с", "t": "т", "u": "у", "f": "ф",
    "h": "х", "c": "ц", "w": "в", "x": "кс", "y": "ы",
    # Uppercase
    "A": "А", "B": "Б", "V": "В", "G": "Г", "D": "Д",
    "E": "Е", "Z": "З", "I": "И", "J": "Й", "K": "К",
    "L": "Л", "M": "М", "N": "Н", "O": "О", "P": "П",
    "R": "Р", "S": "С", "T": "Т", "U": "У", "F": "Ф",
    "H": "Х", "C": "Ц", "W": "В", "X": "Кс", "Y": "Ы",
    # Soft and hard signs
    "'": "ь",
    '"': "ъ",
}

# One canonical Latin spelling per Cyrillic letter. Letters reachable from a
# single Latin char use that char, so c/h stay distinct from ts/kh.
CYRILLIC_TO_LATIN: dict[str, str] = {
    # Lowercase
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e",
    "ё": "yo", "ж": "zh", "з": "z", "и": "i", "й": "j", "к": "k",
    "л": "l", "м": "m", "н": "n", "о": "o", "п": "p", "р": "r",
    "с": "s", "т": "t", "у": "u", "ф": "f", "х": "h", "ц": "c",
    "ч": "ch", "ш": "sh", "щ": "shch", "ъ": '"', "ы": "y", "ь": "'",
    "э": "je", "ю": "yu", "я": "ya",
    # Uppercase
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D", "Е": "E",
    "Ё": "Yo", "Ж": "Zh", "З": "Z", "И": "I", "Й": "J", "К": "K",
    "Л": "L", "М": "M", "Н": "N", "О": "O", "П": "P", "Р": "R",
    "С": "S", "Т": "T", "У": "U", "Ф": "F", "Х": "H", "Ц": "C",
    "Ч": "Ch", "Ш": "Sh", "Щ": "Shch", "Ъ": '"', "Ы": "Y", "Ь": "'",
    "Э": "Je", "Ю": "Yu", "Я": "Ya",
}


# =============================================================================
# Derived Tables
# =============================================================================


class GrammarError(ValueError):
    """Raised when a grammar table is internally inconsistent."""


@dataclass(frozen=True)
class GrammarTables:
    """
    Immutable grammar plus every index derived from it.

    Attributes:
        multi: Multi-entry table (Latin sequence -> Cyrillic).
        single: Single-entry table (Latin char -> Cyrillic).
        cyrillic_to_latin: Direct table used by batch reverse transliteration.
        multi_keys: Multi-entry keys, length descending, declaration order on ties.
        reverse_single: Cyrillic char -> Latin char, from single entries whose
            Cyrillic value is exactly one char.
        reverse_multi: Cyrillic char -> shortest multi-entry key producing it,
            only for chars no single entry produces.
        continuations: Cyrillic form of a multi-entry's first Latin char ->
            Latin chars that may follow it inside a multi-entry.
    """

    multi: Mapping[str, str]
    single: Mapping[str, str]
    cyrillic_to_latin: Mapping[str, str]
    multi_keys: tuple[str, ...]
    reverse_single: Mapping[str, str]
    reverse_multi: Mapping[str, str]
    continuations: Mapping[str, tuple[str, ...]]


def _validate(multi: Mapping[str, str], single: Mapping[str, str]) -> None:
    """Fail fast on tables that would silently break the derived indices."""
    for latin, cyrillic in single.items():
        if len(latin) != 1:
            raise GrammarError(
                f"Single-char entry must have a 1-char key, got {latin!r}"
            )
        if not cyrillic:
            raise GrammarError(f"Single-char entry {latin!r} maps to empty string")

    for latin, cyrillic in multi.items():
        if len(latin) < 2:
            raise GrammarError(
                f"Multi-char entry must have a key of 2+ chars, got {latin!r}"
            )
        if not cyrillic:
            raise GrammarError(f"Multi-char entry {latin!r} maps to empty string")
        if latin[0] not in single:
            raise GrammarError(
                f"Multi-char entry {latin!r} starts with {latin[0]!r}, "
                "which has no single-char mapping"
            )


def _build_reverse_multi(
    multi: Mapping[str, str], reverse_single: Mapping[str, str]
) -> dict[str, str]:
    reverse: dict[str, str] = {}
    for latin, cyrillic in multi.items():
        if len(cyrillic) != 1 or cyrillic in reverse_single:
            continue
        # Shorter key wins; first-declared wins among equals
        current = reverse.get(cyrillic)
        if current is None or len(latin) < len(current):
            reverse[cyrillic] = latin
    return reverse


def _build_continuations(
    multi: Mapping[str, str], single: Mapping[str, str]
) -> dict[str, tuple[str, ...]]:
    continuations: dict[str, list[str]] = {}
    for latin in multi:
        first_cyrillic = single[latin[0]]
        seconds = continuations.setdefault(first_cyrillic, [])
        if latin[1] not in seconds:
            seconds.append(latin[1])
    return {k: tuple(v) for k, v in continuations.items()}


def build_tables(
    multi: Optional[Mapping[str, str]] = None,
    single: Optional[Mapping[str, str]] = None,
    cyrillic_to_latin: Optional[Mapping[str, str]] = None,
) -> GrammarTables:
    """
    Validate a grammar and derive its lookup indices.

    Args:
        multi: Multi-entry table. Defaults to MULTI_CHAR_MAP.
        single: Single-entry table. Defaults to SINGLE_CHAR_MAP.
        cyrillic_to_latin: Direct reverse table. Defaults to CYRILLIC_TO_LATIN.

    Returns:
        Frozen GrammarTables instance

    Raises:
        GrammarError: If the tables are inconsistent (see _validate)
    """
    multi = dict(MULTI_CHAR_MAP if multi is None else multi)
    single = dict(SINGLE_CHAR_MAP if single is None else single)
    cyrillic_to_latin = dict(
        CYRILLIC_TO_LATIN if cyrillic_to_latin is None else cyrillic_to_latin
    )

    _validate(multi, single)

    # sorted() is stable, so declaration order survives within a length
    multi_keys = tuple(sorted(multi, key=len, reverse=True))

    reverse_single: dict[str, str] = {}
    for latin, cyrillic in single.items():
        if len(cyrillic) == 1 and cyrillic not in reverse_single:
            reverse_single[cyrillic] = latin

    reverse_multi = _build_reverse_multi(multi, reverse_single)
    continuations = _build_continuations(multi, single)

    logger.debug(
        "Built grammar: %d multi-entries, %d single-entries, "
        "%d reverse-single, %d reverse-multi, %d continuation starters",
        len(multi),
        len(single),
        len(reverse_single),
        len(reverse_multi),
        len(continuations),
    )

    return GrammarTables(
        multi=MappingProxyType(multi),
        single=MappingProxyType(single),
        cyrillic_to_latin=MappingProxyType(cyrillic_to_latin),
        multi_keys=multi_keys,
        reverse_single=MappingProxyType(reverse_single),
        reverse_multi=MappingProxyType(reverse_multi),
        continuations=MappingProxyType(continuations),
    )


DEFAULT_TABLES = build_tables()
