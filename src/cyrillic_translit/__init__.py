"""
cyrillic-translit: Latin <-> Cyrillic transliteration.

Batch conversion in both directions plus an incremental matcher for
transliterating as the user types.

Basic usage:
    >>> from cyrillic_translit import transliterate, reverse_transliterate
    >>> transliterate("Zdravstvuj, mir")
    'Здравствуй, мир'
    >>> reverse_transliterate("щука")
    'shchuka'

Incremental usage:
    >>> from cyrillic_translit import try_multi_char_translit
    >>> try_multi_char_translit("с", "h")
    Revision(result='ш', chars_to_delete=1)

    >>> from cyrillic_translit import InputBuffer
    >>> buf = InputBuffer()
    >>> for char in "zhuk":
    ...     _ = buf.type_char(char)
    >>> buf.text
    'жук'
"""

import logging

from cyrillic_translit._tables import (
    CYRILLIC_TO_LATIN,
    MULTI_CHAR_MAP,
    SINGLE_CHAR_MAP,
    GrammarError,
    GrammarTables,
    build_tables,
)
from cyrillic_translit._engine import (
    MAX_LOOKBACK,
    Revision,
    Transliterator,
    can_form_multi_char,
    get_latin_from_cyrillic,
    reverse_transliterate,
    should_reverse_transliterate,
    should_transliterate,
    transliterate,
    try_multi_char_translit,
)
from cyrillic_translit.session import Direction, Edit, InputBuffer
from cyrillic_translit.stats import TextStats, text_stats

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "transliterate",
    "reverse_transliterate",
    "should_transliterate",
    "should_reverse_transliterate",
    "get_latin_from_cyrillic",
    "can_form_multi_char",
    "try_multi_char_translit",
    "Transliterator",
    "Revision",
    "MAX_LOOKBACK",
    "GrammarError",
    "GrammarTables",
    "build_tables",
    "MULTI_CHAR_MAP",
    "SINGLE_CHAR_MAP",
    "CYRILLIC_TO_LATIN",
    "Direction",
    "Edit",
    "InputBuffer",
    "TextStats",
    "text_stats",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "CyrillicTransliteratorComponent":
        try:
            from cyrillic_translit.spacy import CyrillicTransliteratorComponent
            return CyrillicTransliteratorComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install cyrillic-translit[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
