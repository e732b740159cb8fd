"""
spaCy integration for cyrillic-translit.

Provides a pipeline component that transliterates documents and tokens.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("xx")
    >>> nlp.add_pipe("cyrillic_transliterator")
    >>> doc = nlp("Privet, mir")
    >>> doc._.transliterated
    'Привет, мир'
"""

from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from cyrillic_translit._engine import Transliterator
from cyrillic_translit.session import Direction

__all__ = [
    "CyrillicTransliteratorComponent",
    "create_cyrillic_transliterator",
    "get_transliterator_pipe",
]


@Language.factory(
    "cyrillic_transliterator",
    default_config={"direction": Direction.LATIN_TO_CYRILLIC.value},
    assigns=["doc._.transliterated", "token._.transliterated"],
)
def create_cyrillic_transliterator(
    nlp: Language,
    name: str,
    direction: str = Direction.LATIN_TO_CYRILLIC.value,
) -> "CyrillicTransliteratorComponent":
    """Create a transliteration pipeline component."""
    return CyrillicTransliteratorComponent(nlp, name, direction=direction)


class CyrillicTransliteratorComponent:
    """
    spaCy pipeline component for Latin <-> Cyrillic transliteration.

    Extensions:
        - Doc._.transliterated: Full transliterated text.
        - Token._.transliterated: Transliterated token text.

    Token texts are converted independently, so a digraph split across
    tokens is not joined.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        direction: str = Direction.LATIN_TO_CYRILLIC.value,
    ) -> None:
        self.name = name
        try:
            self.direction = Direction(direction)
        except ValueError:
            raise ValueError(
                f"Unknown direction: {direction}. Expected one of: "
                + ", ".join(d.value for d in Direction)
            ) from None

        engine = Transliterator()
        if self.direction is Direction.LATIN_TO_CYRILLIC:
            self._convert = engine.transliterate
        else:
            self._convert = engine.reverse_transliterate

        if not Doc.has_extension("transliterated"):
            Doc.set_extension("transliterated", default=None)
        if not Token.has_extension("transliterated"):
            Token.set_extension("transliterated", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.transliterated = self._convert(doc.text)

        for token in doc:
            token._.transliterated = self._convert(token.text)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "CyrillicTransliteratorComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "CyrillicTransliteratorComponent":
        return self


def get_transliterator_pipe(nlp: Language) -> Optional[CyrillicTransliteratorComponent]:
    """Get the transliterator component from a pipeline."""
    if "cyrillic_transliterator" in nlp.pipe_names:
        return nlp.get_pipe("cyrillic_transliterator")
    return None
