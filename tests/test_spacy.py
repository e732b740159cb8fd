"""Tests for the spaCy pipeline component."""

import pytest

spacy = pytest.importorskip("spacy")


@pytest.fixture(autouse=True)
def _clean_extensions():
    """Remove custom extensions between tests to avoid conflicts."""
    from spacy.tokens import Doc, Token

    yield

    if Doc.has_extension("transliterated"):
        Doc.remove_extension("transliterated")
    if Token.has_extension("transliterated"):
        Token.remove_extension("transliterated")


class TestCyrillicTransliterator:
    def test_factory_registered(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("cyrillic_transliterator")
        assert "cyrillic_transliterator" in nlp.pipe_names

    def test_doc_extension(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("cyrillic_transliterator")
        doc = nlp("Privet, mir")
        assert doc._.transliterated == "Привет, мир"

    def test_token_extension(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("cyrillic_transliterator")
        doc = nlp("shchuka zhuk")
        assert [t._.transliterated for t in doc] == ["щука", "жук"]

    def test_reverse_direction(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("cyrillic_transliterator", config={"direction": "cyrillic-to-latin"})
        doc = nlp("щука")
        assert doc._.transliterated == "shchuka"
        assert doc[0]._.transliterated == "shchuka"

    def test_unknown_direction(self):
        nlp = spacy.blank("xx")
        with pytest.raises(ValueError, match="Unknown direction"):
            nlp.add_pipe("cyrillic_transliterator", config={"direction": "sideways"})

    def test_text_unchanged(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("cyrillic_transliterator")
        doc = nlp("Moskva")
        assert doc.text == "Moskva"

    def test_lazy_import_from_package(self):
        from cyrillic_translit import CyrillicTransliteratorComponent
        from cyrillic_translit.spacy import CyrillicTransliteratorComponent as direct

        assert CyrillicTransliteratorComponent is direct

    def test_get_pipe(self):
        from cyrillic_translit.spacy import get_transliterator_pipe

        nlp = spacy.blank("xx")
        assert get_transliterator_pipe(nlp) is None
        nlp.add_pipe("cyrillic_transliterator")
        assert get_transliterator_pipe(nlp) is not None
