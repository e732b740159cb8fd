"""Tests for the in-memory input buffer."""

import pytest

from cyrillic_translit import Direction, Edit, InputBuffer, Transliterator


class TestTypeChar:
    def test_append(self, buffer: InputBuffer):
        edit = buffer.type_char("a")
        assert edit == Edit(position=0, delete=0, insert="а")
        assert buffer.text == "а"
        assert buffer.cursor == 1

    def test_revision_edit(self, buffer: InputBuffer):
        buffer.type_char("s")
        edit = buffer.type_char("h")
        assert edit == Edit(position=1, delete=1, insert="ш")
        assert buffer.text == "ш"
        assert buffer.cursor == 1

    def test_shch_path(self, buffer: InputBuffer):
        states = []
        for char in "shch":
            buffer.type_char(char)
            states.append(buffer.text)
        assert states == ["с", "ш", "шц", "щ"]

    def test_x_inserts_two_chars(self, buffer: InputBuffer):
        buffer.type_char("x")
        assert buffer.text == "кс"
        assert buffer.cursor == 2

    def test_non_latin_verbatim(self, buffer: InputBuffer):
        for char in "1 ж!":
            buffer.type_char(char)
        assert buffer.text == "1 ж!"

    def test_rejects_multiple_chars(self, buffer: InputBuffer):
        with pytest.raises(ValueError, match="single character"):
            buffer.type_char("sh")

    def test_rejects_empty(self, buffer: InputBuffer):
        with pytest.raises(ValueError):
            buffer.type_char("")

    def test_typing_mid_buffer(self):
        buf = InputBuffer("с мир")
        buf.move_cursor(1)
        buf.type_char("h")
        assert buf.text == "ш мир"
        assert buf.cursor == 1

    def test_only_text_before_cursor_is_examined(self):
        buf = InputBuffer("ац")
        buf.move_cursor(1)
        buf.type_char("h")
        assert buf.text == "ахц"

    def test_custom_engine(self):
        buf = InputBuffer(transliterator=Transliterator(multi_char_map={"ng": "ң"}))
        buf.type_char("n")
        buf.type_char("g")
        assert buf.text == "ң"


class TestDisabled:
    def test_verbatim_when_disabled(self):
        buf = InputBuffer(enabled=False)
        for char in "shch":
            buf.type_char(char)
        assert buf.text == "shch"

    def test_toggle(self, buffer: InputBuffer):
        assert buffer.toggle() is False
        buffer.type_char("s")
        assert buffer.toggle() is True
        buffer.type_char("a")
        assert buffer.text == "sа"

    def test_paste_verbatim_when_disabled(self):
        buf = InputBuffer(enabled=False)
        buf.paste("privet")
        assert buf.text == "privet"


class TestReverseDirection:
    def test_type_cyrillic(self):
        buf = InputBuffer(direction="cyrillic-to-latin")
        for char in "щука":
            buf.type_char(char)
        assert buf.text == "shchuka"

    def test_latin_verbatim(self):
        buf = InputBuffer(direction=Direction.CYRILLIC_TO_LATIN)
        buf.type_char("s")
        buf.type_char("h")
        assert buf.text == "sh"

    def test_unknown_direction(self):
        with pytest.raises(ValueError):
            InputBuffer(direction="left-to-right")


class TestPaste:
    def test_paste_batch(self, buffer: InputBuffer):
        edit = buffer.paste("shchuka")
        assert edit == Edit(position=0, delete=0, insert="щука")
        assert buffer.text == "щука"
        assert buffer.cursor == 4

    def test_paste_at_cursor(self):
        buf = InputBuffer("мир")
        buf.move_cursor(0)
        buf.paste("privet ")
        assert buf.text == "привет мир"
        assert buf.cursor == 7


class TestSetDirection:
    def test_rerenders_buffer(self, buffer: InputBuffer):
        buffer.paste("Privet, mir")
        buffer.set_direction(Direction.CYRILLIC_TO_LATIN)
        assert buffer.text == "Privet, mir"
        assert buffer.direction is Direction.CYRILLIC_TO_LATIN
        buffer.set_direction("latin-to-cyrillic")
        assert buffer.text == "Привет, мир"
        assert buffer.cursor == len(buffer.text)

    def test_same_direction_is_noop(self):
        buf = InputBuffer("abc")
        buf.set_direction(Direction.LATIN_TO_CYRILLIC)
        assert buf.text == "abc"

    def test_disabled_keeps_text(self):
        buf = InputBuffer("мир", enabled=False)
        buf.set_direction(Direction.CYRILLIC_TO_LATIN)
        assert buf.text == "мир"
        assert buf.direction is Direction.CYRILLIC_TO_LATIN


class TestMoveCursor:
    def test_out_of_range(self):
        buf = InputBuffer("abc")
        with pytest.raises(ValueError, match="out of range"):
            buf.move_cursor(4)
        with pytest.raises(ValueError):
            buf.move_cursor(-1)

    def test_repr(self):
        assert "cursor=3" in repr(InputBuffer("abc"))
