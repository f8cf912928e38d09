"""Tests for the argument kinds: int, bool, position, color and border."""

import pytest

from stylec.errors import ValueParseError
from stylec.model import AdaptiveColor, Border, Color, NoColor, Position, rounded_border
from stylec.parser import BoolKind, BorderKind, ColorKind, IntKind, PositionKind

INT = IntKind()
BOOL = BoolKind()
POSITION = PositionKind()
COLOR = ColorKind()
BORDER = BorderKind()


# ---------------------------------------------------------------------------
# int
# ---------------------------------------------------------------------------


class TestIntKind:
    def test_single_value(self):
        assert INT.parse("42", 0) == (2, 42)

    def test_consumes_surrounding_whitespace(self):
        assert INT.parse("  7   8", 0) == (6, 7)

    def test_parses_from_cursor(self):
        assert INT.parse("7 8", 2) == (3, 8)

    def test_rejects_glued_text(self):
        with pytest.raises(ValueParseError, match=r'invalid int value: "12x"'):
            INT.parse("12x", 0)

    def test_rejects_negative(self):
        with pytest.raises(ValueParseError):
            INT.parse("-1", 0)

    def test_default_and_render(self):
        assert INT.is_default(0)
        assert not INT.is_default(3)
        assert INT.render(12) == "12"


# ---------------------------------------------------------------------------
# bool
# ---------------------------------------------------------------------------


class TestBoolKind:
    @pytest.mark.parametrize("word", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true_spellings(self, word):
        assert BOOL.parse(word, 0) == (len(word), True)

    @pytest.mark.parametrize("word", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false_spellings(self, word):
        assert BOOL.parse(word, 0) == (len(word), False)

    def test_rejects_other_words(self):
        with pytest.raises(ValueParseError, match=r'invalid bool value: "yes"'):
            BOOL.parse("yes", 0)

    def test_rejects_mixed_case(self):
        with pytest.raises(ValueParseError):
            BOOL.parse("tRUE", 0)

    def test_render(self):
        assert BOOL.render(True) == "true"
        assert BOOL.render(False) == "false"


# ---------------------------------------------------------------------------
# position
# ---------------------------------------------------------------------------


class TestPositionKind:
    @pytest.mark.parametrize(
        "word,expected",
        [
            ("top", 0.0),
            ("left", 0.0),
            ("center", 0.5),
            ("bottom", 1.0),
            ("right", 1.0),
            ("0.25", 0.25),
            (".5", 0.5),
            ("1", 1.0),
        ],
    )
    def test_accepted_values(self, word, expected):
        pos, value = POSITION.parse(word, 0)
        assert pos == len(word)
        assert isinstance(value, Position)
        assert value == expected

    def test_out_of_range(self):
        with pytest.raises(ValueParseError, match=r'position out of range \[0, 1\]: "1.5"'):
            POSITION.parse("1.5", 0)

    def test_unknown_word(self):
        with pytest.raises(ValueParseError, match=r'invalid position: "middle"'):
            POSITION.parse("middle", 0)

    def test_render(self):
        assert POSITION.render(Position(1.0)) == "1"
        assert POSITION.render(Position(0.5)) == "0.5"
        assert POSITION.render(Position(0.0)) == "0"

    def test_render_parses_back(self):
        text = POSITION.render(Position(0.00001))
        assert POSITION.parse(text, 0)[1] == 0.00001


# ---------------------------------------------------------------------------
# color
# ---------------------------------------------------------------------------


class TestColorKind:
    @pytest.mark.parametrize("word", ["11", "#123", "#7D56F4"])
    def test_plain_tokens(self, word):
        assert COLOR.parse(word, 0) == (len(word), Color(word))

    def test_none(self):
        assert COLOR.parse("none", 0) == (4, NoColor())

    def test_adaptive(self):
        assert COLOR.parse("adaptive(1,#abc)", 0)[1] == AdaptiveColor(light="1", dark="#abc")

    def test_adaptive_with_spaces(self):
        _, value = COLOR.parse("adaptive ( 1 , 2 )", 0)
        assert value == AdaptiveColor(light="1", dark="2")

    def test_adaptive_rejects_bad_member(self):
        with pytest.raises(ValueParseError, match=r'color not recognized: "b"'):
            COLOR.parse("adaptive(1,b)", 0)

    def test_bad_hex_names_token(self):
        with pytest.raises(ValueParseError) as exc_info:
            COLOR.parse("#axxa", 0)
        assert str(exc_info.value) == 'color not recognized: "#axxa"'

    def test_four_hex_digits_rejected(self):
        with pytest.raises(ValueParseError, match=r'"#1234"'):
            COLOR.parse("#1234", 0)

    def test_two_colors_in_sequence(self):
        pos, first = COLOR.parse("1 2", 0)
        _, second = COLOR.parse("1 2", pos)
        assert (first, second) == (Color("1"), Color("2"))

    def test_defaults(self):
        assert COLOR.is_default(NoColor())
        assert not COLOR.is_default(Color("0"))
        assert not COLOR.is_default(AdaptiveColor(light="0", dark="0"))

    def test_render(self):
        assert COLOR.render(NoColor()) == "none"
        assert COLOR.render(Color("#abc")) == "#abc"
        assert COLOR.render(AdaptiveColor(light="1", dark="2")) == "adaptive(1,2)"


# ---------------------------------------------------------------------------
# border
# ---------------------------------------------------------------------------


class TestBorderKind:
    def test_preset(self):
        assert BORDER.parse("rounded", 0) == (7, rounded_border())

    def test_explicit_glyphs(self):
        text = 'border("a","b","c","d","e","f","g","h")'
        pos, value = BORDER.parse(text, 0)
        assert pos == len(text)
        assert value == Border("a", "b", "c", "d", "e", "f", "g", "h")

    def test_whitespace_inside(self):
        text = 'border ( "a" , "b","c","d","e","f","g", "h" ) true'
        pos, value = BORDER.parse(text, 0)
        assert text[pos:] == "true"
        assert value.bottom_left == "h"

    def test_escapes(self):
        text = r'border("\"","\x41","\102","\u0041","\U00000041","abc","a\"b","\\")'
        _, value = BORDER.parse(text, 0)
        assert value.fields() == ('"', "A", "B", "A", "A", "abc", 'a"b', "\\")

    def test_too_few_strings(self):
        with pytest.raises(ValueParseError, match=r"border\(\) takes 8 strings, got 2"):
            BORDER.parse('border("a","b")', 0)

    def test_too_many_strings(self):
        with pytest.raises(ValueParseError, match="got more"):
            BORDER.parse('border("","","","","","","","","")', 0)

    def test_unterminated_string(self):
        with pytest.raises(ValueParseError, match="unterminated string"):
            BORDER.parse('border("a', 0)

    def test_bad_escape(self):
        with pytest.raises(ValueParseError, match=r"invalid escape sequence: \\q"):
            BORDER.parse(r'border("\q","","","","","","","")', 0)

    def test_unknown_preset(self):
        with pytest.raises(ValueParseError, match=r'border not recognized: "fancy"'):
            BORDER.parse("fancy", 0)

    def test_glued_text_after_border(self):
        with pytest.raises(ValueParseError, match="unexpected text after border value"):
            BORDER.parse('border("","","","","","","","")x', 0)

    def test_render(self):
        rendered = BORDER.render(Border("a", '"', "\\", "\n", "", "", "", ""))
        assert rendered == r'border("a","\"","\\","\n","","","","")'

    def test_default(self):
        assert BORDER.is_default(Border())
        assert not BORDER.is_default(rounded_border())
