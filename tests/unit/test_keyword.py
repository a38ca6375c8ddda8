"""Test keyword token rendering."""

from __future__ import annotations

from enum import Enum

import pytest

from xlog.core.strings import normalize, normalize_keyword
from xlog.keyword import MAX_KEYWORDS, keyword


class Color(Enum):
    RED = "red"


class TestKeyword:
    def test_none_input(self):
        assert keyword(None) == ""

    def test_empty(self):
        assert keyword() == "KEYWORD[]"
        assert keyword([]) == "KEYWORD[]"

    def test_basic_varargs(self):
        assert keyword("a", "b") == "KEYWORD[a,b]"

    def test_list_argument(self):
        assert keyword(["a", None, "b,c"]) == "KEYWORD[a,b;c]"

    def test_tuple_argument(self):
        assert keyword(("x", "y")) == "KEYWORD[x,y]"

    def test_drops_none_and_blank(self):
        assert keyword("a", None, "", "   ", "b") == "KEYWORD[a,b]"

    def test_single_none_in_list_is_empty_token_list(self):
        assert keyword([None]) == "KEYWORD[]"

    def test_non_string_values(self):
        assert keyword(42, 1.5, True) == "KEYWORD[42,1.5,True]"

    def test_keeps_order_and_duplicates(self):
        assert keyword("b", "a", "b") == "KEYWORD[b,a,b]"

    def test_exactly_max_allowed(self):
        result = keyword(["k"] * MAX_KEYWORDS)
        assert result == "KEYWORD[" + ",".join(["k"] * 100) + "]"

    def test_over_max_rejected(self):
        assert keyword(["k"] * (MAX_KEYWORDS + 1)) == ""
        assert keyword(*(["k"] * 101)) == ""

    def test_unicode_line_breaks_do_not_split_line(self):
        rendered = keyword("a\u2028b", "c\x0bd")
        assert rendered == "KEYWORD[a b,c d]"
        assert len(rendered.splitlines()) == 1

    def test_brackets_escaped(self):
        assert keyword("a]b", "[c") == "KEYWORD[a)b,(c]"


class TestNormalize:
    def test_none(self):
        assert normalize(None) is None

    def test_blank(self):
        assert normalize("") is None
        assert normalize(" \t ") is None

    def test_trims(self):
        assert normalize("  x ") == "x"


class TestNormalizeKeyword:
    def test_none(self):
        assert normalize_keyword(None) is None

    def test_comma(self):
        assert normalize_keyword("a,b") == "a;b"

    def test_newlines_become_spaces(self):
        assert normalize_keyword("a\nb\r\tc") == "a b  c"

    @pytest.mark.parametrize(
        "sep", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"]
    )
    def test_other_line_breaks_become_spaces(self, sep):
        assert normalize_keyword(f"a{sep}b") == "a b"

    def test_only_whitespace_after_escape(self):
        assert normalize_keyword("\n") is None

    def test_enum_uses_str(self):
        assert normalize_keyword(Color.RED) == "Color.RED"
