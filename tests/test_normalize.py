"""Tests for body and line normalization."""

from __future__ import annotations

import pytest

from diffcheck.engine.normalize import normalize_body, normalize_line, to_lines


class TestNormalizeBody:
    def test_collapses_whitespace(self) -> None:
        assert normalize_body("  a\t=\r\n   b; ") == "a = b;"

    def test_braces_lose_surrounding_space(self) -> None:
        body = "\n    if (x) {\n        y();\n    }\n    return 0;\n"
        assert normalize_body(body) == "if (x){y();}return 0;"

    def test_style_variants_are_equal(self) -> None:
        kr = "\n  if (a) {\n    b();\n  }\n"
        allman = "\r\n\tif (a)\r\n\t{\r\n\t\tb();\r\n\t}\r\n"
        assert normalize_body(kr) == normalize_body(allman)

    def test_different_content_differs(self) -> None:
        assert normalize_body("return a + b;") != normalize_body("return a - b;")

    def test_empty(self) -> None:
        assert normalize_body("") == ""
        assert normalize_body(" \n\t ") == ""

    @pytest.mark.parametrize(
        "body",
        [
            "",
            "  x  ",
            "\n\tif (a) {\n\t\tb();\n\t}\n",
            "{ } { }",
            "a  {  b  }  c\r\n",
            "}}{{",
        ],
    )
    def test_idempotent(self, body: str) -> None:
        once = normalize_body(body)
        assert normalize_body(once) == once


class TestNormalizeLine:
    def test_trims_and_collapses(self) -> None:
        assert normalize_line("\t int   x =  1; ") == "int x = 1;"

    def test_braces_keep_spacing(self) -> None:
        assert normalize_line("if (x) {") == "if (x) {"


class TestToLines:
    def test_splits_and_drops_carriage_returns(self) -> None:
        assert to_lines("a\r\nb\n") == ("a", "b", "")

    def test_keeps_empty_parts(self) -> None:
        assert to_lines("\n\n") == ("", "", "")

    def test_empty_text_is_one_empty_line(self) -> None:
        assert to_lines("") == ("",)
