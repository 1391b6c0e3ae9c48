"""Tests for comment stripping."""

from diffcheck.engine.comments import strip_comments


def test_line_comment_removed() -> None:
    assert strip_comments("int a; // trailing\nint b;") == "int a; \nint b;"


def test_block_comment_spanning_lines() -> None:
    assert strip_comments("int a;/* one\ntwo\n*/int b;") == "int a;int b;"


def test_block_comments_match_shortest_span() -> None:
    assert strip_comments("/* a */ keep /* b */") == " keep "


def test_block_comment_before_line_comment() -> None:
    # The block is removed first, so "//" inside it never starts a line comment
    assert strip_comments("/* see // here */x") == "x"


def test_no_comments_unchanged() -> None:
    src = "int main() {\n    return 0;\n}\n"
    assert strip_comments(src) == src


def test_empty_text() -> None:
    assert strip_comments("") == ""


def test_unterminated_block_comment_kept() -> None:
    assert strip_comments("int a; /* open") == "int a; /* open"


def test_comment_marker_in_string_literal_is_stripped() -> None:
    # Not literal-aware: "//" inside a string still starts a comment
    assert strip_comments('url = "http://x";') == 'url = "http:'
