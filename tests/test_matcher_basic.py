import re

from splashpatch.patcher import NOT_FOUND, Scoped, Span, locate, locate_last, pattern_text, regex_literal
from splashpatch.patcher.mutator import insert_before, insert_before_last, replace


def test_literal_first_and_last():
    buf = "a } b } c"
    assert locate(buf, "}") == Span(2, 3)
    assert locate_last(buf, "}") == Span(6, 7)
    assert locate(buf, "{") is NOT_FOUND
    assert locate_last(buf, "{") is NOT_FOUND


def test_regex_whole_match():
    assert locate("x = 42", re.compile(r"\d+")) == Span(4, 6)


def test_at_group_acts_as_lookbehind():
    buf = "line one\nsuper.onCreate(x);\nline three\n"
    span = locate(buf, re.compile(r"^.*super\.onCreate.*(?P<at>)$", re.M))
    assert span.start == span.end
    assert buf[:span.start].endswith("super.onCreate(x);")


def test_scoped_only_searches_inside_region():
    buf = (
        "<item>outside</item>\n"
        "<style name=\"a\">\n<item>first</item>\n</style>\n"
        "<style name=\"b\">\n<item>second</item>\n</style>\n"
    )
    style_b = re.compile(r'<style name="b">\n(?P<at>.*?)</style>', re.S)
    item = re.compile(r"<item>.*</item>")
    span = locate(buf, Scoped(style_b, item))
    assert buf[span.start:span.end] == "<item>second</item>"


def test_scoped_tries_every_scope_match():
    buf = "[a] [b x] [c x]"
    scope = re.compile(r"\[[^\]]*\]")
    span = locate(buf, Scoped(scope, re.compile("x")))
    assert span == Span(7, 8)
    assert locate_last(buf, Scoped(scope, re.compile("x"))) == Span(13, 14)


def test_scoped_keeps_line_anchors_of_outer_buffer():
    buf = "<resources>\n  <color>1</color>\n</resources>\n"
    body = re.compile(r"^[^\n]*<resources>[^\n]*\n(?P<at>.*?)^[^\n]*</resources>", re.M | re.S)
    line = re.compile(r"^.*<color>.*</color>.*\n", re.M)
    span = locate(buf, Scoped(body, line))
    assert buf[span.start:span.end] == "  <color>1</color>\n"


def test_last_closing_brace_line():
    buf = "class A {\n  void f() {\n  }\n}\n"
    span = locate_last(buf, re.compile(r"^\s*}\s*$", re.M))
    assert buf[span.start:] == "}\n"


def test_pattern_text():
    assert pattern_text("literal") == "literal"
    assert pattern_text(re.compile(r"^(.*?)</resources>(.*?)$", re.M)) == r"/^(.*?)<\/resources>(.*?)$/m"
    assert pattern_text(Scoped(re.compile("scope"), re.compile("target", re.S))) == "/target/s"


def test_regex_literal_keeps_escaped_slashes_and_orders_flags():
    assert regex_literal(re.compile(r"a\/b/c", re.S | re.I | re.M)) == r"/a\/b\/c/ims"


def test_replace_only_touches_matched_span():
    new, ok = replace("a=1;b=2", re.compile(r"b=\d"), "b=3")
    assert ok
    assert new == "a=1;b=3"


def test_replace_reports_failure_and_keeps_buffer():
    new, ok = replace("a=1", "b", "c")
    assert not ok
    assert new == "a=1"


def test_insert_before_first_and_last():
    buf = "x}\ny}\n"
    first, ok1 = insert_before(buf, "}", "!")
    last, ok2 = insert_before_last(buf, "}", "!")
    assert ok1 and ok2
    assert first == "x!}\ny}\n"
    assert last == "x}\ny!}\n"


def test_insert_without_anchor():
    new, ok = insert_before_last("abc", re.compile(r"\d"), "!")
    assert not ok
    assert new == "abc"
