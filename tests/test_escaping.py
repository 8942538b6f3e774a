import pytest
from md_to_tg.passes.escaping import (
    EntityUnescapePass,
    ZeroWidthPass,
    escape_chars,
    unescape_chars,
)


def test_escape_special_chars():
    assert escape_chars("a_b*c`d[e") == "a\\_b\\*c\\`d\\[e"
    assert escape_chars("plain text") == "plain text"
    assert escape_chars("") == ""


def test_escape_is_not_idempotent():
    # Already escaped input gets a second backslash
    assert escape_chars("\\*") == "\\\\*"
    assert escape_chars(escape_chars("_")) == "\\\\_"


def test_unescape_reverses_escape():
    text = "snake_case and *stars* with `ticks` [brackets]"
    assert unescape_chars(escape_chars(text)) == text

    # Only one level is removed
    assert unescape_chars("\\\\*") == "\\*"
    # Other escapes are untouched
    assert unescape_chars("\\n \\]") == "\\n \\]"


def test_zero_width_spaces_removed():
    assert ZeroWidthPass().apply("he\u200bllo\u200b") == "hello"


def test_entity_unescape():
    entities = EntityUnescapePass()
    assert entities.apply("&lt;b&gt; &amp; more") == "<b> & more"
    # &amp; is handled last, so only one level is unescaped
    assert entities.apply("&amp;lt;") == "&lt;"
    # Other entities are left alone
    assert entities.apply("&quot;x&quot;") == "&quot;x&quot;"
