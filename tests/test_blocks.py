import pytest
from md_to_tg.passes.blocks import ListConfig, ListPass, QuotePass


def test_list_items_bulleted():
    lists = ListPass()
    assert lists.apply("- a\n- b\nc") == "• a\n• b\n\nc"
    assert lists.apply("* a\n* b") == "• a\n• b"


def test_list_at_end_has_no_separator():
    assert ListPass().apply("intro\n- a\n- b") == "intro\n• a\n• b"


def test_indented_items_flattened():
    assert ListPass().apply("- a\n    - nested") == "• a\n• nested"


def test_non_list_lines_untouched():
    lists = ListPass()
    assert lists.apply("-no space") == "-no space"
    assert lists.apply("**bold** line") == "**bold** line"
    assert lists.apply("- ") == "- "


def test_each_list_gets_separator():
    text = "- a\nx\n- b\ny"
    assert ListPass().apply(text) == "• a\n\nx\n• b\n\ny"


def test_list_config():
    lists = ListPass(ListConfig(bullet="-", separate_lists=False))
    assert lists.apply("* a\nb") == "- a\nb"

    with pytest.raises(ValueError):
        ListPass(ListConfig(bullet=""))


def test_quote_marker_removed():
    quotes = QuotePass()
    assert quotes.apply("> hello\n> world") == "hello\nworld"
    assert quotes.apply("  > indented") == "indented"


def test_quote_needs_space():
    quotes = QuotePass()
    assert quotes.apply(">no space") == ">no space"
    assert quotes.apply("a > b") == "a > b"


def test_nested_quote_loses_one_level():
    assert QuotePass().apply("> > deep") == "> deep"
