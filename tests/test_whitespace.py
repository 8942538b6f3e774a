import pytest
from md_to_tg.passes.whitespace_normalizer import WhitespaceNormalizer, WhitespaceConfig


def test_collapse_newlines():
    normalizer = WhitespaceNormalizer()

    # Test collapsing 3+ newlines to 2
    assert normalizer.normalize("Line 1\n\n\nLine 2") == "Line 1\n\nLine 2"
    assert normalizer.normalize("Line 1\n\n\n\n\nLine 2") == "Line 1\n\nLine 2"

    # Test preserving 2 newlines
    assert normalizer.normalize("Line 1\n\nLine 2") == "Line 1\n\nLine 2"


def test_trailing_whitespace_removed():
    normalizer = WhitespaceNormalizer()
    assert normalizer.normalize("a  \nb\t\nc") == "a\nb\nc"
    assert normalizer.normalize("  \n\n text \n\n") == "text"


def test_whitespace_only_lines_count_as_blank():
    assert WhitespaceNormalizer().normalize("a\n \n \nb") == "a\n\nb"


@pytest.mark.parametrize("text", [
    "",
    "plain",
    "a\n \n \nb",
    "a \t\n\n\n\n b \n",
    "\n\n\n",
    "x\n\n\ty\n \n\n\nz",
])
def test_normalize_idempotent(text):
    normalizer = WhitespaceNormalizer()
    once = normalizer.normalize(text)
    assert normalizer.normalize(once) == once


def test_max_consecutive_blanks():
    normalizer = WhitespaceNormalizer(WhitespaceConfig(max_consecutive_blanks=0))
    assert normalizer.normalize("a\n\n\nb\n\nc") == "a\nb\nc"

    normalizer = WhitespaceNormalizer(WhitespaceConfig(max_consecutive_blanks=2))
    assert normalizer.normalize("a\n\n\n\n\nb") == "a\n\n\nb"

    with pytest.raises(ValueError):
        WhitespaceNormalizer(WhitespaceConfig(max_consecutive_blanks=-1))
