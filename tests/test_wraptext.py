import pytest

from simpsons.views.wraptext import wrap_text

TEXT = "I'll look at the login code and fix it. Then I will run the tests again."


@pytest.mark.parametrize("width", [10, 15, 20, 40])
def test_lines_fit_width(width):
    for line in wrap_text(TEXT, width):
        assert len(line) <= width


@pytest.mark.parametrize("width", [5, 12, 30, 200])
def test_words_preserved(width):
    assert " ".join(wrap_text(TEXT, width)).split() == TEXT.split()


def test_short_text_single_line():
    assert wrap_text("Fix the login bug please", 100) == ["Fix the login bug please"]


def test_zero_width_returns_text_unchanged():
    assert wrap_text("Run the tests", 0) == ["Run the tests"]
    assert wrap_text("Run the tests", -3) == ["Run the tests"]


def test_paragraphs_kept():
    lines = wrap_text("first\n\nsecond", 20)
    assert lines == ["first", "", "second"]


def test_whitespace_only_paragraph_is_blank():
    assert wrap_text("   ", 20) == [""]


def test_long_word_stands_alone():
    word = "x" * 30
    lines = wrap_text(f"a {word} b", 10)
    assert word in lines
    assert lines[0] == "a"
    assert lines[-1] == "b"


def test_break_at_exact_width():
    assert wrap_text("ab cd", 5) == ["ab cd"]
    assert wrap_text("ab cd", 4) == ["ab", "cd"]