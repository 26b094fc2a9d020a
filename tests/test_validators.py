"""Tests for character filtering."""
from utils.validators import CharacterFilter


def test_regex_metacharacters_are_literal():
    """Test characters with regex meaning are matched literally."""
    char_filter = CharacterFilter("]^\\-")
    assert char_filter.filter("a]b^c\\d-e") == "abcde"


def test_empty_disallowed_set_only_strips_controls():
    """Test an empty set still removes control characters."""
    char_filter = CharacterFilter("")
    assert char_filter.filter("<a>\x07") == "<a>"


def test_filter_holds_only_compiled_pattern():
    """Test the filter keeps nothing but its compiled pattern."""
    char_filter = CharacterFilter("<>")
    assert set(vars(char_filter)) == {"pattern"}
