"""Tests for character classification."""

import pytest

from stitchspeak.filters import (
    CATEGORY_NAMES,
    alternate_case,
    categorize_char,
    group_by_category,
    is_printable_char,
)

# ---------------------------------------------------------------------------
# categorize_char
# ---------------------------------------------------------------------------


class TestCategorizeChar:
    @pytest.mark.parametrize(
        ("char", "category"),
        [
            ("A", "uppercase"),
            ("Z", "uppercase"),
            ("a", "lowercase"),
            ("z", "lowercase"),
            ("0", "numbers"),
            ("9", "numbers"),
            ("!", "punctuation"),
            (".", "punctuation"),
            ("'", "punctuation"),
            ("\\", "punctuation"),
            (" ", "spaces"),
            ("é", "symbols"),
            ("€", "symbols"),
            ("~", "symbols"),
        ],
    )
    def test_categories(self, char, category):
        assert categorize_char(char) == category

    def test_multi_character_key_is_symbol(self):
        assert categorize_char("AB") == "symbols"


# ---------------------------------------------------------------------------
# group_by_category
# ---------------------------------------------------------------------------


class TestGroupByCategory:
    def test_all_categories_present(self):
        groups = group_by_category([])
        assert tuple(groups) == CATEGORY_NAMES
        assert all(members == [] for members in groups.values())

    def test_members_sorted(self):
        groups = group_by_category("zaCB31?!")
        assert groups["lowercase"] == ["a", "z"]
        assert groups["uppercase"] == ["B", "C"]
        assert groups["numbers"] == ["1", "3"]
        assert groups["punctuation"] == ["!", "?"]


# ---------------------------------------------------------------------------
# is_printable_char
# ---------------------------------------------------------------------------


class TestIsPrintableChar:
    def test_space_is_printable(self):
        assert is_printable_char(" ") is True

    def test_regular_letter_is_printable(self):
        assert is_printable_char("A") is True

    def test_full_block_is_printable(self):
        assert is_printable_char("█") is True

    def test_tab_control_char_not_printable(self):
        assert is_printable_char("\t") is False

    def test_newline_not_printable(self):
        assert is_printable_char("\n") is False

    def test_multi_character_not_printable(self):
        assert is_printable_char("ab") is False


# ---------------------------------------------------------------------------
# alternate_case
# ---------------------------------------------------------------------------


class TestAlternateCase:
    def test_lower_to_upper(self):
        assert alternate_case("a") == "A"

    def test_upper_to_lower(self):
        assert alternate_case("Q") == "q"

    def test_caseless_unchanged(self):
        assert alternate_case("3") == "3"
        assert alternate_case("!") == "!"
