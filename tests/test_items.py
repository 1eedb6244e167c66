"""Tests for delimiter splitting."""

import pytest
from query_annotations import InvalidArgumentError
from query_annotations.extraction import extract_items


class TestExtractItems:
    """Tests for extract_items."""

    @pytest.mark.unit
    def test_comma_space_list(self):
        """Items separated by ', ' are trimmed."""
        assert extract_items("abc, def, ghi", ",") == ["abc", "def", "ghi"]

    @pytest.mark.unit
    def test_no_spaces(self):
        """Items without surrounding spaces split cleanly."""
        assert extract_items("abc,def,ghi", ",") == ["abc", "def", "ghi"]

    @pytest.mark.unit
    def test_empty_entries_dropped(self):
        """Doubled and trailing separators never produce empty items."""
        assert extract_items("abc,, def,ghi,", ",") == ["abc", "def", "ghi"]

    @pytest.mark.unit
    def test_whitespace_only_entries_dropped(self):
        """Entries with only whitespace between separators are dropped."""
        assert extract_items(" abc, ,  def ,ghi,  ", ",") == ["abc", "def", "ghi"]

    @pytest.mark.unit
    def test_single_item(self):
        """No separator gives a single trimmed item."""
        assert extract_items(" abc ", ",") == ["abc"]

    @pytest.mark.unit
    def test_inner_text_kept(self):
        """Spaces and symbols inside an item are kept."""
        items = extract_items(" abc 123 &*$, *&^ abc 123 ", ",")
        assert items == ["abc 123 &*$", "*&^ abc 123"]

    @pytest.mark.unit
    def test_empty_string(self):
        """Empty input gives no items."""
        assert extract_items("", ",") == []

    @pytest.mark.unit
    def test_regex_metacharacter_separator(self):
        """Separators with regex meaning are matched literally."""
        assert extract_items("a]b] c", "]") == ["a", "b", "c"]
        assert extract_items("a^b", "^") == ["a", "b"]

    @pytest.mark.unit
    def test_multi_char_separator_rejected(self):
        """Separator must be a single character."""
        with pytest.raises(InvalidArgumentError):
            extract_items("a,b", ",,")
