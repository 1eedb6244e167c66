"""Tests for key:value extraction."""

import pytest
from query_annotations import DuplicateKeyError
from query_annotations.extraction import extract_parameters


class TestExtractParameters:
    """Tests for extract_parameters."""

    @pytest.mark.unit
    def test_only_pairs(self):
        """Pairs separated by single spaces leave nothing behind."""
        remainder, settings = extract_parameters("a:1 b:2 c:3", False)
        assert remainder == ""
        assert settings == {"a": "1", "b": "2", "c": "3"}

    @pytest.mark.unit
    def test_trailing_space_consumed(self):
        """The space after the last pair is removed."""
        remainder, settings = extract_parameters("a:1 b:2 c:3 ", False)
        assert remainder == ""
        assert settings == {"a": "1", "b": "2", "c": "3"}

    @pytest.mark.unit
    def test_only_one_trailing_space_consumed(self):
        """Only one space after each pair is removed."""
        remainder, settings = extract_parameters("  a:1  b:2  c:3  ", False)
        assert remainder == "     "
        assert settings == {"a": "1", "b": "2", "c": "3"}

    @pytest.mark.unit
    def test_leaves_separating_space(self):
        """Words around a pair stay separated by a space."""
        remainder, settings = extract_parameters("david a:1 thielen", False)
        assert remainder == "david thielen"
        assert settings == {"a": "1"}

    @pytest.mark.unit
    def test_value_with_punctuation(self):
        """Unquoted values run to the next whitespace."""
        assert extract_parameters("start:2023-07-04", False) == ("", {"start": "2023-07-04"})
        remainder, settings = extract_parameters("david start:2023-07-04 shirley", False)
        assert remainder == "david shirley"
        assert settings == {"start": "2023-07-04"}

    @pytest.mark.unit
    def test_quoted_and_spaced(self, parameter_query):
        """Spaces around the colon and quoted values are handled."""
        remainder, settings = extract_parameters(parameter_query, False)
        assert remainder == " hello   hi there some more and some more"
        assert settings == {"abc": "dave", "def": "thielen", "ghi": "david thielen"}

    @pytest.mark.unit
    def test_quoted_value_keeps_inner_spaces(self):
        """Leading and trailing spaces inside quotes are kept."""
        remainder, settings = extract_parameters("before a: ' david thielen ' after", False)
        assert remainder == "before after"
        assert settings == {"a": " david thielen "}

    @pytest.mark.unit
    def test_order_preserved(self):
        """Settings keep the order the keys appeared in."""
        _, settings = extract_parameters("z:1 a:2 m:3", False)
        assert list(settings) == ["z", "a", "m"]

    @pytest.mark.unit
    def test_force_lower_case_keys(self):
        """Keys are lower-cased on request; values never are."""
        _, settings = extract_parameters("Name:Dave CITY:Boulder", True)
        assert settings == {"name": "Dave", "city": "Boulder"}

    @pytest.mark.unit
    def test_keys_case_kept_by_default(self):
        """Keys keep their case without the flag."""
        _, settings = extract_parameters("Name:Dave")
        assert settings == {"Name": "Dave"}

    @pytest.mark.unit
    def test_no_pairs(self):
        """Text without pairs is returned unchanged."""
        assert extract_parameters("just some words", False) == ("just some words", {})
        assert extract_parameters("", False) == ("", {})

    @pytest.mark.unit
    def test_duplicate_key(self):
        """A repeated key is an error, not an overwrite."""
        with pytest.raises(DuplicateKeyError) as exc_info:
            extract_parameters("a:1 a:2", False)
        assert exc_info.value.key == "a"
        assert "'a'" in str(exc_info.value)

    @pytest.mark.unit
    def test_duplicate_after_lower_casing(self):
        """Keys that collide once lower-cased are duplicates."""
        with pytest.raises(DuplicateKeyError):
            extract_parameters("Key:1 KEY:2", True)

    @pytest.mark.unit
    def test_duplicate_is_key_error(self):
        """DuplicateKeyError can be caught as a KeyError."""
        with pytest.raises(KeyError):
            extract_parameters("a:1 a:1", False)
