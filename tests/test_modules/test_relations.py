"""Tests for modules.relations module."""

from __future__ import annotations

import pytest

from valuegraph.modules.models import Relation
from valuegraph.modules.relations import classify, find_relation


class TestClassify:
    """Tests for classify function."""

    def test_identical_values_are_equal(self):
        """Should return IS_EQUAL_TO for identical values."""
        assert classify("hello", "hello") == Relation.IS_EQUAL_TO

    def test_both_empty_are_equal(self):
        """Should treat two empty values as equal."""
        assert classify("", "") == Relation.IS_EQUAL_TO

    def test_left_contains_right(self):
        """Should return LEFT_DERIVED_FROM_RIGHT when left contains right."""
        assert classify("hello world", "hello") == Relation.LEFT_DERIVED_FROM_RIGHT

    def test_right_contains_left(self):
        """Should return RIGHT_DERIVED_FROM_LEFT when right contains left."""
        assert classify("world", "hello world") == Relation.RIGHT_DERIVED_FROM_LEFT

    def test_unrelated_values(self):
        """Should return UNRELATED when neither contains the other."""
        assert classify("hello", "bye") == Relation.UNRELATED
        assert classify("bye", "hello") == Relation.UNRELATED

    def test_empty_right_is_contained(self):
        """Empty value is a substring of any non-empty value."""
        assert classify("anything", "") == Relation.LEFT_DERIVED_FROM_RIGHT

    def test_empty_left_is_contained(self):
        """Empty left value is contained in the right value."""
        assert classify("", "anything") == Relation.RIGHT_DERIVED_FROM_LEFT

    def test_comparison_is_case_sensitive(self):
        """Should not normalize case."""
        assert classify("Hello World", "hello") == Relation.UNRELATED

    def test_comparison_keeps_whitespace(self):
        """Should not strip whitespace."""
        assert classify("hello", "hello ") == Relation.RIGHT_DERIVED_FROM_LEFT

    def test_requires_ordered_containment(self):
        """Characters present out of order do not count as containment."""
        assert classify("olleh", "hello") == Relation.UNRELATED

    def test_non_contiguous_characters_do_not_match(self):
        """Should not match subsequences."""
        assert classify("h-e-l-l-o", "hello") == Relation.UNRELATED

    def test_unicode_values(self):
        """Should compare unicode text by character."""
        assert classify("naïve café", "café") == Relation.LEFT_DERIVED_FROM_RIGHT


class TestFindRelation:
    """Tests for find_relation function."""

    def test_classifies_values_by_key(self, sample_values):
        """Should look up both keys and classify their values."""
        assert find_relation(sample_values, "b", "a") == Relation.LEFT_DERIVED_FROM_RIGHT
        assert find_relation(sample_values, "a", "b") == Relation.RIGHT_DERIVED_FROM_LEFT
        assert find_relation(sample_values, "a", "c") == Relation.UNRELATED

    def test_same_key_is_equal(self, sample_values):
        """Should classify a key against itself as equal."""
        assert find_relation(sample_values, "c", "c") == Relation.IS_EQUAL_TO

    def test_missing_key_raises(self, sample_values):
        """Should raise KeyError for unknown keys."""
        with pytest.raises(KeyError):
            find_relation(sample_values, "a", "missing")


class TestRelation:
    """Tests for Relation enum."""

    def test_linking_relations(self):
        """Only equality and left-contains-right produce links."""
        assert Relation.IS_EQUAL_TO.produces_link is True
        assert Relation.LEFT_DERIVED_FROM_RIGHT.produces_link is True
        assert Relation.RIGHT_DERIVED_FROM_LEFT.produces_link is False
        assert Relation.UNRELATED.produces_link is False

    def test_values_are_relation_names(self):
        """Enum values should be the relation names."""
        assert Relation("IsEqualTo") is Relation.IS_EQUAL_TO
        assert Relation.LEFT_DERIVED_FROM_RIGHT.value == "LeftDerivedFromRight"
