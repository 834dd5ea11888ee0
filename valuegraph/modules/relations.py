"""
Relation classification between two values.

A pair of values is compared by exact, ordered character containment. No
case or whitespace normalization is applied, and equality always wins over
containment so two equal values are never reported as mutually derived.

Usage:
    from valuegraph.modules.relations import classify

    classify("hello world", "hello")  # Relation.LEFT_DERIVED_FROM_RIGHT
    classify("", "")                  # Relation.IS_EQUAL_TO
"""

from __future__ import annotations

from collections.abc import Mapping

from valuegraph.modules.models import Relation

__all__ = ["classify", "find_relation"]


def classify(value_a: str, value_b: str) -> Relation:
    """
    Classify the ordered pair (value_a, value_b).

    Args:
        value_a: Left value
        value_b: Right value

    Returns:
        IS_EQUAL_TO if the values are identical, LEFT_DERIVED_FROM_RIGHT if
        value_a contains value_b, RIGHT_DERIVED_FROM_LEFT if value_b contains
        value_a, otherwise UNRELATED.
    """
    if value_a == value_b:
        return Relation.IS_EQUAL_TO
    if value_b in value_a:
        return Relation.LEFT_DERIVED_FROM_RIGHT
    if value_a in value_b:
        return Relation.RIGHT_DERIVED_FROM_LEFT
    return Relation.UNRELATED


def find_relation(values: Mapping[str, str], key_a: str, key_b: str) -> Relation:
    """Classify the values stored under two keys.

    Raises:
        KeyError: If either key is missing from values
    """
    return classify(values[key_a], values[key_b])
