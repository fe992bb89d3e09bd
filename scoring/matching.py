"""Substring matching helpers shared by the gates and dimension scorers.

Scraped ingredient text is messy ("parfum/fragrance", "aqua (water)"), so
matching is containment in either direction rather than equality. This
tolerates abbreviations and compound entries but admits false positives
such as "tea" inside "stearic acid".
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from components.ingredient_db import IngredientEntry


def contains_either(left: str, right: str) -> bool:
    """True when one string contains the other. Empty strings never match."""
    if not left or not right:
        return False
    return left in right or right in left


def first_match(ingredient: str, entries: Sequence[IngredientEntry]) -> Optional[IngredientEntry]:
    for entry in entries:
        if contains_either(ingredient, entry.name):
            return entry
    return None


def matching_ingredients(ingredients: Iterable[str], vocabulary: Sequence[str]) -> List[str]:
    """Ingredients that match at least one vocabulary term."""
    return [i for i in ingredients if any(contains_either(i, term) for term in vocabulary)]


def has_any_keyword(text: Optional[str], keywords: Iterable[str]) -> bool:
    if not text:
        return False
    return any(k in text for k in keywords)
