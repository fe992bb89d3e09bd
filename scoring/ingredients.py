"""Ingredient analysis: classifies each ingredient for the profile's skin type.

Every ingredient lands in exactly one bucket: beneficial, problematic or
neutral. The skin-type beneficial table is consulted first, then the
skin-type problematic table; the universal-problematic table (parabens,
sulfates, synthetic fragrance) only reclassifies ingredients still neutral.

Score::

    total = n_beneficial * lead_weight + sum(problematic weights)
    score = clamp(50 + total / n_matched, 0, 100)

``lead_weight`` is the strongest beneficial weight found in the product.
Every beneficial match is credited at that weight, so adding a beneficial
ingredient never lowers the score.
"""
from __future__ import annotations

from typing import Sequence

from config import NEUTRAL_SCORE
from components.ingredient_db import IngredientDatabase
from scoring.aggregator import clamp_score
from scoring.matching import first_match
from scoring.models import IngredientAnalysis


def analyze_ingredients(
    ingredients: Sequence[str],
    skin_type_key: str,
    db: IngredientDatabase,
) -> IngredientAnalysis:
    result = IngredientAnalysis(score=NEUTRAL_SCORE)
    beneficial_table = db.beneficial_for(skin_type_key)
    problematic_table = db.problematic_for(skin_type_key)

    lead_weight = 0
    penalty = 0

    for ingredient in ingredients:
        entry = first_match(ingredient, beneficial_table)
        if entry:
            result.beneficial.append(ingredient)
            lead_weight = max(lead_weight, entry.weight)
            result.reasons.append(f"{ingredient} - {entry.description}")
            continue

        entry = first_match(ingredient, problematic_table)
        if entry:
            result.problematic.append(ingredient)
            penalty += entry.weight
            result.warnings.append(f"{ingredient} - {entry.description}")
            continue

        entry = first_match(ingredient, db.universal_problematic)
        if entry:
            result.problematic.append(ingredient)
            penalty += entry.weight
            result.warnings.append(f"{ingredient} - {entry.description}")
        else:
            result.neutral.append(ingredient)

    matched = len(result.beneficial) + len(result.problematic)
    if matched:
        total = len(result.beneficial) * lead_weight + penalty
        result.score = clamp_score(NEUTRAL_SCORE + total / matched)
        result.has_data = True

    return result
