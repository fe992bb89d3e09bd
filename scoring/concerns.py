"""Skin-concern coverage: share of the user's concerns the product addresses.

A concern is addressed when any product ingredient matches its vocabulary;
coverage within a concern is binary. Concern keys with no vocabulary cannot
be assessed and are left out of the denominator. A product with no listed
ingredients scores neutral.
"""
from __future__ import annotations

import logging
from typing import Sequence

from config import NEUTRAL_SCORE
from components.ingredient_db import IngredientDatabase
from scoring.aggregator import round_half_up
from scoring.matching import contains_either, matching_ingredients
from scoring.models import ConcernAnalysis, extend_unique

logger = logging.getLogger(__name__)


def score_skin_concerns(
    ingredients: Sequence[str],
    concerns: Sequence[str],
    db: IngredientDatabase,
) -> ConcernAnalysis:
    result = ConcernAnalysis(score=NEUTRAL_SCORE)
    if not ingredients:
        return result

    assessable = []
    for concern in concerns:
        vocabulary = db.concern_vocabulary(concern)
        if vocabulary:
            assessable.append((concern, vocabulary))
        else:
            logger.debug("No ingredient vocabulary for concern '%s'", concern)

    if not assessable:
        return result

    for concern, vocabulary in assessable:
        label = concern.replace("_", " ")
        found = matching_ingredients(ingredients, vocabulary)
        if found:
            result.addressed.append(concern)
            result.reasons.append(f"Addresses {label}: {', '.join(found)}")
        else:
            extend_unique(
                result.missing_beneficials,
                [t for t in vocabulary if not any(contains_either(i, t) for i in ingredients)],
            )

    result.score = round_half_up(len(result.addressed) / len(assessable) * 100)
    result.has_data = True
    return result
