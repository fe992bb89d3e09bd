"""Gates: checks that end a match before any dimension is scored.

Allergen exposure is a safety issue, not a preference, so a single allergen
hit short-circuits the pipeline; it is never averaged against ingredient
quality. A disliked brand does the same at slightly lower confidence.
"""
from __future__ import annotations

from typing import Sequence

from config import BRAND_BONUS
from components.records import SkinProfile
from scoring.matching import contains_either
from scoring.models import GateResult, extend_unique


def check_allergies(ingredients: Sequence[str], allergies: Sequence[str]) -> GateResult:
    result = GateResult()
    for allergy in allergies:
        for ingredient in ingredients:
            if contains_either(ingredient, allergy):
                result.triggered = True
                extend_unique(result.warnings, [f"Contains {ingredient} (allergen: {allergy})"])
    return result


def check_brand_preference(brand: str, profile: SkinProfile) -> GateResult:
    if not brand:
        return GateResult()

    if brand in profile.disliked_brands:
        return GateResult(
            triggered=True,
            warnings=[f'"{brand}" is in your disliked brands list'],
        )

    if brand in profile.preferred_brands:
        return GateResult(
            reasons=[f'"{brand}" is one of your preferred brands'],
            bonus=BRAND_BONUS,
        )

    return GateResult()
