"""Narrator: recommendation and compatibility-note strings for a scored match."""
from __future__ import annotations

from typing import List

from config import (
    LONG_INGREDIENT_LIST,
    MAX_LISTED_INGREDIENTS,
    POTENT_ACTIVES,
    SKIN_TYPE_SCORES,
)
from components.records import ProductRecord, SkinProfile
from scoring.models import MatchResult, Verdict

_CELEBRATORY = {Verdict.PERFECT_MATCH, Verdict.EXCELLENT_MATCH}
_TENTATIVE = {Verdict.PARTIAL_MATCH, Verdict.FAIR_MATCH}
_CAUTIONARY = {Verdict.CAUTION, Verdict.NOT_RECOMMENDED}


def _display_name(product: ProductRecord) -> str:
    return product.name or "this product"


def _skin(profile: SkinProfile) -> str:
    return f"{profile.skin_type} skin" if profile.skin_type else "skin"


def _top(items: List[str], n: int = MAX_LISTED_INGREDIENTS) -> str:
    return ", ".join(items[:n])


def build_recommendations(result: MatchResult, product: ProductRecord, profile: SkinProfile) -> List[str]:
    analysis = result.detailed_analysis
    name = _display_name(product)
    skin = _skin(profile)
    recs: List[str] = []

    if result.verdict in _CELEBRATORY:
        by_brand = f" by {product.brand}" if product.brand else ""
        recs.append(f"{name}{by_brand} is an excellent match for your {skin} profile!")
        if analysis.beneficial_ingredients:
            recs.append(f"Key benefits: {_top(analysis.beneficial_ingredients)}")
    elif result.verdict == Verdict.GOOD_MATCH:
        recs.append(f"{name} is a good match for your {skin} with some great benefits.")
    elif result.verdict in _TENTATIVE:
        recs.append(f"Consider trying {name}, but monitor how your {skin} responds.")
    elif result.verdict in _CAUTIONARY:
        recs.append(f"{name} may not be ideal for your {skin}.")
        if analysis.problematic_ingredients:
            recs.append(f"Potential concerns: {_top(analysis.problematic_ingredients, 2)}")

    if analysis.missing_beneficials:
        recs.append(f"To target your skin concerns, look for: {_top(analysis.missing_beneficials)}")

    if len(product.ingredients) > LONG_INGREDIENT_LIST:
        recs.append("This product has many ingredients, consider patch testing first")

    return recs


def build_compatibility_notes(result: MatchResult, product: ProductRecord, profile: SkinProfile) -> List[str]:
    analysis = result.detailed_analysis
    name = _display_name(product)
    notes: List[str] = []

    skin_type_score = result.breakdown.get("skinTypeScore", SKIN_TYPE_SCORES["missing"])
    if product.skin_type and skin_type_score <= SKIN_TYPE_SCORES["mismatch"]:
        notes.append(
            f"Consider patch testing {name} as it is formulated for different skin types "
            f"than your {_skin(profile)}."
        )

    if analysis.problematic_ingredients:
        notes.append(f"Monitor for sensitivity to {name} due to: {_top(analysis.problematic_ingredients, 2)}")

    if any(active in i for i in analysis.beneficial_ingredients for active in POTENT_ACTIVES):
        notes.append(
            f"Start with less frequent use of {name} to build tolerance, "
            "especially for actives like retinol or acids."
        )

    if product.brand and product.brand in profile.preferred_brands:
        notes.append(f"This product is from your preferred brand: {product.brand}.")

    return notes
