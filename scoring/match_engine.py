"""Match engine: scores one product against one skin profile.

Pipeline: normalize → allergen gate → brand gate → dimension scorers →
aggregate → narrate. The gates end the match early with a fixed verdict;
otherwise skin type, ingredients, concerns and stated preferences are
weighted into one 0-100 score (weights in config.py), with shade, category
and preferred-brand adjustments added on top.

Every call is a pure function of its inputs: no clock, no randomness, no I/O
beyond the one-time load of the reference tables.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from config import GATE_CONFIDENCE
from components.ingredient_db import IngredientDatabase, get_ingredient_db
from components.normalizer import normalize_product, normalize_profile
from components.product_catalog import build_product_record
from components.profile_builder import build_skin_profile
from components.records import ProductRecord, SkinProfile
from scoring.aggregator import VerdictBand, compute_confidence, determine_band, weighted_score
from scoring.attributes import score_category, score_preferences, score_shade
from scoring.concerns import score_skin_concerns
from scoring.ingredients import analyze_ingredients
from scoring.models import MatchResult, Verdict
from scoring.narrator import build_compatibility_notes, build_recommendations
from scoring.safety import check_allergies, check_brand_preference
from scoring.skin_type import score_skin_type

logger = logging.getLogger(__name__)

ProductInput = Union[ProductRecord, Mapping[str, Any]]
ProfileInput = Union[SkinProfile, Mapping[str, Any]]


def _terminate(result: MatchResult, verdict: Verdict, warnings: List[str]) -> MatchResult:
    result.verdict = verdict
    result.score = 0
    result.confidence = GATE_CONFIDENCE[verdict.value]
    result.add_warnings(warnings)
    return result


def match(
    product: ProductInput,
    profile: ProfileInput,
    bands: Optional[Sequence[VerdictBand]] = None,
    db: Optional[IngredientDatabase] = None,
) -> MatchResult:
    item = normalize_product(build_product_record(product))
    user = normalize_profile(build_skin_profile(profile))
    db = db or get_ingredient_db()
    result = MatchResult()

    # ── Gates ──
    allergy = check_allergies(item.ingredients, user.allergies)
    if allergy.triggered:
        logger.debug("Allergen gate hit for '%s': %s", item.name, allergy.warnings)
        result.breakdown["safetyScore"] = 0
        return _terminate(result, Verdict.CONTAINS_ALLERGEN, allergy.warnings)

    brand = check_brand_preference(item.brand, user)
    if brand.triggered:
        logger.debug("Brand gate hit for '%s' (%s)", item.name, item.brand)
        return _terminate(result, Verdict.USER_PREFERENCE_CONFLICT, brand.warnings)

    if not item.ingredients and not (item.skin_type and user.skin_type):
        return _terminate(
            result,
            Verdict.MISSING_INFORMATION,
            ["Not enough product information to assess compatibility (no ingredients or skin type listed)"],
        )

    # ── Dimensions ──
    skin_type = score_skin_type(item.skin_type, user.skin_type)
    ingredients = analyze_ingredients(item.ingredients, user.skin_type, db)
    concerns = score_skin_concerns(item.ingredients, user.skin_concerns, db)
    preferences = score_preferences(item, user)
    shade = score_shade(item, user.skin_tone)
    category = score_category(item, user.skin_type)

    result.add_reasons(brand.reasons)
    for dimension in (skin_type, ingredients, concerns, preferences, shade, category):
        result.add_reasons(dimension.reasons)
        result.add_warnings(dimension.warnings)

    result.breakdown.update(
        {
            "skinTypeScore": skin_type.score,
            "ingredientScore": ingredients.score,
            "concernsScore": concerns.score,
            "preferenceScore": preferences.score,
            "shadeScore": shade.score,
            "categoryScore": category.score,
            "brandScore": 100 if brand.bonus else 0,
        }
    )

    analysis = result.detailed_analysis
    analysis.beneficial_ingredients = list(ingredients.beneficial)
    analysis.problematic_ingredients = list(ingredients.problematic)
    analysis.neutral_ingredients = list(ingredients.neutral)
    analysis.missing_beneficials = list(concerns.missing_beneficials)

    # ── Aggregate ──
    result.score = weighted_score(result.breakdown, brand_bonus=brand.bonus)
    band = determine_band(result.score, bands)
    result.verdict = band.verdict
    result.confidence = compute_confidence(
        band,
        {
            "skin_type": skin_type.has_data,
            "ingredients": ingredients.has_data,
            "concerns": concerns.has_data,
        },
    )

    # ── Narrate ──
    result.add_recommendations(build_recommendations(result, item, user))
    analysis.compatibility_notes = build_compatibility_notes(result, item, user)
    return result


def rank_products(
    products: Sequence[ProductInput],
    profile: ProfileInput,
    top_k: int = 15,
    bands: Optional[Sequence[VerdictBand]] = None,
) -> List[Dict[str, Any]]:
    user = build_skin_profile(profile)
    scored = [{"product": p, "result": match(p, user, bands=bands)} for p in products]
    scored.sort(key=lambda x: (x["result"].score, x["result"].confidence), reverse=True)
    return scored[:top_k]
