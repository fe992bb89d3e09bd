"""Attribute scoring: shade/tone fit, base-makeup heuristics, stated preferences.

Shade scoring maps both the product shade and the user's skin tone onto a
shared tone vocabulary (config.SHADE_KEYWORDS) and checks for overlap. It is
a caution signal only, never a gate.

Category scoring applies coverage/finish heuristics to foundation and
concealer. Preference scoring compares finish and coverage against what the
user asked for, independent of skin type.
"""
from __future__ import annotations

from typing import List, Optional

from config import (
    BASE_MAKEUP_CATEGORIES,
    CATEGORY_HEURISTIC_POINTS,
    COLOR_CATEGORIES,
    NEUTRAL_SCORE,
    PREFERENCE_MATCH_SCORE,
    SHADE_KEYWORDS,
    SHADE_SCORES,
)
from components.records import ProductRecord, SkinProfile
from scoring.aggregator import round_half_up
from scoring.matching import has_any_keyword
from scoring.models import DimensionResult


def is_color_product(product: ProductRecord) -> bool:
    return has_any_keyword(product.category, COLOR_CATEGORIES) or has_any_keyword(
        product.name, COLOR_CATEGORIES
    )


def tone_categories(text: Optional[str]) -> List[str]:
    """Tone categories whose keywords appear in the text, in table order."""
    return [tone for tone, keywords in SHADE_KEYWORDS.items() if has_any_keyword(text, keywords)]


def score_shade(product: ProductRecord, skin_tone: str) -> DimensionResult:
    if not is_color_product(product) or not product.shade or not skin_tone:
        return DimensionResult(score=NEUTRAL_SCORE)

    shade_tones = tone_categories(product.shade)
    user_tones = tone_categories(skin_tone)
    if not shade_tones or not user_tones:
        # shade codes like "120" carry no tone words
        return DimensionResult(
            score=NEUTRAL_SCORE,
            warnings=[f'Could not read a tone from shade "{product.shade}", check swatches'],
        )

    if set(shade_tones) & set(user_tones):
        return DimensionResult(
            score=SHADE_SCORES["match"],
            reasons=[f'Shade "{product.shade}" matches your {skin_tone} skin tone'],
            has_data=True,
        )
    return DimensionResult(
        score=SHADE_SCORES["mismatch"],
        warnings=[f'Shade "{product.shade}" might not match your {skin_tone} skin tone'],
        has_data=True,
    )


def score_category(product: ProductRecord, skin_type: str) -> DimensionResult:
    result = DimensionResult(score=NEUTRAL_SCORE)
    if not has_any_keyword(product.category, BASE_MAKEUP_CATEGORIES):
        return result

    coverage = product.coverage or ""
    finish = product.finish or ""
    result.has_data = bool(coverage or finish)

    bonus = 0
    # ── Coverage ──
    if "oily" in skin_type and "full" in coverage:
        bonus += CATEGORY_HEURISTIC_POINTS
        result.reasons.append("Full coverage is great for oily skin")
    elif "dry" in skin_type and "light" in coverage:
        bonus += CATEGORY_HEURISTIC_POINTS
        result.reasons.append("Light coverage works well with dry skin")

    # ── Finish ──
    if "oily" in skin_type and "matte" in finish:
        bonus += CATEGORY_HEURISTIC_POINTS
        result.reasons.append("Matte finish is perfect for oily skin")
    elif "dry" in skin_type and "dewy" in finish:
        bonus += CATEGORY_HEURISTIC_POINTS
        result.reasons.append("Dewy finish is ideal for dry skin")

    result.score = min(100, NEUTRAL_SCORE + bonus)
    return result


def score_preferences(product: ProductRecord, profile: SkinProfile) -> DimensionResult:
    result = DimensionResult(score=NEUTRAL_SCORE)
    compared = 0
    points = 0

    if profile.preferred_finish and product.finish:
        compared += 1
        if profile.preferred_finish in product.finish:
            points += PREFERENCE_MATCH_SCORE
            result.reasons.append(f"Matches your preferred {profile.preferred_finish} finish")

    if profile.preferred_coverage and product.coverage:
        compared += 1
        if profile.preferred_coverage in product.coverage:
            points += PREFERENCE_MATCH_SCORE
            result.reasons.append(f"Matches your preferred {profile.preferred_coverage} coverage")

    if compared:
        result.score = round_half_up(points / compared)
        result.has_data = True
    return result
