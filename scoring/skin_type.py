"""Skin-type compatibility: product's declared skin types vs the profile's type.

Tie-break order is exact > universal > partial > missing > mismatch, so a
product with no skin-type claim never scores below one that names other types.
"""
from __future__ import annotations

from typing import Sequence

from config import ALL_SKIN_TYPES, SKIN_TYPE_SCORES
from scoring.matching import contains_either
from scoring.models import DimensionResult


def score_skin_type(product_types: Sequence[str], skin_type: str) -> DimensionResult:
    if not product_types:
        return DimensionResult(
            score=SKIN_TYPE_SCORES["missing"],
            warnings=["No skin type information available for this product"],
        )
    if not skin_type:
        return DimensionResult(
            score=SKIN_TYPE_SCORES["missing"],
            warnings=["No skin type set in your profile"],
        )

    if skin_type in product_types:
        return DimensionResult(
            score=SKIN_TYPE_SCORES["exact"],
            reasons=[f"Perfect match for {skin_type} skin"],
            has_data=True,
        )

    if any(ALL_SKIN_TYPES in t for t in product_types):
        return DimensionResult(
            score=SKIN_TYPE_SCORES["universal"],
            reasons=[f"Suitable for all skin types, including {skin_type} skin"],
            has_data=True,
        )

    partial = [t for t in product_types if contains_either(t, skin_type)]
    if partial:
        return DimensionResult(
            score=SKIN_TYPE_SCORES["partial"],
            reasons=[f"Partial compatibility with {skin_type} skin: {', '.join(partial)}"],
            has_data=True,
        )

    return DimensionResult(
        score=SKIN_TYPE_SCORES["mismatch"],
        warnings=[f"Formulated for {', '.join(product_types)} skin, you have {skin_type} skin"],
        has_data=True,
    )
