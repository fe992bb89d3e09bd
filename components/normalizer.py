"""Normalizer: lower-cases, trims and de-duplicates record fields.

All downstream matching is substring containment, so every string has to be
in one canonical form before a scorer sees it. Skin types and concerns are
also resolved through the alias tables in config.py. Unknown values pass
through unchanged.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Tuple

from config import CONCERN_ALIASES, SKIN_TYPE_ALIASES
from components.records import ProductRecord, SkinProfile


def normalize_text(value: Optional[str]) -> str:
    if value is None:
        return ""
    return " ".join(str(value).split()).lower()


def _optional_text(value: Optional[str]) -> Optional[str]:
    text = normalize_text(value)
    return text or None


def unique(values: Iterable[str]) -> Tuple[str, ...]:
    """Normalize each value, drop empties and duplicates, keep first-seen order."""
    seen = set()
    out = []
    for value in values or ():
        text = normalize_text(value)
        if text and text not in seen:
            seen.add(text)
            out.append(text)
    return tuple(out)


def resolve_skin_type_key(skin_type: Optional[str]) -> str:
    text = normalize_text(skin_type)
    return SKIN_TYPE_ALIASES.get(text, text)


def resolve_concern_key(concern: Optional[str]) -> str:
    text = normalize_text(concern)
    return CONCERN_ALIASES.get(text, text.replace(" ", "_"))


def normalize_product(product: ProductRecord) -> ProductRecord:
    return replace(
        product,
        name=normalize_text(product.name),
        brand=normalize_text(product.brand),
        ingredients=unique(product.ingredients),
        shade=_optional_text(product.shade),
        coverage=_optional_text(product.coverage),
        finish=_optional_text(product.finish),
        category=_optional_text(product.category),
        formulation=_optional_text(product.formulation),
        skin_type=unique(resolve_skin_type_key(t) for t in product.skin_type or ()),
        price=_optional_text(product.price),
    )


def normalize_profile(profile: SkinProfile) -> SkinProfile:
    return replace(
        profile,
        skin_type=resolve_skin_type_key(profile.skin_type),
        skin_tone=normalize_text(profile.skin_tone),
        allergies=unique(profile.allergies),
        disliked_brands=unique(profile.disliked_brands),
        preferred_brands=unique(profile.preferred_brands),
        skin_concerns=unique(resolve_concern_key(c) for c in profile.skin_concerns or ()),
        preferred_finish=_optional_text(profile.preferred_finish),
        preferred_coverage=_optional_text(profile.preferred_coverage),
    )
