"""Input records consumed by the matching engine.

Both records are immutable: sequences are stored as tuples and the
dataclasses are frozen. Build them from raw payloads with
``components.product_catalog.build_product_record`` and
``components.profile_builder.build_skin_profile``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ProductRecord:
    name: str = ""
    brand: str = ""
    ingredients: Tuple[str, ...] = ()
    shade: Optional[str] = None
    coverage: Optional[str] = None
    finish: Optional[str] = None
    category: Optional[str] = None
    formulation: Optional[str] = None
    skin_type: Tuple[str, ...] = ()  # skin types the product claims to suit
    price: Optional[str] = None


@dataclass(frozen=True)
class SkinProfile:
    skin_type: str = ""
    skin_tone: str = ""
    allergies: Tuple[str, ...] = ()
    disliked_brands: Tuple[str, ...] = ()
    preferred_brands: Tuple[str, ...] = ()
    skin_concerns: Tuple[str, ...] = ()
    preferred_finish: Optional[str] = None
    preferred_coverage: Optional[str] = None
