"""Product records: converts a raw scraped product payload into a ProductRecord.

Scrapers hand over loosely-shaped dicts: camelCase keys from the extension
("skinType"), ingredient lists that are sometimes one text blob, missing
optional fields. The builder accepts all of that so the scoring engine never
hits a missing key. Validation problems are logged, never raised.
"""
from __future__ import annotations

import logging
import re
from typing import Any, List, Mapping, Optional, Tuple

from components.records import ProductRecord

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"name", "brand"}
_SEQUENCE_TYPES = (str, list, tuple, set, frozenset)

# snake_case field → keys accepted in scraped payloads
_FIELD_KEYS = {
    "name": ("name", "title"),
    "brand": ("brand",),
    "ingredients": ("ingredients",),
    "shade": ("shade",),
    "coverage": ("coverage",),
    "finish": ("finish",),
    "category": ("category",),
    "formulation": ("formulation",),
    "skin_type": ("skin_type", "skinType"),
    "price": ("price",),
}

_LIST_FIELDS = ("ingredients", "skin_type")

# Commas between digits belong to the name ("1,2-hexanediol").
_INGREDIENT_SEPARATORS = re.compile(r"[;•\n]|(?<!\d),|,(?!\d)")
# "Ingredients:" / "Full INCI list:" heading; no separator before the colon
_LEADING_LABEL = re.compile(r"^[^:,;•\n]*:")
_LEADING_NUMBERING = re.compile(r"^\d+[.)]\s*")
_NUMERIC_ONLY = re.compile(r"^[\d\s.,%]+$")


def _pick(raw: Mapping[str, Any], field: str) -> Any:
    for key in _FIELD_KEYS[field]:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_ingredient_text(text: str) -> List[str]:
    """Split a scraped ingredient paragraph into individual ingredient names.

    Drops a leading "Ingredients:" style label, parenthesised and bracketed
    notes, list numbering ("1. Aqua"), bare numbers, URLs and "may contain"
    allergen disclaimers. Chemical names that start with a digit
    ("1,2-hexanediol") are kept.
    """
    if not text:
        return []
    clean = _LEADING_LABEL.sub("", text, count=1)
    clean = re.sub(r"\([^)]*\)", "", clean)
    clean = re.sub(r"\[[^\]]*\]", "", clean)

    ingredients = []
    for part in _INGREDIENT_SEPARATORS.split(clean):
        item = _LEADING_NUMBERING.sub("", part.strip().lower()).strip()
        if not 2 < len(item) < 50 or _NUMERIC_ONLY.match(item):
            continue
        if "www." in item or "http" in item or "may contain" in item:
            continue
        ingredients.append(item)
    return ingredients


def _as_ingredients(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(parse_ingredient_text(value))
    return tuple(str(v) for v in value if v is not None and str(v).strip())


def _as_skin_types(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    return tuple(str(v).strip() for v in value if v is not None and str(v).strip())


def _pick_sequence(raw: Mapping[str, Any], field: str) -> Any:
    """List-like field value, or None when it holds some other type."""
    value = _pick(raw, field)
    if value is not None and not isinstance(value, _SEQUENCE_TYPES):
        return None
    return value


def _validate_product(raw: Mapping[str, Any]) -> List[str]:
    """Validate a scraped payload. Returns list of warnings."""
    warnings = []
    name = _pick(raw, "name") or "product"

    for field in sorted(_REQUIRED_FIELDS):
        if not _pick(raw, field):
            warnings.append(f"{name}: missing required field '{field}'")

    for field in _LIST_FIELDS:
        value = _pick(raw, field)
        if value is not None and not isinstance(value, _SEQUENCE_TYPES):
            warnings.append(f"{name}: {field} has unexpected type {type(value).__name__}")

    return warnings


def build_product_record(raw: Mapping[str, Any]) -> ProductRecord:
    if isinstance(raw, ProductRecord):
        return raw

    for w in _validate_product(raw):
        logger.warning("Product validation: %s", w)

    return ProductRecord(
        name=_as_text(_pick(raw, "name")) or "",
        brand=_as_text(_pick(raw, "brand")) or "",
        ingredients=_as_ingredients(_pick_sequence(raw, "ingredients")),
        shade=_as_text(_pick(raw, "shade")),
        coverage=_as_text(_pick(raw, "coverage")),
        finish=_as_text(_pick(raw, "finish")),
        category=_as_text(_pick(raw, "category")),
        formulation=_as_text(_pick(raw, "formulation")),
        skin_type=_as_skin_types(_pick_sequence(raw, "skin_type")),
        price=_as_text(_pick(raw, "price")),
    )
