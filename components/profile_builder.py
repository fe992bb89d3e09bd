from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Tuple

from components.records import SkinProfile

logger = logging.getLogger(__name__)

_LIST_TYPES = (str, list, tuple, set, frozenset)


# ── Stored-settings keys ─────────────────────────────────────────────
# The onboarding page persists camelCase keys; older exports and Python
# callers use snake_case. Both are accepted.
_PROFILE_KEYS = {
    "skin_type": ("skin_type", "skinType"),
    "skin_tone": ("skin_tone", "skinTone"),
    "allergies": ("allergies",),
    "disliked_brands": ("disliked_brands", "dislikedBrands"),
    "preferred_brands": ("preferred_brands", "preferredBrands"),
    "skin_concerns": ("skin_concerns", "skinConcerns", "concerns"),
    "preferred_finish": ("preferred_finish", "preferredFinish"),
    "preferred_coverage": ("preferred_coverage", "preferredCoverage"),
}


def _get(stored: Mapping[str, Any], field: str) -> Any:
    for key in _PROFILE_KEYS[field]:
        value = stored.get(key)
        if value is not None:
            return value
    return None


def _as_set(value: Any, field: str) -> Tuple[str, ...]:
    """List-like settings may arrive as a comma-separated string from a text input."""
    if value is None:
        return ()
    if not isinstance(value, _LIST_TYPES):
        logger.warning(
            "Skin profile field '%s' has unexpected type %s; ignoring it", field, type(value).__name__
        )
        return ()
    if isinstance(value, str):
        value = value.split(",")
    return tuple(str(v).strip() for v in value if v is not None and str(v).strip())


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def build_skin_profile(stored: Mapping[str, Any]) -> SkinProfile:
    if isinstance(stored, SkinProfile):
        return stored

    skin_type = _as_text(_get(stored, "skin_type")) or ""
    if not skin_type:
        logger.warning("Skin profile has no skin type; skin-type scoring will be neutral")

    return SkinProfile(
        skin_type=skin_type,
        skin_tone=_as_text(_get(stored, "skin_tone")) or "",
        allergies=_as_set(_get(stored, "allergies"), "allergies"),
        disliked_brands=_as_set(_get(stored, "disliked_brands"), "disliked_brands"),
        preferred_brands=_as_set(_get(stored, "preferred_brands"), "preferred_brands"),
        skin_concerns=_as_set(_get(stored, "skin_concerns"), "skin_concerns"),
        preferred_finish=_as_text(_get(stored, "preferred_finish")),
        preferred_coverage=_as_text(_get(stored, "preferred_coverage")),
    )
