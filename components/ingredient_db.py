"""Ingredient reference tables: loads, validates, and freezes data/ingredients.json.

Tables are keyed by canonical skin-type key (config.SKIN_TYPES) and concern
key (config.SKIN_CONCERNS). A key with no table yields an empty tuple, so an
unrecognized skin type or concern scores as "no data" rather than failing.

The loaded database is cached per path and never mutated; concurrent match
calls share one instance.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from config import INGREDIENT_DB_PATH, SKIN_CONCERNS_SET, SKIN_TYPES_SET

logger = logging.getLogger(__name__)

_REQUIRED_SECTIONS = ("beneficial", "problematic", "universal_problematic", "concerns")


class IngredientDatabaseError(ValueError):
    pass


@dataclass(frozen=True)
class IngredientEntry:
    name: str
    weight: int
    description: str = ""


@dataclass(frozen=True)
class IngredientDatabase:
    beneficial: Mapping[str, Tuple[IngredientEntry, ...]]
    problematic: Mapping[str, Tuple[IngredientEntry, ...]]
    universal_problematic: Tuple[IngredientEntry, ...]
    concerns: Mapping[str, Tuple[str, ...]]

    def beneficial_for(self, skin_type_key: str) -> Tuple[IngredientEntry, ...]:
        return self.beneficial.get(skin_type_key, ())

    def problematic_for(self, skin_type_key: str) -> Tuple[IngredientEntry, ...]:
        return self.problematic.get(skin_type_key, ())

    def concern_vocabulary(self, concern_key: str) -> Tuple[str, ...]:
        return self.concerns.get(concern_key, ())


def _parse_entry(raw: Any, where: str, positive: bool) -> IngredientEntry:
    if not isinstance(raw, dict) or not raw.get("name"):
        raise IngredientDatabaseError(f"{where}: entry must be an object with a 'name'")
    try:
        weight = int(raw["weight"])
    except (KeyError, TypeError, ValueError) as exc:
        raise IngredientDatabaseError(f"{where}: '{raw['name']}' has no integer weight") from exc
    if positive and weight <= 0:
        raise IngredientDatabaseError(f"{where}: beneficial weight for '{raw['name']}' must be > 0")
    if not positive and weight >= 0:
        raise IngredientDatabaseError(f"{where}: problematic weight for '{raw['name']}' must be < 0")
    return IngredientEntry(
        name=str(raw["name"]).strip().lower(),
        weight=weight,
        description=str(raw.get("description", "")).strip(),
    )


def _parse_table(raw: Any, section: str, positive: bool) -> Mapping[str, Tuple[IngredientEntry, ...]]:
    if not isinstance(raw, dict):
        raise IngredientDatabaseError(f"'{section}' must map skin types to entry lists")
    table: Dict[str, Tuple[IngredientEntry, ...]] = {}
    for skin_type, entries in raw.items():
        key = skin_type.strip().lower()
        if key not in SKIN_TYPES_SET:
            logger.warning("Ingredient table '%s' has unknown skin type '%s'", section, skin_type)
        table[key] = tuple(
            _parse_entry(entry, f"{section}.{key}", positive) for entry in entries or []
        )
    return MappingProxyType(table)


def parse_ingredient_db(payload: Mapping[str, Any]) -> IngredientDatabase:
    missing = [s for s in _REQUIRED_SECTIONS if s not in payload]
    if missing:
        raise IngredientDatabaseError(f"Ingredient database missing sections: {', '.join(missing)}")

    concerns: Dict[str, Tuple[str, ...]] = {}
    for concern, names in payload["concerns"].items():
        key = concern.strip().lower()
        if key not in SKIN_CONCERNS_SET:
            logger.warning("Concern table has unknown concern '%s'", concern)
        concerns[key] = tuple(str(n).strip().lower() for n in names or [] if str(n).strip())

    return IngredientDatabase(
        beneficial=_parse_table(payload["beneficial"], "beneficial", positive=True),
        problematic=_parse_table(payload["problematic"], "problematic", positive=False),
        universal_problematic=tuple(
            _parse_entry(entry, "universal_problematic", positive=False)
            for entry in payload["universal_problematic"] or []
        ),
        concerns=MappingProxyType(concerns),
    )


def load_ingredient_db(path: Path) -> IngredientDatabase:
    try:
        payload = json.loads(Path(path).read_text())
    except FileNotFoundError as exc:
        raise IngredientDatabaseError(f"Ingredient database not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise IngredientDatabaseError(f"Invalid JSON in ingredient database {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise IngredientDatabaseError(f"Ingredient database {path} must be a JSON object")
    return parse_ingredient_db(payload)


@lru_cache(maxsize=None)
def get_ingredient_db(path: Optional[Path] = None) -> IngredientDatabase:
    """Process-wide reference tables, loaded on first use."""
    db_path = Path(path) if path else INGREDIENT_DB_PATH
    logger.debug("Loading ingredient database from %s", db_path)
    return load_ingredient_db(db_path)
