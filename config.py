"""Centralized configuration for the BeautyMatch engine.

Single source of truth for skin-type and concern vocabularies, alias tables,
shade keywords, scoring weights and the verdict band table. Every module that
needs one of these should import from here.
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent

# ── Skin types (canonical set) ─────────────────────────────────────────
# Reference tables are keyed by these values.

SKIN_TYPES = ["dry", "oily", "sensitive", "mature", "combination", "normal", "acne-prone"]
SKIN_TYPES_SET = set(SKIN_TYPES)

# Free-text skin type → canonical key. Scrapers report "oily skin", the
# onboarding form stores "oily"; both have to land on the same key.
SKIN_TYPE_ALIASES = {
    "oily skin": "oily",
    "dry skin": "dry",
    "sensitive skin": "sensitive",
    "mature skin": "mature",
    "combination skin": "combination",
    "normal skin": "normal",
    "acne prone": "acne-prone",
    "acne-prone skin": "acne-prone",
    "acne prone skin": "acne-prone",
    "acne": "acne-prone",
    "aging": "mature",
    "ageing": "mature",
}

ALL_SKIN_TYPES = "all skin types"

# ── Skin concerns ──────────────────────────────────────────────────────

SKIN_CONCERNS = [
    "acne", "aging", "hyperpigmentation", "dryness", "sensitivity",
    "dullness", "enlarged_pores", "oiliness",
]
SKIN_CONCERNS_SET = set(SKIN_CONCERNS)

# Onboarding UI labels → concern keys
CONCERN_ALIASES = {
    "acne/breakouts": "acne",
    "breakouts": "acne",
    "dark spots": "hyperpigmentation",
    "fine lines": "aging",
    "wrinkles": "aging",
    "anti-aging": "aging",
    "large pores": "enlarged_pores",
    "enlarged pores": "enlarged_pores",
    "redness": "sensitivity",
    "uneven texture": "dullness",
    "dry patches": "dryness",
    "excess oil": "oiliness",
    "shine": "oiliness",
}

# ── Shade / tone ───────────────────────────────────────────────────────

# Color cosmetics: the only products where shade is judged.
COLOR_CATEGORIES = [
    "foundation", "concealer", "lipstick", "eyeshadow", "blush", "bronzer",
    "highlighter", "gloss", "tinted moisturizer",
]

SHADE_KEYWORDS = {
    "fair": ["fair", "light", "porcelain", "ivory", "vanilla", "pearl"],
    "light": ["light", "beige", "sand", "honey", "golden"],
    "medium": ["medium", "tan", "caramel", "amber", "bronze"],
    "dark": ["dark", "deep", "espresso", "cocoa", "mahogany"],
    "neutral": ["neutral", "natural", "true"],
    "warm": ["warm", "golden", "yellow", "peachy", "honey"],
    "cool": ["cool", "pink", "rose", "berry", "rosy"],
}

# Categories where coverage / finish heuristics apply
BASE_MAKEUP_CATEGORIES = ["foundation", "concealer"]

# ── Dimension sub-scores (0-100) ───────────────────────────────────────

NEUTRAL_SCORE = 50

# exact > universal > partial > missing > mismatch
SKIN_TYPE_SCORES = {
    "exact": 100,
    "universal": 85,
    "partial": 70,
    "missing": NEUTRAL_SCORE,
    "mismatch": 30,
}

SHADE_SCORES = {"match": 100, "mismatch": 30}

# Points added to the category sub-score per satisfied heuristic
CATEGORY_HEURISTIC_POINTS = 25

PREFERENCE_MATCH_SCORE = 100

# ── Aggregation ────────────────────────────────────────────────────────

WEIGHTS = {"skin_type": 0.30, "ingredients": 0.40, "concerns": 0.20, "preferences": 0.10}

# Additive adjustments outside the weight pool; the total is clamped to 0-100.
BRAND_BONUS = 5
# Shade and category sub-scores shift the total by (sub_score - 50) * scale.
ADJUSTMENT_SCALE = {"shade": 0.10, "category": 0.10}

# ── Verdicts ───────────────────────────────────────────────────────────
# Descending bands: (min_score, verdict, confidence_delta, confidence_floor).
# A floor of 0 means "no floor".

VERDICT_BANDS = [
    (90, "PERFECT_MATCH", 10, 0),
    (80, "EXCELLENT_MATCH", 5, 0),
    (70, "GOOD_MATCH", 0, 0),
    (60, "PARTIAL_MATCH", -5, 60),
    (50, "FAIR_MATCH", -10, 50),
    (40, "CAUTION", -15, 40),
    (0, "NOT_RECOMMENDED", -20, 30),
]

CONFIDENCE_BASE = 70
# Added when the dimension was scored from real product data
CONFIDENCE_BOOSTS = {"skin_type": 10, "ingredients": 15, "concerns": 5}

GATE_CONFIDENCE = {
    "CONTAINS_ALLERGEN": 100,
    "USER_PREFERENCE_CONFLICT": 90,
    "MISSING_INFORMATION": 20,
}

# ── Narration ──────────────────────────────────────────────────────────

# Beneficial actives that warrant a gradual-introduction note
POTENT_ACTIVES = ["retinol", "acid"]
LONG_INGREDIENT_LIST = 30
MAX_LISTED_INGREDIENTS = 3

# ── Reference data ─────────────────────────────────────────────────────

INGREDIENT_DB_PATH = Path(
    os.getenv("BEAUTYMATCH_INGREDIENT_DB", str(PROJECT_ROOT / "data" / "ingredients.json"))
)
