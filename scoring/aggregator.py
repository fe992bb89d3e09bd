"""Aggregator: weighted sub-scores → final score, verdict and confidence.

Weights and the verdict band table live in config.py. Callers can pass their
own bands to ``determine_band`` (and through ``match``) to try a different
taxonomy without touching scorer code.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from config import (
    ADJUSTMENT_SCALE,
    CONFIDENCE_BASE,
    CONFIDENCE_BOOSTS,
    NEUTRAL_SCORE,
    VERDICT_BANDS,
    WEIGHTS,
)
from scoring.models import Verdict


@dataclass(frozen=True)
class VerdictBand:
    min_score: int
    verdict: Verdict
    confidence_delta: int = 0
    confidence_floor: int = 0


def build_bands(rows: Iterable[Tuple[int, str, int, int]]) -> Tuple[VerdictBand, ...]:
    """Band table sorted by descending threshold. Raises ValueError on an unknown verdict."""
    bands = [
        VerdictBand(int(min_score), Verdict(verdict), int(delta), int(floor))
        for min_score, verdict, delta, floor in rows
    ]
    if not bands:
        raise ValueError("Verdict band table is empty")
    return tuple(sorted(bands, key=lambda b: b.min_score, reverse=True))


DEFAULT_BANDS = build_bands(VERDICT_BANDS)


def round_half_up(x: float) -> int:
    """Round halves up (2.5 → 3, -2.5 → -2). Builtin ``round`` gives 2."""
    return int(math.floor(x + 0.5))


def clamp_score(x: float) -> int:
    return max(0, min(100, round_half_up(x)))


def weighted_score(
    breakdown: Dict[str, int],
    brand_bonus: int = 0,
    weights: Optional[Dict[str, float]] = None,
) -> int:
    w = weights or WEIGHTS
    core = (
        w["skin_type"] * breakdown["skinTypeScore"]
        + w["ingredients"] * breakdown["ingredientScore"]
        + w["concerns"] * breakdown["concernsScore"]
        + w["preferences"] * breakdown["preferenceScore"]
    )
    # Shade and category shift the total; neutral (50) shifts nothing.
    adjustments = (
        ADJUSTMENT_SCALE["shade"] * (breakdown["shadeScore"] - NEUTRAL_SCORE)
        + ADJUSTMENT_SCALE["category"] * (breakdown["categoryScore"] - NEUTRAL_SCORE)
    )
    return clamp_score(core + adjustments + brand_bonus)


def determine_band(score: int, bands: Optional[Sequence[VerdictBand]] = None) -> VerdictBand:
    table = bands or DEFAULT_BANDS
    for band in table:
        if score >= band.min_score:
            return band
    return table[-1]


def compute_confidence(band: VerdictBand, evidence: Dict[str, bool]) -> int:
    """Base confidence, raised for each dimension scored from real data, then banded."""
    confidence = CONFIDENCE_BASE
    for dimension, boost in CONFIDENCE_BOOSTS.items():
        if evidence.get(dimension):
            confidence += boost
    confidence += band.confidence_delta
    if band.confidence_floor:
        confidence = max(confidence, band.confidence_floor)
    return clamp_score(confidence)
