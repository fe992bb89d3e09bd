"""Result types produced by the matching engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List


class Verdict(str, Enum):
    PERFECT_MATCH = "PERFECT_MATCH"
    EXCELLENT_MATCH = "EXCELLENT_MATCH"
    GOOD_MATCH = "GOOD_MATCH"
    PARTIAL_MATCH = "PARTIAL_MATCH"
    FAIR_MATCH = "FAIR_MATCH"
    CAUTION = "CAUTION"
    NOT_RECOMMENDED = "NOT_RECOMMENDED"
    CONTAINS_ALLERGEN = "CONTAINS_ALLERGEN"
    USER_PREFERENCE_CONFLICT = "USER_PREFERENCE_CONFLICT"
    MISSING_INFORMATION = "MISSING_INFORMATION"
    NO_MATCH = "NO_MATCH"


def extend_unique(target: List[str], items: Iterable[str]) -> List[str]:
    """Append items not already present, keeping order."""
    for item in items:
        if item and item not in target:
            target.append(item)
    return target


@dataclass
class DimensionResult:
    """One scored axis. ``has_data`` is False when the score is a neutral fallback."""
    score: int = 50
    reasons: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    has_data: bool = False


@dataclass
class IngredientAnalysis(DimensionResult):
    beneficial: List[str] = field(default_factory=list)
    problematic: List[str] = field(default_factory=list)
    neutral: List[str] = field(default_factory=list)


@dataclass
class ConcernAnalysis(DimensionResult):
    addressed: List[str] = field(default_factory=list)
    missing_beneficials: List[str] = field(default_factory=list)


@dataclass
class GateResult:
    triggered: bool = False
    reasons: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    bonus: int = 0


def default_breakdown() -> Dict[str, int]:
    return {
        "skinTypeScore": 0,
        "ingredientScore": 0,
        "concernsScore": 0,
        "preferenceScore": 0,
        "shadeScore": 0,
        "categoryScore": 0,
        "brandScore": 0,
        "safetyScore": 100,
    }


@dataclass
class DetailedAnalysis:
    beneficial_ingredients: List[str] = field(default_factory=list)
    problematic_ingredients: List[str] = field(default_factory=list)
    neutral_ingredients: List[str] = field(default_factory=list)
    missing_beneficials: List[str] = field(default_factory=list)
    compatibility_notes: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "beneficialIngredients": list(self.beneficial_ingredients),
            "problematicIngredients": list(self.problematic_ingredients),
            "neutralIngredients": list(self.neutral_ingredients),
            "missingBeneficials": list(self.missing_beneficials),
            "compatibilityNotes": list(self.compatibility_notes),
        }


@dataclass
class MatchResult:
    verdict: Verdict = Verdict.NO_MATCH
    score: int = 0
    confidence: int = 0
    reasons: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    breakdown: Dict[str, int] = field(default_factory=default_breakdown)
    detailed_analysis: DetailedAnalysis = field(default_factory=DetailedAnalysis)

    def add_reasons(self, items: Iterable[str]) -> None:
        extend_unique(self.reasons, items)

    def add_warnings(self, items: Iterable[str]) -> None:
        extend_unique(self.warnings, items)

    def add_recommendations(self, items: Iterable[str]) -> None:
        extend_unique(self.recommendations, items)

    def to_dict(self) -> Dict[str, Any]:
        """camelCase payload for the extension popup."""
        return {
            "verdict": self.verdict.value,
            "score": self.score,
            "confidence": self.confidence,
            "reasons": list(self.reasons),
            "warnings": list(self.warnings),
            "recommendations": list(self.recommendations),
            "breakdown": dict(self.breakdown),
            "detailedAnalysis": self.detailed_analysis.to_dict(),
        }
