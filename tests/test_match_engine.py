"""End-to-end tests for scoring/match_engine.py: gates, aggregation, narration, ranking."""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
from components.records import ProductRecord, SkinProfile
from data.mock_data import MOCK_PRODUCTS, MOCK_PROFILES
from scoring.aggregator import build_bands
from scoring.match_engine import match, rank_products
from scoring.models import Verdict


# ══════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════

def _profile(name):
    return next(p for p in MOCK_PROFILES if p["name"] == name)


def _product(brand):
    return next(p for p in MOCK_PRODUCTS if p["brand"] == brand)


@pytest.fixture
def avery():
    return _profile("Avery")


@pytest.fixture
def maya():
    return _profile("Maya")


@pytest.fixture
def sam():
    return _profile("Sam")


@pytest.fixture
def cleanser():
    return _product("CeraVe")


@pytest.fixture
def foundation():
    return _product("Maybelline")


@pytest.fixture
def body_butter():
    return _product("Brand X")


@pytest.fixture
def dry_cream():
    return {
        "name": "Barrier Cream",
        "brand": "Acme",
        "ingredients": ["Hyaluronic Acid", "Ceramides"],
        "skinType": ["dry"],
    }


# ══════════════════════════════════════════════════════════════════════
# Worked scenarios
# ══════════════════════════════════════════════════════════════════════

class TestScenarios:
    def test_allergen_is_terminal(self):
        result = match(
            {"name": "Serum", "brand": "Acme", "ingredients": ["Niacinamide", "Fragrance"]},
            {"skinType": "oily", "allergies": ["fragrance"]},
        )
        assert result.verdict == Verdict.CONTAINS_ALLERGEN
        assert result.score == 0
        assert result.confidence == 100
        assert result.breakdown["safetyScore"] == 0
        assert any("fragrance" in w for w in result.warnings)

    def test_dry_skin_beneficials(self, dry_cream):
        result = match(dry_cream, {"skinType": "dry"})
        assert result.breakdown["skinTypeScore"] == 100
        assert result.breakdown["ingredientScore"] == 75
        assert result.score == 75
        assert result.verdict == Verdict.GOOD_MATCH
        assert result.confidence == 95
        assert result.detailed_analysis.beneficial_ingredients == ["hyaluronic acid", "ceramides"]

    def test_sensitive_skin_irritants(self):
        result = match(
            {"name": "Toner", "brand": "Acme", "ingredients": ["Fragrance", "Alcohol Denat"]},
            {"skinType": "sensitive"},
        )
        assert result.breakdown["skinTypeScore"] == 50
        assert result.breakdown["ingredientScore"] == 28
        assert result.score == 41
        assert result.verdict == Verdict.CAUTION
        assert result.detailed_analysis.problematic_ingredients == ["fragrance", "alcohol denat"]

    def test_concern_coverage(self):
        result = match(
            {"name": "Spot Gel", "brand": "Acme", "ingredients": ["Salicylic Acid"]},
            {"skinType": "oily", "skinConcerns": ["acne"]},
        )
        assert result.breakdown["concernsScore"] == 100
        assert result.breakdown["ingredientScore"] == 70
        assert result.detailed_analysis.missing_beneficials == []
        assert "Addresses acne: salicylic acid" in result.reasons
        assert result.score == 68
        assert result.verdict == Verdict.PARTIAL_MATCH


# ══════════════════════════════════════════════════════════════════════
# Gates
# ══════════════════════════════════════════════════════════════════════

class TestGates:
    def test_disliked_brand(self, avery, body_butter):
        result = match(body_butter, avery)
        assert result.verdict == Verdict.USER_PREFERENCE_CONFLICT
        assert result.score == 0
        assert result.confidence == 90

    def test_brand_gate_case_insensitive(self, cleanser):
        result = match(cleanser, {"skinType": "dry", "dislikedBrands": ["  CERAVE "]})
        assert result.verdict == Verdict.USER_PREFERENCE_CONFLICT

    def test_allergen_beats_disliked_brand(self, avery, body_butter):
        profile = dict(avery, allergies=["coconut"])
        assert match(body_butter, profile).verdict == Verdict.CONTAINS_ALLERGEN

    def test_allergen_beats_perfect_product(self, avery, cleanser):
        profile = dict(avery, allergies=["glycerin"])
        result = match(cleanser, profile)
        assert result.verdict == Verdict.CONTAINS_ALLERGEN
        assert result.score == 0

    def test_disliked_wins_over_preferred(self, cleanser):
        profile = {"skinType": "dry", "preferredBrands": ["CeraVe"], "dislikedBrands": ["CeraVe"]}
        assert match(cleanser, profile).verdict == Verdict.USER_PREFERENCE_CONFLICT

    def test_substring_false_positive(self):
        result = match(
            {"name": "Cream", "brand": "Acme", "ingredients": ["Stearic Acid"]},
            {"skinType": "dry", "allergies": ["tea"]},
        )
        assert result.verdict == Verdict.CONTAINS_ALLERGEN

    def test_mock_allergy_profiles(self, sam, foundation, body_butter):
        assert match(foundation, sam).verdict == Verdict.CONTAINS_ALLERGEN
        assert match(body_butter, sam).verdict == Verdict.CONTAINS_ALLERGEN


class TestMissingInformation:
    def test_no_ingredients_no_skin_type(self):
        result = match({"name": "Mystery Jar", "brand": "Acme"}, {"skinType": "dry"})
        assert result.verdict == Verdict.MISSING_INFORMATION
        assert result.score == 0
        assert result.confidence == 20
        assert result.warnings

    def test_skin_type_alone_is_enough(self):
        result = match({"name": "Jar", "brand": "Acme", "skinType": "dry"}, {"skinType": "dry"})
        assert result.verdict != Verdict.MISSING_INFORMATION
        assert result.breakdown["skinTypeScore"] == 100

    def test_concerns_neutral_without_ingredients(self):
        result = match(
            {"name": "Jar", "brand": "Acme", "skinType": ["oily"]},
            {"skinType": "oily", "skinConcerns": ["acne", "aging"]},
        )
        assert result.breakdown["concernsScore"] == 50
        assert result.detailed_analysis.missing_beneficials == []
        assert result.score == 65
        assert result.verdict == Verdict.PARTIAL_MATCH

    def test_brand_gate_runs_before_missing_check(self):
        result = match({"name": "Jar", "brand": "Acme"}, {"skinType": "dry", "dislikedBrands": ["acme"]})
        assert result.verdict == Verdict.USER_PREFERENCE_CONFLICT


# ══════════════════════════════════════════════════════════════════════
# Properties
# ══════════════════════════════════════════════════════════════════════

class TestProperties:
    def test_idempotent(self, maya, foundation):
        assert match(foundation, maya).to_dict() == match(foundation, maya).to_dict()

    def test_record_and_dict_inputs_agree(self, dry_cream):
        record = ProductRecord(
            name="Barrier Cream",
            brand="Acme",
            ingredients=("Hyaluronic Acid", "Ceramides"),
            skin_type=("dry",),
        )
        profile = SkinProfile(skin_type="dry")
        assert match(record, profile).to_dict() == match(dry_cream, {"skinType": "dry"}).to_dict()

    def test_bounds(self):
        for profile in MOCK_PROFILES:
            for product in MOCK_PRODUCTS:
                result = match(product, profile)
                assert 0 <= result.score <= 100
                assert 0 <= result.confidence <= 100
                for value in result.breakdown.values():
                    assert 0 <= value <= 100

    def test_adding_beneficial_never_lowers_score(self, dry_cream):
        before = match(dry_cream, {"skinType": "dry"}).score
        richer = dict(dry_cream, ingredients=dry_cream["ingredients"] + ["Glycerin", "Vitamin E"])
        assert match(richer, {"skinType": "dry"}).score >= before

    def test_missing_skin_type_is_neutral(self):
        result = match(
            {"name": "Oil", "brand": "Acme", "ingredients": ["Squalane"]},
            {"skinType": "dry"},
        )
        assert result.breakdown["skinTypeScore"] == 50
        assert any("skin type" in w.lower() for w in result.warnings)

    def test_unknown_skin_type_does_not_fail(self, dry_cream):
        result = match(dry_cream, {"skinType": "lizard"})
        assert result.breakdown["ingredientScore"] == 50
        assert result.verdict in set(Verdict)

    def test_empty_profile(self, cleanser):
        result = match(cleanser, {})
        assert result.breakdown["skinTypeScore"] == 50
        assert 0 <= result.score <= 100

    @pytest.mark.parametrize(
        "profile_overrides",
        [{"allergies": 5}, {"skinConcerns": True}, {"dislikedBrands": 3.5}, {"preferredBrands": {"a": 1}}],
    )
    def test_malformed_profile_lists_do_not_raise(self, profile_overrides):
        profile = dict({"skinType": "oily"}, **profile_overrides)
        result = match({"name": "Serum", "brand": "Acme", "ingredients": ["Niacinamide"]}, profile)
        assert result.score == 60
        assert result.verdict == Verdict.PARTIAL_MATCH

    def test_malformed_product_skin_type_does_not_raise(self):
        result = match(
            {"name": "Serum", "brand": "Acme", "ingredients": ["Niacinamide"], "skinType": 1},
            {"skinType": "oily"},
        )
        assert result.breakdown["skinTypeScore"] == 50

    def test_input_not_mutated(self, maya, foundation):
        snapshot = dict(foundation)
        match(foundation, maya)
        assert foundation == snapshot


# ══════════════════════════════════════════════════════════════════════
# Mock data pairings
# ══════════════════════════════════════════════════════════════════════

class TestMockPairings:
    def test_avery_cleanser(self, avery, cleanser):
        result = match(cleanser, avery)
        assert result.score == 90
        assert result.verdict == Verdict.PERFECT_MATCH
        assert result.breakdown["brandScore"] == 100
        assert result.breakdown["concernsScore"] == 100
        assert '"cerave" is one of your preferred brands' in result.reasons

    def test_maya_foundation(self, maya, foundation):
        result = match(foundation, maya)
        assert result.breakdown["ingredientScore"] == 66
        assert result.breakdown["shadeScore"] == 100
        assert result.breakdown["categoryScore"] == 100
        assert result.breakdown["preferenceScore"] == 100
        assert result.score == 96
        assert result.verdict == Verdict.PERFECT_MATCH
        assert "fragrance" in result.detailed_analysis.problematic_ingredients

    def test_maya_body_butter(self, maya, body_butter):
        result = match(body_butter, maya)
        # coconut oil -10, methylparaben -5 → 42.5
        assert result.detailed_analysis.problematic_ingredients == ["coconut oil", "methylparaben"]
        assert result.breakdown["ingredientScore"] == 43
        assert result.breakdown["skinTypeScore"] == 85

    def test_maya_cleanser(self, maya, cleanser):
        result = match(cleanser, maya)
        assert result.breakdown["skinTypeScore"] == 30
        assert result.breakdown["concernsScore"] == 0
        assert result.score == 34
        assert result.verdict == Verdict.NOT_RECOMMENDED
        assert result.confidence == 65
        assert result.detailed_analysis.missing_beneficials


# ══════════════════════════════════════════════════════════════════════
# Narration
# ══════════════════════════════════════════════════════════════════════

class TestNarration:
    def test_celebratory_recommendation(self, avery, cleanser):
        result = match(cleanser, avery)
        assert result.recommendations[0].startswith("hydrating facial cleanser by cerave is an excellent match")
        assert any(r.startswith("Key benefits:") for r in result.recommendations)

    def test_preferred_brand_note(self, avery, cleanser):
        notes = match(cleanser, avery).detailed_analysis.compatibility_notes
        assert "This product is from your preferred brand: cerave." in notes

    def test_acid_active_note(self, maya, foundation):
        notes = match(foundation, maya).detailed_analysis.compatibility_notes
        assert any("build tolerance" in n for n in notes)

    def test_mismatch_patch_test_note(self, maya, cleanser):
        result = match(cleanser, maya)
        assert any("patch testing" in n for n in result.detailed_analysis.compatibility_notes)
        assert any("may not be ideal" in r for r in result.recommendations)
        assert any(r.startswith("To target your skin concerns") for r in result.recommendations)

    def test_long_ingredient_list(self):
        product = {
            "name": "Everything Serum",
            "brand": "Acme",
            "ingredients": [f"extract {i}" for i in range(31)],
        }
        result = match(product, {"skinType": "normal"})
        assert any("many ingredients" in r for r in result.recommendations)

    def test_no_duplicate_messages(self, maya, foundation):
        result = match(foundation, maya)
        for messages in (result.reasons, result.warnings, result.recommendations):
            assert len(messages) == len(set(messages))

    def test_gate_results_have_no_recommendations(self, avery, body_butter):
        assert match(body_butter, avery).recommendations == []


# ══════════════════════════════════════════════════════════════════════
# Configuration & serialization
# ══════════════════════════════════════════════════════════════════════

class TestCustomBands:
    def test_band_table_override(self, avery, cleanser):
        bands = build_bands([(0, "NOT_RECOMMENDED", 0, 0), (70, "GOOD_MATCH", 0, 0)])
        result = match(cleanser, avery, bands=bands)
        assert result.score == 90
        assert result.verdict == Verdict.GOOD_MATCH


class TestToDict:
    def test_keys(self, maya, foundation):
        payload = match(foundation, maya).to_dict()
        assert payload["verdict"] == "PERFECT_MATCH"
        assert set(payload) == {
            "verdict", "score", "confidence", "reasons", "warnings",
            "recommendations", "breakdown", "detailedAnalysis",
        }
        assert set(payload["breakdown"]) == {
            "skinTypeScore", "ingredientScore", "concernsScore", "preferenceScore",
            "shadeScore", "categoryScore", "brandScore", "safetyScore",
        }
        assert "compatibilityNotes" in payload["detailedAnalysis"]

    def test_gate_payload(self, sam, foundation):
        payload = match(foundation, sam).to_dict()
        assert payload["verdict"] == "CONTAINS_ALLERGEN"
        assert payload["breakdown"]["safetyScore"] == 0


# ══════════════════════════════════════════════════════════════════════
# Ranking
# ══════════════════════════════════════════════════════════════════════

class TestRankProducts:
    def test_sorted_descending(self, maya):
        ranked = rank_products(MOCK_PRODUCTS, maya)
        scores = [r["result"].score for r in ranked]
        assert scores == sorted(scores, reverse=True)
        assert ranked[0]["product"]["brand"] == "Maybelline"
        assert ranked[-1]["product"]["brand"] == "CeraVe"

    def test_top_k(self, maya):
        assert len(rank_products(MOCK_PRODUCTS, maya, top_k=2)) == 2

    def test_gated_products_sink(self, sam):
        ranked = rank_products(MOCK_PRODUCTS, sam)
        assert ranked[0]["product"]["brand"] == "CeraVe"
        assert all(r["result"].score == 0 for r in ranked[1:])

    def test_empty_catalog(self, maya):
        assert rank_products([], maya) == []
