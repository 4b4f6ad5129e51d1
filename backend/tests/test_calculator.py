"""Tests for the PermitScoreCalculator."""

from __future__ import annotations

import itertools

import pytest

from app.models.schemas import AnalysisStatus
from app.permit_engine.calculator import (
    DISCRETION_NOTICE,
    GENERIC_RECOMMENDATION,
    PROFESSIONAL_CONSULTATION_PHRASE,
    STATUTE_RECOMMENDATION,
    PermitScoreCalculator,
    building_use_tier,
    grade_for_score,
)
from app.permit_engine.knowledge_base import BUSINESS_TYPES, KNOWN_ZONES


@pytest.fixture
def calculator():
    return PermitScoreCalculator()


ALL_PAIRS = list(itertools.product(KNOWN_ZONES, BUSINESS_TYPES))


class TestScenarios:
    def test_restaurant_in_exclusive_residential(self, calculator):
        result = calculator.calculate("제1종전용주거지역", "restaurant")
        assert result.sub_scores == {
            "zone_suitability": 0,
            "building_use": 15,
            "permit_procedure": 15,
            "environment": 16,
        }
        assert result.score == 46
        assert result.grade == "D"
        assert result.has_discretion is True
        assert [item.status for item in result.analysis] == [
            AnalysisStatus.FAIL,
            AnalysisStatus.WARNING,
            AnalysisStatus.WARNING,
            AnalysisStatus.WARNING,
        ]

    def test_retail_in_general_commercial(self, calculator):
        result = calculator.calculate("일반상업지역", "retail")
        assert result.sub_scores == {
            "zone_suitability": 40,
            "building_use": 20,
            "permit_procedure": 15,
            "environment": 19,
        }
        assert result.score == 94
        assert result.grade == "A"
        assert result.analysis[0].status == AnalysisStatus.PASS
        # retail cites 유통산업발전법 제8조, which is discretionary
        assert result.has_discretion is True

    def test_office_in_commercial_has_no_discretion(self, calculator):
        result = calculator.calculate("일반상업지역", "office")
        assert result.score == 40 + 20 + 19 + 19
        assert result.has_discretion is False
        assert result.recommendations == [GENERIC_RECOMMENDATION, STATUTE_RECOMMENDATION]

    def test_conditional_permission(self, calculator):
        result = calculator.calculate("제1종일반주거지역", "restaurant")
        assert result.sub_scores["zone_suitability"] == 30
        item = result.analysis[0]
        assert item.status == AnalysisStatus.WARNING
        assert "바닥면적 300㎡ 미만" in item.description
        assert "바닥면적 300㎡ 미만 조건을 충족하는지 확인하세요." in result.recommendations
        assert result.has_discretion is True

    def test_scenario_a_recommendation_order(self, calculator):
        result = calculator.calculate("제1종전용주거지역", "restaurant")
        assert result.recommendations == [
            "다른 위치를 검토하거나 용도변경 가능성을 확인하세요.",
            "건축물대장을 확인하여 현재 용도를 파악하세요.",
            "시·군·구청 담당부서에 사전 상담하세요.",
            "학교보건법, 청소년보호법 등 이격거리 규정을 확인하세요.",
            STATUTE_RECOMMENDATION,
            DISCRETION_NOTICE,
        ]


class TestZoneSuitability:
    def test_description_names_zone_and_business(self, calculator):
        result = calculator.calculate("제1종전용주거지역", "restaurant")
        description = result.analysis[0].description
        assert "제1종전용주거지역" in description
        assert "일반음식점" in description

    def test_office_based_denied(self, calculator):
        result = calculator.calculate("제1종전용주거지역", "construction")
        item = result.analysis[0]
        assert item.status == AnalysisStatus.FAIL
        assert "사무실" in item.description
        assert "건설업" in item.description

    def test_office_based_allowed(self, calculator):
        result = calculator.calculate("일반상업지역", "realestate")
        item = result.analysis[0]
        assert item.status == AnalysisStatus.PASS
        assert "사무실 설치가 가능" in item.description
        assert "부동산중개업" in item.description

    def test_neighborhood_conditional(self, calculator):
        result = calculator.calculate("제2종전용주거지역", "beauty")
        item = result.analysis[0]
        assert result.sub_scores["zone_suitability"] == 30
        assert "근린생활시설" in item.description
        assert "근린생활시설 내 소규모" in item.description

    def test_welfare_follows_education(self, calculator):
        result = calculator.calculate("제1종전용주거지역", "daycare")
        item = result.analysis[0]
        assert item.status == AnalysisStatus.WARNING
        assert "노유자시설" in item.description
        assert "유치원, 초등학교" in item.description

    def test_welfare_denied_in_exclusive_industrial(self, calculator):
        result = calculator.calculate("전용공업지역", "elderly")
        assert result.analysis[0].status == AnalysisStatus.FAIL
        assert "노유자시설" in result.analysis[0].description

    def test_unknown_zone_is_not_allowed(self, calculator):
        result = calculator.calculate("계획관리지역", "retail")
        assert result.sub_scores["zone_suitability"] == 0
        assert result.analysis[0].status == AnalysisStatus.FAIL
        assert result.has_discretion is True


class TestBuildingUse:
    @pytest.mark.parametrize("zone", [
        "일반상업지역", "근린상업지역", "중심상업지역", "준공업지역", "준주거지역",
    ])
    def test_flexible(self, calculator, zone):
        outcome = calculator.score_building_use(zone)
        assert outcome.points == 20
        assert outcome.item.status == AnalysisStatus.PASS
        assert outcome.discretion is False

    @pytest.mark.parametrize("zone", ["제2종일반주거지역", "제3종일반주거지역"])
    def test_moderate(self, calculator, zone):
        outcome = calculator.score_building_use(zone)
        assert outcome.points == 17
        assert outcome.item.status == AnalysisStatus.PASS
        assert outcome.recommendations == []

    @pytest.mark.parametrize("zone", [
        "제1종전용주거지역", "제2종전용주거지역", "제1종일반주거지역",
        "일반공업지역", "전용공업지역", "녹지지역", "계획관리지역",
    ])
    def test_default(self, calculator, zone):
        outcome = calculator.score_building_use(zone)
        assert outcome.points == 15
        assert outcome.item.status == AnalysisStatus.WARNING
        assert outcome.discretion is True
        assert outcome.recommendations == ["건축물대장을 확인하여 현재 용도를 파악하세요."]

    def test_tier_matches_substring(self):
        assert building_use_tier("서울특별시 일반상업지역") == "flexible"
        assert building_use_tier("제3종일반주거지역(7층이하)") == "moderate"


class TestPermitProcedure:
    def test_easy(self, calculator):
        outcome = calculator.score_permit_procedure("office")
        assert outcome.points == 19
        assert outcome.item.status == AnalysisStatus.PASS
        assert "세무서" in outcome.item.description
        assert "사업자등록" in outcome.item.description
        assert outcome.discretion is False

    def test_moderate(self, calculator):
        outcome = calculator.score_permit_procedure("education")
        assert outcome.points == 15
        assert outcome.item.status == AnalysisStatus.WARNING
        assert outcome.recommendations == ["교육청 담당부서에 사전 상담하세요."]
        assert outcome.discretion is True

    def test_hard(self, calculator):
        outcome = calculator.score_permit_procedure("construction")
        assert outcome.points == 12
        assert outcome.item.status == AnalysisStatus.FAIL
        assert "국토교통부/시·도" in outcome.item.description
        assert "건설업 등록" in outcome.item.description
        assert outcome.item.related_law == "건설산업기본법"
        assert outcome.discretion is True

    def test_unknown_business_is_moderate(self, calculator):
        outcome = calculator.score_permit_procedure("bakery")
        assert outcome.points == 15
        assert "관할 행정청" in outcome.item.description
        assert outcome.item.related_law == "관계 법령"


class TestEnvironment:
    @pytest.mark.parametrize("business_type", ["office", "retail", "education", "realestate", "beauty"])
    def test_low(self, calculator, business_type):
        outcome = calculator.score_environment(business_type)
        assert outcome.points == 19
        assert outcome.item.status == AnalysisStatus.PASS

    @pytest.mark.parametrize("business_type", ["restaurant", "cafe", "medical", "petshop", "warehouse"])
    def test_medium(self, calculator, business_type):
        outcome = calculator.score_environment(business_type)
        assert outcome.points == 16
        assert outcome.item.status == AnalysisStatus.WARNING
        assert outcome.recommendations == ["학교보건법, 청소년보호법 등 이격거리 규정을 확인하세요."]

    @pytest.mark.parametrize("business_type", ["lodging", "sports", "manufacturing", "recycling"])
    def test_high(self, calculator, business_type):
        outcome = calculator.score_environment(business_type)
        assert outcome.points == 13
        assert outcome.item.status == AnalysisStatus.FAIL
        assert outcome.discretion is True


class TestGrades:
    @pytest.mark.parametrize("score,grade", [
        (100, "A"), (85, "A"),
        (84, "B"), (70, "B"),
        (69, "C"), (55, "C"),
        (54, "D"), (40, "D"),
        (39, "F"), (0, "F"),
    ])
    def test_bands(self, score, grade):
        assert grade_for_score(score) == grade


class TestInvariants:
    @pytest.mark.parametrize("zone,business_type", ALL_PAIRS)
    def test_score_bounds_and_shape(self, calculator, zone, business_type):
        result = calculator.calculate(zone, business_type)
        assert 0 <= result.score <= 100
        assert len(result.analysis) == 4
        assert result.score == sum(result.sub_scores.values())
        assert 0 <= result.sub_scores["zone_suitability"] <= 40
        for key in ("building_use", "permit_procedure", "environment"):
            assert 0 <= result.sub_scores[key] <= 20
        assert result.grade == grade_for_score(result.score)
        assert result.recommendations

    @pytest.mark.parametrize("zone,business_type", ALL_PAIRS)
    def test_discretion_notice_is_last(self, calculator, zone, business_type):
        result = calculator.calculate(zone, business_type)
        mentions = [r for r in result.recommendations if PROFESSIONAL_CONSULTATION_PHRASE in r]
        if result.has_discretion:
            assert result.recommendations[-1] == DISCRETION_NOTICE
            assert result.recommendations.count(DISCRETION_NOTICE) == 1
        else:
            assert mentions == []

    def test_deterministic(self, calculator):
        first = calculator.calculate("제2종일반주거지역", "pharmacy")
        second = PermitScoreCalculator().calculate("제2종일반주거지역", "pharmacy")
        assert first.sub_scores == second.sub_scores
        assert [a.model_dump_json() for a in first.analysis] == [
            a.model_dump_json() for a in second.analysis
        ]
        assert first.recommendations == second.recommendations
        assert first.legal_basis == second.legal_basis

    def test_unknown_business_type_does_not_raise(self, calculator):
        result = calculator.calculate("일반상업지역", "bakery")
        assert result.legal_basis == []
        assert "bakery" in result.analysis[0].description
        assert len(result.analysis) == 4
