"""
Permit feasibility score calculator.

Scores a (zone, business type) pair out of 100 from four independent,
additive categories:

  1. 용도지역 적합성 (zone suitability)          0-40
  2. 건축물 용도 (building-use flexibility)       0-20
  3. 인허가 절차 (permit-procedure difficulty)    0-20
  4. 주변 환경 (surrounding-environment sensitivity) 0-20

Categories 2-4 do not depend on the outcome of category 1, so a use that
the zone forbids still collects points for the other three.

The discretion flag records whether any part of the outcome rests on an
administrative body's judgment. It only ever moves from False to True
during one evaluation. When set, the last recommendation is always
DISCRETION_NOTICE.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.models.schemas import AnalysisItem, AnalysisStatus, LegalBasisItem
from app.permit_engine.categories import (
    normalize_business_type, is_office_based, is_neighborhood, is_welfare,
)
from app.permit_engine.knowledge_base import (
    CompatibilityEntry, get_compatibility, get_business_name, get_citations,
)
from app.permit_engine.legal_basis import resolve_legal_basis, has_discretionary_citation
from app.permit_engine.procedures import (
    PermitDifficulty, EnvironmentSensitivity,
    get_permit_procedure, get_environment_sensitivity,
)

# Category weights
ZONE_SUITABILITY_WEIGHT = 40
BUILDING_USE_WEIGHT = 20
PERMIT_PROCEDURE_WEIGHT = 20
ENVIRONMENT_WEIGHT = 20

ZONE_SUITABILITY_CONDITIONAL = 30

# Building-use flexibility tiers, matched by substring of the zone name
FLEXIBLE_ZONES = ("일반상업지역", "근린상업지역", "중심상업지역", "준공업지역", "준주거지역")
MODERATE_ZONES = ("제2종일반주거지역", "제3종일반주거지역")

BUILDING_USE_SCORES = {"flexible": 20, "moderate": 17, "default": 15}

PERMIT_DIFFICULTY_SCORES = {
    PermitDifficulty.EASY: 19,
    PermitDifficulty.MODERATE: 15,
    PermitDifficulty.HARD: 12,
}

ENVIRONMENT_SCORES = {
    EnvironmentSensitivity.LOW: 19,
    EnvironmentSensitivity.MEDIUM: 16,
    EnvironmentSensitivity.HIGH: 13,
}

# (minimum score, grade), checked top-down
GRADE_BANDS = ((85, "A"), (70, "B"), (55, "C"), (40, "D"))
LOWEST_GRADE = "F"

LAND_USE_ARTICLE = "국토의 계획 및 이용에 관한 법률 제76조"

GENERIC_RECOMMENDATION = "사업자등록 전 관할 세무서에 업종 확인을 권장합니다."
STATUTE_RECOMMENDATION = "실제 인허가 진행 시 최신 법령과 조례를 확인하세요."
DISCRETION_NOTICE = (
    "본 진단에는 행정청의 재량이 개입되는 사항이 포함되어 있어, "
    "전문 행정사 상담을 권장드립니다."
)
# Shared by DISCRETION_NOTICE and the hard-permit recommendation
PROFESSIONAL_CONSULTATION_PHRASE = "전문 행정사"


@dataclass
class CategoryOutcome:
    """Points, analysis row and side effects of one scoring category."""
    points: int
    item: AnalysisItem
    recommendations: list[str] = field(default_factory=list)
    discretion: bool = False


@dataclass
class ScoreResult:
    score: int
    grade: str
    analysis: list[AnalysisItem]
    recommendations: list[str]
    legal_basis: list[LegalBasisItem]
    has_discretion: bool
    sub_scores: dict[str, int] = field(default_factory=dict)


def grade_for_score(score: int) -> str:
    for minimum, grade in GRADE_BANDS:
        if score >= minimum:
            return grade
    return LOWEST_GRADE


class PermitScoreCalculator:
    """Deterministic multi-factor feasibility scorer. Holds no state."""

    def calculate(self, zone: str, business_type: str) -> ScoreResult:
        compatibility = get_compatibility(zone, normalize_business_type(business_type))

        # Conditional permission and discretionary statutes both imply discretion
        has_discretion = bool(compatibility and compatibility.conditions)
        if has_discretionary_citation(business_type):
            has_discretion = True

        outcomes = {
            "zone_suitability": self.score_zone_suitability(zone, business_type, compatibility),
            "building_use": self.score_building_use(zone),
            "permit_procedure": self.score_permit_procedure(business_type),
            "environment": self.score_environment(business_type),
        }

        analysis: list[AnalysisItem] = []
        recommendations: list[str] = []
        for outcome in outcomes.values():
            analysis.append(outcome.item)
            recommendations.extend(outcome.recommendations)
            if outcome.discretion:
                has_discretion = True

        score = sum(outcome.points for outcome in outcomes.values())

        if not recommendations:
            recommendations.append(GENERIC_RECOMMENDATION)
        recommendations.append(STATUTE_RECOMMENDATION)
        if has_discretion:
            recommendations.append(DISCRETION_NOTICE)

        return ScoreResult(
            score=score,
            grade=grade_for_score(score),
            analysis=analysis,
            recommendations=recommendations,
            legal_basis=resolve_legal_basis(business_type),
            has_discretion=has_discretion,
            sub_scores={key: outcome.points for key, outcome in outcomes.items()},
        )

    # ── 1. Zone suitability ──────────────────────────────────────

    def score_zone_suitability(
        self,
        zone: str,
        business_type: str,
        compatibility: CompatibilityEntry | None,
    ) -> CategoryOutcome:
        name = get_business_name(business_type)

        if compatibility is None or not compatibility.allowed:
            if is_office_based(business_type):
                description = f"{zone}에서는 사무실 설치가 제한되어 {name} 사무소 개설이 어렵습니다."
            elif is_neighborhood(business_type):
                description = f"{zone}에서는 근린생활시설 입지가 제한되어 {name} 영업이 어렵습니다."
            elif is_welfare(business_type):
                description = f"{zone}에서는 노유자시설/교육시설 입지가 제한되어 {name} 설치가 어렵습니다."
            else:
                description = f"{zone}에서는 {name} 영업이 원칙적으로 불가합니다."
            return CategoryOutcome(
                points=0,
                item=AnalysisItem(
                    category="용도지역 적합성",
                    status=AnalysisStatus.FAIL,
                    description=description,
                    related_law=LAND_USE_ARTICLE,
                ),
                recommendations=["다른 위치를 검토하거나 용도변경 가능성을 확인하세요."],
                discretion=True,
            )

        conditions = compatibility.conditions
        if conditions:
            if is_office_based(business_type):
                description = f"{zone}에서 {name}은 사무실 설치가 가능한 지역입니다. 조건: {conditions}"
            elif is_neighborhood(business_type):
                description = f"{zone}에서 {name}은 근린생활시설로 조건부 허용됩니다. 조건: {conditions}"
            elif is_welfare(business_type):
                description = f"{zone}에서 {name}은 노유자시설/교육시설로 조건부 허용됩니다. 조건: {conditions}"
            else:
                description = f"{zone}에서 {name} 영업이 조건부 허용됩니다. 조건: {conditions}"
            return CategoryOutcome(
                points=ZONE_SUITABILITY_CONDITIONAL,
                item=AnalysisItem(
                    category="용도지역 적합성",
                    status=AnalysisStatus.WARNING,
                    description=description,
                    related_law=LAND_USE_ARTICLE,
                ),
                recommendations=[f"{conditions} 조건을 충족하는지 확인하세요."],
                discretion=True,
            )

        if is_office_based(business_type):
            description = (
                f"{zone}에서 사무실 설치가 가능하므로 {name} 등록이 가능합니다. "
                "단, 별도 등록/허가 요건 충족 필요"
            )
        elif is_neighborhood(business_type):
            description = f"{zone}에서 {name}은 근린생활시설로 허용됩니다."
        elif is_welfare(business_type):
            description = f"{zone}에서 {name} 설치가 허용됩니다. 관할 행정청 인가/허가 필요"
        else:
            description = f"{zone}에서 {name} 영업이 허용됩니다."
        return CategoryOutcome(
            points=ZONE_SUITABILITY_WEIGHT,
            item=AnalysisItem(
                category="용도지역 적합성",
                status=AnalysisStatus.PASS,
                description=description,
                related_law=LAND_USE_ARTICLE,
            ),
        )

    # ── 2. Building-use flexibility ──────────────────────────────

    def score_building_use(self, zone: str) -> CategoryOutcome:
        tier = building_use_tier(zone)
        points = BUILDING_USE_SCORES[tier]

        if tier != "default":
            return CategoryOutcome(
                points=points,
                item=AnalysisItem(
                    category="건축물 용도",
                    status=AnalysisStatus.PASS,
                    description="해당 용도로 사용 가능한 건축물 유형입니다.",
                    related_law="건축법 시행령 별표1 (용도별 건축물의 종류)",
                ),
            )
        return CategoryOutcome(
            points=points,
            item=AnalysisItem(
                category="건축물 용도",
                status=AnalysisStatus.WARNING,
                description="건축물 용도변경이 필요할 수 있습니다.",
                related_law="건축법 제19조 (용도변경)",
            ),
            recommendations=["건축물대장을 확인하여 현재 용도를 파악하세요."],
            discretion=True,
        )

    # ── 3. Permit-procedure difficulty ───────────────────────────

    def score_permit_procedure(self, business_type: str) -> CategoryOutcome:
        procedure = get_permit_procedure(business_type)
        points = PERMIT_DIFFICULTY_SCORES[procedure.difficulty]
        name = get_business_name(business_type)
        citations = get_citations(business_type)
        related_law = citations[0].law if citations else "관계 법령"
        required = f"{name}은 {procedure.authority}에 {procedure.permit_type}가 필요합니다."

        if procedure.difficulty is PermitDifficulty.EASY:
            return CategoryOutcome(
                points=points,
                item=AnalysisItem(
                    category="인허가 절차",
                    status=AnalysisStatus.PASS,
                    description=f"{required} 일반적인 절차로 진행 가능합니다.",
                    related_law=related_law,
                ),
            )
        if procedure.difficulty is PermitDifficulty.MODERATE:
            return CategoryOutcome(
                points=points,
                item=AnalysisItem(
                    category="인허가 절차",
                    status=AnalysisStatus.WARNING,
                    description=f"{required} 시설기준, 인력요건 등 사전 확인 필요",
                    related_law=related_law,
                ),
                recommendations=[f"{procedure.authority} 담당부서에 사전 상담하세요."],
                discretion=True,
            )
        return CategoryOutcome(
            points=points,
            item=AnalysisItem(
                category="인허가 절차",
                status=AnalysisStatus.FAIL,
                description=(
                    f"{name}은 {procedure.authority}에 {procedure.permit_type}가 필요하며, "
                    "복잡한 요건 검토가 필요합니다."
                ),
                related_law=related_law,
            ),
            recommendations=["전문 행정사를 통한 인허가 대행을 권장합니다."],
            discretion=True,
        )

    # ── 4. Surrounding environment ───────────────────────────────

    def score_environment(self, business_type: str) -> CategoryOutcome:
        sensitivity = get_environment_sensitivity(business_type)
        points = ENVIRONMENT_SCORES[sensitivity]

        if sensitivity is EnvironmentSensitivity.LOW:
            return CategoryOutcome(
                points=points,
                item=AnalysisItem(
                    category="주변 환경",
                    status=AnalysisStatus.PASS,
                    description="주변 환경이 해당 업종에 적합합니다.",
                    related_law="학교보건법, 청소년보호법",
                ),
            )
        if sensitivity is EnvironmentSensitivity.MEDIUM:
            return CategoryOutcome(
                points=points,
                item=AnalysisItem(
                    category="주변 환경",
                    status=AnalysisStatus.WARNING,
                    description="학교, 주거지 인접 여부 확인이 필요합니다.",
                    related_law="학교보건법 제6조, 청소년보호법 제32조",
                ),
                recommendations=["학교보건법, 청소년보호법 등 이격거리 규정을 확인하세요."],
                discretion=True,
            )
        return CategoryOutcome(
            points=points,
            item=AnalysisItem(
                category="주변 환경",
                status=AnalysisStatus.FAIL,
                description="주변 환경으로 인한 제한이 있을 수 있습니다.",
                related_law="학교보건법, 청소년보호법, 교육환경 보호에 관한 법률",
            ),
            discretion=True,
        )


def building_use_tier(zone: str) -> str:
    """Return "flexible", "moderate" or "default" for a zone name."""
    if any(z in zone for z in FLEXIBLE_ZONES):
        return "flexible"
    if any(z in zone for z in MODERATE_ZONES):
        return "moderate"
    return "default"
