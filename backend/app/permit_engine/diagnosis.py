"""
Permit feasibility diagnosis: zone lookup → scoring → legal basis.

The zone lookup is injected by the caller, so this module performs no I/O
of its own. A failed lookup produces an explicit failure result instead of
guessing a zone.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from app.models.schemas import (
    AnalysisItem, AnalysisStatus, DiagnosisResult, LandUseResult, ZoneInfo,
)
from app.permit_engine.calculator import PermitScoreCalculator
from app.permit_engine.knowledge_base import get_zone_limits
from app.permit_engine.legal_basis import resolve_legal_basis, has_discretionary_citation

logger = logging.getLogger(__name__)

ZoneLookup = Callable[[str], Awaitable[LandUseResult]]

LOOKUP_FAILED_GRADE = "lookup-failed"
LOOKUP_FAILED_ZONE = "조회실패"
DEFAULT_LOOKUP_ERROR = "토지이용계획 정보를 조회할 수 없습니다."
LOOKUP_FAILED_SUGGESTION = (
    "정확한 전체 주소(시/도/구/동 포함)를 입력하거나, "
    "토지이음(eum.go.kr)에서 직접 확인해주세요."
)

_calculator = PermitScoreCalculator()


async def diagnose(address: str, business_type: str, lookup: ZoneLookup) -> DiagnosisResult:
    """Diagnose whether `business_type` can operate at `address`.

    Only the first zone returned by the lookup is scored; the full list is
    attached to the result as-is.
    """
    land_use = await lookup(address)

    if not land_use.success or not land_use.zones:
        reason = land_use.error or DEFAULT_LOOKUP_ERROR
        logger.warning("용도지역 조회 실패: %s", reason)
        return lookup_failed_result(reason)

    zone = land_use.zones[0].name
    logger.info("용도지역 조회 성공: %s", zone)

    scored = _calculator.calculate(zone, business_type)
    legal_basis = resolve_legal_basis(business_type)
    has_discretion = scored.has_discretion or has_discretionary_citation(business_type)
    limits = get_zone_limits(zone)

    logger.info(
        "Diagnosis zone=%s business=%s score=%d grade=%s discretion=%s",
        zone, business_type, scored.score, scored.grade, has_discretion,
    )

    return DiagnosisResult(
        score=scored.score,
        grade=scored.grade,
        zone_info=ZoneInfo(
            zone=zone,
            zone_source=land_use.source,
            building_coverage=limits.building_coverage,
            floor_area_ratio=limits.floor_area_ratio,
            all_zones=list(land_use.zones),
        ),
        analysis=scored.analysis,
        recommendations=scored.recommendations,
        legal_basis=legal_basis,
        has_discretion=has_discretion,
    )


def lookup_failed_result(reason: str) -> DiagnosisResult:
    """Failure-shaped result for an address whose zone could not be resolved."""
    return DiagnosisResult(
        score=0,
        grade=LOOKUP_FAILED_GRADE,
        zone_info=ZoneInfo(
            zone=LOOKUP_FAILED_ZONE,
            zone_source=LOOKUP_FAILED_ZONE,
            building_coverage=0,
            floor_area_ratio=0,
            all_zones=[],
            error=reason,
            suggestion=LOOKUP_FAILED_SUGGESTION,
        ),
        analysis=[
            AnalysisItem(
                category="용도지역 확인",
                status=AnalysisStatus.FAIL,
                description=(
                    "V-World API에서 해당 주소의 용도지역 정보를 조회하지 못했습니다. "
                    "정확한 전체 주소(시/도 포함)를 입력해주세요."
                ),
            ),
        ],
        recommendations=[
            "정확한 도로명 주소(시/도 포함)를 다시 입력해주세요.",
            "토지이음(eum.go.kr)에서 해당 주소의 용도지역을 직접 확인해주세요.",
        ],
        legal_basis=[],
        has_discretion=False,
        error=reason,
        suggestion=LOOKUP_FAILED_SUGGESTION,
    )
