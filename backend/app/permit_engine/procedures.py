"""
Permit procedure and surrounding-environment tables.

Each business type has a fixed permit type, issuing authority and
difficulty, and belongs to one environment-sensitivity tier based on how
strictly setback statutes (학교보건법, 청소년보호법, 교육환경법) and
pollution rules apply to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PermitDifficulty(str, Enum):
    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"


class EnvironmentSensitivity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class PermitProcedure:
    permit_type: str
    authority: str
    difficulty: PermitDifficulty


_EASY = PermitDifficulty.EASY
_MODERATE = PermitDifficulty.MODERATE
_HARD = PermitDifficulty.HARD

PERMIT_PROCEDURES: dict[str, PermitProcedure] = {
    "restaurant":    PermitProcedure("영업신고", "시·군·구청", _MODERATE),
    "cafe":          PermitProcedure("영업신고", "시·군·구청", _MODERATE),
    "retail":        PermitProcedure("영업신고/등록", "시·군·구청", _MODERATE),
    "office":        PermitProcedure("사업자등록", "세무서", _EASY),
    "manufacturing": PermitProcedure("공장설립승인", "시·군·구청", _HARD),
    "warehouse":     PermitProcedure("등록", "시·군·구청", _MODERATE),
    "medical":       PermitProcedure("개설신고/허가", "시·도", _HARD),
    "education":     PermitProcedure("등록", "교육청", _MODERATE),
    "lodging":       PermitProcedure("영업신고/등록", "시·군·구청", _MODERATE),
    "sports":        PermitProcedure("신고/등록", "시·군·구청", _MODERATE),
    "construction":  PermitProcedure("건설업 등록", "국토교통부/시·도", _HARD),
    "realestate":    PermitProcedure("중개사무소 개설등록", "시·군·구청", _MODERATE),
    "transport":     PermitProcedure("운송사업 허가", "국토교통부/시·도", _HARD),
    "passenger":     PermitProcedure("면허/등록", "국토교통부/시·도", _HARD),
    "beauty":        PermitProcedure("영업신고", "시·군·구청", _EASY),
    "pharmacy":      PermitProcedure("개설등록", "시·도", _MODERATE),
    "petshop":       PermitProcedure("등록/신고", "시·군·구청", _MODERATE),
    "daycare":       PermitProcedure("설치 인가", "시·군·구청", _HARD),
    "elderly":       PermitProcedure("설치 허가", "시·군·구청", _HARD),
    "recycling":     PermitProcedure("허가", "시·도", _HARD),
}

DEFAULT_PERMIT_PROCEDURE = PermitProcedure("인허가", "관할 행정청", _MODERATE)


_LOW = EnvironmentSensitivity.LOW
_MEDIUM = EnvironmentSensitivity.MEDIUM
_HIGH = EnvironmentSensitivity.HIGH

ENVIRONMENT_SENSITIVITY: dict[str, EnvironmentSensitivity] = {
    # Few setback or pollution constraints
    "office": _LOW,
    "retail": _LOW,
    "education": _LOW,
    "realestate": _LOW,
    "beauty": _LOW,
    # Proximity to schools / housing must be checked
    "restaurant": _MEDIUM,
    "cafe": _MEDIUM,
    "medical": _MEDIUM,
    "petshop": _MEDIUM,
    "warehouse": _MEDIUM,
    "construction": _MEDIUM,
    "transport": _MEDIUM,
    "passenger": _MEDIUM,
    "pharmacy": _MEDIUM,
    "daycare": _MEDIUM,
    "elderly": _MEDIUM,
    # Strict buffer zones or emission rules
    "lodging": _HIGH,
    "sports": _HIGH,
    "manufacturing": _HIGH,
    "recycling": _HIGH,
}


def get_permit_procedure(business_type: str) -> PermitProcedure:
    return PERMIT_PROCEDURES.get(business_type, DEFAULT_PERMIT_PROCEDURE)


def get_environment_sensitivity(business_type: str) -> EnvironmentSensitivity:
    return ENVIRONMENT_SENSITIVITY.get(business_type, _MEDIUM)
