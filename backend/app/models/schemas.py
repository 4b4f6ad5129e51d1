from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisStatus(str, Enum):
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


# ──────────────────────────────────────────────────────────────────
# REQUESTS
# ──────────────────────────────────────────────────────────────────

class PermitCheckRequest(CamelModel):
    address: Optional[str] = None
    business_type: Optional[str] = None


class LandUseRequest(CamelModel):
    address: Optional[str] = None


# ──────────────────────────────────────────────────────────────────
# ZONE LOOKUP (V-World)
# ──────────────────────────────────────────────────────────────────

class Coordinates(CamelModel):
    x: float
    y: float


class GeocodeResult(CamelModel):
    success: bool
    x: Optional[float] = None
    y: Optional[float] = None
    refined_address: Optional[str] = None
    error: Optional[str] = None


class ZoneRecord(CamelModel):
    name: str
    code: Optional[str] = None


class LandUseResult(CamelModel):
    success: bool
    address: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    zones: list[ZoneRecord] = []
    error: Optional[str] = None
    source: str = "V-World API"


class ZoneRestrictions(CamelModel):
    allowed: list[str]
    restricted: list[str]
    note: str


class EnrichedZone(ZoneRecord):
    restrictions: Optional[ZoneRestrictions] = None


class LandUseResponse(CamelModel):
    success: bool
    address: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    zones: list[EnrichedZone] = []
    error: Optional[str] = None


# ──────────────────────────────────────────────────────────────────
# DIAGNOSIS
# ──────────────────────────────────────────────────────────────────

class AnalysisItem(CamelModel):
    category: str
    status: AnalysisStatus
    description: str
    related_law: Optional[str] = None


class LegalBasisItem(CamelModel):
    law: str
    article: str
    summary: str


class ZoneInfo(CamelModel):
    zone: str
    zone_source: str
    building_coverage: int
    floor_area_ratio: int
    all_zones: list[ZoneRecord] = []
    error: Optional[str] = None
    suggestion: Optional[str] = None


class DiagnosisResult(CamelModel):
    score: int
    grade: str  # A-F, or "lookup-failed"
    zone_info: ZoneInfo
    analysis: list[AnalysisItem]
    recommendations: list[str]
    legal_basis: list[LegalBasisItem] = []
    has_discretion: bool = False
    error: Optional[str] = None
    suggestion: Optional[str] = None


# ──────────────────────────────────────────────────────────────────
# REFERENCE DATA
# ──────────────────────────────────────────────────────────────────

class BusinessTypeInfo(CamelModel):
    code: str
    name: str
    group: str
    primary_category: str


class ZoneLimitsInfo(CamelModel):
    zone: str
    building_coverage: int
    floor_area_ratio: int


class CompatibilityInfo(CamelModel):
    business_type: str
    allowed: bool
    conditions: Optional[str] = None


class ZoneDetail(ZoneLimitsInfo):
    compatibility: list[CompatibilityInfo] = []
    restrictions: Optional[ZoneRestrictions] = None

