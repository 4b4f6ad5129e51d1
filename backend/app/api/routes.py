from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from app.models.schemas import (
    PermitCheckRequest, LandUseRequest, LandUseResponse, EnrichedZone,
    ZoneRestrictions, DiagnosisResult, BusinessTypeInfo, ZoneLimitsInfo,
    ZoneDetail, CompatibilityInfo,
)
from app.permit_engine.categories import normalize_business_type
from app.permit_engine.diagnosis import diagnose
from app.permit_engine.knowledge_base import (
    BUSINESS_TYPES, BUSINESS_GROUPS, KNOWN_ZONES, PRIMARY_BUSINESS_TYPES,
    ZONE_LIMITS, get_business_name, get_compatibility, get_zone_limits,
)
from app.permit_engine.zone_restrictions import get_zone_restrictions
from app.services.cache import cached_search_land_use

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

MISSING_INPUT_ERROR = "주소와 업종을 모두 입력해주세요."
MISSING_ADDRESS_ERROR = "주소를 입력해주세요."
DIAGNOSIS_ERROR = "진단 중 오류가 발생했습니다."
LAND_USE_ERROR = "토지이용계획 조회 중 오류가 발생했습니다."

MIN_ADDRESS_LENGTH = 3

# Request bodies that fail schema validation get the same 400 as blank input
VALIDATION_ERRORS = {
    "/api/permit-check": MISSING_INPUT_ERROR,
    "/api/land-use": MISSING_ADDRESS_ERROR,
}


def _restrictions(zone: str) -> ZoneRestrictions | None:
    notes = get_zone_restrictions(zone)
    return ZoneRestrictions(**notes) if notes else None


@router.post("/permit-check", response_model=DiagnosisResult)
async def permit_check(request: PermitCheckRequest):
    """Diagnose permit feasibility for a business type at an address.

    An address whose zone cannot be resolved still returns 200 with
    grade "lookup-failed" and error/suggestion text.
    """
    address = (request.address or "").strip()
    business_type = (request.business_type or "").strip()
    if not address or not business_type:
        raise HTTPException(status_code=400, detail=MISSING_INPUT_ERROR)

    try:
        return await diagnose(address, business_type, lookup=cached_search_land_use)
    except Exception:
        logger.exception("Permit check failed for %r / %s", address, business_type)
        raise HTTPException(status_code=500, detail=DIAGNOSIS_ERROR)


@router.post("/land-use", response_model=LandUseResponse)
async def land_use(request: LandUseRequest):
    """Look up land-use zones for an address, with restriction notes per zone."""
    address = (request.address or "").strip()
    if len(address) < MIN_ADDRESS_LENGTH:
        raise HTTPException(status_code=400, detail=MISSING_ADDRESS_ERROR)

    try:
        result = await cached_search_land_use(address)
    except Exception:
        logger.exception("Land-use lookup failed for %r", address)
        raise HTTPException(status_code=500, detail=LAND_USE_ERROR)

    return LandUseResponse(
        success=result.success,
        address=result.address,
        coordinates=result.coordinates,
        zones=[
            EnrichedZone(name=z.name, code=z.code, restrictions=_restrictions(z.name))
            for z in result.zones
        ],
        error=result.error,
    )


@router.get("/business-types", response_model=list[BusinessTypeInfo])
async def list_business_types():
    return [
        BusinessTypeInfo(
            code=code,
            name=get_business_name(code),
            group=BUSINESS_GROUPS[code],
            primary_category=normalize_business_type(code),
        )
        for code in BUSINESS_TYPES
    ]


@router.get("/zones", response_model=list[ZoneLimitsInfo])
async def list_zones():
    return [
        ZoneLimitsInfo(
            zone=zone,
            building_coverage=ZONE_LIMITS[zone].building_coverage,
            floor_area_ratio=ZONE_LIMITS[zone].floor_area_ratio,
        )
        for zone in KNOWN_ZONES
    ]


@router.get("/zones/{zone}", response_model=ZoneDetail)
async def get_zone(zone: str):
    """Limits, compatibility row and restriction notes for one zone."""
    restrictions = _restrictions(zone)
    if zone not in KNOWN_ZONES and restrictions is None:
        raise HTTPException(status_code=404, detail=f"알 수 없는 용도지역입니다: {zone}")

    limits = get_zone_limits(zone)
    compatibility = []
    for business_type in PRIMARY_BUSINESS_TYPES:
        entry = get_compatibility(zone, business_type)
        if entry is not None:
            compatibility.append(CompatibilityInfo(
                business_type=business_type,
                allowed=entry.allowed,
                conditions=entry.conditions,
            ))

    return ZoneDetail(
        zone=zone,
        building_coverage=limits.building_coverage,
        floor_area_ratio=limits.floor_area_ratio,
        compatibility=compatibility,
        restrictions=restrictions,
    )
