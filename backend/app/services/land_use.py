"""
Zoning lookup through the V-World open API (국토교통부 공간정보 오픈플랫폼).

Steps:
  1. Address → coordinates (road-name address first, then parcel/지번 address)
  2. Coordinates → land-use zones from layer LT_C_UQ111 (용도지역)
  3. If that layer has nothing, fall back to 용도지구 / 용도구역 / 행정구역 layers

Every failure is returned as LandUseResult(success=False, error=...);
nothing in this module raises on upstream errors.
"""

from __future__ import annotations

import json
import logging

import httpx

from app.config import settings
from app.models.schemas import Coordinates, GeocodeResult, LandUseResult, ZoneRecord

logger = logging.getLogger(__name__)

VWORLD_ADDRESS_URL = "https://api.vworld.kr/req/address"
VWORLD_DATA_URL = "https://api.vworld.kr/req/data"

ZONING_LAYER = "LT_C_UQ111"  # 용도지역
FALLBACK_LAYERS = [
    ("LT_C_UQ112", "용도지구"),
    ("LT_C_UQ113", "용도구역"),
    ("LT_C_ADSIDO_INFO", "행정구역"),
]

MISSING_KEY_ERROR = "V-World API 키가 설정되지 않았습니다."
ADDRESS_NOT_FOUND_ERROR = "주소를 찾을 수 없습니다."
NO_LAND_USE_ERROR = (
    "해당 위치의 토지이용계획 정보를 찾을 수 없습니다. "
    "토지이음(eum.go.kr)에서 직접 확인해주세요."
)
UNCLASSIFIED_ZONE = "미분류"

# Lower sorts first: industrial > commercial > residential
ZONE_PRIORITY = {
    "준공업지역": 1,
    "일반공업지역": 1,
    "전용공업지역": 1,
    "중심상업지역": 2,
    "일반상업지역": 2,
    "근린상업지역": 2,
    "유통상업지역": 2,
    "준주거지역": 3,
    "제3종일반주거지역": 4,
    "제2종일반주거지역": 5,
    "제1종일반주거지역": 6,
    "제2종전용주거지역": 7,
    "제1종전용주거지역": 8,
}
UNKNOWN_ZONE_PRIORITY = 10


# ──────────────────────────────────────────────────────────────────
# HELPERS
# ──────────────────────────────────────────────────────────────────

def _dig(data, *keys):
    """Walk nested dicts; None as soon as a level is missing or not a dict."""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _status(data) -> str | None:
    status = _dig(data, "response", "status")
    return status if isinstance(status, str) else None


def _error_text(data) -> str | None:
    text = _dig(data, "response", "error", "text")
    return text if isinstance(text, str) else None


def _features(data) -> list[dict]:
    features = _dig(data, "response", "result", "featureCollection", "features")
    if not isinstance(features, list):
        return []
    return [f for f in features if isinstance(f, dict)]


def _properties(feature: dict) -> dict[str, str]:
    """String-valued feature properties; anything else is ignored."""
    props = feature.get("properties")
    if not isinstance(props, dict):
        return {}
    return {k: v for k, v in props.items() if isinstance(v, str)}


def _data_params(layer: str, x: float, y: float, buffer_m: int) -> dict:
    return {
        "service": "data",
        "request": "GetFeature",
        "data": layer,
        "key": settings.vworld_key,
        "format": "json",
        "geometry": "false",
        "attribute": "true",
        "crs": "EPSG:4326",
        "domain": settings.vworld_domain,
        "geomFilter": f"POINT({x} {y})",
        "buffer": str(buffer_m),
    }


def sort_zones(zones: list[ZoneRecord]) -> list[ZoneRecord]:
    """Order zones by ZONE_PRIORITY; ties keep their original order."""
    return sorted(zones, key=lambda z: ZONE_PRIORITY.get(z.name, UNKNOWN_ZONE_PRIORITY))


def parse_zoning_features(features: list[dict]) -> list[ZoneRecord]:
    """Extract unique, classified zone names from LT_C_UQ111 features."""
    zones: list[ZoneRecord] = []
    seen: set[str] = set()
    for feature in features:
        props = _properties(feature)
        name = props.get("uname") or props.get("uq_nm") or props.get("prpos_area_nm")
        if not name or name == UNCLASSIFIED_ZONE or name in seen:
            continue
        seen.add(name)
        zones.append(ZoneRecord(name=name, code=props.get("uq_cd") or props.get("prpos_area_cd")))
    return zones


# ──────────────────────────────────────────────────────────────────
# GEOCODING
# ──────────────────────────────────────────────────────────────────

async def geocode_address(address: str) -> GeocodeResult:
    """Resolve an address to WGS84 coordinates.

    Tries the road-name address type first and retries once as a parcel
    (지번) address.
    """
    if not settings.vworld_key:
        return GeocodeResult(success=False, error=MISSING_KEY_ERROR)

    params = {
        "service": "address",
        "request": "getcoord",
        "version": "2.0",
        "crs": "epsg:4326",
        "address": address,
        "refine": "true",
        "simple": "false",
        "format": "json",
        "type": "road",
        "key": settings.vworld_key,
    }

    try:
        async with httpx.AsyncClient(timeout=settings.vworld_timeout) as client:
            resp = await client.get(VWORLD_ADDRESS_URL, params=dict(params))
            data = resp.json()

            if _status(data) != "OK":
                params["type"] = "parcel"
                resp = await client.get(VWORLD_ADDRESS_URL, params=dict(params))
                data = resp.json()

                if _status(data) != "OK":
                    return GeocodeResult(
                        success=False,
                        error=_error_text(data) or ADDRESS_NOT_FOUND_ERROR,
                    )

        result = data["response"]["result"]
        return GeocodeResult(
            success=True,
            x=float(result["point"]["x"]),
            y=float(result["point"]["y"]),
            refined_address=result.get("text"),
        )
    except (httpx.HTTPError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        logger.warning("Geocoding failed for %r: %s", address, e)
        return GeocodeResult(success=False, error=str(e) or ADDRESS_NOT_FOUND_ERROR)


# ──────────────────────────────────────────────────────────────────
# LAND USE
# ──────────────────────────────────────────────────────────────────

async def get_land_use_info(x: float, y: float) -> LandUseResult:
    """Land-use zones at a point, most restrictive industrial/commercial first."""
    if not settings.vworld_key:
        logger.error("V-World API key is not configured")
        return LandUseResult(
            success=False,
            error=f"{MISSING_KEY_ERROR} 관리자에게 문의하세요.",
        )

    params = _data_params(ZONING_LAYER, x, y, settings.land_use_buffer_m)
    logger.info("V-World land-use query at (%s, %s)", x, y)

    try:
        async with httpx.AsyncClient(timeout=settings.vworld_timeout) as client:
            resp = await client.get(
                VWORLD_DATA_URL, params=params, headers={"Accept": "application/json"},
            )
            if resp.status_code != 200:
                logger.warning("V-World HTTP error: %s", resp.status_code)
                return LandUseResult(success=False, error=f"API 서버 오류 ({resp.status_code})")
            data = resp.json()
    except (httpx.HTTPError, json.JSONDecodeError, ValueError) as e:
        logger.warning("V-World land-use query failed: %s", e)
        return LandUseResult(success=False, error=f"API 호출 실패: {e}")

    logger.debug("V-World response: %s", json.dumps(data, ensure_ascii=False)[:500])

    if _status(data) in ("NOT_FOUND", "ERROR"):
        logger.warning(
            "V-World land-use lookup returned %s: %s",
            _status(data), _error_text(data) or "no zoning data at this point",
        )
        return await get_land_use_info_fallback(x, y)

    zones = sort_zones(parse_zoning_features(_features(data)))
    if not zones:
        logger.info("No zoning features at (%s, %s), trying fallback layers", x, y)
        return await get_land_use_info_fallback(x, y)

    logger.info("V-World zones: %s", ", ".join(z.name for z in zones))
    return LandUseResult(success=True, zones=zones)


async def get_land_use_info_fallback(x: float, y: float) -> LandUseResult:
    """Query 용도지구, 용도구역 and 행정구역 layers; any hit counts as a result."""
    zones: list[ZoneRecord] = []

    async with httpx.AsyncClient(timeout=settings.vworld_timeout) as client:
        for layer, label in FALLBACK_LAYERS:
            params = _data_params(layer, x, y, settings.land_use_fallback_buffer_m)
            try:
                resp = await client.get(VWORLD_DATA_URL, params=params)
                data = resp.json()
            except (httpx.HTTPError, json.JSONDecodeError, ValueError) as e:
                logger.warning("V-World %s layer query failed: %s", label, e)
                continue

            if _status(data) != "OK":
                continue
            for feature in _features(data):
                props = _properties(feature)
                name = props.get("uq_nm") or props.get("sig_kor_nm") or props.get("full_nm")
                if name:
                    zones.append(ZoneRecord(name=name, code=props.get("uq_cd") or props.get("sig_cd")))

    if zones:
        return LandUseResult(success=True, zones=zones)
    return LandUseResult(success=False, error=NO_LAND_USE_ERROR)


async def search_land_use(address: str) -> LandUseResult:
    """Address → coordinates → land-use zones."""
    geo = await geocode_address(address)
    if not geo.success or geo.x is None or geo.y is None:
        return LandUseResult(success=False, error=geo.error or ADDRESS_NOT_FOUND_ERROR)

    land = await get_land_use_info(geo.x, geo.y)
    coordinates = Coordinates(x=geo.x, y=geo.y)
    if not land.success:
        return LandUseResult(
            success=False,
            address=geo.refined_address,
            coordinates=coordinates,
            error=land.error,
        )

    return LandUseResult(
        success=True,
        address=geo.refined_address,
        coordinates=coordinates,
        zones=land.zones,
    )
