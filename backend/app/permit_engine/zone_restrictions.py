"""
Per-zone reference notes: typical allowed and restricted building uses.

Informational only; shown alongside land-use lookups and zone details.
Scoring never reads this table.
"""

from __future__ import annotations

ZONE_BUSINESS_RESTRICTIONS = {
    "제1종전용주거지역": {
        "allowed": ["단독주택", "공동주택(4층 이하)"],
        "restricted": ["일반음식점", "숙박시설", "공장", "위락시설"],
        "note": "주거 환경 보호를 위한 가장 엄격한 규제 지역",
    },
    "제2종전용주거지역": {
        "allowed": ["단독주택", "공동주택"],
        "restricted": ["일반음식점", "숙박시설", "공장", "위락시설"],
        "note": "공동주택 중심의 양호한 주거환경 보호",
    },
    "제1종일반주거지역": {
        "allowed": ["단독주택", "공동주택(4층 이하)", "근린생활시설(일부)"],
        "restricted": ["숙박시설", "공장", "위락시설", "대형 판매시설"],
        "note": "저층 주택 중심의 편리한 주거환경 조성",
    },
    "제2종일반주거지역": {
        "allowed": ["단독주택", "공동주택", "근린생활시설", "휴게음식점"],
        "restricted": ["숙박시설(일반)", "공장", "위락시설"],
        "note": "중층 주택 중심의 주거환경 조성. 일부 근린시설 허용",
    },
    "제3종일반주거지역": {
        "allowed": ["단독주택", "공동주택", "근린생활시설", "일반음식점"],
        "restricted": ["공장", "위락시설"],
        "note": "중고층 주택 중심의 주거환경. 근린시설 대부분 허용",
    },
    "준주거지역": {
        "allowed": ["주거시설", "상업시설", "업무시설", "숙박시설(조건부)", "일반음식점"],
        "restricted": ["공장", "위험물 저장시설"],
        "note": "주거기능 위주에 상업·업무 기능 보완. 숙박업 가능",
    },
    "일반상업지역": {
        "allowed": ["상업시설", "업무시설", "숙박시설", "주거시설", "근린생활시설"],
        "restricted": ["공장", "위험물 저장시설"],
        "note": "상업 및 업무 기능 중심. 대부분의 시설 허용",
    },
    "중심상업지역": {
        "allowed": ["상업시설", "업무시설", "숙박시설", "문화시설"],
        "restricted": ["주거시설(일부)", "공장"],
        "note": "도심의 핵심 상업지역. 최대 용적률 적용",
    },
    "계획관리지역": {
        "allowed": ["농업시설", "단독주택(조건부)", "근린생활시설(일부)"],
        "restricted": ["대규모 시설", "공장(일부)"],
        "note": "체계적 개발 유도. 숙박시설은 관광호텔 등 일부만 허용되는 경우 있음",
    },
    "생산관리지역": {
        "allowed": ["농업시설", "창고", "소규모 공장"],
        "restricted": ["대규모 시설", "숙박시설"],
        "note": "농업 등 생산 활동 보호",
    },
    "보전관리지역": {
        "allowed": ["농업시설(제한적)"],
        "restricted": ["대부분의 건축물"],
        "note": "자연환경 및 산림 보전. 개발 매우 제한적",
    },
}


def get_zone_restrictions(zone: str) -> dict | None:
    """Restriction notes for a zone, or None if there are none on file."""
    return ZONE_BUSINESS_RESTRICTIONS.get(zone)
