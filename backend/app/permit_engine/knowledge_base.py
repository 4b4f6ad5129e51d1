"""
Permit feasibility knowledge base.

Static reference tables consulted by the diagnosis engine:
  - Zone × primary business category compatibility (국토계획법 시행령 별표 2~22)
  - Building coverage / floor area ratio limits per zone (국토계획법 제77조, 제78조)
  - Business type display names
  - Per-business legal citations, with an administrative-discretion flag

All tables are loaded at import and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CompatibilityEntry:
    allowed: bool
    conditions: Optional[str] = None


@dataclass(frozen=True)
class ZoneLimits:
    """Building coverage ratio and floor area ratio caps, in percent."""
    building_coverage: int
    floor_area_ratio: int


@dataclass(frozen=True)
class LegalCitation:
    law: str
    article: str
    summary: str
    has_discretion: bool = False


_ALLOWED = CompatibilityEntry(allowed=True)
_DENIED = CompatibilityEntry(allowed=False)


def _cond(conditions: str) -> CompatibilityEntry:
    return CompatibilityEntry(allowed=True, conditions=conditions)


# ──────────────────────────────────────────────────────────────────
# ZONE × BUSINESS COMPATIBILITY
# ──────────────────────────────────────────────────────────────────

ZONE_BUSINESS_MATRIX: dict[str, dict[str, CompatibilityEntry]] = {
    "제1종전용주거지역": {
        "restaurant": _DENIED,
        "cafe": _DENIED,
        "retail": _DENIED,
        "office": _DENIED,
        "manufacturing": _DENIED,
        "warehouse": _DENIED,
        "medical": _cond("의원급 이하"),
        "education": _cond("유치원, 초등학교"),
        "lodging": _DENIED,
        "sports": _DENIED,
    },
    "제2종전용주거지역": {
        "restaurant": _DENIED,
        "cafe": _DENIED,
        "retail": _cond("근린생활시설 내 소규모"),
        "office": _cond("바닥면적 500㎡ 미만"),
        "manufacturing": _DENIED,
        "warehouse": _DENIED,
        "medical": _cond("의원급"),
        "education": _ALLOWED,
        "lodging": _DENIED,
        "sports": _cond("실내체육시설"),
    },
    "제1종일반주거지역": {
        "restaurant": _cond("바닥면적 300㎡ 미만"),
        "cafe": _cond("바닥면적 300㎡ 미만"),
        "retail": _cond("바닥면적 1000㎡ 미만"),
        "office": _cond("바닥면적 1000㎡ 미만"),
        "manufacturing": _DENIED,
        "warehouse": _DENIED,
        "medical": _ALLOWED,
        "education": _ALLOWED,
        "lodging": _DENIED,
        "sports": _ALLOWED,
    },
    "제2종일반주거지역": {
        "restaurant": _ALLOWED,
        "cafe": _ALLOWED,
        "retail": _ALLOWED,
        "office": _ALLOWED,
        "manufacturing": _DENIED,
        "warehouse": _cond("바닥면적 300㎡ 미만"),
        "medical": _ALLOWED,
        "education": _ALLOWED,
        "lodging": _cond("다중생활시설"),
        "sports": _ALLOWED,
    },
    "제3종일반주거지역": {
        "restaurant": _ALLOWED,
        "cafe": _ALLOWED,
        "retail": _ALLOWED,
        "office": _ALLOWED,
        "manufacturing": _DENIED,
        "warehouse": _cond("바닥면적 500㎡ 미만"),
        "medical": _ALLOWED,
        "education": _ALLOWED,
        "lodging": _ALLOWED,
        "sports": _ALLOWED,
    },
    "준주거지역": {
        "restaurant": _ALLOWED,
        "cafe": _ALLOWED,
        "retail": _ALLOWED,
        "office": _ALLOWED,
        "manufacturing": _cond("도시형공장, 첨단업종"),
        "warehouse": _ALLOWED,
        "medical": _ALLOWED,
        "education": _ALLOWED,
        "lodging": _ALLOWED,
        "sports": _ALLOWED,
    },
    "일반상업지역": {
        "restaurant": _ALLOWED,
        "cafe": _ALLOWED,
        "retail": _ALLOWED,
        "office": _ALLOWED,
        "manufacturing": _cond("도시형공장"),
        "warehouse": _ALLOWED,
        "medical": _ALLOWED,
        "education": _ALLOWED,
        "lodging": _ALLOWED,
        "sports": _ALLOWED,
    },
    "근린상업지역": {
        "restaurant": _ALLOWED,
        "cafe": _ALLOWED,
        "retail": _ALLOWED,
        "office": _ALLOWED,
        "manufacturing": _cond("도시형공장"),
        "warehouse": _ALLOWED,
        "medical": _ALLOWED,
        "education": _ALLOWED,
        "lodging": _ALLOWED,
        "sports": _ALLOWED,
    },
    "중심상업지역": {
        "restaurant": _ALLOWED,
        "cafe": _ALLOWED,
        "retail": _ALLOWED,
        "office": _ALLOWED,
        "manufacturing": _DENIED,
        "warehouse": _cond("지하층"),
        "medical": _ALLOWED,
        "education": _ALLOWED,
        "lodging": _ALLOWED,
        "sports": _ALLOWED,
    },
    "준공업지역": {
        "restaurant": _ALLOWED,
        "cafe": _ALLOWED,
        "retail": _ALLOWED,
        "office": _ALLOWED,
        "manufacturing": _ALLOWED,
        "warehouse": _ALLOWED,
        "medical": _ALLOWED,
        "education": _ALLOWED,
        "lodging": _cond("숙박시설 제한적"),
        "sports": _ALLOWED,
    },
    "일반공업지역": {
        "restaurant": _cond("근린생활시설 내"),
        "cafe": _cond("근린생활시설 내"),
        "retail": _cond("근린생활시설 내"),
        "office": _ALLOWED,
        "manufacturing": _ALLOWED,
        "warehouse": _ALLOWED,
        "medical": _cond("의원급"),
        "education": _cond("직업훈련시설"),
        "lodging": _DENIED,
        "sports": _ALLOWED,
    },
    "전용공업지역": {
        "restaurant": _cond("기숙사 부대시설"),
        "cafe": _DENIED,
        "retail": _DENIED,
        "office": _cond("공장 부속시설"),
        "manufacturing": _ALLOWED,
        "warehouse": _ALLOWED,
        "medical": _DENIED,
        "education": _DENIED,
        "lodging": _DENIED,
        "sports": _DENIED,
    },
    "녹지지역": {
        "restaurant": _cond("휴게음식점, 바닥면적 제한"),
        "cafe": _cond("바닥면적 제한"),
        "retail": _cond("바닥면적 제한"),
        "office": _DENIED,
        "manufacturing": _DENIED,
        "warehouse": _DENIED,
        "medical": _cond("의원급"),
        "education": _ALLOWED,
        "lodging": _cond("농어촌민박"),
        "sports": _cond("야외체육시설"),
    },
}

# Business categories that appear as columns of the compatibility matrix
PRIMARY_BUSINESS_TYPES = (
    "restaurant", "cafe", "retail", "office", "manufacturing",
    "warehouse", "medical", "education", "lodging", "sports",
)


# ──────────────────────────────────────────────────────────────────
# BUILDING COVERAGE / FLOOR AREA RATIO (%)
# ──────────────────────────────────────────────────────────────────

ZONE_LIMITS: dict[str, ZoneLimits] = {
    "제1종전용주거지역": ZoneLimits(50, 100),
    "제2종전용주거지역": ZoneLimits(50, 150),
    "제1종일반주거지역": ZoneLimits(60, 200),
    "제2종일반주거지역": ZoneLimits(60, 250),
    "제3종일반주거지역": ZoneLimits(50, 300),
    "준주거지역": ZoneLimits(70, 500),
    "일반상업지역": ZoneLimits(80, 1300),
    "근린상업지역": ZoneLimits(70, 900),
    "중심상업지역": ZoneLimits(90, 1500),
    "준공업지역": ZoneLimits(70, 400),
    "일반공업지역": ZoneLimits(70, 350),
    "전용공업지역": ZoneLimits(70, 300),
    "녹지지역": ZoneLimits(20, 100),
}

# Used for zones outside the table (e.g. 관리지역, 용도지구 names from the fallback layers)
DEFAULT_ZONE_LIMITS = ZoneLimits(building_coverage=60, floor_area_ratio=200)

KNOWN_ZONES = tuple(ZONE_BUSINESS_MATRIX)


# ──────────────────────────────────────────────────────────────────
# BUSINESS TYPES
# ──────────────────────────────────────────────────────────────────

BUSINESS_NAMES = {
    "restaurant": "일반음식점",
    "cafe": "카페/휴게음식점",
    "retail": "소매점/판매시설",
    "office": "사무실/업무시설",
    "manufacturing": "제조업/공장",
    "warehouse": "창고시설",
    "medical": "의료시설",
    "education": "교육시설/학원",
    "lodging": "숙박시설",
    "sports": "체육시설",
    "construction": "건설업",
    "realestate": "부동산중개업",
    "transport": "화물운송업",
    "passenger": "여객운송업",
    "beauty": "미용업/이용업",
    "pharmacy": "약국",
    "petshop": "동물병원/펫샵",
    "daycare": "어린이집",
    "elderly": "노인요양시설",
    "recycling": "폐기물처리업",
}

# Industry group labels shown next to each business type in the request form
BUSINESS_GROUPS = {
    "restaurant": "음식점업",
    "cafe": "음식점업",
    "retail": "판매업",
    "office": "업무시설",
    "manufacturing": "공장",
    "warehouse": "물류",
    "medical": "의료업",
    "education": "교육업",
    "lodging": "숙박업",
    "sports": "체육시설업",
    "construction": "건설업",
    "realestate": "부동산업",
    "transport": "운송업",
    "passenger": "운송업",
    "beauty": "위생업",
    "pharmacy": "의료업",
    "petshop": "동물관련업",
    "daycare": "아동복지",
    "elderly": "노인복지",
    "recycling": "환경업",
}

BUSINESS_TYPES = tuple(BUSINESS_NAMES)


# ──────────────────────────────────────────────────────────────────
# LEGAL CITATIONS
# ──────────────────────────────────────────────────────────────────

_NATIONAL_LAND_ACT_76 = "국토의 계획 및 이용에 관한 법률"

BUSINESS_LAWS: dict[str, tuple[LegalCitation, ...]] = {
    "restaurant": (
        LegalCitation(
            "식품위생법", "제36조, 제37조 (영업의 허가 등)",
            "일반음식점 영업은 시·군·구청장에게 신고하여야 함. 시설기준은 식품위생법 시행규칙 별표14 참조",
        ),
        LegalCitation(
            _NATIONAL_LAND_ACT_76, "제76조 (용도지역에서의 건축물의 건축 제한)",
            "용도지역별로 건축할 수 있는 건축물의 종류가 제한됨",
            has_discretion=True,
        ),
    ),
    "cafe": (
        LegalCitation(
            "식품위생법", "제36조, 제37조 (영업의 허가 등)",
            "휴게음식점 영업은 시·군·구청장에게 신고하여야 함",
        ),
        LegalCitation(
            "건축법 시행령", "별표1 (용도별 건축물의 종류)",
            "휴게음식점은 제2종 근린생활시설에 해당 (바닥면적 300㎡ 미만)",
        ),
    ),
    "retail": (
        LegalCitation(
            "유통산업발전법", "제8조 (대규모점포등의 개설등록)",
            "매장면적 3,000㎡ 이상인 경우 대규모점포 개설등록 필요",
            has_discretion=True,
        ),
        LegalCitation(
            _NATIONAL_LAND_ACT_76, "제76조 (용도지역에서의 건축물의 건축 제한)",
            "용도지역별 판매시설 규모 제한 적용",
            has_discretion=True,
        ),
    ),
    "office": (
        LegalCitation(
            "건축법", "제11조 (건축허가), 제14조 (건축신고)",
            "업무시설 신축·증축 시 건축허가 또는 신고 필요",
        ),
        LegalCitation(
            "주차장법", "제19조 (부설주차장의 설치)",
            "연면적 기준 부설주차장 확보 의무",
        ),
    ),
    "manufacturing": (
        LegalCitation(
            "산업집적활성화 및 공장설립에 관한 법률", "제13조 (공장설립등의 승인)",
            "공장 건축면적 500㎡ 이상 시 공장설립승인 필요. 도시형공장 특례 적용 가능",
            has_discretion=True,
        ),
        LegalCitation(
            "환경영향평가법", "제22조, 제43조",
            "일정 규모 이상 공장 설립 시 환경영향평가 또는 소규모환경영향평가 필요",
            has_discretion=True,
        ),
        LegalCitation(
            "대기환경보전법, 물환경보전법", "배출시설 설치 허가·신고",
            "오염물질 배출시설 설치 시 환경부 허가 또는 신고 필요",
        ),
    ),
    "warehouse": (
        LegalCitation(
            "건축법", "제11조, 별표1",
            "창고시설은 건축법상 창고시설(위험물 저장 및 처리 시설 제외)에 해당",
        ),
        LegalCitation(
            "물류시설의 개발 및 운영에 관한 법률", "제21조의2 (물류창고업의 등록)",
            "타인의 물건 보관 영업 시 물류창고업 등록 필요",
        ),
    ),
    "medical": (
        LegalCitation(
            "의료법", "제33조 (개설 등)",
            "의료기관 개설은 시·도지사 허가(병원급) 또는 신고(의원급) 필요",
            has_discretion=True,
        ),
        LegalCitation(
            "의료법 시행규칙", "별표3, 별표4 (시설기준)",
            "의료기관 종류별 시설·장비 기준 충족 필요",
        ),
    ),
    "education": (
        LegalCitation(
            "학원의 설립·운영 및 과외교습에 관한 법률", "제6조 (학원의 설립·운영의 등록)",
            "학원 설립 시 교육감에게 등록. 시설기준 및 강사자격 충족 필요",
        ),
        LegalCitation(
            "교육환경 보호에 관한 법률", "제8조, 제9조",
            "학교환경위생정화구역 내 유해업소 금지",
            has_discretion=True,
        ),
    ),
    "lodging": (
        LegalCitation(
            "공중위생관리법", "제3조, 제4조 (영업신고)",
            "숙박업 영업 시 시·군·구청장에게 신고. 시설기준 충족 필요",
        ),
        LegalCitation(
            "관광진흥법", "제3조, 제4조 (관광숙박업 등록)",
            "호텔업, 휴양콘도업 등은 문화체육관광부장관 또는 시·도지사 등록",
            has_discretion=True,
        ),
        LegalCitation(
            "건축법 시행령", "별표1 제15호",
            "숙박시설 건축물 용도 분류 및 제한사항",
        ),
    ),
    "sports": (
        LegalCitation(
            "체육시설의 설치·이용에 관한 법률", "제10조, 제19조, 제20조",
            "체육시설업 종류에 따라 신고 또는 등록 필요. 시설기준 충족 의무",
        ),
        LegalCitation(
            "학교보건법", "제6조 (학교환경위생정화구역)",
            "당구장, 무도학원 등은 학교정화구역 내 설치 제한",
            has_discretion=True,
        ),
    ),
    "construction": (
        LegalCitation(
            "건설산업기본법", "제9조 (건설업의 등록 등)",
            "건설업을 영위하려면 업종별로 국토교통부장관에게 등록해야 함. 기술인력, 자본금, 시설·장비 요건 충족 필요",
        ),
        LegalCitation(
            "건설산업기본법 시행령", "별표2 (건설업의 업종과 업종별 업무내용)",
            "종합건설업(토건, 토목, 건축, 산업환경설비, 조경) 및 전문건설업 29개 업종으로 구분",
        ),
        LegalCitation(
            "건설기술 진흥법", "제26조 (건설기술인의 배치)",
            "건설공사에 적정한 기술인력 배치 의무",
        ),
        LegalCitation(
            "국가를 당사자로 하는 계약에 관한 법률", "제7조 (계약의 방법)",
            "국가·지방자치단체 발주공사 참여 시 적용. 입찰참가자격, 실적 요건 등",
            has_discretion=True,
        ),
    ),
    "realestate": (
        LegalCitation(
            "공인중개사법", "제9조 (중개사무소의 개설등록)",
            "중개업을 하려면 시·군·구청장에게 중개사무소 개설등록 필요. 공인중개사 자격 및 실무교육 이수 요건",
        ),
        LegalCitation(
            "공인중개사법", "제13조 (겸업제한)",
            "중개업 외 다른 업무 겸업 시 제한사항 있음",
        ),
        LegalCitation(
            "공인중개사법 시행규칙", "제7조 (사무소의 설치기준)",
            "중개사무소 시설기준: 건물 내 구획된 공간, 상업용 건물 등",
            has_discretion=True,
        ),
    ),
    "transport": (
        LegalCitation(
            "화물자동차 운수사업법", "제3조 (화물자동차 운송사업의 허가 등)",
            "화물자동차 운송사업 영위 시 국토교통부장관 허가 필요. 차고지, 자본금, 차량 요건",
            has_discretion=True,
        ),
        LegalCitation(
            "화물자동차 운수사업법", "제24조 (화물자동차 운송주선사업의 허가)",
            "주선사업(용달, 포장이사 등) 허가 요건. 자본금 5천만원 이상, 사무실 등",
            has_discretion=True,
        ),
        LegalCitation(
            "물류정책기본법", "제38조 (국제물류주선업의 등록)",
            "국제물류주선업 영위 시 등록 필요. 자본금 3억원 이상",
        ),
    ),
    "passenger": (
        LegalCitation(
            "여객자동차 운수사업법", "제4조 (면허 등)",
            "여객자동차 운송사업 영위 시 국토교통부장관 또는 시·도지사 면허 필요",
            has_discretion=True,
        ),
        LegalCitation(
            "여객자동차 운수사업법", "제28조 (자동차대여사업의 등록)",
            "렌터카 사업은 시·도지사 등록. 자본금 1억원 이상, 차량 10대 이상 등",
        ),
    ),
    "beauty": (
        LegalCitation(
            "공중위생관리법", "제3조, 제4조 (영업신고)",
            "미용업·이용업 영위 시 시·군·구청장에게 신고. 면허 소지자 배치 의무",
        ),
        LegalCitation(
            "공중위생관리법 시행규칙", "별표1 (시설 및 설비기준)",
            "영업장 면적, 조명, 환기, 소독장비 등 시설기준 충족 필요",
        ),
    ),
    "pharmacy": (
        LegalCitation(
            "약사법", "제20조 (약국개설등록)",
            "약국 개설 시 시·도지사에게 등록. 약사 또는 한약사 자격 필요",
        ),
        LegalCitation(
            "약사법", "제21조 (약국 등의 시설기준)",
            "약국 시설기준: 조제실, 의약품 보관시설 등",
        ),
        LegalCitation(
            "의료기기법", "제17조 (의료기기 판매업 신고)",
            "의료기기 판매 시 별도 신고 필요",
        ),
    ),
    "petshop": (
        LegalCitation(
            "수의사법", "제17조 (동물병원의 개설)",
            "동물병원 개설 시 시·도지사에게 신고. 수의사 자격 및 시설기준 충족",
        ),
        LegalCitation(
            "동물보호법", "제33조 (영업의 등록)",
            "동물판매업, 동물미용업, 동물위탁관리업 등은 시·군·구청장 등록",
        ),
        LegalCitation(
            "동물보호법 시행규칙", "별표10 (등록대상 동물관련영업의 시설 및 인력 기준)",
            "시설면적, 위생관리, 인력배치 기준 충족 필요",
            has_discretion=True,
        ),
    ),
    "daycare": (
        LegalCitation(
            "영유아보육법", "제13조 (어린이집의 설치)",
            "어린이집 설치 시 시·군·구청장 인가 필요. 정원별 시설기준 충족",
            has_discretion=True,
        ),
        LegalCitation(
            "영유아보육법 시행규칙", "별표1 (어린이집의 설치기준)",
            "보육실, 조리실, 놀이터 등 시설기준 및 보육교직원 배치기준",
        ),
        LegalCitation(
            "건축법 시행령", "별표1 제10호 (교육연구시설)",
            "어린이집은 제1종 근린생활시설 또는 노유자시설에 해당",
        ),
    ),
    "elderly": (
        LegalCitation(
            "노인복지법", "제35조 (노인의료복지시설의 설치)",
            "노인요양시설, 노인요양공동생활가정 설치 시 시·군·구청장 허가 필요",
            has_discretion=True,
        ),
        LegalCitation(
            "노인장기요양보험법", "제31조 (장기요양기관의 지정)",
            "장기요양기관 지정 시 별도 요건 충족. 인력기준, 시설기준 등",
            has_discretion=True,
        ),
        LegalCitation(
            "노인복지법 시행규칙", "별표4 (시설의 기준)",
            "침실, 요양보호사실, 사무실, 프로그램실 등 시설기준",
        ),
    ),
    "recycling": (
        LegalCitation(
            "폐기물관리법", "제25조 (폐기물처리업의 허가 등)",
            "폐기물 수집·운반업, 중간처리업, 최종처리업은 시·도지사 허가 필요",
            has_discretion=True,
        ),
        LegalCitation(
            "폐기물관리법 시행규칙", "별표9 (폐기물처리업의 시설·장비 및 기술능력의 기준)",
            "업종별 차량, 장비, 시설, 기술인력 기준 충족",
        ),
        LegalCitation(
            "자원의 절약과 재활용촉진에 관한 법률", "제46조 (재활용가능자원의 수집·운반·보관업 등록)",
            "재활용가능자원 수집 등 영업은 시·군·구청장 등록",
        ),
        LegalCitation(
            "환경영향평가법", "제43조 (소규모 환경영향평가)",
            "폐기물처리시설 설치 시 환경영향평가 대상 여부 검토 필요",
            has_discretion=True,
        ),
    ),
}


# ──────────────────────────────────────────────────────────────────
# ACCESSORS
# ──────────────────────────────────────────────────────────────────

def get_compatibility(zone: str, business_type: str) -> CompatibilityEntry | None:
    """Compatibility verdict for a zone and a *primary* business category.

    Returns None when either key is unknown; callers treat that as
    "not allowed, no condition".
    """
    return ZONE_BUSINESS_MATRIX.get(zone, {}).get(business_type)


def get_zone_limits(zone: str) -> ZoneLimits:
    """Coverage/FAR caps for a zone, or DEFAULT_ZONE_LIMITS if the zone is unknown."""
    return ZONE_LIMITS.get(zone, DEFAULT_ZONE_LIMITS)


def get_citations(business_type: str) -> tuple[LegalCitation, ...]:
    return BUSINESS_LAWS.get(business_type, ())


def get_business_name(business_type: str) -> str:
    """Korean display name; unknown codes are shown as-is."""
    return BUSINESS_NAMES.get(business_type, business_type)
