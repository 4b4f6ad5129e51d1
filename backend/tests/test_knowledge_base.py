"""Tests for the permit knowledge base tables and accessors."""

from __future__ import annotations

import pytest

from app.permit_engine.knowledge_base import (
    BUSINESS_GROUPS,
    BUSINESS_LAWS,
    BUSINESS_NAMES,
    BUSINESS_TYPES,
    DEFAULT_ZONE_LIMITS,
    KNOWN_ZONES,
    PRIMARY_BUSINESS_TYPES,
    ZONE_BUSINESS_MATRIX,
    ZONE_LIMITS,
    get_business_name,
    get_citations,
    get_compatibility,
    get_zone_limits,
)


class TestTables:
    def test_thirteen_zones(self):
        assert len(KNOWN_ZONES) == 13
        assert set(ZONE_LIMITS) == set(KNOWN_ZONES)

    def test_twenty_business_types(self):
        assert len(BUSINESS_TYPES) == 20
        assert set(BUSINESS_GROUPS) == set(BUSINESS_NAMES)
        assert set(BUSINESS_LAWS) == set(BUSINESS_NAMES)

    def test_every_zone_has_full_primary_row(self):
        for zone, row in ZONE_BUSINESS_MATRIX.items():
            assert set(row) == set(PRIMARY_BUSINESS_TYPES), zone

    def test_conditions_only_on_allowed_entries(self):
        for row in ZONE_BUSINESS_MATRIX.values():
            for entry in row.values():
                if not entry.allowed:
                    assert entry.conditions is None


class TestCompatibility:
    def test_exclusive_residential_denies_restaurant(self):
        entry = get_compatibility("제1종전용주거지역", "restaurant")
        assert entry.allowed is False
        assert entry.conditions is None

    def test_conditional_entry(self):
        entry = get_compatibility("제1종일반주거지역", "restaurant")
        assert entry.allowed is True
        assert entry.conditions == "바닥면적 300㎡ 미만"

    def test_unconditional_entry(self):
        entry = get_compatibility("일반상업지역", "retail")
        assert entry.allowed is True
        assert entry.conditions is None

    def test_unknown_zone_is_absent(self):
        assert get_compatibility("계획관리지역", "retail") is None

    def test_non_primary_business_is_absent(self):
        # Normalization happens before lookup, not inside the knowledge base
        assert get_compatibility("일반상업지역", "construction") is None


class TestZoneLimits:
    def test_general_commercial(self):
        limits = get_zone_limits("일반상업지역")
        assert limits.building_coverage == 80
        assert limits.floor_area_ratio == 1300

    def test_green_zone(self):
        limits = get_zone_limits("녹지지역")
        assert limits.building_coverage == 20
        assert limits.floor_area_ratio == 100

    def test_unknown_zone_uses_default(self):
        limits = get_zone_limits("계획관리지역")
        assert limits == DEFAULT_ZONE_LIMITS
        assert limits.building_coverage == 60
        assert limits.floor_area_ratio == 200

    def test_limits_are_immutable(self):
        limits = get_zone_limits("준주거지역")
        with pytest.raises(AttributeError):
            limits.floor_area_ratio = 9999


class TestCitations:
    def test_ordered_citations(self):
        citations = get_citations("restaurant")
        assert [c.law for c in citations] == ["식품위생법", "국토의 계획 및 이용에 관한 법률"]
        assert citations[1].has_discretion is True

    def test_recycling_has_four(self):
        assert len(get_citations("recycling")) == 4

    def test_unknown_business_has_none(self):
        assert get_citations("bakery") == ()


class TestBusinessNames:
    def test_known_name(self):
        assert get_business_name("petshop") == "동물병원/펫샵"

    def test_unknown_falls_back_to_code(self):
        assert get_business_name("bakery") == "bakery"
