"""Tests for business category normalization."""

from __future__ import annotations

import pytest

from app.permit_engine.categories import (
    normalize_business_type,
    is_office_based,
    is_neighborhood,
    is_welfare,
)
from app.permit_engine.knowledge_base import BUSINESS_TYPES, PRIMARY_BUSINESS_TYPES


class TestNormalization:
    @pytest.mark.parametrize("business_type", [
        "construction", "realestate", "transport", "passenger", "recycling",
    ])
    def test_office_based(self, business_type):
        assert normalize_business_type(business_type) == "office"
        assert is_office_based(business_type)

    @pytest.mark.parametrize("business_type", ["beauty", "pharmacy", "petshop"])
    def test_neighborhood_facilities(self, business_type):
        assert normalize_business_type(business_type) == "retail"
        assert is_neighborhood(business_type)

    @pytest.mark.parametrize("business_type", ["daycare", "elderly"])
    def test_welfare_facilities(self, business_type):
        assert normalize_business_type(business_type) == "education"
        assert is_welfare(business_type)

    def test_primary_types_map_to_themselves(self):
        for business_type in PRIMARY_BUSINESS_TYPES:
            assert normalize_business_type(business_type) == business_type

    def test_unknown_maps_to_itself(self):
        assert normalize_business_type("bakery") == "bakery"

    def test_every_business_type_lands_on_a_primary_column(self):
        for business_type in BUSINESS_TYPES:
            assert normalize_business_type(business_type) in PRIMARY_BUSINESS_TYPES

    def test_groups_are_disjoint(self):
        for business_type in BUSINESS_TYPES:
            flags = [
                is_office_based(business_type),
                is_neighborhood(business_type),
                is_welfare(business_type),
            ]
            assert sum(flags) <= 1
