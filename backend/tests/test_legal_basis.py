"""Tests for legal basis resolution."""

from __future__ import annotations

from app.models.schemas import LegalBasisItem
from app.permit_engine.legal_basis import has_discretionary_citation, resolve_legal_basis


class TestResolveLegalBasis:
    def test_order_preserved(self):
        basis = resolve_legal_basis("construction")
        assert [item.law for item in basis] == [
            "건설산업기본법",
            "건설산업기본법 시행령",
            "건설기술 진흥법",
            "국가를 당사자로 하는 계약에 관한 법률",
        ]
        assert all(isinstance(item, LegalBasisItem) for item in basis)

    def test_discretion_flag_not_serialized(self):
        item = resolve_legal_basis("restaurant")[1]
        assert set(item.model_dump(by_alias=True)) == {"law", "article", "summary"}

    def test_unknown_business_type(self):
        assert resolve_legal_basis("bakery") == []


class TestDiscretionaryCitation:
    def test_office_has_none(self):
        assert has_discretionary_citation("office") is False

    def test_beauty_has_none(self):
        assert has_discretionary_citation("beauty") is False

    def test_restaurant_has_one(self):
        assert has_discretionary_citation("restaurant") is True

    def test_unknown_business_type(self):
        assert has_discretionary_citation("bakery") is False
