"""
Business category normalization.

Some business types are not columns of the compatibility matrix because
whether they may operate in a zone is decided by the building use they
occupy:

  - Office-based (registration businesses run out of an office) → office
  - Neighborhood facilities (제1·2종 근린생활시설) → retail
  - Welfare / childcare facilities (노유자시설) → education
"""

from __future__ import annotations

OFFICE_BASED_BUSINESSES = frozenset({
    "construction", "realestate", "transport", "passenger", "recycling",
})

NEIGHBORHOOD_BUSINESSES = frozenset({"beauty", "pharmacy", "petshop"})

WELFARE_BUSINESSES = frozenset({"daycare", "elderly"})


def normalize_business_type(business_type: str) -> str:
    """Map a business type to the matrix column that governs it."""
    if business_type in OFFICE_BASED_BUSINESSES:
        return "office"
    if business_type in NEIGHBORHOOD_BUSINESSES:
        return "retail"
    if business_type in WELFARE_BUSINESSES:
        return "education"
    return business_type


def is_office_based(business_type: str) -> bool:
    return business_type in OFFICE_BASED_BUSINESSES


def is_neighborhood(business_type: str) -> bool:
    return business_type in NEIGHBORHOOD_BUSINESSES


def is_welfare(business_type: str) -> bool:
    return business_type in WELFARE_BUSINESSES
