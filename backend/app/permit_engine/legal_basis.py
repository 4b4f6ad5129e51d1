"""Legal basis lookup for a business type."""

from __future__ import annotations

from app.models.schemas import LegalBasisItem
from app.permit_engine.knowledge_base import get_citations


def resolve_legal_basis(business_type: str) -> list[LegalBasisItem]:
    """Citations for a business type, in order, without the discretion flag.

    Unknown business types yield an empty list.
    """
    return [
        LegalBasisItem(law=c.law, article=c.article, summary=c.summary)
        for c in get_citations(business_type)
    ]


def has_discretionary_citation(business_type: str) -> bool:
    """True if any cited provision leaves the outcome to administrative judgment."""
    return any(c.has_discretion for c in get_citations(business_type))
