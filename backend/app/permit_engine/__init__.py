from __future__ import annotations

from app.permit_engine.calculator import PermitScoreCalculator, grade_for_score
from app.permit_engine.diagnosis import diagnose

__all__ = ["PermitScoreCalculator", "grade_for_score", "diagnose"]
