from __future__ import annotations

from app.models.schemas import DiagnosisResult, LandUseResult, ZoneRecord

__all__ = ["DiagnosisResult", "LandUseResult", "ZoneRecord"]
