#!/usr/bin/env python3
"""
Audit the permit feasibility decision table.

Direct mode scores every known zone × business type with the calculator
and prints a score/grade grid. API mode diagnoses real addresses against a
running server.

Usage:
    # Full matrix, no server or API key needed:
    python3 scripts/diagnose_matrix.py

    # Only some business types:
    python3 scripts/diagnose_matrix.py --business restaurant cafe

    # Against a live API:
    python3 scripts/diagnose_matrix.py --api http://localhost:8000 \\
        --address "서울특별시 중구 세종대로 110" --business restaurant
"""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from datetime import datetime

# Add backend to path for direct import mode
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.join(os.path.dirname(SCRIPT_DIR), "backend")
sys.path.insert(0, BACKEND_DIR)


# ──────────────────────────────────────────────────────────────────
# DIRECT ENGINE MODE (no server needed)
# ──────────────────────────────────────────────────────────────────

def run_matrix(business_types: list[str]) -> list[str]:
    """Score every known zone against the given business types."""
    from app.permit_engine.calculator import PermitScoreCalculator
    from app.permit_engine.knowledge_base import KNOWN_ZONES

    calculator = PermitScoreCalculator()
    zone_width = max(len(z) for z in KNOWN_ZONES) * 2

    lines = []
    header = "ZONE".ljust(zone_width) + "".join(bt[:10].rjust(12) for bt in business_types)
    lines.append(header)
    lines.append("-" * len(header))

    for zone in KNOWN_ZONES:
        cells = []
        for business_type in business_types:
            result = calculator.calculate(zone, business_type)
            flag = "*" if result.has_discretion else " "
            cells.append(f"{result.score:>3} {result.grade}{flag}".rjust(12))
        # Hangul renders two columns wide
        lines.append(zone + " " * (zone_width - 2 * len(zone)) + "".join(cells))

    lines.append("")
    lines.append("* = outcome involves administrative discretion")
    return lines


# ──────────────────────────────────────────────────────────────────
# API MODE
# ──────────────────────────────────────────────────────────────────

async def run_api_diagnosis(address: str, business_type: str, api_base: str) -> dict:
    """Run a diagnosis via the HTTP API."""
    import httpx
    async with httpx.AsyncClient(timeout=60) as client:
        resp = await client.post(
            f"{api_base}/api/permit-check",
            json={"address": address, "businessType": business_type},
        )
        if resp.status_code != 200:
            return {"error": f"API returned {resp.status_code}: {resp.text[:500]}"}
        return resp.json()


def format_diagnosis(address: str, business_type: str, result: dict) -> str:
    lines = []
    lines.append(f"\n{'='*70}")
    lines.append(f"ADDRESS: {address}  BUSINESS: {business_type}")
    lines.append(f"{'='*70}")

    if "error" in result and "score" not in result:
        lines.append(f"  ERROR: {result['error']}")
        return "\n".join(lines)

    zone_info = result.get("zoneInfo", {})
    lines.append(f"  Zone:     {zone_info.get('zone')} ({zone_info.get('zoneSource')})")
    lines.append(f"  Limits:   coverage {zone_info.get('buildingCoverage')}%, "
                 f"FAR {zone_info.get('floorAreaRatio')}%")
    lines.append(f"  Score:    {result.get('score')} ({result.get('grade')})")
    lines.append(f"  Discretion: {result.get('hasDiscretion')}")

    if result.get("error"):
        lines.append(f"  Lookup error: {result['error']}")
        lines.append(f"  Suggestion:   {result.get('suggestion')}")

    lines.append("\n  ANALYSIS:")
    for item in result.get("analysis", []):
        lines.append(f"    [{item['status']:>7}] {item['category']}: {item['description']}")

    lines.append("\n  RECOMMENDATIONS:")
    for rec in result.get("recommendations", []):
        lines.append(f"    - {rec}")

    return "\n".join(lines)


# ──────────────────────────────────────────────────────────────────
# MAIN
# ──────────────────────────────────────────────────────────────────

async def main():
    parser = argparse.ArgumentParser(description="Audit the permit feasibility decision table")
    parser.add_argument("--api", default=None, help="API base URL (e.g., http://localhost:8000)")
    parser.add_argument("--address", nargs="*", default=[], help="Addresses to diagnose (API mode)")
    parser.add_argument("--business", nargs="*", default=None, help="Business type codes")
    parser.add_argument("--json", action="store_true", help="Print raw JSON in API mode")
    args = parser.parse_args()

    from app.permit_engine.knowledge_base import BUSINESS_TYPES
    business_types = args.business or list(BUSINESS_TYPES)

    print(f"\nPermit Feasibility Audit")
    print(f"Date: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"Mode: {'API' if args.api else 'Direct Import'}\n")

    if not args.api:
        print("\n".join(run_matrix(business_types)))
        return

    if not args.address:
        parser.error("--api requires at least one --address")

    for address in args.address:
        for business_type in business_types:
            result = await run_api_diagnosis(address, business_type, args.api)
            if args.json:
                print(json.dumps(result, ensure_ascii=False, indent=2))
            else:
                print(format_diagnosis(address, business_type, result))


if __name__ == "__main__":
    asyncio.run(main())
