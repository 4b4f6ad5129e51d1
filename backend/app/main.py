from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError

from app.config import settings
from app.api.routes import router, VALIDATION_ERRORS

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Permit Feasibility Diagnosis Engine",
    description=(
        "Diagnose whether a business can be opened at a Korean address. "
        "Enter an address and business type to get the land-use zone, "
        "a feasibility score and grade, per-category analysis and the "
        "governing statutes."
    ),
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins + ["http://localhost:8000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed diagnosis and land-use bodies are reported as 400, like blank input."""
    detail = VALIDATION_ERRORS.get(request.url.path)
    if detail is None:
        return await request_validation_exception_handler(request, exc)
    return JSONResponse(status_code=400, content={"detail": detail})


@app.get("/")
async def root():
    return {
        "name": "Permit Feasibility Diagnosis Engine",
        "version": "1.0.0",
        "endpoints": {
            "api_docs": "/docs",
            "health": "/health",
            "permit_check": "POST /api/permit-check",
            "land_use": "POST /api/land-use",
            "business_types": "GET /api/business-types",
            "zones": "GET /api/zones",
            "zone_detail": "GET /api/zones/{zone}",
        },
    }


@app.get("/health")
async def health():
    """Health check with dependency status."""
    status = {"status": "healthy", "version": "1.0.0"}
    status["vworld"] = "configured" if settings.vworld_key else "not configured"

    try:
        from app.services.cache import get_redis
        r = await get_redis()
        if r:
            await r.ping()
            status["redis"] = "connected"
        else:
            status["redis"] = "not configured"
    except RedisError as e:
        status["redis"] = f"error: {e}"

    return status
