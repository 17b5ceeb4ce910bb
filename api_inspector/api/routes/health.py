"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter

from api_inspector.core.catalog import DESIGN_RULES

router = APIRouter()

VERSION = "1.0.0"


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": VERSION,
        "engine": "deterministic",
        "rules": len(DESIGN_RULES),
    }
