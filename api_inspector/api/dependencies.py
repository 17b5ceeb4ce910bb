"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from api_inspector.core.analyzer import ApiAnalyzer


@lru_cache
def get_analyzer() -> ApiAnalyzer:
    """Shared analyzer singleton. Tests override it with a mock transport."""
    return ApiAnalyzer()
