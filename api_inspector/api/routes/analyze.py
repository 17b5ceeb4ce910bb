"""
Analyze Route — POST /analyze

Probes the service at serviceUrl and returns the scored design report.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api_inspector.api.dependencies import get_analyzer
from api_inspector.core.analyzer import ApiAnalyzer
from api_inspector.core.errors import InspectorError, InvalidServiceUrlError
from api_inspector.models.analysis_models import AnalysisResult, AnalyzeRequest

logger = logging.getLogger("api_inspector.api.analyze")

router = APIRouter()


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(
    request: AnalyzeRequest,
    analyzer: ApiAnalyzer = Depends(get_analyzer),
):
    """
    Run one analysis.

    400 for a missing or malformed serviceUrl, 500 when the run fails.
    """
    try:
        return await analyzer.analyze(
            request.service_url,
            source_filter=request.source_filter,
            auth=request.auth,
        )
    except InvalidServiceUrlError as e:
        logger.info(f"Rejected analysis request: {e}")
        return JSONResponse(status_code=400, content={"error": str(e)})
    except InspectorError as e:
        logger.exception(f"Analysis of {request.service_url} failed")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(e)},
        )
