"""
OpenAPI Route — POST /openapi

Returns the service's published OpenAPI document, or one generated from
endpoint discovery.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api_inspector.api.dependencies import get_analyzer
from api_inspector.core.analyzer import ApiAnalyzer
from api_inspector.core.errors import InspectorError, InvalidServiceUrlError
from api_inspector.core.openapi import get_openapi_document
from api_inspector.models.analysis_models import OpenApiRequest

logger = logging.getLogger("api_inspector.api.openapi")

router = APIRouter()


@router.post("/openapi")
async def openapi(
    request: OpenApiRequest,
    analyzer: ApiAnalyzer = Depends(get_analyzer),
):
    try:
        return await get_openapi_document(
            request.service_url,
            auth=request.auth,
            transport=analyzer.transport,
            verify_host=analyzer.verify_host,
        )
    except InvalidServiceUrlError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except InspectorError as e:
        logger.exception(f"OpenAPI generation for {request.service_url} failed")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to fetch or generate OpenAPI specification",
                "message": str(e),
            },
        )
