"""
API Inspector FastAPI Application.

Live API design conformance checker:
  POST /analyze  → probe a service, evaluate design rules, score the result
  POST /openapi  → fetch or synthesize the service's OpenAPI document
  GET  /rules    → rule catalog, optionally filtered by source
  GET  /sources  → rule sources
  GET  /health   → {"status": "ok", ...}
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api_inspector.api.routes.analyze import router as analyze_router
from api_inspector.api.routes.health import VERSION, router as health_router
from api_inspector.api.routes.openapi import router as openapi_router
from api_inspector.api.routes.rules import router as rules_router
from api_inspector.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("api_inspector")

app = FastAPI(
    title="API Inspector",
    description="REST/API design conformance analysis of live HTTP services",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyze_router)
app.include_router(openapi_router)
app.include_router(rules_router)
app.include_router(health_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = await request.body()
    logger.error(f"Validation Error. Raw body: {body.decode('utf-8', 'replace')[:500]} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_errors(exc), "body": body.decode("utf-8", "replace")[:100]},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
