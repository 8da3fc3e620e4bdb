import logging
import traceback

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config.constants import FALLBACK_STANDARD
from config.schemas import (
    AnalysisRequest,
    AnalysisResponse,
    ErrorResponse,
    StandardsResponse,
)
from config.settings import settings
from hmpi.core.analysis_engine import AnalysisEngine
from hmpi.models.standards import StandardsTable, load_standards

logger = logging.getLogger(__name__)

standards_table = load_standards(settings.standards_file)


def _resolve_standards(payload: AnalysisRequest) -> StandardsTable:
    if payload.standards is None:
        return standards_table
    return StandardsTable(payload.standards)


def create_app() -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    openapi_tags = [
        {
            "name": "analysis",
            "description": (
                "Heavy metal pollution indices (HPI, HEI, Cd) for groundwater samples. "
                "Rows are JSON objects; `id` and `latitude`/`lat`, `longitude`/`lon`/`lng` "
                "are optional and every other key is treated as a metal concentration in mg/L."
            ),
        },
        {
            "name": "system",
            "description": "Service health and operational endpoints.",
        },
    ]

    app = FastAPI(
        title="Groundwater HMPI API",
        version="0.1.0",
        description=(
            "Computes the Heavy Metal Pollution Index, Heavy Metal Evaluation Index and "
            "Contamination Degree per sample and classifies each sample as "
            "Safe, Slightly Polluted or Hazardous from its HPI."
        ),
        openapi_tags=openapi_tags,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def on_startup() -> None:
        logger.info(
            "Backend started on %s:%s | standards=%s",
            settings.host,
            settings.port,
            settings.standards_file or "WHO defaults",
        )

    @app.get("/health", tags=["system"])
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/standards", response_model=StandardsResponse, tags=["analysis"])
    async def get_standards() -> StandardsResponse:
        return StandardsResponse(
            standards=standards_table.as_dict(),
            fallback_standard=FALLBACK_STANDARD,
        )

    @app.post(
        "/analyze",
        response_model=AnalysisResponse,
        tags=["analysis"],
        summary="Compute pollution indices for sample rows",
        description=(
            "Detects metal columns from the first row, scores every row against the "
            "permissible standards and returns one result per row in input order. "
            "Missing or non-numeric concentrations count as 0; metals without a "
            "standard use a fallback standard of 1.0."
        ),
        responses={
            200: {"description": "Indices computed"},
            400: {"model": ErrorResponse, "description": "Invalid standards table"},
            413: {"model": ErrorResponse, "description": "Too many rows"},
        },
    )
    async def analyze(payload: AnalysisRequest) -> AnalysisResponse:
        if len(payload.rows) > settings.max_samples:
            raise HTTPException(
                status_code=413,
                detail=f"Too many samples: {len(payload.rows)} (max {settings.max_samples})",
            )

        try:
            engine = AnalysisEngine(_resolve_standards(payload))
            analysis = engine.run_analysis(payload.rows)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error))
        except Exception as error:
            logger.error("Analysis failed: %s", traceback.format_exc())
            raise HTTPException(status_code=500, detail=f"Internal server error: {error}")

        return AnalysisResponse(
            sample_count=len(analysis["results"]),
            metal_columns=analysis["metal_columns"],
            results=analysis["results"],
            summary=analysis["summary"],
        )

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
