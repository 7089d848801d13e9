"""
routers/work_value.py — Work Value Endpoints

Endpoints:
  POST /api/v1/work-value/evaluate      — Evaluate one form record
  POST /api/v1/work-value/report        — Download the result letter as .md
  GET  /api/v1/work-value/coefficients  — Canonical coefficient / tier tables

Register in main.py:
    from work_value.routers.work_value import router as work_value_router
    app.include_router(work_value_router)
"""

import io
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, StreamingResponse

from work_value.config import get_settings
from work_value.models.results import (
    CoefficientTablesResponse,
    EvaluateRequest,
    EvaluateResponse,
)
from work_value.scoring.aggregator import DREAM_MAX, GETTING_BY_MAX, PRAYER_BELOW
from work_value.scoring.coefficients import (
    LEVEL_COEFFICIENTS,
    NEUTRAL,
    QUIT_FREQUENCY_WEIGHTS,
)
from work_value.scoring.narrative import build_narrative
from work_value.scoring.work_value_calculator import evaluate_form

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=f"{get_settings().API_V1_PREFIX}/work-value",
    tags=["Work Value"],
)


# =====================================================================
# Validation errors
# =====================================================================

FIELD_MESSAGES = {
    "fields": {
        "dict_type": "Form fields must be a JSON object of field name to value",
    },
}

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "dict_type": "Field '{field}' must be an object",
    "model_attributes_type": "Request body must be a JSON object",
    "json_invalid": "Malformed JSON request body",
}


def get_validation_message(field: str, error_type: str) -> str:
    if field in FIELD_MESSAGES:
        for key in FIELD_MESSAGES[field]:
            if key in error_type:
                return FIELD_MESSAGES[field][key]
    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field)
    return f"Invalid value for field '{field}'"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error_code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": None,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )
    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])
    if "json_invalid" in error_type:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error_code": "INVALID_REQUEST",
                "message": "Malformed JSON request body",
                "details": None,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )
    field = ".".join(str(l) for l in loc if l != "body")
    message = get_validation_message(field, error_type)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error_code": "VALIDATION_ERROR",
            "message": message,
            "details": {"field": field, "type": error_type},
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


# =====================================================================
# Endpoints
# =====================================================================

@router.post(
    "/evaluate",
    response_model=EvaluateResponse,
    summary="Evaluate a calculator form record",
)
async def evaluate(request: EvaluateRequest) -> EvaluateResponse:
    result = evaluate_form(request.fields)
    if result.invalid_fields:
        logger.info(f"Evaluated with unparseable fields: {', '.join(result.invalid_fields)}")
    return EvaluateResponse.from_result(result)


@router.post(
    "/report",
    summary="Download the result letter as Markdown",
    response_class=StreamingResponse,
)
async def download_report(request: EvaluateRequest):
    result = evaluate_form(request.fields)
    md_content = f"# Work Value Report\n\n{build_narrative(result)}"
    encoded = md_content.encode("utf-8")

    filename = "work_value_report.md"
    buffer = io.BytesIO(encoded)
    buffer.seek(0)

    logger.info(f"Work value report ready — {len(md_content)} chars, tier={result.tier.value}")

    return StreamingResponse(
        content=buffer,
        media_type="text/markdown",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "Content-Length": str(len(encoded)),
        },
    )


@router.get(
    "/coefficients",
    response_model=CoefficientTablesResponse,
    summary="Canonical coefficient and tier tables",
)
async def coefficient_tables() -> CoefficientTablesResponse:
    return CoefficientTablesResponse(
        levels={tag: float(v) for tag, v in LEVEL_COEFFICIENTS.items()},
        quit_frequency={tag: float(v) for tag, v in QUIT_FREQUENCY_WEIGHTS.items()},
        neutral=float(NEUTRAL),
        tier_thresholds={
            "prayer_below": float(PRAYER_BELOW),
            "getting_by_max": float(GETTING_BY_MAX),
            "dream_max": float(DREAM_MAX),
        },
    )
