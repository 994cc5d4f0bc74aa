"""
Forecast routes: run a revenue forecast over the supplied ledger entries, compare all methods, and export a forecast as a line-oriented text report.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from api.requests import CompareRequest, ForecastRequest
from api.responses import render
from api.routes.common import find_engine, get_engine
from api.routes.exception import handle_exceptions
from config import DEFAULT_SESSION_ID
from engine.forecast.models import ForecastError
from engine.forecast.report import export_report

router = APIRouter(tags=["Forecast"])


def _coerce_query_value(value: Any, cast: Any) -> Any:
    # Allow direct unit-test invocation without FastAPI Query parsing.
    raw = value.default if hasattr(value, "default") else value
    return cast(raw)


@router.post("/forecast", summary="Forecast monthly revenue from ledger entries")
@handle_exceptions
async def run_forecast(req: ForecastRequest) -> Dict[str, Any]:
    engine = get_engine(req.session_id, req.to_entries())
    outcome = engine.generate_forecast(
        method=req.method,
        periods=req.periods,
        date_from=req.date_from,
        date_to=req.date_to,
        exclude_category=req.exclude_category,
        confidence_level=req.confidence_level,
    )
    return render(outcome)


@router.post("/forecast/compare", summary="Forecast with every method over the same history")
@handle_exceptions
async def compare_forecasts(req: CompareRequest) -> Dict[str, Any]:
    engine = get_engine(req.session_id, req.to_entries())
    outcomes = engine.compare_methods(
        periods=req.periods,
        date_from=req.date_from,
        date_to=req.date_to,
        exclude_category=req.exclude_category,
        confidence_level=req.confidence_level,
    )
    return {"results": {method.value: render(outcome) for method, outcome in outcomes.items()}}


@router.post("/forecast/export", summary="Forecast and export the result as a text report")
@handle_exceptions
async def export_forecast(req: ForecastRequest) -> Response:
    engine = get_engine(req.session_id, req.to_entries())
    outcome = engine.generate_forecast(
        method=req.method,
        periods=req.periods,
        date_from=req.date_from,
        date_to=req.date_to,
        exclude_category=req.exclude_category,
        confidence_level=req.confidence_level,
    )
    if isinstance(outcome, ForecastError):
        return JSONResponse(content=render(outcome))
    return PlainTextResponse(content=export_report(outcome))


@router.get("/forecast/last", summary="Most recent forecast of a session")
@handle_exceptions
async def last_forecast(session_id: str = Query(default=DEFAULT_SESSION_ID)) -> Dict[str, Any]:
    session_id = _coerce_query_value(session_id, str)
    engine = find_engine(session_id)
    result = engine.get_last_forecast() if engine else None
    if result is None:
        raise HTTPException(status_code=404, detail=f"No forecast for session {session_id}")
    return render(result)


@router.get("/forecast/last/export", summary="Export the most recent forecast of a session")
@handle_exceptions
async def export_last_forecast(session_id: str = Query(default=DEFAULT_SESSION_ID)) -> Response:
    session_id = _coerce_query_value(session_id, str)
    engine = find_engine(session_id)
    result = engine.get_last_forecast() if engine else None
    if result is None:
        raise HTTPException(status_code=404, detail=f"No forecast for session {session_id}")
    return PlainTextResponse(content=export_report(result))
