"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from engine.forecast.models import ForecastError, ForecastResult
from engine.forecast.report import summarize


class HistoricalPointModel(BaseModel):

    period: str
    value: float
    entry_count: int


class PredictionModel(BaseModel):

    period: str
    value: float = Field(ge=0.0)
    lower: float = Field(ge=0.0)
    upper: float
    method: str


class AccuracyModel(BaseModel):

    mae: float
    mse: float
    rmse: float
    mape: float


class MetadataModel(BaseModel):

    data_point_count: int
    requested_periods: int
    generated_at: datetime


class ForecastResponse(BaseModel):

    error: bool = False
    method: str
    method_name: str
    confidence_level: float
    historical: List[HistoricalPointModel]
    predictions: List[PredictionModel]
    accuracy: AccuracyModel
    metadata: MetadataModel
    summary: Optional[str] = None

    @classmethod
    def from_result(cls, result: ForecastResult) -> ForecastResponse:
        return cls(
            method=result.method.value,
            method_name=result.method_name,
            confidence_level=result.confidence_level,
            historical=[
                HistoricalPointModel(period=h.period, value=h.value, entry_count=h.entry_count)
                for h in result.historical
            ],
            predictions=[
                PredictionModel(
                    period=p.period, value=p.value, lower=p.lower, upper=p.upper, method=p.method.value
                )
                for p in result.predictions
            ],
            accuracy=AccuracyModel(
                mae=result.accuracy.mae,
                mse=result.accuracy.mse,
                rmse=result.accuracy.rmse,
                mape=result.accuracy.mape,
            ),
            metadata=MetadataModel(
                data_point_count=result.metadata.data_point_count,
                requested_periods=result.metadata.requested_periods,
                generated_at=result.metadata.generated_at,
            ),
            summary=summarize(result).text,
        )


class ForecastErrorResponse(BaseModel):

    error: bool = True
    message: str

    @classmethod
    def from_error(cls, err: ForecastError) -> ForecastErrorResponse:
        return cls(message=err.message)


def render(outcome: ForecastResult | ForecastError) -> dict[str, Any]:
    if isinstance(outcome, ForecastError):
        return ForecastErrorResponse.from_error(outcome).model_dump()
    return ForecastResponse.from_result(outcome).model_dump(mode="json")
