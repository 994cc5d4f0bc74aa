"""
Data model shared by the forecasters, the accuracy evaluator and the request handler.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Tuple

from engine.enums import ForecastMethod
from engine.series import HistoricalPoint


@dataclass(frozen=True)
class Prediction:
    period: str
    value: float
    method: ForecastMethod
    lower: float = 0.0
    upper: float = 0.0

    @classmethod
    def point(cls, period: str, value: float, method: ForecastMethod) -> Prediction:
        # unbounded until the confidence interval calculator widens it
        return cls(period=period, value=value, method=method, lower=value, upper=value)


@dataclass(frozen=True)
class AccuracyMetrics:
    mae: float = 0.0
    mse: float = 0.0
    rmse: float = 0.0
    mape: float = 0.0


@dataclass(frozen=True)
class LinearForecast:
    predictions: List[Prediction]
    slope: float
    intercept: float


@dataclass(frozen=True)
class SeasonalForecast:
    predictions: List[Prediction]
    season_length: int


@dataclass(frozen=True)
class HoltWintersForecast:
    predictions: List[Prediction]
    level: float
    trend: float
    seasonal: Tuple[float, ...]
    fitted: Tuple[float, ...]


@dataclass(frozen=True)
class ForecastMetadata:
    data_point_count: int
    requested_periods: int
    generated_at: datetime


@dataclass(frozen=True)
class ForecastResult:
    method: ForecastMethod
    historical: List[HistoricalPoint]
    predictions: List[Prediction]
    accuracy: AccuracyMetrics
    metadata: ForecastMetadata
    confidence_level: float = 0.95

    @property
    def method_name(self) -> str:
        return self.method.display_name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method.value,
            "method_name": self.method_name,
            "confidence_level": self.confidence_level,
            "historical": [
                {"period": p.period, "value": p.value, "entry_count": p.entry_count}
                for p in self.historical
            ],
            "predictions": [
                {
                    "period": p.period,
                    "value": p.value,
                    "lower": p.lower,
                    "upper": p.upper,
                    "method": p.method.value,
                }
                for p in self.predictions
            ],
            "accuracy": {
                "mae": self.accuracy.mae,
                "mse": self.accuracy.mse,
                "rmse": self.accuracy.rmse,
                "mape": self.accuracy.mape,
            },
            "metadata": {
                "data_point_count": self.metadata.data_point_count,
                "requested_periods": self.metadata.requested_periods,
                "generated_at": self.metadata.generated_at.isoformat(),
            },
        }


@dataclass(frozen=True)
class ForecastError:
    message: str
    error: bool = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error, "message": self.message}
