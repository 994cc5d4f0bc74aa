"""
Revenue forecasting: linear regression, seasonal naive and Holt-Winters forecasters, holdout accuracy evaluation, confidence intervals, and the per-session engine that ties them together.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.models import (
    AccuracyMetrics,
    ForecastError,
    ForecastMetadata,
    ForecastResult,
    Prediction,
)
from engine.forecast.linear import linear_regression
from engine.forecast.seasonal import seasonal_naive
from engine.forecast.holtwinters import holt_winters
from engine.forecast.accuracy import evaluate_accuracy
from engine.forecast.confidence import apply_intervals, confidence_interval
from engine.forecast.engine import ForecastingEngine
from engine.forecast.report import ForecastSummary, export_report, summarize

__all__ = [
    "AccuracyMetrics",
    "ForecastError",
    "ForecastMetadata",
    "ForecastResult",
    "Prediction",
    "linear_regression",
    "seasonal_naive",
    "holt_winters",
    "evaluate_accuracy",
    "apply_intervals",
    "confidence_interval",
    "ForecastingEngine",
    "ForecastSummary",
    "export_report",
    "summarize",
]
