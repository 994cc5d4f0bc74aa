"""
Holdout accuracy evaluation. The history is split into a training prefix and a test suffix; the training slice is forecast over the test horizon and compared with the actuals.

The backtest always uses linear regression, whichever method produced the
real forecast, so the reported metrics describe the linear model's error.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Any, Callable, List, Sequence

import numpy as np

from config import settings
from engine.forecast.linear import linear_regression
from engine.forecast.models import AccuracyMetrics
from engine.guards import mean_or_zero, percentage_error
from engine.series import HistoricalPoint, values

Forecaster = Callable[[Sequence[HistoricalPoint], int], Any]


def split_holdout(
    historical: Sequence[HistoricalPoint],
    ratio: float | None = None,
) -> tuple[List[HistoricalPoint], List[HistoricalPoint]]:
    if ratio is None:
        ratio = settings.forecast_holdout_ratio
    split = int(math.floor(len(historical) * ratio))
    return list(historical[:split]), list(historical[split:])


def error_metrics(actual: Sequence[float], predicted: Sequence[float]) -> AccuracyMetrics:
    a = np.asarray(actual, dtype=float)
    p = np.asarray(predicted, dtype=float)
    if a.size == 0:
        return AccuracyMetrics()
    err = a - p
    mae = float(np.mean(np.abs(err)))
    mse = float(np.mean(err ** 2))
    terms = [pe for pe in (percentage_error(x, y) for x, y in zip(a, p)) if pe is not None]
    return AccuracyMetrics(mae=mae, mse=mse, rmse=math.sqrt(mse), mape=mean_or_zero(terms))


def evaluate_accuracy(
    historical: Sequence[HistoricalPoint],
    forecaster: Forecaster = linear_regression,
) -> AccuracyMetrics:
    if len(historical) < settings.forecast_accuracy_min_points:
        return AccuracyMetrics()

    train, test = split_holdout(historical)
    predictions = forecaster(train, len(test)).predictions
    # a forecaster that returns fewer points than requested scores 0 for the rest
    predicted = [predictions[i].value if i < len(predictions) else 0.0 for i in range(len(test))]
    return error_metrics(values(test), predicted)
