"""
Linear regression forecaster: ordinary least squares on the period index, projected forward and clamped to non-negative revenue.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from engine.enums import ForecastMethod
from engine.forecast.models import LinearForecast, Prediction
from engine.guards import mean_or_zero, non_negative
from engine.periods import next_periods
from engine.series import HistoricalPoint, values


def _least_squares(vals: Sequence[float]) -> tuple[float, float]:
    n = len(vals)
    x = np.arange(n, dtype=float)
    y = np.asarray(vals, dtype=float)

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_x2 = float(np.sum(x * x))

    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        # n <= 1: flat projection at the mean
        return 0.0, mean_or_zero(vals)

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept


def linear_regression(historical: Sequence[HistoricalPoint], periods: int) -> LinearForecast:
    vals = values(historical)
    n = len(vals)
    slope, intercept = _least_squares(vals)

    predictions: List[Prediction] = []
    if historical:
        for i, period in enumerate(next_periods(historical[-1].period, periods)):
            predicted = slope * (n + i) + intercept
            predictions.append(Prediction.point(period, non_negative(predicted), ForecastMethod.linear))

    return LinearForecast(predictions=predictions, slope=slope, intercept=intercept)
