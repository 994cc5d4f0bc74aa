"""
Holt-Winters (multiplicative triple exponential smoothing) forecaster. Level, trend and one multiplier per seasonal slot are updated recursively over the history, then projected forward. Histories shorter than two full seasons fall back to linear regression and keep the ``linear`` tag.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Union

from config import settings
from engine.enums import ForecastMethod
from engine.forecast.linear import linear_regression
from engine.forecast.models import HoltWintersForecast, LinearForecast, Prediction
from engine.guards import NEUTRAL_MULTIPLIER, non_negative, nonzero_divisor, safe_divide, seasonal_multiplier
from engine.periods import next_periods
from engine.series import HistoricalPoint, values

log = logging.getLogger(__name__)


def _initial_seasonal(vals: Sequence[float], level: float, trend: float, season_length: int) -> List[float]:
    return [seasonal_multiplier(vals[i], level + trend * i) for i in range(season_length)]


def holt_winters(
    historical: Sequence[HistoricalPoint],
    periods: int,
    alpha: float | None = None,
    beta: float | None = None,
    gamma: float | None = None,
    season_length: int | None = None,
) -> Union[HoltWintersForecast, LinearForecast]:
    alpha = settings.forecast_alpha if alpha is None else alpha
    beta = settings.forecast_beta if beta is None else beta
    gamma = settings.forecast_gamma if gamma is None else gamma
    season_length = settings.forecast_season_length if season_length is None else season_length

    n = len(historical)
    if n < season_length * 2:
        log.info(
            "holt_winters needs %d points, got %d; falling back to linear regression",
            season_length * 2, n,
        )
        return linear_regression(historical, periods)

    vals = values(historical)
    level = vals[0]
    trend = (vals[season_length] - vals[0]) / season_length
    seasonal = _initial_seasonal(vals, level, trend, season_length)

    fitted: List[float] = []
    for i, value in enumerate(vals):
        s = i % season_length
        fitted.append((level + trend) * seasonal[s])

        old_level = level
        level = alpha * (value / nonzero_divisor(seasonal[s])) + (1 - alpha) * (level + trend)
        trend = beta * (level - old_level) + (1 - beta) * trend
        seasonal[s] = gamma * safe_divide(value, level, NEUTRAL_MULTIPLIER) + (1 - gamma) * seasonal[s]

    predictions: List[Prediction] = []
    for h, period in enumerate(next_periods(historical[-1].period, periods), start=1):
        predicted = (level + trend * h) * seasonal[(n + h - 1) % season_length]
        predictions.append(Prediction.point(period, non_negative(predicted), ForecastMethod.holtwinters))

    return HoltWintersForecast(
        predictions=predictions,
        level=level,
        trend=trend,
        seasonal=tuple(seasonal),
        fitted=tuple(fitted),
    )
