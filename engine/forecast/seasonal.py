"""
Seasonal naive forecaster: repeats the value observed one seasonal cycle earlier.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import List, Sequence

from config import settings
from engine.enums import ForecastMethod
from engine.forecast.models import Prediction, SeasonalForecast
from engine.guards import non_negative
from engine.periods import next_periods
from engine.series import HistoricalPoint


def cycle_index(n: int, step: int, season_length: int) -> int:
    """History index reused for forecast ``step`` (0-based).

    With at least one full season of history this is exactly one cycle back.
    Shorter histories wrap modulo ``n`` using truncated division and clamp
    negative positions to 0, so they mostly repeat the first observation
    rather than the same calendar month a year earlier.
    """
    raw = n - season_length + (step % season_length)
    return max(0, int(math.fmod(raw, n)))


def seasonal_naive(
    historical: Sequence[HistoricalPoint],
    periods: int,
    season_length: int | None = None,
) -> SeasonalForecast:
    if season_length is None:
        season_length = settings.forecast_season_length
    n = len(historical)

    predictions: List[Prediction] = []
    if n:
        for i, period in enumerate(next_periods(historical[-1].period, periods)):
            value = historical[cycle_index(n, i, season_length)].value
            predictions.append(Prediction.point(period, non_negative(value), ForecastMethod.seasonal))

    return SeasonalForecast(predictions=predictions, season_length=season_length)
