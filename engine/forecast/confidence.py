"""
Symmetric confidence intervals around point predictions, sized from the backtest MSE.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import dataclasses
import math
from typing import Iterable, List, Tuple

from config import Z_SCORES, settings
from engine.exceptions import UnsupportedConfidenceLevel
from engine.forecast.models import Prediction
from engine.guards import non_negative


def z_score(level: float | None = None) -> float:
    if level is None:
        level = settings.forecast_confidence_level
    try:
        return Z_SCORES[level]
    except (KeyError, TypeError):
        raise UnsupportedConfidenceLevel(level, tuple(Z_SCORES)) from None


def confidence_interval(value: float, mse: float, level: float | None = None) -> Tuple[float, float]:
    margin = z_score(level) * math.sqrt(max(0.0, mse))
    return non_negative(value - margin), value + margin


def apply_intervals(
    predictions: Iterable[Prediction],
    mse: float,
    level: float | None = None,
) -> List[Prediction]:
    bounded: List[Prediction] = []
    for pred in predictions:
        lower, upper = confidence_interval(pred.value, mse, level)
        bounded.append(dataclasses.replace(pred, lower=lower, upper=upper))
    return bounded
