"""
Named guards for the numeric edge cases of the forecasting engine. Each guard documents the fallback it returns so the policy can be audited and tested on its own.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

NEUTRAL_MULTIPLIER = 1.0


def is_usable(value: float) -> bool:
    return isinstance(value, (int, float, np.floating, np.integer)) and math.isfinite(float(value))


def safe_divide(numerator: float, denominator: float, fallback: float) -> float:
    """``numerator / denominator``, or ``fallback`` when the denominator is zero or the result is not finite."""
    if denominator == 0:
        return fallback
    result = numerator / denominator
    return float(result) if is_usable(result) else fallback


def seasonal_multiplier(value: float, base: float) -> float:
    """Ratio used as a seasonal multiplier.

    Falls back to :data:`NEUTRAL_MULTIPLIER` when ``base`` is zero, or when the
    ratio is zero or not finite; a zero multiplier would later be used as a
    divisor by the smoothing loop.
    """
    ratio = safe_divide(value, base, NEUTRAL_MULTIPLIER)
    return ratio if ratio != 0 else NEUTRAL_MULTIPLIER


def nonzero_divisor(value: float) -> float:
    """``value`` when it can safely divide, otherwise :data:`NEUTRAL_MULTIPLIER`."""
    return float(value) if is_usable(value) and value != 0 else NEUTRAL_MULTIPLIER


def mean_or_zero(values: Sequence[float]) -> float:
    """Arithmetic mean; ``0.0`` for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def percentage_error(actual: float, predicted: float) -> Optional[float]:
    """Absolute percentage error, or ``None`` when ``actual`` is zero.

    ``None`` terms are excluded from MAPE averages instead of dividing by zero.
    """
    if actual == 0:
        return None
    return abs(actual - predicted) / abs(actual) * 100.0


def non_negative(value: float) -> float:
    return max(0.0, float(value))
