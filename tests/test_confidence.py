"""
Test cases for confidence interval sizing and the supported confidence levels.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from config import settings
from engine.enums import ForecastMethod
from engine.exceptions import UnsupportedConfidenceLevel
from engine.forecast.confidence import apply_intervals, confidence_interval, z_score
from engine.forecast.models import Prediction


def test_z_scores():
    assert z_score(0.95) == 1.96
    assert z_score(0.99) == 2.576


def test_unsupported_level_raises():
    with pytest.raises(UnsupportedConfidenceLevel):
        z_score(0.9)
    with pytest.raises(ValueError):
        confidence_interval(100.0, 4.0, level=0.5)


def test_default_level_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "forecast_confidence_level", 0.99)
    assert z_score() == 2.576


def test_symmetric_interval():
    lower, upper = confidence_interval(100.0, 25.0, 0.95)
    assert lower == pytest.approx(100 - 1.96 * 5)
    assert upper == pytest.approx(100 + 1.96 * 5)


def test_lower_bound_clamped_upper_not():
    lower, upper = confidence_interval(5.0, 100.0, 0.99)
    assert lower == 0.0
    assert upper == pytest.approx(5 + 2.576 * 10)


def test_apply_intervals_keeps_order_and_method():
    preds = [Prediction.point(f"0{i}/2024", 10.0 * i, ForecastMethod.seasonal) for i in range(1, 4)]
    bounded = apply_intervals(preds, 4.0, 0.95)
    assert [p.period for p in bounded] == [p.period for p in preds]
    for p in bounded:
        assert 0 <= p.lower <= p.value <= p.upper
        assert p.method is ForecastMethod.seasonal


def test_zero_mse_collapses_interval():
    lower, upper = confidence_interval(50.0, 0.0)
    assert lower == upper == 50.0
