"""
Test cases for the holdout accuracy evaluator and its error metrics.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import pytest

from config import settings
from engine.forecast.accuracy import error_metrics, evaluate_accuracy, split_holdout
from engine.forecast.models import AccuracyMetrics, LinearForecast, Prediction
from engine.enums import ForecastMethod


def test_split_holdout(make_series):
    train, test = split_holdout(make_series(range(10)))
    assert len(train) == 8
    assert len(test) == 2
    train, test = split_holdout(make_series(range(6)))
    assert (len(train), len(test)) == (4, 2)


def test_error_metrics():
    m = error_metrics([100, 200, 0], [110, 180, 5])
    assert m.mae == pytest.approx((10 + 20 + 5) / 3)
    assert m.mse == pytest.approx((100 + 400 + 25) / 3)
    assert m.rmse == pytest.approx(math.sqrt(m.mse))
    # zero actual excluded from the MAPE average
    assert m.mape == pytest.approx((10.0 + 10.0) / 2)


def test_mape_all_zero_actuals():
    assert error_metrics([0, 0], [1, 2]).mape == 0.0


def test_perfect_linear_history_has_zero_error(make_series):
    m = evaluate_accuracy(make_series([100, 200, 300, 400, 500, 600]))
    assert m.mae == pytest.approx(0.0, abs=1e-9)
    assert m.mse == pytest.approx(0.0, abs=1e-9)
    assert m.mape == pytest.approx(0.0, abs=1e-9)


def test_too_few_points_returns_zeros(make_series):
    assert evaluate_accuracy(make_series([5, 10])) == AccuracyMetrics()


def test_min_points_from_settings(make_series, monkeypatch):
    monkeypatch.setattr(settings, "forecast_accuracy_min_points", 10)
    assert evaluate_accuracy(make_series(range(1, 8))) == AccuracyMetrics()


def test_backtest_uses_supplied_forecaster(make_series):
    seen = {}

    def constant(train, horizon):
        seen["train"] = len(train)
        seen["horizon"] = horizon
        return LinearForecast(
            predictions=[Prediction.point("01/2030", 0.0, ForecastMethod.linear)] * horizon,
            slope=0.0,
            intercept=0.0,
        )

    m = evaluate_accuracy(make_series([10] * 10), forecaster=constant)
    assert seen == {"train": 8, "horizon": 2}
    assert m.mae == pytest.approx(10.0)
    assert m.mape == pytest.approx(100.0)


def test_metrics_non_negative(make_series):
    m = evaluate_accuracy(make_series([5, 50, 3, 80, 1, 0, 90, 2]))
    assert min(m.mae, m.mse, m.rmse, m.mape) >= 0
