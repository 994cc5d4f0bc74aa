"""
Test cases for the seasonal naive forecaster, including its index selection for histories shorter than one season.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.enums import ForecastMethod
from engine.forecast.seasonal import cycle_index, seasonal_naive


def test_full_year_repeats_one_cycle_back(make_series):
    vals = list(range(1, 25))
    res = seasonal_naive(make_series(vals), 14)
    # step i reuses history[n - 12 + i % 12]
    assert [p.value for p in res.predictions] == [float(v) for v in vals[12:]] + [13.0, 14.0]
    assert all(p.method is ForecastMethod.seasonal for p in res.predictions)


def test_non_multiple_of_season(make_series):
    vals = list(range(1, 16))
    res = seasonal_naive(make_series(vals), 3)
    assert [p.value for p in res.predictions] == [4.0, 5.0, 6.0]


def test_short_history_index_selection():
    # negative positions clamp to the first observation, then wrap over n
    assert [cycle_index(6, i, 12) for i in range(8)] == [0, 0, 0, 0, 0, 0, 0, 1]


def test_short_history_forecast(make_series):
    res = seasonal_naive(make_series([10, 20, 30, 40, 50, 60]), 8)
    assert [p.value for p in res.predictions] == [10.0] * 7 + [20.0]


def test_negative_values_clamped(make_series):
    res = seasonal_naive(make_series([-5] * 12), 2)
    assert [p.value for p in res.predictions] == [0.0, 0.0]


def test_custom_season_length(make_series):
    res = seasonal_naive(make_series([1, 2, 3, 4, 5, 6]), 4, season_length=3)
    assert [p.value for p in res.predictions] == pytest.approx([4.0, 5.0, 6.0, 4.0])
    assert res.season_length == 3
