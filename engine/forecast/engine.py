"""
Forecast request handling: validates the request, builds the monthly series, dispatches to the selected forecaster and assembles the result with backtest accuracy and confidence bounds.

Each ``ForecastingEngine`` owns a single "last forecast" slot. Overlapping
requests on the same engine overwrite it (last write wins, no locking), so
callers that need the result of their own request use the returned value.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

from config import settings
from engine.enums import ForecastMethod
from engine.exceptions import ForecastContractError
from engine.forecast.accuracy import evaluate_accuracy
from engine.forecast.confidence import apply_intervals, z_score
from engine.forecast.holtwinters import holt_winters
from engine.forecast.linear import linear_regression
from engine.forecast.models import ForecastError, ForecastMetadata, ForecastResult
from engine.forecast.seasonal import seasonal_naive
from engine.kpi import DeductionAggregator, KpiAggregator, RevenueEntry
from engine.series import HistoricalPoint, build_historical

log = logging.getLogger(__name__)

EntrySource = Union[Iterable[RevenueEntry], Callable[[], Iterable[RevenueEntry]]]
Outcome = Union[ForecastResult, ForecastError]

FORECASTERS: Dict[ForecastMethod, Callable[[Sequence[HistoricalPoint], int], object]] = {
    ForecastMethod.linear: linear_regression,
    ForecastMethod.seasonal: seasonal_naive,
    ForecastMethod.holtwinters: holt_winters,
}


def validate_periods(periods: object) -> int:
    if isinstance(periods, bool) or not isinstance(periods, int):
        raise ForecastContractError(f"periods must be an integer, got {periods!r}")
    if periods < 0:
        raise ForecastContractError(f"periods must be >= 0, got {periods}")
    return periods


def insufficient_data(count: int) -> Optional[ForecastError]:
    required = settings.forecast_min_data_points
    if count >= required:
        return None
    return ForecastError(
        message=f"At least {required} months of data are required for a forecast (found {count})."
    )


class ForecastingEngine:
    """Per-session forecasting context.

    Args:
        entries:    ledger entries, or a zero-argument callable returning them
                    (read on every request).
        aggregator: KPI aggregator producing each month's total; defaults to
                    :class:`DeductionAggregator`.
    """

    def __init__(self, entries: EntrySource = (), aggregator: KpiAggregator | None = None) -> None:
        self._entries = entries
        self.aggregator: KpiAggregator = aggregator or DeductionAggregator()
        self._last_forecast: Optional[ForecastResult] = None

    @property
    def last_forecast(self) -> Optional[ForecastResult]:
        return self._last_forecast

    def get_last_forecast(self) -> Optional[ForecastResult]:
        return self._last_forecast

    def set_entries(self, entries: EntrySource) -> None:
        self._entries = entries

    def _load_entries(self) -> List[RevenueEntry]:
        source = self._entries() if callable(self._entries) else self._entries
        return list(source)

    def prepare_historical(
        self,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        exclude_category: bool = False,
    ) -> List[HistoricalPoint]:
        return build_historical(
            self._load_entries(),
            self.aggregator,
            date_from=date_from,
            date_to=date_to,
            exclude_category=exclude_category,
        )

    def forecast_series(
        self,
        historical: Sequence[HistoricalPoint],
        method: Union[str, ForecastMethod] = ForecastMethod.linear,
        periods: Optional[int] = None,
        confidence_level: Optional[float] = None,
    ) -> Outcome:
        selected = ForecastMethod.parse(method)
        if periods is None:
            periods = settings.forecast_default_periods
        periods = validate_periods(periods)
        level = settings.forecast_confidence_level if confidence_level is None else confidence_level
        z_score(level)

        failure = insufficient_data(len(historical))
        if failure is not None:
            log.debug("forecast skipped: %s", failure.message)
            return failure

        forecast = FORECASTERS[selected](historical, periods)
        accuracy = evaluate_accuracy(historical)
        predictions = apply_intervals(forecast.predictions, accuracy.mse, level)

        log.debug(
            "forecast method=%s points=%d periods=%d rmse=%.4f",
            selected.value, len(historical), periods, accuracy.rmse,
        )
        return ForecastResult(
            method=selected,
            historical=list(historical),
            predictions=predictions,
            accuracy=accuracy,
            metadata=ForecastMetadata(
                data_point_count=len(historical),
                requested_periods=periods,
                generated_at=datetime.now(timezone.utc),
            ),
            confidence_level=level,
        )

    def generate_forecast(
        self,
        method: Union[str, ForecastMethod] = ForecastMethod.linear,
        periods: Optional[int] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        exclude_category: bool = False,
        confidence_level: Optional[float] = None,
    ) -> Outcome:
        ForecastMethod.parse(method)
        historical = self.prepare_historical(date_from, date_to, exclude_category)
        outcome = self.forecast_series(historical, method, periods, confidence_level)
        if isinstance(outcome, ForecastResult):
            self._last_forecast = outcome
        return outcome

    def compare_methods(
        self,
        periods: Optional[int] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        exclude_category: bool = False,
        confidence_level: Optional[float] = None,
    ) -> Dict[ForecastMethod, Outcome]:
        """Run every method over the same series; the last-forecast slot is left untouched."""
        historical = self.prepare_historical(date_from, date_to, exclude_category)
        return {
            method: self.forecast_series(historical, method, periods, confidence_level)
            for method in ForecastMethod
        }
