"""
Text renderings of a forecast result: the line-oriented export consumed by file downloads, and a short human-readable summary.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from config import settings
from engine.enums import Trend
from engine.forecast.models import ForecastResult
from engine.guards import mean_or_zero, safe_divide

HISTORICAL_HEADER = "HISTORICAL DATA"
PREDICTIONS_HEADER = "PREDICTIONS"
ACCURACY_HEADER = "ACCURACY METRICS"


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def export_report(result: ForecastResult, title: Optional[str] = None) -> str:
    lines: List[str] = [
        f"# {title or settings.report_title}",
        f"# Method: {result.method_name}",
        f"# Historical data points: {len(result.historical)}",
        f"# Forecast horizon: {len(result.predictions)}",
        "",
        HISTORICAL_HEADER,
    ]
    lines.extend(f"{h.period},{_fmt(h.value)}" for h in result.historical)
    lines.append("")

    lines.append(PREDICTIONS_HEADER)
    lines.extend(
        f"{p.period},{_fmt(p.value)},{_fmt(p.lower)},{_fmt(p.upper)}" for p in result.predictions
    )
    lines.append("")

    acc = result.accuracy
    lines.extend([
        ACCURACY_HEADER,
        f"MAE,{_fmt(acc.mae)}",
        f"MSE,{_fmt(acc.mse)}",
        f"RMSE,{_fmt(acc.rmse)}",
        f"MAPE,{_fmt(acc.mape)}%",
    ])
    return "\n".join(lines)


@dataclass(frozen=True)
class ForecastSummary:
    method_name: str
    trend: Optional[Trend]
    change_pct: float
    average_prediction: float
    average_interval_width: float
    horizon: int
    confidence_level: float

    @property
    def text(self) -> str:
        parts = [f"Method: {self.method_name}", ""]
        if self.trend is None:
            parts.append("No forecast periods requested.")
            return "\n".join(parts)

        if self.trend is Trend.increase:
            parts.append(f"Revenue is expected to increase by {self.change_pct:.1f}% next month.")
        elif self.trend is Trend.decrease:
            parts.append(f"Revenue is expected to decrease by {abs(self.change_pct):.1f}% next month.")
        else:
            parts.append(f"Revenue is expected to stay stable ({abs(self.change_pct):.1f}% variation).")
        parts.append("")
        parts.append(
            f"Average forecast over the next {self.horizon} months: {self.average_prediction:.2f}"
        )
        parts.append("")
        parts.append(
            f"Confidence interval: ±{self.average_interval_width:.2f} "
            f"({self.confidence_level * 100:.0f}%)"
        )
        return "\n".join(parts)


def summarize(result: ForecastResult) -> ForecastSummary:
    preds = result.predictions
    if not preds or not result.historical:
        return ForecastSummary(
            method_name=result.method_name,
            trend=None,
            change_pct=0.0,
            average_prediction=0.0,
            average_interval_width=0.0,
            horizon=len(preds),
            confidence_level=result.confidence_level,
        )

    last_actual = result.historical[-1].value
    # a zero last actual has no meaningful relative change
    change = safe_divide(preds[0].value - last_actual, last_actual, 0.0) * 100.0
    band = settings.forecast_summary_stable_band
    if change > band:
        trend = Trend.increase
    elif change < -band:
        trend = Trend.decrease
    else:
        trend = Trend.stable

    return ForecastSummary(
        method_name=result.method_name,
        trend=trend,
        change_pct=change,
        average_prediction=mean_or_zero([p.value for p in preds]),
        average_interval_width=mean_or_zero([p.upper - p.lower for p in preds]),
        horizon=len(preds),
        confidence_level=result.confidence_level,
    )
