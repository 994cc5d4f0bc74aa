"""
Constants and configuration for Ledgercast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict, Tuple

from pydantic_settings import BaseSettings


LEDGERCAST_HOST = os.getenv("LEDGERCAST_HOST", "0.0.0.0")
LEDGERCAST_PORT = int(os.getenv("LEDGERCAST_PORT", "4323"))
LEDGERCAST_LOG_LEVEL = os.getenv("LEDGERCAST_LOG_LEVEL", "info").lower()

# insurer whose entries carry the itemised deduction kinds
LEDGERCAST_DEDUCTIBLE_INSURER = os.getenv("LEDGERCAST_DEDUCTIBLE_INSURER", "EOPYY")

DEFAULT_SESSION_ID = "default"

METHOD_LINEAR = "linear"
METHOD_SEASONAL = "seasonal"
METHOD_HOLTWINTERS = "holtwinters"

# critical values for the supported two-sided confidence levels
Z_SCORES: Dict[float, float] = {
    0.95: 1.96,
    0.99: 2.576,
}

# deduction kinds applied to entries of the deductible insurer
DEDUCTION_KINDS: Tuple[str, ...] = (
    "withholding",
    "mde",
    "rebate",
    "retentions",
    "clawback",
)

PERIOD_MIN_YEAR = 2000
PERIOD_MAX_YEAR = 2100


class Settings(BaseSettings):
    host: str = LEDGERCAST_HOST
    port: int = LEDGERCAST_PORT
    log_level: str = LEDGERCAST_LOG_LEVEL

    # forecast request defaults
    forecast_min_data_points: int = 6
    forecast_default_periods: int = 6
    forecast_confidence_level: float = 0.95

    # seasonal length shared by seasonal naive and holt-winters
    forecast_season_length: int = 12

    # holt-winters smoothing (level, trend, seasonal)
    forecast_alpha: float = 0.3
    forecast_beta: float = 0.1
    forecast_gamma: float = 0.3

    # holdout backtest
    forecast_holdout_ratio: float = 0.8
    forecast_accuracy_min_points: int = 3

    # summary wording: relative change (percent) treated as stable
    forecast_summary_stable_band: float = 5.0

    # kpi aggregation
    kpi_deductible_insurer: str = LEDGERCAST_DEDUCTIBLE_INSURER
    kpi_excluded_deduction: str = "withholding"

    # report export
    report_title: str = "REVENUE FORECAST"

    # http sessions kept in memory before the oldest is evicted
    api_max_sessions: int = 1_000

    model_config = {
        "env_prefix": "LEDGERCAST_",
        "extra": "ignore",
    }


settings = Settings()
