"""
Enumerations for forecast methods and trend directions.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from config import METHOD_HOLTWINTERS, METHOD_LINEAR, METHOD_SEASONAL
from engine.exceptions import UnknownForecastMethod

_DISPLAY_NAMES = {
    METHOD_LINEAR: "Linear Regression",
    METHOD_SEASONAL: "Seasonal Naive",
    METHOD_HOLTWINTERS: "Holt-Winters",
}


class ForecastMethod(str, Enum):
    linear = METHOD_LINEAR
    seasonal = METHOD_SEASONAL
    holtwinters = METHOD_HOLTWINTERS

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self.value]

    @classmethod
    def parse(cls, value: str | ForecastMethod) -> ForecastMethod:
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in cls._value2member_map_:
            return cls(value)
        raise UnknownForecastMethod(value)


class Trend(str, Enum):
    increase = "increase"
    decrease = "decrease"
    stable = "stable"
