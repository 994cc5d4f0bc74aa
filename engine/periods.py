"""
Calendar period arithmetic over ``MM/YYYY`` keys, used to order monthly aggregates and to generate the sequence of future periods a forecast covers.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from config import PERIOD_MAX_YEAR, PERIOD_MIN_YEAR
from engine.exceptions import InvalidPeriod

Period = Tuple[int, int]

# M/YYYY or MM/YYYY, ASCII digits only
_PERIOD_RE = re.compile(r"([0-9]{1,2})/([0-9]{4})")


def try_parse_period(key: object) -> Optional[Period]:
    if not isinstance(key, str):
        return None
    match = _PERIOD_RE.fullmatch(key.strip())
    if match is None:
        return None
    month, year = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        return None
    if not PERIOD_MIN_YEAR <= year <= PERIOD_MAX_YEAR:
        return None
    return month, year


def parse_period(key: object) -> Period:
    parsed = try_parse_period(key)
    if parsed is None:
        raise InvalidPeriod(key)
    return parsed


def is_valid_period(key: object) -> bool:
    return try_parse_period(key) is not None


def format_period(month: int, year: int) -> str:
    return f"{month:02d}/{year}"


def period_sort_key(key: str) -> Tuple[int, int]:
    month, year = parse_period(key)
    return year, month


def compare_periods(a: str, b: str) -> int:
    ka, kb = period_sort_key(a), period_sort_key(b)
    return (ka > kb) - (ka < kb)


def _advance(month: int, year: int) -> Period:
    month += 1
    if month > 12:
        return 1, year + 1
    return month, year


def increment_period(key: str) -> str:
    return format_period(*_advance(*parse_period(key)))


def next_periods(last: str, count: int) -> List[str]:
    """Return the ``count`` period keys immediately following ``last``."""
    out: List[str] = []
    current = parse_period(last)
    for _ in range(count):
        current = _advance(*current)
        out.append(format_period(*current))
    return out


def period_range(start: str, end: str) -> List[str]:
    """Inclusive list of period keys from ``start`` to ``end`` (empty when start > end)."""
    if compare_periods(start, end) > 0:
        return []
    out = [format_period(*parse_period(start))]
    while compare_periods(out[-1], end) < 0:
        out.append(increment_period(out[-1]))
    return out
