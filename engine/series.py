"""
Historical series builder: groups ledger entries by monthly period, totals each group through the KPI aggregator and returns the points in calendar order.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from engine.kpi import KpiAggregator, RevenueEntry
from engine.periods import format_period, parse_period, period_sort_key, try_parse_period

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoricalPoint:
    period: str
    value: float
    entry_count: int


def _normalize_bound(bound: Optional[str]) -> Optional[tuple[int, int]]:
    if bound is None or bound == "":
        return None
    month, year = parse_period(bound)
    return year, month


def build_historical(
    entries: Iterable[RevenueEntry],
    aggregator: KpiAggregator,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    exclude_category: bool = False,
) -> List[HistoricalPoint]:
    lower = _normalize_bound(date_from)
    upper = _normalize_bound(date_to)

    groups: Dict[str, List[RevenueEntry]] = {}
    skipped = 0
    for entry in entries:
        parsed = try_parse_period(entry.period)
        if parsed is None:
            skipped += 1
            continue
        key = (parsed[1], parsed[0])
        if lower is not None and key < lower:
            continue
        if upper is not None and key > upper:
            continue
        groups.setdefault(format_period(*parsed), []).append(entry)

    if skipped:
        log.warning("build_historical skipped %d entr(y/ies) with malformed period keys", skipped)

    points = [
        HistoricalPoint(
            period=period,
            value=float(aggregator.aggregate(group, exclude_category=exclude_category).total),
            entry_count=len(group),
        )
        for period, group in groups.items()
    ]
    points.sort(key=lambda p: period_sort_key(p.period))
    return points


def values(historical: Iterable[HistoricalPoint]) -> List[float]:
    return [p.value for p in historical]
