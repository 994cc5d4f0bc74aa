"""
Test cases for building the monthly historical series from raw ledger entries.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging

import pytest

from engine.kpi import KpiSummary, RevenueEntry
from engine.series import build_historical, values


class RecordingAggregator:
    def __init__(self):
        self.calls = []

    def aggregate(self, entries, exclude_category=False):
        entries = list(entries)
        self.calls.append((len(entries), exclude_category))
        return KpiSummary(total=sum(e.amount for e in entries))


def _entries():
    return [
        RevenueEntry(period="02/2024", amount=20.0),
        RevenueEntry(period="12/2023", amount=5.0),
        RevenueEntry(period="01/2024", amount=7.0),
        RevenueEntry(period="02/2024", amount=30.0),
        RevenueEntry(period="1/2024", amount=3.0),
    ]


def test_groups_and_sorts_by_calendar_order():
    agg = RecordingAggregator()
    points = build_historical(_entries(), agg)
    assert [p.period for p in points] == ["12/2023", "01/2024", "02/2024"]
    assert [p.value for p in points] == [5.0, 10.0, 50.0]
    assert [p.entry_count for p in points] == [1, 2, 2]
    # one aggregator call per period
    assert len(agg.calls) == 3


def test_exclude_category_is_forwarded():
    agg = RecordingAggregator()
    build_historical(_entries(), agg, exclude_category=True)
    assert all(flag is True for _, flag in agg.calls)


def test_inclusive_date_bounds():
    points = build_historical(_entries(), RecordingAggregator(), date_from="01/2024", date_to="01/2024")
    assert [p.period for p in points] == ["01/2024"]
    points = build_historical(_entries(), RecordingAggregator(), date_from="01/2024")
    assert [p.period for p in points] == ["01/2024", "02/2024"]
    points = build_historical(_entries(), RecordingAggregator(), date_to="12/2023")
    assert [p.period for p in points] == ["12/2023"]


def test_invalid_bound_raises():
    with pytest.raises(ValueError):
        build_historical(_entries(), RecordingAggregator(), date_from="2024-01")


def test_malformed_entries_are_skipped(caplog):
    entries = _entries() + [RevenueEntry(period="bad", amount=999.0)]
    with caplog.at_level(logging.WARNING, logger="engine.series"):
        points = build_historical(entries, RecordingAggregator())
    assert sum(p.value for p in points) == pytest.approx(65.0)
    assert "malformed" in caplog.text


def test_empty_input():
    assert build_historical([], RecordingAggregator()) == []


def test_non_digit_period_keys_are_not_counted(caplog):
    entries = _entries() + [
        RevenueEntry(period="0_1/2_024", amount=100.0),
        RevenueEntry(period="+1/2024", amount=100.0),
    ]
    with caplog.at_level(logging.WARNING, logger="engine.series"):
        points = build_historical(entries, RecordingAggregator())
    by_period = {p.period: p.value for p in points}
    assert by_period["01/2024"] == pytest.approx(10.0)
    assert "skipped 2" in caplog.text


def test_values_in_calendar_order():
    points = build_historical(_entries(), RecordingAggregator())
    assert values(points) == [5.0, 10.0, 50.0]
    assert values([]) == []
