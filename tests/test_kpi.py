"""
Test cases for the default deduction aggregator used to total each month's ledger entries.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from config import settings
from engine.kpi import DeductionAggregator, RevenueEntry


def _entries():
    return [
        RevenueEntry(
            period="01/2024",
            amount=1000.0,
            insurer="EOPYY",
            deductions={"withholding": 50, "mde": 20, "rebate": 10, "retentions": 15, "clawback": 5},
        ),
        RevenueEntry(period="01/2024", amount=500.0, insurer="Private Fund", retentions=25.0),
        RevenueEntry(period="01/2024", amount=200.0, insurer="eopyy north"),
    ]


def test_aggregate_nets_all_deductions():
    summary = DeductionAggregator().aggregate(_entries())
    assert summary.gross == pytest.approx(1700.0)
    assert summary.deductible_total == pytest.approx(1000 - 100 + 200)
    assert summary.other_total == pytest.approx(475.0)
    assert summary.total == pytest.approx(1575.0)
    assert summary.deductions == pytest.approx(125.0)
    assert summary.entry_count == 3


def test_exclude_category_skips_withholding():
    summary = DeductionAggregator().aggregate(_entries(), exclude_category=True)
    assert summary.total == pytest.approx(1625.0)
    assert summary.exclude_category is True


def test_general_retentions_unaffected_by_flag():
    agg = DeductionAggregator()
    entry = RevenueEntry(period="02/2024", amount=300.0, insurer="other", retentions=30.0)
    assert agg.aggregate([entry]).total == agg.aggregate([entry], exclude_category=True).total == pytest.approx(270.0)


def test_insurer_is_configurable(monkeypatch):
    monkeypatch.setattr(settings, "kpi_deductible_insurer", "acme")
    agg = DeductionAggregator()
    entry = RevenueEntry(period="02/2024", amount=100.0, insurer="ACME Health", deductions={"mde": 10})
    assert agg.is_deductible(entry)
    assert agg.aggregate([entry]).total == pytest.approx(90.0)


def test_empty_group_totals_zero():
    summary = DeductionAggregator().aggregate([])
    assert summary.total == 0.0
    assert summary.entry_count == 0
