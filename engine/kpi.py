"""
KPI aggregation boundary for ledger entries. The forecasting engine only depends on the ``KpiAggregator`` protocol; ``DeductionAggregator`` is the default implementation that nets each entry's deductions out of its gross amount.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Protocol

from config import DEDUCTION_KINDS, settings


@dataclass(frozen=True)
class RevenueEntry:
    period: str
    amount: float
    insurer: str = ""
    source: str = ""
    # itemised deductions, only honoured for the deductible insurer
    deductions: Mapping[str, float] = field(default_factory=dict)
    # general retentions applied to every other insurer
    retentions: float = 0.0


@dataclass(frozen=True)
class KpiSummary:
    total: float
    gross: float = 0.0
    deductions: float = 0.0
    deductible_total: float = 0.0
    other_total: float = 0.0
    entry_count: int = 0
    exclude_category: bool = False


class KpiAggregator(Protocol):
    def aggregate(self, entries: Iterable[RevenueEntry], exclude_category: bool = False) -> KpiSummary: ...


def _amount(value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0


class DeductionAggregator:
    """Nets deductions out of gross entry amounts.

    Entries of the deductible insurer subtract every kind listed in
    ``DEDUCTION_KINDS``; with ``exclude_category`` the configured excluded kind
    (withholding by default) is left out of the subtraction. All other entries
    subtract only their general retentions.
    """

    def __init__(self, insurer: str | None = None, excluded_kind: str | None = None) -> None:
        self.insurer = (insurer if insurer is not None else settings.kpi_deductible_insurer).upper()
        self.excluded_kind = excluded_kind if excluded_kind is not None else settings.kpi_excluded_deduction

    def is_deductible(self, entry: RevenueEntry) -> bool:
        return bool(self.insurer) and self.insurer in (entry.insurer or "").upper()

    def entry_deductions(self, entry: RevenueEntry, exclude_category: bool = False) -> Dict[str, float]:
        if not self.is_deductible(entry):
            return {"retentions": _amount(entry.retentions)}
        out: Dict[str, float] = {}
        for kind in DEDUCTION_KINDS:
            if exclude_category and kind == self.excluded_kind:
                continue
            out[kind] = _amount(entry.deductions.get(kind, 0.0))
        return out

    def aggregate(self, entries: Iterable[RevenueEntry], exclude_category: bool = False) -> KpiSummary:
        gross = 0.0
        deducted = 0.0
        deductible_total = 0.0
        other_total = 0.0
        count = 0
        for entry in entries:
            count += 1
            amount = _amount(entry.amount)
            entry_deductions = sum(self.entry_deductions(entry, exclude_category).values())
            net = amount - entry_deductions
            gross += amount
            deducted += entry_deductions
            if self.is_deductible(entry):
                deductible_total += net
            else:
                other_total += net
        return KpiSummary(
            total=deductible_total + other_total,
            gross=gross,
            deductions=deducted,
            deductible_total=deductible_total,
            other_total=other_total,
            entry_count=count,
            exclude_category=exclude_category,
        )
