from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from config import DEFAULT_SESSION_ID, settings
from engine.kpi import RevenueEntry


class EntryModel(BaseModel):
    period: str
    amount: float
    insurer: str = ""
    source: str = ""
    deductions: Dict[str, float] = Field(default_factory=dict)
    retentions: float = 0.0

    def to_entry(self) -> RevenueEntry:
        return RevenueEntry(
            period=self.period,
            amount=self.amount,
            insurer=self.insurer,
            source=self.source,
            deductions=dict(self.deductions),
            retentions=self.retentions,
        )


class ForecastRequest(BaseModel):
    session_id: str = DEFAULT_SESSION_ID
    entries: List[EntryModel] = Field(default_factory=list)
    method: str = "linear"
    periods: int = Field(default_factory=lambda: settings.forecast_default_periods, ge=0)
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    exclude_category: bool = False
    confidence_level: Optional[float] = None

    def to_entries(self) -> List[RevenueEntry]:
        return [e.to_entry() for e in self.entries]


class CompareRequest(BaseModel):
    session_id: str = DEFAULT_SESSION_ID
    entries: List[EntryModel] = Field(default_factory=list)
    periods: int = Field(default_factory=lambda: settings.forecast_default_periods, ge=0)
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    exclude_category: bool = False
    confidence_level: Optional[float] = None

    def to_entries(self) -> List[RevenueEntry]:
        return [e.to_entry() for e in self.entries]
