"""
Shared utilities and dependencies for API route modules.

Keeps one forecasting engine per session id so the "last forecast" of one
session never leaks into another. Sessions live in process memory only; the
oldest session is evicted once the configured limit is reached.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Optional

from config import settings
from engine.forecast.engine import EntrySource, ForecastingEngine

log = logging.getLogger(__name__)

_engines: dict[str, ForecastingEngine] = {}


def get_engine(session_id: str, entries: Optional[EntrySource] = None) -> ForecastingEngine:
    engine = _engines.get(session_id)
    if engine is None:
        while len(_engines) >= max(1, settings.api_max_sessions):
            evicted = next(iter(_engines))
            _engines.pop(evicted)
            log.info("evicted forecast session %s", evicted)
        engine = ForecastingEngine()
        _engines[session_id] = engine
    if entries is not None:
        engine.set_entries(entries)
    return engine


def find_engine(session_id: str) -> Optional[ForecastingEngine]:
    return _engines.get(session_id)


def clear_engines() -> None:
    _engines.clear()
