import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from api.routes.common import clear_engines
from engine.periods import format_period
from engine.series import HistoricalPoint


@pytest.fixture(autouse=True)
def clear_sessions():
    """Drop every in-memory forecast session before and after each test."""
    clear_engines()
    yield
    clear_engines()


def _series(values, start_month=1, start_year=2022):
    points = []
    month, year = start_month, start_year
    for v in values:
        points.append(HistoricalPoint(period=format_period(month, year), value=float(v), entry_count=1))
        month += 1
        if month > 12:
            month, year = 1, year + 1
    return points


@pytest.fixture
def make_series():
    return _series
