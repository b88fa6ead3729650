"""Shared fixtures for the boc_fx test suite."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from boc_fx.ingestion.models import Observation

# Weekday FXUSDCAD-style rates for 2025-01-06 (Mon) through 2025-01-21 (Tue).
_RATES = [
    "1.4390", "1.4347", "1.4384", "1.4408", "1.4416",
    "1.4423", "1.4395", "1.4354", "1.4359", "1.4389",
    "1.4387", "1.4327",
]


def weekday_observations() -> list[Observation]:
    rows: list[Observation] = []
    day = date(2025, 1, 6)
    rates = iter(_RATES)
    while day <= date(2025, 1, 21):
        if day.weekday() < 5:
            rows.append(Observation(rate_date=day, rate=Decimal(next(rates))))
        day += timedelta(days=1)
    return rows


def valet_document(observations: list[Observation], series: str = "FXUSDCAD") -> dict:
    return {
        "terms": {"url": "https://www.bankofcanada.ca/terms/"},
        "seriesDetail": {series: {"label": series, "dimension": {"key": "d", "name": "date"}}},
        "observations": [
            {"d": obs.rate_date.isoformat(), series: {"v": str(obs.rate)}} for obs in observations
        ],
    }


class FakeSource:
    """In-memory observation source that honours the requested window."""

    def __init__(self, observations: list[Observation] | None = None) -> None:
        self.observations = list(observations if observations is not None else weekday_observations())
        self.calls: list[tuple[str, date, date | None]] = []

    def fetch(self, series: str, start_date: date, end_date: date | None = None) -> list[Observation]:
        self.calls.append((series, start_date, end_date))
        rows = [
            obs
            for obs in self.observations
            if obs.rate_date >= start_date and (end_date is None or obs.rate_date <= end_date)
        ]
        # Valet order is not part of the contract.
        return list(reversed(rows))


@pytest.fixture()
def observations() -> list[Observation]:
    return weekday_observations()


@pytest.fixture()
def fake_source() -> FakeSource:
    return FakeSource()


@pytest.fixture()
def make_source():
    return FakeSource


@pytest.fixture()
def make_document():
    return valet_document
