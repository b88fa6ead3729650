"""Abstractions for pluggable observation sources."""

from __future__ import annotations

from datetime import date
from typing import Protocol

from boc_fx.ingestion.models import Observation


class ObservationSource(Protocol):
    """Contract for fetching raw exchange-rate observations.

    Concrete implementations retrieve every published observation of
    ``series`` between ``start_date`` and ``end_date`` (inclusive, when given)
    in whatever order the upstream service returns them.
    """

    def fetch(
        self, series: str, start_date: date, end_date: date | None = None
    ) -> list[Observation]:
        ...  # pragma: no cover - protocol definition


__all__ = ["ObservationSource"]
