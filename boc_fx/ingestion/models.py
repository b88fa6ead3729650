"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Observation:
    """A single published exchange rate.

    ``rate`` is the price of one unit of the base currency in the quote
    currency, kept as a :class:`~decimal.Decimal` exactly as Valet publishes it.
    """

    rate_date: date
    rate: Decimal

    def with_rate(self, rate: Decimal) -> "Observation":
        """Return a copy of this observation carrying ``rate``."""

        return Observation(rate_date=self.rate_date, rate=rate)


def observation_key(observation: Observation) -> date:
    """Ordering key for observations: the publication date alone."""

    return observation.rate_date


__all__ = ["Observation", "observation_key"]
