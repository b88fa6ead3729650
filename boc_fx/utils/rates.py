"""Helpers for transforming and displaying :class:`~decimal.Decimal` rates."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal
from typing import Final, Iterable

from boc_fx.ingestion.models import Observation

# Valet publishes FX series with four decimal places.
DEFAULT_PLACES: Final[int] = 4


def invert_rate(rate: Decimal, places: int = DEFAULT_PLACES) -> Decimal:
    """Return ``1 / rate`` quantized to ``places`` decimals, rounding half-even."""

    if rate <= 0:
        raise ValueError(f"cannot invert non-positive rate {rate}")
    if places < 0:
        raise ValueError("places must not be negative")
    return (Decimal(1) / rate).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)


def invert_observations(
    observations: Iterable[Observation], places: int = DEFAULT_PLACES
) -> list[Observation]:
    return [obs.with_rate(invert_rate(obs.rate, places)) for obs in observations]


def format_observation(observation: Observation) -> str:
    """Render ``YYYY-MM-DD: rate`` without going through ``float``."""

    return f"{observation.rate_date.isoformat()}: {observation.rate}"


__all__ = ["DEFAULT_PLACES", "format_observation", "invert_observations", "invert_rate"]
