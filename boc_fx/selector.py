"""Select the observations that answer a single-date or range query.

Valet only publishes on business days, so a requested date may have no row of
its own. The selector resolves such gaps by rolling back to the latest
published observation on or before the requested start date:

* single-date mode returns that one observation;
* range mode returns it followed by every later observation in the input.

The right edge of a range is never trimmed here. The fetch already asked the
service for data up to the end date, so the selector only drops the extra
look-back rows on the left.
"""

from __future__ import annotations

from bisect import bisect_right
from datetime import date
from typing import Iterable

from boc_fx.ingestion.models import Observation, observation_key
from boc_fx.utils.date_range import validate_range
from boc_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)


class ObservationSelectionError(LookupError):
    """Raised when no observation can answer the query."""


class NoObservationsError(ObservationSelectionError):
    """Raised when the selector receives no observations at all."""


def select_observations(
    observations: Iterable[Observation],
    start_date: date,
    end_date: date | None = None,
) -> list[Observation]:
    """Return the ordered observations answering the query.

    ``end_date`` only switches between single-date mode (``None``) and range
    mode; the input is expected to be bounded on the right already.
    """

    validate_range(start_date, end_date)
    ordered = sorted(observations, key=observation_key)
    if not ordered:
        raise NoObservationsError("no observations available to select from")

    # bisect_right lands just past the last date <= start_date.
    range_start = bisect_right([observation_key(obs) for obs in ordered], start_date) - 1
    if range_start < 0:
        raise ObservationSelectionError(
            f"no observation at or before {start_date}; earliest available is "
            f"{ordered[0].rate_date}, widen the look-back window"
        )

    if ordered[range_start].rate_date != start_date:
        LOGGER.debug(
            "No observation on %s, using preceding %s", start_date, ordered[range_start].rate_date
        )

    if end_date is None:
        return [ordered[range_start]]
    return ordered[range_start:]


def resolve_observation(observations: Iterable[Observation], on_date: date) -> Observation:
    """Return the observation in effect on ``on_date``."""

    return select_observations(observations, on_date)[0]


__all__ = [
    "NoObservationsError",
    "ObservationSelectionError",
    "resolve_observation",
    "select_observations",
]
