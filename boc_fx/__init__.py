"""Public interface for the boc_fx package."""

from __future__ import annotations

from datetime import date
from enum import Enum
from importlib import metadata as importlib_metadata

from boc_fx.ingestion.models import Observation
from boc_fx.ingestion.strategy import ObservationSource
from boc_fx.ingestion.valet import CAD_USD_SERIES, USD_CAD_SERIES, ValetClient
from boc_fx.selector import select_observations
from boc_fx.utils.date_range import DEFAULT_LOOKBACK_DAYS, lookback_window, validate_range
from boc_fx.utils.logger import get_logger
from boc_fx.utils.rates import DEFAULT_PLACES, invert_observations

__all__ = [
    "__version__",
    "BocFx",
    "InversionStrategy",
    "Observation",
    "RateDirection",
]

try:
    __version__ = importlib_metadata.version("boc-fx")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"

LOGGER = get_logger(__name__)


class RateDirection(str, Enum):
    """Which currency is quoted in terms of the other."""

    USD_CAD = "USD/CAD"
    CAD_USD = "CAD/USD"

    @property
    def series(self) -> str:
        """Valet series publishing this direction directly."""

        return USD_CAD_SERIES if self is RateDirection.USD_CAD else CAD_USD_SERIES


class InversionStrategy(str, Enum):
    """How CAD/USD rates are produced.

    ``SERIES`` asks Valet for the published FXCADUSD series. ``RECIPROCAL``
    fetches FXUSDCAD and inverts each rate locally, rounding half-even to the
    configured number of decimal places. The two can differ in the last digit.
    """

    SERIES = "series"
    RECIPROCAL = "reciprocal"


class BocFx:
    """Package facade tying a data source to the observation selector."""

    __slots__ = ("source", "lookback_days", "inversion", "places")

    def __init__(
        self,
        source: ObservationSource | None = None,
        *,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        inversion: InversionStrategy | str = InversionStrategy.SERIES,
        places: int = DEFAULT_PLACES,
    ) -> None:
        """Configure where observations come from and how reverse rates are built.

        When ``source`` is omitted a :class:`ValetClient` talking to the live
        Bank of Canada service is created.
        """

        if lookback_days < 0:
            raise ValueError("lookback_days must not be negative")
        self.source: ObservationSource = source if source is not None else ValetClient()
        self.lookback_days = lookback_days
        self.inversion = InversionStrategy(inversion)
        self.places = places

    def rate(
        self,
        on_date: date,
        *,
        direction: RateDirection = RateDirection.USD_CAD,
    ) -> Observation:
        """Return the rate for ``on_date`` or the preceding business day."""

        return self.observations(on_date, direction=direction)[0]

    def history(
        self,
        start_date: date,
        end_date: date,
        *,
        direction: RateDirection = RateDirection.USD_CAD,
    ) -> list[Observation]:
        """Return every business-day rate from ``start_date`` through ``end_date``.

        The first entry is the rate in effect on ``start_date``, which may be
        from an earlier date when ``start_date`` was not published.
        """

        return self.observations(start_date, end_date, direction=direction)

    def observations(
        self,
        start_date: date,
        end_date: date | None = None,
        *,
        direction: RateDirection = RateDirection.USD_CAD,
    ) -> list[Observation]:
        validate_range(start_date, end_date)
        direction = RateDirection(direction)
        reciprocal = (
            direction is RateDirection.CAD_USD and self.inversion is InversionStrategy.RECIPROCAL
        )
        series = USD_CAD_SERIES if reciprocal else direction.series

        window = lookback_window(start_date, end_date, lookback_days=self.lookback_days)
        LOGGER.info(
            "Resolving %s %s for %s → %s", direction.value, series, start_date, end_date or start_date
        )
        fetched = self.source.fetch(series, window.start, window.end)
        selected = select_observations(fetched, start_date, end_date)
        if reciprocal:
            selected = invert_observations(selected, self.places)
        return selected
