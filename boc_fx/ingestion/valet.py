"""requests-based client for the Bank of Canada Valet observations API."""

from __future__ import annotations

import json
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Final, Mapping

import requests

from boc_fx.ingestion.models import Observation
from boc_fx.utils.date_range import parse_date, validate_range
from boc_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)

VALET_BASE_URL: Final[str] = "https://www.bankofcanada.ca/valet"
USD_CAD_SERIES: Final[str] = "FXUSDCAD"
CAD_USD_SERIES: Final[str] = "FXCADUSD"
KNOWN_SERIES: Final[tuple[str, ...]] = (USD_CAD_SERIES, CAD_USD_SERIES)
DEFAULT_TIMEOUT: Final[float] = 30.0


class ValetError(RuntimeError):
    """Base class for Valet failures that are not transport errors."""


class ValetResponseError(ValetError):
    """Valet answered with a non-success status.

    ``payload`` holds the error body pretty-printed for display when it was
    JSON, otherwise the raw response text.
    """

    def __init__(self, status_code: int, payload: str) -> None:
        super().__init__(f"Valet responded with HTTP {status_code}:\n{payload}")
        self.status_code = status_code
        self.payload = payload


class ValetParseError(ValetError, ValueError):
    """A success response did not match the observations schema."""


class ValetClient:
    """Fetch FX observations from Valet.

    A new ``requests.Session`` is opened unless ``session`` is supplied.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        base_url: str = VALET_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": "boc-fx/1.0", "Accept": "application/json"})

    def observations_url(self, series: str) -> str:
        return f"{self.base_url}/observations/{series}/json"

    def fetch(
        self, series: str, start_date: date, end_date: date | None = None
    ) -> list[Observation]:
        """Return every observation of ``series`` published in the window."""

        validate_range(start_date, end_date)
        url = self.observations_url(series)
        params = {"start_date": start_date.isoformat()}
        if end_date is not None:
            params["end_date"] = end_date.isoformat()

        LOGGER.info("Requesting %s | params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            LOGGER.error("Network error reaching Valet: %s", exc)
            raise

        if not response.ok:
            raise ValetResponseError(response.status_code, _error_payload(response))

        try:
            body = response.json(parse_float=Decimal)
        except ValueError as exc:
            raise ValetParseError(f"Valet returned a non-JSON body for {series}") from exc

        observations = parse_observations(body, series)
        LOGGER.info("Fetched %d %s observations", len(observations), series)
        return observations

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ValetClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def _error_payload(response: requests.Response) -> str:
    try:
        return json.dumps(response.json(), indent=2)
    except ValueError:
        LOGGER.warning("Valet error response (%s) is not JSON", response.status_code)
        return response.text


def parse_observations(body: Any, series: str) -> list[Observation]:
    """Convert a decoded Valet observations document into records.

    Rows lacking a value for the series are skipped; Valet emits those for
    dates that fall inside the window but were never published.
    """

    if not isinstance(body, Mapping) or not isinstance(body.get("observations"), list):
        raise ValetParseError("response is missing the 'observations' list")

    rows: list[Observation] = []
    for raw in body["observations"]:
        if not isinstance(raw, Mapping) or "d" not in raw:
            raise ValetParseError(f"observation without a date: {raw!r}")
        try:
            rate_date = parse_date(raw["d"])
        except (TypeError, ValueError) as exc:
            raise ValetParseError(f"invalid observation date {raw['d']!r}") from exc

        value = _series_value(raw, series)
        if value is None:
            LOGGER.debug("Skipping %s: no %s value", rate_date, series)
            continue
        rows.append(Observation(rate_date=rate_date, rate=_parse_decimal(value, rate_date)))
    return rows


def _series_value(raw: Mapping[str, Any], series: str) -> Any:
    # Accept either direction's key so one parser serves both series.
    for key in (series, *KNOWN_SERIES):
        cell = raw.get(key)
        if cell is None:
            continue
        if not isinstance(cell, Mapping):
            raise ValetParseError(f"malformed {key} cell on {raw.get('d')}: {cell!r}")
        return cell.get("v")
    return None


def _parse_decimal(value: Any, rate_date: date) -> Decimal:
    if isinstance(value, float):
        raise ValetParseError(f"rate for {rate_date} arrived as binary float {value!r}")
    if isinstance(value, bool):
        raise ValetParseError(f"invalid rate {value!r} for {rate_date}")
    try:
        rate = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValetParseError(f"invalid rate {value!r} for {rate_date}") from exc
    if not rate.is_finite():
        raise ValetParseError(f"invalid rate {value!r} for {rate_date}")
    return rate


__all__ = [
    "CAD_USD_SERIES",
    "DEFAULT_TIMEOUT",
    "USD_CAD_SERIES",
    "VALET_BASE_URL",
    "ValetClient",
    "ValetError",
    "ValetParseError",
    "ValetResponseError",
    "parse_observations",
]
