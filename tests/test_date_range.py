import unittest
from datetime import date

from boc_fx.utils.date_range import (
    DEFAULT_LOOKBACK_DAYS,
    DateRange,
    InvalidDateRangeError,
    lookback_window,
    parse_date,
    validate_range,
)


class DateRangeTests(unittest.TestCase):
    def test_lookback_window_single_date(self) -> None:
        window = lookback_window(date(2025, 1, 18))
        self.assertEqual(window, DateRange(start=date(2025, 1, 8), end=date(2025, 1, 18)))

    def test_lookback_window_range(self) -> None:
        window = lookback_window(date(2025, 1, 2), date(2025, 1, 21), lookback_days=3)
        self.assertEqual(window.as_tuple(), (date(2024, 12, 30), date(2025, 1, 21)))

    def test_default_lookback(self) -> None:
        self.assertEqual(DEFAULT_LOOKBACK_DAYS, 10)

    def test_parse_date(self) -> None:
        self.assertEqual(parse_date("2025-01-15"), date(2025, 1, 15))
        self.assertEqual(parse_date(date(2025, 1, 15)), date(2025, 1, 15))
        with self.assertRaises(ValueError):
            parse_date("2025/01/15")

    def test_invalid_input(self) -> None:
        with self.assertRaises(InvalidDateRangeError):
            validate_range(date(2025, 1, 18), date(2025, 1, 15))
        with self.assertRaises(InvalidDateRangeError):
            lookback_window(date(2025, 1, 18), date(2025, 1, 15))
        with self.assertRaises(ValueError):
            lookback_window(date(2025, 1, 18), lookback_days=-1)
        validate_range(date(2025, 1, 15), date(2025, 1, 15))
        validate_range(date(2025, 1, 15), None)


if __name__ == "__main__":
    unittest.main()
