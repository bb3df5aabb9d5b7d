from datetime import datetime
import warnings

import pytest

from txn_dashboard.domain.models import CanonicalDate, FilterSpec, Transaction, UNPARSEABLE
from txn_dashboard.services.filtering import matches
from txn_dashboard.tools.transfer_time import format_date, format_time, normalize


def test_day_first_not_month_first():
    parsed = normalize("05/03/2024")
    assert isinstance(parsed, CanonicalDate)
    assert (parsed.year, parsed.month, parsed.day) == (2024, 3, 5)
    assert (parsed.hour, parsed.minute, parsed.second) == (0, 0, 0)


def test_date_and_time():
    assert normalize("15/01/2024 10:20:30") == CanonicalDate(2024, 1, 15, 10, 20, 30)


def test_time_without_seconds():
    assert normalize("15/01/2024 10:20") == CanonicalDate(2024, 1, 15, 10, 20, 0)


def test_malformed_time_components_default_to_zero():
    assert normalize("15/01/2024 xx:30:yy") == CanonicalDate(2024, 1, 15, 0, 30, 0)


def test_single_component_time_is_ignored():
    assert normalize("15/01/2024 10") == CanonicalDate(2024, 1, 15)


def test_extra_tokens_ignore_time():
    assert normalize("15/01/2024 10:00:00 AM") == CanonicalDate(2024, 1, 15)


@pytest.mark.parametrize("raw", ["31/02/2024", "32/01/2024", "10/13/2024", "00/01/2024", "29/02/2023"])
def test_invalid_calendar_dates(raw):
    assert normalize(raw) is UNPARSEABLE


def test_leap_day_is_valid():
    assert normalize("29/02/2024") == CanonicalDate(2024, 2, 29)


def test_out_of_range_time_is_unparseable():
    assert normalize("15/01/2024 25:00:00") is UNPARSEABLE


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_missing_values(raw):
    assert normalize(raw) is UNPARSEABLE


def test_non_numeric_date_component_skips_fallback():
    assert normalize("aa/01/2024") is UNPARSEABLE


def test_fallback_iso_string():
    assert normalize("2024-01-15T10:00:00") == CanonicalDate(2024, 1, 15, 10, 0, 0)


def test_fallback_keeps_wall_clock_of_zoned_string():
    assert normalize("2024-01-15T10:00:00+07:00") == CanonicalDate(2024, 1, 15, 10, 0, 0)


def test_fallback_garbage():
    assert normalize("garbage") is UNPARSEABLE


def test_unparseable_is_falsy_singleton():
    assert not UNPARSEABLE
    assert normalize(None) is normalize("garbage value")


def test_format_date_and_time():
    assert format_date("05/03/2024 07:08:09") == "05/03/2024"
    assert format_time("05/03/2024 07:08:09") == "07:08:09"


def test_format_unparseable():
    assert format_date(None) == "N/A"
    assert format_time("nope") == ""


@pytest.mark.parametrize("raw", ["now", "today", "Today", "tomorrow", "yesterday"])
def test_relative_keywords_are_unparseable(raw):
    assert normalize(raw) is UNPARSEABLE


def test_relative_keyword_fails_month_filter_closed():
    tx = Transaction(id=1, sender="a", transfer_time="now")
    current_month = datetime.now().strftime("%Y-%m")
    assert not matches(tx, FilterSpec(month=current_month))


def test_fallback_reads_dashes_day_first_without_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error", UserWarning)
        assert normalize("05-03-2024") == CanonicalDate(2024, 3, 5)
        assert normalize("15-01-2024") == CanonicalDate(2024, 1, 15)
