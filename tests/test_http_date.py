from datetime import datetime, timedelta, timezone

import pytest

from typedheaders.core import InvalidHeader
from typedheaders.http_date import HttpDate


def nov_07():
    return HttpDate.from_timestamp(784198117)


def test_display_is_imf_fixdate():
    assert str(nov_07()) == "Mon, 07 Nov 1994 08:48:37 GMT"


def test_imf_fixdate():
    assert HttpDate.parse("Mon, 07 Nov 1994 08:48:37 GMT") == nov_07()


def test_rfc_850():
    assert HttpDate.parse("Monday, 07-Nov-94 08:48:37 GMT") == nov_07()


def test_asctime():
    assert HttpDate.parse("Mon Nov  7 08:48:37 1994") == nov_07()


def test_no_date():
    with pytest.raises(InvalidHeader):
        HttpDate.parse("this-is-no-date")


@pytest.mark.parametrize(
    "text",
    [
        "Sun, 07 Nov 1994 08:48:37 GMT",
        "Mon, 31 Nov 1994 08:48:37 GMT",
        "Mon, 07 Nov 1994 24:48:37 GMT",
        "mon, 07 Nov 1994 08:48:37 GMT",
        "Mon, 07 Nov 1994 08:48:37 UTC",
        "Thu, 01 Jan 1960 00:00:00 GMT",
    ],
)
def test_invalid_dates(text):
    with pytest.raises(InvalidHeader):
        HttpDate.parse(text)


def test_to_value():
    assert nov_07().to_value() == b"Mon, 07 Nov 1994 08:48:37 GMT"


def test_from_value_round_trip():
    assert HttpDate.from_value(nov_07().to_value()) == nov_07()


def test_from_value_invalid_is_none():
    assert HttpDate.from_value(b"this-is-no-date") is None


def test_from_values_single():
    assert HttpDate.from_values([b"Mon, 07 Nov 1994 08:48:37 GMT"]) == nov_07()


@pytest.mark.parametrize(
    "values",
    [[], [b"Mon, 07 Nov 1994 08:48:37 GMT", b"Mon, 07 Nov 1994 08:48:37 GMT"], [b"nope"]],
)
def test_from_values_rejects(values):
    with pytest.raises(InvalidHeader):
        HttpDate.from_values(values)


def test_datetime_round_trip():
    moment = datetime(1994, 11, 7, 8, 48, 37, tzinfo=timezone.utc)
    date = HttpDate.from_datetime(moment)
    assert date == nov_07()
    assert date.to_datetime() == moment


def test_from_datetime_other_zone_and_fraction():
    moment = datetime(1994, 11, 7, 9, 48, 37, 500000, tzinfo=timezone(timedelta(hours=1)))
    assert HttpDate.from_datetime(moment) == nov_07()


def test_naive_datetime_is_utc():
    assert HttpDate.from_datetime(datetime(1994, 11, 7, 8, 48, 37)) == nov_07()


def test_ordering():
    assert nov_07() < HttpDate.from_timestamp(784198118)


def test_before_epoch_rejected():
    with pytest.raises(ValueError):
        HttpDate.from_timestamp(-1)


@pytest.mark.parametrize("seconds", [0, 784198117, 1700000000])
def test_string_round_trip(seconds):
    date = HttpDate.from_timestamp(seconds)
    assert HttpDate.parse(str(date)) == date