from datetime import timedelta

import pytest

from typedheaders.core import InvalidHeader
from typedheaders.seconds import (
    seconds_from_value,
    seconds_from_values,
    seconds_to_value,
)


def test_from_value():
    assert seconds_from_value(b"31536000") == 31536000


def test_from_value_plus_sign():
    assert seconds_from_value(b"+15768000") == 15768000


@pytest.mark.parametrize("raw", [b"", b"-1", b"izzy", b" 1", b"1.5", b"+"])
def test_from_value_rejects(raw):
    assert seconds_from_value(raw) is None


def test_from_value_overflow():
    assert seconds_from_value(str(2**64).encode()) is None
    assert seconds_from_value(str(2**64 - 1).encode()) == 2**64 - 1


def test_from_values_single():
    assert seconds_from_values([b"31536000"]) == 31536000


@pytest.mark.parametrize("values", [[], [b"1", b"2"], [b"nan"]])
def test_from_values_rejects(values):
    with pytest.raises(InvalidHeader):
        seconds_from_values(values)


@pytest.mark.parametrize("secs", [0, 1, 31536000])
def test_round_trip(secs):
    assert seconds_from_value(seconds_to_value(secs)) == secs


def test_to_value_timedelta():
    assert seconds_to_value(timedelta(seconds=90)) == seconds_to_value(90)
    assert seconds_from_value(seconds_to_value(timedelta(days=1))) == 86400


def test_to_value_rejects_fraction():
    with pytest.raises(ValueError):
        seconds_to_value(timedelta(milliseconds=1500))


def test_to_value_rejects_negative():
    with pytest.raises(ValueError):
        seconds_to_value(-1)