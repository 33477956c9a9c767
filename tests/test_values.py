from __future__ import annotations

import datetime
import math
import pickle

import pytest

from stringify_object import UNDEFINED, BigInt, Date, Map, values


def test_undefined():
    assert values._Undefined() is UNDEFINED
    assert not UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"
    assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED
    assert UNDEFINED is not None


def test_bigint():
    b = BigInt(12)
    assert b == 12
    assert repr(b) == "BigInt(12)"
    assert isinstance(b, int)
    assert type(b + 1) is int


def test_map():
    m = Map([((1, 2), "tuple"), (None, "none")])
    assert isinstance(m, dict)
    assert m[(1, 2)] == "tuple"
    assert repr(m) == "Map([((1, 2), 'tuple'), (None, 'none')])"
    assert repr(Map()) == "Map([])"


def test_date():
    assert Date(0).isoformat() == "1970-01-01T00:00:00.000Z"
    assert Date(-1).isoformat() == "1969-12-31T23:59:59.999Z"
    assert Date(1.9).isoformat() == "1970-01-01T00:00:00.001Z"
    assert Date(253402300799999).isoformat() == "9999-12-31T23:59:59.999Z"
    assert Date(0).to_datetime() == values.EPOCH


@pytest.mark.parametrize(
    "time", [math.nan, math.inf, -math.inf, 8.64e15 + 1, 253402300800000]
)
def test_invalid_date(time):
    date = Date(time)
    assert not date.is_valid
    assert date.to_datetime() is None
    with pytest.raises(ValueError, match="Invalid date"):
        date.isoformat()


def test_from_datetime():
    utc = datetime.timezone.utc
    dt = datetime.datetime(2021, 3, 4, 5, 6, 7, 890123, tzinfo=utc)
    assert Date.from_datetime(dt).isoformat() == "2021-03-04T05:06:07.890Z"
    # Naive datetimes are in UTC
    naive = dt.replace(tzinfo=None)
    assert Date.from_datetime(naive) == Date.from_datetime(dt)
    minus_five = datetime.timezone(datetime.timedelta(hours=-5))
    local = datetime.datetime(2021, 3, 4, 0, 0, tzinfo=minus_five)
    assert Date.from_datetime(local).isoformat() == "2021-03-04T05:00:00.000Z"
    day = Date.from_datetime(datetime.date(2021, 3, 4))
    assert day.isoformat() == "2021-03-04T00:00:00.000Z"
    assert Date.from_datetime(datetime.datetime.min).isoformat() == (
        "0001-01-01T00:00:00.000Z"
    )
