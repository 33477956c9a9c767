"""
``stringify_object.values``: javascript values that python lacks
================================================================

Python has no native equivalent for some of the values javascript literals can
express. This module provides stand-ins that :func:`~stringify_object.stringify`
recognises:

+ :data:`UNDEFINED`: rendered as ``undefined`` (:const:`None` is ``null``)
+ :class:`BigInt`: rendered with the ``n`` suffix
+ :class:`Date`: a point in time that can be invalid, rendered as
  ``new Date(...)``
+ :class:`Map`: a mapping with arbitrary keys, rendered as ``new Map(...)``
  instead of an object literal

"""

from __future__ import annotations

import dataclasses
import datetime
import math
import typing
from typing import Any, Final

__all__ = ("UNDEFINED", "BigInt", "Date", "Map")


class _Undefined:
    __slots__ = ()

    _instance: typing.ClassVar[_Undefined | None] = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


#: Javascript's ``undefined``
UNDEFINED: Final = _Undefined()


class BigInt(int):
    """An integer that is always rendered as a javascript ``BigInt``.

    Plain :class:`int` outside of the safe integer range are rendered as
    ``BigInt`` too, this class is for the small ones.

    >>> BigInt(5)
    BigInt(5)
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"BigInt({int(self)})"


class Map(dict[Any, Any]):
    """A dictionary rendered as ``new Map(...)``.

    Plain dictionaries are rendered as object literals where all the keys are
    turned into property names. Use this class when the keys are values in
    their own right.

    >>> Map([(1, 'a')])
    Map([(1, 'a')])
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items())!r})"


EPOCH: Final = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

#: Javascript dates are limited to 100,000,000 days on each side of the epoch.
MAX_TIME: Final = 8.64e15

MILLISECOND: Final = datetime.timedelta(milliseconds=1)


@dataclasses.dataclass(frozen=True, slots=True)
class Date:
    """A point in time, as the number of milliseconds since the epoch.

    Like in javascript the time can be ``NaN``, in which case the date is
    invalid:

    >>> Date(0).isoformat()
    '1970-01-01T00:00:00.000Z'
    >>> Date(math.nan).is_valid
    False

    Only instants that :class:`datetime.datetime` can represent (years 1 to
    9999) are considered valid.
    """

    time: float

    @classmethod
    def from_datetime(cls, dt: datetime.date) -> Date:
        """Convert a :class:`datetime.date` or :class:`datetime.datetime`.

        Naive datetimes are taken to be in UTC.
        """
        if not isinstance(dt, datetime.datetime):
            dt = datetime.datetime.combine(
                dt, datetime.time(), tzinfo=datetime.timezone.utc
            )
        elif dt.tzinfo is None:
            dt = dt.replace(tzinfo=datetime.timezone.utc)
        return cls((dt - EPOCH) // MILLISECOND)

    @property
    def is_valid(self) -> bool:
        return self.to_datetime() is not None

    def to_datetime(self) -> datetime.datetime | None:
        "The matching UTC datetime (``None`` for invalid dates)"
        if not math.isfinite(self.time) or abs(self.time) > MAX_TIME:
            return None
        try:
            return EPOCH + math.trunc(self.time) * MILLISECOND
        except OverflowError:
            return None

    def isoformat(self) -> str:
        """Same format as javascript's ``Date.prototype.toISOString``

        Raises:
          ValueError: if the date is invalid.
        """
        dt = self.to_datetime()
        if dt is None:
            raise ValueError(f"Invalid date: {self.time!r}")
        return (
            f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
            f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
            f".{dt.microsecond // 1000:03d}Z"
        )
