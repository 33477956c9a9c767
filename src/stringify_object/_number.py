"""Render python numbers the way javascript's ``Number#toString`` does.

Python's :func:`repr` and javascript both print the shortest string that
round-trips, they only disagree on where to put the exponent and on the
spelling of the special values.
"""

from __future__ import annotations

import decimal
import math
from typing import Final

#: Largest integer that a javascript number represents exactly.
MAX_SAFE_INTEGER: Final = 2**53 - 1


def is_safe_integer(n: int) -> bool:
    return -MAX_SAFE_INTEGER <= n <= MAX_SAFE_INTEGER


# Python refuses to print ints longer than `sys.get_int_max_str_digits()`, so
# big ones are printed a chunk at a time.
_CHUNK_DIGITS: Final = 1000
_CHUNK: Final = 10**_CHUNK_DIGITS


def format_integer(n: int) -> str:
    """Decimal digits of *n*, whatever its size.

    >>> format_integer(-12)
    '-12'
    >>> len(format_integer(10**5000))
    5001
    """
    if n < 0:
        return "-" + format_integer(-n)
    chunks = []
    while n >= _CHUNK:
        n, rest = divmod(n, _CHUNK)
        chunks.append(int.__repr__(rest).zfill(_CHUNK_DIGITS))
    chunks.append(int.__repr__(n))
    return "".join(reversed(chunks))


def format_number(n: int | float) -> str:
    """
    >>> format_number(1.0)
    '1'
    >>> format_number(-0.0)
    '0'
    >>> format_number(1e21), format_number(1e20)
    ('1e+21', '100000000000000000000')
    >>> format_number(1.5e-7), format_number(0.000001)
    ('1.5e-7', '0.000001')
    >>> format_number(float("-inf"))
    '-Infinity'
    """
    if isinstance(n, int):
        return format_integer(n)
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "Infinity" if n > 0 else "-Infinity"
    if n == 0:
        return "0"
    if n < 0:
        return "-" + format_number(-n)
    # n == int(digits) * 10 ** exponent, with no trailing zeros in digits
    _, digit_tuple, exponent = decimal.Decimal(repr(n)).normalize().as_tuple()
    assert isinstance(exponent, int)
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    # Position of the decimal point relative to the start of digits
    point = exponent + k
    if k <= point <= 21:
        return digits + "0" * (point - k)
    if 0 < point <= 21:
        return f"{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return "0." + "0" * -point + digits
    e = point - 1
    suffix = f"e{'+' if e >= 0 else '-'}{abs(e)}"
    if k == 1:
        return digits + suffix
    return f"{digits[0]}.{digits[1:]}{suffix}"
