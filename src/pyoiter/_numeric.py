"""Numeric coercion helpers shared by the factories and the counting combinators.

Values that are not numbers are converted first:

- `bool` and `int` are used as integers, `float` as is.
- Strings are parsed, a blank string being `0`.
- Anything else goes through `float()`.

Whatever cannot be converted becomes NaN.

NaN and infinities are returned unchanged, since they have no integer value.
"""

from __future__ import annotations

import math


def _to_number(value: object) -> int | float:
    match value:
        case bool():
            return int(value)
        case int() | float():
            return value
        case str():
            text = value.strip()
            if not text:
                return 0
            try:
                return float(text)
            except ValueError:
                return math.nan
        case _:
            try:
                return float(value)  # type: ignore[arg-type]
            except (TypeError, ValueError):
                return math.nan


def is_nan(number: int | float) -> bool:
    """Check for NaN without converting arbitrarily large ints to `float`."""
    return isinstance(number, float) and math.isnan(number)


def to_integer(value: object) -> int | float:
    """Truncate a value toward zero.

    Args:
        value (object): Any value, converted to a number first.

    Returns:
        int | float: The truncated integer, or the value itself if it is NaN or infinite.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.to_integer(1.76), po.to_integer(-1.76), po.to_integer("3")
    (1, -1, 3)
    >>> po.to_integer("Test")
    nan
    >>> po.to_integer(10**400) == 10**400
    True

    ```
    """
    number = _to_number(value)
    if isinstance(number, int) or not math.isfinite(number):
        return number
    return math.ceil(number) if number < 0 else math.floor(number)


def to_positive_integer(value: object) -> int | float:
    """Floor a value, clamping negatives to zero.

    Args:
        value (object): Any value, converted to a number first.

    Returns:
        int | float: The clamped integer, or the value itself if it is NaN or positive infinity.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.to_positive_integer(2.9), po.to_positive_integer(-5)
    (2, 0)
    >>> po.to_positive_integer(float("inf"))
    inf

    ```
    """
    number = _to_number(value)
    if number < 0:
        return 0
    if isinstance(number, int) or not math.isfinite(number):
        return number
    return math.floor(number)


def integer_or(value: object, default: int) -> int | float:
    """Return `to_integer(value)`, or **default** when that is zero or NaN."""
    number = to_integer(value)
    if is_nan(number) or not number:
        return default
    return number
