"""
Normalization of the `validUntil` expiry argument.

Checks run in a fixed order so a given malformed input always yields the
same error: not a number, negative, float, in the past.
"""

import math
import time
from typing import Any, Callable, Optional, Union

from padsession.errors import (
    ValidUntilFloatError,
    ValidUntilInPastError,
    ValidUntilNegativeError,
    ValidUntilNotANumberError,
)


def _coerce_number(value: Any) -> Union[int, float]:
    """Turn the raw argument into an int or float, or raise not-a-number."""
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        raise ValidUntilNotANumberError()

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if math.isnan(value):
            raise ValidUntilNotANumberError()
        return value

    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")

    if not isinstance(value, str):
        raise ValidUntilNotANumberError()

    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass

    try:
        number = float(text)
    except ValueError:
        raise ValidUntilNotANumberError() from None

    if math.isnan(number):
        raise ValidUntilNotANumberError()
    return number


def parse_valid_until(
    value: Any, now: Optional[Callable[[], float]] = None
) -> int:
    """
    Parse and check a session expiry.

    Args:
        value: int, float or numeric string (unix seconds)
        now: Clock returning unix time; defaults to time.time

    Returns:
        The expiry as an int

    Raises:
        ValidUntilNotANumberError: value cannot be read as a number
        ValidUntilNegativeError: value is below zero
        ValidUntilFloatError: value has a fractional part or is infinite
        ValidUntilInPastError: value is not strictly after the current second
    """
    number = _coerce_number(value)

    if number < 0:
        raise ValidUntilNegativeError()

    if isinstance(number, float):
        if not number.is_integer():
            raise ValidUntilFloatError()
        number = int(number)

    current = math.floor((now or time.time)())
    if number <= current:
        raise ValidUntilInPastError()

    return number
