import math
import re

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# SQLite coerces text with a numeric prefix ("12abc" -> 12) and anything else to 0
NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

def fits_int32(value):
    return INT32_MIN <= value <= INT32_MAX


def wrap_int32(value):
    """
    Truncate an integer to signed 32-bit two's complement, the way a C cast does.
    """
    return ((value - INT32_MIN) % 2 ** 32) + INT32_MIN


def clamp_int64(value):
    return max(INT64_MIN, min(INT64_MAX, value))


def float_to_int64(value):
    """
    Convert a float to int64 the way SQLite does: NaN is 0, anything out of range saturates.
    """
    if math.isnan(value):
        return 0
    if value >= 2.0 ** 63:
        return INT64_MAX
    if value <= -(2.0 ** 63):
        return INT64_MIN
    return int(value)


def text_to_int(text):
    match = NUMERIC_PREFIX.match(text)
    if match is None:
        return 0

    number = match.group(1)
    if any(c in number for c in ".eE"):
        return float_to_int64(float(number))
    return clamp_int64(int(number))


def text_to_float(text):
    match = NUMERIC_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))
