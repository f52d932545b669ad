"""Helpers for optional values.

Data classes use ``None`` for "field absent". The ``*_p`` helpers coerce a
value to the exact primitive a field expects, the ``p_*`` helpers read an
optional field back with the type's zero value as fallback.
"""
from __future__ import annotations
import struct
from typing import Optional, Sequence

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1


def _check_range(value: int, low: int, high: int, kind: str) -> int:
    if not low <= value <= high:
        raise ValueError(f"{value} does not fit in {kind}")
    return value


def string_p(value) -> str:
    return str(value)


def bool_p(value) -> bool:
    return bool(value)


def int_p(value) -> int:
    return int(value)


def int32_p(value) -> int:
    return _check_range(int(value), INT32_MIN, INT32_MAX, "int32")


def int64_p(value) -> int:
    return _check_range(int(value), INT64_MIN, INT64_MAX, "int64")


def float32_p(value) -> float:
    """Round a number to single precision."""
    return struct.unpack("f", struct.pack("f", float(value)))[0]


def float64_p(value) -> float:
    return float(value)


def p_string(value: Optional[str]) -> str:
    return value if value is not None else ""


def p_bool(value: Optional[bool]) -> bool:
    return value if value is not None else False


def p_int(value: Optional[int]) -> int:
    return value if value is not None else 0


def p_int32(value: Optional[int]) -> int:
    return int32_p(value) if value is not None else 0


def p_int64(value: Optional[int]) -> int:
    return int64_p(value) if value is not None else 0


def p_float32(value: Optional[float]) -> float:
    return float32_p(value) if value is not None else 0.0


def p_float64(value: Optional[float]) -> float:
    return value if value is not None else 0.0


def nil_or_empty_array(values: Optional[Sequence[str]]) -> bool:
    """Return True for None, an empty sequence, or one whose first item is ""."""
    if not values:
        return True
    return values[0] == ""
