"""Value model shared by the evaluator: nil checks, conversions and equality."""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
_DECIMAL_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)


class RuntimeFault(RuntimeError):
    """Raised when an operation cannot be carried out on the values given."""


def _is_number(v):
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _type_name(v):
    """Describe the type of a value the way error messages name it."""
    if v is None:
        return "<nil>"
    if isinstance(v, bool):
        return "bool"
    if isinstance(v, int):
        return "int"
    if isinstance(v, float):
        return "float64"
    if isinstance(v, str):
        return "string"
    if isinstance(v, datetime):
        return "time.Time"
    if isinstance(v, timedelta):
        return "time.Duration"
    if isinstance(v, (list, tuple)):
        return "[]interface {}"
    if isinstance(v, dict):
        return "map[string]interface {}"
    return type(v).__name__


def is_nil(v):
    """Tell whether the value is nil."""
    return v is None


def _truncate(x, target):
    if isinstance(x, float):
        if math.isnan(x) or math.isinf(x):
            raise RuntimeFault(f"invalid operation: {target}({_type_name(x)})")
        return int(x)
    return x


def to_int(a):
    """Convert a number or a decimal integer string to an int."""
    if _is_number(a):
        return _truncate(a, "int")
    if isinstance(a, str):
        if not _DECIMAL_INT.fullmatch(a):
            raise RuntimeFault(f"invalid operation: int({a})")
        value = int(a)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise RuntimeFault(f"invalid operation: int({a})")
        return value
    raise RuntimeFault(f"invalid operation: int({_type_name(a)})")


def to_int64(a):
    """Convert a number to a 64-bit integer value."""
    if _is_number(a):
        return _truncate(a, "int64")
    raise RuntimeFault(f"invalid operation: int64({_type_name(a)})")


def _parse_float(text):
    if _DECIMAL_FLOAT.fullmatch(text):
        value = float(text)
        if math.isinf(value):
            raise RuntimeFault(f"invalid operation: float({text})")
        return value
    if _HEX_FLOAT.fullmatch(text):
        try:
            return float.fromhex(text)
        except OverflowError:
            raise RuntimeFault(f"invalid operation: float({text})") from None
    if _SPECIAL_FLOAT.fullmatch(text):
        return float(text)
    raise RuntimeFault(f"invalid operation: float({text})")


def to_float64(a):
    """Convert a number or a numeric string to a float."""
    if _is_number(a):
        return float(a)
    if isinstance(a, str):
        return _parse_float(a)
    raise RuntimeFault(f"invalid operation: float({_type_name(a)})")


def _deep_equal(a, b):
    if type(a) is not type(b):
        return False
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(_deep_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        if a.keys() != b.keys():
            return False
        return all(_deep_equal(a[k], b[k]) for k in a)
    if isinstance(a, float):
        return a == b
    return a == b


def equal(a, b):
    """Compare two values: numbers by value across int and float, otherwise strictly."""
    if _is_number(a) and _is_number(b):
        if isinstance(a, int) and isinstance(b, int):
            return a == b
        return float(a) == float(b)
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, datetime) and isinstance(b, datetime):
        return a == b
    if is_nil(a) and is_nil(b):
        return True
    if isinstance(a, (date, time)) or isinstance(b, (date, time)):
        return type(a) is type(b) and a == b
    return _deep_equal(a, b)