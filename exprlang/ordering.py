"""Ordering comparisons between values and integer ranges."""

from __future__ import annotations

import operator
from datetime import datetime, timezone

from .values import RuntimeFault, _is_number, _type_name


def _as_instant(t):
    """Naive datetimes are taken to be in UTC so they order against aware ones."""
    if t.tzinfo is None:
        return t.replace(tzinfo=timezone.utc)
    return t


def _ordered_pair(a, b):
    """Return the pair in a form Python can order, or None if it cannot be ordered."""
    if _is_number(a) and _is_number(b):
        if isinstance(a, int) and isinstance(b, int):
            return a, b
        return float(a), float(b)
    if isinstance(a, str) and isinstance(b, str):
        return a, b
    if isinstance(a, datetime) and isinstance(b, datetime):
        return _as_instant(a), _as_instant(b)
    return None


def _compare(a, b, op, symbol):
    pair = _ordered_pair(a, b)
    if pair is None:
        raise RuntimeFault(
            f"invalid operation: {_type_name(a)} {symbol} {_type_name(b)}"
        )
    return op(*pair)


def less(a, b):
    """Tell whether ``a`` is less than ``b``."""
    return _compare(a, b, operator.lt, "<")


def more(a, b):
    """Tell whether ``a`` is greater than ``b``."""
    return _compare(a, b, operator.gt, ">")


def less_or_equal(a, b):
    """Tell whether ``a`` is less than or equal to ``b``."""
    return _compare(a, b, operator.le, "<=")


def more_or_equal(a, b):
    """Tell whether ``a`` is greater than or equal to ``b``."""
    return _compare(a, b, operator.ge, ">=")


def make_range(low, high):
    """Return the integers from ``low`` to ``high`` inclusive; empty if high < low."""
    return list(range(low, high + 1))