"""Reading from values: members, fields, methods, slices, membership and length."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from .values import RuntimeFault, _type_name, equal, to_int

_SEQUENCES = (list, tuple, str)
_PLAIN = (bool, int, float, complex, str, bytes, list, tuple, dict, set, frozenset)


@dataclass(frozen=True)
class Field:
    """A path to a record field, resolved ahead of time to positional indexes."""

    index: tuple = field(default_factory=tuple)
    path: tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "index", tuple(self.index))
        object.__setattr__(self, "path", tuple(self.path))


@dataclass(frozen=True)
class Method:
    """A method of a record, by its position among public methods and its name."""

    index: int
    name: str


def _is_record(v):
    """Tell whether the value is a user object with fields (not a container or scalar)."""
    if v is None or isinstance(v, (type, *_PLAIN)):
        return False
    if dataclasses.is_dataclass(v):
        return True
    return hasattr(v, "__dict__") and not callable(v)


def _public_methods(obj):
    """Names of the public methods of a record, sorted by name."""
    if not _is_record(obj):
        return []
    cls = type(obj)
    return sorted(
        name
        for name in dir(cls)
        if not name.startswith("_") and callable(getattr(cls, name, None))
    )


def _bound_method(obj, name):
    if name.startswith("_"):
        return None
    attr = getattr(type(obj), name, None)
    if attr is None or isinstance(attr, type) or not callable(attr):
        return None
    return getattr(obj, name)


def _record_field(obj, key):
    """Find a field by its name or by its ``expr`` metadata tag."""
    if dataclasses.is_dataclass(obj):
        for f in dataclasses.fields(obj):
            if f.metadata.get("expr") == key or f.name == key:
                return True, getattr(obj, f.name)
        return False, None
    attrs = vars(obj)
    if not key.startswith("_") and key in attrs:
        return True, attrs[key]
    return False, None


def _field_names(obj):
    if dataclasses.is_dataclass(obj):
        return {f.name for f in dataclasses.fields(obj)}
    return {name for name in vars(obj) if not name.startswith("_")}


def fetch(source, key):
    """Read ``source[key]``: an element, a map value, a field or a bound method.

    Negative indexes count from the end; a missing map key gives None.
    """
    if isinstance(source, _SEQUENCES):
        index = to_int(key)
        if index < 0:
            index += len(source)
        if not 0 <= index < len(source):
            raise RuntimeFault(
                f"index out of range [{index}] with length {len(source)}"
            )
        return source[index]
    if isinstance(source, dict):
        try:
            return source.get(key)
        except TypeError:
            raise RuntimeFault(
                f"cannot fetch {key} from {_type_name(source)}"
            ) from None
    if _is_record(source) and isinstance(key, str):
        method = _bound_method(source, key)
        if method is not None:
            return method
        found, value = _record_field(source, key)
        if found:
            return value
    raise RuntimeFault(f"cannot fetch {key} from {_type_name(source)}")


def _nth_field(v, position, fld, step):
    if dataclasses.is_dataclass(v) and not isinstance(v, type):
        names = [f.name for f in dataclasses.fields(v)]
        if 0 <= position < len(names):
            return getattr(v, names[position])
    raise RuntimeFault(f"cannot get {fld.path[step]} from {_type_name(v)}")


def fetch_field(source, field):
    """Follow a resolved field path into nested records."""
    if source is None:
        raise RuntimeFault(f"cannot get {field.path[0]} from {_type_name(source)}")
    v = source
    for step, position in enumerate(field.index):
        if step > 0 and v is None:
            raise RuntimeFault(
                f"cannot get {field.path[step]} from {field.path[step - 1]}"
            )
        v = _nth_field(v, position, field, step)
    return v


def fetch_method(source, method):
    """Return the bound method at ``method.index`` among the public methods."""
    names = _public_methods(source)
    if 0 <= method.index < len(names):
        return getattr(source, names[method.index])
    raise RuntimeFault(f"cannot fetch {method.name} from {_type_name(source)}")


def deref(i):
    """Return the value a reference points to; values here are never references."""
    return i


def slice_(array, start, stop):
    """Slice a list, tuple or string; negative bounds count from the end.

    The stop bound is clipped to the length and the start bound to the stop.
    """
    if not isinstance(array, _SEQUENCES):
        raise RuntimeFault(f"cannot slice {start}")
    size = len(array)
    a, b = to_int(start), to_int(stop)
    if a < 0:
        a += size
    if b < 0:
        b += size
    if b > size:
        b = size
    if a > b:
        a = b
    if a < 0:
        raise RuntimeFault(f"slice bounds out of range [{a}:{b}]")
    return array[a:b]


def in_(needle, array):
    """Tell whether ``needle`` is an element, a map key or a record field name."""
    if array is None:
        return False
    if isinstance(array, (list, tuple)):
        return any(equal(item, needle) for item in array)
    if isinstance(array, dict):
        if needle is None:
            raise RuntimeFault(
                f"cannot use {_type_name(needle)} as index to {_type_name(array)}"
            )
        try:
            return needle in array
        except TypeError:
            raise RuntimeFault(
                f"cannot use {_type_name(needle)} as index to {_type_name(array)}"
            ) from None
    if _is_record(array):
        if not isinstance(needle, str):
            raise RuntimeFault(
                f"cannot use {_type_name(needle)} as field name of {_type_name(array)}"
            )
        return needle in _field_names(array)
    raise RuntimeFault(f'operator "in" not defined on {_type_name(array)}')


def length(a):
    """Return the length of a list, tuple, map or string."""
    if isinstance(a, (list, tuple, dict, str)):
        return len(a)
    raise RuntimeFault(f"invalid argument for len (type {_type_name(a)})")