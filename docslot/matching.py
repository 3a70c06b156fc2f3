"""
The equality predicate shared by every filtering operation of a :class:`~docslot.collection.Collection`.
"""
import typing as t

from docslot.types import Filter, Record


_MISSING = object()
_NUMBER_TYPES = (int, float)


def strictly_equal(a: t.Any, b: t.Any) -> bool:
    """
    Compares two field values without any type coercion. Values of different JSON types never compare equal, so
    ``1`` does not equal ``True`` or ``"1"``, although ``1`` does equal ``1.0``, both being numbers. Nested ``dict`` and
    ``list`` values are compared by identity, not by content.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, _NUMBER_TYPES) and isinstance(b, _NUMBER_TYPES):
        return a == b
    if isinstance(a, (dict, list)) or isinstance(b, (dict, list)):
        return a is b
    return type(a) is type(b) and a == b


def matches(filter_: Filter, record: Record) -> bool:
    """
    Returns ``True`` if every field of ``filter_`` is present in ``record`` with a strictly equal value. An empty filter
    matches every record.
    """
    for field, expected in filter_.items():
        actual = record.get(field, _MISSING)
        if actual is _MISSING or not strictly_equal(expected, actual):
            return False
    return True
