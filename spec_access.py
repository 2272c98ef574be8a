"""Safe getters for loosely-typed part specification maps.

Specification values come from hand-entered catalogs and scraped listings, so
any key may be missing, null or of the wrong type. Every getter here degrades
to an empty or default value instead of raising.
"""
import re
from collections.abc import Mapping

_NUMBER_RE = re.compile(r"-?\d{1,20}(?:\.\d+)?")
MAX_SPEC_NUMBER = 1e15  # anything larger is treated as garbage


def get_value(specs, key: str, default=None):
    """Return the raw value for ``key``, or ``default`` if absent or null."""
    if not isinstance(specs, Mapping):
        return default
    value = specs.get(key)
    if value is None:
        return default
    return value


def get_array(specs, key: str) -> list:
    """Return a list value; a bare string is wrapped, anything else is ``[]``."""
    value = get_value(specs, key)
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, str):
        return [value] if value else []
    return []


def get_object(specs, key: str) -> dict:
    """Return a mapping value as a dict, anything else is ``{}``."""
    value = get_value(specs, key)
    if isinstance(value, Mapping):
        return dict(value)
    return {}


def get_number(specs, key: str, default: float = 0, positive: bool = False) -> float:
    """Return a numeric value, parsing strings like ``"750W"`` or ``"32 GB"``.

    With ``positive=True`` a zero or negative value falls back to ``default``
    (limits such as max GPU length are meaningless at 0).
    """
    value = get_value(specs, key)
    number = to_number(value)
    if number is None:
        return default
    if positive and number <= 0:
        return default
    return number


def get_string(specs, key: str, default: str = "") -> str:
    value = get_value(specs, key)
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def get_exact_string(specs, key: str, default: str = "") -> str:
    """Return a string value unchanged (no stripping, no number coercion).

    Blank strings and non-strings give ``default``.
    """
    value = get_value(specs, key)
    if isinstance(value, str) and value.strip():
        return value
    return default


def to_number(value) -> float | None:
    """Coerce ints, floats and numeric strings; None for anything else,
    including infinities and NaN."""
    if isinstance(value, bool):
        return None
    number = None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        match = _NUMBER_RE.search(value.replace(",", ""))
        if match:
            text = match.group(0)
            number = float(text) if "." in text else int(text)
    # NaN fails the comparison, inf and huge ints exceed the bound
    if number is None or not abs(number) <= MAX_SPEC_NUMBER:
        return None
    return number
