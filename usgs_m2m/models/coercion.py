"""Safe JSON field accessors.

M2M responses are not typed per field: numeric ids sometimes arrive as
strings, optional fields are sometimes omitted and sometimes null. These
helpers take an untyped decoded JSON value and never raise:
- ``*_opt`` variants return ``None`` when the field is absent or unusable
- defaulted variants return "", 0 or False instead
- a non-object container is treated like an object without the key
"""

from __future__ import annotations

import math
import re
from typing import Any

from usgs_m2m.models.schemas import SpatialBounds

# Strict integer literal: optional sign, digits only
_INT_LITERAL_RE = re.compile(r"[+-]?[0-9]+")

# Strings that read as True; everything else reads as False
_TRUE_LITERALS = frozenset({"true", "1"})

_BOUNDS_KEYS = ("east", "west", "north", "south")


def _field(obj: Any, key: str) -> Any:
    if not isinstance(obj, dict):
        return None
    return obj.get(key)


def _is_number(value: Any) -> bool:
    # bool is a subclass of int but JSON true/false are not numbers
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_int_literal(text: str) -> int | None:
    """Parse a strict integer literal, returning None on anything else."""
    if not _INT_LITERAL_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # Beyond sys.get_int_max_str_digits()
        return None


def get_string_opt(obj: Any, key: str) -> str | None:
    """Return the field only if it is a JSON string."""
    value = _field(obj, key)
    return value if isinstance(value, str) else None


def get_string(obj: Any, key: str) -> str:
    value = get_string_opt(obj, key)
    return value if value is not None else ""


def as_int(value: Any) -> int | None:
    """Coerce a JSON value to int.

    Integers pass through, finite floats are truncated, strings must be a
    strict integer literal. Anything else is None.
    """
    if _is_number(value):
        if isinstance(value, float):
            return int(value) if math.isfinite(value) else None
        return value
    if isinstance(value, str):
        return parse_int_literal(value)
    return None


def get_int_opt(obj: Any, key: str) -> int | None:
    return as_int(_field(obj, key))


def get_int(obj: Any, key: str) -> int:
    value = get_int_opt(obj, key)
    return value if value is not None else 0


def as_bool(value: Any) -> bool | None:
    """Coerce a JSON value to bool.

    Booleans pass through, integers map nonzero to True, and only the
    strings "true" and "1" map to True (any other string is False).
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value in _TRUE_LITERALS
    return None


def get_bool_opt(obj: Any, key: str) -> bool | None:
    return as_bool(_field(obj, key))


def get_bool(obj: Any, key: str) -> bool:
    value = get_bool_opt(obj, key)
    return value if value is not None else False


def get_string_array(obj: Any, key: str) -> list[str]:
    """Return the string elements of an array field, dropping the rest."""
    value = _field(obj, key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def get_object(obj: Any, key: str) -> dict | None:
    value = _field(obj, key)
    return value if isinstance(value, dict) else None


def get_list(obj: Any, key: str) -> list:
    value = _field(obj, key)
    return value if isinstance(value, list) else []


def get_spatial_bounds(obj: Any) -> SpatialBounds | None:
    """Return bounds only when east, west, north and south are all numeric."""
    if not isinstance(obj, dict):
        return None
    values = [obj.get(key) for key in _BOUNDS_KEYS]
    if not all(_is_number(v) for v in values):
        return None
    east, west, north, south = values
    return SpatialBounds(east=east, west=west, north=north, south=south)
