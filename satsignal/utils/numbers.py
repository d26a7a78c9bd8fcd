"""Numeric coercion for form, storage and payload values."""

import math
from typing import Any, Optional


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a loosely-typed value into a finite float.

    Accepts ints, floats and numeric strings. Booleans, non-finite values
    and anything unparseable yield None.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(result):
        return None
    return result


def coerce_number(value: Any, default: float = 0.0) -> float:
    """Parse a value, substituting ``default`` when it is missing or invalid."""
    result = parse_number(value)
    return default if result is None else result
