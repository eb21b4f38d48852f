#!/usr/bin/env python3
"""
Validation helpers shared by the configuration and data models.
"""
import math
from typing import Optional

from .errors import InvalidConfigurationError


def require_finite(field: str, val) -> float:
    try:
        f = float(val)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(field, val, "not a number") from None
    if not math.isfinite(f):
        raise InvalidConfigurationError(field, val, "must be finite")
    return f


def require_positive(field: str, val) -> float:
    f = require_finite(field, val)
    if f <= 0.0:
        raise InvalidConfigurationError(field, val, "must be > 0")
    return f


def require_int(field: str, val, minimum: int) -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(val, bool) or not isinstance(val, int):
        raise InvalidConfigurationError(field, val, "must be an integer")
    if val < minimum:
        raise InvalidConfigurationError(field, val, f"must be >= {minimum}")
    return val


def require_optional_int(field: str, val, minimum: int) -> Optional[int]:
    if val is None:
        return None
    return require_int(field, val, minimum)
