from typing import Any, Optional

import numpy as np
import pandas as pd


def is_missing(value: Any) -> bool:
    """True for None, NaN/NA cells and blank strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def coerce_or_default(value: Any, default: float = 0.0) -> float:
    """
    Convert a cell to float, falling back to ``default``.

    Booleans, blanks, non-numeric text, NaN, infinities and integers too
    large for a float all give the default; this never raises.
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return default

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default

    return finite_or_default(number, default)


def finite_or_default(number: float, default: float = 0.0) -> float:
    return number if np.isfinite(number) else default


def coerce_optional(value: Any) -> Optional[float]:
    if is_missing(value):
        return None
    number = coerce_or_default(value, default=np.nan)
    return None if np.isnan(number) else number


def format_identifier(value: Any) -> str:
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        value = int(value)
    return str(value).strip()
