"""
Token helpers shared by the parsers.
"""

import math
from typing import Any, Optional

import pandas as pd

from ..core.columns import SourceColumn, SourceColumnMapping
from ..core.errors import MalformedInputError


def is_missing(raw: Any) -> bool:
    """True for None, NaN and blank strings."""
    if raw is None:
        return True
    if isinstance(raw, str):
        return raw.strip() == ''
    try:
        return bool(pd.isna(raw))
    except (TypeError, ValueError):
        return False


def parse_year(raw: Any, context: str) -> int:
    if is_missing(raw) or isinstance(raw, bool):
        raise MalformedInputError(f"{context}: missing year")
    if isinstance(raw, float):
        # JSON exports sometimes carry the year as a number, e.g. 2020.0
        if not raw.is_integer():
            raise MalformedInputError(f"{context}: invalid year {raw!r}")
        return int(raw)
    try:
        return int(str(raw).strip())
    except ValueError:
        raise MalformedInputError(f"{context}: invalid year {raw!r}")


def parse_value(raw: Any, context: str) -> float:
    if is_missing(raw) or isinstance(raw, bool):
        raise MalformedInputError(f"{context}: missing value")
    try:
        value = float(str(raw).strip())
    except ValueError:
        raise MalformedInputError(f"{context}: invalid value {raw!r}")
    if not math.isfinite(value):
        raise MalformedInputError(f"{context}: invalid value {raw!r}")
    return value


def single_measure(cols: SourceColumnMapping) -> Optional[tuple]:
    """Return (code, label) for single-measure sources, or None."""
    code = cols.get(SourceColumn.SINGLE_MEASURE_CODE)
    if code is None:
        return None
    label = cols.get(SourceColumn.SINGLE_MEASURE_NAME, code)
    return code.lower(), label
