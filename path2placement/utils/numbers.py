"""
Numeric helpers for loosely-typed table cells and backend JSON.

Cells in the placement table are often text ("85.2", "85.2%", "", "NA").
Both helpers read the leading number the way a browser's parseFloat does.
"""

import math
import re
from typing import Any, Optional

_LEADING_NUMBER = re.compile(r"^\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")


def optional_float(value: Any) -> Optional[float]:
    """
    Convert a cell/JSON value to float.
    Returns None for missing or non-numeric values ("never measured").
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value))
        if not match:
            return None
        number = float(match.group(0))

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def safe_number(value: Any) -> float:
    """Like optional_float, but missing values count as 0 (dashboard totals)."""
    number = optional_float(value)
    return 0.0 if number is None else number
