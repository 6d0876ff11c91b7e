"""Rendering of evaluation results for display."""

from __future__ import annotations

import math


def format_result(value: float, precision: int | None = None) -> str:
    """
    Format a result the way a calculator shows it.

    Integral values print without a trailing ".0", non-finite values print
    as inf, -inf and NaN. With ``precision`` set, other values are rounded
    to that many significant digits.

    Examples:
        format_result(7.0) -> "7"
        format_result(0.1 + 0.2) -> "0.30000000000000004"
        format_result(0.1 + 0.2, precision=12) -> "0.3"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    if precision is not None:
        return f"{value:.{precision}g}"
    return repr(value)
