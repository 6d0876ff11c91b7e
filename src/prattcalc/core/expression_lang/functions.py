"""
Built-in constants and single-argument math functions.

The ``math`` module raises on domain and range errors where IEEE-754
arithmetic returns a special value. The wrappers here restore the native
behaviour: out-of-domain inputs give nan, poles give a signed infinity,
and overflow gives infinity.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from types import MappingProxyType

UnaryFunction = Callable[[float], float]

CONSTANTS: MappingProxyType[str, float] = MappingProxyType(
    {
        "e": math.e,
        "pi": math.pi,
    }
)


def _native(func: Callable[[float], float]) -> UnaryFunction:
    """Wrap a math function so domain errors yield nan instead of raising."""

    def wrapper(x: float) -> float:
        try:
            return float(func(x))
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf

    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper


def _logarithm(func: Callable[[float], float]) -> UnaryFunction:
    """Logarithm with log(0) == -inf and log(x < 0) == nan."""

    def wrapper(x: float) -> float:
        if x == 0.0:
            return -math.inf
        if x < 0.0 or math.isnan(x):
            return math.nan
        return func(x)

    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper


def _rounding(func: Callable[[float], int]) -> UnaryFunction:
    """ceil/floor returning float; non-finite inputs pass through unchanged."""

    def wrapper(x: float) -> float:
        if not math.isfinite(x):
            return x
        return float(func(x))

    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper


FUNCTIONS: MappingProxyType[str, UnaryFunction] = MappingProxyType(
    {
        "abs": math.fabs,
        "acos": _native(math.acos),
        "asin": _native(math.asin),
        "atan": math.atan,
        "ceil": _rounding(math.ceil),
        "cos": _native(math.cos),
        "floor": _rounding(math.floor),
        "ln": _logarithm(math.log),
        "log": _logarithm(math.log10),
        "log2": _logarithm(math.log2),
        "sin": _native(math.sin),
        "tan": _native(math.tan),
    }
)


def power(base: float, exponent: float) -> float:
    """``base ** exponent`` with C ``pow`` semantics instead of exceptions."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            # Negative exponent: pole at zero, sign kept only for odd integers
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        # Negative base with a non-integer exponent
        return math.nan


def divide(left: float, right: float) -> float:
    """``left / right`` returning a signed infinity or nan for a zero divisor."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1
