"""Factorial, double factorial and generalised k-factorial of integers."""

from __future__ import annotations

import math
import operator

__all__ = ["factorial", "factorial2", "factorialk"]


def _step_product(n: int, step: int) -> int:
    """Product ``n * (n - step) * (n - 2 * step) * ...`` over positive terms."""
    return math.prod(range(n, 0, -step))


def factorial(n: int) -> int:
    """Return ``n!``, the product of all positive integers up to ``n``.

    ``0! == 1``; a negative ``n`` yields ``0``.
    """
    n = operator.index(n)
    if n < 0:
        return 0
    return math.factorial(n)


def factorial2(n: int) -> int:
    """Return the double factorial ``n!!``.

    This is the product of all positive integers up to ``n`` that share its
    parity. ``0!! == 1``; a negative ``n`` yields ``0``.
    """
    n = operator.index(n)
    if n < 0:
        return 0
    return _step_product(n, 2)


def factorialk(n: int, k: int) -> int:
    """Return the ``k``-factorial ``n * (n - k) * (n - 2k) * ...``.

    The product runs over positive terms only. The result for ``n == 0`` is
    ``1`` whatever ``k`` is, and a negative ``n`` yields ``0``.

    Raises ValueError if ``k`` is not strictly positive.
    """
    n = operator.index(n)
    k = operator.index(k)
    if k <= 0:
        raise ValueError("k must be strictly greater than 0")
    if n < 0:
        return 0
    return _step_product(n, k)