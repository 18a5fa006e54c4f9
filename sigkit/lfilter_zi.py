"""Steady-state initial conditions for a direct-form IIR filter."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["lfilter_zi"]


def lfilter_zi(b: Iterable[float], a: Iterable[float]) -> list[float]:
    """Initial filter state for the steady state of the step response.

    ``b`` and ``a`` are the numerator and denominator coefficients and must
    have the same length, at least two. Leading zeros of ``a`` are dropped
    and both are normalised so that ``a[0] == 1``. The returned state has one
    element fewer than the coefficient lists; scaled by the first sample, it
    makes the filter output start at the steady value.

    Raises ValueError for coefficient lists of different or too short length
    and when every coefficient of ``a`` is zero.
    """
    num = [float(v) for v in b]
    den = [float(v) for v in a]
    if len(num) != len(den):
        raise ValueError("b and a must have the same length")
    m = len(num)

    first = next((i for i, v in enumerate(den) if v != 0.0), None)
    if first is None:
        raise ValueError("there must be at least one nonzero `a` coefficient")
    if m < 2:
        raise ValueError("the filter needs at least two coefficients")

    den = den[first:]
    a0 = den[0]
    if a0 != 1.0:
        den = [v / a0 for v in den]
        num = [v / a0 for v in num]
    den += [0.0] * (m - len(den))

    # Solves zi = A^T zi + B for the companion matrix A of the denominator.
    b0 = num[0]
    z0 = sum(bi - ai * b0 for bi, ai in zip(num[1:], den[1:])) / sum(den)

    zi = [z0]
    asum = 1.0
    csum = 0.0
    for ak, bk in zip(den[1 : m - 1], num[1 : m - 1]):
        asum += ak
        csum += bk - ak * b0
        zi.append(asum * z0 - csum)
    return zi