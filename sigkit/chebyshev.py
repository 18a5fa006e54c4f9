"""Evaluation of Chebyshev series."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["chbevl"]


def chbevl(x: float, coef: Sequence[float]) -> float:
    """Evaluate the Chebyshev series with coefficients ``coef`` at ``x / 2``.

    Coefficients are stored highest order first, so the zero-order term is
    the last one. An empty coefficient list yields ``0.0``.
    """
    if not coef:
        return 0.0
    b0, b1, b2 = coef[0], 0.0, 0.0
    for c in coef:
        b0, b1, b2 = x * b0 - b1 + c, b0, b1
    return (b0 - b2) / 2.0