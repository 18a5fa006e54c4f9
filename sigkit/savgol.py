"""Savitzky-Golay smoothing and differentiation filters."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

__all__ = ["savgol_filter", "savgol_coeffs"]


def savgol_coeffs(
    window_length: int,
    polyorder: int,
    deriv: int | None = None,
    delta: float | None = None,
) -> list[float]:
    """Design the FIR coefficients of a one-dimensional Savitzky-Golay filter.

    ``deriv`` is the order of the derivative to compute (default 0) and
    ``delta`` the sample spacing (default 1). A derivative order above
    ``polyorder`` yields all zeros.

    Raises ValueError if ``polyorder`` is not less than ``window_length``.
    """
    if polyorder >= window_length:
        raise ValueError("polyorder must be less than window_length")

    half_window = window_length // 2
    offset = 0.5 if window_length % 2 == 0 else 0.0
    pos = np.array([half_window - i - offset for i in range(window_length)], dtype=float)

    der = 0 if deriv is None else deriv
    step = 1.0 if delta is None else float(delta)

    if der > polyorder:
        return [0.0] * window_length

    # Vandermonde system: row i holds the i-th powers of the positions.
    vander = np.vstack([pos**i for i in range(polyorder + 1)])
    rhs = np.zeros(polyorder + 1)
    rhs[der] = math.factorial(der) / step**der

    solution, *_ = np.linalg.lstsq(vander, rhs, rcond=None)
    return [float(v) for v in solution]


def savgol_filter(
    y: Iterable[float],
    window_length: int,
    polyorder: int,
    deriv: int | None = None,
    delta: float | None = None,
) -> list[float]:
    """Apply a Savitzky-Golay filter to ``y``.

    The signal is padded at each end by repeating its nearest edge value and
    convolved with the coefficients from :func:`savgol_coeffs`. The output has
    the length of the input; an empty input gives an empty list.

    Raises ValueError if ``window_length`` is even or smaller than
    ``polyorder + 2``.
    """
    if window_length % 2 == 0:
        raise ValueError("window_length must be odd")
    if window_length < polyorder + 2:
        raise ValueError("window_length is too small for the polynomials order")

    fir = np.array(savgol_coeffs(window_length, polyorder, deriv, delta)[::-1])

    samples = [float(v) for v in y]
    if not samples:
        return []

    half = window_length // 2
    data = np.array([samples[0]] * half + samples + [samples[-1]] * half)
    return [float(v) for v in np.correlate(data, fir, mode="valid")]