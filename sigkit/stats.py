"""Descriptive statistics over sequences of numbers."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Iterator
from itertools import pairwise

__all__ = [
    "median",
    "mean",
    "variance",
    "stdev",
    "autocorr",
    "autocorr_fast",
    "rms",
    "lag_diff",
    "rmssd",
    "zscore",
    "mod_zscore",
    "median_abs_deviation",
]

_MAD_SCALE = 0.6745
_TILE = 4


def _all_integral(values: list) -> bool:
    return bool(values) and all(isinstance(v, numbers.Integral) for v in values)


def _divide(total, count, integral: bool):
    """Divide, truncating toward zero when working with integers."""
    if integral:
        quotient = abs(total) // abs(count)
        return quotient if (total >= 0) == (count > 0) else -quotient
    return _fdiv(total, count)


def _fdiv(a: float, b: float) -> float:
    """Floating point division that yields inf or nan instead of raising."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _select(values: list, k: int):
    """Return the k-th smallest element (0-based) using quickselect."""
    while True:
        if len(values) == 1:
            return values[0]
        pivot = values[len(values) // 2]
        lower = [v for v in values if v < pivot]
        upper = [v for v in values if v > pivot]
        pivots = len(values) - len(lower) - len(upper)
        if k < len(lower):
            values = lower
        elif k < len(lower) + pivots:
            return pivot
        else:
            k -= len(lower) + pivots
            values = upper


def median(y: Iterable) -> tuple:
    """Return the median of ``y`` and the number of points considered.

    An empty input yields ``(0.0, 0)``. For integer data of even length the
    mean of the two middle values is truncated toward zero.
    """
    values = list(y)
    n = len(values)
    if n == 0:
        return 0.0, 0
    if n == 1:
        return values[0], 1
    if n % 2 == 1:
        return _select(values, n // 2), n
    low = _select(values, n // 2 - 1)
    high = _select(values, n // 2)
    return _divide(low + high, 2, _all_integral([low, high])), n


def mean(y: Iterable) -> tuple:
    """Return the mean of ``y`` and the number of points averaged.

    An empty input yields ``(0.0, 0)``. Integer data is divided with
    truncation toward zero.
    """
    values = list(y)
    if not values:
        return 0.0, 0
    return _divide(sum(values), len(values), _all_integral(values)), len(values)


def variance(y: Iterable) -> tuple[float, int]:
    """Return the population variance of ``y`` and the number of points."""
    values = [float(v) for v in y]
    avg, n = mean(values)
    if n == 0:
        return 0.0, 0
    total = math.fsum((v - avg) ** 2 for v in values)
    return total / n, n


def stdev(y: Iterable) -> tuple[float, int]:
    """Return the population standard deviation of ``y`` and the number of points."""
    var, n = variance(y)
    if n == 0:
        return 0.0, 0
    return math.sqrt(var), n


def autocorr(y: Iterable, k: int) -> float:
    """Autocorrelation of ``y`` at lag ``k`` using the 1/N formulation."""
    values = [float(v) for v in y]
    avg, n = mean(values)
    var, _ = variance(values)
    autocovariance = _fdiv(
        math.fsum((a - avg) * (b - avg) for a, b in zip(values, values[k:])),
        float(n),
    )
    return _fdiv(autocovariance, var)


def autocorr_fast(y: Iterable, count: int, skip: int) -> tuple[float, list[float]]:
    """Unscaled autocorrelation of ``y`` for lags ``skip .. skip + count``.

    The signal is centred on its mean; the lags are neither divided by the
    signal length nor by the variance. Products are accumulated in blocks of
    four, and a trailing partial block is not included.

    Returns the variance of the signal together with the list of lags.
    """
    values = [float(v) for v in y]
    n = len(values)
    if n < count + skip:
        raise ValueError("signal length must be at least count + skip")
    if n == 0:
        return math.nan, []

    avg = sum(values) / n
    centred = [v - avg for v in values]
    var = sum(v * v for v in centred) / n

    lags = []
    for h in range(skip, skip + count):
        usable = (n - h) // _TILE * _TILE
        lags.append(sum(a * b for a, b in zip(centred[:usable], centred[h : h + usable])))
    return var, lags


def rms(y: Iterable) -> float:
    """Root mean square of ``y``; the signal is assumed to have zero mean."""
    values = [float(v) for v in y]
    return math.sqrt(_fdiv(sum(v * v for v in values), float(len(values))))


def lag_diff(y: Iterable) -> Iterator:
    """Yield successive differences ``y[i + 1] - y[i]``."""
    for previous, current in pairwise(y):
        yield current - previous


def rmssd(y: Iterable) -> float:
    """Root mean square of successive differences."""
    squares = [float(d) ** 2 for d in lag_diff(y)]
    avg, _ = mean(squares)
    return math.sqrt(avg)


def zscore(y: Iterable) -> Iterator[float]:
    """Yield the z score of each value relative to the sample mean and deviation."""
    values = [float(v) for v in y]
    avg, _ = mean(values)
    deviation, _ = stdev(values)

    def scores() -> Iterator[float]:
        for v in values:
            yield _fdiv(v - avg, deviation)

    return scores()


def mod_zscore(y: Iterable) -> Iterator[float]:
    """Yield the modified z score of each value, based on median and MAD."""
    values = [float(v) for v in y]
    med, _ = median(values)
    mad, _ = median_abs_deviation(values)

    def scores() -> Iterator[float]:
        for v in values:
            yield _fdiv((v - med) * _MAD_SCALE, mad)

    return scores()


def median_abs_deviation(y: Iterable) -> tuple[float, int]:
    """Median of the absolute deviations from the median, and the point count."""
    values = [float(v) for v in y]
    med, _ = median(values)
    return median(abs(v - med) for v in values)