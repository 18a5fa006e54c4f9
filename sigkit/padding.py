"""Edge extension of signals ahead of filtering."""

from __future__ import annotations

from enum import Enum

import numpy as np
from numpy.typing import ArrayLike

__all__ = ["Pad", "pad", "odd_ext"]


class Pad(Enum):
    """Ways of extending a signal past its ends."""

    NONE = "none"
    EVEN = "even"
    ODD = "odd"
    CONSTANT = "constant"


def _check_axis(data: np.ndarray, axis: int) -> None:
    if data.ndim not in (1, 2):
        raise ValueError("only one- and two-dimensional arrays can be extended")
    if axis not in (0, 1) or axis >= data.ndim:
        raise ValueError(f"axis {axis} is out of range for an array of {data.ndim} dimensions")


def pad(
    padtype: Pad,
    padlen: int | None,
    x: ArrayLike,
    axis: int,
    ntaps: int,
) -> tuple[int, np.ndarray]:
    """Extend ``x`` along ``axis`` and return the edge length with the result.

    The edge length is ``padlen``, or three times ``ntaps`` when ``padlen`` is
    None; it is zero for :attr:`Pad.NONE`. The array must be longer than the
    edge along ``axis``. Only odd extension is supported besides no padding.
    """
    data = np.asarray(x)
    if padtype is Pad.NONE:
        padlen = 0
    edge = 3 * ntaps if padlen is None else padlen

    _check_axis(data, axis)
    if data.shape[axis] <= edge:
        raise ValueError("the array must be longer than the padding along the axis")

    if padtype is Pad.NONE or edge == 0:
        return edge, data.copy()
    if padtype is Pad.ODD:
        return edge, odd_ext(data, edge, axis)
    raise ValueError(f"{padtype.value} padding is not supported")


def odd_ext(x: ArrayLike, n: int, axis: int) -> np.ndarray:
    """Extend ``x`` by ``n`` points at each end of ``axis`` with odd symmetry.

    The extension mirrors the signal through its end points: left points are
    ``2*x[0] - x[i]`` and right points ``2*x[-1] - x[-1-i]``.

    Raises ValueError if ``n`` is not smaller than the length along ``axis``.
    """
    data = np.asarray(x)
    _check_axis(data, axis)
    if n < 1:
        return data.copy()
    if n >= data.shape[axis]:
        raise ValueError("the extension must be shorter than the array along the axis")

    moved = np.moveaxis(data, axis, 0)
    left = 2 * moved[0] - moved[n:0:-1]
    right = 2 * moved[-1] - moved[-2 : -n - 2 : -1]
    return np.moveaxis(np.concatenate([left, moved, right]), 0, axis)