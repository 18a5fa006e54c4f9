"""Cascaded second-order-section (biquad) filtering."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from dataclasses import dataclass

import numpy as np

__all__ = [
    "Sos",
    "sosfilt",
    "sosfilt_iter",
    "sosfilt_item",
    "sosfilt_fast32",
    "sosfilt_ifast32",
]


@dataclass
class Sos:
    """One second-order section with its transposed direct form II state.

    ``b`` holds the numerator and ``a`` the denominator coefficients, each
    three long. ``zi0`` and ``zi1`` are the filter delays. They are updated
    as samples pass through, so filtering again with the same sections
    carries on from where the previous call stopped.
    """

    b: tuple[float, float, float]
    a: tuple[float, float, float]
    zi0: float = 0.0
    zi1: float = 0.0

    def __post_init__(self) -> None:
        self.b = tuple(float(v) for v in self.b)
        self.a = tuple(float(v) for v in self.a)
        if len(self.b) != 3 or len(self.a) != 3:
            raise ValueError("a second-order section needs three b and three a coefficients")
        self.zi0 = float(self.zi0)
        self.zi1 = float(self.zi1)

    @classmethod
    def from_scipy(cls, sections: int, coefficients: Iterable[float]) -> list[Sos]:
        """Build sections from a flat ``[b0, b1, b2, a0, a1, a2] * sections`` array."""
        values = [float(v) for v in coefficients]
        if sections < 0 or len(values) != 6 * sections:
            raise ValueError(f"expected {6 * max(sections, 0)} coefficients for {sections} sections, got {len(values)}")
        return [cls(b=tuple(values[i : i + 3]), a=tuple(values[i + 3 : i + 6])) for i in range(0, len(values), 6)]


def _biquad(x: float, section: Sos) -> float:
    b, a = section.b, section.a
    out = b[0] * x + section.zi0
    section.zi0 = b[1] * x - a[1] * out + section.zi1
    section.zi1 = b[2] * x - a[2] * out
    return out


def sosfilt_item(y: float, sos: Sequence[Sos]) -> float:
    """Pass a single sample through the cascade ``sos``, updating its state."""
    x = float(y)
    for section in sos:
        x = _biquad(x, section)
    return x


def sosfilt_iter(y: Iterable[float], sos: Sequence[Sos]) -> Iterator[float]:
    """Lazily filter ``y`` through ``sos``; the state advances as values are drawn."""
    for sample in y:
        yield sosfilt_item(sample, sos)


def sosfilt(y: Iterable[float], sos: Sequence[Sos]) -> list[float]:
    """Filter ``y`` through the cascade ``sos`` and return the output samples.

    The sections keep their final state, which plays the part of both the
    initial and the final conditions of a stateful filter.
    """
    return [sosfilt_item(sample, sos) for sample in y]


def _filter32(samples: np.ndarray, sos: MutableSequence[Sos]) -> np.ndarray:
    coeffs = [
        (
            np.float32(s.b[0]),
            np.float32(s.b[1]),
            np.float32(s.b[2]),
            np.float32(s.a[1]),
            np.float32(s.a[2]),
        )
        for s in sos
    ]
    states = [[np.float32(s.zi0), np.float32(s.zi1)] for s in sos]
    out = np.empty(samples.shape[0], dtype=np.float32)
    for index, sample in enumerate(samples):
        x = np.float32(sample)
        for (b0, b1, b2, a1, a2), state in zip(coeffs, states):
            new = b0 * x + state[0]
            state[0] = b1 * x - a1 * new + state[1]
            state[1] = b2 * x - a2 * new
            x = new
        out[index] = x
    for section, (z0, z1) in zip(sos, states):
        section.zi0 = float(z0)
        section.zi1 = float(z1)
    return out


def sosfilt_fast32(y: Iterable[float], sos: MutableSequence[Sos]) -> np.ndarray:
    """Filter ``y`` through ``sos`` in single precision.

    Coefficients, state and samples are rounded to 32-bit floats and every
    operation is carried out at that precision. Returns a float32 array.
    """
    samples = np.asarray(y if isinstance(y, np.ndarray) else list(y), dtype=np.float32)
    if samples.ndim != 1:
        raise ValueError("the signal must be one-dimensional")
    return _filter32(samples, sos)


def sosfilt_ifast32(y: Iterable[int], sos: MutableSequence[Sos]) -> np.ndarray:
    """Filter integer samples ``y`` through ``sos`` in single precision.

    Each sample must be an integer; it is converted to a 32-bit float
    before filtering. Returns a float32 array.
    """
    values = [operator.index(v) for v in y]
    samples = np.array([float(v) for v in values], dtype=np.float32)
    return _filter32(samples, sos)