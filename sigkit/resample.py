"""Fourier-domain resampling of signals."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

__all__ = ["resample"]


def resample(x: Iterable[float], n: int) -> np.ndarray:
    """Resample ``x`` to ``n`` samples using the Fourier transform.

    The spectrum is truncated when downsampling and zero-padded in the high
    frequency bins when upsampling; no windowing is applied and odd and even
    lengths are treated alike. The result is the real part of the scaled
    inverse transform.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    signal = np.asarray(list(x), dtype=float)
    length = signal.size
    if n == 0:
        return np.zeros(0)
    if length == 0:
        return np.full(n, np.nan)

    spectrum = np.fft.fft(signal)
    padded = np.zeros(n, dtype=complex)
    half = min(length, n) // 2
    if half:
        padded[:half] = spectrum[:half]
        padded[n - half :] = spectrum[length - half :]

    # numpy's inverse transform divides by n; undo that, then scale by the input length.
    restored = np.fft.ifft(padded) * n
    return restored.real / length