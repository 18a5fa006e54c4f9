"""Zero-phase forward-backward filtering with second-order sections."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence

from sigkit.padding import Pad, pad
from sigkit.sosfilt import Sos, sosfilt
from sigkit.sosfilt_zi import sosfilt_zi

__all__ = ["sosfiltfilt"]


def _scaled_copies(sections: Sequence[Sos], factor: float) -> list[Sos]:
    return [
        dataclasses.replace(s, zi0=s.zi0 * factor, zi1=s.zi1 * factor)
        for s in sections
    ]


def sosfiltfilt(y: Iterable[float], sos: Sequence[Sos]) -> list[float]:
    """Filter ``y`` forwards and then backwards through the cascade ``sos``.

    The signal is extended at both ends by odd reflection, and each pass
    starts from the steady-state response to the first sample it sees, so
    the output has no phase shift and little edge transient. The sections
    passed in are left unchanged.

    Raises ValueError if the signal is not longer than the edge extension
    (three times the effective number of filter taps).
    """
    n = len(sos)
    ntaps = 2 * n + 1
    bzeros = sum(1 for s in sos if s.b[2] == 0.0)
    azeros = sum(1 for s in sos if s.a[2] == 0.0)
    ntaps -= min(bzeros, azeros)

    samples = [float(v) for v in y]
    edge, extended = pad(Pad.ODD, None, samples, 0, ntaps)
    extended = [float(v) for v in extended]

    init = [dataclasses.replace(s) for s in sos]
    sosfilt_zi(init)

    forward = sosfilt(extended, _scaled_copies(init, extended[0]))
    backward = sosfilt(reversed(forward), _scaled_copies(init, forward[-1]))

    result = backward[edge : edge + len(samples)]
    result.reverse()
    return result