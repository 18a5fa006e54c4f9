"""Steady-state initial conditions for cascaded second-order sections."""

from __future__ import annotations

from collections.abc import Iterable

from sigkit.lfilter_zi import lfilter_zi
from sigkit.sosfilt import Sos

__all__ = ["sosfilt_zi"]


def sosfilt_zi(sections: Iterable[Sos]) -> None:
    """Set the state of each section to the steady state of the step response.

    The state of each section is scaled by the DC gain of the sections
    before it, so a unit step passes through the whole cascade without a
    transient. The sections are updated in place.
    """
    scale = 1.0
    for section in sections:
        zi = lfilter_zi(section.b, section.a)
        section.zi0 = scale * zi[0]
        section.zi1 = scale * zi[1]
        scale *= sum(section.b) / sum(section.a)