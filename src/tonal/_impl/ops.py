from __future__ import annotations

from .convert import (
    _expect,
    pitchToElement,
    elementToPitch,
    intervalToElement,
    elementToInterval,
)
from .notation import Pitch, Interval

__all__ = ["addPitch", "addInterval", "subPitch", "subInterval", "pitchToMnn"]


def addPitch(p: Pitch, i: Interval) -> Pitch:
    """
    Shift a pitch by an interval. Raises `ValueError` when the result would fall below
    octave 0 or need more than two accidentals.
    """
    _expect(p, Pitch, "p")
    _expect(i, Interval, "i")
    return elementToPitch(pitchToElement(p) + intervalToElement(i))


def addInterval(i0: Interval, i1: Interval) -> Interval:
    _expect(i0, Interval, "i0")
    _expect(i1, Interval, "i1")
    return elementToInterval(intervalToElement(i0) + intervalToElement(i1))


def subPitch(p0: Pitch, p1: Pitch) -> Interval:
    """
    The interval leading from `p1` to `p0`.

    ```python
    subPitch(Pitch(DiatonicPitch.C, PitchAlteration.N, 1), Pitch(DiatonicPitch.G))  # up a P4
    ```
    """
    _expect(p0, Pitch, "p0")
    _expect(p1, Pitch, "p1")
    return elementToInterval(pitchToElement(p0) - pitchToElement(p1))


def subInterval(i0: Interval, i1: Interval) -> Interval:
    _expect(i0, Interval, "i0")
    _expect(i1, Interval, "i1")
    return elementToInterval(intervalToElement(i0) - intervalToElement(i1))


def pitchToMnn(p: Pitch) -> int:
    """Note number of a pitch, i.e. the chromatic value of its element."""
    _expect(p, Pitch, "p")
    return pitchToElement(p).chromatic
