"""
Membership predicates for the value domains. None of them raises: a value of the wrong type
is simply not a member.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any

from .domains import (
    N_POINTS,
    MIN_ALTERATION,
    MAX_ALTERATION,
    DiatonicPitch,
    PitchAlteration,
    DiatonicInterval,
    IntervalQuality,
    IntervalDirection,
    INTERVAL_QUALITY_TABLE,
)

__all__ = [
    "validDiatonicPoint",
    "validAlteration",
    "validClass",
    "validElement",
    "validDiatonicPitch",
    "validPitchAlteration",
    "validPitchClass",
    "validOctave",
    "validPitch",
    "validDiatonicInterval",
    "validIntervalQuality",
    "validIntervalDirection",
    "validIntervalClass",
    "validInterval",
]


def _isInt(x: Any) -> bool:
    return isinstance(x, Integral) and not isinstance(x, bool)


def _inEnum(enum: type, x: Any) -> bool:
    return _isInt(x) and min(enum) <= x <= max(enum)


def validDiatonicPoint(x: Any) -> bool:
    return _isInt(x) and 0 <= x < N_POINTS


def validAlteration(a: Any) -> bool:
    return _isInt(a) and MIN_ALTERATION <= a <= MAX_ALTERATION


def validClass(point: Any, alteration: Any) -> bool:
    # every combination of point and alteration is a valid tonal class
    return validDiatonicPoint(point) and validAlteration(alteration)


def validElement(point: Any, alteration: Any, octave: Any) -> bool:
    """The octave of a tonal element may have any sign."""
    return validClass(point, alteration) and _isInt(octave)


def validDiatonicPitch(dp: Any) -> bool:
    return _inEnum(DiatonicPitch, dp)


def validPitchAlteration(pa: Any) -> bool:
    return _inEnum(PitchAlteration, pa)


def validPitchClass(dp: Any, pa: Any) -> bool:
    return validDiatonicPitch(dp) and validPitchAlteration(pa)


def validOctave(o: Any) -> bool:
    """Octaves of pitches and intervals are never negative."""
    return _isInt(o) and o >= 0


def validPitch(dp: Any, pa: Any, o: Any) -> bool:
    return validPitchClass(dp, pa) and validOctave(o)


def validDiatonicInterval(di: Any) -> bool:
    return _inEnum(DiatonicInterval, di)


def validIntervalQuality(q: Any) -> bool:
    return _inEnum(IntervalQuality, q)


def validIntervalDirection(d: Any) -> bool:
    return _inEnum(IntervalDirection, d)


def validIntervalClass(di: Any, q: Any) -> bool:
    """
    Besides both fields being in range, the quality must be admitted by the diatonic
    interval: primes, fourths and fifths are never minor or major, and the other intervals
    are never perfect.
    """
    return (
        validDiatonicInterval(di)
        and validIntervalQuality(q)
        and q in INTERVAL_QUALITY_TABLE[di]
    )


def validInterval(di: Any, q: Any, o: Any, d: Any) -> bool:
    """
    An interval of zero diatonic span cannot shrink below perfect, so a diminished prime is
    only valid from the first octave on. This cannot be decided from the interval class
    alone.
    """
    if not (validIntervalClass(di, q) and validOctave(o) and validIntervalDirection(d)):
        return False
    return not (
        o == 0 and di == DiatonicInterval.PRIME and q == IntervalQuality.DIMINISHED
    )
