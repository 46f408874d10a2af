"""
Conversions between the public value types and the internal tonal classes and elements.

Every conversion checks its input, raises `ValueError` when the input cannot be
represented on the other side, and asserts that its output is valid. A failing assertion
means a bug in this module, never bad input.
"""

from __future__ import annotations

from .domains import (
    DiatonicPitch,
    PitchAlteration,
    DiatonicInterval,
    IntervalDirection,
    INTERVAL_QUALITY_TABLE,
)
from .validation import (
    validClass,
    validElement,
    validPitchClass,
    validPitch,
    validIntervalClass,
    validInterval,
)
from .element import TonalClass, TonalElement
from .notation import PitchClass, Pitch, IntervalClass, Interval

__all__ = [
    "pitchClassToClass",
    "classToPitchClass",
    "intervalClassToClass",
    "classToIntervalClass",
    "pitchToElement",
    "elementToPitch",
    "intervalToElement",
    "elementToInterval",
]


def _expect(value: object, cls: type, name: str) -> None:
    if not isinstance(value, cls):
        raise TypeError(
            f"`{name}` must be a {cls.__name__}, got {type(value).__name__}"
        )


def pitchClassToClass(pc: PitchClass) -> TonalClass:
    _expect(pc, PitchClass, "pc")
    point = pc.diatonicPitch - DiatonicPitch.C
    alteration = pc.alteration - PitchAlteration.NATURAL
    assert validClass(point, alteration)
    return TonalClass._newHelper(point, alteration)


def classToPitchClass(tc: TonalClass) -> PitchClass:
    _expect(tc, TonalClass, "tc")
    dp = DiatonicPitch(tc.point + DiatonicPitch.C)
    pa = PitchAlteration(tc.alteration + PitchAlteration.NATURAL)
    assert validPitchClass(dp, pa)
    return PitchClass._newHelper(dp, pa)


def intervalClassToClass(ic: IntervalClass) -> TonalClass:
    _expect(ic, IntervalClass, "ic")
    point = ic.diatonicInterval - DiatonicInterval.PRIME
    alteration = INTERVAL_QUALITY_TABLE[ic.diatonicInterval][ic.quality]
    assert validClass(point, alteration)
    return TonalClass._newHelper(point, alteration)


def classToIntervalClass(tc: TonalClass) -> IntervalClass:
    """
    Name the interval spanned by a tonal class. Raises `ValueError` when the alteration has
    no quality on that step, e.g. a prime lowered by two semitones.
    """
    _expect(tc, TonalClass, "tc")
    di = DiatonicInterval(tc.point + DiatonicInterval.PRIME)
    quality = INTERVAL_QUALITY_TABLE[di].inv.get(tc.alteration)
    if quality is None:
        raise ValueError(
            f"No interval quality for a {di.name.lower()} altered by {tc.alteration}"
        )
    assert validIntervalClass(di, quality)
    return IntervalClass._newHelper(di, quality)


def pitchToElement(p: Pitch) -> TonalElement:
    _expect(p, Pitch, "p")
    tc = pitchClassToClass(p.pitchClass)
    assert validElement(tc.point, tc.alteration, p.o)
    return TonalElement._newHelper(tc, p.o)


def elementToPitch(te: TonalElement) -> Pitch:
    """Raises `ValueError` for elements below octave 0."""
    _expect(te, TonalElement, "te")
    if te.o < 0:
        raise ValueError(f"Pitch octave must not be negative: {te.o}")
    pc = classToPitchClass(te.tclass)
    assert validPitch(pc.diatonicPitch, pc.alteration, te.o)
    return Pitch._newHelper(pc, te.o)


def intervalToElement(i: Interval) -> TonalElement:
    """Descending intervals become negative elements."""
    _expect(i, Interval, "i")
    tc = intervalClassToClass(i.intervalClass)
    te = TonalElement._newHelper(tc, i.o)
    if i.direction == IntervalDirection.DOWN:
        # inverting an interval never needs more than one extra accidental
        te = -te
    assert validElement(te.point, te.alteration, te.o)
    return te


def elementToInterval(te: TonalElement) -> Interval:
    """
    Negative elements become descending intervals. Raises `ValueError` when the element
    spans no named interval, or when the inverse of a negative element is not
    representable.
    """
    _expect(te, TonalElement, "te")
    if te.sgn < 0:
        te = -te
        direction = IntervalDirection.DOWN
    else:
        direction = IntervalDirection.UP
    ic = classToIntervalClass(te.tclass)
    assert te.o >= 0
    assert validInterval(ic.diatonicInterval, ic.quality, te.o, direction)
    return Interval._newHelper(ic, te.o, direction)
