"""
Value domains of the tonal system: the enumerations that the public value types are built
from, and the static lookup tables that the algebra relies on.

The numeric values of the enumerations are load-bearing. `DiatonicPitch.C` and
`DiatonicInterval.PRIME` are both `0` so that a diatonic pitch or interval maps onto a
diatonic point by identity, and `PitchAlteration.NATURAL` is the origin of the alteration
axis. Every table below is keyed explicitly by enumeration members rather than indexed by
position wherever the mapping is not a plain shift.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import IntEnum

from bidict import frozenbidict
import numpy as np
import pyrsistent as pyr

from .utils.cls import noInstance

__all__ = [
    "DiatonicPitch",
    "PitchAlteration",
    "DiatonicInterval",
    "IntervalQuality",
    "IntervalDirection",
    "Names",
    "N_POINTS",
    "MIN_ALTERATION",
    "MAX_ALTERATION",
    "MAJOR_SCALE_TONES",
    "PERFECTABLE_STEPS",
    "PERFECT_QUALITIES",
    "MAJOR_QUALITIES",
    "INTERVAL_QUALITY_TABLE",
    "mpc",
]


class DiatonicPitch(IntEnum):
    """The seven natural note letters, with C as origin."""

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6


class PitchAlteration(IntEnum):
    """Accidentals, from double flat to double sharp."""

    DOUBLE_FLAT = FF = 0
    FLAT = F = 1
    NATURAL = N = 2
    SHARP = S = 3
    DOUBLE_SHARP = SS = 4

    @property
    def degree(self) -> int:
        """Signed alteration in semitones, `0` for natural."""
        return self - PitchAlteration.NATURAL


class DiatonicInterval(IntEnum):
    """Interval sizes counted in staff steps, independent of quality."""

    PRIME = UNISON = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    SIXTH = 5
    SEVENTH = 6


class IntervalQuality(IntEnum):
    """
    Interval qualities. Which ones are admitted depends on the diatonic interval, see
    `INTERVAL_QUALITY_TABLE`.
    """

    DIMINISHED = d = 0
    MINOR = m = 1
    MAJOR = M = 2
    PERFECT = P = 3
    AUGMENTED = A = 4


class IntervalDirection(IntEnum):
    UP = 0
    DOWN = 1


N_POINTS = 7
"""number of diatonic points in an octave"""

MIN_ALTERATION = -2
MAX_ALTERATION = 2

MAJOR_SCALE_TONES: Sequence[int] = np.sort(np.arange(-1, 6) * 7 % 12)
"""
Major scale tones in increasing order, i.e. the semitone offset of each diatonic point from
C.

**Value**: `np.array([0, 2, 4, 5, 7, 9, 11])`
"""
MAJOR_SCALE_TONES.flags.writeable = False

PERFECTABLE_STEPS = frozenset((0, 3, 4))
"""Collection of interval step values that can have quality "perfect"."""

PERFECT_QUALITIES: Mapping[IntervalQuality, int] = frozenbidict(
    (
        (IntervalQuality.DIMINISHED, -1),
        (IntervalQuality.PERFECT, 0),
        (IntervalQuality.AUGMENTED, 1),
    )
)
"""Mapping from quality to alteration for primes, fourths and fifths."""

MAJOR_QUALITIES: Mapping[IntervalQuality, int] = frozenbidict(
    (
        (IntervalQuality.DIMINISHED, -2),
        (IntervalQuality.MINOR, -1),
        (IntervalQuality.MAJOR, 0),
        (IntervalQuality.AUGMENTED, 1),
    )
)
"""Mapping from quality to alteration for seconds, thirds, sixths and sevenths."""

INTERVAL_QUALITY_TABLE: Mapping[DiatonicInterval, frozenbidict] = pyr.pmap(
    {
        di: PERFECT_QUALITIES if di in PERFECTABLE_STEPS else MAJOR_QUALITIES
        for di in DiatonicInterval
    }
)
"""
Legal qualities of every diatonic interval together with the alteration each of them
stands for. A quality that is missing from an interval's mapping is illegal for it, e.g.
there is no minor prime and no perfect second. Use `.inv` on a mapping to go from an
alteration back to the quality.
"""


def _readonly(names: list[str]) -> np.ndarray:
    arr = np.array(names)
    arr.flags.writeable = False
    return arr


@noInstance
class Names:
    """Display names, indexed by the corresponding enumeration."""

    DIATONIC_PITCH = _readonly(["C", "D", "E", "F", "G", "A", "B"])
    PITCH_ALTERATION = _readonly(["bb", "b", "", "#", "##"])
    DIATONIC_INTERVAL = _readonly(
        ["Prime", "Second", "Third", "Fourth", "Fifth", "Sixth", "Seventh"]
    )
    INTERVAL_QUALITY = _readonly(
        ["Diminished", "Minor", "Major", "Perfect", "Augmented"]
    )
    INTERVAL_DIRECTION = _readonly(["Up", "Down"])


def mpc(point: int) -> int:
    """
    Semitone offset of a diatonic point from C, i.e. its *music pitch class*.
    """
    if not 0 <= point < N_POINTS:
        raise ValueError(f"Diatonic point out of range 0..6: {point}")
    return int(MAJOR_SCALE_TONES[point])
