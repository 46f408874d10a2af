"""
The public value types: pitch classes, pitches, interval classes and intervals.

All four are immutable and validated on construction. Arithmetic on them is carried out by
mapping the operands onto tonal elements, see `convert` and `ops`.
"""

from __future__ import annotations

from typing import Any, Callable, Self
from numbers import Integral

from .math_ import AbelianElement
from .domains import (
    DiatonicPitch,
    PitchAlteration,
    DiatonicInterval,
    IntervalQuality,
    IntervalDirection,
    Names,
)
from .validation import (
    validDiatonicPitch,
    validPitchAlteration,
    validOctave,
    validDiatonicInterval,
    validIntervalQuality,
    validIntervalClass,
    validIntervalDirection,
)
from .utils.cls import NewHelperMixin, cachedClassProp, cachedGetter

__all__ = ["PitchClass", "Pitch", "IntervalClass", "Interval"]

_MISSING = object()


def _resolveInt(value: Any, name: str) -> int:
    if not isinstance(value, Integral) or isinstance(value, bool):
        raise TypeError(f"`{name}` must be an integer, got {type(value).__name__}")
    return int(value)


def _resolveOctave(value: Any) -> int:
    octave = _resolveInt(value, "octave")
    if not validOctave(octave):
        raise ValueError(f"Octave must not be negative: {octave}")
    return octave


class PitchClass(NewHelperMixin):
    """A note letter with an accidental, without octave."""

    __slots__ = ("_diatonicPitch", "_alteration", "_hash")
    _diatonicPitch: DiatonicPitch
    _alteration: PitchAlteration

    def __new__(
        cls,
        diatonicPitch: DiatonicPitch | Integral,
        alteration: PitchAlteration | Integral = PitchAlteration.NATURAL,
    ) -> Self:
        diatonicPitch = _resolveInt(diatonicPitch, "diatonicPitch")
        alteration = _resolveInt(alteration, "alteration")
        if not validDiatonicPitch(diatonicPitch):
            raise ValueError(f"Invalid diatonic pitch: {diatonicPitch}")
        if not validPitchAlteration(alteration):
            raise ValueError(f"Invalid pitch alteration: {alteration}")
        return cls._newHelper(DiatonicPitch(diatonicPitch), PitchAlteration(alteration))

    @classmethod
    def _newImpl(cls, diatonicPitch: DiatonicPitch, alteration: PitchAlteration) -> Self:
        self = super().__new__(cls)
        self._diatonicPitch = diatonicPitch
        self._alteration = alteration
        return self

    @property
    def diatonicPitch(self) -> DiatonicPitch:
        return self._diatonicPitch

    @property
    def alteration(self) -> PitchAlteration:
        return self._alteration

    @property
    def tclass(self):
        from . import convert  # avoid cyclic import

        return convert.pitchClassToClass(self)

    def atOctave(self, octave: int = 0) -> Pitch:
        return Pitch(self, octave)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PitchClass):
            return NotImplemented
        return (
            self._diatonicPitch == other._diatonicPitch
            and self._alteration == other._alteration
        )

    @cachedGetter
    def __hash__(self) -> int:
        return hash((self._diatonicPitch, self._alteration))

    def __reduce__(self) -> tuple[Callable[..., Self], tuple[Any, ...]]:
        return (self._newImpl, (self._diatonicPitch, self._alteration))

    def __str__(self) -> str:
        return (
            f"{Names.DIATONIC_PITCH[self._diatonicPitch]}"
            f"{Names.PITCH_ALTERATION[self._alteration]}"
        )

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}("{self!s}")'


class Pitch(NewHelperMixin):
    """
    A pitch class placed in a non-negative octave.

    ```python
    Pitch(DiatonicPitch.E, PitchAlteration.FLAT, 4)  # Eb4
    Pitch(PitchClass(DiatonicPitch.E, PitchAlteration.FLAT), 4)  # the same pitch
    ```

    Pitches support `pitch + interval`, `pitch - interval` and `pitch - pitch`, the latter
    yielding the interval from the right operand to the left one.
    """

    __slots__ = ("_pclass", "_o", "_hash")
    _pclass: PitchClass
    _o: int

    def __new__(
        cls,
        arg1: DiatonicPitch | Integral | PitchClass,
        arg2: PitchAlteration | Integral = _MISSING,
        arg3: Integral = _MISSING,
        /,
    ) -> Self:
        if isinstance(arg1, PitchClass):
            # `pitchClass` and `octave`
            if arg3 is not _MISSING:
                raise TypeError("Too many arguments after a pitch class.")
            pclass = arg1
            octave = 0 if arg2 is _MISSING else arg2
        else:
            # `diatonicPitch`, `alteration` and `octave`
            pclass = PitchClass(
                arg1, PitchAlteration.NATURAL if arg2 is _MISSING else arg2
            )
            octave = 0 if arg3 is _MISSING else arg3
        return cls._newHelper(pclass, _resolveOctave(octave))

    @classmethod
    def _newImpl(cls, pclass: PitchClass, o: int) -> Self:
        self = super().__new__(cls)
        self._pclass = pclass
        self._o = o
        return self

    @property
    def pitchClass(self) -> PitchClass:
        return self._pclass

    @property
    def diatonicPitch(self) -> DiatonicPitch:
        return self._pclass.diatonicPitch

    @property
    def alteration(self) -> PitchAlteration:
        return self._pclass.alteration

    @property
    def o(self) -> int:
        return self._o

    @property
    def octave(self) -> int:
        return self._o

    @property
    def element(self):
        from . import convert  # avoid cyclic import

        return convert.pitchToElement(self)

    @property
    def mnn(self) -> int:
        """
        Note number of the pitch, counted in semitones from C0.
        """
        from . import ops  # avoid cyclic import

        return ops.pitchToMnn(self)

    def isEnharmonic(self, other: Pitch) -> bool:
        return self.mnn == other.mnn

    def __add__(self, other: Any) -> Pitch:
        if not isinstance(other, Interval):
            return NotImplemented
        from . import ops  # avoid cyclic import

        return ops.addPitch(self, other)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Pitch | Interval:
        from . import ops  # avoid cyclic import

        if isinstance(other, Pitch):
            return ops.subPitch(self, other)
        if isinstance(other, Interval):
            return ops.addPitch(self, -other)
        return NotImplemented

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._pclass == other._pclass and self._o == other._o

    @cachedGetter
    def __hash__(self) -> int:
        return hash((self._pclass, self._o))

    def __reduce__(self) -> tuple[Callable[..., Self], tuple[Any, ...]]:
        return (self._newImpl, (self._pclass, self._o))

    def __str__(self) -> str:
        return f"{self._pclass!s}{self._o}"

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}("{self!s}")'


class IntervalClass(NewHelperMixin):
    """
    A diatonic interval with a quality, without octave. Only the combinations listed in
    `INTERVAL_QUALITY_TABLE` exist.
    """

    __slots__ = ("_diatonicInterval", "_quality", "_hash")
    _diatonicInterval: DiatonicInterval
    _quality: IntervalQuality

    def __new__(
        cls,
        diatonicInterval: DiatonicInterval | Integral,
        quality: IntervalQuality | Integral,
    ) -> Self:
        diatonicInterval = _resolveInt(diatonicInterval, "diatonicInterval")
        quality = _resolveInt(quality, "quality")
        if not validDiatonicInterval(diatonicInterval):
            raise ValueError(f"Invalid diatonic interval: {diatonicInterval}")
        if not validIntervalQuality(quality):
            raise ValueError(f"Invalid interval quality: {quality}")
        diatonicInterval = DiatonicInterval(diatonicInterval)
        quality = IntervalQuality(quality)
        if not validIntervalClass(diatonicInterval, quality):
            raise ValueError(
                f"A {diatonicInterval.name.lower()} cannot be {quality.name.lower()}"
            )
        return cls._newHelper(diatonicInterval, quality)

    @classmethod
    def _newImpl(cls, diatonicInterval: DiatonicInterval, quality: IntervalQuality) -> Self:
        self = super().__new__(cls)
        self._diatonicInterval = diatonicInterval
        self._quality = quality
        return self

    @property
    def diatonicInterval(self) -> DiatonicInterval:
        return self._diatonicInterval

    @property
    def quality(self) -> IntervalQuality:
        return self._quality

    @property
    def tclass(self):
        from . import convert  # avoid cyclic import

        return convert.intervalClassToClass(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, IntervalClass):
            return NotImplemented
        return (
            self._diatonicInterval == other._diatonicInterval
            and self._quality == other._quality
        )

    @cachedGetter
    def __hash__(self) -> int:
        return hash((self._diatonicInterval, self._quality))

    def __reduce__(self) -> tuple[Callable[..., Self], tuple[Any, ...]]:
        return (self._newImpl, (self._diatonicInterval, self._quality))

    def __str__(self) -> str:
        return (
            f"{Names.INTERVAL_QUALITY[self._quality]} "
            f"{Names.DIATONIC_INTERVAL[self._diatonicInterval]}"
        )

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}("{self!s}")'


class Interval(AbelianElement, NewHelperMixin):
    """
    An interval class stacked on a number of whole octaves, going up or down.

    ```python
    Interval(DiatonicInterval.FIFTH, IntervalQuality.PERFECT)  # up a perfect fifth
    Interval(DiatonicInterval.THIRD, IntervalQuality.MINOR, 1, IntervalDirection.DOWN)
    Interval(IntervalClass(DiatonicInterval.THIRD, IntervalQuality.MINOR), 1, IntervalDirection.DOWN)
    ```

    The magnitude of an interval is never negative, its sign lives in the direction. The
    perfect prime has no direction and is always stored as going up.
    """

    __slots__ = ("_iclass", "_o", "_direction", "_hash")
    _iclass: IntervalClass
    _o: int
    _direction: IntervalDirection

    @cachedClassProp(key="_zero")
    def ZERO(cls) -> Self:
        """The perfect prime, which is the identity element of interval addition."""
        return cls._newHelper(
            IntervalClass._newHelper(DiatonicInterval.PRIME, IntervalQuality.PERFECT),
            0,
            IntervalDirection.UP,
        )

    def __new__(
        cls,
        arg1: DiatonicInterval | Integral | IntervalClass,
        arg2: IntervalQuality | Integral = _MISSING,
        arg3: Integral = _MISSING,
        arg4: IntervalDirection | Integral = _MISSING,
        /,
    ) -> Self:
        if isinstance(arg1, IntervalClass):
            # `intervalClass`, `octave` and `direction`
            if arg4 is not _MISSING:
                raise TypeError("Too many arguments after an interval class.")
            iclass = arg1
            octave = 0 if arg2 is _MISSING else arg2
            direction = IntervalDirection.UP if arg3 is _MISSING else arg3
        else:
            # `diatonicInterval`, `quality`, `octave` and `direction`
            if arg2 is _MISSING:
                raise TypeError("Interval quality is required.")
            iclass = IntervalClass(arg1, arg2)
            octave = 0 if arg3 is _MISSING else arg3
            direction = IntervalDirection.UP if arg4 is _MISSING else arg4

        octave = _resolveOctave(octave)
        direction = _resolveInt(direction, "direction")
        if not validIntervalDirection(direction):
            raise ValueError(f"Invalid interval direction: {direction}")
        direction = IntervalDirection(direction)
        if octave == 0 and iclass.diatonicInterval == DiatonicInterval.PRIME:
            if iclass.quality == IntervalQuality.DIMINISHED:
                raise ValueError("A prime within the first octave cannot be diminished")
            if iclass.quality == IntervalQuality.PERFECT:
                direction = IntervalDirection.UP
        return cls._newHelper(iclass, octave, direction)

    @classmethod
    def _newImpl(
        cls, iclass: IntervalClass, o: int, direction: IntervalDirection
    ) -> Self:
        self = super().__new__(cls)
        self._iclass = iclass
        self._o = o
        self._direction = direction
        return self

    @property
    def intervalClass(self) -> IntervalClass:
        return self._iclass

    @property
    def diatonicInterval(self) -> DiatonicInterval:
        return self._iclass.diatonicInterval

    @property
    def quality(self) -> IntervalQuality:
        return self._iclass.quality

    @property
    def o(self) -> int:
        return self._o

    @property
    def octave(self) -> int:
        return self._o

    @property
    def direction(self) -> IntervalDirection:
        return self._direction

    @property
    def element(self):
        from . import convert  # avoid cyclic import

        return convert.intervalToElement(self)

    def isEnharmonic(self, other: Interval) -> bool:
        return self.element.chromatic == other.element.chromatic

    def __add__(self, other: Any) -> Self:
        if not isinstance(other, Interval):
            return NotImplemented
        from . import ops  # avoid cyclic import

        return ops.addInterval(self, other)

    def __sub__(self, other: Any) -> Self:
        if not isinstance(other, Interval):
            return NotImplemented
        from . import ops  # avoid cyclic import

        return ops.subInterval(self, other)

    def __neg__(self) -> Self:
        if self._direction == IntervalDirection.UP:
            direction = IntervalDirection.DOWN
        else:
            direction = IntervalDirection.UP
        return self.__class__(self._iclass, self._o, direction)

    def __abs__(self) -> Self:
        if self._direction == IntervalDirection.DOWN:
            return -self
        return self

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (
            self._iclass == other._iclass
            and self._o == other._o
            and self._direction == other._direction
        )

    @cachedGetter
    def __hash__(self) -> int:
        return hash((self._iclass, self._o, self._direction))

    def __reduce__(self) -> tuple[Callable[..., Self], tuple[Any, ...]]:
        return (self._newImpl, (self._iclass, self._o, self._direction))

    def __str__(self) -> str:
        return (
            f"{Names.INTERVAL_DIRECTION[self._direction]} "
            f"{self._o} Octave(s) + {self._iclass!s}"
        )

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}("{self!s}")'
