from __future__ import annotations

from typing import Any, Callable, Literal, Self
from numbers import Integral

from .math_ import AbelianElement
from .domains import N_POINTS, MIN_ALTERATION, MAX_ALTERATION, mpc
from .validation import validDiatonicPoint, validAlteration, validElement
from .utils.cls import NewHelperMixin, cachedClassProp, cachedGetter

__all__ = ["TonalClass", "TonalElement"]

_MISSING = object()

_MIN_CLASS_CHROMATIC = mpc(0) + MIN_ALTERATION
_MAX_CLASS_CHROMATIC = mpc(N_POINTS - 1) + MAX_ALTERATION


def _resolveInt(value: Any, name: str) -> int:
    if not isinstance(value, Integral) or isinstance(value, bool):
        raise TypeError(f"`{name}` must be an integer, got {type(value).__name__}")
    return int(value)


class TonalClass(NewHelperMixin):
    """
    A diatonic point together with an alteration, without octave. This is the common
    representation behind both pitch classes and interval classes.
    """

    __slots__ = ("_point", "_alteration", "_hash")
    _point: int
    _alteration: int

    def __new__(cls, point: Integral, alteration: Integral = 0) -> Self:
        point = _resolveInt(point, "point")
        alteration = _resolveInt(alteration, "alteration")
        if not validDiatonicPoint(point):
            raise ValueError(f"Diatonic point out of range 0..6: {point}")
        if not validAlteration(alteration):
            raise ValueError(f"Alteration out of range -2..2: {alteration}")
        return cls._newHelper(point, alteration)

    @classmethod
    def _newImpl(cls, point: int, alteration: int) -> Self:
        # the implementation of creating a new instance without caching
        self = super().__new__(cls)
        self._point = point
        self._alteration = alteration
        return self

    @property
    def point(self) -> int:
        return self._point

    @property
    def alteration(self) -> int:
        return self._alteration

    @property
    def chromatic(self) -> int:
        """
        Chromatic tone of the class in semitones from C, ranging from -2 (C double flat) to
        13 (B double sharp).
        """
        return mpc(self._point) + self._alteration

    @property
    def pitchClass(self):
        from . import convert  # avoid cyclic import

        return convert.classToPitchClass(self)

    @property
    def intervalClass(self):
        from . import convert  # avoid cyclic import

        return convert.classToIntervalClass(self)

    def atOctave(self, octave: int = 0) -> TonalElement:
        """Place the class at the given octave."""
        return TonalElement(self, octave)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TonalClass):
            return NotImplemented
        return self._point == other._point and self._alteration == other._alteration

    @cachedGetter
    def __hash__(self) -> int:
        return hash((self._point, self._alteration))

    def __reduce__(self) -> tuple[Callable[..., Self], tuple[Any, ...]]:
        return (self._newImpl, (self._point, self._alteration))

    def __str__(self) -> str:
        return f"dt={self._point}, alt={self._alteration}"

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}("{self!s}")'


class TonalElement(AbelianElement, NewHelperMixin):
    """
    A tonal class placed at an octave of any sign. Every pitch and every interval maps onto
    a tonal element, and addition, inversion and subtraction are all defined here.

    An element is characterized by two scalar projections: its `diatonic` value (staff steps
    from the origin) and its `chromatic` value (semitones from the origin). The pair is
    enough to recover the element, which is how all arithmetic is carried out.
    """

    __slots__ = ("_tclass", "_o", "_hash")
    _tclass: TonalClass
    _o: int

    @cachedClassProp(key="_zero")
    def ZERO(cls) -> Self:
        """
        Point 0 with no alteration in octave 0, the identity element of addition.
        """
        return cls._newHelper(TonalClass._newHelper(0, 0), 0)

    def __new__(
        cls,
        arg1: Integral | TonalClass,
        arg2: Integral = _MISSING,
        arg3: Integral = _MISSING,
        /,
    ) -> Self:
        if isinstance(arg1, TonalClass):
            # `tclass` and `octave`
            if arg3 is not _MISSING:
                raise TypeError("Too many arguments after a tonal class.")
            tclass = arg1
            octave = 0 if arg2 is _MISSING else arg2
        else:
            # `point`, `alteration` and `octave`
            tclass = TonalClass(arg1, 0 if arg2 is _MISSING else arg2)
            octave = 0 if arg3 is _MISSING else arg3
        octave = _resolveInt(octave, "octave")
        return cls._newHelper(tclass, octave)

    @classmethod
    def _newImpl(cls, tclass: TonalClass, o: int) -> Self:
        self = super().__new__(cls)
        self._tclass = tclass
        self._o = o
        return self

    @classmethod
    def _fromDiatonicAndChromatic(cls, dv: int, cv: int) -> Self:
        """
        Reconstruct the unique element whose diatonic value is `dv` and whose chromatic value
        is `cv`. Raises `ValueError` if that element would need more than two accidentals.
        """
        # floor division, so that negative values land in the octave below
        o, point = divmod(dv, N_POINTS)
        cv -= 12 * o
        if not _MIN_CLASS_CHROMATIC <= cv <= _MAX_CLASS_CHROMATIC:
            raise ValueError(
                f"Chromatic value {cv} cannot be spelled on point {point} "
                f"(diatonic value {dv})"
            )
        alteration = cv - mpc(point)
        if not validAlteration(alteration):
            raise ValueError(
                f"Too many accidentals: point {point} needs an alteration of {alteration}"
            )
        assert validElement(point, alteration, o)
        return cls._newHelper(TonalClass._newHelper(point, alteration), o)

    @property
    def tclass(self) -> TonalClass:
        return self._tclass

    @property
    def point(self) -> int:
        return self._tclass.point

    @property
    def alteration(self) -> int:
        return self._tclass.alteration

    @property
    def o(self) -> int:
        return self._o

    @property
    def octave(self) -> int:
        return self._o

    @property
    def diatonic(self) -> int:
        """Position on the staff-step axis, `7 * octave + point`."""
        return N_POINTS * self._o + self._tclass.point

    @property
    def chromatic(self) -> int:
        """Position on the semitone axis, `12 * octave + mpc(point) + alteration`."""
        return 12 * self._o + self._tclass.chromatic

    @property
    def sgn(self) -> Literal[-1, 0, 1]:
        """
        Sign of the element regarded as an interval. It follows the diatonic value, except
        for primes where the alteration decides.
        """
        dv = self.diatonic
        if dv == 0:
            return (self.alteration > 0) - (self.alteration < 0)
        return (dv > 0) - (dv < 0)

    @property
    def pitch(self):
        from . import convert  # avoid cyclic import

        return convert.elementToPitch(self)

    @property
    def interval(self):
        from . import convert  # avoid cyclic import

        return convert.elementToInterval(self)

    def isEnharmonic(self, other: Self) -> bool:
        return self.chromatic == other.chromatic

    def __add__(self, other: Any) -> Self:
        if not isinstance(other, TonalElement):
            return NotImplemented
        dv = self.diatonic + other.diatonic
        cv = self.chromatic + other.chromatic
        return self._fromDiatonicAndChromatic(dv, cv)

    def __neg__(self) -> Self:
        return self._fromDiatonicAndChromatic(-self.diatonic, -self.chromatic)

    def __abs__(self) -> Self:
        return -self if self.sgn < 0 else self

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TonalElement):
            return NotImplemented
        return self._tclass == other._tclass and self._o == other._o

    @cachedGetter
    def __hash__(self) -> int:
        return hash((self._tclass, self._o))

    def __reduce__(self) -> tuple[Callable[..., Self], tuple[Any, ...]]:
        return (self._newImpl, (self._tclass, self._o))

    def __str__(self) -> str:
        return f"{self._tclass!s}, oct={self._o}"

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}("{self!s}")'
