import unittest
from pathlib import Path
import sys
import copy
import pickle

DIR = Path(__file__).parent if "__file__" in locals() else Path.cwd()
sys.path.append(str(DIR / "../src"))

import tonal as tn  # noqa: E402
from tonal import (  # noqa: E402
    DiatonicPitch as DP,
    PitchAlteration as PA,
    DiatonicInterval as DI,
    IntervalQuality as IQ,
    IntervalDirection as ID,
)

P1 = tn.Interval(DI.PRIME, IQ.PERFECT)
A1 = tn.Interval(DI.PRIME, IQ.AUGMENTED)
m2 = tn.Interval(DI.SECOND, IQ.MINOR)
m3 = tn.Interval(DI.THIRD, IQ.MINOR)
M3 = tn.Interval(DI.THIRD, IQ.MAJOR)
P4 = tn.Interval(DI.FOURTH, IQ.PERFECT)
A4 = tn.Interval(DI.FOURTH, IQ.AUGMENTED)
d5 = tn.Interval(DI.FIFTH, IQ.DIMINISHED)
P5 = tn.Interval(DI.FIFTH, IQ.PERFECT)
m7 = tn.Interval(DI.SEVENTH, IQ.MINOR)


class TestConstruction(unittest.TestCase):
    def test_slots(self):
        types = (tn.PitchClass, tn.Pitch, tn.IntervalClass, tn.Interval)
        for t in types:  # the types with `__slots__` shouldn't have `__dict__`
            self.assertNotIn("__dict__", dir(t))
        with self.assertRaises(AttributeError):
            tn.Pitch(DP.C).x = 1  # type: ignore

    def test_pitch(self):
        p = tn.Pitch(DP.E, PA.F, 4)
        self.assertEqual(p, tn.Pitch(tn.PitchClass(DP.E, PA.F), 4))
        self.assertEqual(p, tn.PitchClass(DP.E, PA.F).atOctave(4))
        self.assertIs(p, tn.Pitch(DP.E, PA.F, 4))
        self.assertEqual(p.diatonicPitch, DP.E)
        self.assertEqual(p.alteration, PA.FLAT)
        self.assertEqual(p.octave, 4)
        self.assertEqual(tn.Pitch(DP.G), tn.Pitch(DP.G, PA.NATURAL, 0))
        self.assertEqual(tn.Pitch(2, 1, 4), p)  # plain integers are accepted

    def test_pitch_invalid(self):
        for args in ((7,), (-1,), (DP.C, 5), (DP.C, PA.N, -1)):
            with self.subTest(args=args):
                with self.assertRaises(ValueError):
                    tn.Pitch(*args)
        for args in ((1.0,), ("C",), (DP.C, PA.N, 1.5), (tn.PitchClass(DP.C), 1, 2)):
            with self.subTest(args=args):
                with self.assertRaises(TypeError):
                    tn.Pitch(*args)

    def test_interval_class(self):
        ic = tn.IntervalClass(DI.FIFTH, IQ.PERFECT)
        self.assertEqual(ic.diatonicInterval, DI.FIFTH)
        self.assertEqual(ic.quality, IQ.PERFECT)
        self.assertEqual(tn.IntervalClass(DI.UNISON, IQ.P), tn.IntervalClass(0, 3))
        for args in ((DI.PRIME, IQ.MINOR), (DI.SECOND, IQ.PERFECT), (DI.FIFTH, IQ.MAJOR)):
            with self.subTest(args=args):
                with self.assertRaises(ValueError):
                    tn.IntervalClass(*args)
        with self.assertRaisesRegex(ValueError, "A prime cannot be minor"):
            tn.IntervalClass(DI.PRIME, IQ.MINOR)

    def test_interval(self):
        i = tn.Interval(DI.THIRD, IQ.MINOR, 1, ID.DOWN)
        self.assertEqual(
            i, tn.Interval(tn.IntervalClass(DI.THIRD, IQ.MINOR), 1, ID.DOWN)
        )
        self.assertEqual(i.diatonicInterval, DI.THIRD)
        self.assertEqual(i.quality, IQ.MINOR)
        self.assertEqual(i.octave, 1)
        self.assertEqual(i.direction, ID.DOWN)
        self.assertEqual(P5.direction, ID.UP)
        self.assertEqual(P5.octave, 0)

    def test_interval_invalid(self):
        testData = (
            ((DI.PRIME, IQ.DIMINISHED), ValueError),
            ((DI.PRIME, IQ.DIMINISHED, 0, ID.DOWN), ValueError),
            ((DI.PRIME, IQ.MINOR, 2), ValueError),
            ((DI.FIFTH, IQ.PERFECT, -1), ValueError),
            ((DI.FIFTH, IQ.PERFECT, 0, 2), ValueError),
            ((DI.FIFTH,), TypeError),
            ((DI.FIFTH, IQ.PERFECT, 0.5), TypeError),
        )
        for args, err in testData:
            with self.subTest(args=args):
                with self.assertRaises(err):
                    tn.Interval(*args)
        # a diminished prime spanning at least one octave is fine
        tn.Interval(DI.PRIME, IQ.DIMINISHED, 1)

    def test_zero_interval(self):
        # the perfect prime has no direction
        down = tn.Interval(DI.PRIME, IQ.PERFECT, 0, ID.DOWN)
        self.assertEqual(down, P1)
        self.assertEqual(down.direction, ID.UP)
        self.assertEqual(tn.Interval.ZERO, P1)
        self.assertEqual(-P1, P1)
        # but an octave does
        self.assertNotEqual(
            tn.Interval(DI.PRIME, IQ.PERFECT, 1, ID.DOWN),
            tn.Interval(DI.PRIME, IQ.PERFECT, 1, ID.UP),
        )

    def test_str(self):
        testData = (
            (tn.PitchClass(DP.E, PA.F), "Eb"),
            (tn.PitchClass(DP.F, PA.SS), "F##"),
            (tn.Pitch(DP.E, PA.F, 4), "Eb4"),
            (tn.Pitch(DP.B, PA.FF, 0), "Bbb0"),
            (tn.IntervalClass(DI.FIFTH, IQ.PERFECT), "Perfect Fifth"),
            (P5, "Up 0 Octave(s) + Perfect Fifth"),
            (tn.Interval(DI.THIRD, IQ.MINOR, 2, ID.DOWN), "Down 2 Octave(s) + Minor Third"),
        )
        for obj, ans in testData:
            with self.subTest(ans=ans):
                self.assertEqual(str(obj), ans)
        self.assertEqual(repr(tn.Pitch(DP.E, PA.F, 4)), 'Pitch("Eb4")')

    def test_copy_pickle(self):
        for obj in (tn.PitchClass(DP.A), tn.Pitch(DP.A, PA.S, 3), P5.intervalClass, -m3):
            with self.subTest(obj=obj):
                self.assertIs(copy.copy(obj), obj)
                self.assertIs(copy.deepcopy(obj), obj)
                self.assertEqual(pickle.loads(pickle.dumps(obj)), obj)
                self.assertEqual(hash(pickle.loads(pickle.dumps(obj))), hash(obj))


class TestArithmetic(unittest.TestCase):
    def test_repeated_augmented_prime(self):
        p = tn.Pitch(DP.E, PA.FF, 4)
        for pa in (PA.F, PA.N, PA.S, PA.SS):
            p += A1
            self.assertEqual(p, tn.Pitch(DP.E, pa, 4))
        with self.assertRaises(ValueError):
            p + A1  # E triple sharp
        # and back down
        for _ in range(4):
            p -= A1
        self.assertEqual(p, tn.Pitch(DP.E, PA.FF, 4))
        with self.assertRaises(ValueError):
            A1 * 2  # a prime raised by two semitones has no name

    def test_circle_of_fifths_down(self):
        p = tn.Pitch(DP.B, PA.SS, 20)
        down = -P5
        for _ in range(34):
            p += down
        self.assertEqual(p, tn.Pitch(DP.F, PA.FF, 1))
        with self.assertRaises(ValueError):
            p + down  # B triple flat

    def test_pitch_add(self):
        testData = (
            (tn.Pitch(DP.G, PA.N, 0), P4, tn.Pitch(DP.C, PA.N, 1)),
            (tn.Pitch(DP.C, PA.N, 4), A4, tn.Pitch(DP.F, PA.S, 4)),
            (tn.Pitch(DP.C, PA.N, 4), d5, tn.Pitch(DP.G, PA.F, 4)),
            (tn.Pitch(DP.E, PA.N, 3), m2, tn.Pitch(DP.F, PA.N, 3)),
            (tn.Pitch(DP.D, PA.N, 2), tn.Interval(DI.SIXTH, IQ.MAJOR, 1), tn.Pitch(DP.B, PA.N, 3)),
            (tn.Pitch(DP.C, PA.N, 1), -P5, tn.Pitch(DP.F, PA.N, 0)),
        )
        for p, i, ans in testData:
            with self.subTest(p=p, i=i):
                self.assertEqual(p + i, ans)
                self.assertEqual(i + p, ans)
                self.assertEqual(tn.addPitch(p, i), ans)
                self.assertEqual(ans - i, p)

    def test_pitch_below_zero(self):
        with self.assertRaises(ValueError):
            tn.Pitch(DP.C, PA.N, 0) - m2
        with self.assertRaises(ValueError):
            tn.Pitch(DP.D, PA.N, 0) - M3
        # lowering C0 by a semitone stays in octave 0
        self.assertEqual(
            tn.Pitch(DP.C, PA.N, 0) + tn.Interval(DI.PRIME, IQ.AUGMENTED, 0, ID.DOWN),
            tn.Pitch(DP.C, PA.F, 0),
        )

    def test_pitch_sub(self):
        c1 = tn.Pitch(DP.C, PA.N, 1)
        g0 = tn.Pitch(DP.G, PA.N, 0)
        self.assertEqual(c1 - g0, P4)
        self.assertEqual(g0 - c1, -P4)
        self.assertEqual((g0 - c1).direction, ID.DOWN)
        self.assertEqual(tn.subPitch(c1, g0), P4)
        self.assertEqual(g0 - g0, P1)
        self.assertEqual(
            tn.Pitch(DP.C, PA.S, 5) - tn.Pitch(DP.B, PA.F, 3),
            tn.Interval(DI.SECOND, IQ.AUGMENTED, 1),
        )

    def test_pitch_sub_overflow(self):
        # B double sharp cannot be subtracted as its inverse is not representable
        b = tn.Pitch(DP.B, PA.SS, 0)
        with self.assertRaises(ValueError):
            b - b

    def test_pitch_type_errors(self):
        p = tn.Pitch(DP.C, PA.N, 4)
        with self.assertRaises(TypeError):
            p + p
        with self.assertRaises(TypeError):
            p + 1
        with self.assertRaises(TypeError):
            p - 1
        with self.assertRaises(TypeError):
            tn.addPitch(p, p)
        with self.assertRaises(TypeError):
            tn.subPitch(p, P5)

    def test_interval_add(self):
        testData = (
            (M3, m3, P5),
            (P5, P4, tn.Interval(DI.PRIME, IQ.PERFECT, 1)),
            (P5, P5, tn.Interval(DI.SECOND, IQ.MAJOR, 1)),
            (P5, -P5, P1),
            (m3, -P5, tn.Interval(DI.THIRD, IQ.MAJOR, 0, ID.DOWN)),
            (A1, -A1, P1),
        )
        for i0, i1, ans in testData:
            with self.subTest(i0=i0, i1=i1):
                self.assertEqual(i0 + i1, ans)
                self.assertEqual(i1 + i0, ans)
                self.assertEqual(tn.addInterval(i0, i1), ans)

    def test_interval_sub(self):
        testData = (
            (m7, m3, P5),
            (M3, P5, tn.Interval(DI.THIRD, IQ.MINOR, 0, ID.DOWN)),
            (P4, P4, P1),
            (P1, P5, -P5),
        )
        for i0, i1, ans in testData:
            with self.subTest(i0=i0, i1=i1):
                self.assertEqual(i0 - i1, ans)
                self.assertEqual(tn.subInterval(i0, i1), ans)

    def test_interval_unnamed(self):
        # an augmented fourth and an augmented prime make a doubly augmented fourth
        with self.assertRaises(ValueError):
            A4 + A1

    def test_interval_neg_mul(self):
        self.assertEqual(-P5, tn.Interval(DI.FIFTH, IQ.PERFECT, 0, ID.DOWN))
        self.assertEqual(-(-P5), P5)
        self.assertEqual(abs(-P5), P5)
        self.assertEqual(abs(P5), P5)
        self.assertEqual(+P5, P5)
        self.assertEqual(P5 * 2, tn.Interval(DI.SECOND, IQ.MAJOR, 1))
        self.assertEqual(2 * P5, tn.Interval(DI.SECOND, IQ.MAJOR, 1))
        self.assertEqual(P5 * 0, P1)
        self.assertEqual(P5 * -1, -P5)
        self.assertEqual(
            tn.Interval(DI.PRIME, IQ.PERFECT, 1) * 3, tn.Interval(DI.PRIME, IQ.PERFECT, 3)
        )

    def test_interval_type_errors(self):
        with self.assertRaises(TypeError):
            P5 + 1
        with self.assertRaises(TypeError):
            P5 - tn.Pitch(DP.C)
        with self.assertRaises(TypeError):
            tn.addInterval(P5, tn.Pitch(DP.C))


class TestMnn(unittest.TestCase):
    def test_mnn(self):
        testData = (
            (tn.Pitch(DP.C, PA.N, 0), 0),
            (tn.Pitch(DP.C, PA.N, 4), 48),
            (tn.Pitch(DP.A, PA.N, 4), 57),
            (tn.Pitch(DP.C, PA.FF, 0), -2),
            (tn.Pitch(DP.B, PA.S, 3), 48),
            (tn.Pitch(DP.B, PA.SS, 20), 253),
        )
        for p, ans in testData:
            with self.subTest(p=p):
                self.assertEqual(p.mnn, ans)
                self.assertEqual(tn.pitchToMnn(p), ans)

    def test_enharmonic(self):
        self.assertTrue(tn.Pitch(DP.B, PA.S, 3).isEnharmonic(tn.Pitch(DP.C, PA.N, 4)))
        self.assertNotEqual(tn.Pitch(DP.B, PA.S, 3), tn.Pitch(DP.C, PA.N, 4))
        self.assertFalse(tn.Pitch(DP.C, PA.N, 3).isEnharmonic(tn.Pitch(DP.C, PA.N, 4)))
        self.assertTrue(A4.isEnharmonic(d5))
        self.assertNotEqual(A4, d5)
        self.assertFalse(A4.isEnharmonic(P5))


if __name__ == "__main__":
    unittest.main()
