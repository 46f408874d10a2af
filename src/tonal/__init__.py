"""
# `tonal`: Tonal Pitch and Interval Arithmetic

This is the top-level module of the `tonal` library. It models pitches and intervals the way
they are written, so that an augmented fourth and a diminished fifth stay different results
even though they span the same number of semitones.

```python
import tonal as tn

g0 = tn.Pitch(tn.DiatonicPitch.G, tn.PitchAlteration.NATURAL, 0)
p4 = tn.Interval(tn.DiatonicInterval.FOURTH, tn.IntervalQuality.PERFECT)
g0 + p4  # Pitch("C1")
```

Every pitch and interval maps onto a `TonalElement`, a diatonic point with an alteration
placed at an octave of any sign, and all arithmetic happens there.
"""

from ._impl import *  # noqa: F401, F403
