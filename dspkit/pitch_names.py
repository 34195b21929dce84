"""Equal-tempered pitch frequencies, in hertz, built from A = 440 Hz."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "OctavePitches",
    "OctaveFrequencies",
    "OCT_PITCH",
    "PITCH_FREQUENCIES",
    "PITCH_NAMES",
    "next_frequency",
    "pitch",
]

TWELFTH_ROOT_OF_TWO = 1.059463094359295


def next_frequency(f: float) -> float:
    """Return the frequency one semitone above ``f``."""
    return f * TWELFTH_ROOT_OF_TWO


@dataclass(frozen=True)
class OctavePitches:
    """The twelve pitches of an octave, named from a base A.

    An octave runs from C to B, so C is one semitone above B, an octave down.
    """

    A: float
    As: float
    B: float
    C: float
    Cs: float
    D: float
    Ds: float
    E: float
    F: float
    Fs: float
    G: float
    Gs: float

    @classmethod
    def from_base(cls, base: float) -> OctavePitches:
        a = base
        as_ = next_frequency(a)
        b = next_frequency(as_)
        c = next_frequency(b) / 2
        cs = next_frequency(c)
        d = next_frequency(cs)
        ds = next_frequency(d)
        e = next_frequency(ds)
        f = next_frequency(e)
        fs = next_frequency(f)
        g = next_frequency(fs)
        gs = next_frequency(g)
        return cls(a, as_, b, c, cs, d, ds, e, f, fs, g, gs)

    @property
    def Ab(self) -> float:
        return self.Gs

    @property
    def Bb(self) -> float:
        return self.As

    @property
    def Db(self) -> float:
        return self.Cs

    @property
    def Eb(self) -> float:
        return self.Ds

    @property
    def Gb(self) -> float:
        return self.Fs


class OctaveFrequencies:
    """Twelve successive semitone frequencies starting at ``base``."""

    def __init__(self, base: float) -> None:
        freqs = [base]
        for _ in range(11):
            freqs.append(next_frequency(freqs[-1]))
        self._f = tuple(freqs)

    def __getitem__(self, semitone: int) -> float:
        return self._f[semitone]

    def __len__(self) -> int:
        return len(self._f)

    def __iter__(self):
        return iter(self._f)


OCT_PITCH: tuple[OctavePitches, ...] = tuple(
    OctavePitches.from_base(base)
    for base in (27.5, 55.0, 110.0, 220.0, 440.0, 880.0, 1760.0, 3520.0, 7040.0)
)

PITCH_FREQUENCIES: tuple[OctaveFrequencies, ...] = tuple(
    OctaveFrequencies(base)
    for base in (13.75, 27.5, 55.0, 110.0, 220.0, 440.0, 880.0, 1760.0, 3520.0, 7040.0)
)

# Name -> attribute of OctavePitches.  The Eb table holds the E pitches.
_NAME_TABLE = {
    "Ab": "Ab",
    "A": "A",
    "As": "As",
    "Bb": "Bb",
    "B": "B",
    "C": "C",
    "Cs": "Cs",
    "Db": "Db",
    "D": "D",
    "Ds": "Ds",
    "Eb": "E",
    "E": "E",
    "F": "F",
    "Fs": "Fs",
    "Gb": "Gb",
    "G": "G",
    "Gs": "Gs",
}

PITCH_NAMES: tuple[str, ...] = tuple(_NAME_TABLE)

_NUM_NAMED_OCTAVES = 8


def pitch(name: str, octave: int) -> float:
    """Return the frequency of the named pitch in ``octave`` (0 to 7)."""
    try:
        attribute = _NAME_TABLE[name]
    except KeyError:
        raise ValueError(f"unknown pitch name {name!r}") from None
    if not 0 <= octave < _NUM_NAMED_OCTAVES:
        raise IndexError(f"octave {octave} out of range 0..{_NUM_NAMED_OCTAVES - 1}")
    return getattr(OCT_PITCH[octave], attribute)