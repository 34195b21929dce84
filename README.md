# dspkit

Small building blocks for audio signal processing in pure Python, with no
dependencies outside the standard library.

## What is inside

- `dspkit.fast_exp_log`: fast approximations of `2 ** p`, `e ** p`, `log2`,
  `log`, `x ** p` and the logistic sigmoid (`fastpow2`, `fastexp`,
  `fastlog2`, `fastlog`, `fastpow`, `fastsigmoid`, and the cruder
  `faster*` variants of each).
- `dspkit.fast_special`: approximate `erfc`/`erf` (`fasterfc`, `fasterf`),
  inverse `erf` (`fastinverseerf`), `lgamma` (`fastlgamma`), digamma
  (`fastdigamma`), `sinh`/`cosh`/`tanh` (`fastsinh`, `fastcosh`, `fasttanh`)
  and the principal branch of the Lambert W function (`fastlambertw`,
  `fastlambertwexpx`), each with a `faster*` variant.
- `dspkit.fast_trig`: fast sine, cosine and tangent for `[-pi, pi]`
  (`fastsin`, `fastcos`; `fasttan` for `[-pi/2, pi/2]`) and versions that
  reduce any argument into range first (`fastsinfull`, `fastcosfull`,
  `fasttanfull`), each with a `faster*` variant.
- `dspkit.base`: everyday helpers: `fast_sin`, `fast_cos`, `fast_tan`,
  `fast_exp`, `fast_log`, `fast_log2`, `fast_log10`, `fast_pow2`,
  `fast_pow10`, `fast_sqrt` (and `faster_*` variants), the Taylor series
  `fast_exp3` to `fast_exp9`, `fast_rational_tanh`, `fast_inverse`,
  `fast_div`, `linear_interpolate`, `abs_within`, `rel_within`, the
  `MinMaxRange` dataclass, the `FastRandom` generator and `fast_rand`.
- `dspkit.bits`: `count_bits`, a population count for non-negative
  integers (raises `ValueError` for negative ones).
- `dspkit.interpolation`: `interpolate_none` and `interpolate_linear` for
  reading a buffer at a fractional index.
- `dspkit.pitch_names`: equal-tempered pitch tables built from A = 440 Hz:
  `OctavePitches`, `OctaveFrequencies`, the tables `OCT_PITCH` and
  `PITCH_FREQUENCIES`, `next_frequency` and `pitch(name, octave)` for
  octaves 0 to 7.
- `dspkit.envelope`: multi-segment envelope generators (`RampHolder`,
  `EnvelopeSegment`, `EnvelopeGen`).
- `dspkit.audio_file`: WAV reading and writing (`WavReader`, `WavWriter`,
  `WavError`). The reader accepts 8/16/24/32-bit integer PCM and 32/64-bit
  float data; the writer produces 32-bit float data.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Examples

Fast approximations:

    from dspkit.base import fast_exp, fast_sin, linear_interpolate

    fast_exp(1.0)                        # close to 2.71828
    fast_sin(0.5)                        # close to 0.47943
    linear_interpolate(0.0, 10.0, 0.25)  # 2.5

The fast functions work on single-precision bit patterns and trade accuracy
for speed. They do not check their arguments; mind the range each one
documents.

Pitch frequencies:

    from dspkit.pitch_names import pitch, OctaveFrequencies

    pitch("A", 4)                # 440.0
    pitch("C", 3)                # about 130.8
    OctaveFrequencies(440.0)[3]  # three semitones above A4

An unknown name raises `ValueError`; an octave outside 0 to 7 raises
`IndexError`.

Envelopes. A segment is given a ramp type: any class built as
`ramp_type(width, sps)` whose instances return the next value of a unit
ramp when called and have `reset()` and `config(width, sps)`:

    import math
    from dspkit.envelope import EnvelopeGen, EnvelopeSegment

    class LinearUp:
        def __init__(self, width, sps):
            self.config(width, sps)
        def config(self, width, sps):
            self._n = max(1, math.ceil(width * sps))
            self._t = 0
        def reset(self):
            self._t = 0
        def __call__(self):
            self._t += 1
            return min(self._t / self._n, 1.0)

    class LinearDown(LinearUp):
        def __call__(self):
            return 1.0 - super().__call__()

    sps = 48000
    env = EnvelopeGen(
        EnvelopeSegment(LinearUp, 0.01, 1.0, sps),    # attack to 1.0
        EnvelopeSegment(LinearDown, 0.2, 0.0, sps),   # release to 0.0
    )
    env.attack()
    samples = [env() for _ in range(480)]
    env.release()

`EnvelopeGen` returns 0.0 while idle, moves to the next segment when the
current one has run its width, and exposes `current`, `index`,
`in_idle_phase()`, `in_attack_phase()` and `in_release_phase()`.
`EnvelopeSegment.config(width, sps, level=None)` changes a segment's width
and, optionally, its target level.

Writing and reading a WAV file:

    from dspkit.audio_file import WavWriter, WavReader

    with WavWriter("tone.wav", 1, 48000) as wav:
        wav.write([0.0, 0.5, -0.5, 0.25])

    with WavReader("tone.wav") as wav:
        wav.length        # 4 samples
        samples = wav.read(4)
        wav.restart()

Lengths and positions count individual samples across all channels, and
reads return channels interleaved. Files that cannot be opened or parsed
raise `WavError`.

## What it does not do

- It ships no ramp shapes, oscillators, filters or pitch detectors; the
  envelope classes need ramp types supplied by the caller.
- It does not play or record audio through a sound card; audio goes in and
  out only through WAV files.
- It has no command-line tool.