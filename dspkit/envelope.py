"""Envelope generators composed of ramp segments.

An envelope is a sequence of segments.  Each segment drives a ramp
generator of a given width, in seconds, towards a target level.  Ramp
generators are plain classes built as ``ramp_type(width, sps)``.  Calling
one returns the next value of a unit ramp shape.  It also has ``reset()``
and ``config(width, sps)``.  Composing segments with different ramp shapes
gives ADSR, AD and similar envelopes.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Iterator

__all__ = ["RampHolder", "EnvelopeSegment", "EnvelopeGen"]


def _end_of(width: float, sps: float) -> int:
    return math.ceil(width * sps)


class RampHolder:
    """Wraps a ramp generator and counts the samples it has produced."""

    def __init__(self, ramp_type: Callable[[float, float], Any], width: float, sps: float) -> None:
        self._ramp = ramp_type(width, sps)
        self._time = 0
        self._end = _end_of(width, sps)

    def __call__(self, offset: float, scale: float) -> float:
        self._time += 1
        return offset + self._ramp() * scale

    def done(self) -> bool:
        """True once the ramp has run for its full width."""
        return self._time >= self._end

    def reset(self) -> None:
        self._ramp.reset()
        self._time = 0

    def config(self, width: float, sps: float) -> None:
        """Change the ramp's width and restart it."""
        self._ramp.config(width, sps)
        self._end = _end_of(width, sps)
        self.reset()


class EnvelopeSegment:
    """One segment of an envelope: a ramp heading towards ``level``."""

    def __init__(
        self,
        ramp_type: Callable[[float, float], Any],
        width: float,
        level: float,
        sps: float,
    ) -> None:
        self._ramp = RampHolder(ramp_type, width, sps)
        self.level = level
        self._offset = 0.0
        self._scale = 0.0

    def __call__(self) -> float:
        return self._ramp(self._offset, self._scale)

    def start(self, prev_level: float) -> None:
        """Prepare the segment to move from ``prev_level`` to its own level."""
        self._offset = min(self.level, prev_level)
        self._scale = abs(self.level - prev_level)

    def reset(self) -> None:
        self._ramp.reset()

    def done(self) -> bool:
        return self._ramp.done()

    def config(self, width: float, sps: float, level: float | None = None) -> None:
        """Change the segment's width and, when given, its target level."""
        self._ramp.config(width, sps)
        if level is not None:
            self.level = level


class EnvelopeGen:
    """Plays a sequence of envelope segments one after another."""

    def __init__(self, *args: EnvelopeSegment) -> None:
        self._segments = list(args)
        self._i = len(self._segments)
        self._y = 0.0
        self.reset()

    def __len__(self) -> int:
        return len(self._segments)

    def __getitem__(self, index: int) -> EnvelopeSegment:
        return self._segments[index]

    def __iter__(self) -> Iterator[EnvelopeSegment]:
        return iter(self._segments)

    @property
    def current(self) -> float:
        """The most recently generated value."""
        return self._y

    @property
    def index(self) -> int:
        """The index of the active segment; equal to ``len(self)`` when idle."""
        return self._i

    def attack(self) -> None:
        """Start the envelope from its first segment, unless already running."""
        if self.in_idle_phase():
            if not self._segments:
                raise ValueError("envelope has no segments")
            self.reset()
            self._i = 0
            self._segments[0].start(0.0)

    def release(self) -> None:
        """Jump to the last segment, starting from the current value."""
        if not self.in_release_phase():
            self._i = len(self._segments)
            if self._i:
                self._i -= 1
                self._segments[self._i].start(self._y)

    def __call__(self) -> float:
        if self.in_idle_phase():
            return 0.0

        segment = self._segments[self._i]
        self._y = segment()
        if segment.done():
            self._i += 1
            if not self.in_idle_phase():
                self._segments[self._i].start(segment.level)
        return self._y

    def reset(self) -> None:
        """Make the envelope idle and rewind every segment."""
        self._i = len(self._segments)
        for segment in self._segments:
            segment.reset()

    def in_idle_phase(self) -> bool:
        return self._i == len(self._segments)

    def in_attack_phase(self) -> bool:
        return bool(self._segments) and self._i == 0

    def in_release_phase(self) -> bool:
        return len(self._segments) >= 2 and self._i == len(self._segments) - 1