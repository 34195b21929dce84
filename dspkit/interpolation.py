"""Sample interpolation strategies for indexable buffers."""

from __future__ import annotations

import math
from typing import Sequence

from dspkit.base import linear_interpolate

__all__ = ["interpolate_none", "interpolate_linear"]


def _whole_index(index: float) -> int:
    if index < 0:
        raise IndexError(f"negative sample index {index}")
    return int(index)


def interpolate_none(buffer: Sequence[float], index: float) -> float:
    """Return the sample at the integer part of ``index``."""
    return buffer[_whole_index(index)]


def interpolate_linear(buffer: Sequence[float], index: float) -> float:
    """Interpolate linearly between the samples around a fractional ``index``."""
    i = _whole_index(index)
    y1 = buffer[i]
    y2 = buffer[i + 1]
    mu = index - math.floor(index)
    return linear_interpolate(y1, y2, mu)