"""Fast approximations of exponentials, logarithms, powers and the sigmoid.

The functions work on single-precision floats: arguments are read as IEEE 754
binary32 values and results are built from binary32 bit patterns.  They
trade accuracy for speed and make no attempt to reject arguments outside
their useful range.
"""

from __future__ import annotations

import math
import struct

__all__ = [
    "fastpow2",
    "fastexp",
    "fasterpow2",
    "fasterexp",
    "fastlog2",
    "fastlog",
    "fasterlog2",
    "fasterlog",
    "fastpow",
    "fasterpow",
    "fastsigmoid",
    "fastersigmoid",
]

_F32 = struct.Struct("<f")
_U32 = struct.Struct("<I")

_INV_LOG_2 = 1.442695040
_LN_2 = 0.69314718


def _float_to_bits(x: float) -> int:
    """Return the binary32 bit pattern of ``x`` (rounded to single precision)."""
    try:
        packed = _F32.pack(x)
    except OverflowError:
        packed = _F32.pack(math.copysign(math.inf, x))
    return _U32.unpack(packed)[0]


def _bits_to_float(bits: int) -> float:
    """Interpret the low 32 bits of ``bits`` as a binary32 value."""
    return _F32.unpack(_U32.pack(bits & 0xFFFFFFFF))[0]


def _to_uint32(value: float) -> int:
    """Truncate ``value`` toward zero and wrap it into 32 unsigned bits."""
    if math.isnan(value) or math.isinf(value):
        return 0
    return int(value) & 0xFFFFFFFF


def fastpow2(p: float) -> float:
    """Approximate ``2 ** p``; arguments below -126 are clipped to -126."""
    offset = 1.0 if p < 0 else 0.0
    clipp = -126.0 if p < -126 else p
    w = int(clipp)
    z = clipp - w + offset
    bits = _to_uint32(
        (1 << 23)
        * (clipp + 121.2740575 + 27.7280233 / (4.84252568 - z) - 1.49012907 * z)
    )
    return _bits_to_float(bits)


def fastexp(p: float) -> float:
    """Approximate ``e ** p``."""
    return fastpow2(_INV_LOG_2 * p)


def fasterpow2(p: float) -> float:
    """Cruder, faster approximation of ``2 ** p``."""
    clipp = -126.0 if p < -126 else p
    return _bits_to_float(_to_uint32((1 << 23) * (clipp + 126.94269504)))


def fasterexp(p: float) -> float:
    """Cruder, faster approximation of ``e ** p``."""
    return fasterpow2(_INV_LOG_2 * p)


def fastlog2(x: float) -> float:
    """Approximate ``log2(x)`` for positive ``x``."""
    bits = _float_to_bits(x)
    mx = _bits_to_float((bits & 0x007FFFFF) | 0x3F000000)
    y = bits * 1.1920928955078125e-7
    return y - 124.22551499 - 1.498030302 * mx - 1.72587999 / (0.3520887068 + mx)


def fastlog(x: float) -> float:
    """Approximate the natural logarithm of positive ``x``."""
    return _LN_2 * fastlog2(x)


def fasterlog2(x: float) -> float:
    """Cruder, faster approximation of ``log2(x)``."""
    return _float_to_bits(x) * 1.1920928955078125e-7 - 126.94269504


def fasterlog(x: float) -> float:
    """Cruder, faster approximation of the natural logarithm."""
    return _float_to_bits(x) * 8.2629582881927490e-8 - 87.989971088


def fastpow(x: float, p: float) -> float:
    """Approximate ``x ** p`` for positive ``x``."""
    return fastpow2(p * fastlog2(x))


def fasterpow(x: float, p: float) -> float:
    """Cruder, faster approximation of ``x ** p``."""
    return fasterpow2(p * fasterlog2(x))


def fastsigmoid(x: float) -> float:
    """Approximate the logistic function ``1 / (1 + e ** -x)``."""
    return 1.0 / (1.0 + fastexp(-x))


def fastersigmoid(x: float) -> float:
    """Cruder, faster approximation of the logistic function."""
    return 1.0 / (1.0 + fasterexp(-x))