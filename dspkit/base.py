"""Basic numeric helpers: fast approximations, interpolation and comparisons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from dspkit.fast_exp_log import (
    _bits_to_float,
    _float_to_bits,
    fasterexp,
    fasterlog,
    fasterlog2,
    fasterpow,
    fasterpow2,
    fastexp,
    fastlog,
    fastlog2,
    fastpow,
    fastpow2,
)
from dspkit.fast_trig import fastcos, fastercos, fastersin, fastertan, fastsin, fasttan

__all__ = [
    "pi",
    "MinMaxRange",
    "FastRandom",
    "fast_rand",
    "fast_tan",
    "faster_tan",
    "fast_sin",
    "faster_sin",
    "fast_cos",
    "faster_cos",
    "fast_rational_tanh",
    "fast_exp",
    "faster_exp",
    "fast_exp3",
    "fast_exp4",
    "fast_exp5",
    "fast_exp6",
    "fast_exp7",
    "fast_exp8",
    "fast_exp9",
    "linear_interpolate",
    "fast_inverse",
    "fast_div",
    "fast_log",
    "faster_log",
    "fast_log2",
    "faster_log2",
    "fast_pow2",
    "faster_pow2",
    "fast_sqrt",
    "fast_log10",
    "faster_log10",
    "fast_pow10",
    "faster_pow10",
    "abs_within",
    "rel_within",
]

pi = 3.1415926535897932384626433832795

T = TypeVar("T")


@dataclass
class MinMaxRange(Generic[T]):
    """A closed range given by its lower and upper bound."""

    min: T
    max: T


class FastRandom:
    """Linear congruential generator yielding integers in ``[0, 0x7FFF]``."""

    DEFAULT_SEED = 87263876

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.seed = seed & 0xFFFFFFFF

    def __call__(self) -> int:
        self.seed = (214013 * self.seed + 2531011) & 0xFFFFFFFF
        return (self.seed >> 16) & 0x7FFF


_shared_random = FastRandom()


def fast_rand() -> int:
    """Return the next value of a process-wide :class:`FastRandom`."""
    return _shared_random()


# Trigonometry: sine and cosine for x in [-pi, pi], tangent for [-pi/2, pi/2].


def fast_tan(x: float) -> float:
    return fasttan(x)


def faster_tan(x: float) -> float:
    return fastertan(x)


def fast_sin(x: float) -> float:
    return fastsin(x)


def faster_sin(x: float) -> float:
    return fastersin(x)


def fast_cos(x: float) -> float:
    return fastcos(x)


def faster_cos(x: float) -> float:
    return fastercos(x)


def fast_rational_tanh(x: float) -> float:
    """Pade approximation of ``tanh``; meant for ``-3 <= x <= 3``."""
    return x * (27 + x * x) / (27 + 9 * x * x)


def fast_exp(x: float) -> float:
    return fastexp(x)


def faster_exp(x: float) -> float:
    return fasterexp(x)


# Taylor series approximations of exp, accurate near zero.


def fast_exp3(x: float) -> float:
    return (6 + x * (6 + x * (3 + x))) * 0.16666666


def fast_exp4(x: float) -> float:
    return (24 + x * (24 + x * (12 + x * (4 + x)))) * 0.041666666


def fast_exp5(x: float) -> float:
    return (120 + x * (120 + x * (60 + x * (20 + x * (5 + x))))) * 0.0083333333


def fast_exp6(x: float) -> float:
    return (
        720 + x * (720 + x * (360 + x * (120 + x * (30 + x * (6 + x)))))
    ) * 0.0013888888


def fast_exp7(x: float) -> float:
    return (
        5040
        + x * (5040 + x * (2520 + x * (840 + x * (210 + x * (42 + x * (7 + x))))))
    ) * 0.00019841269


def fast_exp8(x: float) -> float:
    return (
        40320
        + x
        * (
            40320
            + x * (20160 + x * (6720 + x * (1680 + x * (336 + x * (56 + x * (8 + x))))))
        )
    ) * 2.4801587301e-5


def fast_exp9(x: float) -> float:
    return (
        362880
        + x
        * (
            362880
            + x
            * (
                181440
                + x
                * (60480 + x * (15120 + x * (3024 + x * (504 + x * (72 + x * (9 + x))))))
            )
        )
    ) * 2.75573192e-6


def linear_interpolate(y1: float, y2: float, mu: float) -> float:
    """Interpolate between ``y1`` (``mu == 0``) and ``y2`` (``mu == 1``)."""
    return y1 + mu * (y2 - y1)


def fast_inverse(val: float) -> float:
    """Rough reciprocal obtained by negating the binary32 exponent."""
    return _bits_to_float(0x7EF311C2 - _float_to_bits(val))


def fast_div(a: float, b: float) -> float:
    """Rough ``a / b`` using :func:`fast_inverse`."""
    return a * fast_inverse(b)


def fast_log(x: float) -> float:
    return fastlog(x)


def faster_log(x: float) -> float:
    return fasterlog(x)


def fast_log2(x: float) -> float:
    return fastlog2(x)


def faster_log2(x: float) -> float:
    return fasterlog2(x)


def fast_pow2(x: float) -> float:
    return fastpow2(x)


def faster_pow2(x: float) -> float:
    return fasterpow2(x)


def fast_sqrt(x: float) -> float:
    return fast_pow2(fast_log2(x) / 2)


def fast_log10(x: float) -> float:
    return 0.301029995663981 * fast_log2(x)


def faster_log10(x: float) -> float:
    return 0.301029995663981 * faster_log2(x)


def fast_pow10(x: float) -> float:
    return fastpow(10, x)


def faster_pow10(x: float) -> float:
    return fasterpow(10, x)


def abs_within(a: float, b: float, eps: float) -> bool:
    """True when ``a`` and ``b`` differ by at most ``eps``."""
    return abs(a - b) <= eps


def rel_within(a: float, b: float, eps: float) -> bool:
    """True when ``a`` and ``b`` differ by at most ``eps`` of the larger magnitude."""
    return abs(a - b) <= eps * max(abs(a), abs(b))