"""Fast approximations of sine, cosine and tangent.

The plain variants expect ``x`` in ``[-pi, pi]``; the tangent variants
expect ``x`` in ``[-pi/2, pi/2]``.  The ``*full`` variants accept any
argument and reduce it into range first, although the reduction loses
accuracy for arguments far beyond about a thousand.  Signs are taken from
the binary32 sign bit of the argument, so ``-0.0`` counts as negative.
"""

from __future__ import annotations

from dspkit.fast_exp_log import _float_to_bits
from dspkit.fast_special import _div

__all__ = [
    "fastsin",
    "fastersin",
    "fastsinfull",
    "fastersinfull",
    "fastcos",
    "fastercos",
    "fastcosfull",
    "fastercosfull",
    "fasttan",
    "fastertan",
    "fasttanfull",
    "fastertanfull",
]

_FOUR_OVER_PI = 1.2732395447351627
_FOUR_OVER_PI_SQ = 0.40528473456935109
_TWO_OVER_PI = 0.63661977236758134
_TWO_PI = 6.2831853071795865
_INV_TWO_PI = 0.15915494309189534
_HALF_PI = 1.5707963267948966
_HALF_PI_MINUS_TWO_PI = -4.7123889803846899

_SIGN_BIT = 0x80000000


def _is_negative(x: float) -> bool:
    """True when the binary32 sign bit of ``x`` is set."""
    return bool(_float_to_bits(x) & _SIGN_BIT)


def _parabola(x: float) -> float:
    """The quadratic first stage shared by the sine approximations."""
    return _FOUR_OVER_PI * x - _FOUR_OVER_PI_SQ * x * abs(x)


def _reduction_offset(x: float) -> float:
    """Return ``(half + k) * 2pi`` used to bring ``x`` into ``[-pi, pi]``."""
    k = int(x * _INV_TWO_PI)
    half = -0.5 if x < 0 else 0.5
    return (half + k) * _TWO_PI


def fastsin(x: float) -> float:
    """Approximate ``sin(x)`` for ``x`` in ``[-pi, pi]``."""
    q = 0.78444488374548933
    p = 0.20363937680730309
    r = 0.015124940802184233
    s = -0.0032225901625579573
    if _is_negative(x):
        p, r, s = -p, -r, -s

    qpprox = _parabola(x)
    qpproxsq = qpprox * qpprox
    return q * qpprox + qpproxsq * (p + qpproxsq * (r + qpproxsq * s))


def fastersin(x: float) -> float:
    """Cruder, faster approximation of ``sin(x)`` for ``x`` in ``[-pi, pi]``."""
    q = 0.77633023248007499
    p = 0.22308510060189463
    if _is_negative(x):
        p = -p

    qpprox = _parabola(x)
    return qpprox * (q + p * qpprox)


def fastsinfull(x: float) -> float:
    """Approximate ``sin(x)`` for any ``x``."""
    return fastsin(_reduction_offset(x) - x)


def fastersinfull(x: float) -> float:
    """Cruder, faster approximation of ``sin(x)`` for any ``x``."""
    return fastersin(_reduction_offset(x) - x)


def fastcos(x: float) -> float:
    """Approximate ``cos(x)`` for ``x`` in ``[-pi, pi]``."""
    offset = _HALF_PI_MINUS_TWO_PI if x > _HALF_PI else _HALF_PI
    return fastsin(x + offset)


def fastercos(x: float) -> float:
    """Cruder, faster approximation of ``cos(x)`` for ``x`` in ``[-pi, pi]``."""
    p = 0.54641335845679634
    qpprox = 1.0 - _TWO_OVER_PI * abs(x)
    return qpprox + p * qpprox * (1.0 - qpprox * qpprox)


def fastcosfull(x: float) -> float:
    """Approximate ``cos(x)`` for any ``x``."""
    return fastsinfull(x + _HALF_PI)


def fastercosfull(x: float) -> float:
    """Cruder, faster approximation of ``cos(x)`` for any ``x``."""
    return fastersinfull(x + _HALF_PI)


def fasttan(x: float) -> float:
    """Approximate ``tan(x)`` for ``x`` in ``[-pi/2, pi/2]``."""
    return _div(fastsin(x), fastsin(x + _HALF_PI))


def fastertan(x: float) -> float:
    """Cruder, faster approximation of ``tan(x)`` for ``x`` in ``[-pi/2, pi/2]``."""
    return _div(fastersin(x), fastercos(x))


def fasttanfull(x: float) -> float:
    """Approximate ``tan(x)`` for any ``x``."""
    xnew = x - _reduction_offset(x)
    return _div(fastsin(xnew), fastcos(xnew))


def fastertanfull(x: float) -> float:
    """Cruder, faster approximation of ``tan(x)`` for any ``x``."""
    xnew = x - _reduction_offset(x)
    return _div(fastersin(xnew), fastercos(xnew))