"""Fast approximations of special functions.

Covers the error function and its inverse, log-gamma, digamma, the
hyperbolic functions and the principal branch of the Lambert W function.
The functions are built on the approximations in :mod:`dspkit.fast_exp_log`.
They trade accuracy for speed and do not validate their arguments.
Divisions follow IEEE 754 rules: dividing by zero gives an infinity or NaN
rather than raising.
"""

from __future__ import annotations

import math

from dspkit.fast_exp_log import (
    _bits_to_float,
    _float_to_bits,
    fasterexp,
    fasterlog,
    fasterlog2,
    fasterpow2,
    fastexp,
    fastlog,
    fastlog2,
    fastpow2,
)

__all__ = [
    "fasterfc",
    "fastererfc",
    "fasterf",
    "fastererf",
    "fastinverseerf",
    "fasterinverseerf",
    "fastlgamma",
    "fasterlgamma",
    "fastdigamma",
    "fasterdigamma",
    "fastsinh",
    "fastersinh",
    "fastcosh",
    "fastercosh",
    "fasttanh",
    "fastertanh",
    "fastlambertw",
    "fasterlambertw",
    "fastlambertwexpx",
    "fasterlambertwexpx",
]

_ERF_K = 3.3509633149424609
_INV_ERF_K = 0.30004578719350504
_LAMBERTW_THRESHOLD = 2.26445
_EXPX_K = 1.1765631309
_EXPX_A = 0.94537622168


def _div(a: float, b: float) -> float:
    """Divide with IEEE 754 semantics for a zero divisor."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _negative_magnitude(x: float) -> float:
    """Return ``x`` with its binary32 sign bit forced on."""
    return _bits_to_float(_float_to_bits(x) | 0x80000000)


# Error function -------------------------------------------------------------


def fasterfc(x: float) -> float:
    """Approximate the complementary error function."""
    a = 0.07219054755431126
    b = 15.418191568719577
    c = 5.609846028328545
    vc = _negative_magnitude(c * x)
    xsq = x * x
    xquad = xsq * xsq
    return _div(2.0, 1.0 + fastpow2(_ERF_K * x)) - a * x * (
        b * xquad - 1.0
    ) * fasterpow2(vc)


def fastererfc(x: float) -> float:
    """Cruder, faster approximation of the complementary error function."""
    return _div(2.0, 1.0 + fasterpow2(_ERF_K * x))


def fasterf(x: float) -> float:
    """Approximate the error function."""
    return 1.0 - fasterfc(x)


def fastererf(x: float) -> float:
    """Cruder, faster approximation of the error function."""
    return 1.0 - fastererfc(x)


def fastinverseerf(x: float) -> float:
    """Approximate the inverse error function for ``-1 < x < 1``."""
    a = 0.020287853348211326
    b = 0.07236892874789555
    c = 0.9913030456864257
    d = 0.8059775923760193
    xsq = x * x
    return _INV_ERF_K * fastlog2(_div(1.0 + x, 1.0 - x)) + _div(
        x * (a - b * xsq), c - d * xsq
    )


def fasterinverseerf(x: float) -> float:
    """Cruder, faster approximation of the inverse error function."""
    return _INV_ERF_K * fasterlog2(_div(1.0 + x, 1.0 - x))


# Gamma family (positive arguments only) -------------------------------------


def fastlgamma(x: float) -> float:
    """Approximate ``log(gamma(x))`` for positive ``x``."""
    logterm = fastlog(x * (1.0 + x) * (2.0 + x))
    xp3 = 3.0 + x
    return (
        -2.081061466
        - x
        + _div(0.0833333, xp3)
        - logterm
        + (2.5 + x) * fastlog(xp3)
    )


def fasterlgamma(x: float) -> float:
    """Cruder, faster approximation of ``log(gamma(x))``."""
    return -0.0810614667 - x - fasterlog(x) + (0.5 + x) * fasterlog(1.0 + x)


def fastdigamma(x: float) -> float:
    """Approximate the digamma function for positive ``x``."""
    twopx = 2.0 + x
    logterm = fastlog(twopx)
    numerator = -48.0 + x * (-157.0 + x * (-127.0 - 30.0 * x))
    denominator = 12.0 * x * (1.0 + x) * twopx * twopx
    return _div(numerator, denominator) + logterm


def fasterdigamma(x: float) -> float:
    """Cruder, faster approximation of the digamma function."""
    onepx = 1.0 + x
    return _div(-1.0, x) - _div(1.0, 2 * onepx) + fasterlog(onepx)


# Hyperbolic functions -------------------------------------------------------


def fastsinh(p: float) -> float:
    """Approximate the hyperbolic sine."""
    return 0.5 * (fastexp(p) - fastexp(-p))


def fastersinh(p: float) -> float:
    """Cruder, faster approximation of the hyperbolic sine."""
    return 0.5 * (fasterexp(p) - fasterexp(-p))


def fastcosh(p: float) -> float:
    """Approximate the hyperbolic cosine."""
    return 0.5 * (fastexp(p) + fastexp(-p))


def fastercosh(p: float) -> float:
    """Cruder, faster approximation of the hyperbolic cosine."""
    return 0.5 * (fasterexp(p) + fasterexp(-p))


def fasttanh(p: float) -> float:
    """Approximate the hyperbolic tangent."""
    return -1.0 + _div(2.0, 1.0 + fastexp(-2.0 * p))


def fastertanh(p: float) -> float:
    """Cruder, faster approximation of the hyperbolic tangent."""
    return -1.0 + _div(2.0, 1.0 + fasterexp(-2.0 * p))


# Lambert W, upper branch ----------------------------------------------------


def _lambertw_coefficients(x: float) -> tuple[float, float, float]:
    if x < _LAMBERTW_THRESHOLD:
        return 1.546865557, 2.250366841, -0.737769969
    return 1.0, 0.0, 0.0


def fastlambertw(x: float) -> float:
    """Approximate the principal branch ``W0(x)`` of the Lambert W function."""
    c, d, a = _lambertw_coefficients(x)
    logterm = fastlog(c * x + d)
    loglogterm = fastlog(logterm)

    minusw = -a - logterm + loglogterm - _div(loglogterm, logterm)
    expminusw = fastexp(minusw)
    xexpminusw = x * expminusw
    pexpminusw = xexpminusw - minusw

    return _div(
        2.0 * xexpminusw - minusw * (4.0 * xexpminusw - minusw * pexpminusw),
        2.0 + pexpminusw * (2.0 - minusw),
    )


def fasterlambertw(x: float) -> float:
    """Cruder, faster approximation of ``W0(x)``."""
    c, d, a = _lambertw_coefficients(x)
    logterm = fasterlog(c * x + d)
    loglogterm = fasterlog(logterm)

    w = a + logterm - loglogterm + _div(loglogterm, logterm)
    expw = fasterexp(-w)
    return _div(w * w + expw * x, 1.0 + w)


def _expx_start(x: float, log) -> tuple[float, float]:
    logarg = max(x, _EXPX_K)
    powarg = _EXPX_A * (x - _EXPX_K) if x < _EXPX_K else 0.0
    logterm = log(logarg)
    powterm = fasterpow2(powarg)
    return powterm * (logarg - logterm + _div(logterm, logarg)), logarg


def fastlambertwexpx(x: float) -> float:
    """Approximate ``W0(exp(x))``."""
    w, _ = _expx_start(x, fastlog)
    logw = fastlog(w)
    p = x - logw
    return _div(
        w * (2.0 + p + w * (3.0 + 2.0 * p)),
        2.0 - p + w * (5.0 + 2.0 * w),
    )


def fasterlambertwexpx(x: float) -> float:
    """Cruder, faster approximation of ``W0(exp(x))``."""
    w, _ = _expx_start(x, fasterlog)
    logw = fasterlog(w)
    return _div(w * (1.0 + x - logw), 1.0 + w)