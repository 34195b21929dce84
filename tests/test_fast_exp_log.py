import math

import pytest

from dspkit.fast_exp_log import (
    fasterexp,
    fasterlog,
    fasterlog2,
    fasterpow,
    fasterpow2,
    fastersigmoid,
    fastexp,
    fastlog,
    fastlog2,
    fastpow,
    fastpow2,
    fastsigmoid,
)


@pytest.mark.parametrize("p", [-10.0, -3.5, -1.0, -0.25, 0.0, 0.5, 1.0, 2.7, 7.0, 20.0])
def test_fastpow2_close_to_exact(p):
    assert fastpow2(p) == pytest.approx(2.0 ** p, rel=1e-4)


@pytest.mark.parametrize("p", [-10.0, -1.0, 0.0, 0.5, 3.0, 10.0])
def test_fasterpow2_rough(p):
    assert fasterpow2(p) == pytest.approx(2.0 ** p, rel=0.07)


@pytest.mark.parametrize("p", [-5.0, -1.0, 0.0, 1.0, 4.0])
def test_fastexp_close_to_exact(p):
    assert fastexp(p) == pytest.approx(math.exp(p), rel=1e-4)


@pytest.mark.parametrize("p", [-5.0, -1.0, 0.0, 1.0, 4.0])
def test_fasterexp_rough(p):
    assert fasterexp(p) == pytest.approx(math.exp(p), rel=0.07)


def test_pow2_underflow_is_clipped():
    assert fastpow2(-200.0) == fastpow2(-126.0)
    assert fasterpow2(-500.0) == fasterpow2(-126.0)
    assert 0.0 <= fastexp(-1000.0) < 1e-37


@pytest.mark.parametrize("x", [0.01, 0.3, 1.0, 2.0, 8.0, 100.0, 12345.0])
def test_fastlog2_close_to_exact(x):
    assert fastlog2(x) == pytest.approx(math.log2(x), abs=2e-4)


@pytest.mark.parametrize("x", [0.01, 0.3, 1.0, 2.0, 8.0, 100.0])
def test_fastlog_close_to_exact(x):
    assert fastlog(x) == pytest.approx(math.log(x), abs=2e-4)


@pytest.mark.parametrize("x", [0.01, 0.5, 1.0, 4.0, 1000.0])
def test_fasterlog2_rough(x):
    assert fasterlog2(x) == pytest.approx(math.log2(x), abs=0.1)


@pytest.mark.parametrize("x", [0.01, 0.5, 1.0, 4.0, 1000.0])
def test_fasterlog_rough(x):
    assert fasterlog(x) == pytest.approx(math.log(x), abs=0.07)


def test_exp_log_round_trip():
    for x in (0.1, 1.5, 3.0, 42.0):
        assert fastexp(fastlog(x)) == pytest.approx(x, rel=5e-4)


@pytest.mark.parametrize("x,p", [(2.0, 3.0), (10.0, 0.5), (3.0, -2.0), (0.5, 4.0)])
def test_fastpow_close_to_exact(x, p):
    assert fastpow(x, p) == pytest.approx(x ** p, rel=1e-3)


@pytest.mark.parametrize("x,p", [(2.0, 3.0), (10.0, 0.5), (3.0, -2.0)])
def test_fasterpow_rough(x, p):
    assert fasterpow(x, p) == pytest.approx(x ** p, rel=0.25)


@pytest.mark.parametrize("x", [-6.0, -2.0, -0.5, 0.0, 0.5, 2.0, 6.0])
def test_fastsigmoid_close_to_exact(x):
    assert fastsigmoid(x) == pytest.approx(1.0 / (1.0 + math.exp(-x)), abs=1e-4)


@pytest.mark.parametrize("x", [0.3, 1.0, 4.0])
def test_sigmoid_symmetry(x):
    assert fastsigmoid(x) + fastsigmoid(-x) == pytest.approx(1.0, abs=1e-4)
    assert fastersigmoid(x) + fastersigmoid(-x) == pytest.approx(1.0, abs=0.05)


def test_sigmoid_monotonic_and_bounded():
    values = [fastersigmoid(x / 4.0) for x in range(-40, 41)]
    assert all(a <= b for a, b in zip(values, values[1:]))
    assert all(0.0 < v < 1.0 for v in values)


def test_fastpow2_monotonic():
    values = [fastpow2(x / 8.0) for x in range(-80, 81)]
    assert all(a < b for a, b in zip(values, values[1:]))