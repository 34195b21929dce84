import math

import pytest

from dspkit import base


@pytest.mark.parametrize("x", [-2.5, -1.0, 0.3, 1.2, 3.0])
def test_fast_sin_and_cos(x):
    assert base.fast_sin(x) == pytest.approx(math.sin(x), abs=0.01)
    assert base.fast_cos(x) == pytest.approx(math.cos(x), abs=0.01)
    assert base.faster_sin(x) == pytest.approx(math.sin(x), abs=0.06)
    assert base.faster_cos(x) == pytest.approx(math.cos(x), abs=0.06)


@pytest.mark.parametrize("x", [-1.0, -0.4, 0.2, 0.9])
def test_fast_tan(x):
    assert base.fast_tan(x) == pytest.approx(math.tan(x), rel=0.02, abs=0.01)
    assert base.faster_tan(x) == pytest.approx(math.tan(x), rel=0.1, abs=0.05)


def test_rational_tanh_is_odd_and_close():
    for x in (0.25, 0.5, 1.0, 2.0):
        assert base.fast_rational_tanh(-x) == -base.fast_rational_tanh(x)
        assert base.fast_rational_tanh(x) == pytest.approx(math.tanh(x), abs=0.03)
    assert base.fast_rational_tanh(0.0) == 0.0


@pytest.mark.parametrize("x", [-3.0, -0.5, 0.0, 1.0, 4.0])
def test_fast_exp(x):
    assert base.fast_exp(x) == pytest.approx(math.exp(x), rel=0.001)
    assert base.faster_exp(x) == pytest.approx(math.exp(x), rel=0.1)


@pytest.mark.parametrize(
    "fn",
    [
        base.fast_exp3,
        base.fast_exp4,
        base.fast_exp5,
        base.fast_exp6,
        base.fast_exp7,
        base.fast_exp8,
        base.fast_exp9,
    ],
)
def test_taylor_exp_near_zero(fn):
    for x in (-0.2, 0.0, 0.1, 0.3):
        assert fn(x) == pytest.approx(math.exp(x), rel=1e-3)


def test_higher_taylor_orders_are_more_accurate():
    x = 1.0
    err3 = abs(base.fast_exp3(x) - math.e)
    err9 = abs(base.fast_exp9(x) - math.e)
    assert err9 < err3


def test_linear_interpolate_endpoints():
    assert base.linear_interpolate(2.0, 6.0, 0.0) == 2.0
    assert base.linear_interpolate(2.0, 6.0, 1.0) == 6.0
    assert base.linear_interpolate(2.0, 6.0, 0.5) == 4.0


@pytest.mark.parametrize("val", [0.1, 1.0, 2.0, 7.5, 300.0])
def test_fast_inverse(val):
    assert base.fast_inverse(val) == pytest.approx(1.0 / val, rel=0.15)


def test_fast_div():
    assert base.fast_div(6.0, 3.0) == pytest.approx(6.0 / 3.0, rel=0.15)


@pytest.mark.parametrize("x", [0.5, 1.0, 10.0, 1000.0])
def test_logs(x):
    assert base.fast_log(x) == pytest.approx(math.log(x), abs=0.001)
    assert base.faster_log(x) == pytest.approx(math.log(x), abs=0.1)
    assert base.fast_log2(x) == pytest.approx(math.log2(x), abs=0.001)
    assert base.faster_log2(x) == pytest.approx(math.log2(x), abs=0.1)
    assert base.fast_log10(x) == pytest.approx(math.log10(x), abs=0.001)
    assert base.faster_log10(x) == pytest.approx(math.log10(x), abs=0.05)


@pytest.mark.parametrize("x", [-3.0, -0.5, 0.0, 2.5, 10.0])
def test_pow2(x):
    assert base.fast_pow2(x) == pytest.approx(2.0**x, rel=0.001)
    assert base.faster_pow2(x) == pytest.approx(2.0**x, rel=0.1)


@pytest.mark.parametrize("x", [0.25, 2.0, 16.0, 100.0])
def test_fast_sqrt(x):
    assert base.fast_sqrt(x) == pytest.approx(math.sqrt(x), rel=0.01)


@pytest.mark.parametrize("x", [-1.0, 0.5, 2.0])
def test_pow10(x):
    assert base.fast_pow10(x) == pytest.approx(10.0**x, rel=0.01)
    assert base.faster_pow10(x) == pytest.approx(10.0**x, rel=0.2)


def test_abs_within():
    assert base.abs_within(1.0, 1.05, 0.1)
    assert not base.abs_within(1.0, 1.2, 0.1)
    assert base.abs_within(3, 5, 2)
    assert not base.abs_within(3, 6, 2)


def test_rel_within():
    assert base.rel_within(100.0, 101.0, 0.02)
    assert not base.rel_within(100.0, 110.0, 0.02)
    assert base.rel_within(-50.0, -50.5, 0.02)


def test_fast_random_seed_one_first_value():
    rng = base.FastRandom(1)
    assert rng() == 41


def test_fast_random_is_deterministic_and_in_range():
    a = base.FastRandom(1234)
    b = base.FastRandom(1234)
    first = [a() for _ in range(200)]
    assert first == [b() for _ in range(200)]
    assert all(0 <= v <= 0x7FFF for v in first)


def test_fast_rand_in_range():
    values = [base.fast_rand() for _ in range(100)]
    assert all(0 <= v <= 0x7FFF for v in values)
    assert len(set(values)) > 1


def test_min_max_range():
    r = base.MinMaxRange(min=-1.0, max=1.0)
    assert (r.min, r.max) == (-1.0, 1.0)
    assert r == base.MinMaxRange(-1.0, 1.0)


def test_pi_with_fast_trig():
    assert base.fast_sin(base.pi / 2) == pytest.approx(1.0, abs=0.01)
    assert base.fast_cos(base.pi) == pytest.approx(-1.0, abs=0.01)