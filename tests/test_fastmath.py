import math

import pytest

from loguekit import fastmath

SPAN = [i * math.pi / 16 for i in range(-16, 17)]
HALF_SPAN = [i * math.pi / 32 for i in range(-15, 16)]


@pytest.mark.parametrize("x", SPAN)
def test_fastsin_close_to_sin(x):
    assert fastmath.fastsin(x) == pytest.approx(math.sin(x), abs=1e-3)


@pytest.mark.parametrize("x", SPAN)
def test_fastersin_close_to_sin(x):
    assert fastmath.fastersin(x) == pytest.approx(math.sin(x), abs=5e-3)


def test_fastsin_odd_symmetry():
    for x in SPAN:
        assert fastmath.fastsin(-x) == pytest.approx(-fastmath.fastsin(x), abs=1e-12)


@pytest.mark.parametrize("x", [-20.0, -7.5, -1.0, 0.3, 4.0, 7.0, 13.2, 50.0])
def test_full_domain_sines(x):
    assert fastmath.fastsinfull(x) == pytest.approx(math.sin(x), abs=1e-3)
    assert fastmath.fastersinfull(x) == pytest.approx(math.sin(x), abs=5e-3)


@pytest.mark.parametrize("x", [-20.0, -2.0, 0.0, 1.0, 5.5, 11.0])
def test_full_domain_cosines(x):
    assert fastmath.fastcosfull(x) == pytest.approx(math.cos(x), abs=5e-3)
    assert fastmath.fastercosfull(x) == pytest.approx(math.cos(x), abs=5e-3)


@pytest.mark.parametrize("x", HALF_SPAN)
def test_fasttan_close_to_tan(x):
    assert fastmath.fasttan(x) == pytest.approx(math.tan(x), rel=1e-2, abs=1e-3)


@pytest.mark.parametrize("x", [-7.0, -1.0, 0.4, 1.0, 4.0, 9.0])
def test_full_domain_tangents(x):
    assert fastmath.fasttanfull(x) == pytest.approx(math.tan(x), rel=1e-2, abs=1e-3)
    assert fastmath.fastertanfull(x) == pytest.approx(math.tan(x), rel=3e-2, abs=1e-2)


@pytest.mark.parametrize("x", [0.001, 0.1, 0.5, 1.0, 3.0, 10.0, 1000.0])
def test_logarithms(x):
    assert fastmath.fastlog2(x) == pytest.approx(math.log2(x), abs=1e-3)
    assert fastmath.fasterlog2(x) == pytest.approx(math.log2(x), abs=0.1)
    assert fastmath.fastlog(x) == pytest.approx(math.log(x), abs=1e-3)
    assert fastmath.fasterlog(x) == pytest.approx(math.log(x), abs=0.1)


@pytest.mark.parametrize("p", [-20.0, -5.3, -2.5, -0.5, 0.0, 1.0, 3.0])
def test_fastpow2_negative_and_integer(p):
    assert fastmath.fastpow2(p) == pytest.approx(2.0**p, rel=1e-3)


@pytest.mark.parametrize("p", [-10.0, -3.7, -0.2, 0.0, 0.5, 2.25, 6.0])
def test_fasterpow2_rough(p):
    assert fastmath.fasterpow2(p) == pytest.approx(2.0**p, rel=0.1)


def test_pow2_clips_below_minus_126():
    assert fastmath.fasterpow2(-500.0) == fastmath.fasterpow2(-126.0)
    assert fastmath.fastpow2(-500.0) == fastmath.fastpow2(-126.0)


@pytest.mark.parametrize("x", [0.25, 1.0, 10.0, 12345.0])
def test_faster_log_pow_round_trip(x):
    assert fastmath.fasterpow2(fastmath.fasterlog2(x)) == pytest.approx(x, rel=1e-6)


@pytest.mark.parametrize("x", [0.01, 0.3, 0.9])
def test_fast_log_pow_round_trip(x):
    assert fastmath.fastpow2(fastmath.fastlog2(x)) == pytest.approx(x, rel=1e-3)


@pytest.mark.parametrize("x,p", [(0.5, 2.0), (0.2, 3.0), (4.0, -0.5), (8.0, -2.0)])
def test_fastpow(x, p):
    assert fastmath.fastpow(x, p) == pytest.approx(x**p, rel=2e-3)
    assert fastmath.fasterpow(x, p) == pytest.approx(x**p, rel=0.15)


@pytest.mark.parametrize("p", [-30.0, -3.0, -0.7, 0.0])
def test_exponentials(p):
    assert fastmath.fastexp(p) == pytest.approx(math.exp(p), rel=1e-3)
    assert fastmath.fasterexp(p) == pytest.approx(math.exp(p), rel=0.1)


@pytest.mark.parametrize(
    "y,x", [(1.0, 0.0), (1.0, 1.0), (-1.0, 1.0), (0.5, -2.0), (-3.0, -1.0), (0.0, 1.0)]
)
def test_fasteratan2(y, x):
    assert fastmath.fasteratan2(y, x) == pytest.approx(math.atan2(y, x), abs=0.075)


def test_fasteratan2_sign_follows_y():
    assert fastmath.fasteratan2(-2.0, -1.0) < 0 < fastmath.fasteratan2(2.0, -1.0)


@pytest.mark.parametrize("x", [i / 8 for i in range(0, 17)])
def test_fastertanh(x):
    assert fastmath.fastertanh(x) == pytest.approx(math.tanh(x), abs=1e-3)


def test_fasterampdb_step_per_octave():
    one = fastmath.fasterampdb(1.0)
    two = fastmath.fasterampdb(2.0)
    four = fastmath.fasterampdb(4.0)
    assert two - one == pytest.approx(3.3219280948873626)
    assert four - two == pytest.approx(two - one)


@pytest.mark.parametrize("db", [-40.0, -6.0, 0.0, 6.0, 20.0])
def test_fasterdbamp(db):
    assert fastmath.fasterdbamp(db) == pytest.approx(10 ** (db / 20), rel=0.15)


def test_cosint_endpoints_and_midpoint():
    assert fastmath.cosint(0.0, 2.0, 4.0) == pytest.approx(2.0, abs=1e-2)
    assert fastmath.cosint(1.0, 2.0, 4.0) == pytest.approx(4.0, abs=1e-2)
    assert fastmath.cosint(0.5, 2.0, 4.0) == pytest.approx(3.0, abs=1e-6)


def test_cosint_monotonic():
    values = [fastmath.cosint(i / 10, -1.0, 1.0) for i in range(11)]
    assert values == sorted(values)