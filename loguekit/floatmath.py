"""Floating point helpers: pairs, clipping, rounding, interpolation and dB conversion."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

M_E = 2.718281828459045
M_LOG2E = 1.44269504088896
M_LOG10E = 0.4342944819032518
M_LN2 = 0.6931471805599453094
M_LN10 = 2.30258509299404568402
M_PI = 3.141592653589793
M_TWOPI = 6.283185307179586
M_PI_2 = 1.5707963267948966
M_PI_4 = 0.7853981633974483
M_1_PI = 0.3183098861837907
M_2_PI = 0.6366197723675814
M_4_PI = 1.2732395447351627
M_1_TWOPI = 0.15915494309189534
M_2_SQRTPI = 1.1283791670955126
M_4_PI2 = 0.40528473456935109
M_SQRT2 = 1.41421356237309504880
M_1_SQRT2 = 0.7071067811865475

F32_FRAC_MASK = (1 << 23) - 1
F32_EXP_MASK = ((1 << 9) - 1) << 23
F32_SIGN_MASK = 0x80000000


def _f32_bits(f: float) -> int:
    """Return the IEEE-754 single precision bit pattern of ``f``."""
    return struct.unpack("<I", struct.pack("<f", f))[0]


@dataclass(frozen=True)
class F32Pair:
    """A pair of samples, typically a stereo frame."""

    a: float = 0.0
    b: float = 0.0

    def __add__(self, other: F32Pair) -> F32Pair:
        return F32Pair(self.a + other.a, self.b + other.b)

    def __sub__(self, other: F32Pair) -> F32Pair:
        return F32Pair(self.a - other.a, self.b - other.b)

    def __mul__(self, other: F32Pair) -> F32Pair:
        return F32Pair(self.a * other.a, self.b * other.b)

    def add_scalar(self, scalar: float) -> F32Pair:
        """Add ``scalar`` to both members."""
        return F32Pair(self.a + scalar, self.b + scalar)

    def scale(self, scalar: float) -> F32Pair:
        """Multiply both members by ``scalar``."""
        return F32Pair(self.a * scalar, self.b * scalar)


def pair_linint(fr: float, p0: F32Pair, p1: F32Pair) -> F32Pair:
    """Linear interpolation between two pairs."""
    frinv = 1.0 - fr
    return F32Pair(frinv * p0.a + fr * p1.a, frinv * p0.b + fr * p1.b)


def fsel(a: float, b: float, c: float) -> float:
    """Return ``b`` when ``a`` is non-negative, otherwise ``c``."""
    return b if a >= 0 else c


def fselb(a: float) -> int:
    """Return 1 when ``a`` is non-negative, otherwise 0."""
    return 1 if a >= 0 else 0


def float_is_neg(f: float) -> bool:
    """True if the sign bit of the single precision value is set."""
    return (_f32_bits(f) >> 31) != 0


def float_mantissa(f: float) -> int:
    """The 23 fraction bits of the single precision value."""
    return _f32_bits(f) & F32_FRAC_MASK


def float_exponent(f: float) -> int:
    """The 8 biased exponent bits of the single precision value."""
    return (_f32_bits(f) >> 23) & 0xFF


def si_copysign(x: float, y: float) -> float:
    """Return ``x`` with the sign of ``y``."""
    return math.copysign(x, y)


def si_fabs(x: float) -> float:
    """Absolute value."""
    return math.fabs(x)


def si_floor(x: float) -> float:
    """Integer part of ``x``, truncating toward zero."""
    return float(math.trunc(x))


def si_ceil(x: float) -> float:
    """Integer part of ``x`` plus one."""
    return float(math.trunc(x) + 1)


def si_round(x: float) -> float:
    """Round to nearest integer, halves away from zero."""
    return float(math.trunc(x + math.copysign(0.5, x)))


def clip_max(x: float, m: float) -> float:
    """Clip upper bound of ``x`` to ``m`` (inclusive)."""
    return fsel(x - m, m, x)


def clip_min(m: float, x: float) -> float:
    """Clip lower bound of ``x`` to ``m`` (inclusive)."""
    return fsel(x - m, x, m)


def clip_min_max(lo: float, x: float, hi: float) -> float:
    """Clip ``x`` to ``[lo, hi]`` (inclusive)."""
    x = fsel(x - lo, x, lo)
    return fsel(x - hi, hi, x)


def clip0(x: float) -> float:
    """Clip lower bound of ``x`` to 0."""
    return clip_min(0.0, x)


def clip1(x: float) -> float:
    """Clip upper bound of ``x`` to 1."""
    return clip_max(x, 1.0)


def clip01(x: float) -> float:
    """Clip ``x`` to ``[0, 1]``."""
    return clip_min_max(0.0, x, 1.0)


def clipm1(x: float) -> float:
    """Clip lower bound of ``x`` to -1."""
    return clip_min(-1.0, x)


def clip1m1(x: float) -> float:
    """Clip ``x`` to ``[-1, 1]``."""
    return clip_min_max(-1.0, x, 1.0)


def ampdb(amp: float) -> float:
    """Amplitude to decibels; negative amplitudes give -999."""
    if amp < 0.0:
        return -999.0
    if amp == 0.0:
        return -math.inf
    return 20.0 * math.log10(amp)


def dbamp(db: float) -> float:
    """Decibels to amplitude."""
    return 10.0 ** (0.05 * db)


def linint(fr: float, x0: float, x1: float) -> float:
    """Linear interpolation between ``x0`` and ``x1``."""
    return x0 + fr * (x1 - x0)