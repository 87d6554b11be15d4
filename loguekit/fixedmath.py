"""Fixed point arithmetic on Q15 and Q31 values with saturation.

Values are plain Python integers holding signed 16-bit (Q15) or signed
32-bit (Q31) quantities. Operations that saturate on the target hardware
saturate here too, and casts to a narrower type wrap as a two's complement
cast would.
"""

from __future__ import annotations

import math

Q15_TO_F32_C = 3.05175781250000e-005
Q31_TO_F32_C = 4.65661287307739e-010

Q15_MAX = 0x7FFF
Q15_MIN = -0x8000
Q31_MAX = 0x7FFFFFFF
Q31_MIN = -0x80000000

M_HALPI_Q1_14 = 0x6488
M_HALPI_Q1_30 = 0x6487ED51
M_PI_Q2_13 = 0x6488
M_PI_Q2_29 = 0x6487ED51
M_1OVERPI_Q15 = 0x28BE
M_1OVERPI_Q31 = 0x28BE60DC
M_TWOPI_Q3_12 = 0x6488
M_TWOPI_Q3_28 = 0x6487ED51

M_1OVER48K_Q31 = 0x0000AEC3
M_1OVER44K_Q31 = 0x0000BE38
M_1OVER22K_Q31 = 0x00017C70

_F32_Q31_SCALE = float(1 << 31)  # 0x7FFFFFFF rounded to single precision


def _wrap(value: int, bits: int) -> int:
    """Two's complement cast of ``value`` to a signed ``bits``-wide integer."""
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _wrap16(value: int) -> int:
    return _wrap(int(value), 16)


def _wrap32(value: int) -> int:
    return _wrap(int(value), 32)


def ssat(value: int, bits: int) -> int:
    """Saturate ``value`` to the signed range of ``bits`` bits (1..32)."""
    if not 1 <= bits <= 32:
        raise ValueError(f"saturation width {bits} outside 1..32")
    hi = (1 << (bits - 1)) - 1
    lo = -(1 << (bits - 1))
    return max(lo, min(hi, int(value)))


def qadd(a: int, b: int) -> int:
    """Saturating 32-bit signed addition."""
    return ssat(_wrap32(a) + _wrap32(b), 32)


def qsub(a: int, b: int) -> int:
    """Saturating 32-bit signed subtraction."""
    return ssat(_wrap32(a) - _wrap32(b), 32)


def _qadd16(a: int, b: int) -> int:
    return ssat(_wrap16(a) + _wrap16(b), 16)


def _qsub16(a: int, b: int) -> int:
    return ssat(_wrap16(a) - _wrap16(b), 16)


def q15_to_f32(q: int) -> float:
    """Convert a Q15 value to float."""
    return float(q) * Q15_TO_F32_C


def q31_to_f32(q: int) -> float:
    """Convert a Q31 value to float."""
    return float(q) * Q31_TO_F32_C


def f32_to_q15(f: float) -> int:
    """Convert a float to Q15, saturating outside [-1, 1)."""
    return ssat(_f32_to_int32(float(f) * ((1 << 15) - 1)), 16)


def f32_to_q31(f: float) -> int:
    """Convert a float to Q31, saturating outside [-1, 1)."""
    return _f32_to_int32(float(f) * _F32_Q31_SCALE)


def _f32_to_int32(x: float) -> int:
    """Float to int32 conversion truncating toward zero and saturating."""
    if math.isnan(x):
        return 0
    if math.isinf(x):
        return Q31_MAX if x > 0 else Q31_MIN
    return ssat(math.trunc(x), 32)


def q15add(a: int, b: int) -> int:
    """Saturating Q15 addition."""
    return _qadd16(a, b)


def q15sub(a: int, b: int) -> int:
    """Saturating Q15 subtraction."""
    return _qsub16(a, b)


def q15mul(a: int, b: int) -> int:
    """Q15 multiplication; the result is cast back to 16 bits."""
    return _wrap16((_wrap16(a) * _wrap16(b)) >> 15)


def q15absmul(a: int, b: int) -> int:
    """Negated Q15 product of ``a`` and ``-b``."""
    return -q15mul(a, -_wrap16(b))


def q15abs(a: int) -> int:
    """Saturating Q15 absolute value."""
    a = _wrap16(a)
    sign = a >> 15
    return _qsub16(a ^ sign, sign)


def q15max(a: int, b: int) -> int:
    """Larger of two Q15 values."""
    a, b = _wrap16(a), _wrap16(b)
    return a if a >= b else b


def q15min(a: int, b: int) -> int:
    """Smaller of two Q15 values."""
    a, b = _wrap16(a), _wrap16(b)
    return a if a <= b else b


def q31add(a: int, b: int) -> int:
    """Saturating Q31 addition."""
    return qadd(a, b)


def q31sub(a: int, b: int) -> int:
    """Saturating Q31 subtraction."""
    return qsub(a, b)


def q31mul(a: int, b: int) -> int:
    """Q31 multiplication; the result is cast back to 32 bits."""
    return _wrap32((_wrap32(a) * _wrap32(b)) >> 31)


def q31absmul(a: int, b: int) -> int:
    """Negated Q31 product of ``a`` and ``-b``."""
    return -q31mul(a, -_wrap32(b))


def q31abs(a: int) -> int:
    """Saturating Q31 absolute value."""
    a = _wrap32(a)
    sign = a >> 31
    return qsub(a ^ sign, sign)


def q31max(a: int, b: int) -> int:
    """Larger of two Q31 values."""
    a, b = _wrap32(a), _wrap32(b)
    return a if a >= b else b


def q31min(a: int, b: int) -> int:
    """Smaller of two Q31 values."""
    a, b = _wrap32(a), _wrap32(b)
    return a if a <= b else b