import array

import pytest

from loguekit.bufferops import (
    clear_buffer,
    copy_buffer,
    f32_to_q31_buffer,
    q31_to_f32_buffer,
)
from loguekit.fixedmath import f32_to_q31, q31_to_f32


def test_q31_to_f32_buffer_matches_scalar():
    samples = [0x7FFFFFFF, -0x80000000, 0, 12345, -999]
    assert q31_to_f32_buffer(samples) == [q31_to_f32(q) for q in samples]


def test_q31_to_f32_buffer_full_scale():
    out = q31_to_f32_buffer([0x7FFFFFFF, -0x80000000])
    assert out[0] == pytest.approx(1.0)
    assert out[1] == pytest.approx(-1.0)


def test_f32_to_q31_buffer_matches_scalar():
    samples = [0.0, 0.25, -0.5, 0.999, -1.0, 3.0]
    assert f32_to_q31_buffer(samples) == [f32_to_q31(f) for f in samples]


def test_buffer_round_trip_lengths_not_multiple_of_four():
    samples = [i * 0x1000000 - 0x30000000 for i in range(7)]
    back = f32_to_q31_buffer(q31_to_f32_buffer(samples))
    assert len(back) == len(samples)
    assert all(abs(b - s) <= 1 for b, s in zip(back, samples))


def test_conversion_accepts_generators_and_empty():
    assert q31_to_f32_buffer(iter([])) == []
    assert f32_to_q31_buffer(x for x in [0.5]) == [f32_to_q31(0.5)]


def test_clear_float_list():
    buf = [0.5, -1.0, 3.25]
    clear_buffer(buf)
    assert buf == [0.0, 0.0, 0.0]
    assert all(isinstance(v, float) for v in buf)


def test_clear_arrays():
    floats = array.array("f", [1.0, 2.0, 3.0, 4.0, 5.0])
    ints = array.array("I", [7, 8, 9])
    clear_buffer(floats)
    clear_buffer(ints)
    assert list(floats) == [0.0] * 5
    assert list(ints) == [0, 0, 0]


def test_copy_partial_into_list():
    src = [1.0, 2.0, 3.0, 4.0, 5.0]
    dst = [0.0] * 6
    copy_buffer(src, dst, 3)
    assert dst == src[:3] + [0.0] * 3


def test_copy_into_array_from_list():
    dst = array.array("I", [0, 0, 0, 0])
    copy_buffer([10, 20, 30, 40, 50], dst, 4)
    assert list(dst) == [10, 20, 30, 40]


@pytest.mark.parametrize(
    "src_len,dst_len,length", [(2, 5, 3), (5, 2, 3), (3, 3, -1)]
)
def test_copy_rejects_bad_lengths(src_len, dst_len, length):
    with pytest.raises(ValueError):
        copy_buffer([0] * src_len, [0] * dst_len, length)