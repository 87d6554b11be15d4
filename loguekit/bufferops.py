"""Whole-buffer sample format conversion, clearing and copying."""

from __future__ import annotations

import array
from collections.abc import Iterable, MutableSequence, Sequence

from loguekit.fixedmath import f32_to_q31, q31_to_f32


def q31_to_f32_buffer(samples: Iterable[int]) -> list[float]:
    """Convert Q31 samples to floats."""
    return [q31_to_f32(q) for q in samples]


def f32_to_q31_buffer(samples: Iterable[float]) -> list[int]:
    """Convert float samples to Q31."""
    return [f32_to_q31(f) for f in samples]


def _assign(dst: MutableSequence, stop: int, values: list) -> None:
    if isinstance(dst, array.array):
        dst[:stop] = array.array(dst.typecode, values)
    else:
        dst[:stop] = values


def clear_buffer(buffer: MutableSequence) -> None:
    """Set every element of ``buffer`` to zero of its own type, in place."""
    _assign(buffer, len(buffer), [type(v)() for v in buffer])


def copy_buffer(src: Sequence, dst: MutableSequence, length: int) -> None:
    """Copy the first ``length`` elements of ``src`` over those of ``dst``."""
    if length < 0:
        raise ValueError(f"negative length {length}")
    if length > len(src):
        raise ValueError(f"source holds {len(src)} samples, {length} requested")
    if length > len(dst):
        raise ValueError(f"destination holds {len(dst)} samples, {length} requested")
    _assign(dst, length, list(src[:length]))