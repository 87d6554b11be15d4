# loguekit

Small, dependency-free DSP building blocks for writing and testing
oscillators and effects for logue-style synthesizers in Python. The
arithmetic follows the conventions of the target hardware: single
precision bit tricks, Q15/Q31 fixed point with saturation, and integer
conversions that truncate toward zero.

## Modules

- `loguekit.floatmath`: clipping (`clip01`, `clip1m1`, `clip_min_max`,
  ...), `fsel`, sign and bit inspection (`si_copysign`, `float_is_neg`,
  `float_mantissa`, `float_exponent`), truncating `si_floor` / `si_ceil`,
  `si_round` (halves away from zero), `linint`, `ampdb` / `dbamp`, and the
  frozen `F32Pair` sample pair with `+`, `-`, `*`, `add_scalar`, `scale`
  and `pair_linint`.
- `loguekit.fastmath`: fast approximations of sine, cosine and tangent
  (range-limited and full-domain variants), `fastlog2`, `fastpow2`,
  `fastpow`, `fastexp` and their coarser "faster" forms, `fasteratan2`,
  `fastertanh`, `fasterampdb`, `fasterdbamp` and cosine interpolation
  `cosint`.
- `loguekit.fixedmath`: `ssat`, saturating `qadd` / `qsub`, Q15/Q31 to
  float conversion and back (`q31_to_f32`, `f32_to_q31`, ...), and Q15/Q31
  add, subtract, multiply, abs, min and max.
- `loguekit.bufferops`: `q31_to_f32_buffer`, `f32_to_q31_buffer`,
  in-place `clear_buffer` and `copy_buffer` (lists or `array.array`).
  `copy_buffer` raises `ValueError` on a negative length or one longer
  than either buffer.
- `loguekit.biquad`: `Coeffs` with low/high pass, DC, band pass/reject
  and all-pass designs; `BiQuad` (transposed form II, first and second
  order processing); `ExtBiQuad` with all-pass based low/high pass,
  shelves, band pass/reject and peak/notch.
- `loguekit.simplelfo`: `SimpleLFO`, a Q31 phase accumulator with sine,
  triangle, saw and square shapes in bipolar and unipolar forms, each
  with a phase-offset variant.
- `loguekit.modfx`: `ModFxParamId` (`TIME`, `DEPTH`) and
  `modfx_param_id`, which raises `ValueError` for an unknown index.

## Installation

```
pip install loguekit
```

## Examples

Filter a signal with a first-order low pass:

```python
from loguekit.biquad import BiQuad

lpf = BiQuad()
lpf.coeffs.set_pole_lp(0.8)
out = [lpf.process_fo(x) for x in (1.0, 0.0, 0.0, 0.0)]
```

Run an LFO at 2 Hz on a 48 kHz clock:

```python
from loguekit.simplelfo import SimpleLFO

lfo = SimpleLFO()
lfo.set_f0(2.0, 1 / 48000)
for _ in range(64):
    lfo.cycle()
value = lfo.sine_bi()
```

Fixed-point conversion and saturation:

```python
from loguekit.fixedmath import f32_to_q31, qadd

assert f32_to_q31(0.5) == 0x40000000
assert qadd(0x7FFFFFFF, 1) == 0x7FFFFFFF
```

Convert a block of samples:

```python
from loguekit.bufferops import f32_to_q31_buffer, q31_to_f32_buffer

q = f32_to_q31_buffer([0.0, 0.5, -0.5])
back = q31_to_f32_buffer(q)
```

## What it does not do

loguekit is a library of signal-processing pieces only. It has no delay
lines, no oscillator parameter blocks, no delay or reverb effect
parameter ids, and it does not read or write user program headers or
check target and API compatibility. It does not render audio, talk to a
device or build loadable units, and it has no command-line tool.

## Running the tests

```
pip install "loguekit[test]"
pytest
```