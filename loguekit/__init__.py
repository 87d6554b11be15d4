"""DSP building blocks for logue-style synthesizers: float and fixed-point math, buffers, biquads, an LFO."""

__version__ = "0.1.0"

__all__ = [
    "biquad",
    "bufferops",
    "fastmath",
    "fixedmath",
    "floatmath",
    "modfx",
    "simplelfo",
]