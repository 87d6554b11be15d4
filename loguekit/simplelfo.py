"""Simple low frequency oscillator driven by a wrapping Q31 phase accumulator."""

from __future__ import annotations

from dataclasses import dataclass

from loguekit.fixedmath import Q31_MIN, f32_to_q31, q31_to_f32, q31abs, qadd, qsub
from loguekit.floatmath import si_fabs

_QUARTER = 0x40000000


def _wrap32(value: int) -> int:
    """Two's complement cast to a signed 32-bit integer."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


@dataclass
class SimpleLFO:
    """LFO whose phase ``phi0`` spans the signed 32-bit range once per period."""

    phi0: int = Q31_MIN
    w0: int = 0

    def cycle(self) -> None:
        """Advance the phase by one step."""
        self.phi0 = _wrap32(self.phi0 + self.w0)

    def reset(self) -> None:
        """Return the phase to the start of the period."""
        self.phi0 = Q31_MIN

    def set_f0(self, f0: float, fsrecip: float) -> None:
        """Set the frequency in Hz given the reciprocal sampling rate."""
        self.w0 = f32_to_q31(2.0 * f0 * fsrecip)

    def set_w0(self, w: float) -> None:
        """Set the frequency as a normalised increment per step."""
        self.w0 = f32_to_q31(2.0 * w)

    def _offset_phase(self, offset: float) -> int:
        return _wrap32(self.phi0 + f32_to_q31(2.0 * offset))

    def _shifted_phase(self, offset: float) -> int:
        return _wrap32(self.phi0 + _wrap32(f32_to_q31(offset) << 1))

    @staticmethod
    def _sine_bi_at(phi: int) -> float:
        phif = q31_to_f32(phi)
        return 4.0 * phif * (si_fabs(phif) - 1.0)

    @staticmethod
    def _sine_uni_at(phi: int) -> float:
        phif = q31_to_f32(phi)
        return 0.5 + 2.0 * phif * (si_fabs(phif) - 1.0)

    @staticmethod
    def _triangle_bi_at(phi: int) -> float:
        return q31_to_f32(_wrap32(qsub(q31abs(phi), _QUARTER) << 1))

    # --- Sinusoids ---

    def sine_bi(self) -> float:
        """Bipolar parabolic sine at the current phase."""
        return self._sine_bi_at(self.phi0)

    def sine_uni(self) -> float:
        """Unipolar parabolic sine at the current phase."""
        return self._sine_uni_at(self.phi0)

    def sine_bi_off(self, offset: float) -> float:
        """Bipolar sine at the current phase shifted by ``offset`` in [-1, 1]."""
        return self._sine_bi_at(self._offset_phase(offset))

    def sine_uni_off(self, offset: float) -> float:
        """Unipolar sine at the current phase shifted by ``offset`` in [-1, 1]."""
        return self._sine_uni_at(self._offset_phase(offset))

    # --- Triangles ---

    def triangle_bi(self) -> float:
        """Bipolar triangle at the current phase."""
        return self._triangle_bi_at(self.phi0)

    def triangle_uni(self) -> float:
        """Unipolar triangle at the current phase."""
        return si_fabs(q31_to_f32(self.phi0))

    def triangle_bi_off(self, offset: float) -> float:
        """Bipolar triangle at the current phase shifted by ``offset``."""
        return self._triangle_bi_at(self._offset_phase(offset))

    def triangle_uni_off(self, offset: float) -> float:
        """Unipolar triangle at the current phase shifted by ``offset``."""
        return si_fabs(q31_to_f32(self._offset_phase(offset)))

    # --- Saws ---

    def saw_bi(self) -> float:
        """Bipolar saw at the current phase."""
        return q31_to_f32(self.phi0)

    def saw_uni(self) -> float:
        """Unipolar saw at the current phase."""
        return q31_to_f32(qadd(self.phi0 >> 1, _QUARTER))

    def saw_bi_off(self, offset: float) -> float:
        """Bipolar saw at the current phase shifted by ``offset``."""
        return q31_to_f32(self._shifted_phase(offset))

    def saw_uni_off(self, offset: float) -> float:
        """Half of the shifted raw integer phase plus one half (not normalised)."""
        phi = self._shifted_phase(offset)
        return 0.5 * phi + 0.5

    # --- Squares ---

    def square_bi(self) -> float:
        """Bipolar square at the current phase."""
        return -1.0 if self.phi0 < 0 else 1.0

    def square_uni(self) -> float:
        """Unipolar square at the current phase."""
        return 0.0 if self.phi0 < 0 else 1.0

    def square_bi_off(self, offset: float) -> float:
        """Bipolar square at the current phase shifted by ``offset``."""
        return -1.0 if self._shifted_phase(offset) < 0 else 1.0

    def square_uni_off(self, offset: float) -> float:
        """Unipolar square at the current phase shifted by ``offset``."""
        return 0.0 if self._shifted_phase(offset) < 0 else 1.0