"""Transposed direct form II biquad filters and their coefficient designs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Coeffs:
    """Feed-forward and feedback coefficients of a biquad section."""

    ff0: float = 0.0
    ff1: float = 0.0
    ff2: float = 0.0
    fb1: float = 0.0
    fb2: float = 0.0

    @staticmethod
    def wc(fc: float, fsrecip: float) -> float:
        """Normalised frequency of ``fc`` Hz given the reciprocal sampling rate."""
        return fc * fsrecip

    def set_pole_lp(self, pole: float) -> None:
        """Single pole low pass."""
        self.ff0 = 1.0 - pole
        self.fb1 = -pole
        self.ff1 = self.ff2 = self.fb2 = 0.0

    def set_pole_hp(self, pole: float) -> None:
        """Single pole high pass."""
        self.ff0 = 1.0 - pole
        self.fb1 = pole
        self.ff1 = self.ff2 = self.fb2 = 0.0

    def set_fodc(self, pole: float) -> None:
        """Single pole DC blocker."""
        self.ff0 = 1.0
        self.ff1 = -1.0
        self.fb1 = -pole
        self.ff2 = self.fb2 = 0.0

    def set_folp(self, k: float) -> None:
        """First order low pass; ``k`` is tan(pi*wc)."""
        kp1 = k + 1.0
        km1 = k - 1.0
        self.ff0 = self.ff1 = k / kp1
        self.fb1 = km1 / kp1
        self.ff2 = self.fb2 = 0.0

    def set_fohp(self, k: float) -> None:
        """First order high pass; ``k`` is tan(pi*wc)."""
        kp1 = k + 1.0
        km1 = k - 1.0
        self.ff0 = 1.0 / kp1
        self.ff1 = -self.ff0
        self.fb1 = km1 / kp1
        self.ff2 = self.fb2 = 0.0

    def set_foap(self, k: float) -> None:
        """First order all pass; ``k`` is tan(pi*wc)."""
        kp1 = k + 1.0
        km1 = k - 1.0
        self.ff0 = self.fb1 = km1 / kp1
        self.ff1 = 1.0
        self.ff2 = self.fb2 = 0.0

    def set_foap2(self, wc: float) -> None:
        """First order all pass from a normalised cutoff, without a tangent."""
        g1 = 1.0 - wc
        self.ff0 = g1
        self.ff1 = -1.0
        self.fb1 = -g1
        self.ff2 = self.fb2 = 0.0

    def set_sodc(self, pole: float) -> None:
        """Second order DC filter."""
        self.ff0 = self.ff2 = 1.0
        self.ff1 = 2.0
        self.fb1 = -2.0 * pole
        self.fb2 = pole * pole

    def _so_common(self, k: float, q: float) -> tuple[float, float]:
        qk2 = q * k * k
        norm = 1.0 / (qk2 + k + q)
        self.fb1 = 2.0 * (qk2 - q) * norm
        self.fb2 = (qk2 - k + q) * norm
        return qk2, norm

    def set_solp(self, k: float, q: float) -> None:
        """Second order low pass; flat response at q = sqrt(2)."""
        qk2, norm = self._so_common(k, q)
        self.ff0 = self.ff2 = qk2 * norm
        self.ff1 = 2.0 * self.ff0

    def set_sohp(self, k: float, q: float) -> None:
        """Second order high pass; flat response at q = sqrt(2)."""
        _, norm = self._so_common(k, q)
        self.ff0 = self.ff2 = q * norm
        self.ff1 = -2.0 * self.ff0

    def set_sobp(self, k: float, q: float) -> None:
        """Second order band pass; ``q`` is the inverse relative bandwidth."""
        _, norm = self._so_common(k, q)
        self.ff0 = k * norm
        self.ff1 = 0.0
        self.ff2 = -self.ff0

    def set_sobr(self, k: float, q: float) -> None:
        """Second order band reject; ``q`` is the inverse relative bandwidth."""
        qk2, norm = self._so_common(k, q)
        self.ff0 = self.ff2 = (qk2 + q) * norm
        self.ff1 = self.fb1

    def set_soap1(self, k: float, q: float) -> None:
        """Second order all pass; ``q`` is the inverse relative bandwidth."""
        self._so_common(k, q)
        self.ff0 = self.fb2
        self.ff1 = self.fb1
        self.ff2 = 1.0

    def set_soap2(self, delta: float, gamma: float) -> None:
        """Tunable second order all pass; ``delta`` is cos(2pi*wc), ``gamma`` tan(pi*wb)."""
        c = (gamma - 1.0) / (gamma + 1.0)
        d = -delta
        self.ff0 = self.fb2 = -c
        self.ff1 = self.fb1 = d * (1.0 - c)
        self.ff2 = 1.0

    def set_soap3(self, delta: float, radius: float) -> None:
        """Second order all pass from pole radius; ``delta`` is cos(2pi*wc)."""
        a1 = -2.0 * radius * delta
        a2 = radius * radius
        self.ff0 = self.fb2 = a2
        self.ff1 = self.fb1 = a1
        self.ff2 = 1.0


@dataclass
class BiQuad:
    """Transposed form II biquad section."""

    coeffs: Coeffs = field(default_factory=Coeffs)
    z1: float = 0.0
    z2: float = 0.0

    def flush(self) -> None:
        """Clear the internal delays."""
        self.z1 = self.z2 = 0.0

    def process_so(self, xn: float) -> float:
        """Second order processing of one sample."""
        c = self.coeffs
        acc = c.ff0 * xn + self.z1
        self.z1 = c.ff1 * xn + self.z2 - c.fb1 * acc
        self.z2 = c.ff2 * xn - c.fb2 * acc
        return acc

    def process_fo(self, xn: float) -> float:
        """First order processing of one sample."""
        c = self.coeffs
        acc = c.ff0 * xn + self.z1
        self.z1 = c.ff1 * xn - c.fb1 * acc
        return acc

    def process(self, xn: float) -> float:
        """Default (second order) processing of one sample."""
        return self.process_so(xn)


@dataclass
class ExtBiQuad:
    """Biquad with a wet/dry output stage, for all pass based filter designs.

    The output is ``w1 * (w0 * y + d0 * x) + d1 * x`` where ``y`` is the
    biquad output and ``x`` the input.
    """

    coeffs: Coeffs = field(default_factory=Coeffs)
    d0: float = 0.0
    d1: float = 0.0
    w0: float = 0.0
    w1: float = 0.0
    z1: float = 0.0
    z2: float = 0.0

    def flush(self) -> None:
        """Clear the internal delays."""
        self.z1 = self.z2 = 0.0

    def _mix(self, acc: float, xn: float) -> float:
        return self.w1 * (self.w0 * acc + self.d0 * xn) + self.d1 * xn

    def process_so(self, xn: float) -> float:
        """Second order processing of one sample."""
        c = self.coeffs
        acc = c.ff0 * xn + self.z1
        self.z1 = c.ff1 * xn + self.z2 - c.fb1 * acc
        self.z2 = c.ff2 * xn - c.fb2 * acc
        return self._mix(acc, xn)

    def process_fo(self, xn: float) -> float:
        """First order processing of one sample."""
        c = self.coeffs
        acc = c.ff0 * xn + self.z1
        self.z1 = c.ff1 * xn - c.fb1 * acc
        return self._mix(acc, xn)

    def process(self, xn: float) -> float:
        """Default (second order) processing of one sample."""
        return self.process_so(xn)

    def set_foaplp(self, k: float) -> None:
        """All pass based first order low pass; ``k`` is tan(pi*wc)."""
        self.coeffs.set_foap(k)
        self.d0 = self.w0 = 0.5
        self.d1 = 0.0
        self.w1 = 1.0

    def set_foaphp(self, k: float) -> None:
        """All pass based first order high pass; ``k`` is tan(pi*wc)."""
        self.coeffs.set_foap(k)
        self.d0 = 0.5
        self.w0 = -0.5
        self.d1 = 0.0
        self.w1 = 1.0

    def toggle_folphp(self) -> None:
        """Switch the all pass based low/high pass to the opposite mode."""
        self.w0 = -self.w0

    def update_folphp(self, k: float) -> None:
        """Retune the all pass based low/high pass, keeping its mode."""
        self.coeffs.set_foap(k)

    def set_fols(self, k: float, gain: float) -> None:
        """First order low shelf; ``gain`` is a raw amplitude."""
        h = gain - 1.0
        g = 1.0 if gain >= 1.0 else gain
        c = self.coeffs
        c.ff0 = c.fb1 = (k - g) / (k + g)
        c.ff1 = 1.0
        c.ff2 = c.fb2 = 0.0
        self.w0 = 1.0
        self.d0 = 1.0
        self.w1 = 0.5 * h
        self.d1 = 1.0

    def set_fohs(self, k: float, gain: float) -> None:
        """First order high shelf; ``gain`` is a raw amplitude."""
        h = gain - 1.0
        gk = k if gain >= 1.0 else gain * k
        c = self.coeffs
        c.ff0 = c.fb1 = (gk - 1.0) / (gk + 1.0)
        c.ff1 = 1.0
        c.ff2 = c.fb2 = 0.0
        self.w0 = -1.0
        self.d0 = 1.0
        self.w1 = 0.5 * h
        self.d1 = 1.0

    def set_soapbr2(self, delta: float, gamma: float) -> None:
        """All pass based second order band reject."""
        self.coeffs.set_soap2(delta, gamma)
        self.w0 = 1.0
        self.d0 = 1.0
        self.w1 = 0.5
        self.d1 = 0.0

    def set_soapbp2(self, delta: float, gamma: float) -> None:
        """All pass based second order band pass."""
        self.coeffs.set_soap2(delta, gamma)
        self.w0 = -1.0
        self.d0 = 1.0
        self.w1 = 0.5
        self.d1 = 0.0

    def set_soappn2(self, delta: float, gamma: float, gain: float) -> None:
        """All pass based second order peak/notch; ``gain`` is a raw amplitude."""
        h = gain - 1.0
        g = 1.0 if gain >= 1.0 else gain
        c_ = (gamma - g) / (gamma + g)
        d = -delta
        c = self.coeffs
        c.ff0 = c.fb2 = -c_
        c.ff1 = c.fb1 = d * (1.0 - c_)
        c.ff2 = 1.0
        self.w0 = -1.0
        self.d0 = 1.0
        self.w1 = 0.5 * h
        self.d1 = 1.0