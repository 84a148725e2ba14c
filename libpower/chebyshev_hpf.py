"""Chebyshev type I high-pass filter built from cascaded biquad sections."""

from __future__ import annotations

import math

from libpower.butterworth_hpf import _Cascade, _Section


def _chebyshev_sections(
    order: int,
    epsilon: float,
    sample_rate: float,
    cutoff_freq: float,
    capacity: int,
    lowpass: bool,
) -> list[_Section]:
    """Validate the parameters and compute the sections; raise ValueError if invalid."""
    if order < 0 or order % 2 != 0:
        raise ValueError("Order must be even")
    if order > capacity * 2:
        raise ValueError("Order too large for allocated size")
    if epsilon <= 0.0:
        raise ValueError("Epsilon must be positive")
    if cutoff_freq <= 0.0 or cutoff_freq >= sample_rate / 2.0:
        raise ValueError("Invalid cutoff frequency")

    a = math.tan(math.pi * cutoff_freq / sample_rate)
    a2 = a * a

    sections: list[_Section] = []
    if not order:
        return sections

    u = math.log(1.0 + math.sqrt(1.0 + epsilon * epsilon) / epsilon)
    su = math.sinh(u / order)
    cu = math.cosh(u / order)
    for i in range(order // 2):
        angle = math.pi * (2.0 * i + 1.0) / (2.0 * order)
        b = math.sin(angle) * su
        c = math.cos(angle) * cu
        c = b * b + c * c
        # The low-pass and high-pass forms differ only in which
        # terms carry the prewarped frequency.
        if lowpass:
            p, q, gain = a2 * c, 1.0, a2
        else:
            p, q, gain = a2, c, 1.0
        s = p + 2.0 * a * b + q
        sections.append(
            _Section(
                a=gain / (4.0 * s),
                d1=2.0 * (q - p) / s,
                d2=-(p - 2.0 * a * b + q) / s,
            )
        )
    return sections


def _run_chebyshev(sections: list[_Section], sample: float, tap: float) -> float:
    """Pass one sample through the cascade, before epsilon scaling."""
    output = sample
    for s in sections:
        s.w0 = s.d1 * s.w1 + s.d2 * s.w2 + output
        output = s.a * (s.w0 + tap * s.w1 + s.w2)
        s.w2 = s.w1
        s.w1 = s.w0
    return output


class ChebyshevHPF(_Cascade):
    """High-pass Chebyshev filter holding at most ``capacity`` sections.

    Until :meth:`init` succeeds the filter has no sections and outputs zero.
    """

    def __init__(self, capacity: int) -> None:
        super().__init__()
        self.capacity = capacity
        self._ep = 0.0

    @property
    def m(self) -> int:
        """Number of second-order sections."""
        return len(self._sections)

    def init(self, order: int, epsilon: float, sample_rate: float, cutoff_freq: float) -> None:
        """Compute coefficients; raise ValueError on invalid parameters."""
        self._sections = _chebyshev_sections(
            order, epsilon, sample_rate, cutoff_freq, self.capacity, lowpass=False
        )
        self._ep = 2.0 / epsilon

    def reset(self) -> None:
        """Zero the state of every section."""
        self._clear()

    def process(self, sample: float) -> float:
        """Filter one sample and return the output."""
        return _run_chebyshev(self._sections, sample, -2.0) * self._ep