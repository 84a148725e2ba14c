"""Butterworth high-pass filter built from cascaded second-order sections."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(slots=True)
class _Section:
    a: float
    d1: float
    d2: float
    w0: float = 0.0
    w1: float = 0.0
    w2: float = 0.0


class _Cascade:
    """A chain of second-order sections with inspectable state."""

    def __init__(self) -> None:
        self._sections: list[_Section] = []

    @property
    def w0(self) -> list[float]:
        """Current state of each section."""
        return [s.w0 for s in self._sections]

    @property
    def w1(self) -> list[float]:
        """First delayed state of each section."""
        return [s.w1 for s in self._sections]

    @property
    def w2(self) -> list[float]:
        """Second delayed state of each section."""
        return [s.w2 for s in self._sections]

    def _clear(self) -> None:
        for s in self._sections:
            s.w0 = s.w1 = s.w2 = 0.0


def _butterworth_sections(
    order: int, fc: float, fs: float, lowpass: bool
) -> tuple[int, float, list[_Section]]:
    """Return the clamped order, sample period and sections for a Butterworth design."""
    order = min(max(order, 2), 8)
    order -= order % 2
    n = order // 2
    sample_period = 1.0 / fs

    a = math.tan(math.pi * fc * sample_period / 2.0)
    a2 = a * a
    gain = a2 if lowpass else 1.0

    sections = []
    for i in range(n):
        r = math.sin(math.pi * (2.0 * i + 1.0) / (4.0 * n))
        s = a2 + 2.0 * a * r + 1.0
        sections.append(
            _Section(
                a=gain / s,
                d1=2.0 * (1.0 - a2) / s,
                d2=-(a2 - 2.0 * a * r + 1.0) / s,
            )
        )
    return order, sample_period, sections


def _run_butterworth(sections: list[_Section], sample: float, tap: float) -> float:
    """Pass one sample through the cascade and return the output."""
    x = sample
    for s in sections:
        s.w2 = s.w1
        s.w1 = s.w0
        s.w0 = s.a * (x + tap * s.w1 + s.w2) - s.d1 * s.w1 - s.d2 * s.w2
        x = s.w0
    return x


class ButterworthHPF(_Cascade):
    """High-pass Butterworth filter of even order between 2 and 8.

    A new filter has no sections and passes samples through unchanged
    until :meth:`init` is called.
    """

    def __init__(self) -> None:
        super().__init__()
        self._order = 0
        self._sample_period = 0.0

    @property
    def order(self) -> int:
        """Filter order after clamping."""
        return self._order

    @property
    def n(self) -> int:
        """Number of second-order sections."""
        return len(self._sections)

    def init(self, order: int, fc: float, fs: float) -> None:
        """Configure for ``order`` (clamped to 2..8, made even), cutoff and sample rate."""
        self._order, self._sample_period, self._sections = _butterworth_sections(
            order, fc, fs, lowpass=False
        )

    def reset(self) -> None:
        """Zero the state of every section."""
        self._clear()

    def process(self, sample: float) -> float:
        """Filter one sample and return the output."""
        return _run_butterworth(self._sections, sample, -2.0)