"""Chebyshev type I low-pass filter built from cascaded biquad sections."""

from __future__ import annotations

from libpower.butterworth_hpf import _Cascade
from libpower.chebyshev_hpf import _chebyshev_sections, _run_chebyshev


class ChebyshevLPF(_Cascade):
    """Low-pass Chebyshev filter holding at most ``capacity`` sections.

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
            order, epsilon, sample_rate, cutoff_freq, self.capacity, lowpass=True
        )
        self._ep = 2.0 / epsilon

    def reset(self) -> None:
        """Zero the state of every section."""
        self._clear()

    def process(self, sample: float) -> float:
        """Filter one sample and return the output."""
        return _run_chebyshev(self._sections, sample, 2.0) * self._ep