"""Butterworth low-pass filter built from cascaded second-order sections."""

from __future__ import annotations

from libpower.butterworth_hpf import _butterworth_sections, _Cascade, _run_butterworth


class ButterworthLPF(_Cascade):
    """Low-pass Butterworth filter of even order between 2 and 8.

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
            order, fc, fs, lowpass=True
        )

    def reset(self) -> None:
        """Zero the state of every section."""
        self._clear()

    def process(self, sample: float) -> float:
        """Filter one sample and return the output."""
        return _run_butterworth(self._sections, sample, 2.0)