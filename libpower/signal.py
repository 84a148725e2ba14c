"""Test waveform generation and basic waveform measurements."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from itertools import pairwise


class SignalType(Enum):
    """Shape of a generated waveform."""

    DC = auto()
    SINE = auto()
    FULL_WAVE_RECTIFIED_SINE = auto()
    HALF_WAVE_RECTIFIED_SINE = auto()
    PWM = auto()
    TRIANGULAR = auto()
    SQUARE = auto()
    SAWTOOTH = auto()


@dataclass(frozen=True)
class SignalMetrics:
    """Measurements taken from a generated waveform."""

    peak_to_peak: float
    max: float
    min: float
    average: float
    dc_rms: float
    ac_rms: float
    duty_cycle_pos: float
    duty_cycle_neg: float
    rise_time: float
    fall_time: float
    crest_factor: float
    thd: float


def _div(a: float, b: float) -> float:
    """IEEE-style division: zero divisors give infinities or NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _fmod(a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b) or math.isinf(a) or b == 0.0:
        return math.nan
    return math.fmod(a, b)


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


class Signal:
    """A sampled waveform spanning one unit of time, with its metrics.

    Samples and metrics are recomputed whenever the phase or duty cycle
    changes.
    """

    def __init__(
        self,
        wave_type: SignalType,
        amplitude: float,
        frequency: float,
        num_samples: int,
    ) -> None:
        if num_samples < 0:
            raise ValueError("num_samples must not be negative")
        self.wave_type = wave_type
        self.amplitude = amplitude
        self.frequency = frequency
        self.num_samples = num_samples
        self._phase = 0.0
        self._duty_cycle = 0.5
        self._samples: list[float] = [0.0] * num_samples

        self._peak_to_peak = 0.0
        self._max = 0.0
        self._min = 0.0
        self._average = 0.0
        self._dc_rms = 0.0
        self._ac_rms = 0.0
        self._duty_cycle_pos = 0.0
        self._duty_cycle_neg = 0.0
        self._rise_time = 0.0
        self._fall_time = 0.0
        self._crest_factor = 0.0
        self._thd = 0.0

        self._refresh()

    @property
    def phase(self) -> float:
        """Phase offset in degrees."""
        return self._phase

    @property
    def duty_cycle(self) -> float:
        """PWM duty cycle between 0 and 1."""
        return self._duty_cycle

    @property
    def samples(self) -> list[float]:
        """A copy of the generated samples."""
        return list(self._samples)

    @property
    def metrics(self) -> SignalMetrics:
        """Measurements of the current samples."""
        return SignalMetrics(
            peak_to_peak=self._peak_to_peak,
            max=self._max,
            min=self._min,
            average=self._average,
            dc_rms=self._dc_rms,
            ac_rms=self._ac_rms,
            duty_cycle_pos=self._duty_cycle_pos,
            duty_cycle_neg=self._duty_cycle_neg,
            rise_time=self._rise_time,
            fall_time=self._fall_time,
            crest_factor=self._crest_factor,
            thd=self._thd,
        )

    def set_phase(self, phase: float) -> None:
        """Set the phase in degrees and regenerate."""
        self._phase = phase
        self._refresh()

    def set_duty_cycle(self, duty_cycle: float) -> None:
        """Set the duty cycle, clamped to [0, 1], and regenerate."""
        if duty_cycle < 0.0:
            duty_cycle = 0.0
        elif duty_cycle > 1.0:
            duty_cycle = 1.0
        self._duty_cycle = duty_cycle
        self._refresh()

    def _refresh(self) -> None:
        self._samples = [self._sample_at(i) for i in range(self.num_samples)]
        self._calculate_metrics()

    def _sample_at(self, i: int) -> float:
        t = i / self.num_samples
        angular_freq = 2.0 * math.pi * self.frequency
        phase_rad = self._phase * math.pi / 180.0
        amp = self.amplitude
        kind = self.wave_type

        if kind is SignalType.DC:
            return amp
        if kind is SignalType.SINE:
            return amp * math.sin(angular_freq * t + phase_rad)
        if kind is SignalType.FULL_WAVE_RECTIFIED_SINE:
            return amp * abs(math.sin(angular_freq * t + phase_rad))
        if kind is SignalType.HALF_WAVE_RECTIFIED_SINE:
            val = amp * math.sin(angular_freq * t + phase_rad)
            return val if val > 0.0 else 0.0
        if kind is SignalType.PWM:
            level = math.sin(angular_freq * t + phase_rad)
            return amp if level > 1.0 - 2.0 * self._duty_cycle else -amp
        if kind is SignalType.SQUARE:
            return amp if math.sin(angular_freq * t + phase_rad) >= 0.0 else -amp

        period = _div(1.0, self.frequency)
        t_mod = _fmod(t + _div(phase_rad, angular_freq), period)
        if kind is SignalType.TRIANGULAR:
            normalized = _div(t_mod, period)
            if normalized < 0.5:
                return amp * (4.0 * normalized - 1.0)
            return amp * (3.0 - 4.0 * normalized)
        # Sawtooth
        return amp * (2.0 * _div(t_mod, period) - 1.0)

    def _calculate_metrics(self) -> None:
        samples = self._samples
        n = float(self.num_samples)

        hi = -math.inf
        lo = math.inf
        for s in samples:
            hi = _fmax(hi, s)
            lo = _fmin(lo, s)
        self._max = hi
        self._min = lo
        total = sum(samples)
        squared = sum(s * s for s in samples)
        positive = sum(1 for s in samples if s > 0.0)

        self._peak_to_peak = hi - lo
        self._average = _div(total, n)
        self._dc_rms = math.sqrt(_div(squared, n))
        ac_squared = sum((s - self._average) ** 2 for s in samples)
        self._ac_rms = math.sqrt(_div(ac_squared, n))

        self._duty_cycle_pos = _div(float(positive), n)
        self._duty_cycle_neg = 1.0 - self._duty_cycle_pos

        threshold_low = lo + 0.1 * self._peak_to_peak
        threshold_high = lo + 0.9 * self._peak_to_peak
        rise_samples = 0
        fall_samples = 0
        rising = False
        falling = False
        for prev, curr in pairwise(samples):
            if prev <= threshold_low and curr > threshold_low:
                rising = True
                falling = False
                rise_samples = 0
            if rising and curr <= threshold_high:
                rise_samples += 1
            if prev >= threshold_high and curr < threshold_high:
                falling = True
                rising = False
                fall_samples = 0
            if falling and curr >= threshold_low:
                fall_samples += 1

        sample_period = _div(1.0, self.frequency * n)
        self._rise_time = rise_samples * sample_period
        self._fall_time = fall_samples * sample_period

        if self._dc_rms != 0.0:
            self._crest_factor = self._peak_to_peak / (2.0 * self._dc_rms)

        if self.wave_type is SignalType.SINE:
            fundamental = self.frequency
            harmonic_power = sum(
                self._dft_magnitude(fundamental * k) ** 2 for k in range(2, 6)
            )
            fundamental_amplitude = self._dft_magnitude(fundamental)
            if fundamental_amplitude != 0.0:
                self._thd = math.sqrt(harmonic_power) / fundamental_amplitude * 100.0

    def _dft_magnitude(self, frequency: float) -> float:
        n = float(self.num_samples)
        real = 0.0
        imag = 0.0
        for i, sample in enumerate(self._samples):
            angle = 2.0 * math.pi * frequency * (i / n)
            real += sample * math.cos(angle)
            imag += sample * math.sin(angle)
        return _div(math.sqrt(real * real + imag * imag), n)