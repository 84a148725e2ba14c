import pytest

from libpower.signal import Signal, SignalType

EPSILON = 1e-6


def test_dc_signal():
    metrics = Signal(SignalType.DC, 2.0, 0.0, 1000).metrics
    assert abs(metrics.max - 2.0) < EPSILON
    assert abs(metrics.min - 2.0) < EPSILON
    assert abs(metrics.average - 2.0) < EPSILON
    assert abs(metrics.peak_to_peak) < EPSILON
    assert abs(metrics.dc_rms - 2.0) < EPSILON


def test_sine_wave_properties():
    metrics = Signal(SignalType.SINE, 1.0, 1.0, 1000).metrics
    assert abs(metrics.peak_to_peak - 2.0) < 0.1
    assert abs(metrics.average) < 0.1
    assert abs(metrics.dc_rms - 0.707) < 0.1


def test_pwm_signal():
    signal = Signal(SignalType.PWM, 1.0, 1.0, 1000)
    signal.set_duty_cycle(0.25)
    assert abs(signal.metrics.duty_cycle_pos - 0.25) < 0.15
    signal.set_duty_cycle(0.75)
    assert abs(signal.metrics.duty_cycle_pos - 0.75) < 0.15


def test_triangular_wave():
    metrics = Signal(SignalType.TRIANGULAR, 1.0, 1.0, 1000).metrics
    assert abs(metrics.peak_to_peak - 2.0) < 0.1
    assert abs(metrics.average) < 0.1


def test_full_wave_rectified_sine():
    metrics = Signal(SignalType.FULL_WAVE_RECTIFIED_SINE, 1.0, 1.0, 1000).metrics
    assert metrics.min >= -EPSILON
    assert abs(metrics.max - 1.0) < 0.1
    assert metrics.average > 0.0


def test_half_wave_rectified_sine_never_negative():
    signal = Signal(SignalType.HALF_WAVE_RECTIFIED_SINE, 3.0, 2.0, 500)
    assert min(signal.samples) == 0.0
    assert signal.metrics.max == pytest.approx(3.0, abs=0.01)


def test_samples_length_matches_request():
    assert len(Signal(SignalType.SINE, 1.0, 1.0, 64).samples) == 64


def test_square_wave_levels_and_metrics():
    signal = Signal(SignalType.SQUARE, 2.0, 1.0, 100)
    assert set(signal.samples) == {2.0, -2.0}
    assert signal.metrics.dc_rms == pytest.approx(2.0)
    assert signal.metrics.crest_factor == pytest.approx(1.0)


def test_sawtooth_range():
    samples = Signal(SignalType.SAWTOOTH, 1.0, 1.0, 100).samples
    assert samples[0] == pytest.approx(-1.0)
    assert all(-1.0 <= s < 1.0 for s in samples)


def test_phase_shift_moves_sine_start():
    signal = Signal(SignalType.SINE, 1.0, 1.0, 100)
    assert signal.samples[0] == pytest.approx(0.0)
    signal.set_phase(90.0)
    assert signal.phase == 90.0
    assert signal.samples[0] == pytest.approx(1.0)


def test_duty_cycle_clamped():
    signal = Signal(SignalType.PWM, 1.0, 1.0, 100)
    signal.set_duty_cycle(1.5)
    assert signal.duty_cycle == 1.0
    signal.set_duty_cycle(-0.5)
    assert signal.duty_cycle == 0.0
    assert signal.metrics.duty_cycle_pos == 0.0


def test_duty_cycle_pos_and_neg_sum_to_one():
    metrics = Signal(SignalType.SINE, 1.0, 3.0, 300).metrics
    assert metrics.duty_cycle_pos + metrics.duty_cycle_neg == pytest.approx(1.0)


def test_pure_sine_has_low_thd():
    metrics = Signal(SignalType.SINE, 1.0, 1.0, 1000).metrics
    assert 0.0 <= metrics.thd < 1.0


def test_non_sine_thd_stays_zero():
    assert Signal(SignalType.SQUARE, 1.0, 1.0, 100).metrics.thd == 0.0


def test_sine_ac_rms_equals_dc_rms_without_offset():
    metrics = Signal(SignalType.SINE, 1.0, 1.0, 1000).metrics
    assert metrics.ac_rms == pytest.approx(metrics.dc_rms, abs=1e-6)


def test_constant_signal_has_no_edges():
    metrics = Signal(SignalType.DC, 1.0, 1.0, 10).metrics
    assert metrics.rise_time == 0.0
    assert metrics.fall_time == 0.0
    assert metrics.ac_rms == pytest.approx(0.0)


def test_negative_sample_count_rejected():
    with pytest.raises(ValueError):
        Signal(SignalType.SINE, 1.0, 1.0, -1)