import pytest

from libpower.cntl_pid import ControllerPID


@pytest.mark.parametrize(
    "gains,steps,expected",
    [
        ((2.0, 0.0, 0.0), [(10.0, 8.0, 1.0)], 4.0),
        ((0.0, 0.0, 1.0), [(10.0, 8.0, 1.0), (10.0, 9.0, 2.0)], 1.0),
        ((1.0, 0.1, 0.01), [(10.0, 10.0, 1.0)], 0.0),
        ((1.0, 0.1, 0.01), [(10.0, 8.1, 0.1)], 1.919),
        ((1.0, 0.1, 0.01), [(10.0, 8.1, 0.1), (10.0, 8.2, 0.2)], 1.847),
        ((1.0, 1.0, 1.0), [(10.0, 0.0, 0.0)], 0.0),
    ],
)
def test_last_output(gains, steps, expected):
    pid = ControllerPID(*gains)
    outputs = [pid.update(*step) for step in steps]
    assert outputs[-1] == pytest.approx(expected, abs=1e-6)


def test_non_advancing_time_is_ignored():
    pid = ControllerPID(1.0, 1.0, 1.0)
    pid.update(10.0, 8.0, 1.0)
    before = pid.cumulative_error
    assert [pid.update(10.0, 5.0, t) for t in (1.0, 0.5)] == [0.0, 0.0]
    assert (pid.cumulative_error, pid.last_position) == (before, 8.0)


def test_integral_accumulates_error_times_dt():
    pid = ControllerPID(0.0, 1.0, 0.0)
    for t in (1.0, 3.0):
        pid.update(10.0, 8.0, t)
    assert pid.cumulative_error == pytest.approx(6.0)


def test_reset_restores_first_pass():
    pid = ControllerPID(1.0, 0.1, 0.01)
    pid.update(10.0, 8.0, 1.0)
    pid.update(10.0, 8.2, 0.2)
    pid.reset()
    assert (pid.cumulative_error, pid.last_position) == (0.0, 0.0)
    assert pid.update(10.0, 8.0, 1.0) == pytest.approx(2.2)