import pytest

from libpower.cntl_2p2z import Coefficients, Controller2p2z, Variables


@pytest.fixture
def controller():
    return Controller2p2z(Coefficients.with_default_values())


def test_initial_output_error_and_reset(controller):
    assert controller.output == 0.0
    controller.calculate(1.0, 0.1)
    assert controller.error == pytest.approx(0.9, abs=1e-6)
    controller.reset()
    assert (controller.output, controller.error) == (0.0, 0.0)


def test_output_saturation():
    coeffs = Coefficients.with_default_values()
    coeffs.max, coeffs.min = 1.0, -1.0
    limited = Controller2p2z(coeffs)
    assert limited.calculate(10.0, 0.0) <= 1.0
    assert limited.calculate(-10.0, 0.0) >= -1.0
    assert -1.0 <= limited.output <= 1.0


def test_default_coefficient_values():
    c = Coefficients.with_default_values()
    assert (c.coeff_b2, c.coeff_b1, c.coeff_b0, c.coeff_a2, c.coeff_a1) == (
        0.3,
        0.2,
        0.1,
        0.2,
        0.1,
    )


def test_plain_coefficients_are_zero_with_wide_limits():
    coeffs = Coefficients()
    assert coeffs.coeff_b0 == 0.0
    assert coeffs.max == 3.4028234663852886e38
    assert coeffs.min == -coeffs.max
    plain = Controller2p2z(coeffs)
    assert plain.calculate(5.0, 1.0) == 0.0
    assert plain.error == 4.0


@pytest.mark.parametrize("ref,fdbk,expected", [(3.0, 1.0, 4.0), (0.0, 0.25, -0.5)])
def test_pure_gain_tracks_error(ref, fdbk, expected):
    gain = Controller2p2z(Coefficients(coeff_b0=2.0))
    assert gain.calculate(ref, fdbk) == pytest.approx(expected)


def test_history_shifts(controller):
    controller.calculate(1.0, 0.0)
    controller.calculate(2.0, 0.0)
    v = controller.variables
    assert (v.errn, v.errn1, v.errn2, v.ref_input) == (2.0, 1.0, 0.0, 2.0)


def test_variables_set_inputs():
    v = Variables()
    v.set_inputs(1.5, 0.5)
    assert (v.ref_input, v.fdbk) == (1.5, 0.5)