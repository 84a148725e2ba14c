import math

import pytest

from libpower.chebyshev_lpf import ChebyshevLPF


@pytest.fixture
def lpf():
    f = ChebyshevLPF(4)
    f.init(4, 0.1, 44100.0, 1000.0)
    return f


def test_two_sections_for_fourth_order(lpf):
    assert lpf.m == 2


@pytest.mark.parametrize(
    "capacity,order,epsilon,cutoff,message",
    [
        (4, 3, 0.1, 1000.0, "Order must be even"),
        (4, 4, 0.0, 1000.0, "Epsilon must be positive"),
        (4, 4, 0.1, 25000.0, "Invalid cutoff frequency"),
        (2, 6, 0.1, 1000.0, "Order too large"),
    ],
)
def test_rejects_bad_configuration(capacity, order, epsilon, cutoff, message):
    f = ChebyshevLPF(capacity)
    with pytest.raises(ValueError, match=message):
        f.init(order, epsilon, 44100.0, cutoff)


def test_nyquist_rejection(lpf):
    outputs = [lpf.process(math.sin(i * math.pi)) for i in range(1000)]
    assert max(abs(y) for y in outputs) < 0.1


def test_state_cleared_and_output_reproducible(lpf):
    for _ in range(100):
        lpf.process(1.0)
    lpf.reset()
    assert (lpf.w0, lpf.w1, lpf.w2) == ([0.0, 0.0], [0.0, 0.0], [0.0, 0.0])
    seq = [1.0, 0.0, -1.0, 0.5, 0.25]
    first = list(map(lpf.process, seq))
    lpf.reset()
    assert list(map(lpf.process, seq)) == first


def test_uninitialized_outputs_zero():
    f = ChebyshevLPF(4)
    assert f.m == 0
    assert f.process(2.0) == 0.0