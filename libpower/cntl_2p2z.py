"""Two-pole, two-zero discrete compensator with output saturation."""

from __future__ import annotations

from dataclasses import dataclass, field

_F32_MAX = 3.4028234663852886e38
_F32_MIN = -_F32_MAX


@dataclass
class Coefficients:
    """Difference-equation coefficients and output limits."""

    coeff_b2: float = 0.0
    coeff_b1: float = 0.0
    coeff_b0: float = 0.0
    coeff_a2: float = 0.0
    coeff_a1: float = 0.0
    max: float = _F32_MAX
    i_min: float = _F32_MIN
    min: float = _F32_MIN

    @classmethod
    def with_default_values(cls) -> Coefficients:
        """Return a coefficient set with the library's example values."""
        return cls(
            coeff_b2=0.3,
            coeff_b1=0.2,
            coeff_b0=0.1,
            coeff_a2=0.2,
            coeff_a1=0.1,
        )


@dataclass
class Variables:
    """Controller history, inputs and latest output."""

    out1: float = 0.0
    out2: float = 0.0
    errn: float = 0.0
    errn1: float = 0.0
    errn2: float = 0.0
    ref_input: float = 0.0
    fdbk: float = 0.0
    out: float = 0.0

    def set_inputs(self, ref_input: float, fdbk: float) -> None:
        """Store the reference and feedback values."""
        self.ref_input = ref_input
        self.fdbk = fdbk


@dataclass
class Controller2p2z:
    """Discrete 2P2Z controller working on the error ``ref - fdbk``."""

    coeffs: Coefficients
    _vars: Variables = field(default_factory=Variables, init=False, repr=False)

    def __init__(self, coeffs: Coefficients) -> None:
        self.coeffs = coeffs
        self._vars = Variables()

    @property
    def variables(self) -> Variables:
        """Internal state of the controller."""
        return self._vars

    @property
    def output(self) -> float:
        """Latest controller output."""
        return self._vars.out

    @property
    def error(self) -> float:
        """Latest error value."""
        return self._vars.errn

    def calculate(self, ref_input: float, fdbk: float) -> float:
        """Advance the controller one step and return the saturated output."""
        v = self._vars
        c = self.coeffs
        v.set_inputs(ref_input, fdbk)

        v.errn2, v.errn1 = v.errn1, v.errn
        v.errn = v.ref_input - v.fdbk
        v.out2, v.out1 = v.out1, v.out

        out = (
            c.coeff_b2 * v.errn2
            + c.coeff_b1 * v.errn1
            + c.coeff_b0 * v.errn
            + c.coeff_a2 * v.out2
            + c.coeff_a1 * v.out1
        )
        out = max(min(out, c.max), c.min)

        v.out = out
        return out

    def reset(self) -> None:
        """Clear all history and outputs."""
        self._vars = Variables()