"""Proportional-integral controller with anti-windup."""

from __future__ import annotations

_F32_MAX = 3.4028234663852886e38
_F32_MIN = -_F32_MAX


class ControllerPI:
    """PI controller whose integrator is corrected by the saturation excess."""

    def __init__(self, kp: float = 0.2, ki: float = 0.1) -> None:
        self.kp = kp
        self.ki = ki
        self.u_max = _F32_MAX
        self.u_min = _F32_MIN
        self.ref_input = 0.0
        self.fdbk = 0.0
        self._out = 0.0
        self._up = 0.0
        self._ui = 0.0
        self._v1 = 0.0
        self._i1 = 0.0
        self._w1 = 0.0

    @classmethod
    def with_gains(cls, kp: float, ki: float) -> ControllerPI:
        """Create a controller with the given gains."""
        return cls(kp, ki)

    def set_gains(self, kp: float, ki: float) -> None:
        """Replace both gains."""
        self.kp = kp
        self.ki = ki

    def set_limits(self, u_min: float, u_max: float) -> None:
        """Set the output saturation limits."""
        self.u_min = u_min
        self.u_max = u_max

    @property
    def output(self) -> float:
        """Latest saturated output."""
        return self._out

    @property
    def proportional_term(self) -> float:
        """Latest proportional term."""
        return self._up

    @property
    def integral_term(self) -> float:
        """Latest integral term."""
        return self._ui

    def calculate(self, ref_input: float, fdbk: float) -> float:
        """Advance one step and return the saturated output."""
        self.ref_input = ref_input
        self.fdbk = fdbk
        error = ref_input - fdbk

        self._up = self.kp * error
        self._ui = self._i1 + self.ki * error + self._w1
        self._v1 = self._up + self._ui
        self._out = max(min(self._v1, self.u_max), self.u_min)
        self._w1 = self._out - self._v1
        self._i1 = self._ui
        return self._out

    def reset(self) -> None:
        """Clear the internal state and output."""
        self._up = 0.0
        self._ui = 0.0
        self._v1 = 0.0
        self._i1 = 0.0
        self._w1 = 0.0
        self._out = 0.0