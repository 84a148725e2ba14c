"""Maximum power point tracking by the perturb and observe method."""

from __future__ import annotations

from enum import Enum, auto


class _Action(Enum):
    INCREMENT = auto()
    DECREMENT = auto()


class MPPT:
    """Perturb and observe tracker producing a voltage reference.

    The first call to :meth:`calculate` only primes the stored history.
    It does not use its arguments.
    """

    def __init__(self) -> None:
        self.step_size = 0.0
        self.mppt_v_out_max = 0.0
        self.mppt_v_out_min = 0.0
        self.delta_p_min = 0.0
        self.mppt_enable = True
        self._pv_i = 0.0
        self._pv_v = 0.0
        self._pv_v_prev = 0.0
        self._pv_power = 0.0
        self._pv_power_prev = 0.0
        self._action = _Action.INCREMENT
        self._mppt_v_out = 0.0
        self._first = True

    @property
    def pv_i(self) -> float:
        """Panel current of the last processed step."""
        return self._pv_i

    @property
    def pv_v(self) -> float:
        """Panel voltage of the last processed step."""
        return self._pv_v

    @property
    def pv_power(self) -> float:
        """Panel power of the last processed step."""
        return self._pv_power

    @property
    def mppt_v_out(self) -> float:
        """Voltage reference produced by the tracker."""
        return self._mppt_v_out

    def calculate(self, pv_i: float, pv_v: float) -> None:
        """Process one measurement of panel current and voltage."""
        if self._first:
            self._pv_v_prev = self._pv_v
            self._pv_power_prev = self._pv_power
            self._first = False
            return

        self._pv_i = pv_i
        self._pv_v = pv_v
        self._pv_power = self._pv_i * self._pv_v

        delta_pv_power = self._pv_power - self._pv_power_prev
        if delta_pv_power > self.delta_p_min:
            if self._pv_v > self._pv_v_prev:
                self._action = _Action.INCREMENT
            else:
                self._action = _Action.DECREMENT

            if self._action is _Action.INCREMENT:
                if self._mppt_v_out + self.step_size > self.mppt_v_out_max:
                    self._mppt_v_out = self.mppt_v_out_max
                else:
                    self._mppt_v_out += self.step_size
            else:
                if self._mppt_v_out - self.step_size < self.mppt_v_out_min:
                    self._mppt_v_out = self.mppt_v_out_min
                else:
                    self._mppt_v_out -= self.step_size

        self._pv_v_prev = self._pv_v
        self._pv_power_prev = self._pv_power