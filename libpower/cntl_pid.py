"""Time-stepped PID controller with derivative on measurement."""

from __future__ import annotations


class ControllerPID:
    """PID controller driven by explicit timestamps."""

    def __init__(self, kp: float, ki: float, kd: float) -> None:
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self._last_position = 0.0
        self._previous_time = 0.0
        self._first_pass = True
        self._cumulative_error = 0.0

    @property
    def cumulative_error(self) -> float:
        """Time-integrated error."""
        return self._cumulative_error

    @property
    def last_position(self) -> float:
        """Position given on the last accepted update."""
        return self._last_position

    def update(self, setpoint: float, current_position: float, current_time: float) -> float:
        """Return the control output; 0.0 when time has not advanced."""
        delta_time = current_time - self._previous_time
        if delta_time <= 0.0:
            return 0.0

        error = setpoint - current_position
        self._cumulative_error += error * delta_time
        delta_position = current_position - self._last_position

        self._last_position = current_position
        self._previous_time = current_time

        p_term = self.kp * error
        i_term = self.ki * self._cumulative_error
        d_term = 0.0 if self._first_pass else self.kd * delta_position / delta_time
        self._first_pass = False

        return p_term + i_term + d_term

    def reset(self) -> None:
        """Return to the initial state."""
        self._last_position = 0.0
        self._previous_time = 0.0
        self._first_pass = True
        self._cumulative_error = 0.0