"""Clarke and Park reference-frame transforms and their inverses."""

from __future__ import annotations

from dataclasses import dataclass

_SQRT3 = 1.732


@dataclass
class _PhaseFrame:
    alpha: float = 0.0
    beta: float = 0.0
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    zero: float = 0.0


@dataclass
class _RotatingFrame:
    alpha: float = 0.0
    beta: float = 0.0
    zero: float = 0.0
    sin: float = 0.0
    cos: float = 0.0
    d: float = 0.0
    q: float = 0.0
    z: float = 0.0


class Clarke(_PhaseFrame):
    """Three-phase (a, b, c) to stationary (alpha, beta, zero) transform."""

    def calculate(self) -> None:
        """Compute alpha, beta and zero from a, b and c."""
        self.alpha = (2.0 / 3.0) * self.a - (1.0 / 3.0) * (self.b - self.c)
        self.beta = (2.0 / _SQRT3) * (self.b - self.c)
        self.zero = 0.0


class IClarke(_PhaseFrame):
    """Stationary (alpha, beta) to three-phase (a, b, c) transform."""

    def calculate(self) -> None:
        """Compute a, b and c from alpha and beta."""
        self.a = self.alpha
        self.b = 0.5 * (-self.alpha + _SQRT3 * self.beta)
        self.c = 0.5 * (-self.alpha - _SQRT3 * self.beta)


class Park(_RotatingFrame):
    """Stationary (alpha, beta) to rotating (d, q) transform."""

    def calculate(self) -> None:
        """Compute d, q and z from alpha, beta and the angle's sin and cos."""
        self.d = self.alpha * self.cos + self.beta * self.sin
        self.q = self.beta * self.cos - self.alpha * self.sin
        self.z = 0.0


class IPark(_RotatingFrame):
    """Rotating (d, q) to stationary (alpha, beta) transform."""

    def calculate(self) -> None:
        """Compute alpha and beta from d, q and the angle's sin and cos."""
        self.alpha = self.d * self.cos - self.q * self.sin
        self.beta = self.q * self.cos + self.d * self.sin