"""Compensators, PI/PID controllers, filters, MPPT trackers, reference-frame transforms and test signals."""

__version__ = "0.1.0"

__all__ = [
    "butterworth_hpf",
    "butterworth_lpf",
    "chebyshev_hpf",
    "chebyshev_lpf",
    "cntl_2p2z",
    "cntl_3p3z",
    "cntl_pi",
    "cntl_pid",
    "incremental_conductance",
    "perturb_and_observe",
    "signal",
    "transform",
]