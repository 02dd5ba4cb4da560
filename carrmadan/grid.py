"""Log-spaced strike grid shared by the FFT pricer.

The frequency step eta fixes the log-strike half-width b = pi/eta and, with
N nodes, the log-strike step lambda = 2b/N (so that lambda*eta = 2*pi/N).
Strikes are K_j = S0 * exp(-b + lambda*j), j = 0, ..., N-1.
"""

from __future__ import annotations

import numpy as np


def max_log_strike(eta: float) -> float:
    """Upper bound b of the log-strike domain for frequency step eta."""
    return np.pi / np.float64(eta)


def log_strike_step(n: int, b: float) -> float:
    """Distance between log-strike nodes."""
    return 2.0 * b / n


def log_strike_grid(eta: float, n: int, xp=np) -> np.ndarray:
    """Log-moneyness nodes x_j = -b + lambda*j for j = 0, ..., n-1."""
    b = max_log_strike(eta)
    lam = log_strike_step(n, b)
    return -b + lam * xp.arange(n, dtype=xp.float64)


def get_strikes(eta: float, s0: float, n: int) -> np.ndarray:
    """Strikes matching the n output bins of the Carr-Madan FFT.

    No input checks: n = 0 gives an empty array, eta <= 0 gives
    non-finite strikes.

    Example:
        >>> strikes = get_strikes(0.04, 50.0, 256)
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return s0 * np.exp(log_strike_grid(eta, n))
