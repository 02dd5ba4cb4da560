"""Characteristic functions of the log-return X = ln(S_T/S0).

All functions use the convention cf(u) = E[exp(u*X)] for complex u, so the
classic characteristic function is phi(v) = cf(i*v). Every factory returns a
vectorised callable (NumPy ufuncs only) satisfying cf(0) = 1 and the
martingale condition cf(1) = exp((r - q)*t).

References:
- Merton (1976), J. Financial Economics
- Heston (1993), RFS
- Albrecher et al. (2007), "The little Heston trap"
"""

from __future__ import annotations

import numpy as np


def black_scholes_cf(r: float, sigma: float, t: float, q: float = 0.0):
    """Lognormal model: cf(u) = exp((r - q - sigma^2/2) t u + sigma^2 t u^2 / 2)."""
    drift = (r - q - 0.5 * sigma * sigma) * t
    variance = sigma * sigma * t

    def cf(u):
        return np.exp(drift * u + 0.5 * variance * u * u)

    return cf


def merton_cf(
    r: float,
    sigma: float,
    t: float,
    lambda_j: float,
    mu_j: float,
    sigma_j: float,
    q: float = 0.0,
):
    """Merton jump-diffusion with lognormal jumps ln(Y) ~ N(mu_j, sigma_j^2).

    Jumps arrive at rate ``lambda_j``; the drift is compensated by
    lambda_j * kbar, kbar = E[Y] - 1.
    """
    kbar = np.exp(mu_j + 0.5 * sigma_j * sigma_j) - 1.0
    drift = (r - q - 0.5 * sigma * sigma - lambda_j * kbar) * t
    variance = sigma * sigma * t

    def cf(u):
        jumps = lambda_j * t * (np.exp(mu_j * u + 0.5 * sigma_j * sigma_j * u * u) - 1.0)
        return np.exp(drift * u + 0.5 * variance * u * u + jumps)

    return cf


def heston_cf(
    r: float,
    t: float,
    v0: float,
    kappa: float,
    theta: float,
    xi: float,
    rho: float,
    q: float = 0.0,
):
    """Heston stochastic volatility in the 'little trap' form.

    Uses g = (a - d)/(a + d) with exp(-d t), which stays on the principal
    branch of the logarithm for the complex arguments the FFT pricer uses.
    """
    if xi < 1e-10:
        # Degenerate variance -> GBM with vol sqrt(v0)
        return black_scholes_cf(r, float(np.sqrt(max(v0, 0.0))), t, q)

    xi_sq = xi * xi

    def cf(u):
        a = kappa - rho * xi * u
        d = np.sqrt(a * a + xi_sq * (u - u * u))
        g = (a - d) / (a + d)
        exp_dt = np.exp(-d * t)
        one_minus_gexp = 1.0 - g * exp_dt

        C = (r - q) * u * t + (kappa * theta / xi_sq) * (
            (a - d) * t - 2.0 * np.log(one_minus_gexp / (1.0 - g))
        )
        D = ((a - d) / xi_sq) * ((1.0 - exp_dt) / one_minus_gexp)
        return np.exp(C + D * v0)

    return cf
