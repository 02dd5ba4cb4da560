"""Closed-form call prices used to check the FFT pricer."""

from __future__ import annotations

import numpy as np
from scipy.stats import norm, poisson


def bs_call_price(spot, strike, rate, maturity, sigma, q=0.0):
    """Black-Scholes call, vectorised over ``strike``.

    Call = S*exp(-qT)*N(d1) - K*exp(-rT)*N(d2)
    """
    K = np.asarray(strike, dtype=float)
    sqrt_T = np.sqrt(maturity)
    d1 = (np.log(spot / K) + (rate - q + 0.5 * sigma ** 2) * maturity) / (sigma * sqrt_T)
    d2 = d1 - sigma * sqrt_T
    price = spot * np.exp(-q * maturity) * norm.cdf(d1) - K * np.exp(-rate * maturity) * norm.cdf(d2)
    if np.ndim(price) == 0:
        return float(price)
    return price


def merton_call_price(
    spot,
    strike,
    rate,
    maturity,
    sigma,
    lambda_j,
    mu_j,
    sigma_j,
    n_terms: int = 60,
):
    """Merton (1976) jump-diffusion call as a Poisson mixture of Black-Scholes prices.

    Conditional on n jumps the log-price is Gaussian with
        sigma_n^2 = sigma^2 + n*sigma_j^2/T
        r_n       = r - lambda*kbar + n*ln(1 + kbar)/T
    and the weights are Poisson with intensity lambda*(1 + kbar).
    """
    if lambda_j == 0.0:
        return bs_call_price(spot, strike, rate, maturity, sigma)

    kbar = np.exp(mu_j + 0.5 * sigma_j ** 2) - 1.0
    intensity = lambda_j * (1.0 + kbar) * maturity

    total = 0.0
    for n in range(n_terms):
        weight = poisson.pmf(n, intensity)
        if weight == 0.0:
            continue
        sigma_n = np.sqrt(sigma ** 2 + n * sigma_j ** 2 / maturity)
        r_n = rate - lambda_j * kbar + n * np.log1p(kbar) / maturity
        total = total + weight * bs_call_price(spot, strike, r_n, maturity, sigma_n)
    return total
