"""
carrmadan: European call prices on a whole strike grid with one FFT.

Based on:
- Carr & Madan (1999), "Option valuation using the fast Fourier transform"

Core concepts:
- Characteristic function cf(u) = E[exp(u*X)] of the log-return X = ln(S_T/S0)
- Damping: the call is multiplied by exp(alpha*k) so its Fourier transform exists
- Simpson quadrature on the frequency grid v_j = eta*j, evaluated for all
  log-strikes k_m = -pi/eta + (2*pi/(N*eta))*m by a single forward FFT
"""

from carrmadan.grid import get_strikes, log_strike_grid
from carrmadan.integrand import augment
from carrmadan.transform import build_samples, simpson_weights, transform
from carrmadan.pricing import CarrMadanPricer, call_price, call_price_arrays, price, reconstruct
from carrmadan.validation import FFTGridConfig, MarketParams, PricingResult
from carrmadan.characteristic import black_scholes_cf, heston_cf, merton_cf
from carrmadan.reference import bs_call_price, merton_call_price
from carrmadan.backends import HAS_CUPY, get_backend, to_numpy

__all__ = [
    # Core pipeline
    "get_strikes",
    "log_strike_grid",
    "augment",
    "build_samples",
    "simpson_weights",
    "transform",
    "reconstruct",
    "call_price",
    "call_price_arrays",
    "price",
    # Pricer and parameters
    "CarrMadanPricer",
    "FFTGridConfig",
    "MarketParams",
    "PricingResult",
    # Models and references
    "black_scholes_cf",
    "merton_cf",
    "heston_cf",
    "bs_call_price",
    "merton_call_price",
    # Backends
    "HAS_CUPY",
    "get_backend",
    "to_numpy",
]

__version__ = "0.1.0"
