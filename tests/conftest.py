"""Shared fixtures for carrmadan tests."""

import numpy as np
import pytest

from carrmadan.characteristic import black_scholes_cf, merton_cf
from carrmadan.pricing import CarrMadanPricer
from carrmadan.validation import FFTGridConfig, MarketParams


# ---------------------------------------------------------------------------
# Black-Scholes setup: r=5%, sigma=30%, t=1y, S0=50
# ---------------------------------------------------------------------------

R = 0.05
SIGMA = 0.3
T = 1.0
S0 = 50.0


@pytest.fixture
def bs_cf():
    """Lognormal cf(u) = exp((r - sigma^2/2) t u + sigma^2 t u^2 / 2)."""
    return lambda u: np.exp((R - SIGMA * SIGMA * 0.5) * T * u + SIGMA * SIGMA * T * u * u * 0.5)


@pytest.fixture
def discount():
    """exp(-r t)."""
    return float(np.exp(-R * T))


@pytest.fixture
def market():
    """S=50, T=1y, r=5%."""
    return MarketParams(S=S0, T=T, r=R)


# ---------------------------------------------------------------------------
# Jump-diffusion setup
# ---------------------------------------------------------------------------

@pytest.fixture
def merton_params():
    """Half a jump per year, mean log-jump -10%, jump vol 20%."""
    return dict(lambda_j=0.5, mu_j=-0.1, sigma_j=0.2)


@pytest.fixture
def merton_model_cf(merton_params):
    return merton_cf(R, SIGMA, T, **merton_params)


# ---------------------------------------------------------------------------
# Pricers
# ---------------------------------------------------------------------------

@pytest.fixture
def default_config():
    """N=1024, eta=0.25, alpha=1.5."""
    return FFTGridConfig()


@pytest.fixture
def pricer(default_config):
    return CarrMadanPricer(default_config)


@pytest.fixture
def library_bs_cf():
    return black_scholes_cf(R, SIGMA, T)
