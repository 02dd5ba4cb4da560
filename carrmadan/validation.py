"""Data classes for Carr-Madan FFT pricing."""

from __future__ import annotations

import warnings
from dataclasses import dataclass

import numpy as np

from .backends import BACKENDS

# Log-strike steps above this leave roughly 10% between neighbouring strikes.
_COARSE_LOG_STRIKE_STEP = 0.1


@dataclass(frozen=True)
class FFTGridConfig:
    """Frequency/log-strike grid of the FFT pricer. Validated on creation."""

    N: int = 1024          # Number of FFT nodes (power of 2)
    eta: float = 0.25      # Frequency step
    alpha: float = 1.5     # Damping coefficient
    backend: str = "numpy"

    def __post_init__(self):
        if (
            not isinstance(self.N, (int, np.integer))
            or isinstance(self.N, bool)
            or self.N < 1
            or self.N & (self.N - 1)
        ):
            raise ValueError(f"Grid size N must be a positive power of 2, got {self.N}")
        if self.eta <= 0:
            raise ValueError(f"Frequency step eta must be positive, got {self.eta}")
        if self.alpha <= 0:
            raise ValueError(f"Damping coefficient alpha must be positive, got {self.alpha}")
        if self.backend.lower() not in BACKENDS:
            raise ValueError(f"backend must be one of {BACKENDS}, got '{self.backend}'")
        if self.lam > _COARSE_LOG_STRIKE_STEP:
            warnings.warn(
                f"Log-strike step {self.lam:.3f} is coarse for N={self.N}, eta={self.eta}. "
                f"Increase N or eta for a denser strike grid.",
                UserWarning,
                stacklevel=3,  # __post_init__ <- __init__ <- caller
            )

    @property
    def b(self) -> float:
        """Half-width of the log-strike domain, pi/eta."""
        return float(np.pi / self.eta)

    @property
    def lam(self) -> float:
        """Log-strike step, 2*pi/(N*eta)."""
        return 2.0 * self.b / self.N

    @property
    def u_max(self) -> float:
        """Largest frequency node that is sampled."""
        return self.N * self.eta


@dataclass(frozen=True)
class MarketParams:
    """Spot and discounting data for one maturity."""

    S: float      # Spot price
    T: float      # Time to expiry (years)
    r: float      # Risk-free rate (annualized)

    def __post_init__(self):
        if self.S <= 0:
            raise ValueError(f"Spot price S must be positive, got {self.S}")
        if self.T <= 0:
            raise ValueError(f"Time to expiry T must be positive, got {self.T}")
        if self.r < 0:
            raise ValueError(f"Risk-free rate r must be non-negative, got {self.r}")

    @property
    def discount(self) -> float:
        """Discount factor exp(-rT), in (0, 1]."""
        return float(np.exp(-self.r * self.T))


@dataclass
class PricingResult:
    """Call prices on the FFT strike grid, index-aligned with ``strikes``."""

    strikes: np.ndarray
    prices: np.ndarray
    method_name: str
    config: FFTGridConfig
    market: MarketParams

    def pairs(self) -> list[tuple[float, float]]:
        """(strike, price) pairs in increasing strike order."""
        return list(zip(self.strikes.tolist(), self.prices.tolist()))
