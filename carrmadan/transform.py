"""FFT stage of the Carr-Madan pricer.

The call price in log-strike k_m = -b + lambda*m is approximated by

    C(k_m) ~ exp(-alpha*k_m)/pi * sum_j exp(-i*v_j*k_m) psi(v_j) w_j eta

with v_j = eta*j and Simpson weights w_j = (3 + (-1)^(j+1) - delta_j)/3.
Since lambda*eta = 2*pi/N the sum is a forward DFT of
exp(i*b*v_j) * psi(v_j) * w_j, so all N strikes come out of one FFT.
"""

from __future__ import annotations

import numpy as np

from .backends import to_backend, to_numpy
from .grid import max_log_strike


def frequency_nodes(n: int, eta: float, xp=np) -> np.ndarray:
    """Purely imaginary nodes u_j = i*eta*j."""
    return 1j * (eta * xp.arange(n, dtype=xp.float64))


def simpson_weights(n: int, xp=np) -> np.ndarray:
    """Unnormalised Simpson weights 1, 4, 2, 4, 2, ... (3 + pm, halved at j = 0)."""
    pm = xp.where(xp.arange(n) % 2 == 0, -1.0, 1.0)
    weights = 3.0 + pm
    if n > 0:
        weights[0] *= 0.5
    return weights


def build_samples(
    n: int,
    eta: float,
    discount: float,
    g,
    vectorized: bool = True,
    xp=np,
) -> np.ndarray:
    """Assemble the FFT input D * g(u_j) * exp(i*b*eta*j) * (3 + pm_j).

    Args:
        n: number of nodes
        eta: frequency step
        discount: discount factor applied to every sample
        g: damped integrand, see :func:`carrmadan.integrand.augment`
        vectorized: call ``g`` once on the array of all nodes. When False,
            ``g`` is called once per node with a Python complex, in index order.
        xp: array module (numpy or cupy)

    Returns:
        Complex array of length n.
    """
    u = frequency_nodes(n, eta, xp)
    if vectorized:
        values = to_backend(g(u), xp, dtype=xp.complex128)
    else:
        values = to_backend([g(complex(u_j)) for u_j in to_numpy(u)], xp, dtype=xp.complex128)

    b = max_log_strike(eta)
    phase = xp.exp(1j * (b * eta * xp.arange(n, dtype=xp.float64)))
    return discount * values * phase * simpson_weights(n, xp)


def transform(samples: np.ndarray, xp=np) -> np.ndarray:
    """Forward, unnormalised FFT of the samples.

    Sizes the FFT primitive does not support are reported by the primitive.
    """
    return xp.fft.fft(samples)
