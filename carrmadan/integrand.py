"""Damped Carr-Madan integrand.

The Fourier transform of an undamped call price in log-strike is not
integrable. Multiplying the call by exp(alpha*k) and transforming gives

    psi(v) = phi(v - (alpha+1)i) / (alpha^2 + alpha - v^2 + i(2alpha+1)v)

With characteristic functions written as cf(u) = E[exp(u*X)] and u = i*v,
the same expression reads

    g(u) = cf(u + alpha + 1) / (alpha^2 + alpha + u^2 + (2alpha+1)u)

which is what :func:`augment` builds. Discounting is applied by the caller.
"""

from __future__ import annotations

from typing import Callable

CharacteristicFunction = Callable[[complex], complex]


def damping_denominator(u, alpha: float):
    """alpha^2 + alpha + u^2 + (2alpha+1)u, evaluated elementwise."""
    return alpha * alpha + alpha + u * u + (2.0 * alpha + 1.0) * u


def augment(cf: CharacteristicFunction, alpha: float) -> CharacteristicFunction:
    """Wrap ``cf`` into the damped integrand for damping coefficient ``alpha``.

    The returned function evaluates ``cf`` once per call and keeps no state,
    so it can be evaluated at the frequency nodes in any order. Works on
    scalars, or on arrays when ``cf`` itself is vectorised. Non-finite
    values of ``cf`` pass straight through.
    """
    shift = alpha + 1.0

    def g(u):
        return cf(u + shift) / damping_denominator(u, alpha)

    return g
