"""Text reports for Carr-Madan pricing results."""

from __future__ import annotations

import numpy as np

from .analysis import max_abs_error
from .validation import PricingResult

_TOLERANCE = 1e-3


def _status_from_error(abs_error: float) -> str:
    return "OK" if abs_error < _TOLERANCE else "WARNING"


def result_to_report(result: PricingResult, reference=None) -> str:
    """Build a human-readable summary of a PricingResult.

    When ``reference`` (strikes -> exact prices) is given, the largest error
    on the middle half of the grid is reported as well.
    """
    config = result.config
    n_finite = int(np.count_nonzero(np.isfinite(result.prices)))

    lines = [
        "Carr-Madan Pricing Result",
        "=" * 46,
        f"Method:    {result.method_name}",
        f"N:         {config.N}",
        f"eta:       {config.eta}",
        f"alpha:     {config.alpha}",
        f"Log-strike step: {config.lam:.6f}",
        f"Max frequency:   {config.u_max:g}",
        f"Market:    S={result.market.S}, T={result.market.T}, r={result.market.r}",
        f"Strikes:   {result.strikes[0]:.6g} .. {result.strikes[-1]:.6g}",
        f"Finite:    {n_finite}/{len(result.prices)}",
    ]
    if reference is not None:
        error = max_abs_error(result, reference)
        lines += [
            "",
            f"Max abs error (central half): {error:.3e}",
            "",
            f"Status: {_status_from_error(error)}",
        ]
    return "\n".join(lines)
