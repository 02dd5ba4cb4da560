"""Simple benchmark runner: Carr-Madan FFT vs closed-form pricing per strike."""

from __future__ import annotations

import time

import numpy as np


def bench(func, *args, n_runs: int = 8, warmup: int = 2, **kwargs) -> dict[str, float]:
    """Measure average runtime in milliseconds."""
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(n_runs):
        t0 = time.perf_counter()
        func(*args, **kwargs)
        times.append((time.perf_counter() - t0) * 1000.0)

    return {
        "mean_ms": float(np.mean(times)),
        "std_ms": float(np.std(times)),
        "min_ms": float(np.min(times)),
    }


def _closed_form_loop(strikes, s0, r, t, sigma):
    from carrmadan.reference import bs_call_price

    return [bs_call_price(s0, k, r, t, sigma) for k in strikes]


def run_benchmarks() -> None:
    from carrmadan import black_scholes_cf, call_price, get_strikes

    r, sigma, t, s0 = 0.05, 0.3, 1.0, 50.0
    eta, alpha = 0.25, 1.5
    discount = float(np.exp(-r * t))
    cf = black_scholes_cf(r, sigma, t)

    results: dict[str, dict[str, float]] = {}
    for n in (128, 256, 512, 1024):
        strikes = get_strikes(eta, s0, n)
        results[f"carr madan N={n}"] = bench(
            call_price, n, eta, alpha, s0, discount, cf, vectorized=True
        )
        results[f"closed form N={n}"] = bench(
            _closed_form_loop, strikes, s0, r, t, sigma, n_runs=4
        )

    print("=" * 64)
    print("carrmadan Benchmarks")
    print("=" * 64)
    for name, stats in results.items():
        print(f"{name:24s}  {stats['mean_ms']:9.2f} ms  (+/- {stats['std_ms']:.2f})")

    speedup = results["closed form N=1024"]["mean_ms"] / max(results["carr madan N=1024"]["mean_ms"], 1e-12)
    print(f"\nSpeedup at N=1024: {speedup:.2f}x")


if __name__ == "__main__":
    run_benchmarks()
