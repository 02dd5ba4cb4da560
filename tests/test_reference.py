"""Tests for the closed-form reference pricers."""

import numpy as np
import pytest

from carrmadan.reference import bs_call_price, merton_call_price


class TestBlackScholes:

    def test_known_call_value(self):
        """ATM S=K=100, T=1, r=5%, sigma=20% -> 10.4506."""
        assert bs_call_price(100.0, 100.0, 0.05, 1.0, 0.2) == pytest.approx(10.4506, abs=1e-4)

    def test_scalar_returns_float(self):
        assert isinstance(bs_call_price(100.0, 100.0, 0.05, 1.0, 0.2), float)

    def test_vectorised_over_strikes(self):
        strikes = np.array([80.0, 100.0, 120.0])
        prices = bs_call_price(100.0, strikes, 0.05, 1.0, 0.2)
        assert prices.shape == (3,)
        assert prices[1] == pytest.approx(bs_call_price(100.0, 100.0, 0.05, 1.0, 0.2))
        assert np.all(np.diff(prices) < 0)

    def test_tiny_strike_is_forward_intrinsic(self):
        assert bs_call_price(50.0, 1e-6, 0.05, 1.0, 0.3) == pytest.approx(50.0, abs=1e-5)

    def test_dividend_lowers_call(self):
        no_div = bs_call_price(100.0, 100.0, 0.05, 1.0, 0.2)
        div = bs_call_price(100.0, 100.0, 0.05, 1.0, 0.2, q=0.03)
        assert div < no_div


class TestMerton:

    def test_no_jumps_equals_black_scholes(self):
        m = merton_call_price(100.0, 100.0, 0.05, 1.0, 0.2, 0.0, -0.1, 0.2)
        assert m == pytest.approx(bs_call_price(100.0, 100.0, 0.05, 1.0, 0.2))

    def test_degenerate_jumps(self):
        """Jumps of size one (mu_j = sigma_j = 0) change nothing."""
        m = merton_call_price(100.0, 100.0, 0.05, 1.0, 0.2, 1.0, 0.0, 0.0)
        assert m == pytest.approx(bs_call_price(100.0, 100.0, 0.05, 1.0, 0.2), rel=1e-10)

    def test_jumps_raise_atm_price(self):
        m = merton_call_price(100.0, 100.0, 0.05, 1.0, 0.2, 0.5, -0.1, 0.2)
        assert m > bs_call_price(100.0, 100.0, 0.05, 1.0, 0.2)

    def test_bounds(self):
        strikes = np.array([60.0, 100.0, 140.0])
        prices = merton_call_price(100.0, strikes, 0.05, 1.0, 0.2, 0.5, -0.1, 0.2)
        assert np.all(prices >= np.maximum(100.0 - strikes * np.exp(-0.05), 0.0) - 1e-10)
        assert np.all(prices <= 100.0)
