"""Tests for sample assembly and the FFT stage."""

import numpy as np
import pytest

from carrmadan.integrand import augment
from carrmadan.transform import build_samples, frequency_nodes, simpson_weights, transform


class TestFrequencyNodes:

    def test_purely_imaginary(self):
        u = frequency_nodes(8, 0.25)
        np.testing.assert_array_equal(u.real, 0.0)
        np.testing.assert_allclose(u.imag, 0.25 * np.arange(8))


class TestSimpsonWeights:

    def test_pattern(self):
        np.testing.assert_array_equal(simpson_weights(6), [1.0, 4.0, 2.0, 4.0, 2.0, 4.0])

    def test_single_node_is_halved(self):
        np.testing.assert_array_equal(simpson_weights(1), [1.0])

    def test_empty(self):
        assert len(simpson_weights(0)) == 0

    def test_mean_weight_is_three(self):
        """Normalised by 3 the weights average to ~1 (Simpson rule)."""
        w = simpson_weights(1024)
        assert np.mean(w) / 3.0 == pytest.approx(1.0, abs=1e-3)


class TestBuildSamples:

    def test_explicit_formula(self, bs_cf):
        n, eta, alpha, disc = 8, 0.25, 1.5, 0.95
        g = augment(bs_cf, alpha)
        samples = build_samples(n, eta, disc, g)
        b = np.pi / eta
        for j in range(n):
            pm = -1.0 if j % 2 == 0 else 1.0
            expected = disc * g(1j * j * eta) * np.exp(1j * b * j * eta) * (3.0 + pm)
            if j == 0:
                expected *= 0.5
            assert samples[j] == pytest.approx(expected, rel=1e-12)

    def test_scalar_path_matches_vectorised(self, bs_cf):
        g = augment(bs_cf, 1.5)
        vec = build_samples(64, 0.25, 0.95, g, vectorized=True)
        loop = build_samples(64, 0.25, 0.95, g, vectorized=False)
        np.testing.assert_allclose(loop, vec, rtol=1e-12)

    def test_scalar_path_calls_once_per_node(self):
        nodes = []

        def g(u):
            nodes.append(u)
            return 1.0 + 0j

        build_samples(16, 0.25, 1.0, g, vectorized=False)
        assert len(nodes) == 16
        assert all(isinstance(u, complex) for u in nodes)
        assert nodes[5] == pytest.approx(1.25j)

    def test_discount_scales_linearly(self, bs_cf):
        g = augment(bs_cf, 1.5)
        full = build_samples(32, 0.25, 1.0, g)
        half = build_samples(32, 0.25, 0.5, g)
        np.testing.assert_allclose(half, 0.5 * full, rtol=1e-14)

    def test_length(self, bs_cf):
        assert build_samples(128, 0.25, 1.0, augment(bs_cf, 1.5)).shape == (128,)


class TestTransform:

    def test_forward_unnormalised(self):
        """Matches the DFT sum_j x_j exp(-2*pi*i*j*m/N) without scaling."""
        rng = np.random.default_rng(0)
        x = rng.standard_normal(16) + 1j * rng.standard_normal(16)
        j = np.arange(16)
        dft = np.exp(-2j * np.pi * np.outer(j, j) / 16) @ x
        np.testing.assert_allclose(transform(x), dft, atol=1e-12)

    def test_constant_input(self):
        out = transform(np.ones(8, dtype=complex))
        assert out[0] == pytest.approx(8.0)
        np.testing.assert_allclose(out[1:], 0.0, atol=1e-14)

    def test_single_point_is_identity(self):
        out = transform(np.array([2.0 + 1.0j]))
        assert out[0] == pytest.approx(2.0 + 1.0j)
