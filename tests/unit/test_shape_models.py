"""Test composite shape models."""

import numpy as np
import pytest

from spectrafit.core.lineshapes import (
    gaussian,
    get_shape,
    list_shapes,
    lorentzian,
    pseudovoigt,
    sum_of_gaussians,
    sum_of_lorentzians,
    sum_of_pseudovoigts,
)
from spectrafit.core.shared.exceptions import ConfigError


class TestSumOfGaussians:
    def test_single_peak_maximum(self):
        """A single peak evaluated at its center equals the shape maximum."""
        model = sum_of_gaussians([0.0, 1.0, 1.0])
        assert model(0.0) == pytest.approx(gaussian(0.0, 1.0, 1.0)(0.0))
        assert model(0.0) == pytest.approx(1.0)

    def test_batched_layout(self):
        """Parameters are read as [x0, x1, y0, y1, w0, w1]."""
        p = [-1.0, 2.0, 3.0, 4.0, 0.5, 1.5]
        t = np.linspace(-3, 4, 50)
        expected = gaussian(-1.0, 3.0, 0.5)(t) + gaussian(2.0, 4.0, 1.5)(t)
        np.testing.assert_allclose(sum_of_gaussians(p)(t), expected)

    def test_closure_is_independent_of_input(self):
        """Mutating the vector after construction does not change the model."""
        p = np.array([0.0, 1.0, 1.0])
        model = sum_of_gaussians(p)
        before = model(0.3)
        p[:] = [5.0, 9.0, 9.0]
        assert model(0.3) == pytest.approx(before)

    def test_repeated_calls_are_stable(self):
        model = sum_of_gaussians([0.0, 1.0, 1.0])
        assert model(0.2) == model(0.2)


class TestSumOfLorentzians:
    def test_batched_layout(self):
        p = [0.0, 1.0, 2.0, 1.0, 1.0, 0.5]
        t = np.linspace(-2, 3, 30)
        expected = lorentzian(0.0, 2.0, 1.0)(t) + lorentzian(1.0, 1.0, 0.5)(t)
        np.testing.assert_allclose(sum_of_lorentzians(p)(t), expected)


class TestSumOfPseudoVoigts:
    def test_batched_layout(self):
        p = [0.0, 1.0, 2.0, 1.0, 1.0, 0.5, 0.2, 0.9]
        t = np.linspace(-2, 3, 30)
        expected = pseudovoigt(0.0, 2.0, 1.0, 0.2)(t) + pseudovoigt(1.0, 1.0, 0.5, 0.9)(t)
        np.testing.assert_allclose(sum_of_pseudovoigts(p)(t), expected)

    def test_mu_is_gaussian_fraction(self):
        """mu=1 reduces the blend to a Gaussian, mu=0 to a Lorentzian."""
        t = np.array([2.0])
        np.testing.assert_allclose(
            sum_of_pseudovoigts([0.0, 1.0, 2.0, 1.0])(t), gaussian(0.0, 1.0, 2.0)(t)
        )
        np.testing.assert_allclose(
            sum_of_pseudovoigts([0.0, 1.0, 2.0, 0.0])(t), lorentzian(0.0, 1.0, 2.0)(t)
        )


class TestShapeRegistry:
    def test_registered_shapes(self):
        assert list_shapes() == ["gaussian", "lorentzian", "pseudovoigt"]

    @pytest.mark.parametrize(
        ("name", "n_params"),
        [("gaussian", 3), ("Lorentzian", 3), ("pseudovoigt", 4), ("pvoigt", 4)],
    )
    def test_get_shape(self, name, n_params):
        assert get_shape(name).n_params == n_params

    def test_unknown_shape(self):
        with pytest.raises(ConfigError, match="not supported"):
            get_shape("triangular")

    @pytest.mark.parametrize(
        ("name", "peak"), [("gaussian", (0.3, 2.0, 0.7)), ("pseudovoigt", (0.3, 2.0, 0.7, 0.4))]
    )
    def test_peak_factory_matches_model(self, name, peak):
        """A one-peak composite model equals the registered single-peak factory."""
        shape = get_shape(name)
        t = np.linspace(-2, 2, 41)
        np.testing.assert_allclose(shape.model(list(peak))(t), shape.peak(*peak)(t))
