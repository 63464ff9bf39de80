"""Test input normalization and problem construction."""

import numpy as np
import pytest

from spectrafit.core.domain.config import FitOptions
from spectrafit.core.domain.peaks import Peak
from spectrafit.core.fitting.builder import check_input, load_options
from spectrafit.core.fitting.parameters import ParameterKind, Quantity
from spectrafit.core.lineshapes import sum_of_gaussians, sum_of_pseudovoigts
from spectrafit.core.shared.exceptions import ConfigError, DataError


class TestCheckInput:
    def test_normalizes_data(self, simple_data):
        problem = check_input(simple_data, [{"x": 0, "y": 1, "width": 2}])
        np.testing.assert_allclose(problem.spectrum.x, simple_data["x"])
        np.testing.assert_allclose(problem.spectrum.y, [0.5, 1.0, 0.5])
        assert problem.max_y == 2.0

    def test_does_not_modify_caller_data(self, simple_data):
        check_input(simple_data, [{"x": 0, "y": 1, "width": 2}])
        assert simple_data["y"] == [1.0, 2.0, 1.0]

    def test_defaults_to_gaussian(self, simple_data):
        problem = check_input(simple_data, [{"x": 0, "y": 1, "width": 2}])
        assert problem.shape.name == "gaussian"
        assert problem.n_params == 3
        assert problem.model is sum_of_gaussians
        assert problem.method.name == "lm"
        assert problem.solver_options.max_iterations == 100
        assert problem.solver_options.initial_values is None

    def test_pseudovoigt(self, simple_data):
        options = {"shape": {"kind": "pseudovoigt"}}
        problem = check_input(simple_data, [{"x": 0, "y": 1, "width": 2}], options)
        assert problem.n_params == 4
        assert problem.model is sum_of_pseudovoigts

    def test_default_bounds(self, simple_data):
        problem = check_input(simple_data, [{"x": 0, "y": 1, "width": 2}])
        peak = problem.peaks[0]
        get = problem.resolver.get_value
        assert get(ParameterKind.X, peak, Quantity.MIN) == pytest.approx(-4.0)
        assert get(ParameterKind.X, peak, Quantity.MAX) == pytest.approx(4.0)
        assert get(ParameterKind.WIDTH, peak, Quantity.MIN) == pytest.approx(0.5)
        assert get(ParameterKind.WIDTH, peak, Quantity.MAX) == pytest.approx(8.0)
        assert get(ParameterKind.Y, peak, Quantity.INIT) == pytest.approx(0.5)

    def test_change_the_max_value_of_x_parameter(self, simple_data):
        peaks = [{"x": 0, "y": 1, "width": 2}]
        options = {
            "optimization": {
                "parameters": {"x": {"max": lambda peak: peak.x + peak.width * 0.1}}
            }
        }
        problem = check_input(simple_data, peaks, options)
        max_x = problem.options.optimization.parameters.x.max
        assert max_x(problem.peaks[0]) == 0.2
        assert problem.resolver.get_value(
            ParameterKind.X, problem.peaks[0], Quantity.MAX
        ) == pytest.approx(0.2)

    def test_peaks_are_copied(self, simple_data):
        peak = Peak(x=0, y=1, width=2)
        problem = check_input(simple_data, [peak])
        assert problem.peaks[0] is not peak
        assert problem.peaks[0] == peak


class TestCheckInputErrors:
    def test_unknown_shape(self, simple_data):
        with pytest.raises(ConfigError, match="shape"):
            check_input(simple_data, [{"x": 0, "y": 1, "width": 2}], {"shape": {"kind": "triangular"}})

    def test_unknown_method(self, simple_data):
        options = {"optimization": {"kind": "simplex"}}
        with pytest.raises(ConfigError, match="optimization kind"):
            check_input(simple_data, [{"x": 0, "y": 1, "width": 2}], options)

    def test_configuration_checked_before_data(self):
        """Configuration errors surface even when the data is invalid too."""
        with pytest.raises(ConfigError):
            check_input({"x": [1]}, [], {"shape": {"kind": "triangular"}})

    def test_unknown_option_key(self, simple_data):
        with pytest.raises(ConfigError):
            check_input(simple_data, [{"x": 0, "y": 1, "width": 2}], {"shapes": {}})

    def test_invalid_solver_option_before_bounds_are_resolved(self, simple_data):
        calls = []

        def max_x(peak):
            calls.append(peak)
            return peak.x + 1.0

        options = {
            "optimization": {"parameters": {"x": {"max": max_x}}, "options": {"bogus": 1}}
        }
        with pytest.raises(ConfigError, match="Invalid options"):
            check_input(simple_data, [{"x": 0, "y": 1, "width": 2}], options)
        assert calls == []

    def test_mismatched_lengths(self):
        with pytest.raises(DataError, match="same length"):
            check_input({"x": [0, 1, 2], "y": [1, 2]}, [{"x": 0, "y": 1, "width": 2}])

    def test_missing_y(self):
        with pytest.raises(DataError):
            check_input({"x": [0, 1, 2]}, [{"x": 0, "y": 1, "width": 2}])

    def test_zero_maximum(self):
        with pytest.raises(DataError, match="maximum is zero"):
            check_input({"x": [0, 1], "y": [0, 0]}, [{"x": 0, "y": 1, "width": 2}])

    def test_empty_peak_list(self, simple_data):
        with pytest.raises(DataError, match="empty"):
            check_input(simple_data, [])

    def test_malformed_peak(self, simple_data):
        with pytest.raises(DataError, match="index 1"):
            check_input(simple_data, [{"x": 0, "y": 1, "width": 2}, {"x": 0, "y": 1}])

    def test_zero_width_is_not_rejected(self, simple_data):
        problem = check_input(simple_data, [{"x": 0, "y": 1, "width": 0}])
        assert problem.peaks[0].width == 0


class TestLoadOptions:
    def test_none(self):
        assert load_options(None) == FitOptions()

    def test_instance_passthrough(self):
        options = FitOptions()
        assert load_options(options) is options

    def test_mapping(self):
        options = load_options({"optimization": {"kind": "trf", "max_factor_y": 2.0}})
        assert options.optimization.kind == "trf"
        assert options.optimization.max_factor_y == 2.0
        assert options.optimization.min_factor_width == 0.25
