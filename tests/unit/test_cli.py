"""Test CLI commands."""

import numpy as np
from typer.testing import CliRunner

from spectrafit.cli.app import app
from spectrafit.core.fitting.simulation import simulate_spectrum

runner = CliRunner()


def write_inputs(tmp_path):
    x = np.linspace(-1.0, 1.0, 201)
    y = simulate_spectrum(
        x, [{"x": -0.5, "y": 20.0, "width": 0.2}, {"x": 0.5, "y": 20.0, "width": 0.3}]
    )
    spectrum = tmp_path / "spectrum.csv"
    rows = "\n".join(f"{a:.12g},{b:.12g}" for a, b in zip(x, y, strict=True))
    spectrum.write_text(f"x,y\n{rows}\n")

    peaks = tmp_path / "peaks.csv"
    peaks.write_text("x,y,width\n-0.52,19.0,0.21\n0.52,18.0,0.28\n")
    return spectrum, peaks


class TestCLIHelp:
    """Tests for CLI help messages."""

    def test_main_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "fit" in result.stdout
        assert "init" in result.stdout

    def test_fit_help(self):
        result = runner.invoke(app, ["fit", "--help"])
        assert result.exit_code == 0
        assert "spectrum" in result.stdout.lower()
        assert "peaklist" in result.stdout.lower()
        assert "--shape" in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "spectrafit" in result.stdout


class TestInitCommand:
    """Tests for init command."""

    def test_init_creates_file(self, tmp_path):
        config_path = tmp_path / "test_config.toml"
        result = runner.invoke(app, ["init", str(config_path)])
        assert result.exit_code == 0
        assert config_path.exists()
        assert "[optimization]" in config_path.read_text()

    def test_init_no_overwrite_without_force(self, tmp_path):
        config_path = tmp_path / "existing.toml"
        config_path.write_text("# existing content")

        result = runner.invoke(app, ["init", str(config_path)])
        assert result.exit_code == 1
        assert config_path.read_text() == "# existing content"

    def test_init_shape_and_method(self, tmp_path):
        config_path = tmp_path / "pv.toml"
        result = runner.invoke(app, ["init", str(config_path), "-s", "pvoigt", "-m", "TRF"])
        assert result.exit_code == 0
        content = config_path.read_text()
        assert 'kind = "pseudovoigt"' in content
        assert 'kind = "trf"' in content

    def test_init_unknown_method(self, tmp_path):
        config_path = tmp_path / "bad.toml"
        result = runner.invoke(app, ["init", str(config_path), "--method", "simplex"])
        assert result.exit_code == 1
        assert not config_path.exists()

    def test_init_overwrite_with_force(self, tmp_path):
        config_path = tmp_path / "existing.toml"
        config_path.write_text("# existing content")

        result = runner.invoke(app, ["init", str(config_path), "--force"])
        assert result.exit_code == 0
        assert "[shape]" in config_path.read_text()


class TestFitCommand:
    """Tests for fit command."""

    def test_fit(self, tmp_path):
        spectrum, peaks = write_inputs(tmp_path)
        result = runner.invoke(app, ["fit", str(spectrum), str(peaks)])
        assert result.exit_code == 0, result.stdout
        assert "Iterations" in result.stdout

    def test_fit_with_config_and_log(self, tmp_path):
        spectrum, peaks = write_inputs(tmp_path)
        config = tmp_path / "spectrafit.toml"
        runner.invoke(app, ["init", str(config)])
        log_file = tmp_path / "fit.log"

        result = runner.invoke(
            app,
            [
                "fit", str(spectrum), str(peaks),
                "-c", str(config), "-m", "trf", "--log-file", str(log_file),
            ],
        )
        assert result.exit_code == 0, result.stdout
        assert "Fitted 2 gaussian peak(s) with 'trf'" in log_file.read_text()

    def test_fit_unknown_shape(self, tmp_path):
        spectrum, peaks = write_inputs(tmp_path)
        result = runner.invoke(app, ["fit", str(spectrum), str(peaks), "--shape", "triangular"])
        assert result.exit_code == 1

    def test_fit_missing_file(self, tmp_path):
        _, peaks = write_inputs(tmp_path)
        result = runner.invoke(app, ["fit", str(tmp_path / "nope.csv"), str(peaks)])
        assert result.exit_code != 0
