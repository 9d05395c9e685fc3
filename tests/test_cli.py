"""Tests for the finpulse CLI."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from finpulse import __version__
from finpulse.cli.main import app
from finpulse.core.exceptions import ConfigurationError

runner = CliRunner()


class TestReportCommand:
    """Tests for 'finpulse report'."""

    def test_writes_dashboard(self, tmp_path: Path) -> None:
        """Test generating the HTML file for a range."""
        output = tmp_path / "out" / "dashboard.html"
        result = runner.invoke(app, ["report", "--range", "1Y", "--output", str(output)])
        assert result.exit_code == 0, result.output
        html = output.read_text(encoding="utf-8")
        assert 'class="time-button active" data-range="1Y"' in html
        assert "$162k" in html
        assert "Dashboard generated" in result.output

    def test_default_output_path(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test the reports_dir/dashboard-<range>.html default."""
        monkeypatch.setenv("FINPULSE_REPORTS_DIR", str(tmp_path))
        result = runner.invoke(app, ["report"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "dashboard-6M.html").exists()

    def test_dark_theme(self, tmp_path: Path) -> None:
        """Test the --theme option."""
        output = tmp_path / "dark.html"
        result = runner.invoke(app, ["report", "-o", str(output), "--theme", "dark"])
        assert result.exit_code == 0, result.output
        assert 'data-theme="dark"' in output.read_text(encoding="utf-8")

    def test_invalid_range(self, tmp_path: Path) -> None:
        """Test that an unknown range exits with an error."""
        output = tmp_path / "bad.html"
        result = runner.invoke(app, ["report", "-r", "5Y", "-o", str(output)])
        assert result.exit_code == 1
        assert "Unknown time range" in result.output
        assert not output.exists()


class TestStatsCommand:
    """Tests for 'finpulse stats'."""

    def test_default_range(self) -> None:
        """Test the 6M cards."""
        result = runner.invoke(app, ["stats"])
        assert result.exit_code == 0, result.output
        assert "Total Revenue" in result.output
        assert "$506k" in result.output

    def test_all_range(self) -> None:
        """Test the ALL cards."""
        result = runner.invoke(app, ["stats", "-r", "all"])
        assert result.exit_code == 0, result.output
        assert "19.5%" in result.output
        assert "$5.12M" in result.output

    def test_invalid_range(self) -> None:
        """Test that an unknown range exits with an error."""
        result = runner.invoke(app, ["stats", "-r", "nope"])
        assert result.exit_code == 1


class TestRangesCommand:
    """Tests for 'finpulse ranges'."""

    def test_lists_ranges(self) -> None:
        """Test that every key is listed and the default marked."""
        result = runner.invoke(app, ["ranges"])
        assert result.exit_code == 0, result.output
        for key in ("1M", "3M", "6M", "1Y", "ALL"):
            assert key in result.output
        assert "(default)" in result.output


class TestCheckCommand:
    """Tests for 'finpulse check'."""

    def test_reports_drift(self) -> None:
        """Test that mismatches are reported without failing."""
        result = runner.invoke(app, ["check"])
        assert result.exit_code == 0, result.output
        assert "$735k" in result.output
        assert "differ from the series" in result.output

    def test_single_range(self) -> None:
        """Test checking one range."""
        result = runner.invoke(app, ["check", "-r", "1Y"])
        assert result.exit_code == 0, result.output
        assert "$1.12M" in result.output

    def test_invalid_range(self) -> None:
        """Test that an unknown range exits with an error."""
        result = runner.invoke(app, ["check", "-r", "xx"])
        assert result.exit_code == 1


class TestGlobalOptions:
    """Tests for app-level options."""

    def test_version(self) -> None:
        """Test --version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that bad configuration stops the CLI."""
        monkeypatch.setenv("FINPULSE_LOG_LEVEL", "LOUD")
        result = runner.invoke(app, ["ranges"])
        assert result.exit_code == 1

    def test_invalid_config_with_verbose(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that bad configuration is reported when --verbose is given."""
        monkeypatch.setenv("FINPULSE_DEFAULT_RANGE", "2W")
        result = runner.invoke(app, ["-v", "ranges"])
        assert result.exit_code == 1
        assert not isinstance(result.exception, ConfigurationError)
        assert "Error:" in result.output


class TestErrorMessages:
    """Tests for error output of user-supplied values."""

    @pytest.mark.parametrize("command", ["stats", "report", "check"])
    def test_markup_in_range_is_printed_literally(self, command: str, tmp_path: Path) -> None:
        """Test that a range containing Rich markup is echoed, not parsed."""
        args = [command, "-r", "[/red]"]
        if command == "report":
            args += ["-o", str(tmp_path / "out.html")]
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert "Unknown time range '[/red]'" in result.output
