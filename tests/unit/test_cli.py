"""Unit tests for the command-line interface."""
import pytest
from click.testing import CliRunner

from mipmap1d.cli import cli


class TestCLI:
    """Test cases for the command-line interface."""

    def setup_method(self):
        """Set up test fixtures before each test method."""
        self.runner = CliRunner()

    def test_cli_help(self):
        """Test that the CLI shows help information."""
        result = self.runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'levels' in result.output
        assert 'run' in result.output

    def test_levels(self, sample_csv):
        """Test listing the levels of a CSV series."""
        result = self.runner.invoke(
            cli, ['levels', '--column', 'value', '--time-column', 'timestamp', str(sample_csv)]
        )
        assert result.exit_code == 0
        assert '5 points, 4 levels' in result.output
        assert 'level 0: 5 points' in result.output
        assert 'level 3: 1 points' in result.output
        assert 'level 4' not in result.output

    def test_levels_values(self, sample_csv):
        """Test printing level values."""
        result = self.runner.invoke(
            cli, ['levels', '-t', 'timestamp', '--values', str(sample_csv)]
        )
        assert result.exit_code == 0
        assert '[2, 4, 6, 8, 9]' in result.output
        assert '[3, 7, 9]' in result.output
        assert '[5, 9]' in result.output
        assert '[7]' in result.output

    def test_levels_max_points(self, sample_csv):
        result = self.runner.invoke(
            cli, ['levels', '-t', 'timestamp', '--max-points', '2', str(sample_csv)]
        )
        assert result.exit_code == 0
        assert 'level for 2 points: 2' in result.output

    def test_levels_invalid_max_points(self, sample_csv):
        result = self.runner.invoke(cli, ['levels', '--max-points', '0', str(sample_csv)])
        assert result.exit_code != 0

    def test_levels_missing_column(self, sample_csv):
        result = self.runner.invoke(cli, ['levels', '--column', 'nope', str(sample_csv)])
        assert result.exit_code == 1
        assert 'Column not found: nope' in result.output

    def test_levels_missing_file(self, tmp_path):
        result = self.runner.invoke(cli, ['levels', str(tmp_path / 'missing.csv')])
        assert result.exit_code != 0


class TestRunCommand:
    """Test the YAML-driven command."""

    def setup_method(self):
        self.runner = CliRunner()

    @pytest.fixture
    def config_file(self, tmp_path, sample_csv):
        path = tmp_path / "run.yaml"
        path.write_text(
            "dataset:\n"
            f"  path: {sample_csv.name}\n"
            "  value_col: value\n"
            "  time_col: timestamp\n"
            "pyramid:\n"
            "  max_points: 3\n"
        )
        return path

    def test_validate_only(self, config_file):
        result = self.runner.invoke(cli, ['run', '--validate-only', str(config_file)])
        assert result.exit_code == 0
        assert 'Configuration valid' in result.output
        assert 'Max points: 3' in result.output
        assert 'level 0' not in result.output

    def test_run(self, config_file):
        """Relative dataset paths resolve against the config file."""
        result = self.runner.invoke(cli, ['run', '--values', str(config_file)])
        assert result.exit_code == 0
        assert 'level 3: 1 points' in result.output
        assert '[3, 7, 9]' in result.output
        assert 'level for 3 points: 1' in result.output

    def test_invalid_config(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("pyramid:\n  max_points: 3\n")
        result = self.runner.invoke(cli, ['run', str(path)])
        assert result.exit_code == 1
        assert 'Configuration error' in result.output

    def test_numeric_logging_level(self, tmp_path, sample_csv):
        """A non-string logging level is reported, not raised."""
        path = tmp_path / "run.yaml"
        path.write_text(
            "dataset:\n"
            f"  path: {sample_csv.name}\n"
            "logging:\n"
            "  level: 10\n"
        )
        result = self.runner.invoke(cli, ['run', str(path)])
        assert result.exit_code == 1
        assert 'Configuration error' in result.output
        assert 'level must be one of' in result.output

    def test_missing_dataset(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("dataset:\n  path: nowhere.csv\n")
        result = self.runner.invoke(cli, ['run', str(path)])
        assert result.exit_code == 1
        assert 'not found' in result.output
