"""
Tests for the wonky command-line interface.
"""

from unittest.mock import patch

import pytest

from wonky.cli import EXAMPLE_CONFIG, WonkyCLI, create_parser, main


class TestConfigCommands:
    """Test `wonky config` subcommands"""

    @pytest.fixture
    def cli(self, tmp_path):
        """CLI whose default config lives in a temporary directory"""
        cli = WonkyCLI()
        cli.default_config = tmp_path / "wonky" / "config.yaml"
        return cli

    def test_show_config_path(self, cli, capsys):
        assert cli.show_config_path() == 0
        assert capsys.readouterr().out.strip() == str(cli.default_config)

    def test_validate_valid_config(self, cli, config_file, capsys):
        assert cli.validate_config(str(config_file)) == 0

        out = capsys.readouterr().out
        assert "Configuration is valid (3 widgets)" in out
        assert "looks good" in out

    def test_validate_reports_warnings(self, cli, tmp_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("widgets:\n  - type: separator\n    colour: red\n")

        assert cli.validate_config(str(config_path)) == 0

        out = capsys.readouterr().out
        assert "Warnings:" in out
        assert "colour" in out

    def test_validate_invalid_config(self, cli, tmp_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("widgets:\n  - type: gauge\n")

        assert cli.validate_config(str(config_path)) == 1

        out = capsys.readouterr().out
        assert "Validation FAILED" in out
        assert "unknown type 'gauge'" in out

    def test_validate_missing_default(self, cli, capsys):
        assert cli.validate_config() == 1
        assert "not found" in capsys.readouterr().out

    def test_init_writes_example(self, cli):
        assert cli.init_config() == 0
        assert cli.default_config.read_text(encoding="utf-8") == EXAMPLE_CONFIG

    def test_init_refuses_to_overwrite(self, cli, capsys):
        cli.default_config.parent.mkdir(parents=True)
        cli.default_config.write_text("widgets: []\n")

        assert cli.init_config() == 1
        assert cli.default_config.read_text() == "widgets: []\n"
        assert "--force" in capsys.readouterr().out

    def test_init_force(self, cli):
        cli.default_config.parent.mkdir(parents=True)
        cli.default_config.write_text("widgets: []\n")

        assert cli.init_config(force=True) == 0
        assert cli.default_config.read_text(encoding="utf-8") == EXAMPLE_CONFIG

    def test_example_config_validates(self, cli, capsys):
        cli.init_config()
        assert cli.validate_config() == 0
        assert "Warnings" not in capsys.readouterr().out


class TestRunCommand:
    """Test `wonky run` dispatch"""

    def test_run_forwards_options(self):
        with patch("wonky.cli.bar_main") as bar_main:
            code = main(["run", "bar.yaml", "--log-level", "DEBUG", "--log-file", "bar.log"])

        assert code == 0
        bar_main.assert_called_once_with(
            ["--log-level", "DEBUG", "--frame-interval", "0.1", "--log-file", "bar.log", "bar.yaml"]
        )

    def test_run_returns_exit_code(self):
        with patch("wonky.cli.bar_main", side_effect=SystemExit(1)):
            assert main(["run"]) == 1

    def test_run_non_integer_exit(self):
        with patch("wonky.cli.bar_main", side_effect=SystemExit("boom")):
            assert WonkyCLI().run_bar([]) == 1


class TestParser:
    """Test argument parsing"""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_config_without_subcommand(self, capsys):
        assert main(["config"]) == 1

    def test_run_defaults(self):
        args = create_parser().parse_args(["run"])
        assert args.config is None
        assert args.log_level == "WARNING"
        assert args.log_file is None
        assert args.frame_interval == 0.1

    def test_rejects_unknown_log_level(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["run", "--log-level", "LOUD"])
