"""Tests for command execution utilities."""

import subprocess
import sys

import pytest

from localcerts.utils.cmd import quote_arg, run_cmd, set_show_commands


@pytest.fixture(autouse=True)
def restore_show_commands():
    yield
    set_show_commands(True)


class TestQuoteArg:
    """Test argument quoting for display."""

    def test_plain_argument(self):
        assert quote_arg("genrsa") == "genrsa"

    def test_subject_with_space(self):
        assert quote_arg("/CN=Root CA") == "'/CN=Root CA'"

    def test_single_quote_escaped(self):
        assert quote_arg("it's") == "'it'\\''s'"


class TestRunCmd:
    """Test run_cmd function."""

    def test_runs_in_cwd(self, tmp_path):
        result = run_cmd(
            [sys.executable, "-c", "import os; print(os.getcwd())"],
            cwd=tmp_path,
            capture_output=True,
            show=False,
        )
        assert result.stdout.strip() == str(tmp_path.resolve())

    def test_non_zero_exit_raises(self):
        with pytest.raises(subprocess.CalledProcessError):
            run_cmd([sys.executable, "-c", "raise SystemExit(2)"], capture_output=True, show=False)

    def test_command_echoed(self, capsys):
        set_show_commands(True)
        run_cmd([sys.executable, "-c", "pass"], capture_output=True)
        assert "$ " in capsys.readouterr().err

    def test_quiet_hides_command(self, capsys):
        set_show_commands(False)
        run_cmd([sys.executable, "-c", "pass"], capture_output=True)
        assert capsys.readouterr().err == ""
