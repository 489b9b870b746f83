"""Unit tests for utility functions (hexagen.utils).

Tests cover:
- run_command (success, failure, missing binary, timeout, env vars, capture=False)
- find_plugin / run_plugin
- setup_logging level resolution
- Rich output helpers
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from hexagen.utils import (
    PLUGIN_PREFIX,
    find_plugin,
    print_error,
    print_success,
    print_summary,
    print_warning,
    run_command,
    run_plugin,
    setup_logging,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    def test_success(self):
        returncode, stdout, stderr = run_command([sys.executable, "-c", "print('hello')"])
        assert returncode == 0
        assert stdout == "hello"
        assert stderr == ""

    @pytest.mark.unit
    def test_failure(self):
        returncode, _, stderr = run_command(
            [sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"]
        )
        assert returncode == 3
        assert stderr == "bad"

    @pytest.mark.unit
    def test_missing_binary(self):
        returncode, _, stderr = run_command(["hexagen-definitely-not-installed"])
        assert returncode == 127
        assert "not found" in stderr

    @pytest.mark.unit
    def test_timeout(self):
        returncode, _, stderr = run_command(
            [sys.executable, "-c", "import time; time.sleep(5)"], timeout=1
        )
        assert returncode == -1
        assert "timed out" in stderr

    @pytest.mark.unit
    def test_cwd_and_env(self, tmp_path: Path):
        returncode, stdout, _ = run_command(
            [sys.executable, "-c", "import os; print(os.getcwd()); print(os.environ['HX'])"],
            cwd=tmp_path,
            env={"HX": "42"},
        )
        assert returncode == 0
        cwd, value = stdout.splitlines()
        assert Path(cwd).resolve() == tmp_path.resolve()
        assert value == "42"

    @pytest.mark.unit
    def test_no_capture(self):
        returncode, stdout, stderr = run_command(
            [sys.executable, "-c", "pass"], capture=False
        )
        assert (returncode, stdout, stderr) == (0, "", "")


# ---------------------------------------------------------------------------
# Plugins
# ---------------------------------------------------------------------------


class TestPlugins:
    @pytest.mark.unit
    def test_find_plugin_uses_prefix(self):
        with patch("hexagen.utils.shutil.which", return_value="/bin/hexagen-docs") as which:
            assert find_plugin("docs") == "/bin/hexagen-docs"
        which.assert_called_once_with(PLUGIN_PREFIX + "docs")

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "-x", "a/b"])
    def test_find_plugin_rejects_names(self, name):
        with patch("hexagen.utils.shutil.which") as which:
            assert find_plugin(name) is None
        which.assert_not_called()

    @pytest.mark.unit
    def test_find_plugin_real_path(self, tmp_path: Path, monkeypatch):
        plugin = tmp_path / "hexagen-hello"
        plugin.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        plugin.chmod(0o755)
        monkeypatch.setenv("PATH", str(tmp_path))
        assert find_plugin("hello") == str(plugin)
        assert find_plugin("absent") is None

    @pytest.mark.unit
    def test_run_plugin_forwards_args(self):
        with patch("hexagen.utils.run_command", return_value=(4, "", "")) as run:
            assert run_plugin("/bin/hexagen-docs", ["--a", "b"]) == 4
        run.assert_called_once_with(
            ["/bin/hexagen-docs", "--a", "b"], timeout=None, capture=False
        )


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    @pytest.mark.unit
    def test_default_warning(self):
        setup_logging()
        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1

    @pytest.mark.unit
    def test_explicit_level(self):
        setup_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.unit
    def test_env_level(self, monkeypatch):
        monkeypatch.setenv("HEXAGEN_LOG_LEVEL", "INFO")
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.unit
    def test_bad_level_falls_back(self):
        setup_logging("LOUD")
        assert logging.getLogger().level == logging.WARNING


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    def test_success_goes_to_stdout(self, capsys):
        print_success("all [good]")
        out, err = capsys.readouterr()
        assert "all [good]" in out
        assert err == ""

    @pytest.mark.unit
    def test_error_and_warning_go_to_stderr(self, capsys):
        print_error("Error: boom")
        print_warning("Warning: meh")
        out, err = capsys.readouterr()
        assert out == ""
        assert "Error: boom" in err
        assert "Warning: meh" in err

    @pytest.mark.unit
    def test_summary_pairs_labels_with_values(self, capsys):
        print_summary({"Module": "acme", "Port": "[9090]"}, title="hexagen")
        out, err = capsys.readouterr()
        lines = [line.strip() for line in out.splitlines() if line.strip()]
        assert lines[0] == "hexagen"
        assert lines[1].split() == ["Module", "acme"]
        assert lines[2].split() == ["Port", "[9090]"]
        assert err == ""
