"""
Unit tests for the bootstrap step and its process runners.
"""
import logging
import signal
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from rootfs_bootstrap.adapters import DryRunRunner, SubprocessRunner
from rootfs_bootstrap.core.config import BootstrapSettings
from rootfs_bootstrap.core.domain.architecture import Architecture
from rootfs_bootstrap.core.domain.errors import (
    ToolNotExecutableError,
    ToolNotFoundError,
    UnsupportedArchitectureError,
)
from rootfs_bootstrap.core.domain.models import RecipeParameters
from rootfs_bootstrap.core.interfaces.runner import CommandRunner
from rootfs_bootstrap.core.services import run_bootstrap_step

from conftest import RecordingRunner


def make_params(**kwargs):
    values = {"architecture": Architecture.ARM64, "suite": "bookworm", "root_dir": "/tmp/root"}
    values.update(kwargs)
    return RecipeParameters(**values)


class TestRunBootstrapStep:
    """Step orchestration over a CommandRunner."""

    def test_invokes_runner_once_with_plan(self, runner):
        status = run_bootstrap_step(make_params(), runner)
        assert status == 0
        assert runner.calls == [
            ["mmdebstrap", "--skip=check/qemu", "--architectures=arm64", "bookworm", "/tmp/root"]
        ]

    @pytest.mark.parametrize("status", [1, 2, 100, 255])
    def test_status_propagates_unmodified(self, status):
        runner = RecordingRunner(status=status)
        assert run_bootstrap_step(make_params(), runner) == status

    def test_unsupported_architecture_never_runs(self, runner, monkeypatch):
        monkeypatch.setenv("RUGIX_ARCH", "mips")
        monkeypatch.setenv("RECIPE_PARAM_SUITE", "bookworm")
        monkeypatch.setenv("RUGIX_ROOT_DIR", "/tmp/root")
        with pytest.raises(UnsupportedArchitectureError):
            run_bootstrap_step(BootstrapSettings().to_parameters(), runner)
        assert runner.calls == []

    def test_uses_configured_tool(self, runner):
        run_bootstrap_step(make_params(), runner, settings=BootstrapSettings(tool="mmdebstrap-test"))
        assert runner.calls[0][0] == "mmdebstrap-test"


class TestSubprocessRunner:
    """Real process execution, with Popen patched out."""

    def _popen(self, returncode):
        process = MagicMock()
        process.wait.return_value = returncode
        process.__enter__.return_value = process
        process.__exit__.return_value = False
        return process

    def test_implements_protocol(self):
        assert isinstance(SubprocessRunner(), CommandRunner)
        assert isinstance(DryRunRunner(), CommandRunner)

    def test_returns_exit_status(self):
        process = self._popen(3)
        with patch("rootfs_bootstrap.adapters.subprocess_runner.subprocess.Popen", return_value=process) as popen:
            assert SubprocessRunner().run(["mmdebstrap", "bookworm", "/tmp/root"]) == 3
        popen.assert_called_once_with(["mmdebstrap", "bookworm", "/tmp/root"])
        process.wait.assert_called_once()
        process.__exit__.assert_called_once()

    def test_signal_maps_to_shell_status(self):
        process = self._popen(-signal.SIGTERM)
        with patch("rootfs_bootstrap.adapters.subprocess_runner.subprocess.Popen", return_value=process):
            assert SubprocessRunner().run(["mmdebstrap"]) == 128 + signal.SIGTERM

    def test_missing_tool(self):
        with patch(
            "rootfs_bootstrap.adapters.subprocess_runner.subprocess.Popen",
            side_effect=FileNotFoundError("mmdebstrap"),
        ):
            with pytest.raises(ToolNotFoundError) as excinfo:
                SubprocessRunner().run(["mmdebstrap", "bookworm", "/tmp/root"])
        assert excinfo.value.exit_code == 127
        assert excinfo.value.tool == "mmdebstrap"

    def test_tool_without_execute_permission(self):
        with patch(
            "rootfs_bootstrap.adapters.subprocess_runner.subprocess.Popen",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            with pytest.raises(ToolNotExecutableError) as excinfo:
                SubprocessRunner().run(["/opt/mmdebstrap", "bookworm", "/tmp/root"])
        assert excinfo.value.exit_code == 126
        assert excinfo.value.tool == "/opt/mmdebstrap"

    def test_real_non_executable_file(self, tmp_path):
        script = tmp_path / "mmdebstrap"
        script.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        script.chmod(0o644)
        with pytest.raises(ToolNotExecutableError):
            SubprocessRunner().run([str(script), "bookworm", "/tmp/root"])

    def test_directory_as_tool(self, tmp_path):
        with pytest.raises(ToolNotExecutableError):
            SubprocessRunner().run([str(tmp_path), "bookworm", "/tmp/root"])

    def test_real_process_status(self):
        assert SubprocessRunner().run(["sh", "-c", "exit 7"]) == 7

    def test_does_not_capture_output(self, capfd):
        SubprocessRunner().run(["sh", "-c", "echo from-tool"])
        assert "from-tool" in capfd.readouterr().out


class TestDryRunRunner:
    """Dry runs record instead of spawning."""

    def test_records_and_succeeds(self):
        runner = DryRunRunner()
        with patch.object(subprocess, "Popen") as popen:
            assert run_bootstrap_step(make_params(mirror="http://m"), runner) == 0
        popen.assert_not_called()
        assert runner.commands[0][-1] == "deb [trusted=yes] http://m bookworm main"

    def test_command_logged_once_at_info(self, caplog):
        runner = DryRunRunner()
        with caplog.at_level(logging.INFO, logger="rootfs_bootstrap"):
            run_bootstrap_step(make_params(), runner)
        info_lines = [r for r in caplog.records if r.levelno == logging.INFO and "mmdebstrap" in r.getMessage()]
        assert len(info_lines) == 1
