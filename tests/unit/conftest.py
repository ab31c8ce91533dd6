"""
Pytest configuration for unit tests.

Every test starts from an environment without the build-system variables so
that the host running the suite cannot leak parameters into it.
"""
import pytest

from rootfs_bootstrap.cli.doctor import ENV_VARS


class RecordingRunner:
    """CommandRunner double that records argv and returns a fixed status."""

    def __init__(self, status=0):
        self.status = status
        self.calls = []

    def run(self, argv):
        self.calls.append(list(argv))
        return self.status


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def recipe_env(monkeypatch, tmp_path):
    """Minimal valid environment: arm64 / bookworm into tmp_path/root."""
    root = tmp_path / "root"
    monkeypatch.setenv("RUGIX_ARCH", "arm64")
    monkeypatch.setenv("RECIPE_PARAM_SUITE", "bookworm")
    monkeypatch.setenv("RUGIX_ROOT_DIR", str(root))
    return root


@pytest.fixture
def runner():
    return RecordingRunner()
