"""
Unit tests for architecture resolution.
"""
import pytest

from rootfs_bootstrap.core.domain.architecture import Architecture, resolve_debian_arch
from rootfs_bootstrap.core.domain.errors import UnsupportedArchitectureError


class TestResolveDebianArch:
    """Build-system tokens map onto Debian port names."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("amd64", "amd64"),
            ("arm64", "arm64"),
            ("armv7", "armhf"),
            ("arm", "armel"),
        ],
    )
    def test_supported_tokens(self, token, expected):
        assert resolve_debian_arch(token) == expected

    def test_accepts_parsed_value(self):
        assert resolve_debian_arch(Architecture.ARMV7) == "armhf"

    @pytest.mark.parametrize("token", ["mips", "ARM64", "armhf", "x86_64", "", " arm64"])
    def test_unsupported_tokens(self, token):
        with pytest.raises(UnsupportedArchitectureError) as excinfo:
            resolve_debian_arch(token)
        assert excinfo.value.arch == token
        assert excinfo.value.exit_code == 1

    def test_error_message_names_value(self):
        with pytest.raises(UnsupportedArchitectureError, match="Unsupported architecture 'mips'."):
            Architecture.parse("mips")

    def test_mapping_is_total(self):
        for arch in Architecture:
            assert arch.debian_arch
