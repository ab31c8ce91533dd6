"""Target architectures supported by the bootstrap step.

The build system names CPU architectures its own way (`armv7`, `arm`); the
bootstrapping tool expects Debian port names (`armhf`, `armel`). This module
is the single source of truth for that translation.
"""

from __future__ import annotations

from enum import Enum

from rootfs_bootstrap.core.domain.errors import UnsupportedArchitectureError


class Architecture(str, Enum):
    """Closed set of build-system architecture tokens."""

    AMD64 = "amd64"
    ARM64 = "arm64"
    ARMV7 = "armv7"
    ARM = "arm"

    @classmethod
    def parse(cls, value: str) -> "Architecture":
        """Exact, case-sensitive lookup; anything else is unsupported."""

        for member in cls:
            if member.value == value:
                return member
        raise UnsupportedArchitectureError(value)

    @property
    def debian_arch(self) -> str:
        """Debian port name used by the bootstrapping tool."""

        return _DEBIAN_ARCH[self]


_DEBIAN_ARCH: dict[Architecture, str] = {
    Architecture.AMD64: "amd64",
    Architecture.ARM64: "arm64",
    Architecture.ARMV7: "armhf",
    Architecture.ARM: "armel",
}


def resolve_debian_arch(arch: str | Architecture) -> str:
    """Resolve a raw token (or an already parsed value) to its Debian name."""

    if not isinstance(arch, Architecture):
        arch = Architecture.parse(arch)
    return arch.debian_arch
