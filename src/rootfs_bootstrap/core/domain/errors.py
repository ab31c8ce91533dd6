"""Errors raised by the bootstrap step.

Only locally-detected failures are modelled here. A non-zero status from the
bootstrapping tool is not an exception: it is returned verbatim as the step's
exit status.
"""

from __future__ import annotations


class BootstrapError(Exception):
    """Base error for the step; carries the process exit code to use."""

    exit_code: int = 1


class UnsupportedArchitectureError(BootstrapError):
    """The target architecture has no Debian counterpart."""

    def __init__(self, arch: str) -> None:
        self.arch = arch
        super().__init__(f"Unsupported architecture '{arch}'.")


class MissingParameterError(BootstrapError):
    """A required recipe parameter is missing or invalid."""

    def __init__(self, names: list[str], detail: str | None = None) -> None:
        self.names = names
        message = "Missing or invalid recipe parameter(s): " + ", ".join(names)
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class ToolNotFoundError(BootstrapError):
    """The bootstrapping executable is not available."""

    exit_code = 127

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"Bootstrapping tool '{tool}' not found in PATH.")


class ToolNotExecutableError(BootstrapError):
    """The bootstrapping executable exists but cannot be executed."""

    exit_code = 126

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"Bootstrapping tool '{tool}' is not executable.")
