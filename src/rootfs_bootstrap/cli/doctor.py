"""Doctor command for environment diagnostics.

Read-only: nothing here creates files or spawns the bootstrapping tool.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import typer
from rich.markup import escape

from rootfs_bootstrap.cli.ui_components import build_checks_table
from rootfs_bootstrap.core.config import BootstrapSettings, load_settings
from rootfs_bootstrap.core.domain.architecture import Architecture
from rootfs_bootstrap.core.domain.errors import BootstrapError
from rootfs_bootstrap.logging import console, print_error, print_warning

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

ENV_VARS = (
    "RUGIX_ARCH",
    "RECIPE_PARAM_SUITE",
    "RUGIX_ROOT_DIR",
    "RECIPE_PARAM_SNAPSHOT",
    "RECIPE_PARAM_MIRROR",
    "ROOTFS_BOOTSTRAP_TOOL",
    "ROOTFS_BOOTSTRAP_SNAPSHOT_BASE_URL",
    "ROOTFS_BOOTSTRAP_GPGV_NOEXPKEYSIG",
    "ROOTFS_BOOTSTRAP_LOG_LEVEL",
)


def _check_tool(settings: BootstrapSettings) -> tuple[bool, str]:
    path = shutil.which(settings.tool)
    if path is None:
        return False, f"{settings.tool} not found in PATH"
    return True, path


def _check_arch(settings: BootstrapSettings) -> tuple[bool, str]:
    if settings.arch is None:
        return False, "RUGIX_ARCH is not set"
    try:
        arch = Architecture.parse(settings.arch)
    except BootstrapError as exc:
        return False, str(exc)
    return True, f"{arch.value} -> {arch.debian_arch}"


def _check_gpgv(settings: BootstrapSettings) -> tuple[bool, str]:
    """Only matters for snapshot builds; reported as optional otherwise."""

    if Path(settings.gpgv_noexpkeysig).is_file():
        return True, settings.gpgv_noexpkeysig
    return False, f"{settings.gpgv_noexpkeysig} missing"


def _check_root_dir(settings: BootstrapSettings) -> tuple[bool, str]:
    # mmdebstrap wants a missing or empty target directory
    if settings.root_dir is None:
        return False, "RUGIX_ROOT_DIR is not set"
    root = Path(settings.root_dir)
    if not root.exists():
        return True, f"{root} (will be created)"
    if not root.is_dir():
        return False, f"{root} is not a directory"
    if any(root.iterdir()):
        return False, f"{root} is not empty"
    return True, f"{root} (empty)"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = load_settings()
    except BootstrapError as exc:
        print_error(str(exc))
        raise typer.Exit(code=exc.exit_code)

    table = build_checks_table("rootfs-bootstrap doctor")
    failed = False

    ok, detail = _check_tool(settings)
    table.add_row("Bootstrap tool", "OK" if ok else "FAIL", escape(detail))
    failed = failed or not ok

    ok, detail = _check_arch(settings)
    table.add_row("Architecture", "OK" if ok else "FAIL", escape(detail))
    failed = failed or not ok

    table.add_row("Suite", "OK" if settings.suite else "FAIL", escape(settings.suite or "RECIPE_PARAM_SUITE is not set"))
    failed = failed or not settings.suite

    ok, detail = _check_root_dir(settings)
    table.add_row("Root dir", "OK" if ok else "FAIL", escape(detail))
    failed = failed or not ok

    ok, detail = _check_gpgv(settings)
    if settings.snapshot:
        table.add_row("gpgv (expired keys)", "OK" if ok else "FAIL", escape(detail))
        failed = failed or not ok
    else:
        table.add_row("gpgv (expired keys)", "OK" if ok else "OPTIONAL", escape(detail))

    console.print(table)

    if settings.snapshot and settings.mirror:
        print_warning("RECIPE_PARAM_SNAPSHOT is set, RECIPE_PARAM_MIRROR will be ignored.")

    if failed:
        raise typer.Exit(code=1)


@app.command(name="env")
def show_env() -> None:
    """Show the environment variables the step reads."""

    table = build_checks_table("Environment")
    for name in ENV_VARS:
        value = os.environ.get(name)
        if value:
            table.add_row(name, "SET", escape(value))
        else:
            table.add_row(name, "UNSET", "")
    console.print(table)
