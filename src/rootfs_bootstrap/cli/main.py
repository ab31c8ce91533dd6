"""CLI del paso de bootstrap (Typer).

Por qué la CLI es delgada:
- Solo traduce flags/entorno a `BootstrapSettings`, configura el logging y
  convierte errores del dominio en exit codes.
- Toda la decisión (arquitectura, mirror/snapshot) vive en `core.services`.

Exit codes:
- 0 éxito; 1 arquitectura no soportada o parámetro ausente; 126 herramienta
  no ejecutable; 127 herramienta no encontrada; cualquier otro valor es el
  status de `mmdebstrap` tal cual.
"""

from __future__ import annotations

import json
from typing import Optional

import typer

from rootfs_bootstrap.adapters import DryRunRunner, SubprocessRunner
from rootfs_bootstrap.cli import doctor
from rootfs_bootstrap.cli.ui_components import build_plan_table
from rootfs_bootstrap.core.config import BootstrapSettings, Verbosity, load_settings
from rootfs_bootstrap.core.domain.errors import BootstrapError
from rootfs_bootstrap.core.services import build_plan, format_command, run_bootstrap_step
from rootfs_bootstrap.logging import console, print_error, setup_logging

app = typer.Typer(
    no_args_is_help=True,
    help="Bootstrap a Debian-family root filesystem with mmdebstrap.",
)
app.add_typer(doctor.app, name="doctor")

ARCH_OPTION = typer.Option(None, "--arch", help="Target architecture (overrides RUGIX_ARCH).")
SUITE_OPTION = typer.Option(None, "--suite", help="Suite to bootstrap (overrides RECIPE_PARAM_SUITE).")
ROOT_DIR_OPTION = typer.Option(None, "--root-dir", help="Output root directory (overrides RUGIX_ROOT_DIR).")
SNAPSHOT_OPTION = typer.Option(None, "--snapshot", help="snapshot.debian.org id (overrides RECIPE_PARAM_SNAPSHOT).")
MIRROR_OPTION = typer.Option(None, "--mirror", help="Custom mirror URL (overrides RECIPE_PARAM_MIRROR).")


def _verbosity(settings: BootstrapSettings, verbose: bool, quiet: bool) -> Verbosity:
    if verbose:
        return "verbose"
    if quiet:
        return "quiet"
    return settings.log_level


def _fail(exc: BootstrapError) -> typer.Exit:
    print_error(str(exc))
    return typer.Exit(code=exc.exit_code)


@app.command(name="run")
def run_command(
    arch: Optional[str] = ARCH_OPTION,
    suite: Optional[str] = SUITE_OPTION,
    root_dir: Optional[str] = ROOT_DIR_OPTION,
    snapshot: Optional[str] = SNAPSHOT_OPTION,
    mirror: Optional[str] = MIRROR_OPTION,
    dry_run: bool = typer.Option(False, "--dry-run", help="Log the command without running it."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Errors only."),
) -> None:
    """Run the bootstrapping tool and exit with its status."""

    try:
        settings = load_settings(arch=arch, suite=suite, root_dir=root_dir, snapshot=snapshot, mirror=mirror)
        setup_logging(_verbosity(settings, verbose, quiet))
        params = settings.to_parameters()
        runner = DryRunRunner() if dry_run else SubprocessRunner()
        status = run_bootstrap_step(params, runner, settings=settings)
    except BootstrapError as exc:
        raise _fail(exc)

    raise typer.Exit(code=status)


@app.command(name="plan")
def plan_command(
    arch: Optional[str] = ARCH_OPTION,
    suite: Optional[str] = SUITE_OPTION,
    root_dir: Optional[str] = ROOT_DIR_OPTION,
    snapshot: Optional[str] = SNAPSHOT_OPTION,
    mirror: Optional[str] = MIRROR_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Print the plan as JSON on stdout."),
) -> None:
    """Show the invocation that `run` would execute."""

    try:
        settings = load_settings(arch=arch, suite=suite, root_dir=root_dir, snapshot=snapshot, mirror=mirror)
        setup_logging("quiet" if as_json else settings.log_level)
        params = settings.to_parameters()
        plan = build_plan(params, settings=settings)
    except BootstrapError as exc:
        raise _fail(exc)

    if as_json:
        payload = plan.model_dump(mode="json")
        payload["argv"] = plan.argv()
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True))
        return

    console.print(build_plan_table(params, plan))
    console.print(format_command(plan), markup=False, highlight=False, soft_wrap=True)


def run() -> None:
    app()
