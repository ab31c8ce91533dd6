"""Servicios del Core: planificación y ejecución del bootstrap."""

from rootfs_bootstrap.core.services.bootstrap_plan import assemble_options, build_plan
from rootfs_bootstrap.core.services.bootstrap_step import format_command, run_bootstrap_step

__all__ = [
    "assemble_options",
    "build_plan",
    "format_command",
    "run_bootstrap_step",
]
