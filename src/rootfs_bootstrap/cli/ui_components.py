"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en `plan` y `doctor`.
"""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from rootfs_bootstrap.core.domain.models import BootstrapPlan, RecipeParameters


def build_plan_table(params: RecipeParameters, plan: BootstrapPlan) -> Table:
    """Crea una tabla Rich con la invocación que se va a lanzar."""

    table = Table(title="Bootstrap plan")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Architecture", f"{params.architecture.value} -> {params.architecture.debian_arch}")
    table.add_row("Suite", escape(plan.suite))
    table.add_row("Root dir", escape(plan.root_dir))
    table.add_row("Tool", escape(plan.tool))
    for option in plan.options:
        table.add_row("Option", escape(option))
    table.add_row("Target mirror", escape(plan.target_mirror or "(tool default)"))
    return table


def build_checks_table(title: str) -> Table:
    """Tabla vacía para checks de diagnóstico."""

    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
