"""Adaptadores concretos de `core.interfaces`.

Por qué un paquete:
- Agrupa las implementaciones que tocan el sistema (procesos, PATH).
- Cada runner implementa `core.interfaces.runner.CommandRunner`.
"""

from rootfs_bootstrap.adapters.subprocess_runner import DryRunRunner, SubprocessRunner

__all__ = [
    "DryRunRunner",
    "SubprocessRunner",
]
