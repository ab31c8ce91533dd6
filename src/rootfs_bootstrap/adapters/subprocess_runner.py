"""Ejecución real (y en seco) de la herramienta de bootstrap.

Por qué un adaptador:
- Aísla `subprocess` del Core, que solo conoce `CommandRunner`.
- Garantiza que el proceso hijo siempre se espera (`with Popen(...)`), también
  si el proceso padre recibe una señal mientras el hijo corre.

La salida estándar y de error se heredan: lo que imprime `mmdebstrap` es la
salida observable del paso.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import Sequence

from rootfs_bootstrap.core.domain.errors import ToolNotExecutableError, ToolNotFoundError

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Ejecuta el comando de forma síncrona y devuelve su exit status."""

    def run(self, argv: Sequence[str]) -> int:
        args = list(argv)
        try:
            with subprocess.Popen(args) as process:
                returncode = process.wait()
        except FileNotFoundError as exc:
            raise ToolNotFoundError(args[0]) from exc
        except PermissionError as exc:
            raise ToolNotExecutableError(args[0]) from exc

        if returncode < 0:
            # Terminado por señal: mismo código que daría una shell.
            return 128 - returncode
        return returncode


class DryRunRunner:
    """No lanza nada: registra el comando y simula éxito."""

    def __init__(self) -> None:
        self.commands: list[list[str]] = []

    def run(self, argv: Sequence[str]) -> int:
        args = list(argv)
        self.commands.append(args)
        logger.debug("[dry-run] %s", shlex.join(args))
        return 0
