"""Contrato de ejecución de comandos externos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el proceso real por un runner en seco o por un doble de
  test sin acoplar el Core a `subprocess`.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class CommandRunner(Protocol):
    """Contrato mínimo para ejecutar la herramienta de bootstrap.

    Reglas de diseño:
    - `run` es síncrono y bloqueante: el bootstrap es una única unidad de trabajo.
    - Devuelve el código de salida sin modificar.
    """

    def run(self, argv: Sequence[str]) -> int:
        """Ejecuta `argv` y devuelve su exit status."""

        ...
