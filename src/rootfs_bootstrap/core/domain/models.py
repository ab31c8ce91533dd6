"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a variables de entorno ni a subprocess.
- Los modelos son inmutables (`frozen=True`): se construyen una vez en el
  borde y se pasan a funciones puras.

Nota:
- Estos modelos describen *qué* se va a ejecutar, no *cómo* se ejecuta.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from rootfs_bootstrap.core.domain.architecture import Architecture


def _blank_to_none(value: object) -> object:
    if value == "":
        return None
    return value


class RecipeParameters(BaseModel):
    """Parámetros de la receta para un único bootstrap.

    Por qué existe:
    - Sustituye la configuración global vía entorno por un valor explícito e
      inmutable que las funciones de planificación reciben como argumento.
    """

    model_config = ConfigDict(frozen=True)

    architecture: Architecture = Field(
        ...,
        description="Arquitectura de destino según el sistema de build.",
    )
    suite: str = Field(
        ...,
        min_length=1,
        description="Suite/release Debian o Ubuntu (p.ej. 'bookworm').",
    )
    root_dir: str = Field(
        ...,
        min_length=1,
        description="Directorio raíz de salida, tal cual lo da el sistema de build.",
    )
    snapshot: str | None = Field(
        default=None,
        description="Identificador de snapshot (p.ej. '20240101T000000Z').",
    )
    mirror: str | None = Field(
        default=None,
        description="URL base de un mirror propio (ignorado si hay snapshot).",
    )

    @field_validator("snapshot", "mirror", mode="before")
    @classmethod
    def _empty_means_unset(cls, value: object) -> object:
        return _blank_to_none(value)


class BootstrapPlan(BaseModel):
    """Invocación completa de la herramienta de bootstrap, lista para ejecutar."""

    model_config = ConfigDict(frozen=True)

    tool: str = Field(
        default="mmdebstrap",
        min_length=1,
        description="Ejecutable de bootstrap.",
    )
    options: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Flags en orden determinista.",
    )
    suite: str = Field(..., min_length=1)
    root_dir: str = Field(..., min_length=1)
    target_mirror: str | None = Field(
        default=None,
        description="URL de snapshot o línea de fuente; ausente usa el mirror por defecto.",
    )

    def argv(self) -> list[str]:
        """Lista de argumentos; el mirror solo se añade si existe."""

        args = [self.tool, *self.options, self.suite, self.root_dir]
        if self.target_mirror:
            args.append(self.target_mirror)
        return args
