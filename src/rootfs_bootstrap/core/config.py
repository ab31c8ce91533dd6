"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El sistema de build fija los nombres (`RUGIX_*`, `RECIPE_PARAM_*`); los
  ajustes propios de esta herramienta usan el prefijo `ROOTFS_BOOTSTRAP_`.

Los parámetros obligatorios se cargan como opcionales y se validan en
`to_parameters()`, para poder combinarlos antes con los flags de la CLI.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rootfs_bootstrap.core.domain.architecture import Architecture
from rootfs_bootstrap.core.domain.errors import MissingParameterError
from rootfs_bootstrap.core.domain.models import RecipeParameters

DEFAULT_TOOL = "mmdebstrap"
DEFAULT_SNAPSHOT_BASE_URL = "https://snapshot.debian.org/archive/debian"
DEFAULT_GPGV_NOEXPKEYSIG = "/usr/libexec/mmdebstrap/gpgvnoexpkeysig"

Verbosity = Literal["quiet", "normal", "verbose"]


class BootstrapSettings(BaseSettings):
    """Configuración central del paso de bootstrap.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROOTFS_BOOTSTRAP_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    arch: str | None = Field(
        default=None,
        validation_alias="RUGIX_ARCH",
        description="Arquitectura de destino (amd64, arm64, armv7, arm).",
    )
    suite: str | None = Field(
        default=None,
        validation_alias="RECIPE_PARAM_SUITE",
        description="Suite/release a instalar.",
    )
    root_dir: str | None = Field(
        default=None,
        validation_alias="RUGIX_ROOT_DIR",
        description="Directorio raíz a poblar (se pasa sin normalizar).",
    )
    snapshot: str | None = Field(
        default=None,
        validation_alias="RECIPE_PARAM_SNAPSHOT",
        description="Snapshot fechado de snapshot.debian.org (tiene prioridad sobre mirror).",
    )
    mirror: str | None = Field(
        default=None,
        validation_alias="RECIPE_PARAM_MIRROR",
        description="URL de un mirror propio, aceptado como trusted=yes.",
    )

    tool: str = Field(
        default=DEFAULT_TOOL,
        min_length=1,
        description="Ejecutable de bootstrap.",
    )
    snapshot_base_url: str = Field(
        default=DEFAULT_SNAPSHOT_BASE_URL,
        min_length=8,
        description="Base del servicio de snapshots (sin barra final).",
    )
    gpgv_noexpkeysig: str = Field(
        default=DEFAULT_GPGV_NOEXPKEYSIG,
        min_length=1,
        description="gpgv que no rechaza claves expiradas (solo para snapshots).",
    )
    log_level: Verbosity = Field(
        default="normal",
        description="Verbosidad del log (quiet/normal/verbose).",
    )

    @field_validator("arch", "suite", "root_dir", "snapshot", "mirror", mode="before")
    @classmethod
    def _empty_means_unset(cls, value: object) -> object:
        # Solo la cadena vacía equivale a no definido, como `[ -n "$VAR" ]`.
        if value == "":
            return None
        return value

    def with_overrides(self, **overrides: object) -> "BootstrapSettings":
        """Devuelve una copia con los valores no nulos de `overrides` aplicados."""

        update = {key: value for key, value in overrides.items() if value is not None}
        if not update:
            return self
        data = self.model_dump()
        data.update(update)
        return type(self).model_validate(data)

    def to_parameters(self) -> RecipeParameters:
        """Convierte la configuración en parámetros inmutables de receta.

        Raises:
            UnsupportedArchitectureError: si `RUGIX_ARCH` no es soportada.
            MissingParameterError: si falta un parámetro obligatorio.
        """

        if self.arch is None:
            raise MissingParameterError(["RUGIX_ARCH"])
        architecture = Architecture.parse(self.arch)

        missing = []
        if self.suite is None:
            missing.append("RECIPE_PARAM_SUITE")
        if self.root_dir is None:
            missing.append("RUGIX_ROOT_DIR")
        if missing:
            raise MissingParameterError(missing)

        return RecipeParameters(
            architecture=architecture,
            suite=self.suite,
            root_dir=self.root_dir,
            snapshot=self.snapshot,
            mirror=self.mirror,
        )


def _invalid_fields(exc: ValidationError) -> list[str]:
    names: list[str] = []
    for error in exc.errors():
        loc = error.get("loc") or ("?",)
        name = str(loc[0])
        if name not in names:
            names.append(name)
    return names


def load_settings(**overrides: object) -> BootstrapSettings:
    """Lee el entorno y aplica los overrides de la CLI.

    Raises:
        MissingParameterError: si algún valor no supera la validación.
    """

    try:
        return BootstrapSettings().with_overrides(**overrides)
    except ValidationError as exc:
        raise MissingParameterError(
            _invalid_fields(exc),
            detail=exc.errors()[0].get("msg"),
        ) from exc
