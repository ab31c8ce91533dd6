"""Lanza `rootfs-bootstrap` desde un checkout, sin `pip install`.

Uso desde la raíz del repositorio:
- `python -m main run` (mismo entorno `RUGIX_*` / `RECIPE_PARAM_*` que el paso instalado)
- `python -m main plan --json`

Añade `src/` al `sys.path` antes de importar `rootfs_bootstrap`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from rootfs_bootstrap.cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
