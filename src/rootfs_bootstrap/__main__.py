"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python -m rootfs_bootstrap` desde el sistema de build.
- Mantiene un entrypoint simple además del console script.
"""

from __future__ import annotations

from rootfs_bootstrap.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
