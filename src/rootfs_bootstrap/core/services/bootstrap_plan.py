"""Option and mirror assembly for the bootstrapping tool.

Everything here is pure: given recipe parameters and the resolved Debian
architecture it returns the same options and target mirror every time, which
keeps the decision logic testable without a process environment.

Mirror selection is mutually exclusive and checked in this order:

1. snapshot: dated snapshot.debian.org archive, plus the two apt options
   that let an immutable historical archive verify today (its Release
   metadata has long passed Valid-Until and its signing keys may have
   expired). Package signatures themselves are still verified.
2. mirror: explicit `deb [trusted=yes] ...` source line, no key
   infrastructure assumed.
3. neither: the tool's built-in default mirror for the suite.

A snapshot always wins over a mirror when both are set.
"""

from __future__ import annotations

import logging

from rootfs_bootstrap.core.config import (
    DEFAULT_GPGV_NOEXPKEYSIG,
    DEFAULT_SNAPSHOT_BASE_URL,
    DEFAULT_TOOL,
    BootstrapSettings,
)
from rootfs_bootstrap.core.domain.architecture import resolve_debian_arch
from rootfs_bootstrap.core.domain.models import BootstrapPlan, RecipeParameters

logger = logging.getLogger(__name__)

SKIP_QEMU_CHECK = "--skip=check/qemu"
DISABLE_VALID_UNTIL = "--aptopt=Acquire::Check-Valid-Until=false"


def snapshot_url(snapshot: str, *, base_url: str = DEFAULT_SNAPSHOT_BASE_URL) -> str:
    """Canonical snapshot archive URL for `snapshot`."""

    return f"{base_url.rstrip('/')}/{snapshot}/"


def trusted_source_line(mirror: str, suite: str) -> str:
    """Source line accepting `mirror` without signature infrastructure."""

    return f"deb [trusted=yes] {mirror} {suite} main"


def assemble_options(
    params: RecipeParameters,
    debian_arch: str,
    *,
    snapshot_base_url: str = DEFAULT_SNAPSHOT_BASE_URL,
    gpgv_noexpkeysig: str = DEFAULT_GPGV_NOEXPKEYSIG,
) -> tuple[tuple[str, ...], str | None]:
    """Return `(options, target_mirror)` for one bootstrap."""

    options = [SKIP_QEMU_CHECK, f"--architectures={debian_arch}"]
    target_mirror: str | None = None

    if params.snapshot:
        if params.mirror:
            logger.warning(
                "Both snapshot '%s' and mirror '%s' set; using the snapshot.",
                params.snapshot,
                params.mirror,
            )
        target_mirror = snapshot_url(params.snapshot, base_url=snapshot_base_url)
        options.append(DISABLE_VALID_UNTIL)
        options.append(f"--aptopt=Apt::Key::gpgvcommand={gpgv_noexpkeysig}")
        logger.debug("Using snapshot archive %s", target_mirror)
    elif params.mirror:
        target_mirror = trusted_source_line(params.mirror, params.suite)
        logger.debug("Using custom mirror %s", params.mirror)
    else:
        logger.debug("Using the default mirror for suite '%s'", params.suite)

    return tuple(options), target_mirror


def build_plan(
    params: RecipeParameters,
    *,
    settings: BootstrapSettings | None = None,
) -> BootstrapPlan:
    """Resolve the architecture and assemble the full invocation."""

    debian_arch = resolve_debian_arch(params.architecture)
    tool = DEFAULT_TOOL
    snapshot_base_url = DEFAULT_SNAPSHOT_BASE_URL
    gpgv_noexpkeysig = DEFAULT_GPGV_NOEXPKEYSIG
    if settings is not None:
        tool = settings.tool
        snapshot_base_url = settings.snapshot_base_url
        gpgv_noexpkeysig = settings.gpgv_noexpkeysig

    options, target_mirror = assemble_options(
        params,
        debian_arch,
        snapshot_base_url=snapshot_base_url,
        gpgv_noexpkeysig=gpgv_noexpkeysig,
    )
    return BootstrapPlan(
        tool=tool,
        options=options,
        suite=params.suite,
        root_dir=params.root_dir,
        target_mirror=target_mirror,
    )
