"""The bootstrap step: resolve, plan, delegate, propagate.

The CLI delegates here so that the step can be driven from tests or another
entry-point with any `CommandRunner`. Printing stays out of this module; it
only logs.
"""

from __future__ import annotations

import logging
import shlex

from rootfs_bootstrap.core.config import BootstrapSettings
from rootfs_bootstrap.core.domain.models import BootstrapPlan, RecipeParameters
from rootfs_bootstrap.core.interfaces.runner import CommandRunner
from rootfs_bootstrap.core.services.bootstrap_plan import build_plan

logger = logging.getLogger(__name__)


def format_command(plan: BootstrapPlan) -> str:
    """Shell-quoted rendering of the plan, for logs and `plan` output."""

    return shlex.join(plan.argv())


def run_bootstrap_step(
    params: RecipeParameters,
    runner: CommandRunner,
    *,
    settings: BootstrapSettings | None = None,
) -> int:
    """Run one bootstrap and return the tool's exit status unmodified.

    Architecture resolution happens before the runner is touched, so an
    unsupported architecture never spawns a process.
    """

    plan = build_plan(params, settings=settings)
    logger.info("Running %s", format_command(plan))
    status = runner.run(plan.argv())
    if status != 0:
        logger.debug("%s exited with status %d", plan.tool, status)
    return status
