"""
Plugin entry points: run a synthesizer against a host PluginApi.

Each plugin reads its inputs from ``api.theme``, escapes through ``api.e``,
and registers the resulting rules with the host. The synthesizers themselves
stay pure; these functions are the only place registration happens.
"""

from __future__ import annotations

import logging

from fundamentals.components.containers import synthesize_containers
from fundamentals.schemas.rule import rules_to_dict
from fundamentals.spacing.scale import ScaleBound, synthesize_step, warn_if_large

from .api import PluginApi

logger = logging.getLogger(__name__)


def containers(api: PluginApi, *, strict: bool = True) -> None:
    """Register one component per entry of the ``containers`` theme key.

    Breakpoints are resolved through ``screens.<name>``. Raises
    MissingBreakpoint in strict mode when one is undefined.
    """
    definitions = api.theme("containers", {}) or {}

    def screen(name: str) -> str | None:
        return api.theme(f"screens.{name}")

    for rule in synthesize_containers(definitions, screen, strict=strict):
        api.add_components(rule.to_dict())
    logger.debug("Registered %d container components", len(definitions))


def custom_spacing(api: PluginApi) -> None:
    """Register the spacing scale, one ``add_utilities`` call per step.

    The number of steps comes from ``spacing.MAX`` (default 150).
    """
    bound = ScaleBound.from_theme(api.theme)
    warn_if_large(bound)
    for step in bound.steps():
        api.add_utilities(rules_to_dict(synthesize_step(step, api.e)))
    logger.debug("Registered spacing utilities for steps 1..%d", bound.max_step)
