from __future__ import annotations

import logging

from multical.core.registry import SystemRegistry
from multical.systems.factory import make_system
from multical.systems.specs import ALL_SPECS

logger = logging.getLogger(__name__)


def build_registry() -> SystemRegistry:
    systems = {}
    for name, spec in ALL_SPECS.items():
        systems[name] = make_system(spec)
    logger.debug("registered calendar systems: %s", sorted(systems))
    return SystemRegistry(systems)
