"""Deployment strategies — how purchases are spread across the horizon."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class DeploymentStrategy(str, Enum):
    """Temporal purchase policy.

    Unknown names resolve to ``PHASED`` instead of raising, so saved
    strategies with a stale value still load and compute.
    """

    IMMEDIATE = "immediate"
    PHASED = "phased"
    AGGRESSIVE = "aggressive"
    DEFERRED = "deferred"
    MANUAL = "manual"

    @classmethod
    def _missing_(cls, value: object) -> DeploymentStrategy:
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        logger.warning("Unknown deployment strategy %r, falling back to phased", value)
        return cls.PHASED


AUTOMATIC_STRATEGIES: tuple[DeploymentStrategy, ...] = (
    DeploymentStrategy.IMMEDIATE,
    DeploymentStrategy.PHASED,
    DeploymentStrategy.AGGRESSIVE,
    DeploymentStrategy.DEFERRED,
)
