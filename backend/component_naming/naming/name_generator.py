"""
NameGenerator: derives a new component name from the old one.

Strategies are evaluated in priority order: application-name prefix, then
random hex suffix, then the unchanged name as a fallback for a policy that
selects neither.
"""

from __future__ import annotations

import random
from typing import Optional

from component_naming.core.logging_config import LoggingConfig
from component_naming.naming.contracts import (RANDOM_SUFFIX_LENGTH,
                                               NamingPolicy, NamingStrategy)

logger = LoggingConfig.get_logger(__name__)

# Seeded once per process from os.urandom; never reseeded per draw.
_default_rng = random.Random()


def default_rng() -> random.Random:
    return _default_rng


class NameGenerator:
    def __init__(
        self,
        policy: NamingPolicy,
        application_name: str,
        rng: Optional[random.Random] = None,
    ):
        self.policy = policy
        self.application_name = application_name
        self.rng = rng or default_rng()

    def generate(self, component_name: str) -> str:
        """Create a new name for a component based on the policy strategy."""
        if self.policy.strategy == NamingStrategy.PREFIX_APPLICATION_NAME:
            return self.add_application_name(component_name)
        if self.policy.strategy == NamingStrategy.RANDOM_SUFFIX:
            return self.add_random_suffix(component_name)
        logger.info(
            "no component naming strategy selected, keeping component name",
            extra={"application": self.application_name, "component": component_name},
        )
        return component_name

    def add_application_name(self, component_name: str) -> str:
        return f"{self.application_name}-{component_name}"

    def add_random_suffix(self, component_name: str) -> str:
        """Append random hex bytes, similar to Kubernetes pod naming."""
        suffix = self.rng.randbytes(RANDOM_SUFFIX_LENGTH).hex()
        return f"{component_name}-{suffix}"
