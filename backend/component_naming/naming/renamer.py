"""
ComponentRenamer: one rename pass over an application's components.

Role: gate on the mapping annotation, generate a new name for every component
in list order, then record the mapping once.

The pass works on a deep copy of the application. The caller's object is
never mutated, so a failed pass cannot leave a half-renamed application behind.
"""

from __future__ import annotations

import random
import time
from typing import Dict, Optional, Set

from component_naming.core.config import get_settings
from component_naming.core.errors import ComponentNamingError, NameCollisionError
from component_naming.core.logging_config import LoggingConfig
from component_naming.core.metrics import (component_name_collisions_total,
                                           component_rename_pass_duration_seconds,
                                           component_rename_passes_total,
                                           components_renamed_total)
from component_naming.core.tracing import get_tracer
from component_naming.models.application import Application
from component_naming.naming.contracts import NamingPolicy, RenameResult
from component_naming.naming.mapping_recorder import MappingRecorder
from component_naming.naming.name_generator import NameGenerator
from component_naming.naming.rename_guard import RenameGuard

logger = LoggingConfig.get_logger(__name__)
tracer = get_tracer(__name__)


class ComponentRenamer:
    def __init__(
        self,
        policy: NamingPolicy,
        rng: Optional[random.Random] = None,
        guard: Optional[RenameGuard] = None,
        recorder: Optional[MappingRecorder] = None,
    ):
        self.policy = policy
        self.rng = rng
        self.guard = guard or RenameGuard()
        self.recorder = recorder or MappingRecorder()

    def rename_all(self, application: Application) -> RenameResult:
        started = time.perf_counter()
        with tracer.start_as_current_span("component_naming.rename_all") as span:
            span.set_attribute("application.name", application.name)
            span.set_attribute("naming.strategy", self.policy.strategy.value)
            try:
                result = self._rename(application)
            except ComponentNamingError:
                self._observe("failed", started)
                raise
            if result.modified:
                outcome = "renamed"
            elif not self.policy.enabled:
                outcome = "disabled"
            else:
                outcome = "already_renamed"
            span.set_attribute("naming.outcome", outcome)
            self._observe(outcome, started)
            return result

    def _rename(self, application: Application) -> RenameResult:
        if not self.policy.enabled:
            logger.debug("component name randomization disabled", extra={"application": application.name})
            return RenameResult(application=None, modified=False)

        if not self.guard.evaluate(application):
            return RenameResult(application=None, modified=False)

        logger.info("randomizing component names", extra={"application": application.name})
        working = application.model_copy(deep=True)
        generator = NameGenerator(self.policy, working.name, rng=self.rng)

        mapping: Dict[str, str] = {}
        taken: Set[str] = set()
        for component in working.spec.components:
            new_name = self._unique_name(generator, component.name, taken, working.name)
            logger.info("renaming component", extra={"previous": component.name, "new_name": new_name})
            mapping[component.name] = new_name
            taken.add(new_name)
            component.name = new_name

        self.recorder.record(working, mapping)
        components_renamed_total.labels(strategy=self.policy.strategy.value).inc(len(mapping))
        return RenameResult(application=working, modified=True, mapping=mapping)

    def _unique_name(self, generator: NameGenerator, name: str, taken: Set[str], app_name: str) -> str:
        for attempt in range(1, self.policy.max_attempts + 1):
            candidate = generator.generate(name)
            if candidate not in taken:
                return candidate
            component_name_collisions_total.labels(strategy=self.policy.strategy.value).inc()
            logger.warning(
                "generated component name collides within pass",
                extra={"component": name, "candidate": candidate, "attempt": attempt},
            )
        raise NameCollisionError(
            f"could not generate a unique name for component {name!r} "
            f"after {self.policy.max_attempts} attempts",
            application=app_name,
            metadata={"component": name, "strategy": self.policy.strategy.value},
        )

    @staticmethod
    def _observe(outcome: str, started: float) -> None:
        component_rename_passes_total.labels(outcome=outcome).inc()
        component_rename_pass_duration_seconds.labels(outcome=outcome).observe(time.perf_counter() - started)


def rename_components(
    application: Application,
    policy: Optional[NamingPolicy] = None,
    rng: Optional[random.Random] = None,
) -> RenameResult:
    """Run a rename pass with the configured policy unless one is given."""
    if policy is None:
        policy = get_settings().naming_policy
    return ComponentRenamer(policy, rng=rng).rename_all(application)
