"""
Tests for the ComponentRenamer rename pass
"""
import json
import random
import re

import pytest
from prometheus_client import REGISTRY

from component_naming.core.errors import MappingEncodeError, NameCollisionError
from component_naming.models.application import ApplicationComponent
from component_naming.naming.contracts import (ANNOTATION_COMPONENT_MAPPING,
                                               NamingPolicy, NamingStrategy)
from component_naming.naming.mapping_recorder import MappingRecorder
from component_naming.naming.renamer import ComponentRenamer, rename_components

PREFIX = NamingPolicy(strategy=NamingStrategy.PREFIX_APPLICATION_NAME)
SUFFIX = NamingPolicy(strategy=NamingStrategy.RANDOM_SUFFIX)


class ConstantRandom(random.Random):
    """Hands out the same bytes on every draw."""

    def randbytes(self, n):
        return b"\xab" * n


class FailingRecorder(MappingRecorder):
    def record(self, application, mapping):
        raise MappingEncodeError("boom", application=application.name)


def _passes(outcome):
    return REGISTRY.get_sample_value("component_rename_passes_total", {"outcome": outcome}) or 0.0


def test_prefix_scenario(application):
    result = ComponentRenamer(PREFIX).rename_all(application)

    assert result.modified is True
    renamed = result.application
    assert renamed.component_names() == ["test-app-component1", "test-app-component2"]
    assert ANNOTATION_COMPONENT_MAPPING in renamed.get_annotations()
    assert json.loads(renamed.get_annotations()[ANNOTATION_COMPONENT_MAPPING]) == {
        "component1": "test-app-component1",
        "component2": "test-app-component2",
    }
    assert result.mapping == {
        "component1": "test-app-component1",
        "component2": "test-app-component2",
    }


def test_mapping_is_complete(application):
    application.spec.components.append(ApplicationComponent(name="worker", type="task"))
    result = ComponentRenamer(SUFFIX).rename_all(application)

    renamed = result.application
    mapping = json.loads(renamed.get_annotations()[ANNOTATION_COMPONENT_MAPPING])
    assert len(renamed.spec.components) == len(application.spec.components)
    assert set(mapping.keys()) == set(application.component_names())
    assert set(mapping.values()) == set(renamed.component_names())


def test_suffix_scenario(application):
    result = ComponentRenamer(SUFFIX).rename_all(application)

    assert re.fullmatch(r"component1-[0-9a-f]{12}", result.mapping["component1"])
    assert re.fullmatch(r"component2-[0-9a-f]{12}", result.mapping["component2"])


def test_iteration_follows_component_order(application):
    result = ComponentRenamer(PREFIX).rename_all(application)
    assert list(result.mapping) == ["component1", "component2"]


def test_input_application_is_not_mutated(application):
    before = application.model_dump()
    ComponentRenamer(PREFIX).rename_all(application)
    assert application.model_dump() == before


def test_component_fields_are_preserved(application_manifest):
    from component_naming.models.application import Application

    application_manifest["spec"]["components"][0]["properties"] = {"image": "nginx"}
    application_manifest["spec"]["components"][0]["traits"] = [{"type": "scaler"}]
    result = ComponentRenamer(PREFIX).rename_all(Application.model_validate(application_manifest))

    component = result.application.to_manifest()["spec"]["components"][0]
    assert component["properties"] == {"image": "nginx"}
    assert component["traits"] == [{"type": "scaler"}]
    assert component["type"] == "test"


def test_already_renamed_is_a_no_op(application):
    application.set_annotation(ANNOTATION_COMPONENT_MAPPING, "anything")
    before = application.model_dump()

    result = ComponentRenamer(PREFIX).rename_all(application)

    assert result.modified is False
    assert result.application is None
    assert result.mapping == {}
    assert application.model_dump() == before


def test_second_pass_does_not_rename_again(application):
    renamer = ComponentRenamer(SUFFIX)
    first = renamer.rename_all(application)
    second = renamer.rename_all(first.application)

    assert second.modified is False
    assert first.application.component_names() == [
        first.mapping["component1"],
        first.mapping["component2"],
    ]


def test_disabled_policy_is_a_no_op(application):
    before = application.model_dump()
    result = ComponentRenamer(NamingPolicy(enabled=False)).rename_all(application)

    assert result.modified is False
    assert application.model_dump() == before


def test_fallback_strategy_records_identity_mapping(application):
    result = ComponentRenamer(NamingPolicy(strategy=NamingStrategy.NONE)).rename_all(application)

    assert result.modified is True
    assert result.application.component_names() == ["component1", "component2"]
    assert result.mapping == {"component1": "component1", "component2": "component2"}


def test_record_failure_propagates_and_leaves_input_intact(application):
    before = application.model_dump()
    before_failed = _passes("failed")

    with pytest.raises(MappingEncodeError):
        ComponentRenamer(PREFIX, recorder=FailingRecorder()).rename_all(application)

    assert application.model_dump() == before
    assert _passes("failed") == before_failed + 1


def test_collision_fails_after_max_attempts(application):
    # Unvalidated append, so two components share a name
    application.spec.components.append(ApplicationComponent(name="component1", type="test"))
    policy = NamingPolicy(strategy=NamingStrategy.RANDOM_SUFFIX, max_attempts=2)

    with pytest.raises(NameCollisionError) as exc_info:
        ComponentRenamer(policy, rng=ConstantRandom()).rename_all(application)

    assert exc_info.value.metadata["component"] == "component1"
    assert ANNOTATION_COMPONENT_MAPPING not in application.get_annotations()


def test_collision_is_retried_with_fresh_suffix(application):
    application.spec.components.append(ApplicationComponent(name="component1", type="test"))
    result = ComponentRenamer(SUFFIX, rng=random.Random(3)).rename_all(application)

    names = result.application.component_names()
    assert len(names) == len(set(names)) == 3


def test_renamed_pass_is_counted(application):
    before = _passes("renamed")
    ComponentRenamer(PREFIX).rename_all(application)
    assert _passes("renamed") == before + 1


def test_rename_components_uses_settings_policy(application):
    result = rename_components(application)
    assert result.modified is True
    assert result.application.component_names() == ["test-app-component1", "test-app-component2"]
