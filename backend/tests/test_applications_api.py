"""
API tests for application component renaming endpoints
"""
import json
import re

from component_naming.naming.contracts import ANNOTATION_COMPONENT_MAPPING


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["naming_policy"]["strategy"] == "prefix_application_name"


def test_health_reports_log_counts(client):
    from component_naming.core.logging_config import LoggingConfig

    LoggingConfig.reset_metrics()
    LoggingConfig.get_logger("component_naming.test").warning("disk almost full")

    counts = client.get("/health").json()["log_counts"]

    assert set(counts) == {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    assert counts["WARNING"] >= 1


def test_rename_endpoint(client, application_manifest):
    response = client.post("/api/applications/rename", json=application_manifest)

    assert response.status_code == 200
    data = response.json()
    assert data["modified"] is True
    assert data["mapping"] == {
        "component1": "test-app-component1",
        "component2": "test-app-component2",
    }
    components = [c["name"] for c in data["application"]["spec"]["components"]]
    assert components == ["test-app-component1", "test-app-component2"]
    annotation = data["application"]["metadata"]["annotations"][ANNOTATION_COMPONENT_MAPPING]
    assert json.loads(annotation) == data["mapping"]
    assert "X-Request-ID" in response.headers


def test_rename_endpoint_strategy_override(client, application_manifest):
    response = client.post(
        "/api/applications/rename",
        params={"strategy": "random_suffix"},
        json=application_manifest,
    )

    assert response.status_code == 200
    assert re.fullmatch(r"component1-[0-9a-f]{12}", response.json()["mapping"]["component1"])


def test_rename_endpoint_already_renamed(client, application_manifest):
    application_manifest["metadata"]["annotations"] = {ANNOTATION_COMPONENT_MAPPING: "{}"}

    response = client.post("/api/applications/rename", json=application_manifest)

    assert response.status_code == 200
    assert response.json() == {"modified": False, "mapping": {}, "application": None}


def test_rename_endpoint_rejects_duplicate_components(client, application_manifest):
    application_manifest["spec"]["components"].append({"name": "component1", "type": "test"})

    response = client.post("/api/applications/rename", json=application_manifest)

    assert response.status_code == 422


def test_component_mapping_endpoint(client, application_manifest):
    renamed = client.post("/api/applications/rename", json=application_manifest).json()["application"]

    response = client.post("/api/applications/component-mapping", json=renamed)

    assert response.status_code == 200
    assert response.json()["renamed"] is True
    assert response.json()["mapping"]["component2"] == "test-app-component2"


def test_component_mapping_endpoint_not_renamed(client, application_manifest):
    response = client.post("/api/applications/component-mapping", json=application_manifest)
    assert response.json() == {"renamed": False, "mapping": {}}


def test_component_mapping_endpoint_malformed_annotation(client, application_manifest):
    application_manifest["metadata"]["annotations"] = {ANNOTATION_COMPONENT_MAPPING: "not json"}

    response = client.post("/api/applications/component-mapping", json=application_manifest)

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["error_type"] == "MappingDecodeError"
    assert detail["application"] == "test-app"


def test_metrics_endpoint(client, application_manifest):
    client.post("/api/applications/rename", json=application_manifest)

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "component_rename_passes_total" in response.text
