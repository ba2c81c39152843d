"""
Pytest configuration and fixtures
"""
import os
import sys
from pathlib import Path

import pytest

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# Keep test runs deterministic regardless of a developer's .env
os.environ.setdefault("ENABLE_TRACING", "false")
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("LOG_FORMAT", "text")

from component_naming.models.application import Application


@pytest.fixture
def application_manifest():
    """Manifest of a two-component application that was never renamed"""
    return {
        "apiVersion": "core.oam.dev/v1beta1",
        "kind": "Application",
        "metadata": {"name": "test-app"},
        "spec": {
            "components": [
                {"name": "component1", "type": "test"},
                {"name": "component2", "type": "test"},
            ]
        },
    }


@pytest.fixture
def application(application_manifest) -> Application:
    return Application.model_validate(application_manifest)


@pytest.fixture(scope="function")
def client():
    """Create test client for the FastAPI app"""
    import importlib.util

    from fastapi.testclient import TestClient

    main_path = backend_dir / "main.py"
    spec = importlib.util.spec_from_file_location("main", main_path)
    main_module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(main_module)

    yield TestClient(main_module.app)
