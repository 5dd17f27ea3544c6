import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from cartographer import create_app  # noqa: E402


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "structure: layout structure / invariant sweeps over many seeds")


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch):
    """Generation logs one info line per map; keep test output (and CLI JSON) clean."""
    monkeypatch.setenv("CARTOGRAPHER_LOG_LEVEL", "warn")
    monkeypatch.delenv("CARTOGRAPHER_LOG_JSON", raising=False)
    monkeypatch.delenv("CARTOGRAPHER_ENABLE_GENERATION_METRICS", raising=False)
    yield


@pytest.fixture()
def test_app(tmp_path):
    app = create_app({"TESTING": True, "MAP_MAX_ROOMS": 20, "MAP_MAX_GRID": 80})
    app.instance_path = str(tmp_path)
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()
