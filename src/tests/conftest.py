"""Pytest configuration and shared fixtures."""

import os
import socket
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

# Set test logging before importing settings
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_FORMAT"] = "text"

from cluster_probe.config import get_settings  # noqa: E402
from cluster_probe.observability import setup_logging  # noqa: E402

WORKSPACE_ENV_VARS = (
    "DATABRICKS_HOST",
    "DATABRICKS_TOKEN",
    "CLUSTER_ID",
    "PROBE_TIMEOUT_SECONDS",
    "PROBE_SKIP_TLS_VERIFY",
)

PROXY_ENV_VARS = (
    "HTTP_PROXY",
    "HTTPS_PROXY",
    "ALL_PROXY",
    "http_proxy",
    "https_proxy",
    "all_proxy",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from the developer's workspace and proxy settings."""
    for name in WORKSPACE_ENV_VARS + PROXY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(os.path.dirname(__file__))
    get_settings.cache_clear()
    setup_logging()
    # setup_logging caches settings; tests set their own environment afterwards
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Build a recording transport that always returns the same response."""

    def factory(
        status_code: int = 200,
        json_body: Any = None,
        text: str | None = None,
    ) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json_body)

        return RecordingTransport(handler)

    return factory


@pytest.fixture
def silent_server() -> Generator[str, None, None]:
    """A local TCP listener that accepts connections and never answers."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(8)
    host, port = sock.getsockname()
    yield f"http://{host}:{port}"
    sock.close()


@pytest.fixture
def sample_cluster() -> dict[str, Any]:
    """One cluster as returned by GET /api/2.0/clusters/list."""
    return {
        "cluster_id": "123",
        "cluster_name": "dev",
        "state": "RUNNING",
        "spark_version": "14.3.x-scala2.12",
    }


@pytest.fixture
def sample_listing() -> dict[str, Any]:
    """A multi-cluster listing with extra fields the probe ignores."""
    return {
        "clusters": [
            {
                "cluster_id": "0101-120000-abc123",
                "cluster_name": "etl-shared",
                "state": "RUNNING",
                "spark_version": "14.3.x-scala2.12",
                "node_type_id": "Standard_DS3_v2",
                "num_workers": 4,
                "creator_user_name": "someone@example.com",
            },
            {
                "cluster_id": "0202-130000-def456",
                "cluster_name": "ml-gpu",
                "state": "TERMINATED",
                "spark_version": "15.4.x-gpu-ml-scala2.12",
                "autotermination_minutes": 60,
            },
            {
                "cluster_id": "0303-140000-ghi789",
                "cluster_name": "adhoc",
                "state": "PENDING",
                "spark_version": "13.3.x-scala2.12",
            },
        ]
    }


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (require a real workspace)"
    )
