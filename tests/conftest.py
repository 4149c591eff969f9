"""Shared test fixtures and configuration for halo_http tests."""

import os
import pytest
from typing import Callable, List

import httpx

from halo_http.core.config import HttpTemplateSettings
from halo_http.core.clients.http import HttpClientTemplate


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep HALO_* variables and stray .env files out of the tests."""
    for name in list(os.environ):
        if name.startswith("HALO_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def download_dir(tmp_path):
    """Create a directory for downloaded files."""
    path = tmp_path / "downloads"
    path.mkdir()
    return path


@pytest.fixture
def http_template_settings(download_dir):
    """Create HTTP template settings for testing."""
    return HttpTemplateSettings(download_dir=str(download_dir))


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def make_template(http_template_settings, recorded_requests) -> Callable[..., HttpClientTemplate]:
    """Build an HttpClientTemplate whose transport answers with ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], settings=None) -> HttpClientTemplate:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return HttpClientTemplate(
            settings or http_template_settings,
            transport=httpx.MockTransport(_record),
        )

    return _make
