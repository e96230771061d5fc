"""Shared pytest fixtures for the rendering and HTTP tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from docs_service import webapi
from docs_service.rendering import DocumentService


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """An empty documents directory; tests write README.md / GUIA.md as needed."""
    d = tmp_path / "docs"
    d.mkdir()
    return d


@pytest.fixture
def service(docs_dir: Path) -> DocumentService:
    return webapi.build_service(str(docs_dir))


@pytest.fixture
def client(service: DocumentService) -> Iterator[TestClient]:
    webapi.app.dependency_overrides[webapi.get_service] = lambda: service
    try:
        with TestClient(webapi.app) as c:
            yield c
    finally:
        webapi.app.dependency_overrides.clear()
