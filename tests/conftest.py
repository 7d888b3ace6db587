"""Shared pytest fixtures."""

from collections.abc import Callable, Iterator

import httpx
import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from rendermark.config import settings
from rendermark.dependencies import get_document_service
from rendermark.main import app
from rendermark.services.document_service import DocumentService

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def document_source() -> Callable[[Handler], None]:
    """Serve the page's document fetches from a handler instead of the network."""

    def _install(handler: Handler) -> None:
        async def _document_service(request: Request):
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                yield DocumentService(
                    settings.DOCUMENT_URL,
                    base_url=str(request.url),
                    client=client,
                )

        app.dependency_overrides[get_document_service] = _document_service

    return _install
