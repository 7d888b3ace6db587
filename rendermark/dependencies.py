"""
Dependency injection functions for FastAPI routes.
"""

from fastapi import Request

from rendermark.config import settings
from rendermark.services.document_service import DocumentService


def get_document_service(request: Request) -> DocumentService:
    """
    Dependency: Get a document service for the current page.

    The configured document URL is resolved relative to the requested page,
    so the default "README.md" points at the raw document route.

    Args:
        request: FastAPI request

    Returns:
        DocumentService: Service bound to the configured document
    """
    return DocumentService(
        settings.DOCUMENT_URL,
        base_url=str(request.url),
        timeout=settings.FETCH_TIMEOUT,
    )
