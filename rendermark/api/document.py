"""
Document routes: serves the raw markdown source next to the page.
"""

import os

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from rendermark.config import settings

router = APIRouter()


@router.get(settings.DOCUMENT_ROUTE, include_in_schema=False)
async def get_document():
    """
    Serve the raw document so the default relative URL resolves.
    """
    if not os.path.isfile(settings.DOCUMENT_PATH):
        raise HTTPException(status_code=404, detail="Document not found")

    return FileResponse(
        path=settings.DOCUMENT_PATH,
        media_type="text/markdown; charset=utf-8",
    )
