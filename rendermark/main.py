"""
FastAPI Main Application - Rendermark
Fetches the project document and renders it as HTML into the page.
"""

import html
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from rendermark.api import document, render
from rendermark.config import settings
from rendermark.dependencies import get_document_service
from rendermark.errors import DocumentFetchError
from rendermark.services.document_service import DocumentService
from rendermark.utils.app_logger import logger
from rendermark.utils.markdown import markdown_to_html

PACKAGE_DIR = Path(__file__).resolve().parent


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager for the FastAPI application.
    Handles startup and shutdown events.
    """
    try:
        settings.validate_config()
    except ValueError as e:
        logger.config_validation_failed(str(e))
        raise

    logger.app_started()

    yield

    logger.info("Shutting down application")


# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Renders a markdown document as HTML",
    lifespan=lifespan,
    debug=settings.DEBUG,
)

# Mount static files
app.mount("/static", StaticFiles(directory=PACKAGE_DIR / "static"), name="static")

# Initialize templates
templates = Jinja2Templates(directory=PACKAGE_DIR / "templates")
templates.env.filters["markdown"] = markdown_to_html


# Include API routers
app.include_router(render.router, tags=["render"])
app.include_router(document.router, tags=["document"])


# ===== Root Routes =====


@app.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    documents: DocumentService = Depends(get_document_service),
):
    """
    Render the document into the page.
    If the fetch fails the markdown container is left empty.
    """
    content = ""
    status_code = 200

    try:
        rendered = await documents.render()
        content = rendered.html
    except DocumentFetchError:
        # Already logged by the service
        status_code = 502

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": settings.PAGE_TITLE,
            "content": content,
        },
        status_code=status_code,
    )


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.DEPLOYMENT_ENV,
    }


@app.get("/config")
async def config_info():
    """Configuration info endpoint (for debugging)"""
    return settings.get_deployment_info()


# ===== Error Handlers =====


@app.exception_handler(404)
async def not_found_handler(request: Request, exc):
    """Handle 404 errors"""
    # Routes raise HTTPException with their own detail; unmatched paths get "Not Found"
    detail = getattr(exc, "detail", None)
    message = detail if detail and detail != "Not Found" else "Page not found"

    # Check if it's an HTMX request
    if request.headers.get("HX-Request"):
        return HTMLResponse(f'<div class="error">{html.escape(message)}</div>', status_code=404)

    return templates.TemplateResponse(
        request,
        "base.html",
        {
            "title": settings.PAGE_TITLE,
            "error_message": message,
            "status_code": 404,
        },
        status_code=404,
    )


@app.exception_handler(500)
async def internal_error_handler(request: Request, exc):
    """Handle 500 errors"""
    logger.error(f"Unhandled error: {exc}", path=request.url.path)

    if request.headers.get("HX-Request"):
        return HTMLResponse(
            '<div class="error">Internal server error</div>', status_code=500
        )

    return templates.TemplateResponse(
        request,
        "base.html",
        {
            "title": settings.PAGE_TITLE,
            "error_message": "Internal server error",
            "status_code": 500,
        },
        status_code=500,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rendermark.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
