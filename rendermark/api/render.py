"""
Render API routes for converting markdown supplied by the client.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from rendermark.models.document import RenderRequest, RenderResponse
from rendermark.utils.markdown import markdown_to_fragments, markdown_to_html

router = APIRouter()
templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")

# Register markdown filter for this router's templates
templates.env.filters["markdown"] = markdown_to_html


@router.post("/api/render", response_model=RenderResponse)
async def render_markdown(render_request: RenderRequest):
    """
    Convert markdown to HTML.
    Returns both the joined HTML and the individual fragments.
    """
    fragments = markdown_to_fragments(render_request.markdown)
    return RenderResponse(html="\n".join(fragments), fragments=fragments)


@router.post("/api/render/html", response_class=HTMLResponse)
async def render_markdown_html(render_request: RenderRequest):
    """
    Convert markdown to HTML.
    HTMX: Returns the rendered HTML fragment for swapping into the page.
    """
    # Render through the component so the markdown filter does the conversion
    content_html = templates.get_template("components/markdown_content.html").render(
        source=render_request.markdown,
    )

    return HTMLResponse(content=content_html)
